"""Dependency scopes and resolution events of the reference build host.

A ``Configuration`` is a named resolution scope. Every call to ``resolve``
is one resolution pass that fires ``before_resolve`` and ``after_resolve``
on the project's listeners. ``get_files`` and ``as_path`` resolve only on
first use and reuse the files of the last pass afterwards. The dependency
set of a scope is frozen once its first resolution pass has started.
"""

import os
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from src.core.exceptions.errors import DependencyResolutionError, HostError
from src.core.logger.logger import get_logger

logger = get_logger(__name__)

_COORDINATE_PATTERN = re.compile(r"^(?P<group>[^:\s]+):(?P<name>[^:\s]+):(?P<version>[^:\s]+)$")


class Dependency(BaseModel):
    """A module dependency identified by ``group:name:version``."""

    model_config = ConfigDict(frozen=True)

    group: str = Field(..., description="Group id")
    name: str = Field(..., description="Artifact name")
    version: str = Field(..., description="Version, may be dynamic (e.g. 2.+)")

    @classmethod
    def parse(cls, coordinate: str) -> "Dependency":
        """Parse a ``group:name:version`` coordinate.

        Raises:
            DependencyResolutionError: If the coordinate is malformed.
        """
        match = _COORDINATE_PATTERN.match(coordinate.strip())
        if not match:
            raise DependencyResolutionError(
                f"Invalid dependency coordinate: '{coordinate}'",
                coordinate=coordinate,
            )
        return cls(**match.groupdict())

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    @property
    def is_dynamic(self) -> bool:
        return self.version.endswith("+")

    def __str__(self) -> str:
        return self.coordinate


class DependencySet:
    """Mutable, ordered set of dependencies owned by one configuration."""

    def __init__(self, owner: "Configuration") -> None:
        self._owner = owner
        self._items: list[Dependency] = []

    def add(self, dependency: Dependency) -> None:
        if self._owner.state is not ResolutionState.UNRESOLVED:
            raise HostError(
                f"Cannot change dependencies of configuration '{self._owner.name}' "
                "after it has been resolved",
                details={"scope": self._owner.name, "coordinate": dependency.coordinate},
            )
        if dependency not in self._items:
            self._items.append(dependency)

    def coordinates(self) -> list[str]:
        return [d.coordinate for d in self._items]

    def __iter__(self) -> Iterator[Dependency]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, dependency: object) -> bool:
        return dependency in self._items


class ResolutionState(str, Enum):
    """Lifecycle of a resolution scope."""

    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    RESOLVED = "resolved"


class ResolvableDependencies:
    """Event payload handed to resolution listeners."""

    def __init__(self, configuration: "Configuration") -> None:
        self.configuration = configuration

    @property
    def name(self) -> str:
        return self.configuration.name

    @property
    def dependencies(self) -> DependencySet:
        return self.configuration.dependencies


class DependencyResolutionListener(ABC):
    """Observer of resolution passes."""

    @abstractmethod
    def before_resolve(self, dependencies: ResolvableDependencies) -> None:
        """Called before a scope is resolved."""

    @abstractmethod
    def after_resolve(self, dependencies: ResolvableDependencies) -> None:
        """Called after a scope has been resolved."""


class ListenerManager:
    """Build-wide registry of resolution listeners.

    Dispatch iterates over a snapshot, so a listener may remove itself (or
    others) from inside its own callback.
    """

    def __init__(self) -> None:
        self._listeners: list[DependencyResolutionListener] = []

    def add_listener(self, listener: DependencyResolutionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: DependencyResolutionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def fire_before_resolve(self, dependencies: ResolvableDependencies) -> None:
        for listener in list(self._listeners):
            listener.before_resolve(dependencies)

    def fire_after_resolve(self, dependencies: ResolvableDependencies) -> None:
        for listener in list(self._listeners):
            listener.after_resolve(dependencies)

    def __iter__(self) -> Iterator[DependencyResolutionListener]:
        return iter(list(self._listeners))

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)


Resolver = Callable[[Dependency], Path]


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(p) for p in re.findall(r"\d+", version))


class LocalArtifactResolver:
    """Map dependencies to jar files in a local artifact cache.

    Layout: ``<cache>/<group>/<name>/<version>/<name>-<version>.jar``.
    Dynamic versions (``2.+``) pick the highest cached version with the same
    prefix. Without a cached match the literal version is used, unless the
    resolver is strict.
    """

    def __init__(self, cache_dir: Path, strict: bool = False) -> None:
        self.cache_dir = Path(cache_dir)
        self.strict = strict

    def __call__(self, dependency: Dependency) -> Path:
        module_dir = self.cache_dir / dependency.group / dependency.name
        version = dependency.version

        if dependency.is_dynamic:
            prefix = version[:-1]
            candidates = []
            if module_dir.is_dir():
                candidates = [
                    d.name for d in module_dir.iterdir() if d.is_dir() and d.name.startswith(prefix)
                ]
            if candidates:
                version = max(candidates, key=_version_key)
            elif self.strict:
                raise DependencyResolutionError(
                    f"Could not find any version that matches {dependency.coordinate}",
                    coordinate=dependency.coordinate,
                    details={"cache_dir": str(self.cache_dir)},
                )

        path = module_dir / version / f"{dependency.name}-{version}.jar"
        if self.strict and not path.exists():
            raise DependencyResolutionError(
                f"Could not resolve {dependency.coordinate}",
                coordinate=dependency.coordinate,
                details={"path": str(path)},
            )
        return path


class Configuration:
    """A named resolution scope."""

    def __init__(self, name: str, listeners: ListenerManager, resolver: Resolver) -> None:
        self.name = name
        self._listeners = listeners
        self._resolver = resolver
        self.state = ResolutionState.UNRESOLVED
        self.dependencies = DependencySet(self)
        self.resolution_count = 0
        self._files: list[Path] = []

    @property
    def incoming(self) -> ResolvableDependencies:
        return ResolvableDependencies(self)

    def resolve(self) -> list[Path]:
        """Run one resolution pass and return the resolved files.

        Resolver errors propagate to the caller unchanged.
        """
        incoming = self.incoming
        self._listeners.fire_before_resolve(incoming)

        if self.state is ResolutionState.UNRESOLVED:
            self.state = ResolutionState.RESOLVING
        logger.debug(f"Resolving configuration '{self.name}': {self.dependencies.coordinates()}")
        self._files = [self._resolver(dep) for dep in self.dependencies]
        self.state = ResolutionState.RESOLVED
        self.resolution_count += 1

        self._listeners.fire_after_resolve(incoming)
        return list(self._files)

    def get_files(self) -> list[Path]:
        """Return the resolved files, resolving the scope only on first use."""
        if self.state is not ResolutionState.RESOLVED:
            return self.resolve()
        return list(self._files)

    def as_path(self) -> str:
        """Join the resolved files with the platform path separator."""
        return os.pathsep.join(str(p) for p in self.get_files())

    def __repr__(self) -> str:
        return f"Configuration({self.name!r}, state={self.state.value})"


class ConfigurationContainer:
    """Named resolution scopes of one project."""

    def __init__(self, listeners: ListenerManager, resolver: Resolver) -> None:
        self._listeners = listeners
        self._resolver = resolver
        self._configurations: dict[str, Configuration] = {}

    def create(self, name: str) -> Configuration:
        if name in self._configurations:
            raise HostError(
                f"Cannot add a configuration with name '{name}' as one already exists",
                details={"scope": name},
            )
        configuration = Configuration(name, self._listeners, self._resolver)
        self._configurations[name] = configuration
        return configuration

    def maybe_create(self, name: str) -> Configuration:
        return self._configurations.get(name) or self.create(name)

    def get_by_name(self, name: str) -> Configuration:
        try:
            return self._configurations[name]
        except KeyError:
            raise HostError(
                f"Configuration with name '{name}' not found",
                details={"scope": name, "known": list(self._configurations)},
            ) from None

    def names(self) -> list[str]:
        return list(self._configurations)

    def __contains__(self, name: object) -> bool:
        return name in self._configurations


class DependencyHandler:
    """Factory for dependency objects."""

    def create(self, coordinate: str) -> Dependency:
        return Dependency.parse(coordinate)
