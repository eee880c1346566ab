"""Project object of the reference build host."""

from collections.abc import Callable
from typing import Any, TypeVar

from src.core.exceptions.errors import HostError
from src.core.logger.logger import get_logger
from src.host.dependencies import (
    ConfigurationContainer,
    DependencyHandler,
    ListenerManager,
    LocalArtifactResolver,
    Resolver,
)
from src.host.tasks import TASK_TYPES, TaskContainer
from src.models.build_script import BuildScript

logger = get_logger(__name__)

E = TypeVar("E")


class ExtensionContainer:
    """Named DSL objects registered by plugins."""

    def __init__(self) -> None:
        self._extensions: dict[str, Any] = {}

    def create(self, name: str, extension_type: Callable[..., E], *args: Any) -> E:
        """Instantiate ``extension_type(*args)`` and register it as ``name``.

        Raises:
            HostError: If an extension with that name already exists.
        """
        if name in self._extensions:
            raise HostError(
                f"Cannot add extension with name '{name}', as there is an extension "
                "already registered with that name",
                details={"extension": name},
            )
        extension = extension_type(*args)
        self._extensions[name] = extension
        return extension

    def get_by_name(self, name: str) -> Any:
        try:
            return self._extensions[name]
        except KeyError:
            raise HostError(
                f"Extension with name '{name}' does not exist",
                details={"extension": name},
            ) from None

    def find_by_name(self, name: str) -> Any | None:
        return self._extensions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._extensions


class Project:
    """A build-configuration unit: tasks, scopes, listeners and extensions."""

    def __init__(self, name: str = "project", resolver: Resolver | None = None) -> None:
        if resolver is None:
            from src.core.config.settings import get_settings

            resolver = LocalArtifactResolver(get_settings().plugin.artifact_cache)

        self.name = name
        self.tasks = TaskContainer()
        self.listeners = ListenerManager()
        self.configurations = ConfigurationContainer(self.listeners, resolver)
        self.dependencies = DependencyHandler()
        self.extensions = ExtensionContainer()
        self.evaluated = False
        self._after_evaluate: list[Callable[[], None]] = []

    def after_evaluate(self, action: Callable[[], None]) -> None:
        """Run ``action`` once the build configuration is finished."""
        if self.evaluated:
            raise HostError(
                f"Project '{self.name}' has already been evaluated",
                details={"project": self.name},
            )
        self._after_evaluate.append(action)

    def evaluate(self) -> None:
        """Finish configuration and run the after-evaluate actions in order."""
        if self.evaluated:
            return
        self.evaluated = True
        logger.debug(f"Evaluating project '{self.name}'")
        for action in self._after_evaluate:
            action()

    @classmethod
    def from_script(cls, script: BuildScript, resolver: Resolver | None = None) -> "Project":
        """Build a project with the tasks and scopes a build script declares."""
        project = cls(script.project.name, resolver=resolver)
        for scope in script.project.configurations:
            project.configurations.maybe_create(scope)
        for declaration in script.project.tasks:
            task_type = TASK_TYPES[declaration.type]
            project.tasks.register(task_type(declaration.name))
        return project

    def __repr__(self) -> str:
        return f"Project({self.name!r})"
