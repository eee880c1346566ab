"""Task registry of the reference build host.

Only what the plugin consumes is modelled: typed lookup, lookup by exact
name, and per-task lists of compiler argument providers that are rendered
when the task executes.
"""

import hashlib
import json
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, TypeVar

from src.core.exceptions.errors import HostError, UnknownTaskError
from src.core.logger.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound="Task")


class CommandLineArgumentProvider(ABC):
    """A deferred source of command-line arguments.

    The host calls ``as_arguments`` only when the owning task runs, and uses
    ``name`` plus ``fingerprint`` as the cache key of the provider.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identity of the provider."""

    @abstractmethod
    def as_arguments(self) -> list[str]:
        """Render the arguments from current state."""

    def fingerprint(self) -> str:
        """Digest of the provider inputs; defaults to the rendered arguments."""
        payload = json.dumps([self.name, self.as_arguments()])
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class Task:
    """A unit of work in the build."""

    kind = "task"

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class CompileTask(Task):
    """A task that invokes the compiler."""

    kind = "compile"

    def __init__(self, name: str, compiler_args: list[str] | None = None) -> None:
        super().__init__(name)
        self.compiler_args = list(compiler_args or [])
        self.compiler_argument_providers: list[CommandLineArgumentProvider] = []
        self.last_arguments: list[str] | None = None
        self._last_inputs: list[tuple[str, str]] | None = None

    def command_line(self) -> list[str]:
        """Render the full compiler argument list."""
        args = list(self.compiler_args)
        for provider in self.compiler_argument_providers:
            args.extend(provider.as_arguments())
        return args

    def input_fingerprints(self) -> list[tuple[str, str]]:
        return [(p.name, p.fingerprint()) for p in self.compiler_argument_providers]

    def is_up_to_date(self) -> bool:
        """Whether the provider inputs match those of the last execution."""
        return self._last_inputs is not None and self._last_inputs == self.input_fingerprints()

    def execute(self) -> bool:
        """Run the task unless it is up to date.

        Returns:
            True if the task ran, False if it was skipped as up to date.
        """
        if self.is_up_to_date():
            logger.debug(f"{self.name} is up to date")
            return False

        self.last_arguments = self.command_line()
        self._last_inputs = self.input_fingerprints()
        logger.info(f"Executing {self.name}: {' '.join(self.last_arguments)}")
        return True


class TaskContainer:
    """Registry of the tasks of one project, in registration order."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def register(self, task: T) -> T:
        if task.name in self._tasks:
            raise HostError(
                f"Cannot add task '{task.name}' as a task with that name already exists",
                details={"task_name": task.name},
            )
        self._tasks[task.name] = task
        return task

    def get_by_name(self, name: str) -> Task:
        """Look up a task by exact name.

        Raises:
            UnknownTaskError: If no task has that name.
        """
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTaskError(name, known=self.names()) from None

    def find_by_name(self, name: str) -> Task | None:
        return self._tasks.get(name)

    def with_type(self, task_type: type[T]) -> list[T]:
        return [t for t in self._tasks.values() if isinstance(t, task_type)]

    def names(self) -> list[str]:
        return list(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks.values()))

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: Any) -> bool:
        return name in self._tasks


TASK_TYPES: dict[str, type[Task]] = {
    "compile": CompileTask,
    "task": Task,
}
