"""In-memory build host.

Implements the narrow host interfaces the plugin consumes: a task
registry, named resolution scopes with resolution listeners, and an
extension container.
"""

from src.host.dependencies import (
    Configuration,
    ConfigurationContainer,
    Dependency,
    DependencyHandler,
    DependencyResolutionListener,
    DependencySet,
    ListenerManager,
    LocalArtifactResolver,
    ResolutionState,
    ResolvableDependencies,
)
from src.host.project import ExtensionContainer, Project
from src.host.tasks import CommandLineArgumentProvider, CompileTask, Task, TaskContainer

__all__ = [
    "CommandLineArgumentProvider",
    "CompileTask",
    "Configuration",
    "ConfigurationContainer",
    "Dependency",
    "DependencyHandler",
    "DependencyResolutionListener",
    "DependencySet",
    "ExtensionContainer",
    "ListenerManager",
    "LocalArtifactResolver",
    "Project",
    "ResolutionState",
    "ResolvableDependencies",
    "Task",
    "TaskContainer",
]
