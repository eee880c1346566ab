"""One-shot provisioning of the checker libraries.

The checker jars must be in the processor scope before that scope is
resolved for the first time, and must be added only once: the host
forbids changing a scope after its first resolution pass.
"""

from src.core.config.settings import PluginSettings
from src.core.logger.logger import get_logger
from src.host.dependencies import DependencyResolutionListener, ResolvableDependencies
from src.host.project import Project

logger = get_logger(__name__)


class CheckerDependencyListener(DependencyResolutionListener):
    """Adds the checker libraries on the first resolution of one scope.

    The listener unregisters itself right after injecting, so later
    resolution passes never see it.
    """

    def __init__(self, project: Project, scope: str, coordinates: list[str]) -> None:
        self.project = project
        self.scope = scope
        self.coordinates = list(coordinates)

    def before_resolve(self, dependencies: ResolvableDependencies) -> None:
        if dependencies.name != self.scope:
            return

        target = dependencies.dependencies
        for coordinate in self.coordinates:
            target.add(self.project.dependencies.create(coordinate))
        logger.debug(f"Added {', '.join(self.coordinates)} to '{self.scope}'")

        self.project.listeners.remove_listener(self)

    def after_resolve(self, dependencies: ResolvableDependencies) -> None:
        pass


def configure_dependencies(project: Project, settings: PluginSettings) -> CheckerDependencyListener:
    """Register the provisioning listener for the processor scope.

    The scope is created if the project does not have it yet.

    Returns:
        The registered listener.
    """
    project.configurations.maybe_create(settings.processor_scope)
    listener = CheckerDependencyListener(
        project,
        settings.processor_scope,
        settings.dependency_coordinates,
    )
    project.listeners.add_listener(listener)
    return listener
