"""Plugin entry point."""

from src.core.config.settings import PluginSettings, get_settings
from src.core.logger.logger import get_logger
from src.host.project import Project
from src.models.build_script import ExtensionBlock
from src.plugin.extension import CheckerFrameworkExtension
from src.plugin.integrator import TaskIntegrator
from src.plugin.provisioning import configure_dependencies

logger = get_logger(__name__)


class CheckerFrameworkPlugin:
    """Wires the extension, the dependency hook and the task integrator."""

    def __init__(self, settings: PluginSettings | None = None) -> None:
        self.settings = settings or get_settings().plugin

    def apply(self, project: Project) -> CheckerFrameworkExtension:
        """Apply the plugin to ``project``.

        Tasks are selected once the project is evaluated, so the build
        script can configure the returned extension first.

        Returns:
            The extension registered on the project.
        """
        extension = project.extensions.create(
            self.settings.extension_name,
            CheckerFrameworkExtension,
            project,
            self.settings,
        )
        configure_dependencies(project, self.settings)

        integrator = TaskIntegrator(project, extension)
        project.after_evaluate(integrator.apply)

        logger.debug(f"Applied plugin to project '{project.name}'")
        return extension


def configure_from_script(extension: CheckerFrameworkExtension, block: ExtensionBlock) -> None:
    """Populate an extension from a build-script block.

    Explicit checkers come first, then bundled checkers by short name,
    then task names.
    """
    for checker in block.checkers:
        extension.add_checker(checker)
    for short_name in block.known_checkers:
        extension.add_known_checker(short_name)
    for task_name in block.tasks:
        extension.add_task(task_name)
