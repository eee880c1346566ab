"""Dry-run of the plugin against a build script.

Builds a project from the script, applies the plugin, evaluates the
project and renders the arguments each modified compile task would get.
"""

from pathlib import Path

from pydantic import ValidationError

from src.core.config.loader import ConfigLoader
from src.core.config.settings import PluginSettings, get_settings
from src.core.exceptions.errors import ConfigurationError
from src.core.logger.logger import get_logger
from src.host.dependencies import LocalArtifactResolver, Resolver
from src.host.project import Project
from src.host.tasks import CompileTask
from src.models.build_script import BuildScript
from src.models.integration import IntegrationReport, TaskIntegration
from src.plugin.agent import CheckerFrameworkAgent
from src.plugin.plugin import CheckerFrameworkPlugin, configure_from_script

logger = get_logger(__name__)


def load_build_script(path: Path, settings: PluginSettings | None = None) -> BuildScript:
    """Load and validate a YAML build script.

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid.
    """
    settings = settings or get_settings().plugin
    loader = ConfigLoader(path)
    loader.load()

    data = {
        "project": loader.get_section("project"),
        "checkerframework": loader.extension_block(settings.extension_name),
    }
    try:
        return BuildScript.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid build script: {path}",
            config_key=str(path),
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def plan_integration(
    script: BuildScript,
    settings: PluginSettings | None = None,
    resolver: Resolver | None = None,
) -> IntegrationReport:
    """Apply the plugin to a project built from ``script`` and render the result.

    Raises:
        TaskSelectionError: If the script names a task that cannot be modified.
    """
    settings = settings or get_settings().plugin
    if resolver is None:
        resolver = LocalArtifactResolver(settings.artifact_cache)
    project = Project.from_script(script, resolver=resolver)

    extension = CheckerFrameworkPlugin(settings).apply(project)
    configure_from_script(extension, script.checkerframework)
    project.evaluate()

    report = IntegrationReport(
        project=project.name,
        checkers=extension.get_checkers(),
        requested_tasks=extension.get_task_names(),
    )
    for task in project.tasks.with_type(CompileTask):
        for provider in task.compiler_argument_providers:
            if not isinstance(provider, CheckerFrameworkAgent):
                continue
            report.tasks.append(
                TaskIntegration(
                    task_name=task.name,
                    provider=provider.name,
                    arguments=provider.as_arguments(),
                    fingerprint=provider.fingerprint(),
                )
            )

    logger.debug(f"Planned {len(report.tasks)} integration(s) for '{project.name}'")
    return report
