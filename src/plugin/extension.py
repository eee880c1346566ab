"""Build DSL of the Checker Framework plugin.

The extension is the single configuration object of one project. Build
scripts call its ``add_*`` methods while the project is configured; the
task integrator and every argument provider read it afterwards by
reference, so additions made before a task runs still reach that task.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from src.core.config.settings import PluginSettings, get_settings
from src.core.logger.logger import get_logger
from src.plugin.agent import CheckerFrameworkAgent
from src.plugin.checkers import KnownChecker

if TYPE_CHECKING:
    from src.host.project import Project
    from src.host.tasks import CompileTask

logger = get_logger(__name__)

CHECKER_SEPARATOR = ","


def _adds(checker: KnownChecker) -> Callable[["CheckerFrameworkExtension"], None]:
    def add(self: "CheckerFrameworkExtension") -> None:
        self.add_checker(checker.value)

    add.__doc__ = f"Add the {checker.value.rsplit('.', 1)[-1]}."
    return add


class CheckerFrameworkExtension:
    """Which checkers to run, and on which compile tasks."""

    def __init__(self, project: "Project", settings: PluginSettings | None = None) -> None:
        self.project = project
        self.settings = settings or get_settings().plugin
        self._checkers: list[str] = []
        self._tasks: list[str] = []

    def add_task(self, task_name: str) -> None:
        """Add a task to the list of compile tasks that run the checkers.

        When no task is added, every compile task of the project is modified.
        The name is not checked here; an unknown name fails when tasks are
        selected.

        Args:
            task_name: The name of the task to modify.
        """
        self._tasks.append(task_name)

    def add_checker(self, checker: str) -> None:
        """Add a checker to the list of checkers to run.

        Args:
            checker: Fully-qualified name of the checker, e.g.
                "org.checkerframework.checker.index.IndexChecker".
        """
        self._checkers.append(checker)

    def add_known_checker(self, short_name: str) -> None:
        """Add a bundled checker by its short name, e.g. ``"nullness"``."""
        self.add_checker(KnownChecker.from_short_name(short_name).value)

    def get_checkers(self) -> str:
        """Return the checkers joined by commas, in the order they were added.

        Returns an empty string when no checker was added.
        """
        return CHECKER_SEPARATOR.join(self._checkers)

    def get_task_names(self) -> list[str]:
        return list(self._tasks)

    def fingerprint(self) -> dict[str, str]:
        """Inputs that decide whether a modified task must run again."""
        return {"checkers": self.get_checkers()}

    def apply_to(self, task: "CompileTask") -> None:
        """Attach the checkers to ``task``.

        The arguments are rendered when the task runs, from the state of
        this extension at that moment.
        """
        logger.debug(f"Applying the Checker Framework to {task.name}")
        task.compiler_argument_providers.append(CheckerFrameworkAgent(self))

    add_compiler_messages_checker = _adds(KnownChecker.COMPILER_MESSAGES)
    add_fenum_checker = _adds(KnownChecker.FENUM)
    add_formatter_checker = _adds(KnownChecker.FORMATTER)
    add_gui_effect_checker = _adds(KnownChecker.GUI_EFFECT)
    add_i18n_checker = _adds(KnownChecker.I18N)
    add_i18n_formatter_checker = _adds(KnownChecker.I18N_FORMATTER)
    add_index_checker = _adds(KnownChecker.INDEX)
    add_initialization_checker = _adds(KnownChecker.INITIALIZATION)
    add_interning_checker = _adds(KnownChecker.INTERNING)
    add_localizable_key_checker = _adds(KnownChecker.LOCALIZABLE_KEY)
    add_lock_checker = _adds(KnownChecker.LOCK)
    add_nullness_checker = _adds(KnownChecker.NULLNESS)
    add_nullness_rawness_checker = _adds(KnownChecker.NULLNESS_RAWNESS)
    add_optional_checker = _adds(KnownChecker.OPTIONAL)
    add_property_key_checker = _adds(KnownChecker.PROPERTY_KEY)
    add_regex_checker = _adds(KnownChecker.REGEX)
    add_signature_checker = _adds(KnownChecker.SIGNATURE)
    add_signedness_checker = _adds(KnownChecker.SIGNEDNESS)
    add_tainting_checker = _adds(KnownChecker.TAINTING)
    add_units_checker = _adds(KnownChecker.UNITS)
