"""Compiler argument provider that runs the configured checkers."""

import hashlib
import json
from typing import TYPE_CHECKING

from src.core.logger.logger import get_logger
from src.host.tasks import CommandLineArgumentProvider

if TYPE_CHECKING:
    from src.plugin.extension import CheckerFrameworkExtension

logger = get_logger(__name__)


class CheckerFrameworkAgent(CommandLineArgumentProvider):
    """Renders the checker flags of one compile task when it runs.

    The agent keeps a reference to the extension, not a copy of its
    contents, so every render sees the checkers added so far.
    """

    def __init__(self, extension: "CheckerFrameworkExtension") -> None:
        self._extension = extension

    @property
    def name(self) -> str:
        return self._extension.settings.agent_name

    @property
    def extension(self) -> "CheckerFrameworkExtension":
        """Nested input of the provider; a change here invalidates the task."""
        return self._extension

    def as_arguments(self) -> list[str]:
        """Render ``-processor <checkers> -Xbootclasspath/p:<path>``.

        An empty checker list still renders the processor flag, with an
        empty value.
        """
        settings = self._extension.settings
        checkers = self._extension.get_checkers()
        if not checkers:
            logger.debug(f"{self.name}: no checkers configured, processor flag is empty")

        scope = self._extension.project.configurations.get_by_name(settings.processor_scope)
        return [
            settings.processor_flag,
            checkers,
            f"{settings.classpath_flag}{scope.as_path()}",
        ]

    def fingerprint(self) -> str:
        payload = json.dumps(
            {"name": self.name, "extension": self._extension.fingerprint()},
            sort_keys=True,
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def __repr__(self) -> str:
        return f"CheckerFrameworkAgent(checkers={self._extension.get_checkers()!r})"
