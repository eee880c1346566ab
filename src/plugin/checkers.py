"""Checkers bundled with the Checker Framework."""

from enum import Enum

from src.core.exceptions.errors import ConfigurationError


class KnownChecker(str, Enum):
    """Fully-qualified class names of the bundled checkers."""

    COMPILER_MESSAGES = "org.checkerframework.checker.compilermsgs.CompilerMessagesChecker"
    FENUM = "org.checkerframework.checker.fenum.FenumChecker"
    FORMATTER = "org.checkerframework.checker.formatter.FormatterChecker"
    GUI_EFFECT = "org.checkerframework.checker.guieffect.GuiEffectChecker"
    I18N = "org.checkerframework.checker.i18n.I18nChecker"
    I18N_FORMATTER = "org.checkerframework.checker.i18nformatter.I18nFormatterChecker"
    INDEX = "org.checkerframework.checker.index.IndexChecker"
    INITIALIZATION = "org.checkerframework.checker.initialization.InitializationChecker"
    INTERNING = "org.checkerframework.checker.interning.InterningChecker"
    LOCALIZABLE_KEY = "org.checkerframework.checker.i18n.LocalizableKeyChecker"
    LOCK = "org.checkerframework.checker.lock.LockChecker"
    NULLNESS = "org.checkerframework.checker.nullness.NullnessChecker"
    NULLNESS_RAWNESS = "org.checkerframework.checker.nullness.NullnessRawnessChecker"
    OPTIONAL = "org.checkerframework.checker.optional.OptionalChecker"
    PROPERTY_KEY = "org.checkerframework.checker.propkey.PropertyKeyChecker"
    REGEX = "org.checkerframework.checker.regex.RegexChecker"
    SIGNATURE = "org.checkerframework.checker.signature.SignatureChecker"
    SIGNEDNESS = "org.checkerframework.checker.signedness.SignednessChecker"
    TAINTING = "org.checkerframework.checker.tainting.TaintingChecker"
    UNITS = "org.checkerframework.checker.units.UnitsChecker"

    @property
    def short_name(self) -> str:
        """Build-script name of the checker, e.g. ``nullness``."""
        return self.name.lower()

    @classmethod
    def from_short_name(cls, short_name: str) -> "KnownChecker":
        """Look up a checker by its short name.

        Accepts ``gui_effect``, ``gui-effect`` and ``GUI_EFFECT``.

        Raises:
            ConfigurationError: If no bundled checker has that name.
        """
        key = short_name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ConfigurationError(
                f"Unknown checker: '{short_name}'",
                config_key="known_checkers",
                details={"known": [c.short_name for c in cls]},
            ) from None
