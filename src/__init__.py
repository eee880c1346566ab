"""cfplugin - Checker Framework integration for compile tasks."""

__version__ = "0.1.0"
