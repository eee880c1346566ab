"""Checker Framework integration for compile tasks."""

from src.plugin.agent import CheckerFrameworkAgent
from src.plugin.checkers import KnownChecker
from src.plugin.extension import CheckerFrameworkExtension
from src.plugin.integrator import TaskIntegrator
from src.plugin.plugin import CheckerFrameworkPlugin, configure_from_script
from src.plugin.planner import load_build_script, plan_integration
from src.plugin.provisioning import CheckerDependencyListener, configure_dependencies

__all__ = [
    "CheckerDependencyListener",
    "CheckerFrameworkAgent",
    "CheckerFrameworkExtension",
    "CheckerFrameworkPlugin",
    "KnownChecker",
    "TaskIntegrator",
    "configure_dependencies",
    "configure_from_script",
    "load_build_script",
    "plan_integration",
]
