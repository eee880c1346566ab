"""Data models module."""

from src.models.build_script import BuildScript, ExtensionBlock, ProjectBlock, TaskDeclaration
from src.models.integration import IntegrationReport, TaskIntegration

__all__ = [
    "BuildScript",
    "ExtensionBlock",
    "ProjectBlock",
    "TaskDeclaration",
    "IntegrationReport",
    "TaskIntegration",
]
