"""Models describing the outcome of applying the plugin to a project."""

from typing import Any

from pydantic import BaseModel, Field


class TaskIntegration(BaseModel):
    """Arguments a compile task received from the plugin."""

    task_name: str = Field(description="Compile task name")
    provider: str = Field(description="Argument provider name")
    arguments: list[str] = Field(default_factory=list, description="Rendered arguments")
    fingerprint: str = Field(description="Cache key of the provider inputs")


class IntegrationReport(BaseModel):
    """Summary of one plugin application."""

    project: str = Field(description="Project name")
    checkers: str = Field(default="", description="Comma-joined checker identifiers")
    requested_tasks: list[str] = Field(
        default_factory=list,
        description="Task names from the extension (empty = all compile tasks)",
    )
    tasks: list[TaskIntegration] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump()
