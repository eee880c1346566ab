"""Build script data models."""

from typing import Literal

from pydantic import BaseModel, Field


class TaskDeclaration(BaseModel):
    """A task declared by a build script."""

    name: str = Field(description="Unique task name")
    type: Literal["compile", "task"] = Field(
        default="compile",
        description="Task kind: 'compile' invokes the compiler",
    )


class ProjectBlock(BaseModel):
    """The ``project`` block of a build script."""

    name: str = Field(default="project", description="Project name")
    tasks: list[TaskDeclaration] = Field(
        default_factory=list,
        description="Tasks registered on the project, in order",
    )
    configurations: list[str] = Field(
        default_factory=list,
        description="Resolution scopes created up front",
    )


class ExtensionBlock(BaseModel):
    """The ``checkerframework`` block of a build script."""

    checkers: list[str] = Field(
        default_factory=list,
        description="Fully-qualified checker class names",
    )
    known_checkers: list[str] = Field(
        default_factory=list,
        description="Short names of bundled checkers, e.g. 'nullness'",
    )
    tasks: list[str] = Field(
        default_factory=list,
        description="Compile tasks to modify (empty = all compile tasks)",
    )


class BuildScript(BaseModel):
    """A parsed build script."""

    project: ProjectBlock = Field(default_factory=ProjectBlock)
    checkerframework: ExtensionBlock = Field(default_factory=ExtensionBlock)
