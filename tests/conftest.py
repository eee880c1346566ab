"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from src.core.config.settings import PluginSettings
from src.host.dependencies import LocalArtifactResolver
from src.host.project import Project
from src.host.tasks import CompileTask, Task
from src.plugin.extension import CheckerFrameworkExtension


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def artifact_cache(temp_dir: Path) -> Path:
    """Create a local artifact cache holding two checker framework versions.

    Returns:
        Path to the cache root.
    """
    cache = temp_dir / "artifacts"
    for name in ("checker", "jdk8"):
        for version in ("2.1.0", "2.11.1"):
            jar_dir = cache / "org.checkerframework" / name / version
            jar_dir.mkdir(parents=True)
            (jar_dir / f"{name}-{version}.jar").write_bytes(b"")
    return cache


@pytest.fixture
def plugin_settings(artifact_cache: Path) -> PluginSettings:
    """Plugin settings pointing at the test artifact cache."""
    return PluginSettings(artifact_cache=artifact_cache)


@pytest.fixture
def project(artifact_cache: Path) -> Project:
    """A project with two compile tasks and one non-compile task."""
    project = Project("demo", resolver=LocalArtifactResolver(artifact_cache, strict=True))
    project.tasks.register(CompileTask("compileJava"))
    project.tasks.register(CompileTask("compileTestJava"))
    project.tasks.register(Task("javadoc"))
    return project


@pytest.fixture
def extension(project: Project, plugin_settings: PluginSettings) -> CheckerFrameworkExtension:
    """An extension bound to the test project, with the processor scope created."""
    project.configurations.maybe_create(plugin_settings.processor_scope)
    return CheckerFrameworkExtension(project, plugin_settings)
