"""Tests for the one-shot dependency provisioning hook."""

import pytest

from src.core.config.settings import PluginSettings
from src.core.exceptions.errors import DependencyResolutionError
from src.host.project import Project
from src.plugin.provisioning import CheckerDependencyListener, configure_dependencies


class TestCheckerDependencyListener:
    """Tests for CheckerDependencyListener."""

    def test_registers_listener_and_scope(self, project: Project, plugin_settings: PluginSettings) -> None:
        listener = configure_dependencies(project, plugin_settings)

        assert listener in project.listeners
        assert "annotationProcessor" in project.configurations

    def test_injects_before_first_resolution(self, project: Project, plugin_settings: PluginSettings) -> None:
        configure_dependencies(project, plugin_settings)
        scope = project.configurations.get_by_name("annotationProcessor")
        assert len(scope.dependencies) == 0

        files = scope.resolve()

        assert scope.dependencies.coordinates() == [
            "org.checkerframework:checker:2.+",
            "org.checkerframework:jdk8:2.+",
        ]
        assert [f.name for f in files] == ["checker-2.11.1.jar", "jdk8-2.11.1.jar"]

    def test_injects_exactly_once(self, project: Project, plugin_settings: PluginSettings) -> None:
        """Repeated resolutions neither re-inject nor fail."""
        listener = configure_dependencies(project, plugin_settings)
        scope = project.configurations.get_by_name("annotationProcessor")

        for _ in range(3):
            scope.resolve()

        assert scope.resolution_count == 3
        assert len(scope.dependencies) == 2
        assert listener not in project.listeners

    def test_ignores_other_scopes(self, project: Project, plugin_settings: PluginSettings) -> None:
        listener = configure_dependencies(project, plugin_settings)
        other = project.configurations.create("runtimeClasspath")

        other.resolve()

        assert len(other.dependencies) == 0
        assert listener in project.listeners
        assert len(project.configurations.get_by_name("annotationProcessor").dependencies) == 0

    def test_custom_scope_and_coordinates(self, project: Project, plugin_settings: PluginSettings) -> None:
        settings = plugin_settings.model_copy(
            update={
                "processor_scope": "checkerFramework",
                "dependency_coordinates": ["org.checkerframework:checker:2.1.0"],
            }
        )
        configure_dependencies(project, settings)
        scope = project.configurations.get_by_name("checkerFramework")

        scope.resolve()

        assert scope.dependencies.coordinates() == ["org.checkerframework:checker:2.1.0"]

    def test_other_listeners_still_notified(self, project: Project, plugin_settings: PluginSettings) -> None:
        """Self-removal during dispatch does not skip the next listener."""
        seen: list[str] = []

        class Recorder(CheckerDependencyListener):
            def before_resolve(self, dependencies) -> None:
                seen.append(dependencies.name)

        configure_dependencies(project, plugin_settings)
        project.listeners.add_listener(Recorder(project, "annotationProcessor", []))

        project.configurations.get_by_name("annotationProcessor").resolve()

        assert seen == ["annotationProcessor"]

    def test_unresolvable_coordinates_propagate(self, project: Project, plugin_settings: PluginSettings) -> None:
        settings = plugin_settings.model_copy(
            update={"dependency_coordinates": ["org.checkerframework:checker:9.+"]}
        )
        configure_dependencies(project, settings)

        with pytest.raises(DependencyResolutionError):
            project.configurations.get_by_name("annotationProcessor").resolve()
