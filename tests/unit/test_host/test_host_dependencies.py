"""Tests for host resolution scopes."""

from pathlib import Path

import pytest

from src.core.exceptions.errors import DependencyResolutionError, HostError
from src.host.dependencies import (
    ConfigurationContainer,
    Dependency,
    DependencyResolutionListener,
    ListenerManager,
    LocalArtifactResolver,
    ResolutionState,
    ResolvableDependencies,
)


class RecordingListener(DependencyResolutionListener):
    """Listener that records the events it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def before_resolve(self, dependencies: ResolvableDependencies) -> None:
        self.events.append(("before", dependencies.name))

    def after_resolve(self, dependencies: ResolvableDependencies) -> None:
        self.events.append(("after", dependencies.name))


class TestDependency:
    """Tests for coordinate parsing."""

    def test_parse(self) -> None:
        dep = Dependency.parse("org.checkerframework:checker:2.+")

        assert dep.group == "org.checkerframework"
        assert dep.name == "checker"
        assert dep.version == "2.+"
        assert dep.is_dynamic
        assert str(dep) == "org.checkerframework:checker:2.+"

    @pytest.mark.parametrize("coordinate", ["", "checker", "org:checker", "a:b:c:d", "a b:c:d"])
    def test_parse_invalid(self, coordinate: str) -> None:
        with pytest.raises(DependencyResolutionError):
            Dependency.parse(coordinate)


class TestLocalArtifactResolver:
    """Tests for LocalArtifactResolver."""

    def test_dynamic_picks_highest_version(self, artifact_cache: Path) -> None:
        path = LocalArtifactResolver(artifact_cache)(Dependency.parse("org.checkerframework:jdk8:2.+"))
        assert path.name == "jdk8-2.11.1.jar"

    def test_fixed_version(self, artifact_cache: Path) -> None:
        path = LocalArtifactResolver(artifact_cache, strict=True)(
            Dependency.parse("org.checkerframework:checker:2.1.0")
        )
        assert path == artifact_cache / "org.checkerframework" / "checker" / "2.1.0" / "checker-2.1.0.jar"

    def test_lenient_keeps_literal_version(self, temp_dir: Path) -> None:
        path = LocalArtifactResolver(temp_dir)(Dependency.parse("org.checkerframework:checker:2.+"))
        assert path.name == "checker-2.+.jar"

    def test_strict_missing_artifact(self, artifact_cache: Path) -> None:
        with pytest.raises(DependencyResolutionError):
            LocalArtifactResolver(artifact_cache, strict=True)(
                Dependency.parse("org.checkerframework:checker:3.0.0")
            )


class TestConfiguration:
    """Tests for resolution passes."""

    @pytest.fixture
    def listeners(self) -> ListenerManager:
        return ListenerManager()

    @pytest.fixture
    def configurations(self, listeners: ListenerManager, artifact_cache: Path) -> ConfigurationContainer:
        return ConfigurationContainer(listeners, LocalArtifactResolver(artifact_cache, strict=True))

    def test_events_fire_on_every_pass(
        self, listeners: ListenerManager, configurations: ConfigurationContainer
    ) -> None:
        recorder = RecordingListener()
        listeners.add_listener(recorder)
        scope = configurations.create("annotationProcessor")

        scope.resolve()
        scope.resolve()

        assert recorder.events == [
            ("before", "annotationProcessor"),
            ("after", "annotationProcessor"),
        ] * 2

    def test_frozen_after_resolution(self, configurations: ConfigurationContainer) -> None:
        scope = configurations.create("annotationProcessor")
        scope.resolve()

        assert scope.state is ResolutionState.RESOLVED
        with pytest.raises(HostError):
            scope.dependencies.add(Dependency.parse("org.checkerframework:checker:2.+"))

    def test_as_path_joins_files(self, configurations: ConfigurationContainer, artifact_cache: Path) -> None:
        import os

        scope = configurations.create("annotationProcessor")
        scope.dependencies.add(Dependency.parse("org.checkerframework:checker:2.1.0"))
        scope.dependencies.add(Dependency.parse("org.checkerframework:jdk8:2.1.0"))

        parts = scope.as_path().split(os.pathsep)

        assert [Path(p).name for p in parts] == ["checker-2.1.0.jar", "jdk8-2.1.0.jar"]

    def test_get_files_resolves_on_first_use_only(
        self, listeners: ListenerManager, configurations: ConfigurationContainer
    ) -> None:
        recorder = RecordingListener()
        listeners.add_listener(recorder)
        scope = configurations.create("annotationProcessor")
        scope.dependencies.add(Dependency.parse("org.checkerframework:checker:2.1.0"))

        files = scope.get_files()
        assert scope.as_path() == str(files[0])
        assert scope.get_files() == files

        assert scope.resolution_count == 1
        assert recorder.events == [("before", "annotationProcessor"), ("after", "annotationProcessor")]

    def test_duplicate_dependency_added_once(self, configurations: ConfigurationContainer) -> None:
        scope = configurations.create("annotationProcessor")
        scope.dependencies.add(Dependency.parse("org.checkerframework:checker:2.1.0"))
        scope.dependencies.add(Dependency.parse("org.checkerframework:checker:2.1.0"))
        assert len(scope.dependencies) == 1

    def test_resolver_error_propagates(self, listeners: ListenerManager) -> None:
        def failing(dependency: Dependency) -> Path:
            raise DependencyResolutionError("offline", coordinate=dependency.coordinate)

        scope = ConfigurationContainer(listeners, failing).create("annotationProcessor")
        scope.dependencies.add(Dependency.parse("org.checkerframework:checker:2.+"))

        with pytest.raises(DependencyResolutionError, match="offline"):
            scope.resolve()

    def test_container_lookup(self, configurations: ConfigurationContainer) -> None:
        created = configurations.create("annotationProcessor")

        assert configurations.maybe_create("annotationProcessor") is created
        assert configurations.get_by_name("annotationProcessor") is created
        with pytest.raises(HostError):
            configurations.get_by_name("compileClasspath")
        with pytest.raises(HostError):
            configurations.create("annotationProcessor")


class TestListenerManager:
    """Tests for listener registration."""

    def test_add_is_idempotent(self) -> None:
        manager = ListenerManager()
        listener = RecordingListener()
        manager.add_listener(listener)
        manager.add_listener(listener)
        assert len(manager) == 1

    def test_remove_unknown_is_noop(self) -> None:
        manager = ListenerManager()
        manager.remove_listener(RecordingListener())
        assert len(manager) == 0
