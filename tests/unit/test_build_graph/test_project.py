"""Tests for projects, plugins, tasks and the evaluation barrier."""

import pytest

from src.build_graph.project import Build
from src.build_graph.tasks import CompileTask, JavaCompile, Task
from src.core.exceptions.errors import BuildGraphError


class RecordingPlugin:
    """Plugin that records the projects it is applied to."""

    id = "com.example.recording"

    def __init__(self) -> None:
        self.applied_to: list[str] = []

    def apply(self, project) -> None:
        self.applied_to.append(project.name)


class TestPluginContainer:
    """Tests for PluginContainer."""

    def test_with_id_fires_immediately(self, project) -> None:
        """Test listeners run for already applied ids."""
        seen: list[str] = []
        project.plugins.apply("java")

        project.plugins.with_id("java", seen.append)

        assert seen == ["java"]

    def test_with_id_fires_on_late_apply(self, project) -> None:
        """Test listeners run when the id is applied later."""
        seen: list[str] = []
        project.plugins.with_id("com.android.library", seen.append)
        assert seen == []

        project.plugins.apply("com.android.library")

        assert seen == ["com.android.library"]

    def test_reapply_is_noop(self, project) -> None:
        """Test applying twice neither re-runs the plugin nor the listeners."""
        seen: list[str] = []
        plugin = RecordingPlugin()
        project.plugins.with_id(plugin.id, seen.append)

        project.plugins.apply(plugin)
        project.plugins.apply(plugin)

        assert plugin.applied_to == ["app"]
        assert seen == [plugin.id]
        assert project.plugins.find_plugin(plugin.id) is plugin

    def test_has_any(self, project) -> None:
        """Test membership helpers."""
        project.plugins.apply("java")

        assert project.plugins.has_plugin("java")
        assert project.plugins.has_any(["com.android.library", "java"])
        assert not project.plugins.has_any(["com.android.library"])
        assert project.plugins.applied == ["java"]


class TestTaskContainer:
    """Tests for TaskContainer."""

    def test_with_type_filters(self, project) -> None:
        """Test with_type only yields matching tasks."""
        project.tasks.register("compileJava", JavaCompile)
        project.tasks.register("javadoc", Task)

        assert [t.name for t in project.tasks.with_type(CompileTask)] == ["compileJava"]
        assert len(project.tasks.with_type(Task)) == 2

    def test_all_is_live(self, project) -> None:
        """Test all() also applies to tasks registered afterwards."""
        seen: list[str] = []
        project.tasks.register("compileJava", JavaCompile)

        project.tasks.with_type(CompileTask).all(lambda t: seen.append(t.name))
        project.tasks.register("javadoc", Task)
        project.tasks.register("compileTestJava", JavaCompile)

        assert seen == ["compileJava", "compileTestJava"]

    def test_duplicate_task(self, project) -> None:
        """Test task names are unique."""
        project.tasks.register("compileJava")

        with pytest.raises(BuildGraphError):
            project.tasks.register("compileJava")

    def test_compile_defaults(self, project) -> None:
        """Test a new compile task starts with empty options."""
        task = project.tasks.register("compileJava")

        assert isinstance(task, JavaCompile)
        assert task.options.compiler_args == []
        assert task.options.boot_classpath is None
        assert task.options.fork is False
        assert project.tasks.get_by_name("compileJava") is task


class TestExtensions:
    """Tests for ExtensionContainer."""

    def test_create_and_find(self, project) -> None:
        """Test extensions are registered by name."""
        extension = project.extensions.create("sample", dict, a=1)

        assert extension == {"a": 1}
        assert project.extensions.find_by_name("sample") is extension
        assert project.extensions.find_by_name("other") is None

    def test_duplicate(self, project) -> None:
        """Test extension names are unique."""
        project.extensions.add("sample", object())

        with pytest.raises(BuildGraphError):
            project.extensions.add("sample", object())

    def test_get_missing(self, project) -> None:
        """Test get_by_name fails for unknown names."""
        with pytest.raises(BuildGraphError):
            project.extensions.get_by_name("android")


class TestBuild:
    """Tests for the post-evaluation barrier."""

    def test_callbacks_run_once_in_order(self, build: Build) -> None:
        """Test callbacks run once, in registration order."""
        calls: list[str] = []
        build.projects_evaluated(lambda b: calls.append("first"))
        build.projects_evaluated(lambda b: calls.append("second"))

        build.evaluate()
        build.evaluate()

        assert calls == ["first", "second"]
        assert build.is_evaluated

    def test_callback_receives_build(self, build: Build) -> None:
        """Test the build is passed to callbacks."""
        received: list[Build] = []
        build.projects_evaluated(received.append)

        build.evaluate()

        assert received == [build]

    def test_late_registration_ignored(self, build: Build) -> None:
        """Test callbacks registered after the barrier never run."""
        calls: list[str] = []
        build.evaluate()

        build.projects_evaluated(lambda b: calls.append("late"))
        build.evaluate()

        assert calls == []

    def test_projects(self, build: Build, runtime) -> None:
        """Test project creation rules."""
        project = build.create_project("core")

        assert project.gradle is build
        assert project.runtime is runtime
        with pytest.raises(BuildGraphError):
            build.create_project("core")

        build.evaluate()
        with pytest.raises(BuildGraphError):
            build.create_project("late")
