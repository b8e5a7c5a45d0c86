"""Projects, extensions, and the build lifecycle."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from src.build_graph.artifacts import ArtifactResolver
from src.build_graph.configurations import ConfigurationContainer, DependencyHandler
from src.build_graph.plugins import PluginContainer
from src.build_graph.runtime import JavaRuntime
from src.build_graph.tasks import TaskContainer
from src.core.exceptions.errors import BuildGraphError
from src.core.logger.logger import get_logger
from src.models.java import JavaVersion

logger = get_logger(__name__)

E = TypeVar("E")


@dataclass
class AndroidCompileOptions:
    """``android.compileOptions`` block."""

    source_compatibility: JavaVersion | None = None
    target_compatibility: JavaVersion | None = None


@dataclass
class AndroidExtension:
    """The ``android { }`` extension registered by Android plugins."""

    compile_options: AndroidCompileOptions = field(default_factory=AndroidCompileOptions)


@dataclass
class JavaConvention:
    """Project-level source/target compatibility convention."""

    source_compatibility: JavaVersion | None = None
    target_compatibility: JavaVersion | None = None


class ExtensionContainer:
    """Named extension objects attached to a project."""

    def __init__(self) -> None:
        self._extensions: dict[str, Any] = {}

    def create(self, name: str, extension_type: Callable[..., E], **kwargs: Any) -> E:
        """Instantiate and register an extension.

        Args:
            name: Extension name.
            extension_type: Class (or factory) of the extension.
            **kwargs: Constructor arguments.

        Returns:
            The new extension.

        Raises:
            BuildGraphError: If an extension with that name exists.
        """
        extension = extension_type(**kwargs)
        self.add(name, extension)
        return extension

    def add(self, name: str, extension: Any) -> None:
        if name in self._extensions:
            raise BuildGraphError(
                f"Cannot add extension with name '{name}', as there is an extension already registered with that name.",
                details={"extension": name},
            )
        self._extensions[name] = extension

    def find_by_name(self, name: str) -> Any | None:
        return self._extensions.get(name)

    def get_by_name(self, name: str) -> Any:
        if name not in self._extensions:
            raise BuildGraphError(
                f"Extension with name '{name}' does not exist.",
                details={"extension": name},
            )
        return self._extensions[name]


class Convention:
    """Legacy per-plugin convention objects."""

    def __init__(self) -> None:
        self._plugins: dict[str, Any] = {}

    def add(self, name: str, convention: Any) -> None:
        self._plugins[name] = convention

    def find_by_name(self, name: str) -> Any | None:
        return self._plugins.get(name)


class Project:
    """A single project in the build."""

    def __init__(self, name: str, build: "Build") -> None:
        """Initialize the project.

        Args:
            name: Project name.
            build: Owning build; provides the runtime and artifact resolver.
        """
        self.name = name
        self.gradle = build
        self.plugins = PluginContainer(self)
        self.extensions = ExtensionContainer()
        self.convention = Convention()
        self.configurations = ConfigurationContainer(build.resolver)
        self.dependencies = DependencyHandler()
        self.tasks = TaskContainer()

    @property
    def runtime(self) -> JavaRuntime:
        return self.gradle.runtime

    def __repr__(self) -> str:
        return f"Project({self.name!r})"


class Build:
    """The whole build: projects plus the post-evaluation barrier.

    Callbacks registered with ``projects_evaluated`` run exactly once, in
    registration order, when ``evaluate`` is called.
    """

    def __init__(self, runtime: JavaRuntime, resolver: ArtifactResolver | None = None) -> None:
        """Initialize the build.

        Args:
            runtime: Runtime the build executes on.
            resolver: Artifact resolver shared by every project.
        """
        self.runtime = runtime
        self.resolver = resolver
        self.projects: dict[str, Project] = {}
        self._evaluated_callbacks: list[Callable[["Build"], None]] = []
        self._evaluated = False

    def create_project(self, name: str) -> Project:
        """Create a project in this build.

        Raises:
            BuildGraphError: If the name is taken or the build is already evaluated.
        """
        if self._evaluated:
            raise BuildGraphError(
                f"Cannot add project '{name}' after the build has been evaluated.",
                details={"project": name},
            )
        if name in self.projects:
            raise BuildGraphError(f"Project '{name}' already exists.", details={"project": name})
        project = Project(name, self)
        self.projects[name] = project
        return project

    def projects_evaluated(self, callback: Callable[["Build"], None]) -> None:
        """Run ``callback`` once every project has been evaluated.

        Args:
            callback: Callable receiving this build.
        """
        if self._evaluated:
            logger.warning(
                f"Ignoring projects_evaluated callback {callback!r}: build already evaluated"
            )
            return
        self._evaluated_callbacks.append(callback)

    def evaluate(self) -> None:
        """Fire the post-evaluation barrier; later calls do nothing."""
        if self._evaluated:
            logger.debug("Build already evaluated")
            return
        self._evaluated = True

        callbacks, self._evaluated_callbacks = self._evaluated_callbacks, []
        logger.debug(f"Projects evaluated; running {len(callbacks)} callback(s)")
        for callback in callbacks:
            callback(self)

    @property
    def is_evaluated(self) -> bool:
        return self._evaluated
