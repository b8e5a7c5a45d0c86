"""In-memory build graph the plugin is applied to."""

from src.build_graph.artifacts import (
    ArtifactResolver,
    Coordinate,
    MappingArtifactResolver,
    MavenLayoutResolver,
)
from src.build_graph.configurations import (
    Configuration,
    ConfigurationContainer,
    Dependency,
    DependencyHandler,
    DependencySet,
)
from src.build_graph.plugins import Plugin, PluginContainer
from src.build_graph.project import (
    AndroidCompileOptions,
    AndroidExtension,
    Build,
    Convention,
    ExtensionContainer,
    JavaConvention,
    Project,
)
from src.build_graph.runtime import JavaRuntime
from src.build_graph.tasks import CompileOptions, CompileTask, JavaCompile, Task, TaskContainer

__all__ = [
    # Artifacts
    "ArtifactResolver",
    "Coordinate",
    "MappingArtifactResolver",
    "MavenLayoutResolver",
    # Configurations
    "Configuration",
    "ConfigurationContainer",
    "Dependency",
    "DependencyHandler",
    "DependencySet",
    # Projects
    "Build",
    "Project",
    "Plugin",
    "PluginContainer",
    "ExtensionContainer",
    "Convention",
    "AndroidExtension",
    "AndroidCompileOptions",
    "JavaConvention",
    "JavaRuntime",
    # Tasks
    "Task",
    "TaskContainer",
    "CompileTask",
    "CompileOptions",
    "JavaCompile",
]
