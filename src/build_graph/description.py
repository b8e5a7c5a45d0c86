"""Builds described in YAML.

A description lists the runtime, where artifacts come from, and each
project with the plugins, compatibility settings, configurations, compile
tasks, and checkers its build script would declare::

    runtime:
      version: "1.8"
      boot_class_path: [/opt/jdk8/jre/lib/rt.jar]
    artifacts:
      "org.checkerframework:jdk8:latest.release": [libs/jdk8.jar]
    projects:
      app:
        plugins: [com.android.application]
        android:
          source_compatibility: "1.8"
        tasks:
          compileDebugJavaWithJavac:
            boot_classpath: /sdk/platforms/android-27/android.jar
        checkers: [org.checkerframework.checker.nullness.NullnessChecker]

Quote versions such as ``"1.10"``: YAML reads an unquoted ``1.10`` as the
float 1.1, which parses as Java 1.1.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from src.build_graph.artifacts import (
    ArtifactResolver,
    ChainedArtifactResolver,
    MappingArtifactResolver,
    MavenLayoutResolver,
)
from src.build_graph.plugins import Plugin
from src.build_graph.project import (
    AndroidCompileOptions,
    AndroidExtension,
    Build,
    JavaConvention,
    Project,
)
from src.build_graph.runtime import JavaRuntime
from src.build_graph.tasks import JavaCompile
from src.core.config.loader import ConfigLoader
from src.core.exceptions.errors import ConfigurationError
from src.core.logger.logger import get_logger
from src.models.java import JavaVersion

logger = get_logger(__name__)


def _parse_java_version(v: object) -> JavaVersion | None:
    return JavaVersion.to_version(v)  # type: ignore[arg-type]


class RuntimeDescription(BaseModel):
    """The Java runtime running the build."""

    version: JavaVersion | None = Field(default=None, description="Runtime Java version")
    boot_class_path: list[str] = Field(default_factory=list, description="Platform boot jars")
    java_home: Path | None = Field(default=None, description="Detect the runtime from this JDK")

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, v: object) -> JavaVersion | None:
        return _parse_java_version(v)

    @field_validator("boot_class_path", mode="before")
    @classmethod
    def validate_boot_class_path(cls, v: object) -> list[str]:
        """Accept a path-separator-joined string or a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [p for p in v.split(os.pathsep) if p]
        return v  # type: ignore[return-value]

    @model_validator(mode="after")
    def require_version_or_home(self) -> "RuntimeDescription":
        if self.version is None and self.java_home is None:
            raise ValueError("runtime needs either 'version' or 'java_home'")
        return self

    def to_runtime(self) -> JavaRuntime:
        """Build the JavaRuntime, detecting it from java_home when given.

        Raises:
            ConfigurationError: If java_home is not a usable JDK.
        """
        if self.java_home is not None:
            try:
                return JavaRuntime.detect(self.java_home)
            except (OSError, ValueError) as e:
                raise ConfigurationError(
                    f"Cannot detect Java runtime in {self.java_home}: {e}",
                    config_key="runtime.java_home",
                ) from e
        return JavaRuntime(version=self.version, boot_class_path=os.pathsep.join(self.boot_class_path))


class AndroidDescription(BaseModel):
    """``android.compileOptions`` of a project."""

    source_compatibility: JavaVersion | None = None

    @field_validator("source_compatibility", mode="before")
    @classmethod
    def validate_version(cls, v: object) -> JavaVersion | None:
        return _parse_java_version(v)


class TaskDescription(BaseModel):
    """Initial options of a compile task."""

    compiler_args: list[str] = Field(default_factory=list)
    boot_classpath: str | None = None
    fork: bool = False


class ProjectDescription(BaseModel):
    """One project of the build."""

    plugins: list[str] = Field(default_factory=list, description="Plugin ids, in apply order")
    source_compatibility: JavaVersion | None = Field(
        default=None,
        description="Project-level sourceCompatibility convention",
    )
    android: AndroidDescription | None = None
    configurations: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Configurations declared by the build, with their dependencies",
    )
    tasks: dict[str, TaskDescription | None] = Field(default_factory=dict)
    checkers: list[str] | None = Field(
        default=None,
        description="checkerFramework.checkers; None keeps the configured default",
    )

    @field_validator("source_compatibility", mode="before")
    @classmethod
    def validate_version(cls, v: object) -> JavaVersion | None:
        return _parse_java_version(v)


class BuildDescription(BaseModel):
    """A whole build."""

    runtime: RuntimeDescription
    repository: Path | None = Field(default=None, description="Local Maven-layout repository")
    artifacts: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Coordinate to files, checked before the repository",
    )
    projects: dict[str, ProjectDescription] = Field(default_factory=dict)

    def resolver(self, base_dir: Path | None = None) -> ArtifactResolver:
        """Artifact resolver for this build; relative paths are taken from ``base_dir``."""
        base = base_dir or Path.cwd()
        resolvers: list[ArtifactResolver] = [
            MappingArtifactResolver(
                {coord: [base / f for f in files] for coord, files in self.artifacts.items()}
            )
        ]
        if self.repository is not None:
            resolvers.append(MavenLayoutResolver(base / self.repository))
        return ChainedArtifactResolver(resolvers)


def load_build_description(path: Path) -> BuildDescription:
    """Load and validate a build description.

    Args:
        path: YAML file.

    Returns:
        Validated BuildDescription.

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid.
    """
    data = ConfigLoader(path).load()
    try:
        return BuildDescription.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid build description: {path}",
            config_key=str(path),
            details={"errors": e.errors(include_url=False)},
        ) from e


def create_build(
    description: BuildDescription,
    plugin: Plugin | None = None,
    base_dir: Path | None = None,
) -> Build:
    """Materialize a described build, applying ``plugin`` to every project.

    Each project is set up in build-script order: declared configurations
    and tasks, then ``plugin``, then the listed plugin ids, then the
    checker list. The build is returned unevaluated.

    Args:
        description: Build description.
        plugin: Plugin applied to each project before its plugin ids.
        base_dir: Directory relative artifact paths are resolved against.

    Returns:
        The unevaluated build.
    """
    build = Build(description.runtime.to_runtime(), description.resolver(base_dir))

    for name, project_description in description.projects.items():
        project = build.create_project(name)
        _populate_project(project, project_description)

        if plugin is not None:
            project.plugins.apply(plugin)
        for plugin_id in project_description.plugins:
            project.plugins.apply(plugin_id)

        extension = project.extensions.find_by_name("checkerFramework")
        if extension is not None and project_description.checkers is not None:
            extension.checkers = list(project_description.checkers)

        logger.debug(f"Created project '{name}' with plugins {project.plugins.applied}")

    return build


def _populate_project(project: Project, description: ProjectDescription) -> None:
    if description.source_compatibility is not None:
        project.convention.add("jdk", JavaConvention(source_compatibility=description.source_compatibility))
    if description.android is not None:
        project.extensions.add(
            "android",
            AndroidExtension(
                compile_options=AndroidCompileOptions(
                    source_compatibility=description.android.source_compatibility
                )
            ),
        )

    for configuration_name, notations in description.configurations.items():
        configuration = project.configurations.create(configuration_name)
        for notation in notations:
            configuration.dependencies.add(project.dependencies.create(notation))

    for task_name, task_description in description.tasks.items():
        task = project.tasks.register(task_name, JavaCompile)
        if task_description is not None:
            task.options.compiler_args = list(task_description.compiler_args)
            task.options.boot_classpath = task_description.boot_classpath
            task.options.fork = task_description.fork
