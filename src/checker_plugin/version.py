"""Selects the annotated JDK variant for a project."""

from typing import TYPE_CHECKING, Any

from src.core.exceptions.errors import UnsupportedVersionError
from src.core.logger.logger import get_logger
from src.models.java import JavaVersion, VersionTag

if TYPE_CHECKING:
    from src.build_graph.project import Project

logger = get_logger(__name__)


def detect_java_version(project: "Project") -> JavaVersion:
    """Find the Java version a project compiles for.

    The first value set wins:

    1. ``android.compileOptions.sourceCompatibility``
    2. the ``jdk`` convention's ``sourceCompatibility``
    3. the version of the runtime running the build

    Args:
        project: Project being configured.

    Returns:
        The detected version.

    Raises:
        UnsupportedVersionError: If a declared value cannot be parsed.
    """
    android = project.extensions.find_by_name("android")
    compile_options = getattr(android, "compile_options", None)
    convention = project.convention.find_by_name("jdk")

    candidates = [
        ("android.compileOptions.sourceCompatibility", getattr(compile_options, "source_compatibility", None)),
        ("jdk.sourceCompatibility", getattr(convention, "source_compatibility", None)),
        ("runtime", project.runtime.version),
    ]
    for source, value in candidates:
        version = _parse(value, project)
        if version is not None:
            logger.debug(f"Project '{project.name}' uses Java {version} from {source}")
            return version

    raise UnsupportedVersionError(
        "Could not determine the Java version of the project.",
        project=project.name,
    )


def to_version_tag(version: JavaVersion, project: str | None = None) -> VersionTag:
    """Map a Java version to the annotated JDK tag.

    Args:
        version: Detected Java version.
        project: Project name, used in the error.

    Returns:
        VersionTag.JDK7 or VersionTag.JDK8.

    Raises:
        UnsupportedVersionError: For anything other than Java 7 or 8.
    """
    if version.is_java7:
        return VersionTag.JDK7
    if version.is_java8:
        return VersionTag.JDK8
    raise UnsupportedVersionError(
        f"Checker plugin only supports Java 7 and Java 8 projects, found Java {version}.",
        version=str(version),
        project=project,
    )


def resolve_version_tag(project: "Project") -> VersionTag:
    """Detect the project's Java version and map it to a VersionTag."""
    return to_version_tag(detect_java_version(project), project.name)


def _parse(value: Any, project: "Project") -> JavaVersion | None:
    try:
        return JavaVersion.to_version(value)
    except ValueError as e:
        raise UnsupportedVersionError(
            str(e),
            version=str(value),
            project=project.name,
        ) from e
