"""The fixed table of configurations and the Checker Framework artifacts they receive."""

from src.checker_plugin.constants import (
    ANNOTATED_JDK_CONFIGURATION,
    ANNOTATED_JDK_CONFIGURATION_DESCRIPTION,
    ANNOTATION_PROCESSOR_CONFIGURATION,
    CHECKER_ARTIFACT,
    CHECKER_QUAL_ARTIFACT,
    COMPILER_ARTIFACT,
    CONFIGURATION,
    CONFIGURATION_DESCRIPTION,
    JAVA_COMPILE_CONFIGURATION,
    JAVAC_CONFIGURATION,
    JAVAC_CONFIGURATION_DESCRIPTION,
    TEST_ANNOTATION_PROCESSOR_CONFIGURATION,
)
from src.core.config.settings import CheckerSettings
from src.models.checker import ConfigurationSpec, DependencySpec
from src.models.java import VersionTag


def coordinate(artifact: str, settings: CheckerSettings | None = None) -> str:
    """Build ``group:artifact:version`` for a Checker Framework artifact."""
    settings = settings or CheckerSettings()
    return f"{settings.group}:{artifact}:{settings.library_version}"


def build_dependency_table(
    tag: VersionTag,
    settings: CheckerSettings | None = None,
) -> list[DependencySpec]:
    """Build the dependency table for an annotated JDK variant.

    Only the annotated JDK row depends on ``tag``; the other rows are the
    same for every project.

    Args:
        tag: Annotated JDK variant.
        settings: Artifact group and version. Defaults to CheckerSettings().

    Returns:
        Six rows, in the order they are merged.
    """
    settings = settings or CheckerSettings()
    checker = coordinate(CHECKER_ARTIFACT, settings)

    rows = [
        (ANNOTATED_JDK_CONFIGURATION, ANNOTATED_JDK_CONFIGURATION_DESCRIPTION, coordinate(tag.value, settings)),
        (JAVAC_CONFIGURATION, JAVAC_CONFIGURATION_DESCRIPTION, coordinate(COMPILER_ARTIFACT, settings)),
        (CONFIGURATION, CONFIGURATION_DESCRIPTION, checker),
        (JAVA_COMPILE_CONFIGURATION, ANNOTATED_JDK_CONFIGURATION_DESCRIPTION, coordinate(CHECKER_QUAL_ARTIFACT, settings)),
        (ANNOTATION_PROCESSOR_CONFIGURATION, None, checker),
        (TEST_ANNOTATION_PROCESSOR_CONFIGURATION, None, checker),
    ]
    return [
        DependencySpec(
            configuration=ConfigurationSpec(name=name, description=description),
            coordinate=notation,
        )
        for name, description, notation in rows
    ]
