"""Tests for the Checker Framework dependency table."""

from src.checker_plugin.dependencies import build_dependency_table, coordinate
from src.core.config.settings import CheckerSettings
from src.models.java import VersionTag


class TestBuildDependencyTable:
    """Tests for build_dependency_table."""

    def test_rows_in_order(self) -> None:
        """Test the six configurations appear in merge order."""
        table = build_dependency_table(VersionTag.JDK8)

        assert [row.configuration.name for row in table] == [
            "checkerFrameworkAnnotatedJDK",
            "checkerFrameworkJavac",
            "checkerFramework",
            "compile",
            "annotationProcessor",
            "testAnnotationProcessor",
        ]

    def test_coordinates_jdk8(self) -> None:
        """Test coordinates for a Java 8 project."""
        table = {row.configuration.name: row.coordinate for row in build_dependency_table(VersionTag.JDK8)}

        assert table == {
            "checkerFrameworkAnnotatedJDK": "org.checkerframework:jdk8:latest.release",
            "checkerFrameworkJavac": "org.checkerframework:compiler:latest.release",
            "checkerFramework": "org.checkerframework:checker:latest.release",
            "compile": "org.checkerframework:checker-qual:latest.release",
            "annotationProcessor": "org.checkerframework:checker:latest.release",
            "testAnnotationProcessor": "org.checkerframework:checker:latest.release",
        }

    def test_only_annotated_jdk_depends_on_tag(self) -> None:
        """Test jdk7 and jdk8 tables differ in the first row only."""
        jdk7 = build_dependency_table(VersionTag.JDK7)
        jdk8 = build_dependency_table(VersionTag.JDK8)

        assert jdk7[0].coordinate == "org.checkerframework:jdk7:latest.release"
        assert jdk8[0].coordinate == "org.checkerframework:jdk8:latest.release"
        assert jdk7[1:] == jdk8[1:]

    def test_descriptions(self) -> None:
        """Test descriptions, including the reused annotated JDK one."""
        table = {row.configuration.name: row.configuration.description for row in build_dependency_table(VersionTag.JDK7)}

        assert table["checkerFrameworkAnnotatedJDK"].startswith("A copy of JDK classes")
        assert table["checkerFrameworkJavac"].startswith("A customization of the OpenJDK javac")
        assert table["checkerFramework"] == "The Checker Framework: custom pluggable types for Java."
        assert table["compile"] == table["checkerFrameworkAnnotatedJDK"]
        assert table["annotationProcessor"] is None
        assert table["testAnnotationProcessor"] is None

    def test_custom_version(self) -> None:
        """Test the artifact group and version come from settings."""
        settings = CheckerSettings(group="org.example.cf", library_version="2.5.0")
        table = build_dependency_table(VersionTag.JDK8, settings)

        assert all(row.coordinate.startswith("org.example.cf:") for row in table)
        assert all(row.coordinate.endswith(":2.5.0") for row in table)

    def test_coordinate_helper(self) -> None:
        """Test coordinate uses default settings."""
        assert coordinate("checker") == "org.checkerframework:checker:latest.release"
