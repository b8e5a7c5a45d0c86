"""Tests for annotated JDK version resolution."""

import pytest

from src.build_graph.project import AndroidCompileOptions, AndroidExtension, JavaConvention
from src.checker_plugin.version import detect_java_version, resolve_version_tag, to_version_tag
from src.core.exceptions.errors import UnsupportedVersionError
from src.models.java import JavaVersion, VersionTag


class TestToVersionTag:
    """Tests for to_version_tag."""

    @pytest.mark.parametrize(
        ("version", "tag"),
        [
            (JavaVersion.VERSION_1_7, VersionTag.JDK7),
            (JavaVersion.VERSION_1_8, VersionTag.JDK8),
        ],
    )
    def test_supported_versions(self, version: JavaVersion, tag: VersionTag) -> None:
        """Test Java 7 and 8 map to their tags."""
        assert to_version_tag(version) is tag

    @pytest.mark.parametrize(
        "version",
        [JavaVersion.VERSION_1_6, JavaVersion.VERSION_1_9, JavaVersion.VERSION_11, JavaVersion.VERSION_HIGHER],
    )
    def test_unsupported_versions(self, version: JavaVersion) -> None:
        """Test other versions are rejected."""
        with pytest.raises(UnsupportedVersionError) as exc_info:
            to_version_tag(version, project="app")

        assert exc_info.value.version == str(version)
        assert "only supports Java 7 and Java 8" in str(exc_info.value)
        assert exc_info.value.details["project"] == "app"


class TestDetectJavaVersion:
    """Tests for the source-compatibility lookup order."""

    def test_falls_back_to_runtime(self, make_build) -> None:
        """Test the runtime version is used when nothing is declared."""
        project = make_build(JavaVersion.VERSION_1_7).create_project("lib")
        assert detect_java_version(project) is JavaVersion.VERSION_1_7

    def test_convention_overrides_runtime(self, make_build) -> None:
        """Test the jdk convention wins over the runtime."""
        project = make_build(JavaVersion.VERSION_11).create_project("lib")
        project.convention.add("jdk", JavaConvention(source_compatibility=JavaVersion.VERSION_1_8))

        assert detect_java_version(project) is JavaVersion.VERSION_1_8

    def test_android_overrides_convention(self, make_build) -> None:
        """Test android.compileOptions wins over everything."""
        project = make_build(JavaVersion.VERSION_11).create_project("app")
        project.convention.add("jdk", JavaConvention(source_compatibility=JavaVersion.VERSION_1_8))
        project.extensions.add(
            "android",
            AndroidExtension(compile_options=AndroidCompileOptions(source_compatibility=JavaVersion.VERSION_1_7)),
        )

        assert detect_java_version(project) is JavaVersion.VERSION_1_7

    def test_empty_android_setting_is_skipped(self, make_build) -> None:
        """Test an unset Android source compatibility falls through."""
        project = make_build(JavaVersion.VERSION_1_8).create_project("app")
        project.extensions.add("android", AndroidExtension())
        project.convention.add("jdk", JavaConvention(source_compatibility=JavaVersion.VERSION_1_7))

        assert detect_java_version(project) is JavaVersion.VERSION_1_7

    def test_string_values_are_parsed(self, make_build) -> None:
        """Test raw strings declared by a build are accepted."""
        project = make_build(JavaVersion.VERSION_11).create_project("lib")
        project.convention.add("jdk", JavaConvention(source_compatibility="1.7"))  # type: ignore[arg-type]

        assert detect_java_version(project) is JavaVersion.VERSION_1_7

    def test_garbage_value_raises(self, make_build) -> None:
        """Test an unparsable declaration is reported as unsupported."""
        project = make_build(JavaVersion.VERSION_1_8).create_project("lib")
        project.convention.add("jdk", JavaConvention(source_compatibility="banana"))  # type: ignore[arg-type]

        with pytest.raises(UnsupportedVersionError):
            detect_java_version(project)


class TestResolveVersionTag:
    """Tests for resolve_version_tag."""

    def test_java8_runtime(self, project) -> None:
        """Test a Java 8 runtime yields jdk8."""
        assert resolve_version_tag(project) is VersionTag.JDK8

    def test_unsupported_runtime(self, make_build) -> None:
        """Test a Java 11 project fails."""
        project = make_build(JavaVersion.VERSION_11).create_project("lib")

        with pytest.raises(UnsupportedVersionError):
            resolve_version_tag(project)
