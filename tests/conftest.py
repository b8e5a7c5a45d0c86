"""Pytest configuration and shared fixtures."""

import os
from collections.abc import Callable

import pytest

from src.build_graph.artifacts import MappingArtifactResolver
from src.build_graph.project import Build, Project
from src.build_graph.runtime import JavaRuntime
from src.models.java import JavaVersion

PLATFORM_BOOT = os.pathsep.join(["/jdk/jre/lib/rt.jar", "/jdk/jre/lib/jce.jar"])

CHECKER_ARTIFACTS = {
    "org.checkerframework:jdk7:latest.release": ["/repo/jdk7.jar"],
    "org.checkerframework:jdk8:latest.release": ["/repo/jdk8.jar"],
    "org.checkerframework:compiler:latest.release": ["/repo/javac.jar"],
    "org.checkerframework:checker:latest.release": ["/repo/checker.jar"],
    "org.checkerframework:checker-qual:latest.release": ["/repo/checker-qual.jar"],
}


@pytest.fixture
def resolver() -> MappingArtifactResolver:
    """Resolver knowing every Checker Framework artifact.

    Returns:
        MappingArtifactResolver instance.
    """
    return MappingArtifactResolver(CHECKER_ARTIFACTS)


@pytest.fixture
def runtime() -> JavaRuntime:
    """A Java 8 runtime with a two-jar platform boot classpath."""
    return JavaRuntime(version=JavaVersion.VERSION_1_8, boot_class_path=PLATFORM_BOOT)


@pytest.fixture
def build(runtime: JavaRuntime, resolver: MappingArtifactResolver) -> Build:
    """An empty, unevaluated build.

    Args:
        runtime: Runtime fixture.
        resolver: Resolver fixture.

    Returns:
        Build instance.
    """
    return Build(runtime, resolver)


@pytest.fixture
def project(build: Build) -> Project:
    """A project named 'app' with no plugins applied."""
    return build.create_project("app")


@pytest.fixture
def make_build(resolver: MappingArtifactResolver) -> Callable[[JavaVersion], Build]:
    """Factory for builds running on a given Java version."""

    def factory(version: JavaVersion, boot_class_path: str = PLATFORM_BOOT) -> Build:
        return Build(JavaRuntime(version=version, boot_class_path=boot_class_path), resolver)

    return factory
