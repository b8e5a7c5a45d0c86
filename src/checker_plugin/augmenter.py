"""Rewrites compile tasks once the whole build has been evaluated."""

import os
from typing import TYPE_CHECKING

from src.build_graph.tasks import CompileTask
from src.checker_plugin.constants import (
    ANDROID_IDS,
    ANNOTATED_JDK_CONFIGURATION,
    BOOTCLASSPATH_PREPEND_ARG,
    JAVAC_CONFIGURATION,
    PROCESSOR_ARG,
)
from src.core.exceptions.errors import BuildGraphError, UnresolvedConfigurationError
from src.core.logger.logger import get_logger
from src.models.checker import CheckerExtension

if TYPE_CHECKING:
    from src.build_graph.project import Build, Project

logger = get_logger(__name__)


class TaskAugmenter:
    """Adds the Checker Framework to every compile task of a project.

    Classpaths and the full task set are only stable after every project
    has been evaluated, so ``register`` defers the work to the build's
    ``projects_evaluated`` barrier.

    Augmenting the same task twice appends the arguments twice.
    """

    def __init__(self, project: "Project", extension: CheckerExtension) -> None:
        """Initialize the augmenter.

        Args:
            project: Project whose compile tasks are rewritten.
            extension: The project's checkerFramework extension.
        """
        self.project = project
        self.extension = extension
        self.augmented: list[str] = []

    def register(self) -> None:
        """Schedule augmentation for after project evaluation."""
        self.project.gradle.projects_evaluated(self._on_projects_evaluated)

    def _on_projects_evaluated(self, build: "Build") -> None:
        self.project.tasks.with_type(CompileTask).all(self.augment)
        logger.info(
            f"Checker Framework enabled on {len(self.augmented)} compile task(s) "
            f"of project '{self.project.name}'"
        )

    def augment(self, task: CompileTask) -> None:
        """Rewrite one compile task's options.

        Args:
            task: Compile task to modify.

        Raises:
            UnresolvedConfigurationError: If a needed classpath cannot be resolved.
        """
        options = task.options
        options.compiler_args.append(
            f"{BOOTCLASSPATH_PREPEND_ARG}{self._classpath(ANNOTATED_JDK_CONFIGURATION)}"
        )

        if self.extension.checkers:
            options.compiler_args.extend([PROCESSOR_ARG, ",".join(self.extension.checkers)])

        if self.project.plugins.has_any(ANDROID_IDS):
            options.boot_classpath = os.pathsep.join(
                [
                    self.project.runtime.boot_class_path,
                    self._classpath(JAVAC_CONFIGURATION),
                    options.boot_classpath or "",
                ]
            )

        options.fork = True
        self.augmented.append(task.name)
        logger.debug(f"Augmented task '{task.name}': {options.compiler_args}")

    def _classpath(self, name: str) -> str:
        try:
            return self.project.configurations.get_by_name(name).as_path
        except BuildGraphError as e:
            raise UnresolvedConfigurationError(
                f"Could not resolve configuration '{name}': {e.message}",
                configuration=name,
                project=self.project.name,
            ) from e
