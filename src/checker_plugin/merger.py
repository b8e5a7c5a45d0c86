"""Merges the dependency table into a project's configurations."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.core.logger.logger import get_logger
from src.models.checker import DependencySpec

if TYPE_CHECKING:
    from src.build_graph.configurations import Configuration, DependencySet
    from src.build_graph.project import Project

logger = get_logger(__name__)


@dataclass
class MergeResult:
    """Which configurations a merge extended and which it created."""

    extended: list[str] = field(default_factory=list)
    created: list[str] = field(default_factory=list)


def merge_configurations(project: "Project", table: list[DependencySpec]) -> MergeResult:
    """Apply each table row to the project's configurations.

    A configuration the build already declares gets the coordinate added
    next to its existing dependencies. A missing one is created hidden,
    with the coordinate as a default dependency that only applies while
    nothing is declared on it explicitly.

    Not idempotent: merging twice adds the coordinate to existing
    configurations twice.

    Args:
        project: Project to modify.
        table: Rows from build_dependency_table.

    Returns:
        MergeResult listing extended and created configuration names.
    """
    result = MergeResult()

    for row in table:
        spec = row.configuration
        existing = project.configurations.find_by_name(spec.name)

        if existing is not None:
            existing.dependencies.add(project.dependencies.create(row.coordinate))
            result.extended.append(spec.name)
            logger.debug(f"Added {row.coordinate} to existing configuration '{spec.name}'")
            continue

        project.configurations.create(spec.name, _hidden_with_default(project, row))
        result.created.append(spec.name)
        logger.debug(f"Created configuration '{spec.name}' defaulting to {row.coordinate}")

    return result


def _hidden_with_default(project: "Project", row: DependencySpec):
    def configure(configuration: "Configuration") -> None:
        configuration.description = row.configuration.description
        configuration.visible = False

        def add_default(dependencies: "DependencySet") -> None:
            dependencies.add(project.dependencies.create(row.coordinate))

        configuration.default_dependencies(add_default)

    return configure
