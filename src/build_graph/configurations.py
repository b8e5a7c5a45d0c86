"""Dependency configurations: named buckets of dependencies with a classpath."""

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from src.build_graph.artifacts import ArtifactResolver, Coordinate
from src.core.exceptions.errors import BuildGraphError
from src.core.logger.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Dependency:
    """An external module dependency."""

    group: str
    name: str
    version: str

    @property
    def notation(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    def __str__(self) -> str:
        return self.notation


class DependencyHandler:
    """Creates dependency objects from notation, like ``project.dependencies``."""

    def create(self, notation: str) -> Dependency:
        """Create a dependency from ``group:name:version`` notation.

        Args:
            notation: Dependency notation.

        Returns:
            Dependency instance.

        Raises:
            ArtifactResolutionError: If the notation is malformed.
        """
        coordinate = Coordinate.parse(notation)
        return Dependency(coordinate.group, coordinate.name, coordinate.version)


class DependencySet:
    """Ordered dependencies of one configuration.

    Duplicates are kept; adding the same dependency twice lists it twice.
    """

    def __init__(self, on_add: Callable[[Dependency], None] | None = None) -> None:
        self._items: list[Dependency] = []
        self._on_add = on_add

    def add(self, dependency: Dependency) -> None:
        self._items.append(dependency)
        if self._on_add:
            self._on_add(dependency)

    def __iter__(self) -> Iterator[Dependency]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, dependency: object) -> bool:
        return dependency in self._items

    def __repr__(self) -> str:
        return f"DependencySet({self._items!r})"


class Configuration:
    """A named, resolvable bucket of dependencies."""

    def __init__(self, name: str, resolver: ArtifactResolver | None = None) -> None:
        """Initialize the configuration.

        Args:
            name: Configuration name, unique within a project.
            resolver: Artifact resolver used to compute the classpath.
        """
        self.name = name
        self.description: str | None = None
        self.visible = True
        self.dependencies = DependencySet(on_add=self._on_explicit_dependency)
        self._resolver = resolver
        self._default_actions: list[Callable[[DependencySet], None]] = []
        self._defaults_pending = False

    def default_dependencies(self, action: Callable[[DependencySet], None]) -> None:
        """Register dependencies used only if none are declared explicitly.

        The action runs at resolution time, and only when the configuration
        still has no explicit dependency.

        Args:
            action: Callback receiving a DependencySet to populate.
        """
        self._default_actions.append(action)
        if not len(self.dependencies):
            self._defaults_pending = True

    def _on_explicit_dependency(self, dependency: Dependency) -> None:
        if self._defaults_pending:
            logger.debug(f"Explicit dependency {dependency} on '{self.name}' discards defaults")
        self._defaults_pending = False

    @property
    def has_pending_defaults(self) -> bool:
        """Whether default dependencies would still materialize on resolution."""
        return self._defaults_pending

    @property
    def default_dependency_list(self) -> list[Dependency]:
        """Materialize the registered defaults without applying them."""
        defaults = DependencySet()
        for action in self._default_actions:
            action(defaults)
        return list(defaults)

    def resolved_dependencies(self) -> list[Dependency]:
        """Dependencies that take part in resolution.

        Returns:
            Explicit dependencies, or the defaults while they are pending.
        """
        if self._defaults_pending:
            return self.default_dependency_list
        return list(self.dependencies)

    def resolve(self) -> list[Path]:
        """Resolve the configuration to files.

        Returns:
            Files of every resolved dependency, in declaration order.

        Raises:
            BuildGraphError: If no resolver is attached.
            ArtifactResolutionError: If a dependency cannot be resolved.
        """
        if self._resolver is None:
            raise BuildGraphError(
                f"Configuration '{self.name}' has no artifact resolver",
                details={"configuration": self.name},
            )
        files: list[Path] = []
        for dependency in self.resolved_dependencies():
            for resolved in self._resolver.resolve(dependency.notation):
                if resolved not in files:
                    files.append(resolved)
        return files

    @property
    def as_path(self) -> str:
        """Resolved files joined with the platform path separator."""
        return os.pathsep.join(str(f) for f in self.resolve())

    def __repr__(self) -> str:
        return f"Configuration({self.name!r})"


class ConfigurationContainer:
    """The per-project registry of configurations, in creation order."""

    def __init__(self, resolver: ArtifactResolver | None = None) -> None:
        self._configurations: dict[str, Configuration] = {}
        self._resolver = resolver

    def create(
        self,
        name: str,
        configure: Callable[[Configuration], None] | None = None,
    ) -> Configuration:
        """Create and register a configuration.

        Args:
            name: Configuration name.
            configure: Optional callback run on the new configuration.

        Returns:
            The new configuration.

        Raises:
            BuildGraphError: If a configuration with that name already exists.
        """
        if name in self._configurations:
            raise BuildGraphError(
                f"Cannot add a configuration with name '{name}' as a configuration with that name already exists.",
                details={"configuration": name},
            )
        configuration = Configuration(name, self._resolver)
        self._configurations[name] = configuration
        if configure:
            configure(configuration)
        return configuration

    def find_by_name(self, name: str) -> Configuration | None:
        return self._configurations.get(name)

    def get_by_name(self, name: str) -> Configuration:
        """Look up a configuration, failing if it does not exist.

        Raises:
            BuildGraphError: If no configuration has that name.
        """
        configuration = self._configurations.get(name)
        if configuration is None:
            raise BuildGraphError(
                f"Configuration with name '{name}' not found.",
                details={"configuration": name},
            )
        return configuration

    def __getitem__(self, name: str) -> Configuration:
        return self.get_by_name(name)

    def __contains__(self, name: object) -> bool:
        return name in self._configurations

    def __iter__(self) -> Iterator[Configuration]:
        return iter(list(self._configurations.values()))

    def __len__(self) -> int:
        return len(self._configurations)

    @property
    def names(self) -> list[str]:
        return list(self._configurations)
