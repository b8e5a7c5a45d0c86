"""Artifact resolution for dependency coordinates.

The build graph does not download anything: a resolver maps a
``group:name:version`` coordinate to files that are already on disk (or,
in tests, to arbitrary paths). Transitive dependencies are not followed.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from src.core.exceptions.errors import ArtifactResolutionError
from src.core.logger.logger import get_logger

logger = get_logger(__name__)

DYNAMIC_VERSIONS = {"latest.release", "latest.integration", "+"}


@dataclass(frozen=True)
class Coordinate:
    """Parsed ``group:name:version`` dependency notation."""

    group: str
    name: str
    version: str

    @classmethod
    def parse(cls, notation: str) -> "Coordinate":
        """Parse dependency notation.

        Args:
            notation: ``group:name:version`` string.

        Returns:
            Parsed coordinate.

        Raises:
            ArtifactResolutionError: If the notation does not have three parts.
        """
        parts = notation.split(":")
        if len(parts) != 3 or not all(p.strip() for p in parts):
            raise ArtifactResolutionError(
                f"Invalid dependency notation: {notation}",
                coordinate=notation,
            )
        return cls(*(p.strip() for p in parts))

    @property
    def is_dynamic(self) -> bool:
        return self.version in DYNAMIC_VERSIONS

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


class ArtifactResolver(Protocol):
    """Resolves a dependency coordinate to files."""

    def resolve(self, coordinate: str) -> list[Path]:
        """Return the files for ``coordinate`` or raise ArtifactResolutionError."""
        ...


class MappingArtifactResolver:
    """Resolver backed by an explicit coordinate-to-files mapping."""

    def __init__(self, artifacts: dict[str, list[Path | str]] | None = None) -> None:
        """Initialize the resolver.

        Args:
            artifacts: Mapping of coordinate notation to file paths.
        """
        self._artifacts: dict[str, list[Path]] = {}
        for coordinate, files in (artifacts or {}).items():
            self.add(coordinate, *files)

    def add(self, coordinate: str, *files: Path | str) -> None:
        """Register files for a coordinate."""
        self._artifacts.setdefault(coordinate, []).extend(Path(f) for f in files)

    def resolve(self, coordinate: str) -> list[Path]:
        """Resolve a coordinate to its registered files.

        Args:
            coordinate: Dependency notation.

        Returns:
            Registered files, in registration order.

        Raises:
            ArtifactResolutionError: If nothing is registered for the coordinate.
        """
        if coordinate not in self._artifacts:
            raise ArtifactResolutionError(
                f"Could not find {coordinate}",
                coordinate=coordinate,
            )
        return list(self._artifacts[coordinate])


class MavenLayoutResolver:
    """Resolver over a local repository in Maven directory layout.

    ``org.checkerframework:checker:2.5.0`` resolves to
    ``<root>/org/checkerframework/checker/2.5.0/checker-2.5.0.jar``. Dynamic
    versions pick the highest version directory; ``latest.release`` skips
    ``-SNAPSHOT`` versions.
    """

    def __init__(self, root: Path | str) -> None:
        """Initialize the resolver.

        Args:
            root: Repository root directory.
        """
        self.root = Path(root)

    def resolve(self, coordinate: str) -> list[Path]:
        """Resolve a coordinate to the jar in the local repository.

        Args:
            coordinate: Dependency notation.

        Returns:
            Single-element list with the artifact jar.

        Raises:
            ArtifactResolutionError: If the module, version, or jar is missing.
        """
        parsed = Coordinate.parse(coordinate)
        module_dir = self.root.joinpath(*parsed.group.split("."), parsed.name)
        if not module_dir.is_dir():
            raise ArtifactResolutionError(
                f"Could not find {coordinate}: no module directory {module_dir}",
                coordinate=coordinate,
            )

        version = parsed.version
        if parsed.is_dynamic:
            version = self._select_version(module_dir, parsed)
            logger.debug(f"Selected {parsed.group}:{parsed.name}:{version} for {parsed.version}")

        jar = module_dir / version / f"{parsed.name}-{version}.jar"
        if not jar.is_file():
            raise ArtifactResolutionError(
                f"Could not find {coordinate}: missing {jar}",
                coordinate=coordinate,
            )
        return [jar]

    def _select_version(self, module_dir: Path, coordinate: Coordinate) -> str:
        """Pick the highest available version for a dynamic selector."""
        candidates = [d.name for d in module_dir.iterdir() if d.is_dir()]
        if coordinate.version == "latest.release":
            candidates = [v for v in candidates if not v.upper().endswith("-SNAPSHOT")]
        if not candidates:
            raise ArtifactResolutionError(
                f"Could not find any version that matches {coordinate}",
                coordinate=str(coordinate),
            )
        return max(candidates, key=_version_key)


class ChainedArtifactResolver:
    """Tries several resolvers in order; the first that succeeds wins."""

    def __init__(self, resolvers: list[ArtifactResolver]) -> None:
        self.resolvers = resolvers

    def resolve(self, coordinate: str) -> list[Path]:
        """Resolve with the first resolver that knows the coordinate.

        Raises:
            ArtifactResolutionError: If every resolver fails.
        """
        failures: list[str] = []
        for resolver in self.resolvers:
            try:
                return resolver.resolve(coordinate)
            except ArtifactResolutionError as e:
                failures.append(e.message)
        raise ArtifactResolutionError(
            f"Could not find {coordinate}",
            coordinate=coordinate,
            details={"attempts": failures},
        )


def _version_key(version: str) -> tuple:
    """Sort key that orders numeric segments numerically."""
    key = []
    for part in re.split(r"[.\-]", version):
        if part.isdigit():
            key.append((1, int(part), ""))
        else:
            key.append((0, 0, part))
    return tuple(key)
