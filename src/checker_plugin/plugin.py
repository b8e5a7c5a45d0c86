"""Plugin entry point: activates the Checker Framework on Java and Android projects."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.checker_plugin.augmenter import TaskAugmenter
from src.checker_plugin.constants import APT_PLUGIN_ID, EXTENSION_NAME, PLUGIN_ID, SUPPORTED_IDS
from src.checker_plugin.dependencies import build_dependency_table
from src.checker_plugin.merger import MergeResult, merge_configurations
from src.checker_plugin.version import resolve_version_tag
from src.core.config.settings import CheckerSettings
from src.core.logger.logger import get_logger
from src.models.checker import CheckerExtension
from src.models.java import VersionTag

if TYPE_CHECKING:
    from src.build_graph.project import Project

logger = get_logger(__name__)


@dataclass
class ProjectSetup:
    """What the plugin did to one project."""

    project: "Project"
    trigger: str
    tag: VersionTag
    extension: CheckerExtension
    merge: MergeResult
    augmenter: TaskAugmenter


class CheckerPlugin:
    """Wires the Checker Framework into a project's compile tasks.

    Configuration runs once per project, triggered by the first supported
    plugin id (Java or one of the Android flavors) that becomes active,
    whether it was applied before or after this plugin.
    """

    id = PLUGIN_ID

    def __init__(self, settings: CheckerSettings | None = None) -> None:
        """Initialize the plugin.

        Args:
            settings: Artifact coordinates and default checkers.
        """
        self.settings = settings or CheckerSettings()
        self.setups: dict["Project", ProjectSetup] = {}

    def apply(self, project: "Project") -> None:
        """Register activation listeners on ``project``."""
        for plugin_id in SUPPORTED_IDS:
            project.plugins.with_id(
                plugin_id,
                lambda trigger, p=project: self._configure_once(p, trigger),
            )

    def _configure_once(self, project: "Project", trigger: str) -> None:
        if project in self.setups:
            logger.debug(f"Project '{project.name}' already configured; ignoring '{trigger}'")
            return
        logger.info(f"Configuring Checker Framework for project '{project.name}' ({trigger})")
        self.setups[project] = configure_project(project, trigger, self.settings)


def configure_project(
    project: "Project",
    trigger: str,
    settings: CheckerSettings | None = None,
) -> ProjectSetup:
    """Configure one project for the Checker Framework.

    Resolves the annotated JDK variant before touching the project, so an
    unsupported Java version leaves it unmodified.

    Args:
        project: Project to configure.
        trigger: Plugin id that activated configuration.
        settings: Artifact coordinates and default checkers.

    Returns:
        ProjectSetup describing the changes.

    Raises:
        UnsupportedVersionError: If the project does not target Java 7 or 8.
    """
    settings = settings or CheckerSettings()
    tag = resolve_version_tag(project)

    project.plugins.apply(APT_PLUGIN_ID)
    extension = project.extensions.create(
        EXTENSION_NAME,
        CheckerExtension,
        checkers=list(settings.default_checkers),
    )

    merge = merge_configurations(project, build_dependency_table(tag, settings))
    logger.info(
        f"Project '{project.name}': annotated {tag.value}, "
        f"{len(merge.created)} configuration(s) created, {len(merge.extended)} extended"
    )

    augmenter = TaskAugmenter(project, extension)
    augmenter.register()

    return ProjectSetup(
        project=project,
        trigger=trigger,
        tag=tag,
        extension=extension,
        merge=merge,
        augmenter=augmenter,
    )
