"""Plugin container with reactive, per-identifier activation listeners."""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol

from src.core.logger.logger import get_logger

if TYPE_CHECKING:
    from src.build_graph.project import Project

logger = get_logger(__name__)


class Plugin(Protocol):
    """A plugin that can be applied to a project."""

    id: str

    def apply(self, project: "Project") -> None:
        ...


class PluginContainer:
    """Tracks which plugin identifiers are active on a project.

    ``with_id`` registers an observer keyed by identifier: it runs right
    away when the identifier is already applied, otherwise as soon as it
    is. Identifiers without an implementation (ecosystem plugins the build
    only needs to know about) can be applied by id alone.
    """

    def __init__(self, project: "Project") -> None:
        self._project = project
        self._applied: list[str] = []
        self._instances: dict[str, Plugin] = {}
        self._listeners: dict[str, list[Callable[[str], None]]] = {}

    def apply(self, plugin: "str | Plugin") -> None:
        """Apply a plugin by id or instance; re-applying is a no-op.

        Args:
            plugin: Plugin identifier, or an object with ``id`` and ``apply``.
        """
        plugin_id = plugin if isinstance(plugin, str) else plugin.id
        if plugin_id in self._applied:
            return

        self._applied.append(plugin_id)
        logger.debug(f"Applied plugin '{plugin_id}' to project '{self._project.name}'")

        if not isinstance(plugin, str):
            self._instances[plugin_id] = plugin
            plugin.apply(self._project)

        for action in list(self._listeners.get(plugin_id, [])):
            action(plugin_id)

    def with_id(self, plugin_id: str, action: Callable[[str], None]) -> None:
        """Run ``action`` when ``plugin_id`` is (or becomes) applied.

        Args:
            plugin_id: Identifier to observe.
            action: Callback receiving the identifier.
        """
        self._listeners.setdefault(plugin_id, []).append(action)
        if plugin_id in self._applied:
            action(plugin_id)

    def has_plugin(self, plugin_id: str) -> bool:
        return plugin_id in self._applied

    def has_any(self, plugin_ids: Iterable[str]) -> bool:
        return any(p in self._applied for p in plugin_ids)

    def find_plugin(self, plugin_id: str) -> "Plugin | None":
        return self._instances.get(plugin_id)

    @property
    def applied(self) -> list[str]:
        return list(self._applied)
