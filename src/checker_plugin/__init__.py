"""Checker Framework build plugin."""

from src.checker_plugin.augmenter import TaskAugmenter
from src.checker_plugin.dependencies import build_dependency_table
from src.checker_plugin.merger import MergeResult, merge_configurations
from src.checker_plugin.plugin import CheckerPlugin, ProjectSetup, configure_project
from src.checker_plugin.version import detect_java_version, resolve_version_tag, to_version_tag

__all__ = [
    "CheckerPlugin",
    "ProjectSetup",
    "configure_project",
    "TaskAugmenter",
    "MergeResult",
    "merge_configurations",
    "build_dependency_table",
    "detect_java_version",
    "resolve_version_tag",
    "to_version_tag",
]
