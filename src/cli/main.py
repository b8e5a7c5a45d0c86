"""Main CLI entry point for the Checker Framework build plugin."""

import sys
from pathlib import Path

import click

from src.build_graph.description import create_build, load_build_description
from src.checker_plugin.dependencies import build_dependency_table
from src.checker_plugin.plugin import CheckerPlugin
from src.cli.display import (
    console,
    export_build_report_json,
    show_build_report,
    show_dependency_table,
    show_error,
)
from src.core.config.settings import Settings, get_settings
from src.core.exceptions.errors import CheckerPluginError
from src.core.logger.logger import setup_logging
from src.models.java import VersionTag


def _load_settings(settings_path: Path | None) -> Settings:
    if settings_path is not None:
        return Settings.from_yaml(settings_path)
    return get_settings()


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def main(ctx: click.Context, version: bool) -> None:
    """checker-plugin - wire the Checker Framework into Java and Android builds."""
    if version:
        from src import __version__

        click.echo(f"checker-plugin version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.option(
    "--jdk",
    type=click.Choice(["7", "8"]),
    default="8",
    show_default=True,
    help="Java version of the project",
)
@click.option("--settings", "settings_path", type=click.Path(exists=True, path_type=Path), help="Settings YAML")
def table(jdk: str, settings_path: Path | None) -> None:
    """Show the configurations and artifacts the plugin adds.

    Example:
        checker-plugin table --jdk 7
    """
    try:
        settings = _load_settings(settings_path)
    except CheckerPluginError as e:
        show_error("Invalid settings", str(e))
        sys.exit(1)

    tag = VersionTag.JDK7 if jdk == "7" else VersionTag.JDK8
    show_dependency_table(tag.value, build_dependency_table(tag, settings.checker))


@main.command()
@click.argument("build_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--settings", "settings_path", type=click.Path(exists=True, path_type=Path), help="Settings YAML")
def apply(build_file: Path, as_json: bool, settings_path: Path | None) -> None:
    """Apply the plugin to a described build and show the result.

    Example:
        checker-plugin apply build.yaml --json
    """
    try:
        settings = _load_settings(settings_path)
        setup_logging(settings.logging)

        plugin = CheckerPlugin(settings.checker)
        description = load_build_description(build_file)
        build = create_build(description, plugin, base_dir=build_file.parent)
        build.evaluate()
    except CheckerPluginError as e:
        show_error("Build configuration failed", str(e))
        sys.exit(1)

    if as_json:
        click.echo(export_build_report_json(build, plugin.setups))
    else:
        show_build_report(build, plugin.setups)
        console.print()


if __name__ == "__main__":
    main()
