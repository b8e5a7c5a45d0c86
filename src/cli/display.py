"""Display components for CLI using Rich."""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.build_graph.project import Build, Project
from src.build_graph.tasks import CompileTask
from src.checker_plugin.plugin import ProjectSetup
from src.models.checker import DependencySpec

console = Console()


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_dependency_table(tag: str, table: list[DependencySpec]) -> None:
    """Display the configurations and coordinates for an annotated JDK variant."""
    output = Table(title=f"Checker Framework dependencies ({tag})", show_lines=False)
    output.add_column("Configuration", style="cyan", no_wrap=True)
    output.add_column("Coordinate", style="green")
    output.add_column("Description", style="dim")

    for row in table:
        output.add_row(
            row.configuration.name,
            row.coordinate,
            row.configuration.description or "-",
        )

    console.print(output)


def show_build_report(build: Build, setups: dict[Project, ProjectSetup]) -> None:
    """Display configurations and compile tasks of every project."""
    for project in build.projects.values():
        setup = setups.get(project)
        if setup is None:
            console.print(
                Panel(
                    "[dim]No Java or Android plugin applied; project left unchanged.[/dim]",
                    title=f"[bold]{escape(project.name)}[/]",
                    border_style="yellow",
                )
            )
            continue

        console.print()
        console.print(
            Panel(
                f"Triggered by: [cyan]{escape(setup.trigger)}[/]\n"
                f"Annotated JDK: [cyan]{setup.tag.value}[/]\n"
                f"Checkers: [cyan]{escape(', '.join(setup.extension.checkers) or '(none)')}[/]",
                title=f"[bold]{escape(project.name)}[/]",
                border_style="green",
            )
        )

        configurations = Table(title="Configurations")
        configurations.add_column("Name", style="cyan", no_wrap=True)
        configurations.add_column("Visible")
        configurations.add_column("Dependencies", style="green")
        configurations.add_column("Source", style="dim")
        for configuration in project.configurations:
            pending = configuration.has_pending_defaults
            configurations.add_row(
                configuration.name,
                "yes" if configuration.visible else "no",
                "\n".join(str(d) for d in configuration.resolved_dependencies()) or "-",
                "default" if pending else "declared",
            )
        console.print(configurations)

        tasks = Table(title="Compile tasks")
        tasks.add_column("Task", style="cyan", no_wrap=True)
        tasks.add_column("Compiler arguments")
        tasks.add_column("Boot classpath", style="dim")
        tasks.add_column("Fork")
        for task in project.tasks.with_type(CompileTask):
            tasks.add_row(
                task.name,
                escape("\n".join(task.options.compiler_args)) or "-",
                escape(task.options.boot_classpath or "-"),
                "yes" if task.options.fork else "no",
            )
        console.print(tasks)


def build_report(build: Build, setups: dict[Project, ProjectSetup]) -> dict[str, Any]:
    """Build a JSON-serializable report of the evaluated build."""
    projects: dict[str, Any] = {}
    for project in build.projects.values():
        setup = setups.get(project)
        projects[project.name] = {
            "configured": setup is not None,
            "trigger": setup.trigger if setup else None,
            "annotated_jdk": setup.tag.value if setup else None,
            "checkers": list(setup.extension.checkers) if setup else [],
            "configurations": [
                {
                    "name": c.name,
                    "description": c.description,
                    "visible": c.visible,
                    "dependencies": [str(d) for d in c.dependencies],
                    "default_dependencies": [str(d) for d in c.default_dependency_list],
                    "defaults_pending": c.has_pending_defaults,
                }
                for c in project.configurations
            ],
            "tasks": [
                {
                    "name": t.name,
                    "compiler_args": list(t.options.compiler_args),
                    "boot_classpath": t.options.boot_classpath,
                    "fork": t.options.fork,
                }
                for t in project.tasks.with_type(CompileTask)
            ],
        }
    return {"projects": projects}


def export_build_report_json(build: Build, setups: dict[Project, ProjectSetup]) -> str:
    """Render the report as indented JSON."""
    return json.dumps(build_report(build, setups), indent=2)
