"""
CLI tool for the course library service.

Provides commands for inspecting the registered HTTP routes and for
creating the database schema during local development.
"""

import asyncio

import typer
from fastapi.routing import APIRoute
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from course_library.routing import collect_subrouters
from course_library.settings import app_settings
from course_library.storage.db import create_tables

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="course-library-cli",
    help="Course Library Management CLI - Inspect routes and manage the database",
    add_completion=False,
)
console = Console()


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered HTTP routes.

    Routes are listed in matching order.

    Example:
        python cli.py routes
    """
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registered HTTP Routes[/bold cyan]",
            border_style="cyan"
        )
    )
    console.print()

    table = Table(
        "Methods",
        "Path",
        "Name",
        title="HTTP Routes",
        show_lines=True,
    )

    count = 0
    for route in collect_subrouters().routes:
        if not isinstance(route, APIRoute):
            continue

        methods = ",".join(sorted(route.methods))
        name = route.name
        if not route.include_in_schema:
            name = f"[dim]{name} (alias)[/dim]"
        table.add_row(f"[green]{methods}[/green]", route.path, name)
        count += 1

    console.print(table)
    console.print()
    console.print(f"[bold]Summary:[/bold] {count} routes registered")
    console.print()


@typer_app.command(name="init-db")
def init_db():
    """
    Create all tables in the configured database.

    Intended for local development against SQLite; use
    `alembic upgrade head` for PostgreSQL.

    Example:
        DATABASE_URL_OVERRIDE=sqlite+aiosqlite:///./dev.db python cli.py init-db
    """
    console.print()
    try:
        asyncio.run(create_tables())
    except Exception as e:
        console.print(
            Panel.fit(
                f"[red]Could not create tables[/red]\n\n{e}",
                border_style="red",
                title="Error"
            )
        )
        console.print()
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            f"[green]✓ Tables created[/green]\n\n"
            f"Environment: [yellow]{app_settings.ENVIRONMENT}[/yellow]",
            border_style="green",
            title="Success"
        )
    )
    console.print()


if __name__ == "__main__":
    typer_app()
