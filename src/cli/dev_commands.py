"""Development environment CLI commands."""

import typer
from rich.panel import Panel
from rich.prompt import Confirm

from src.library_api.core.services import DbSessionService
from src.library_api.core.services.database.db_manage import DbManageService
from src.library_api.runtime.context import get_config

from .utils import console, get_project_root, run_command

dev_app = typer.Typer(help="🚀 Development environment commands")


@dev_app.command(name="start-server")
def start_server(
    host: str = typer.Option("0.0.0.0", help="Host to bind the server to"),
    port: int = typer.Option(8000, help="Port to bind the server to"),
    reload: bool = typer.Option(True, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the FastAPI development server.
    """
    console.print(
        Panel.fit(
            "[bold green]Starting Library API Development Server[/bold green]",
            border_style="green",
        )
    )

    cmd = [
        "uvicorn",
        "src.library_api.api.http.app:app",
        "--host",
        host,
        "--port",
        str(port),
        "--log-level",
        log_level,
        "--no-access-log",
    ]

    if reload:
        cmd.extend(["--reload", "--reload-dir", "src"])

    console.print(f"[blue]Running:[/blue] {' '.join(cmd)}")
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    try:
        run_command(cmd, cwd=get_project_root())
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")


@dev_app.command(name="init-db")
def init_database() -> None:
    """
    🗄️ Create the database tables.
    """
    DbManageService(DbSessionService().engine).create_all()
    console.print(
        f"[green]✅ Database ready at {get_config().database.url}[/green]"
    )


@dev_app.command(name="reset-db")
def reset_database(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    💥 Drop and recreate every table. All books are lost.
    """
    if not yes and not Confirm.ask(
        f"Drop all tables in {get_config().database.url}?", default=False
    ):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(0)

    manage = DbManageService(DbSessionService().engine)
    manage.drop_all()
    manage.create_all()
    console.print("[green]✅ Database reset[/green]")
