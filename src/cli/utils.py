"""Shared utilities for CLI commands."""

import subprocess
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console

from src.library_api.core.services import BookService, DbSessionService
from src.library_api.core.services.database.db_manage import DbManageService
from src.library_api.entities.service.book import BookRepository

console = Console()


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


def run_command(
    command: list[str],
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run a shell command with proper error handling."""
    try:
        return subprocess.run(
            command,
            cwd=cwd or get_project_root(),
            check=check,
            text=True,
        )
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Command failed: {' '.join(command)}[/red]")
        console.print(f"[red]Exit code: {e.returncode}[/red]")
        raise typer.Exit(1) from e


@contextmanager
def book_service_scope(
    database_service: DbSessionService | None = None,
) -> Iterator[BookService]:
    """Yield a book service bound to a committed-on-success session."""
    database_service = database_service or DbSessionService()
    DbManageService(database_service.engine).create_all()
    with database_service.session_scope() as session:
        yield BookService(BookRepository(session))
