"""Book catalog CLI commands."""

import typer
from rich.table import Table

from src.library_api.core.errors import DuplicateIsbnError
from src.library_api.core.models.page import PageRequest
from src.library_api.entities.service.book import Book, BookCriteria
from src.library_api.runtime.context import get_config

from .utils import book_service_scope, console

books_app = typer.Typer(help="📚 Manage the book catalog")


@books_app.command("ls")
def list_books(
    title: str | None = typer.Option(None, "--title", "-t", help="Substring of the title"),
    author: str | None = typer.Option(None, "--author", "-a", help="Substring of the author"),
    isbn: str | None = typer.Option(None, "--isbn", "-i", help="Substring of the ISBN"),
    page: int = typer.Option(0, "--page", "-p", min=0, help="Zero-based page number"),
    size: int | None = typer.Option(None, "--size", "-s", min=1, help="Page size"),
) -> None:
    """List books matching the given filters."""
    size = size or get_config().pagination.default_size
    criteria = BookCriteria(title=title, author=author, isbn=isbn)

    with book_service_scope() as service:
        result = service.find(criteria, PageRequest(page=page, size=size))

    if not result.content:
        console.print("[yellow]No books found[/yellow]")
        return

    table = Table(title=f"Books (page {result.number + 1} of {result.total_pages})")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="green")
    table.add_column("Author", style="magenta")
    table.add_column("ISBN", style="blue")

    for book in result.content:
        table.add_row(str(book.id), book.title, book.author, book.isbn)

    console.print(table)
    console.print(f"\n[green]{result.total_elements} books match[/green]")


@books_app.command("add")
def add_book(
    title: str = typer.Argument(..., help="Book title"),
    author: str = typer.Option(..., "--author", "-a", help="Book author"),
    isbn: str = typer.Option(..., "--isbn", "-i", help="Book ISBN"),
) -> None:
    """Add a book to the catalog."""
    if not title.strip() or not author.strip() or not isbn.strip():
        console.print("[red]❌ Title, author and ISBN must not be blank[/red]")
        raise typer.Exit(code=1)

    try:
        with book_service_scope() as service:
            book = service.save(Book(title=title, author=author, isbn=isbn))
    except DuplicateIsbnError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Created book {book.id}: {book.title}[/green]")
