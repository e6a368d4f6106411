"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich for spinners, tables and colored text. Supports verbosity levels
and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.spinner import Spinner
from rich.table import Table

from src.webscript_client.models import ChangeBatch, MetadataRecord, UserAuthority


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Fetched 3 changes")
        >>> with handler.spinner("Fetching changes..."):
        ...     batch = client.fetch_changes(cursor)
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            no_color=no_color,
            highlight=False,
        )

    # Message text is escaped; only print() passes markup through
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def print(self, message: str) -> None:
        self.console.print(message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a single request is in flight."""
        if not self.console.is_terminal:
            yield
            return
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_batch(self, batch: ChangeBatch) -> None:
        """Display a change batch as a table followed by the new cursor."""
        table = Table(title=f"Changes in {batch.store_protocol}://{batch.store_id}")
        table.add_column("uuid")
        table.add_column("type")
        table.add_column("name")
        table.add_column("deleted")
        for doc in batch.documents:
            table.add_row(
                _cell(doc.uuid),
                _cell(doc.type),
                _cell(doc.name),
                "yes" if doc.is_deleted else "",
            )
        if batch.documents:
            self.console.print(table)
        else:
            self.console.print("[yellow]No changes[/yellow]")

        self.console.print(
            f"last_txn_id={batch.last_transaction_id} "
            f"last_acl_changeset_id={batch.last_acl_changeset_id}"
        )

    def print_metadata(self, record: MetadataRecord) -> None:
        table = Table(title=f"Metadata of {record.node_id}")
        table.add_column("name")
        table.add_column("value")
        for key in sorted(record):
            table.add_row(_cell(key), _cell(record[key]))
        self.console.print(table)

    def print_authorities(self, users: List[UserAuthority]) -> None:
        table = Table(title="User authorities")
        table.add_column("username")
        table.add_column("authorities")
        for user in users:
            table.add_row(escape(user.username), escape(", ".join(user.authorities)))
        self.console.print(table)


def _cell(value: Any) -> str:
    """Render a value for a table cell; None becomes an empty cell."""
    if value is None:
        return ""
    return escape(str(value))
