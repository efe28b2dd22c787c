"""Rich console output formatter."""

from typing import Any, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.markup import escape

from ..core.models import MetadataRecord, MetadataKey
from ..core.registry import MetadataRegistry
from .. import interface

# Keys rendered in the header rather than the properties table
HEADER_KEYS = (MetadataKey.NAME.value, MetadataKey.SIGNATURE.value, MetadataKey.DOCUMENTATION.value)

STABILITY_STYLES = {
    "deprecated": "red",
    "experimental": "yellow",
    "stable": "green",
    "locked": "blue"
}


class ConsoleFormatter:
    """Formats metadata records for rich console output."""

    def __init__(self, console: Optional[Console] = None, registry: Optional[MetadataRegistry] = None):
        """
        Initialize console formatter.

        Args:
            console: Rich console instance (creates new one if None)
            registry: Registry to read metadata from (the shared one if None)
        """
        self.console = console or Console()
        self.registry = registry

    def format(self, obj: Any) -> None:
        """
        Print the metadata of an object to console.

        Args:
            obj: Object whose metadata is rendered
        """
        record = self.registry.get(obj) if self.registry is not None else interface.get(obj)
        self.format_record(record, fallback_name=getattr(obj, '__name__', None) or type(obj).__name__)

    def format_record(self, record: MetadataRecord, fallback_name: Optional[str] = None) -> None:
        """
        Print an already resolved metadata record to console.

        Args:
            record: Metadata record to format
            fallback_name: Title used when the record has no name
        """
        self.console.print()
        self._print_header(record, fallback_name)

        if not record:
            self.console.print("  [dim]No metadata found[/dim]")
            return

        self._print_properties(record)

    def _print_header(self, record: MetadataRecord, fallback_name: Optional[str]) -> None:
        """Print name, signature and documentation."""
        name = record.get(MetadataKey.NAME.value) or fallback_name or "<anonymous>"
        title = Text(str(name), style="bold blue")

        lines = []
        signature = record.get(MetadataKey.SIGNATURE.value)
        if signature:
            lines.append(f"[bold]{escape(str(signature))}[/bold]")
        documentation = record.get(MetadataKey.DOCUMENTATION.value)
        if documentation:
            lines.append(escape(str(documentation).strip()))

        panel = Panel.fit(
            "\n\n".join(lines) if lines else "[dim]Not documented[/dim]",
            title=title,
            border_style="blue"
        )
        self.console.print(panel)

    def _print_properties(self, record: MetadataRecord) -> None:
        """Print every remaining key as a table row."""
        rows = [(key, value) for key, value in record.items() if key not in HEADER_KEYS]
        if not rows:
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        for key, value in sorted(rows, key=lambda row: str(row[0])):
            table.add_row(str(key), self._render_value(key, value))

        self.console.print(table)

    def _render_value(self, key: str, value: Any) -> str:
        if key == MetadataKey.STABILITY.value:
            value = getattr(value, 'value', value)
            style = STABILITY_STYLES.get(str(value), "white")
            return f"[{style}]{value}[/{style}]"
        if isinstance(value, (list, tuple)):
            return escape(", ".join(str(item) for item in value))
        if isinstance(value, str):
            return escape(value)
        return escape(getattr(value, '__name__', None) or repr(value))
