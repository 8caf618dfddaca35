"""Rich renderer for changelog sections."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape as rich_escape
from rich.table import Table
from rich.text import Text

from changelog_tasks.models import Released, ReleaseNotes

KIND_STYLES = {
    "draft": "bold yellow",
    "released": "bold green",
}


class RichRenderer:
    """Rich table renderer for `changelog-tasks sections`."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize renderer with optional console.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self._console = console or Console()

    @property
    def console(self) -> Console:
        """Get the console instance."""
        return self._console

    def _format_kind(self, notes: ReleaseNotes) -> Text:
        kind = "released" if isinstance(notes.kind, Released) else "draft"
        return Text(kind, style=KIND_STYLES[kind])

    def build_table(self, release_notes: list[ReleaseNotes], title: str | None = None) -> Table:
        """Build a table with one row per section, in document order."""
        table = Table(box=box.ROUNDED, title=rich_escape(title) if title else None)
        table.add_column("CAPTION", style="bold")
        table.add_column("KIND")
        table.add_column("VERSION")
        table.add_column("LINES", justify="right")
        table.add_column("ENTRIES", justify="right")

        for notes in release_notes:
            version = str(notes.version) if notes.version is not None else "-"
            table.add_row(
                rich_escape(notes.caption),
                self._format_kind(notes),
                version,
                f"{notes.start_index + 1}-{notes.end_index + 1}",
                str(len(notes.lines)),
            )
        return table

    def render(self, release_notes: list[ReleaseNotes], title: str | None = None) -> None:
        self._console.print(self.build_table(release_notes, title))
