"""Where: src/albumtags/ui/cli/display/result.py
What: Render a summary table of flow results.
Why: Keep console output formatting out of the flows.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from albumtags.application import FlowResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(self, results: list[FlowResult], quiet: bool = False) -> None:
        """Display flow results.

        Args:
            results: Results in execution order.
            quiet: Whether to suppress non-error output.
        """
        if quiet or not results:
            return

        table = Table(title="Summary")
        table.add_column("Command")
        table.add_column("Status")
        table.add_column("Files", justify="right")
        table.add_column("Details")

        for result in results:
            status = "[green]ok[/green]" if result.success else f"[red]{result.error_kind}[/red]"
            table.add_row(result.flow.value, status, str(result.files), Text(result.message or ""))

        self.console.print(table)
