"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all human-facing CLI
messages. Messages go to standard error so that standard output carries
only the converted Markdown. Supports verbosity levels and --no-color flag.
"""

from rich.console import Console
from rich.markup import escape

from gmi2md.converter.models import ConversionResult


class OutputHandler:
    """Handles all terminal messages using Rich library.

    Provides methods for displaying messages and the conversion summary
    with color coding and verbosity level control.

    Attributes:
        verbosity: Verbosity level (0=errors only, 1=info and summary)
        console: Rich Console instance writing to stderr

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Conversion completed")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=errors only, 1=info and summary)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            stderr=True,
            force_terminal=False if no_color else None,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green (only if verbosity >= 1).

        Args:
            message: Success message to display
        """
        if self.verbosity >= 1:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red.

        Args:
            message: Error message to display
        """
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1).

        Args:
            message: Info message to display
        """
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def print_summary(self, result: ConversionResult) -> None:
        """Display conversion summary (only if verbosity >= 1).

        Warnings themselves are reported through logging by the converter,
        so only their presence is noted here.

        Args:
            result: Result of the conversion
        """
        if self.verbosity < 1:
            return

        line_count = result.metadata.get("line_count", 0)
        counts = result.metadata.get("category_counts", {})

        self.console.print("\n[bold]Conversion Summary:[/bold]")
        self.info(f"  Input lines: {line_count}")
        for category, count in sorted(counts.items()):
            self.console.print(f"  [dim]─[/dim] {category}: {count}")

        if result.warnings:
            self.console.print(
                f"\n[yellow]Conversion completed with {len(result.warnings)} warning(s)[/yellow]"
            )
        else:
            self.success("Conversion completed successfully")
