"""Console reporter: RuntimeBuildResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from bundledruntime.domain.model.framework import DetectedFramework, PlainApplication

if TYPE_CHECKING:
    from bundledruntime.domain.model.build_result import RuntimeBuildResult
    from bundledruntime.domain.model.framework import FrameworkDetection


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Rendering switches for ConsoleReporter.

    Attributes:
        show_modules: List every module in its own row.
        show_options: Show linker pass-through options.
        force_terminal: Emit ANSI styles even when not writing to a tty.
        width: Console width in characters.
    """

    show_modules: bool = True
    show_options: bool = True
    force_terminal: bool = True
    width: int = 120


def describe_framework(framework: FrameworkDetection) -> str:
    """Human-readable framework detection outcome."""
    match framework:
        case DetectedFramework(name=name, marker=None):
            return f"{name} (configured)"
        case DetectedFramework(name=name, marker=marker):
            return f"{name} (marker {marker})"
        case PlainApplication():
            return "none"
    return "none"


class ConsoleReporter:
    """Renders a build summary with rich.

    report() returns the rendered text; writing it is up to the caller.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Rendering switches (default ConsoleConfig())
        """
        self._config = config if config is not None else ConsoleConfig()

    def report(self, result: RuntimeBuildResult) -> str:
        """Format build result as rich formatted string.

        Args:
            result: Published runtime image result.

        Returns:
            Formatted string with a summary table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        console.rule("[bold]BUNDLED RUNTIME[/bold]")
        console.print(self._summary_table(result))

        if self._config.show_modules:
            self._render_modules(console, result)

        return output.getvalue()

    def _summary_table(self, result: RuntimeBuildResult) -> Table:
        """Key/value summary of the run."""
        table = Table(show_header=False, box=None)
        table.add_column("Field", style="bold")
        table.add_column("Value")

        table.add_row("Destination", str(result.destination))
        table.add_row("Modules", f"{len(result.modules)} ({self._mode(result)})")
        table.add_row("Framework", describe_framework(result.framework))
        if self._config.show_options:
            table.add_row("jlink options", " ".join(result.jlink_options) or "-")
        return table

    def _render_modules(self, console: Console, result: RuntimeBuildResult) -> None:
        """Render modules in linker order."""
        table = Table(title="Modules")
        table.add_column("#", justify="right")
        table.add_column("Module", style="cyan")
        for index, name in enumerate(result.modules, start=1):
            table.add_row(str(index), name)
        console.print(table)

    @staticmethod
    def _mode(result: RuntimeBuildResult) -> str:
        return "auto-detected" if result.auto_detected else "configured"
