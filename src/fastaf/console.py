"""Terminal output for the fastaf workflow."""

from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from rich.console import Console
from rich.markup import escape


class Reporter:
    """Renders progress and results of a run on the terminal.

    Args:
        console: rich Console for progress output (stdout if omitted)
        err_console: rich Console for error lines (stderr if omitted)
    """

    def __init__(self, console: Optional[Console] = None,
                 err_console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def info(self, text: str) -> None:
        self.console.print(f"[blue]{escape(text)}[/blue]")

    def hint(self, text: str) -> None:
        self.console.print(f"[bright_black]{escape(text)}[/bright_black]")

    def notice(self, text: str) -> None:
        self.console.print(f"[yellow]{escape(text)}[/yellow]")

    def success(self, text: str) -> None:
        self.console.print(f"[green]✅ {escape(text)}[/green]")

    def failure(self, text: str) -> None:
        self.err_console.print(f"[red]❌ {escape(text)}[/red]")

    def file_list(self, paths: Sequence[str]) -> None:
        self.console.print(f"[cyan]📝 Found {len(paths)} changed file(s):[/cyan]")
        for path in paths:
            self.console.print(f"[bright_black]  - {escape(path)}[/bright_black]")

    def message(self, message: str) -> None:
        self.console.print(f'[cyan]💬 Generated message: "{escape(message)}"[/cyan]')

    @contextmanager
    def step(self, text: str, done: str, failed: str) -> Iterator[None]:
        """Show a spinner while the block runs, then a result line.

        Exceptions raised inside the block are re-raised after the failure
        line is printed.

        Args:
            text: Spinner text while the step runs
            done: Line printed when the block completes (may contain rich markup)
            failed: Line printed when the block raises
        """
        try:
            with self.console.status(escape(text)):
                yield
        except BaseException:
            self.console.print(f"[red]✖ {escape(failed)}[/red]")
            raise
        self.console.print(f"[green]✔[/green] {done}")
