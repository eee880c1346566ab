"""Display components for CLI using Rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.models.integration import IntegrationReport
from src.plugin.checkers import KnownChecker

console = Console()


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_success(title: str, message: str) -> None:
    """Display a success message."""
    console.print()
    console.print(
        Panel(
            f"[bold green]{escape(message)}[/]",
            title=f"[bold]{title}[/]",
            border_style="green",
        )
    )


def show_known_checkers() -> None:
    """Display the bundled checkers."""
    table = Table(title="[bold]Bundled Checkers[/]")
    table.add_column("Short Name", style="cyan")
    table.add_column("Checker", style="white")

    for checker in KnownChecker:
        table.add_row(checker.short_name, checker.value)

    console.print(table)


def show_integration_report(report: IntegrationReport) -> None:
    """Display the plan of one plugin application.

    Args:
        report: Report produced by the planner.
    """
    console.print()

    summary = Table(show_header=False, box=None)
    summary.add_column("Field", style="cyan")
    summary.add_column("Value", style="white")
    summary.add_row("Project", escape(report.project))
    summary.add_row("Checkers", escape(report.checkers) or "[yellow](none)[/]")
    summary.add_row(
        "Requested Tasks",
        escape(", ".join(report.requested_tasks)) or "[dim]all compile tasks[/]",
    )
    console.print(Panel(summary, title="[bold]Checker Framework[/]", border_style="cyan"))

    if not report.tasks:
        console.print("[yellow]No compile task was modified.[/]")
        return

    table = Table(title="[bold]Compiler Arguments[/]")
    table.add_column("Task", style="cyan")
    table.add_column("Provider", style="magenta")
    table.add_column("Arguments", style="white")
    table.add_column("Fingerprint", style="dim")

    for integration in report.tasks:
        table.add_row(
            integration.task_name,
            integration.provider,
            escape(" ".join(repr(a) if not a else a for a in integration.arguments)),
            integration.fingerprint[:12],
        )

    console.print(table)
