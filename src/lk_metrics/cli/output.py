"""Rich output helpers for the CLI."""

from rich.console import Console

console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    error_console.print(f"[red]✗ {message}[/red]")


def print_info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {message}")


def print_success(message: str) -> None:
    console.print(f"[green]✓ {message}[/green]")
