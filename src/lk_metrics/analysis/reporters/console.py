"""Console reporter for class metrics."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from ..metrics import ClassInfo

console = Console()


class ConsoleReporter:
    """Console reporter for displaying class metrics in terminal."""

    def __init__(self, output: Console | None = None) -> None:
        self.console = output or console

    def print_summary(self, class_infos: Sequence[ClassInfo]) -> None:
        """Print corpus-level summary.

        Args:
            class_infos: Metrics for every analyzed class
        """
        self.console.print("\n[bold blue]📐 Lorenz & Kidd Class Metrics[/bold blue]")
        self.console.print("━" * 60)
        self.console.print()

        methods = sum(info.method_count for info in class_infos)
        overridden = sum(info.overridden_operations for info in class_infos)
        total_complexity = sum(info.operation_complexity for info in class_infos)
        avg_complexity = total_complexity / methods if methods else 0.0

        self.console.print("[bold]Corpus Summary[/bold]")
        self.console.print(f"  Classes Analyzed: {len(class_infos)}")
        self.console.print(f"  Methods: {methods} ({overridden} overridden)")
        self.console.print(f"  Avg Method Complexity: {avg_complexity:.1f}")
        self.console.print()

    def print_classes(self, class_infos: Sequence[ClassInfo], top: int | None = None) -> None:
        """Print per-class metrics, most complex classes first.

        Args:
            class_infos: Metrics for every analyzed class
            top: Maximum number of classes to display (all when None)
        """
        if not class_infos:
            self.console.print("  No classes found")
            self.console.print()
            return

        ranked = sorted(class_infos, key=lambda c: c.operation_complexity, reverse=True)
        if top is not None:
            ranked = ranked[:top]

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Class", style="cyan", no_wrap=True, min_width=12)
        table.add_column("Parent", no_wrap=True)
        table.add_column("Size", justify="right")
        table.add_column("DIT", justify="right")
        table.add_column("NOO", justify="right")
        table.add_column("NOA", justify="right")
        table.add_column("SI", justify="right")
        table.add_column("OC", justify="right")
        table.add_column("NP", justify="right")

        for info in ranked:
            table.add_row(
                info.name,
                info.parent_name or "[dim]-[/dim]",
                f"{info.class_size}",
                f"{info.inheritance_depth}",
                f"{info.overridden_operations}",
                f"{info.added_operations}",
                f"{info.specialization_index:.2f}",
                f"{info.operation_complexity:.1f}",
                f"{info.average_parameters_per_operation:.2f}",
            )

        self.console.print(table)
        self.console.print()
        self.console.print(
            "[dim]DIT: inheritance depth · NOO/NOA: overridden/added operations · "
            "SI: specialization index · OC: operation complexity · "
            "NP: avg parameters per operation[/dim]"
        )
