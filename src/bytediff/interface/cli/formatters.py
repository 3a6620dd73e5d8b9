"""
CLI result formatters for displaying diff reports and case listings.

Separates display logic from command logic.
"""

import json
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bytediff.domain.models import DiffReport, ReportStatus

console = Console()

STATUS_STYLES = {
    ReportStatus.EQUAL: "[green]✅ equal[/green]",
    ReportStatus.LENGTH_MISMATCH: "[yellow]⚠️  length_mismatch[/yellow]",
    ReportStatus.NOT_EQUAL: "[red]❌ not_equal[/red]",
}


class ReportFormatter:
    """Renders a diff report as a Rich table or as JSON."""

    def display_report(self, report: DiffReport, title: Optional[str] = None) -> None:
        """
        Display a report with one table row per insight.

        Args:
            report: Report to display
            title: Optional heading (e.g. the case name)
        """
        if title:
            console.print(f"[blue]📋 {escape(title)}[/blue]")
        console.print(f"Status: {STATUS_STYLES[report.status]}")

        if not report.insights:
            return

        table = Table(title="🔍 Differing runs")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Offset", style="cyan", justify="right")
        table.add_column("Length", style="magenta", justify="right")
        table.add_column("Range", style="blue")

        for number, insight in enumerate(report.insights, start=1):
            table.add_row(
                str(number),
                str(insight.offset),
                str(insight.length),
                f"{insight.offset}..{insight.end - 1}",
            )

        console.print(table)
        console.print(
            f"\n[blue]📊 Summary: {report.differing_bytes} differing bytes "
            f"in {len(report.insights)} runs[/blue]"
        )

    def report_json(self, report: DiffReport) -> str:
        return json.dumps(report.to_dict())


def display_case_names(names: List[str]) -> None:
    """Display stored case names."""
    if not names:
        console.print("[yellow]⚠️  No diff cases stored[/yellow]")
        return

    table = Table(title="🗄️ Diff cases")
    table.add_column("Name", style="cyan")
    for name in names:
        table.add_row(escape(name))
    console.print(table)
