"""Console reporter — renders an AnalysisResult with Rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from routelint.scanner.models import AnalysisResult, Severity

_SEVERITY_SECTIONS = [
    (Severity.HIGH, "red", "🚨 HIGH SEVERITY ISSUES:", "❌"),
    (Severity.MEDIUM, "yellow", "⚠️  MEDIUM SEVERITY ISSUES:", "⚠️ "),
    (Severity.LOW, "blue", "🔍 LOW SEVERITY ISSUES:", "ℹ️ "),
]

NEXT_STEPS = [
    "Run `routelint debug --html` to generate an interactive report",
    "Use the generated HTML file to debug issues in real-time",
    "Test route stability with the interactive debug tools",
    "Monitor console logs for unmount messages during navigation",
]


def print_header(console: Console, directory: str, title: str) -> None:
    console.print(f"[bold]🔧 {title}[/bold]")
    console.print("=" * (len(title) + 3))
    console.print(
        f"🎯 Analyzing: [cyan]{escape(directory)}[/cyan]\n", soft_wrap=True, emoji=False
    )


def print_results(
    console: Console, result: AnalysisResult, verbose: bool = False
) -> None:
    """Print the analysis summary, grouped issues and recommendations."""
    if verbose:
        _print_file_table(console, result)

    console.print("\n[bold]📊 Analysis Complete[/bold]")
    console.print(f"Files analyzed: {result.stats.analyzed}")
    console.print(f"Files with issues: {result.stats.with_issues}")
    console.print(f"Total issues: {len(result.issues)}")

    for severity, color, heading, icon in _SEVERITY_SECTIONS:
        issues = result.issues_for(severity)
        if not issues:
            continue
        console.print(f"\n[bold {color}]{heading}[/bold {color}]")
        for issue in issues:
            console.print(
                f"  {icon} {escape(issue.file)}: {escape(issue.message)}",
                soft_wrap=True,
                emoji=False,
            )

    if result.recommendations:
        console.print("\n[bold]💡 RECOMMENDATIONS:[/bold]")
        for rec in result.recommendations:
            prefix = f"{escape(rec.file)}: " if rec.file else ""
            console.print(
                f"  💡 {prefix}{escape(rec.message)}", soft_wrap=True, emoji=False
            )

    if not result.issues:
        console.print(
            "\n[green]✅ No route unmounting issues detected! "
            "Your routing looks stable.[/green]"
        )
        return

    console.print(
        f"\n📈 SUMMARY: Found {len(result.issues)} issues "
        f"across {len(result.files_with_issues)} files"
    )
    console.print("\n[bold]📋 NEXT STEPS:[/bold]")
    for number, step in enumerate(NEXT_STEPS, start=1):
        console.print(f"{number}. {escape(step)}")


def _print_file_table(console: Console, result: AnalysisResult) -> None:
    """Per-file issue counts, one row per analyzed file."""
    counts: dict[str, dict[Severity, int]] = {
        f: {s: 0 for s in Severity} for f in result.files
    }
    for issue in result.issues:
        counts.setdefault(issue.file, {s: 0 for s in Severity})
        counts[issue.file][issue.severity] += 1

    table = Table(title="Files", show_lines=False)
    table.add_column("File", style="cyan")
    table.add_column("High", justify="right", style="red")
    table.add_column("Medium", justify="right", style="yellow")
    table.add_column("Low", justify="right", style="blue")

    for file_path, by_severity in counts.items():
        table.add_row(
            escape(file_path),
            str(by_severity[Severity.HIGH]),
            str(by_severity[Severity.MEDIUM]),
            str(by_severity[Severity.LOW]),
        )

    console.print(table)
