"""CLI interface for site-audit."""

import json
import sys

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import __version__
from .auditor import analyze
from .config import get_settings
from .errors import FetchError, ValidationError
from .logger import configure_logging
from .models import CATEGORIES, CheckResult, Impact, Report

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CATEGORY_LABELS = {
    "seo": "SEO",
    "performance": "Performance",
    "security": "Security",
    "mobile": "Mobile",
    "usability": "Usability",
    "technologies": "Technologies",
    "social": "Social",
}


def score_color(score: int) -> str:
    """Get color for a score value."""
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    elif score >= 40:
        return "orange1"
    else:
        return "red"


def impact_style(impact: Impact) -> str:
    return {
        Impact.HIGH: "red",
        Impact.MEDIUM: "yellow",
        Impact.LOW: "blue",
    }[impact]


def score_bar(score: int, width: int = 20) -> Text:
    """Create a visual score bar."""
    filled = int((score / 100) * width)
    color = score_color(score)

    bar = Text()
    bar.append("█" * filled, style=color)
    bar.append("░" * (width - filled), style="dim")
    bar.append(f" {score}/100", style=f"bold {color}")
    return bar


def print_check(check: CheckResult, show_fix: bool) -> None:
    if check.passed:
        console.print(f"  [green]✓[/green] [bold]{check.title}[/bold]: {escape(check.description)}")
    else:
        style = impact_style(check.impact)
        console.print(
            f"  [{style}]✗[/] [bold]{check.title}[/bold]: {escape(check.description)} "
            f"[dim]({check.impact.value} impact, {check.difficulty.value} fix)[/dim]"
        )
    for detail in check.details:
        console.print(f"    [dim]{escape(detail)}[/dim]")
    if show_fix and not check.passed and check.how_to_fix:
        for line in check.how_to_fix.splitlines():
            console.print("    " + line, markup=False, style="cyan")


def print_report(report: Report, verbose: bool = False) -> None:
    """Print a report to the console."""
    console.print()
    status = f"HTTP {report.status_code}" if report.status_code is not None else "not fetched"
    console.print(Panel(
        f"[bold]{report.url}[/bold]\n"
        f"[dim]{status}, fetched in {report.response_time_ms}ms[/dim]",
        title="🔍 Site Audit",
        border_style="blue",
    ))

    console.print()
    console.print("  Overall Score: ", end="")
    console.print(score_bar(report.overall_score, width=25))
    console.print()

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Score")
    table.add_column("Checks", justify="right")

    for name in CATEGORIES:
        section = report.section(name)
        failed = sum(1 for c in section.checks if not c.passed)
        status_text = f"[red]{failed} failed[/red]" if failed else "[green]OK[/green]"
        table.add_row(CATEGORY_LABELS[name], score_bar(section.score), status_text)

    console.print(table)

    if verbose:
        for name in CATEGORIES:
            section = report.section(name)
            if not section.checks:
                continue
            console.print(f"\n[bold]{CATEGORY_LABELS[name]}[/bold]\n")
            for check in section.checks:
                print_check(check, show_fix=True)
    else:
        issues = report.failed_checks
        if issues:
            console.print("\n[bold]Issues Found:[/bold]\n")
            for check in issues:
                print_check(check, show_fix=False)
                fix = check.recommendation or (check.how_to_fix.splitlines() or [""])[0]
                console.print(f"    [cyan]→ {escape(fix)}[/cyan]")

    console.print()
    console.print("[dim]─" * 50 + "[/dim]")
    console.print(f"[dim]site-audit v{__version__}[/dim]")
    console.print()


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__)
def cli(ctx):
    """Site Audit - score a web page across SEO, performance, security and more.

    \b
    Quick start:
        site-audit scan example.com
        site-audit example.com --json
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("url")
@click.option("-v", "--verbose", is_flag=True, help="Show every check with remediation")
@click.option("-t", "--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default from SITE_AUDIT_LOG_LEVEL)",
)
def scan(url: str, verbose: bool, timeout: float | None, json_output: bool, log_level: str | None):
    """Audit a URL.

    \b
    Examples:
        site-audit scan stripe.com
        site-audit scan example.com --verbose
        site-audit scan example.com --json
    """
    settings = get_settings()
    configure_logging(log_level or settings.log_level)

    try:
        if json_output:
            report = analyze(url, timeout=timeout, settings=settings)
        else:
            with console.status(f"[bold blue]Scanning {url}...[/bold blue]"):
                report = analyze(url, timeout=timeout, settings=settings)
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except FetchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(report, verbose=verbose)


# Convenience: allow `site-audit URL` as shortcut for `site-audit scan URL`
def main():
    """Entry point that handles both `site-audit URL` and `site-audit scan URL`."""
    args = sys.argv[1:]

    if args and not args[0].startswith("-") and args[0] != "scan":
        if "." in args[0] or "://" in args[0] or args[0].startswith("localhost"):
            sys.argv.insert(1, "scan")

    cli()


if __name__ == "__main__":
    main()
