"""
Nodara CLI

Command-line interface for the Nodara governance system.

Commands:
  governance submit   - Submit a parameter-change proposal
  governance vote     - Approve or reject a proposal
  governance execute  - Execute an approved proposal
  info                - Show version and configured endpoint
"""

from __future__ import annotations

import sys

import click

from .config import NODARA_ENV, configure_logging, get_api_url


# ============ Constants ============

VERSION = "0.1.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()
    click.echo(
        click.style("        N O D A R A", fg="bright_white", bold=True)
        + click.style(f"        v{VERSION}", dim=True)
    )
    click.secho("        ─── Governance Client ───", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="nodara")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Nodara — governance client."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Governance ============

from .governance.submit import submit
from .governance.vote import vote
from .governance.execute import execute


@cli.group()
def governance() -> None:
    """Submit, vote on, and execute proposals."""
    pass


governance.add_command(submit)
governance.add_command(vote)
governance.add_command(execute)


# ============ Info ============


@cli.command()
def info() -> None:
    """Show system information."""
    _print_banner()

    click.secho("  Status ─────────────────────────────────", fg="cyan")
    click.echo()
    click.echo(
        click.style("  Endpoint:    ", dim=True)
        + click.style(get_api_url(), fg="bright_white")
    )
    env_text = (
        click.style(str(NODARA_ENV), fg="bright_white")
        if NODARA_ENV.exists()
        else click.style("not found", fg="yellow") + click.style(f"  ({NODARA_ENV})", dim=True)
    )
    click.echo(click.style("  Config:      ", dim=True) + env_text)
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """Nodara CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: old Python or non-tty
    cli()


if __name__ == "__main__":
    main()
