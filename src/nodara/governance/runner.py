"""Shared plumbing for the governance commands."""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any, Awaitable, Callable, Optional

import click

from ..config import API_URL_ENV_VAR, configure_logging, get_api_url
from ..rpc.errors import NodaraError
from .client import GovernanceClient


def api_url_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--api-url",
        envvar=API_URL_ENV_VAR,
        default=None,
        help="Nodara governance API URL (default: testnet)",
    )(func)


def _enable_verbose(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        configure_logging(verbose=True)


def verbose_option(func: Callable[..., Any]) -> Callable[..., Any]:
    # Same flag as the top-level group, accepted after the subcommand too
    return click.option(
        "--verbose",
        "-v",
        is_flag=True,
        expose_value=False,
        callback=_enable_verbose,
        help="Enable debug logging.",
    )(func)


def format_result(result: Any) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


def run_and_report(
    api_url: Optional[str],
    call: Callable[[GovernanceClient], Awaitable[Any]],
    *,
    success: str,
    action: str,
) -> None:
    """
    Run one governance call and print its outcome.

    Args:
        api_url: Endpoint override; falls back to the configured URL
        call: Coroutine factory taking the client
        success: Headline printed above the result
        action: Noun phrase used in the error line (e.g. "voting")
    """
    client = GovernanceClient(api_url if api_url is not None else get_api_url())

    try:
        result = asyncio.run(call(client))
    except NodaraError as exc:
        click.secho(f"Error during {action}: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    click.secho(success, fg="green")
    click.echo(format_result(result))
