"""
Governance Submit - Propose a network parameter change.
"""

from __future__ import annotations

from typing import Optional

import click

from .runner import api_url_option, run_and_report, verbose_option


@click.command()
@click.argument("description")
@click.argument("parameter")
@click.argument("value")
@api_url_option
@verbose_option
def submit(description: str, parameter: str, value: str, api_url: Optional[str]) -> None:
    """
    Submit a new governance proposal.

    DESCRIPTION is a concise summary, PARAMETER the network parameter
    to update and VALUE its new value.
    """
    run_and_report(
        api_url,
        lambda client: client.submit_proposal(description, parameter, value),
        success="Proposal submitted successfully:",
        action="proposal submission",
    )
