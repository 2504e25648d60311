"""
Governance Execute - Run an approved proposal.
"""

from __future__ import annotations

from typing import Optional

import click

from .runner import api_url_option, run_and_report, verbose_option


@click.command()
@click.argument("proposal_id")
@api_url_option
@verbose_option
def execute(proposal_id: str, api_url: Optional[str]) -> None:
    """Execute an approved governance proposal."""
    run_and_report(
        api_url,
        lambda client: client.execute_proposal(proposal_id),
        success="Proposal executed successfully:",
        action="proposal execution",
    )
