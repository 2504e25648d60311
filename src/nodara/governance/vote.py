"""
Governance Vote - Cast a vote on an existing proposal.
"""

from __future__ import annotations

from typing import Optional

import click

from .runner import api_url_option, run_and_report, verbose_option


@click.command()
@click.argument("proposal_id")
@click.argument("vote", type=click.BOOL)
@api_url_option
@verbose_option
def vote(proposal_id: str, vote: bool, api_url: Optional[str]) -> None:
    """
    Cast a vote on a proposal.

    VOTE is true to approve, false to reject.
    """
    run_and_report(
        api_url,
        lambda client: client.vote_proposal(proposal_id, vote),
        success="Vote recorded successfully:",
        action="voting",
    )
