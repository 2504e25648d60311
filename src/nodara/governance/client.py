"""
Governance Client - Submit, vote on, and execute Nodara proposals.

Thin wrappers over RpcClient.invoke: each operation has a fixed method
name and packs its arguments positionally. Results are returned exactly
as the node decoded them; proposal lifecycle lives on the node.
"""

from __future__ import annotations

from typing import Any

from ..rpc.client import RpcClient

SUBMIT_PROPOSAL = "nodara_submitProposal"
VOTE_PROPOSAL = "nodara_voteProposal"
EXECUTE_PROPOSAL = "nodara_executeProposal"


class GovernanceClient(RpcClient):
    """RpcClient bound to the Nodara governance methods."""

    async def submit_proposal(self, description: str, parameter: str, value: str) -> Any:
        """
        Submit a governance proposal.

        Args:
            description: A clear description of the proposal
            parameter: The network parameter to update
            value: The new value for the parameter

        Returns:
            Decoded submission response
        """
        return await self.invoke(SUBMIT_PROPOSAL, [description, parameter, value])

    async def vote_proposal(self, proposal_id: str, vote: bool) -> Any:
        """
        Vote on an existing proposal.

        Args:
            proposal_id: Proposal identifier
            vote: True to approve, False to reject

        Returns:
            Decoded vote response
        """
        return await self.invoke(VOTE_PROPOSAL, [proposal_id, vote])

    async def execute_proposal(self, proposal_id: str) -> Any:
        """Execute an approved proposal."""
        return await self.invoke(EXECUTE_PROPOSAL, [proposal_id])
