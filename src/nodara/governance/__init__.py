"""
Governance - Client and commands for the Nodara governance system.

- client:  GovernanceClient (submit / vote / execute over RpcClient)
- submit:  Submit a parameter-change proposal
- vote:    Approve or reject a proposal
- execute: Execute an approved proposal
"""
