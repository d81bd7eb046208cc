"""
Chain - On-chain access layer for basekit.

Provides the JSON-RPC client, signing credential loading, transaction
helpers and builder activity tracking for Base networks.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
