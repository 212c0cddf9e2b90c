"""
Contract resolution for the Clarity to TypeScript generator.

This module turns config entries into resolved contracts, applying the
per-network naming policy.
"""

from .resolver import ContractResolver, split_contract_id

__all__ = [
    'ContractResolver',
    'split_contract_id',
]
