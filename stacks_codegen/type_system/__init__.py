"""
Type system module for the Clarity to TypeScript generator.

This module provides the Clarity to TypeScript type tables and the constants
the generated code depends on.
"""

from .mappings import (
    SIMPLE_TYPE_MAP,
    BUFFER_TS_TYPE,
    BUFFER_TAGGED_TYPE,
    BUFFER_CONSTRUCTORS,
    BUFFER_ENCODINGS,
    OPAQUE_TS_TYPE,
    NETWORKS,
    DEFAULT_NETWORK,
    READ_ONLY_SENDER_ADDRESS,
    LOCAL_DEPLOYER_ADDRESS,
)

__all__ = [
    'SIMPLE_TYPE_MAP',
    'BUFFER_TS_TYPE',
    'BUFFER_TAGGED_TYPE',
    'BUFFER_CONSTRUCTORS',
    'BUFFER_ENCODINGS',
    'OPAQUE_TS_TYPE',
    'NETWORKS',
    'DEFAULT_NETWORK',
    'READ_ONLY_SENDER_ADDRESS',
    'LOCAL_DEPLOYER_ADDRESS',
]
