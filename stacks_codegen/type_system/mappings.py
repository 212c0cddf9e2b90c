"""
Type mappings and constants for Clarity to TypeScript generation.

This module contains the tables used to map Clarity types onto their
TypeScript equivalents and onto the `Cl.*` value constructors from
@stacks/transactions, plus the package names and well-known addresses the
generated code refers to.
"""

from typing import Dict, Optional, Tuple

from ..abi.types import (
    UIntType,
    IntType,
    BoolType,
    PrincipalType,
    StringAsciiType,
    StringUtf8Type,
)


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

# Clarity types with a fixed TypeScript type and a one-call Cl constructor
SIMPLE_TYPE_MAP: Dict[type, Tuple[str, str]] = {
    UIntType: ('bigint', 'Cl.uint'),
    IntType: ('bigint', 'Cl.int'),
    BoolType: ('boolean', 'Cl.bool'),
    PrincipalType: ('string', 'Cl.principal'),
    StringAsciiType: ('string', 'Cl.stringAscii'),
    StringUtf8Type: ('string', 'Cl.stringUtf8'),
}

# Buffer arguments accept raw bytes, a string, or a tagged encoding
BUFFER_ENCODINGS = ('ascii', 'utf8', 'hex')
BUFFER_TAGGED_TYPE = "{ type: " + " | ".join(f"'{e}'" for e in BUFFER_ENCODINGS) + "; value: string }"
BUFFER_TS_TYPE = f'Uint8Array | string | {BUFFER_TAGGED_TYPE}'

BUFFER_CONSTRUCTORS: Dict[str, str] = {
    'bytes': 'Cl.buffer',
    'ascii': 'Cl.bufferFromAscii',
    'utf8': 'Cl.bufferFromUtf8',
    'hex': 'Cl.bufferFromHex',
}

OPAQUE_TS_TYPE = 'any'


# =============================================================================
# GENERATED MODULE IMPORTS
# =============================================================================

TYPES_PACKAGE = '@secondlayer/clarity-types'
TRANSACTIONS_PACKAGE = '@stacks/transactions'
CONNECT_PACKAGE = '@stacks/connect'
REACT_QUERY_PACKAGE = '@tanstack/react-query'
REACT_PACKAGE = 'react'

TYPE_IMPORTS = ('ClarityContract', 'ContractCallParams', 'ExtractFunctionArgs', 'ReadOnlyCallParams')
VALUE_CONSTRUCTOR_NAMESPACE = 'Cl'
READ_PRIMITIVE = 'fetchCallReadOnlyFunction'
WRITE_PRIMITIVE = 'makeContractCall'
WALLET_PRIMITIVE = 'openContractCall'


# =============================================================================
# NETWORKS AND ADDRESSES
# =============================================================================

NETWORKS = ('mainnet', 'testnet', 'devnet', 'simnet')
HELPER_NETWORKS = ('mainnet', 'testnet', 'devnet')
DEFAULT_NETWORK = 'mainnet'

# Burn address used as the sender of read-only calls when none is given
READ_ONLY_SENDER_ADDRESS = 'SP000000000000000000002Q6VF78'

# Deployer used for local contracts without a configured address
LOCAL_DEPLOYER_ADDRESS = 'ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM'

HIRO_API_URLS: Dict[str, str] = {
    'mainnet': 'https://api.hiro.so',
    'testnet': 'https://api.testnet.hiro.so',
    'devnet': 'http://localhost:3999',
}

ANCHOR_MODES = '1 | 2 | 3'


def helper_network(network: Optional[str]) -> str:
    """Network name usable by the generated helpers (simnet runs as devnet)."""
    if network in HELPER_NETWORKS:
        return network
    if network == 'simnet':
        return 'devnet'
    return DEFAULT_NETWORK
