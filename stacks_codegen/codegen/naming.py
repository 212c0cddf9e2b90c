"""
Identifier utilities.

Converts Clarity naming conventions into TypeScript identifiers:
- get-token-uri -> getTokenUri
- is-owner? -> isOwner_
- daoContract on testnet -> testnetDaoContract
"""

import re
from typing import Dict, Optional, Set

from ..type_system.mappings import DEFAULT_NETWORK


# Words that cannot be used as bare parameter or variable names in TypeScript
RESERVED_WORDS: Set[str] = {
    'break', 'case', 'catch', 'class', 'const', 'continue', 'debugger',
    'default', 'delete', 'do', 'else', 'enum', 'export', 'extends', 'false',
    'finally', 'for', 'function', 'if', 'import', 'in', 'instanceof', 'new',
    'null', 'return', 'super', 'switch', 'this', 'throw', 'true', 'try',
    'typeof', 'var', 'void', 'while', 'with', 'yield', 'let', 'static',
    'implements', 'interface', 'package', 'private', 'protected', 'public',
    'await', 'arguments', 'eval', 'undefined',
}

_KEBAB_SEGMENT = re.compile(r'-([a-z])')
_INVALID_IDENTIFIER_CHARS = re.compile(r'[^A-Za-z0-9_$]')
_VALID_IDENTIFIER = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')


def to_camel_case(name: str) -> str:
    """Replace every '-x' with 'X' (get-token-uri -> getTokenUri)."""
    return _KEBAB_SEGMENT.sub(lambda m: m.group(1).upper(), name)


def capitalize(name: str) -> str:
    """Uppercase the first character only."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def is_identifier(name: str) -> bool:
    """True if name can be written unquoted as a TypeScript identifier/key."""
    return bool(_VALID_IDENTIFIER.match(name))


def to_identifier(name: str) -> str:
    """Convert a Clarity name into a valid TypeScript identifier.

    camelCases the name, then replaces anything a TypeScript identifier
    cannot contain ('?', '!', '*', a '-' not followed by a lowercase letter)
    with '_' and guards a leading digit.
    """
    identifier = _INVALID_IDENTIFIER_CHARS.sub('_', to_camel_case(name))
    if not identifier:
        return '_'
    if identifier[0].isdigit():
        identifier = f'_{identifier}'
    return identifier


def safe_param_name(name: str) -> str:
    """Identifier for a bare parameter, avoiding reserved words."""
    identifier = to_identifier(name)
    if identifier in RESERVED_WORDS:
        return f'{identifier}_'
    return identifier


def contract_identifier(contract_name: str) -> str:
    """Default TypeScript name for an on-chain contract name (nft-nyc -> nftNyc)."""
    return safe_param_name(contract_name)


def network_variant_name(base_name: str, network: Optional[str]) -> str:
    """Name of one network's variant of a multi-network contract.

    The mainnet variant keeps the base name; any other network is
    prefixed: (daoContract, testnet) -> testnetDaoContract.
    """
    if not network or network == DEFAULT_NETWORK:
        return base_name
    return f'{network}{capitalize(base_name)}'


class NameAllocator:
    """Hands out unique member names within one object literal."""

    def __init__(self, reserved: Optional[Set[str]] = None):
        """
        Initialize the allocator.

        Args:
            reserved: Names already taken (e.g. 'address', 'contractName')
        """
        self._used: Set[str] = set(reserved or ())
        self.renamed: Dict[str, str] = {}

    def allocate(self, name: str) -> str:
        """Return name, or name with '_' appended until it is unused."""
        candidate = name
        while candidate in self._used:
            candidate = f'{candidate}_'
        self._used.add(candidate)
        if candidate != name:
            self.renamed[name] = candidate
        return candidate
