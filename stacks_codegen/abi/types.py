"""
Typed model of a Clarity contract interface.

This module contains the dataclasses representing Clarity types, contract
functions and the resolved contracts handed to the code generator. Every
value here is immutable; the generator only ever reads them.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


# =============================================================================
# CLARITY TYPES
# =============================================================================

@dataclass(frozen=True)
class ClarityType:
    """Base class for all Clarity type descriptions."""
    pass


@dataclass(frozen=True)
class UIntType(ClarityType):
    """uint128"""
    pass


@dataclass(frozen=True)
class IntType(ClarityType):
    """int128"""
    pass


@dataclass(frozen=True)
class BoolType(ClarityType):
    pass


@dataclass(frozen=True)
class PrincipalType(ClarityType):
    """Standard or contract principal."""
    pass


@dataclass(frozen=True)
class BufferType(ClarityType):
    """(buff n)"""
    length: int


@dataclass(frozen=True)
class StringAsciiType(ClarityType):
    """(string-ascii n)"""
    length: int


@dataclass(frozen=True)
class StringUtf8Type(ClarityType):
    """(string-utf8 n)"""
    length: int


@dataclass(frozen=True)
class OptionalType(ClarityType):
    """(optional T)"""
    inner: ClarityType


@dataclass(frozen=True)
class ResponseType(ClarityType):
    """(response ok err)"""
    ok: ClarityType
    err: ClarityType


@dataclass(frozen=True)
class TupleType(ClarityType):
    """(tuple (name T) ...) with fields kept in declaration order."""
    fields: Tuple[Tuple[str, ClarityType], ...] = ()


@dataclass(frozen=True)
class ListType(ClarityType):
    """(list n T)"""
    length: int
    element: ClarityType


@dataclass(frozen=True)
class OpaqueType(ClarityType):
    """A type shape the generator does not recognise.

    The original JSON is kept (as canonical JSON text) so the embedded ABI
    constant can reproduce it unchanged.
    """
    raw: str = 'null'

    @classmethod
    def from_value(cls, value: Any) -> 'OpaqueType':
        return cls(raw=json.dumps(value, sort_keys=True))

    @property
    def value(self) -> Any:
        return json.loads(self.raw)


# =============================================================================
# FUNCTIONS AND CONTRACTS
# =============================================================================

class FunctionAccess(Enum):
    """Visibility of a Clarity function."""
    PUBLIC = 'public'
    READ_ONLY = 'read-only'
    PRIVATE = 'private'


@dataclass(frozen=True)
class FunctionArg:
    """A single function argument; name is the kebab-case Clarity name."""
    name: str
    type: ClarityType


@dataclass(frozen=True)
class ClarityFunction:
    """A function declared in a contract ABI."""
    name: str
    access: FunctionAccess
    args: Tuple[FunctionArg, ...] = ()
    outputs: ClarityType = field(default_factory=OpaqueType)

    @property
    def is_read_only(self) -> bool:
        return self.access == FunctionAccess.READ_ONLY

    @property
    def is_public(self) -> bool:
        return self.access == FunctionAccess.PUBLIC


@dataclass(frozen=True)
class ContractAbi:
    """The parsed interface of one contract."""
    functions: Tuple[ClarityFunction, ...] = ()

    @property
    def surfaced_functions(self) -> Tuple[ClarityFunction, ...]:
        """Functions that appear in generated code (private ones never do)."""
        return tuple(f for f in self.functions if f.access != FunctionAccess.PRIVATE)

    @property
    def read_only_functions(self) -> Tuple[ClarityFunction, ...]:
        return tuple(f for f in self.functions if f.is_read_only)

    @property
    def public_functions(self) -> Tuple[ClarityFunction, ...]:
        return tuple(f for f in self.functions if f.is_public)


@dataclass(frozen=True)
class ResolvedContract:
    """A contract ready for generation.

    name is already a valid, disambiguated TypeScript identifier. address is
    the deployer address and contract_name the on-chain contract name.
    """
    name: str
    address: str
    contract_name: str
    abi: ContractAbi
    source: str = 'api'  # 'api' or 'local'
    network: Optional[str] = None

    @property
    def contract_id(self) -> str:
        return f'{self.address}.{self.contract_name}'


@dataclass(frozen=True)
class GeneratedOutput:
    """One generated file; kind is 'contracts', 'hooks', 'generic-hooks' or 'provider'."""
    path: str
    content: str
    kind: str
