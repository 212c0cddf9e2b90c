"""
Contract ABI model for the Clarity to TypeScript generator.

This module provides the typed Clarity type tree, contract/function records
and the parser that builds them from raw ABI JSON.
"""

from .types import (
    ClarityType,
    UIntType,
    IntType,
    BoolType,
    PrincipalType,
    BufferType,
    StringAsciiType,
    StringUtf8Type,
    OptionalType,
    ResponseType,
    TupleType,
    ListType,
    OpaqueType,
    FunctionAccess,
    FunctionArg,
    ClarityFunction,
    ContractAbi,
    ResolvedContract,
    GeneratedOutput,
)
from .parser import AbiParser, parse_contract_abi, type_to_abi, function_to_abi

__all__ = [
    'ClarityType',
    'UIntType',
    'IntType',
    'BoolType',
    'PrincipalType',
    'BufferType',
    'StringAsciiType',
    'StringUtf8Type',
    'OptionalType',
    'ResponseType',
    'TupleType',
    'ListType',
    'OpaqueType',
    'FunctionAccess',
    'FunctionArg',
    'ClarityFunction',
    'ContractAbi',
    'ResolvedContract',
    'GeneratedOutput',
    'AbiParser',
    'parse_contract_abi',
    'type_to_abi',
    'function_to_abi',
]
