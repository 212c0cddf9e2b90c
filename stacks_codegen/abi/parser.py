"""
Clarity ABI parser implementation.

The AbiParser converts raw contract-interface JSON (as returned by the Hiro
API or written by hand in the short `buff` notation) into the typed model in
abi.types, and serialises that model back into ABI JSON for embedding.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from ..errors import AbiParseError
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
)


# Atomic types written as bare strings
ATOMIC_TYPES: Dict[str, ClarityType] = {
    'uint128': UIntType(),
    'int128': IntType(),
    'bool': BoolType(),
    'principal': PrincipalType(),
}

BUFFER_KEYS = ('buffer', 'buff')


class AbiParser:
    """
    Parses contract ABI JSON into ClarityType trees.

    Type shapes that are not part of the closed Clarity type set are kept as
    OpaqueType rather than rejected. Only a broken overall structure (no
    function list, a function without a name, an unknown access level)
    raises AbiParseError.
    """

    # =========================================================================
    # CONTRACTS
    # =========================================================================

    def parse_contract(self, raw: Any) -> ContractAbi:
        """Parse a contract interface.

        Accepts either the interface object itself or a Hiro contract-info
        response whose 'abi' member holds the interface as a JSON string.
        """
        raw = self._unwrap_contract_info(raw)
        if not isinstance(raw, dict):
            raise AbiParseError(f'Contract ABI must be an object, got {type(raw).__name__}')

        functions = raw.get('functions', [])
        if not isinstance(functions, list):
            raise AbiParseError('Contract ABI "functions" must be a list')

        return ContractAbi(functions=tuple(self.parse_function(f) for f in functions))

    def _unwrap_contract_info(self, raw: Any) -> Any:
        if isinstance(raw, dict) and 'functions' not in raw and 'abi' in raw:
            abi = raw['abi']
            if isinstance(abi, str):
                try:
                    return json.loads(abi)
                except json.JSONDecodeError as e:
                    raise AbiParseError(f'Contract info "abi" is not valid JSON: {e}') from e
            return abi
        return raw

    def parse_function(self, raw: Any) -> ClarityFunction:
        """Parse one entry of the ABI's function list."""
        if not isinstance(raw, dict):
            raise AbiParseError(f'Function entry must be an object, got {type(raw).__name__}')

        name = raw.get('name')
        if not isinstance(name, str) or not name:
            raise AbiParseError(f'Function entry is missing a name: {raw!r}')

        access_value = raw.get('access')
        try:
            access = FunctionAccess(access_value)
        except ValueError:
            raise AbiParseError(
                f'Function "{name}" has unknown access "{access_value}"'
            ) from None

        args = raw.get('args', [])
        if not isinstance(args, list):
            raise AbiParseError(f'Function "{name}" args must be a list')

        return ClarityFunction(
            name=name,
            access=access,
            args=tuple(self._parse_arg(name, arg) for arg in args),
            outputs=self._parse_outputs(raw.get('outputs')),
        )

    def _parse_arg(self, function_name: str, raw: Any) -> FunctionArg:
        if not isinstance(raw, dict) or not isinstance(raw.get('name'), str):
            raise AbiParseError(f'Function "{function_name}" has a malformed argument: {raw!r}')
        return FunctionArg(name=raw['name'], type=self.parse_type(raw.get('type')))

    def _parse_outputs(self, raw: Any) -> ClarityType:
        # Hiro wraps outputs as {"type": T}
        if isinstance(raw, dict) and set(raw) == {'type'}:
            return self.parse_type(raw['type'])
        return self.parse_type(raw)

    # =========================================================================
    # TYPES
    # =========================================================================

    def parse_type(self, raw: Any) -> ClarityType:
        """Parse a single type description, falling back to OpaqueType."""
        if isinstance(raw, str):
            return ATOMIC_TYPES.get(raw, OpaqueType.from_value(raw))

        if not isinstance(raw, dict) or len(raw) != 1:
            return OpaqueType.from_value(raw)

        key, value = next(iter(raw.items()))

        if key in BUFFER_KEYS:
            length = self._get_length(value)
            return BufferType(length) if length is not None else OpaqueType.from_value(raw)
        if key == 'string-ascii':
            length = self._get_length(value)
            return StringAsciiType(length) if length is not None else OpaqueType.from_value(raw)
        if key == 'string-utf8':
            length = self._get_length(value)
            return StringUtf8Type(length) if length is not None else OpaqueType.from_value(raw)
        if key == 'optional':
            return OptionalType(self.parse_type(value))
        if key == 'response':
            return self._parse_response(raw, value)
        if key == 'tuple':
            return self._parse_tuple(raw, value)
        if key == 'list':
            return self._parse_list(raw, value)
        if key == 'type':
            return self.parse_type(value)

        return OpaqueType.from_value(raw)

    def _get_length(self, value: Any) -> Optional[int]:
        if isinstance(value, dict):
            length = value.get('length')
            if isinstance(length, int) and not isinstance(length, bool):
                return length
        return None

    def _parse_response(self, raw: Any, value: Any) -> ClarityType:
        if not isinstance(value, dict) or 'ok' not in value:
            return OpaqueType.from_value(raw)
        err = value.get('error', value.get('err'))
        return ResponseType(ok=self.parse_type(value['ok']), err=self.parse_type(err))

    def _parse_tuple(self, raw: Any, value: Any) -> ClarityType:
        if not isinstance(value, list):
            return OpaqueType.from_value(raw)
        fields: List[Tuple[str, ClarityType]] = []
        for entry in value:
            if not isinstance(entry, dict) or not isinstance(entry.get('name'), str):
                return OpaqueType.from_value(raw)
            fields.append((entry['name'], self.parse_type(entry.get('type'))))
        return TupleType(fields=tuple(fields))

    def _parse_list(self, raw: Any, value: Any) -> ClarityType:
        length = self._get_length(value)
        if length is None or 'type' not in value:
            return OpaqueType.from_value(raw)
        return ListType(length=length, element=self.parse_type(value['type']))


# =============================================================================
# SERIALISATION
# =============================================================================

def type_to_abi(clarity_type: ClarityType) -> Any:
    """Convert a ClarityType back into its ABI JSON form.

    Buffers are written in the short {"buff": {"length": n}} notation.
    """
    if isinstance(clarity_type, UIntType):
        return 'uint128'
    if isinstance(clarity_type, IntType):
        return 'int128'
    if isinstance(clarity_type, BoolType):
        return 'bool'
    if isinstance(clarity_type, PrincipalType):
        return 'principal'
    if isinstance(clarity_type, BufferType):
        return {'buff': {'length': clarity_type.length}}
    if isinstance(clarity_type, StringAsciiType):
        return {'string-ascii': {'length': clarity_type.length}}
    if isinstance(clarity_type, StringUtf8Type):
        return {'string-utf8': {'length': clarity_type.length}}
    if isinstance(clarity_type, OptionalType):
        return {'optional': type_to_abi(clarity_type.inner)}
    if isinstance(clarity_type, ResponseType):
        return {'response': {'ok': type_to_abi(clarity_type.ok), 'error': type_to_abi(clarity_type.err)}}
    if isinstance(clarity_type, TupleType):
        return {'tuple': [{'name': name, 'type': type_to_abi(t)} for name, t in clarity_type.fields]}
    if isinstance(clarity_type, ListType):
        return {'list': {'type': type_to_abi(clarity_type.element), 'length': clarity_type.length}}
    if isinstance(clarity_type, OpaqueType):
        return clarity_type.value
    return None


def function_to_abi(func: ClarityFunction) -> Dict[str, Any]:
    """Convert a ClarityFunction back into its ABI JSON form."""
    return {
        'name': func.name,
        'access': func.access.value,
        'args': [{'name': arg.name, 'type': type_to_abi(arg.type)} for arg in func.args],
        'outputs': type_to_abi(func.outputs),
    }


def parse_contract_abi(raw: Any) -> ContractAbi:
    """Convenience wrapper around AbiParser().parse_contract()."""
    return AbiParser().parse_contract(raw)
