"""
Type conversion utilities for code generation.

This module provides the TypeConverter class that maps Clarity types to
TypeScript types and builds the expressions that turn a TypeScript value
into the Clarity value expected by @stacks/transactions.
"""

from .base import BaseGenerator
from ..abi.types import (
    ClarityType,
    BufferType,
    OptionalType,
    ResponseType,
    TupleType,
    ListType,
    OpaqueType,
)
from ..type_system.mappings import (
    SIMPLE_TYPE_MAP,
    BUFFER_TS_TYPE,
    BUFFER_CONSTRUCTORS,
    OPAQUE_TS_TYPE,
)


# Runtime dispatch for buffer arguments, inlined at each call site so the
# generated module needs nothing beyond @stacks/transactions.
BUFFER_CONVERSION_TEMPLATE = '\n'.join([
    '((value: {ts_type}) => {{',
    '  if (value instanceof Uint8Array) return {bytes}(value)',
    "  if (typeof value === 'string') {{",
    "    if (value.startsWith('0x')) return {hex}(value.slice(2))",
    '    return {ascii}(value)',
    '  }}',
    "  if (typeof value === 'object' && value !== null && 'type' in value && 'value' in value) {{",
    '    switch (value.type) {{',
    "      case 'ascii':",
    '        return {ascii}(value.value)',
    "      case 'utf8':",
    '        return {utf8}(value.value)',
    "      case 'hex':",
    '        return {hex}(value.value)',
    '    }}',
    '  }}',
    '  throw new Error(`Invalid buffer value: ${{JSON.stringify(value)}}`)',
    '}})({value})',
])


class TypeConverter(BaseGenerator):
    """
    Handles Clarity to TypeScript type conversions.

    This class provides:
    - Clarity type -> TypeScript type mapping
    - TypeScript value -> Clarity value (Cl.*) expressions
    - The inline runtime conversion for buffer arguments

    Response, tuple and list values are passed through unconverted; types it
    does not recognise become 'any' and are reported as diagnostics.
    """

    # =========================================================================
    # MAIN TYPE CONVERSION
    # =========================================================================

    def map_type(self, clarity_type: ClarityType) -> str:
        """Convert a Clarity type to a TypeScript type.

        Args:
            clarity_type: The Clarity type to convert

        Returns:
            The TypeScript type string
        """
        simple = SIMPLE_TYPE_MAP.get(type(clarity_type))
        if simple:
            return simple[0]

        if isinstance(clarity_type, BufferType):
            return BUFFER_TS_TYPE
        if isinstance(clarity_type, OptionalType):
            return f'{self.map_type(clarity_type.inner)} | null'
        if isinstance(clarity_type, (ResponseType, TupleType)):
            return OPAQUE_TS_TYPE
        if isinstance(clarity_type, ListType):
            return self._map_list_type(clarity_type)

        self._report_opaque(clarity_type)
        return OPAQUE_TS_TYPE

    def _map_list_type(self, clarity_type: ListType) -> str:
        element = clarity_type.element
        # Element typing stops after one level
        if isinstance(element, (ListType, TupleType, ResponseType, OpaqueType)):
            return f'{OPAQUE_TS_TYPE}[]'
        element_ts = self.map_type(element)
        if '|' in element_ts:
            return f'({element_ts})[]'
        return f'{element_ts}[]'

    # =========================================================================
    # WIRE CONVERSION
    # =========================================================================

    def to_wire_expr(self, clarity_type: ClarityType, value_expr: str, report: bool = True) -> str:
        """Build the expression converting value_expr into a Clarity value.

        Multi-line results are written relative to column 0; callers re-indent.

        Args:
            clarity_type: The declared Clarity type of the value
            value_expr: TypeScript expression holding the value
            report: Whether unrecognised types are added to diagnostics

        Returns:
            The TypeScript conversion expression
        """
        simple = SIMPLE_TYPE_MAP.get(type(clarity_type))
        if simple:
            return f'{simple[1]}({value_expr})'

        if isinstance(clarity_type, BufferType):
            return self.buffer_conversion(value_expr)
        if isinstance(clarity_type, OptionalType):
            inner = self.to_wire_expr(clarity_type.inner, value_expr, report)
            return (
                f'{value_expr} === null || {value_expr} === undefined '
                f'? Cl.none() : Cl.some({inner})'
            )
        if isinstance(clarity_type, OpaqueType) and report:
            self._report_opaque(clarity_type)

        # response, tuple, list and unknown shapes go through as given
        return value_expr

    def buffer_conversion(self, value_expr: str) -> str:
        """Inline conversion accepting bytes, a (0x-)string or a tagged value."""
        return BUFFER_CONVERSION_TEMPLATE.format(
            ts_type=BUFFER_TS_TYPE,
            bytes=BUFFER_CONSTRUCTORS['bytes'],
            ascii=BUFFER_CONSTRUCTORS['ascii'],
            utf8=BUFFER_CONSTRUCTORS['utf8'],
            hex=BUFFER_CONSTRUCTORS['hex'],
            value=value_expr,
        )

    def _report_opaque(self, clarity_type: ClarityType) -> None:
        raw = clarity_type.raw if isinstance(clarity_type, OpaqueType) else type(clarity_type).__name__
        self._ctx.diagnostics.warn_opaque_type(
            raw,
            self._ctx.current_contract,
            self._ctx.current_function,
        )
