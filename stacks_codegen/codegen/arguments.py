"""
Argument and signature synthesis.

For one contract function this module derives every parameter list the
emitters need from the declared Clarity arguments:

    transfer(amount: uint128, recipient: principal)

    positional_params  amount: bigint, recipient: string
    object_type        { amount: bigint; recipient: string }
    tuple_type         [bigint, string]
    union_signature    ...args: [{ amount: bigint; recipient: string }] | [bigint, string]
    args_union_type    { amount: bigint; recipient: string } | [bigint, string]
    wire_args_expr     [Cl.uint(argsObj.amount), Cl.principal(argsObj.recipient)]

Both calling conventions are normalised into a single `argsObj` before the
wire array is built, so they always produce the same Clarity values in
declaration order.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator
from .naming import NameAllocator, to_identifier, safe_param_name
from .type_converter import TypeConverter
from ..abi.types import ClarityType, FunctionArg


# Name of the normalised argument object inside generated function bodies
ARGS_OBJECT = 'argsObj'


@dataclass(frozen=True)
class ArgBinding:
    """One declared argument and the names it is given in TypeScript."""
    name: str           # Clarity name, e.g. token-id
    field: str          # object field, e.g. tokenId
    param: str          # bare parameter name (reserved words suffixed)
    ts_type: str
    clarity_type: ClarityType


@dataclass
class SynthesizedArgs:
    """
    All signature fragments for one function.

    Zero-argument functions have empty parameter lists and no union
    signature; their wire array is always [].
    """
    bindings: List[ArgBinding] = field(default_factory=list)
    wire_exprs: List[str] = field(default_factory=list)

    @property
    def has_args(self) -> bool:
        return bool(self.bindings)

    @property
    def positional_params(self) -> str:
        return ', '.join(f'{b.param}: {b.ts_type}' for b in self.bindings)

    @property
    def object_type(self) -> str:
        if not self.bindings:
            return '{}'
        members = '; '.join(f'{b.field}: {b.ts_type}' for b in self.bindings)
        return f'{{ {members} }}'

    @property
    def object_params(self) -> str:
        if not self.bindings:
            return ''
        names = ', '.join(
            b.field if b.field == b.param else f'{b.field}: {b.param}'
            for b in self.bindings
        )
        return f'{{ {names} }}: {self.object_type}'

    @property
    def tuple_type(self) -> str:
        return '[' + ', '.join(b.ts_type for b in self.bindings) + ']'

    @property
    def union_signature(self) -> str:
        if not self.bindings:
            return ''
        return f'...args: [{self.object_type}] | {self.tuple_type}'

    @property
    def args_union_type(self) -> str:
        if not self.bindings:
            return ''
        return f'{self.object_type} | {self.tuple_type}'

    def positional_object(self, source: str) -> str:
        """Object literal rebuilding the fields from a positional array."""
        members = ', '.join(f'{b.field}: {source}[{i}]' for i, b in enumerate(self.bindings))
        return f'{{ {members} }}'

    def wire_args_expr(self, indent_str: str = '  ') -> str:
        """The functionArgs array literal, relative to column 0.

        Stays on one line unless an element spans several lines (buffers).
        """
        if not self.wire_exprs:
            return '[]'
        if not any('\n' in expr for expr in self.wire_exprs):
            return '[' + ', '.join(self.wire_exprs) + ']'
        lines = ['[']
        for expr in self.wire_exprs:
            lines.append(indent_str + expr.replace('\n', '\n' + indent_str) + ',')
        lines.append(']')
        return '\n'.join(lines)

    def rest_normalization(self) -> List[str]:
        """Statements turning a `...args` union into argsObj (minimal methods).

        A single plain object carrying the first field's key is taken as the
        object form. For a function whose only argument is `any`-typed
        (tuple, response or opaque), a positional value that is itself an
        object with that key is therefore read as the object form; callers
        of such functions should pass `{ field: value }`.
        """
        first = self.bindings[0].field
        return [
            'const argsList = args as any[]',
            f'const {ARGS_OBJECT}: {self.object_type} =',
            (
                "  argsList.length === 1 && typeof argsList[0] === 'object' && argsList[0] !== null"
                f" && !Array.isArray(argsList[0]) && !(argsList[0] instanceof Uint8Array)"
                f" && '{first}' in argsList[0]"
            ),
            '    ? argsList[0]',
            f'    : {self.positional_object("argsList")}',
        ]

    def param_normalization(self) -> List[str]:
        """Statements turning a single `args` union parameter into argsObj (helpers)."""
        return [
            f'const {ARGS_OBJECT}: {self.object_type} = Array.isArray(args)',
            f'  ? {self.positional_object("args")}',
            '  : args',
        ]


class ArgumentSynthesizer(BaseGenerator):
    """
    Builds SynthesizedArgs for a function's argument list.

    Field names are the camelCase forms of the Clarity names; if two
    arguments collide after conversion the later one gets a '_' suffix.
    """

    def __init__(self, ctx: 'CodeGenerationContext', type_converter: TypeConverter):
        super().__init__(ctx)
        self._type_converter = type_converter

    def synthesize(self, args: Sequence[FunctionArg]) -> SynthesizedArgs:
        """Build every signature fragment for one function.

        Args:
            args: The declared arguments, in declaration order

        Returns:
            SynthesizedArgs for the emitters
        """
        result = SynthesizedArgs()
        fields = NameAllocator()
        params = NameAllocator()
        for arg in args:
            binding = ArgBinding(
                name=arg.name,
                field=fields.allocate(to_identifier(arg.name)),
                param=params.allocate(safe_param_name(arg.name)),
                ts_type=self._type_converter.map_type(arg.type),
                clarity_type=arg.type,
            )
            result.bindings.append(binding)
            result.wire_exprs.append(
                self._type_converter.to_wire_expr(arg.type, f'{ARGS_OBJECT}.{binding.field}')
            )
        return result
