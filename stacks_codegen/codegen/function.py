"""
Function code generation.

This module handles the generation of the per-function members of a
contract object: the minimal call-object method, plus the read, write and
wallet (fetch) helpers emitted in full runtime mode.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator, ts_string
from .arguments import ArgumentSynthesizer, SynthesizedArgs
from .type_converter import TypeConverter
from ..abi.types import ClarityFunction, ResolvedContract
from ..type_system.mappings import (
    ANCHOR_MODES,
    HELPER_NETWORKS,
    READ_ONLY_SENDER_ADDRESS,
    READ_PRIMITIVE,
    WRITE_PRIMITIVE,
    WALLET_PRIMITIVE,
    helper_network,
)


NETWORK_OPTION_TYPE = ' | '.join(ts_string(n) for n in HELPER_NETWORKS)


class FunctionGenerator(BaseGenerator):
    """
    Generates the object members for a single contract function.

    Every surfaced function gets a minimal method returning call params.
    In full mode:
    - read-only functions get a read helper (fetchCallReadOnlyFunction)
    - public functions get a write helper (makeContractCall) and a
      fetch helper that goes through the wallet (openContractCall)

    Members are written at the current indent level and end with '},'.
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        type_converter: TypeConverter,
        arg_synthesizer: ArgumentSynthesizer,
    ):
        super().__init__(ctx)
        self._type_converter = type_converter
        self._arg_synthesizer = arg_synthesizer

    def synthesize(self, func: ClarityFunction) -> SynthesizedArgs:
        self._ctx.reset_for_function(func.name)
        return self._arg_synthesizer.synthesize(func.args)

    def _default_network(self) -> str:
        """Network the helpers fall back to for the contract being generated."""
        return helper_network(self._ctx.current_network)

    # =========================================================================
    # MINIMAL METHOD
    # =========================================================================

    def generate_method(
        self,
        contract: ResolvedContract,
        func: ClarityFunction,
        member_name: str,
    ) -> str:
        """Generate the method returning ReadOnlyCallParams / ContractCallParams.

        Args:
            contract: The contract being generated
            func: The function to generate
            member_name: The (possibly disambiguated) member name

        Returns:
            The method source text
        """
        args = self.synthesize(func)
        return_type = 'ReadOnlyCallParams' if func.is_read_only else 'ContractCallParams'

        lines = [f'{self.indent()}{member_name}({args.union_signature}): {return_type} {{']
        self.indent_level += 1
        if args.has_args:
            lines.extend(self.indent() + line for line in args.rest_normalization())
        lines.append(f'{self.indent()}return {{')
        self.indent_level += 1
        lines.extend(self._call_fields(contract, func, args))
        self.indent_level -= 1
        lines.append(f'{self.indent()}}}')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}},')
        return '\n'.join(lines)

    # =========================================================================
    # FULL-MODE HELPERS
    # =========================================================================

    def generate_read_helper(
        self,
        contract: ResolvedContract,
        func: ClarityFunction,
        member_name: str,
    ) -> str:
        """Generate the async read helper for a read-only function."""
        args = self.synthesize(func)
        options = self._options_type([
            f'network?: {NETWORK_OPTION_TYPE}',
            'senderAddress?: string',
        ])

        lines = [f'{self.indent()}async {member_name}({self._params(args, options + " = {}")}) {{']
        self.indent_level += 1
        lines.extend(self._normalization(args))
        lines.append(f'{self.indent()}return await {READ_PRIMITIVE}({{')
        self.indent_level += 1
        lines.extend(self._call_fields(contract, func, args))
        ind = self.indent()
        lines.append(f"{ind}network: options.network || '{self._default_network()}',")
        lines.append(f"{ind}senderAddress: options.senderAddress || '{READ_ONLY_SENDER_ADDRESS}',")
        self.indent_level -= 1
        lines.append(f'{self.indent()}}})')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}},')
        return '\n'.join(lines)

    def generate_write_helper(
        self,
        contract: ResolvedContract,
        func: ClarityFunction,
        member_name: str,
    ) -> str:
        """Generate the async write helper for a public function.

        validateWithAbi is written after the caller's options so it is
        always true.
        """
        args = self.synthesize(func)
        options = self._options_type([
            'senderKey: string',
            f'network?: {NETWORK_OPTION_TYPE}',
            'fee?: string | number',
            'nonce?: bigint',
            f'anchorMode?: {ANCHOR_MODES}',
            'postConditions?: any[]',
            'validateWithAbi?: boolean',
        ])

        lines = [f'{self.indent()}async {member_name}({self._params(args, options)}) {{']
        self.indent_level += 1
        lines.extend(self._normalization(args))
        lines.append(f'{self.indent()}const {{ senderKey, network, ...txOptions }} = options')
        lines.append(f'{self.indent()}return await {WRITE_PRIMITIVE}({{')
        self.indent_level += 1
        lines.extend(self._call_fields(contract, func, args))
        ind = self.indent()
        lines.append(f'{ind}senderKey,')
        lines.append(f"{ind}network: network || '{self._default_network()}',")
        lines.append(f'{ind}...txOptions,')
        lines.append(f'{ind}validateWithAbi: true,')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}})')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}},')
        return '\n'.join(lines)

    def generate_fetch_helper(
        self,
        contract: ResolvedContract,
        func: ClarityFunction,
        member_name: str,
    ) -> str:
        """Generate the wallet-driven fetch helper for a public function.

        The returned promise resolves with the wallet's result on finish and
        rejects when the user cancels.
        """
        args = self.synthesize(func)
        options = self._options_type([
            'onFinish?: (data: any) => void',
            'onCancel?: () => void',
            'fee?: string | number',
            f'anchorMode?: {ANCHOR_MODES}',
            'postConditions?: any[]',
        ])

        lines = [f'{self.indent()}async {member_name}({self._params(args, options + " = {}")}) {{']
        self.indent_level += 1
        lines.extend(self._normalization(args))
        lines.append(f'{self.indent()}const {{ onFinish, onCancel, ...txOptions }} = options')
        lines.append(f'{self.indent()}return new Promise((resolve, reject) => {{')
        self.indent_level += 1
        lines.append(f'{self.indent()}{WALLET_PRIMITIVE}({{')
        self.indent_level += 1
        lines.extend(self._call_fields(contract, func, args))
        ind = self.indent()
        lines.append(f"{ind}network: '{self._default_network()}',")
        lines.append(f'{ind}...txOptions,')
        lines.append(f'{ind}onFinish: (data: any) => {{')
        lines.append(f'{ind}  onFinish?.(data)')
        lines.append(f'{ind}  resolve(data)')
        lines.append(f'{ind}}},')
        lines.append(f'{ind}onCancel: () => {{')
        lines.append(f'{ind}  onCancel?.()')
        lines.append(f"{ind}  reject(new Error('User cancelled transaction'))")
        lines.append(f'{ind}}},')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}})')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}})')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}},')
        return '\n'.join(lines)

    # =========================================================================
    # SHARED FRAGMENTS
    # =========================================================================

    def _call_fields(
        self,
        contract: ResolvedContract,
        func: ClarityFunction,
        args: SynthesizedArgs,
    ) -> List[str]:
        ind = self.indent()
        wire = self.reindent(args.wire_args_expr(self._ctx.indent_str), ind)
        return [
            f'{ind}contractAddress: {ts_string(contract.address)},',
            f'{ind}contractName: {ts_string(contract.contract_name)},',
            f'{ind}functionName: {ts_string(func.name)},',
            f'{ind}functionArgs: {wire},',
        ]

    def _normalization(self, args: SynthesizedArgs) -> List[str]:
        if not args.has_args:
            return []
        return [self.indent() + line for line in args.param_normalization()]

    def _params(self, args: SynthesizedArgs, options_param: str) -> str:
        if not args.has_args:
            return f'options: {options_param}'
        return f'args: {args.args_union_type}, options: {options_param}'

    def _options_type(self, members: List[str]) -> str:
        """Multi-line options object type, closed at the current indent."""
        inner = self.indent() + self._ctx.indent_str
        body = '\n'.join(f'{inner}{m}' for m in members)
        return f'{{\n{body}\n{self.indent()}}}'
