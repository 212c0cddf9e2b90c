"""
Contract generation for Clarity to TypeScript code generation.

This module handles the generation of one contract's block in the contracts
module: the embedded ABI constant and the exported contract object with its
methods and, in full mode, its read/write groups and fetch helpers.
"""

from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .function import FunctionGenerator

from .base import BaseGenerator, format_ts_literal, ts_string
from .naming import NameAllocator, capitalize, to_identifier
from ..abi.parser import function_to_abi
from ..abi.types import ClarityFunction, FunctionAccess, ResolvedContract


# Members every contract object carries besides its functions
RESERVED_MEMBERS = ('address', 'contractName', 'read', 'write')


@dataclass(frozen=True)
class FunctionMembers:
    """The member names generated for one surfaced function.

    helper and fetch are None when the function gets no such member
    (minimal runtime, a read-only function's fetch, or filtered out).
    """
    function: ClarityFunction
    method: str
    helper: Optional[str] = None
    fetch: Optional[str] = None


def plan_members(ctx: 'CodeGenerationContext', contract: ResolvedContract) -> List[FunctionMembers]:
    """Assign unique member names for every surfaced function of a contract.

    Names are allocated in ABI order, methods first and then fetch helpers,
    so the result only depends on the contract and the options. Collisions
    are resolved by appending '_' and reported as diagnostics.
    """
    top = NameAllocator(set(RESERVED_MEMBERS))
    groups = {
        FunctionAccess.READ_ONLY: NameAllocator(),
        FunctionAccess.PUBLIC: NameAllocator(),
    }
    functions = contract.abi.surfaced_functions

    methods = [top.allocate(to_identifier(f.name)) for f in functions]

    planned = []
    for func, method in zip(functions, methods):
        helper = None
        fetch = None
        if ctx.options.is_full and ctx.wants_helpers_for(func.name):
            helper = groups[func.access].allocate(to_identifier(func.name))
            if func.is_public:
                fetch = top.allocate(f'fetch{capitalize(to_identifier(func.name))}')
        planned.append(FunctionMembers(func, method, helper, fetch))

    for allocator in (top, *groups.values()):
        for original, renamed in allocator.renamed.items():
            ctx.diagnostics.warn_identifier_renamed(original, renamed, contract.name)
    return planned


class ContractGenerator(BaseGenerator):
    """
    Generates the block for a single resolved contract.

    This class handles:
    - The `{name}Abi` constant (surfaced functions only)
    - The exported contract object with address and contractName
    - Minimal methods for every public and read-only function
    - read/write groups and fetch helpers in full mode

    Private functions never appear in the output. A contract without any
    public or read-only function produces an empty string.
    """

    def __init__(self, ctx: 'CodeGenerationContext', func_generator: 'FunctionGenerator'):
        """
        Initialize the contract generator.

        Args:
            ctx: The code generation context
            func_generator: The function generator
        """
        super().__init__(ctx)
        self._func = func_generator

    # =========================================================================
    # MAIN ENTRY POINT
    # =========================================================================

    def generate_contract(self, contract: ResolvedContract) -> str:
        """Generate TypeScript code for a resolved contract.

        Args:
            contract: The contract to generate

        Returns:
            The ABI constant and contract object, or '' if nothing is surfaced
        """
        self._ctx.reset_for_contract(contract.name, contract.network)

        for func in contract.abi.functions:
            if func.access == FunctionAccess.PRIVATE:
                self._ctx.diagnostics.info_private_skipped(contract.name, func.name)

        if not contract.abi.surfaced_functions:
            self._ctx.diagnostics.info_empty_contract(contract.name)
            return ''

        members = plan_members(self._ctx, contract)
        return '\n\n'.join([
            self.generate_abi_constant(contract),
            self.generate_contract_object(contract, members),
        ])

    def generate_abi_constant(self, contract: ResolvedContract) -> str:
        """Generate the embedded ABI constant for introspection."""
        abi = {'functions': [function_to_abi(f) for f in contract.abi.surfaced_functions]}
        literal = format_ts_literal(abi, self._ctx.indent_str)
        return f'export const {contract.name}Abi = {literal} as const'

    # =========================================================================
    # CONTRACT OBJECT
    # =========================================================================

    def generate_contract_object(
        self,
        contract: ResolvedContract,
        members: List[FunctionMembers],
    ) -> str:
        lines = [f'export const {contract.name} = {{']
        self.indent_level += 1
        lines.append(f'{self.indent()}address: {ts_string(contract.address)},')
        lines.append(f'{self.indent()}contractName: {ts_string(contract.contract_name)},')

        for member in members:
            lines.append('')
            lines.append(self._func.generate_method(contract, member.function, member.method))

        if self._ctx.options.is_full:
            lines.extend(self._generate_group(
                'read',
                contract,
                [m for m in members if m.function.is_read_only and m.helper],
                self._func.generate_read_helper,
            ))
            lines.extend(self._generate_group(
                'write',
                contract,
                [m for m in members if m.function.is_public and m.helper],
                self._func.generate_write_helper,
            ))
            for member in members:
                if member.fetch:
                    lines.append('')
                    lines.append(self._func.generate_fetch_helper(contract, member.function, member.fetch))

        self.indent_level -= 1
        lines.append('} as const')
        return '\n'.join(lines)

    def _generate_group(self, group, contract, members, emit) -> List[str]:
        """Nested helper group; omitted entirely when it has no members."""
        if not members:
            return []
        lines = ['', f'{self.indent()}{group}: {{']
        self.indent_level += 1
        helpers = [emit(contract, m.function, m.helper) for m in members]
        lines.append('\n\n'.join(helpers))
        self.indent_level -= 1
        lines.append(f'{self.indent()}}},')
        return lines
