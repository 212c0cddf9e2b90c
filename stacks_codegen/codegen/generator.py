"""
Main contracts module generator.

This module provides the ContractsModuleGenerator class that wires the
specialized generators together and assembles the contracts module.
"""

from typing import Optional, Sequence

from .context import CodeGenerationContext, GenerationOptions
from .diagnostics import CodegenDiagnostics
from .type_converter import TypeConverter
from .arguments import ArgumentSynthesizer
from .function import FunctionGenerator
from .contract import ContractGenerator
from .imports import ImportGenerator
from .naming import RESERVED_WORDS, is_identifier
from ..abi.types import ResolvedContract
from ..errors import CodegenError
from ..type_system.mappings import (
    TYPE_IMPORTS,
    VALUE_CONSTRUCTOR_NAMESPACE,
    READ_PRIMITIVE,
    WRITE_PRIMITIVE,
    WALLET_PRIMITIVE,
)


# Names the generated modules bind through imports or hook locals; a contract
# object cannot use them
BOUND_NAMES = frozenset(TYPE_IMPORTS + (
    VALUE_CONSTRUCTOR_NAMESPACE,
    READ_PRIMITIVE,
    WRITE_PRIMITIVE,
    WALLET_PRIMITIVE,
    'useQuery',
    'useMutation',
    'useQueryClient',
    'useStacksConfig',
    'config',
    'options',
    'args',
    'queryClient',
    'mutation',
))


def file_header(description: str = 'Generated by stacks-codegen') -> str:
    """Comment block placed at the top of every generated file."""
    return f'/**\n * {description}\n * DO NOT EDIT MANUALLY\n */'


def check_contract_names(contracts: Sequence[ResolvedContract]) -> None:
    """Raise CodegenError unless every contract name is a unique, free identifier.

    A name must not be a reserved word, a name bound by the generated
    imports, or the `{name}Abi` constant of another contract.
    """
    names = [c.name for c in contracts]
    abi_constants = {f'{name}Abi' for name in names}
    seen = set()
    for name in names:
        if not is_identifier(name) or name in RESERVED_WORDS:
            raise CodegenError(f'Contract name "{name}" is not a valid TypeScript identifier')
        if name in BOUND_NAMES:
            raise CodegenError(f'Contract name "{name}" clashes with a name used by the generated code')
        if name in abi_constants:
            raise CodegenError(f'Contract name "{name}" clashes with the ABI constant of another contract')
        if name in seen:
            raise CodegenError(f'Duplicate contract name "{name}"')
        seen.add(name)


class ContractsModuleGenerator:
    """
    Generates the contracts module from resolved contracts.

    This class orchestrates:
    - TypeConverter for Clarity -> TypeScript types and Cl.* conversions
    - ArgumentSynthesizer for parameter lists and wire arrays
    - FunctionGenerator for methods and helpers
    - ContractGenerator for each contract block
    - ImportGenerator for the import statements

    Contracts are emitted in input order; the output only depends on the
    contracts and the options.
    """

    def __init__(
        self,
        options: Optional[GenerationOptions] = None,
        diagnostics: Optional[CodegenDiagnostics] = None,
    ):
        """
        Initialize the generator.

        Args:
            options: Generation options (minimal runtime by default)
            diagnostics: Collector to report into; a new one is created if omitted
        """
        self._ctx = CodeGenerationContext(
            options=options or GenerationOptions(),
            _diagnostics=diagnostics,
        )
        self._type_converter = TypeConverter(self._ctx)
        self._arg_synthesizer = ArgumentSynthesizer(self._ctx, self._type_converter)
        self._func_generator = FunctionGenerator(
            self._ctx, self._type_converter, self._arg_synthesizer
        )
        self._contract_generator = ContractGenerator(self._ctx, self._func_generator)

    @property
    def diagnostics(self) -> CodegenDiagnostics:
        return self._ctx.diagnostics

    def generate(self, contracts: Sequence[ResolvedContract]) -> str:
        """Generate the contracts module source.

        Args:
            contracts: Resolved contracts, in output order

        Returns:
            The TypeScript source of the contracts module
        """
        check_contract_names(contracts)

        imports = ImportGenerator(self._ctx).add_contract_imports()
        blocks = []
        for contract in contracts:
            block = self._contract_generator.generate_contract(contract)
            if block:
                blocks.append(block)

        return '\n\n'.join([file_header(), imports.generate(), *blocks]) + '\n'
