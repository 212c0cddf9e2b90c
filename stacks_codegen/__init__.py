"""
Clarity to TypeScript code generator for Stacks smart contracts.

This package generates typed TypeScript contract clients, helpers and React
hooks from Clarity contract ABIs.
"""

from .abi import (
    ClarityType,
    FunctionAccess,
    FunctionArg,
    ClarityFunction,
    ContractAbi,
    ResolvedContract,
    GeneratedOutput,
    parse_contract_abi,
)
from .codegen import GenerationOptions, RuntimeMode, CodegenDiagnostics
from .config import StacksConfig, ContractSource, OutputConfig, load_config
from .resolver import ContractResolver
from .errors import CodegenError, AbiParseError, ConfigError, AbiSourceError
from .clarity2ts import (
    generate,
    generate_contract_interface,
    generate_contract_hooks,
    generate_generic_hooks,
    generate_provider,
    write_output,
)

__all__ = [
    'ClarityType',
    'FunctionAccess',
    'FunctionArg',
    'ClarityFunction',
    'ContractAbi',
    'ResolvedContract',
    'GeneratedOutput',
    'parse_contract_abi',
    'GenerationOptions',
    'RuntimeMode',
    'CodegenDiagnostics',
    'StacksConfig',
    'ContractSource',
    'OutputConfig',
    'load_config',
    'ContractResolver',
    'CodegenError',
    'AbiParseError',
    'ConfigError',
    'AbiSourceError',
    'generate',
    'generate_contract_interface',
    'generate_contract_hooks',
    'generate_generic_hooks',
    'generate_provider',
    'write_output',
]
