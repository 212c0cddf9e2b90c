"""
Code generation module for the Clarity to TypeScript generator.

This module provides TypeScript code generation from resolved contract ABIs:
the contracts module, the contract and generic React hook modules, and the
provider module the hooks depend on.
"""

from .context import CodeGenerationContext, GenerationOptions, RuntimeMode
from .base import BaseGenerator
from .naming import (
    NameAllocator,
    to_camel_case,
    capitalize,
    to_identifier,
    network_variant_name,
)
from .type_converter import TypeConverter
from .arguments import ArgumentSynthesizer, SynthesizedArgs, ArgBinding
from .function import FunctionGenerator
from .imports import ImportGenerator
from .contract import ContractGenerator, FunctionMembers, plan_members
from .generator import ContractsModuleGenerator
from .hooks import HookGenerator
from .generic_hooks import GENERIC_HOOKS, GenericHook, GenericHookGenerator
from .provider import ProviderGenerator
from .diagnostics import CodegenDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'CodeGenerationContext',
    'GenerationOptions',
    'RuntimeMode',
    'BaseGenerator',
    'NameAllocator',
    'to_camel_case',
    'capitalize',
    'to_identifier',
    'network_variant_name',
    'TypeConverter',
    'ArgumentSynthesizer',
    'SynthesizedArgs',
    'ArgBinding',
    'FunctionGenerator',
    'ImportGenerator',
    'ContractGenerator',
    'FunctionMembers',
    'plan_members',
    'ContractsModuleGenerator',
    'HookGenerator',
    'GENERIC_HOOKS',
    'GenericHook',
    'GenericHookGenerator',
    'ProviderGenerator',
    'CodegenDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
