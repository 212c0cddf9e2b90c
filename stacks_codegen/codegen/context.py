"""
Code generation context for the TypeScript code generator.

This module provides the generation options and a context class that holds
all state needed during one generation run, separating state management
from the generation logic.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..errors import CodegenError
from .diagnostics import CodegenDiagnostics


class RuntimeMode(Enum):
    """How much runtime code to generate for every contract."""
    MINIMAL = 'minimal'
    FULL = 'full'


@dataclass(frozen=True)
class GenerationOptions:
    """
    Options for one generation run.

    hooks is only valid with the full runtime. include_hooks restricts the
    generic hooks to the listed names (None means all of them), while
    exclude_hooks removes generic or contract hooks by name.
    include_functions / exclude_functions select which functions get read,
    write and fetch helpers and hooks, matching by substring or regex on the
    Clarity function name.
    """
    runtime: RuntimeMode = RuntimeMode.MINIMAL
    hooks: bool = False
    include_hooks: Optional[Tuple[str, ...]] = None
    exclude_hooks: Tuple[str, ...] = ()
    include_functions: Tuple[str, ...] = ()
    exclude_functions: Tuple[str, ...] = ()

    def __post_init__(self):
        if isinstance(self.runtime, str):
            try:
                object.__setattr__(self, 'runtime', RuntimeMode(self.runtime))
            except ValueError:
                raise CodegenError(
                    f'Unknown runtime "{self.runtime}"; expected "minimal" or "full"'
                ) from None
        for name in ('exclude_hooks', 'include_functions', 'exclude_functions'):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if self.include_hooks is not None:
            object.__setattr__(self, 'include_hooks', tuple(self.include_hooks))
        if self.hooks and self.runtime != RuntimeMode.FULL:
            raise CodegenError('Hook generation requires the "full" runtime')

    @property
    def is_full(self) -> bool:
        return self.runtime == RuntimeMode.FULL


def matches_pattern(name: str, pattern: str) -> bool:
    """True if pattern is a substring of name or a regex matching it."""
    if pattern in name:
        return True
    try:
        return re.search(pattern, name) is not None
    except re.error:
        return False


def filter_names(
    name: str,
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> bool:
    """Apply include/exclude pattern lists to a single name."""
    if include and not any(matches_pattern(name, p) for p in include):
        return False
    if exclude and any(matches_pattern(name, p) for p in exclude):
        return False
    return True


@dataclass
class CodeGenerationContext:
    """
    Holds all state needed during TypeScript code generation.

    A fresh context is created for every run, so generation stays reentrant.
    """

    options: GenerationOptions = field(default_factory=GenerationOptions)

    # Indentation state
    indent_level: int = 0
    indent_str: str = '  '

    # Contract context
    current_contract: str = ''
    current_function: Optional[str] = None
    current_network: Optional[str] = None

    # Diagnostics collector
    _diagnostics: Optional[CodegenDiagnostics] = None

    @property
    def diagnostics(self) -> CodegenDiagnostics:
        """Get the diagnostics collector, creating one if needed."""
        if self._diagnostics is None:
            self._diagnostics = CodegenDiagnostics()
        return self._diagnostics

    @property
    def runtime(self) -> RuntimeMode:
        return self.options.runtime

    def indent(self) -> str:
        """Return the current indentation string."""
        return self.indent_str * self.indent_level

    def wants_helpers_for(self, function_name: str) -> bool:
        """Whether read/write/fetch helpers and hooks are generated for a function."""
        return filter_names(
            function_name,
            self.options.include_functions,
            self.options.exclude_functions,
        )

    def reset_for_contract(self, contract_name: str = '', network: Optional[str] = None) -> None:
        """Reset state for a new contract."""
        self.current_contract = contract_name
        self.current_function = None
        self.current_network = network
        self.indent_level = 0

    def reset_for_function(self, function_name: Optional[str] = None) -> None:
        """Reset state for a new function."""
        self.current_function = function_name
