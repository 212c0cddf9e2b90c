"""
Import generation for the generated TypeScript modules.

This module collects the names each generated file needs from each package
and renders them as import statements, one per package and kind.
"""

from typing import Dict, Iterable, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from ..type_system.mappings import (
    TYPES_PACKAGE,
    TRANSACTIONS_PACKAGE,
    CONNECT_PACKAGE,
    TYPE_IMPORTS,
    VALUE_CONSTRUCTOR_NAMESPACE,
    READ_PRIMITIVE,
    WRITE_PRIMITIVE,
    WALLET_PRIMITIVE,
)


class ImportGenerator:
    """
    Generates TypeScript import statements.

    Names are deduplicated per (module, kind) and keep the order in which
    they were first added; modules are rendered in first-use order. Type
    imports and value imports from the same module stay separate
    statements.
    """

    def __init__(self, ctx: 'CodeGenerationContext' = None):
        """
        Initialize the import generator.

        Args:
            ctx: The code generation context
        """
        self._ctx = ctx
        self._imports: Dict[Tuple[str, bool], List[str]] = {}

    def add(self, module: str, names: Iterable[str], type_only: bool = False) -> 'ImportGenerator':
        """Record names imported from module ('a as b' aliases are allowed)."""
        bucket = self._imports.setdefault((module, type_only), [])
        for name in names:
            if name not in bucket:
                bucket.append(name)
        return self

    def add_contract_imports(self) -> 'ImportGenerator':
        """Add the imports the contracts module needs in the current runtime."""
        self.add(TYPES_PACKAGE, TYPE_IMPORTS, type_only=True)
        self.add(TRANSACTIONS_PACKAGE, [VALUE_CONSTRUCTOR_NAMESPACE])
        if self._ctx is not None and self._ctx.options.is_full:
            self.add(TRANSACTIONS_PACKAGE, [READ_PRIMITIVE, WRITE_PRIMITIVE])
            self.add(CONNECT_PACKAGE, [WALLET_PRIMITIVE])
        return self

    def generate(self) -> str:
        """Generate the import statements, one per line."""
        lines = []
        for (module, type_only), names in self._imports.items():
            if not names:
                continue
            keyword = 'import type' if type_only else 'import'
            lines.append(f"{keyword} {{ {', '.join(names)} }} from '{module}'")
        return '\n'.join(lines)
