"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains common utilities
used across all specialized generator classes in the code generation pipeline,
plus the TypeScript literal formatting used for embedded constants.
"""

from typing import Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .naming import is_identifier


# Objects and arrays whose one-line form fits this width stay on one line
INLINE_LITERAL_WIDTH = 72


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared utilities for:
    - Indentation management
    - Re-indenting multi-line fragments
    - TypeScript literal formatting
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The code generation context containing all state
        """
        self._ctx = ctx

    # =========================================================================
    # INDENTATION
    # =========================================================================

    def indent(self) -> str:
        """Return the current indentation string."""
        return self._ctx.indent()

    @property
    def indent_level(self) -> int:
        """Get the current indentation level."""
        return self._ctx.indent_level

    @indent_level.setter
    def indent_level(self, value: int):
        """Set the current indentation level."""
        self._ctx.indent_level = value

    def reindent(self, fragment: str, prefix: str = '') -> str:
        """Indent every line after the first of a multi-line fragment.

        Fragments are written relative to column 0; the first line is
        assumed to continue an already-indented line.
        """
        if not prefix:
            prefix = self.indent()
        return fragment.replace('\n', '\n' + prefix)

    # =========================================================================
    # VALUE FORMATTING
    # =========================================================================

    def ts_literal(self, value: Any) -> str:
        """Format a JSON-like Python value as a TypeScript literal."""
        return format_ts_literal(value, self._ctx.indent_str)


def ts_string(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = value.replace('\\', '\\\\').replace("'", "\\'").replace('\n', '\\n')
    return f"'{escaped}'"


def ts_key(key: str) -> str:
    """Object key, quoted only when it is not a valid identifier."""
    return key if is_identifier(key) else ts_string(key)


def format_ts_literal(value: Any, indent_str: str = '  ', level: int = 0) -> str:
    """Format a JSON-like value as a TypeScript literal.

    Short objects and arrays are kept on one line; longer ones are broken
    one member per line with trailing commas.
    """
    inline = _format_inline(value)
    if len(inline) + len(indent_str) * level <= INLINE_LITERAL_WIDTH:
        return inline
    if not isinstance(value, (dict, list, tuple)) or not value:
        return inline

    inner = indent_str * (level + 1)
    closing = indent_str * level
    lines: List[str] = []
    if isinstance(value, dict):
        for key, item in value.items():
            lines.append(f'{inner}{ts_key(str(key))}: {format_ts_literal(item, indent_str, level + 1)},')
        return '{\n' + '\n'.join(lines) + f'\n{closing}}}'

    for item in value:
        lines.append(f'{inner}{format_ts_literal(item, indent_str, level + 1)},')
    return '[\n' + '\n'.join(lines) + f'\n{closing}]'


def _format_inline(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return ts_string(value)
    if isinstance(value, dict):
        if not value:
            return '{}'
        members = ', '.join(f'{ts_key(str(k))}: {_format_inline(v)}' for k, v in value.items())
        return f'{{ {members} }}'
    if isinstance(value, (list, tuple)):
        return '[' + ', '.join(_format_inline(v) for v in value) + ']'
    return ts_string(str(value))
