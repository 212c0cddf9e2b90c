"""
Diagnostic/warning system for the generator.

Collects and reports warnings about ABI constructs that were degraded or
skipped during generation, so users can see where the generated interface
is looser than the contract.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for generator diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    contract: str = ''
    function: Optional[str] = None
    construct: str = ''  # e.g., 'opaque-type', 'identifier', 'network'

    def __str__(self) -> str:
        location = self.contract
        if self.function:
            location = f'{location}.{self.function}' if location else self.function
        if location:
            return f'[{self.severity.value}] {location}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class CodegenDiagnostics:
    """
    Collects generator warnings/diagnostics during code generation.

    Usage:
        diag = CodegenDiagnostics()
        diag.warn_opaque_type('{"foo": 1}', 'token', 'mint')
        # ... after generation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def count(self) -> int:
        return len(self._diagnostics)

    def _add(self, diagnostic: Diagnostic) -> None:
        # The same construct is visited by several emitters; report it once
        if diagnostic not in self._diagnostics:
            self._diagnostics.append(diagnostic)

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_opaque_type(
        self,
        raw: str,
        contract: str = '',
        function: Optional[str] = None,
    ) -> None:
        """Warn that a type shape was not recognised and typed as any."""
        self._add(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Unrecognised type {raw}; generated as "any" and passed through unconverted.',
            contract=contract,
            function=function,
            construct='opaque-type',
        ))

    def warn_identifier_renamed(
        self,
        original: str,
        renamed: str,
        contract: str = '',
    ) -> None:
        """Warn that a generated member name had to be changed to stay unique."""
        self._add(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'"{original}" collides with another member; generated as "{renamed}".',
            contract=contract,
            construct='identifier',
        ))

    def warn_network_skipped(
        self,
        network: str,
        reason: str,
        contract: str = '',
    ) -> None:
        """Warn that one network variant of a contract was not resolved."""
        self._add(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W003',
            message=f'Skipped {network} variant: {reason}',
            contract=contract,
            construct='network',
        ))

    def warn_unknown_hook(self, hook_name: str) -> None:
        """Warn that an included generic hook does not exist."""
        self._add(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W004',
            message=f'Unknown generic hook "{hook_name}" was ignored.',
            construct='hook',
        ))

    def info_private_skipped(self, contract: str, function: str) -> None:
        """Info that a private function was left out of the output."""
        self._add(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message='Private function skipped.',
            contract=contract,
            function=function,
            construct='private',
        ))

    def info_empty_contract(self, contract: str) -> None:
        """Info that a contract had nothing to generate."""
        self._add(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message='No public or read-only functions; nothing generated.',
            contract=contract,
            construct='empty-contract',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if warnings:
            print(f'\nGenerator warnings ({len(warnings)}):', file=file)
            for construct, diags in sorted(self._group_by_construct(warnings).items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        if infos and self._verbose:
            print(f'\nGenerator info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all warnings."""
        warnings = self.warnings
        if not warnings:
            return 'No generator warnings.'

        parts = [
            f'{len(diags)} {construct}'
            for construct, diags in sorted(self._group_by_construct(warnings).items())
        ]
        return f'Generator warnings: {", ".join(parts)}'

    def _group_by_construct(self, diagnostics: List[Diagnostic]) -> Dict[str, List[Diagnostic]]:
        grouped: Dict[str, List[Diagnostic]] = {}
        for d in diagnostics:
            grouped.setdefault(d.construct or 'other', []).append(d)
        return grouped
