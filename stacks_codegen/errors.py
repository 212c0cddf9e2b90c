"""
Exception hierarchy for the Clarity to TypeScript generator.

The generation core only raises these for structurally broken input; type
shapes it does not recognise degrade to an opaque type instead.
"""


class CodegenError(Exception):
    """Base class for all generator errors."""


class AbiParseError(CodegenError):
    """Raised when raw ABI JSON is not shaped like a contract interface."""


class ConfigError(CodegenError):
    """Raised when a stacks.config.json file is missing or invalid."""


class AbiSourceError(CodegenError):
    """Raised when an ABI cannot be read for a contract/network pair."""

    def __init__(self, contract_id: str, reason: str):
        self.contract_id = contract_id
        self.reason = reason
        super().__init__(f'Failed to load ABI for {contract_id}: {reason}')
