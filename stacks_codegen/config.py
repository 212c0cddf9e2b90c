"""
Configuration loading for stacks-codegen.

A project is described by a stacks.config.json file:

    {
      "contracts": [
        {"address": "SP2PABAF9FTAJYNFZH93XENAJ8FVY99RRM50D2JG9.nft", "abi": "abis/nft.json"},
        {"name": "daoContract",
         "address": {"mainnet": "SP...dao-contract", "testnet": "ST...dao-test"},
         "abi": {"mainnet": "abis/dao.json", "testnet": "abis/dao-test.json"}},
        {"source": "abis/counter.json"}
      ],
      "output": {"path": "src/generated/contracts.ts", "runtime": "full", "hooks": true},
      "network": "mainnet"
    }

ABI paths are relative to the directory holding the config file.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .errors import ConfigError
from .codegen.context import GenerationOptions, RuntimeMode
from .type_system.mappings import NETWORKS


CONFIG_FILE_NAMES = ('stacks.config.json',)

# Written by `stacks-codegen init`
DEFAULT_CONFIG: Dict[str, Any] = {
    'contracts': [
        {
            'name': 'exampleContract',
            'address': 'SP2PABAF9FTAJYNFZH93XENAJ8FVY99RRM50D2JG9.example-contract',
            'abi': 'abis/example-contract.json',
        },
    ],
    'output': {
        'path': 'src/generated/contracts.ts',
        'runtime': 'minimal',
    },
    'network': 'mainnet',
}

NetworkValue = Union[str, Dict[str, str]]


@dataclass(frozen=True)
class ContractSource:
    """One entry of the config's contracts list.

    address and abi are either a single value or a mapping from network
    name to value. source points at a local ABI JSON file.
    """
    name: Optional[str] = None
    address: Optional[NetworkValue] = None
    abi: Optional[NetworkValue] = None
    source: Optional[str] = None

    @property
    def is_multi_network(self) -> bool:
        return isinstance(self.address, dict) and not self.source


@dataclass(frozen=True)
class OutputConfig:
    """Where and what to generate."""
    path: str
    runtime: str = RuntimeMode.MINIMAL.value
    hooks: bool = False
    include_hooks: Optional[Tuple[str, ...]] = None
    exclude_hooks: Tuple[str, ...] = ()
    include_functions: Tuple[str, ...] = ()
    exclude_functions: Tuple[str, ...] = ()

    def generation_options(self) -> GenerationOptions:
        return GenerationOptions(
            runtime=self.runtime,
            hooks=self.hooks,
            include_hooks=self.include_hooks,
            exclude_hooks=self.exclude_hooks,
            include_functions=self.include_functions,
            exclude_functions=self.exclude_functions,
        )


@dataclass(frozen=True)
class StacksConfig:
    """A validated configuration."""
    contracts: Tuple[ContractSource, ...]
    output: OutputConfig
    network: Optional[str] = None
    base_dir: Path = field(default_factory=Path)

    @property
    def output_path(self) -> Path:
        return self.base_dir / self.output.path


def find_config_file(cwd: Union[str, Path] = '.') -> Optional[Path]:
    """Return the first known config file in cwd, if any."""
    for file_name in CONFIG_FILE_NAMES:
        candidate = Path(cwd) / file_name
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Optional[Union[str, Path]] = None, cwd: Union[str, Path] = '.') -> StacksConfig:
    """Load and validate a config file.

    Args:
        config_path: Explicit config path; searched for in cwd when omitted
        cwd: Directory to search in

    Returns:
        The validated StacksConfig

    Raises:
        ConfigError: If no file is found, it is not valid JSON, or it fails validation
    """
    path = Path(cwd) / config_path if config_path else find_config_file(cwd)
    if path is None:
        raise ConfigError(
            'No config file found. Create a stacks.config.json file '
            '(stacks-codegen init) or specify a path with --config'
        )
    if not path.is_file():
        raise ConfigError(f'Config file not found: {path}')

    try:
        with open(path, 'r') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f'{path} is not valid JSON: {e}') from e

    return parse_config(raw, base_dir=path.parent)


def validate_config(raw: Any) -> None:
    """Check the shape of a raw config, raising ConfigError on the first problem."""
    if not isinstance(raw, dict):
        raise ConfigError('Config must be an object')

    contracts = raw.get('contracts')
    if not isinstance(contracts, list) or not contracts:
        raise ConfigError('Config must have at least one contract')

    output = raw.get('output')
    if not isinstance(output, dict):
        raise ConfigError('Config must have an output configuration')
    if not output.get('path') or not isinstance(output['path'], str):
        raise ConfigError('Config output must have a path')

    runtime = output.get('runtime', RuntimeMode.MINIMAL.value)
    if runtime not in [m.value for m in RuntimeMode]:
        raise ConfigError(f'Config output runtime must be "minimal" or "full", got "{runtime}"')
    if output.get('hooks') and runtime != RuntimeMode.FULL.value:
        raise ConfigError('Config output hooks require the "full" runtime')
    for key in ('includeHooks', 'excludeHooks', 'includeFunctions', 'excludeFunctions'):
        value = output.get(key)
        if value is not None and not _is_string_list(value):
            raise ConfigError(f'Config output {key} must be a list of strings')

    network = raw.get('network')
    if network is not None and network not in NETWORKS:
        raise ConfigError(f'Config network must be one of {", ".join(NETWORKS)}, got "{network}"')

    for index, contract in enumerate(contracts):
        _validate_contract(index, contract)


def _validate_contract(index: int, contract: Any) -> None:
    where = f'contracts[{index}]'
    if not isinstance(contract, dict):
        raise ConfigError(f'{where} must be an object')
    if not contract.get('address') and not contract.get('source'):
        raise ConfigError(f'{where}: each contract must have either an address or source')
    if contract.get('name') is not None and not isinstance(contract['name'], str):
        raise ConfigError(f'{where}: name must be a string')
    if contract.get('source') is not None and not isinstance(contract['source'], str):
        raise ConfigError(f'{where}: source must be a path string')
    for key in ('address', 'abi'):
        value = contract.get(key)
        if value is None or isinstance(value, str):
            continue
        if not isinstance(value, dict):
            raise ConfigError(f'{where}: {key} must be a string or a per-network object')
        for network, item in value.items():
            if network not in NETWORKS:
                raise ConfigError(f'{where}: unknown network "{network}" in {key}')
            if not isinstance(item, str):
                raise ConfigError(f'{where}: {key}.{network} must be a string')


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def parse_config(raw: Any, base_dir: Union[str, Path] = '.') -> StacksConfig:
    """Validate a raw config and build a StacksConfig from it."""
    validate_config(raw)

    output = raw['output']
    include_hooks = output.get('includeHooks')
    return StacksConfig(
        contracts=tuple(
            ContractSource(
                name=c.get('name'),
                address=c.get('address'),
                abi=c.get('abi'),
                source=c.get('source'),
            )
            for c in raw['contracts']
        ),
        output=OutputConfig(
            path=output['path'],
            runtime=output.get('runtime', RuntimeMode.MINIMAL.value),
            hooks=bool(output.get('hooks', False)),
            include_hooks=tuple(include_hooks) if include_hooks is not None else None,
            exclude_hooks=tuple(output.get('excludeHooks') or ()),
            include_functions=tuple(output.get('includeFunctions') or ()),
            exclude_functions=tuple(output.get('excludeFunctions') or ()),
        ),
        network=raw.get('network'),
        base_dir=Path(base_dir),
    )


def write_default_config(path: Union[str, Path]) -> Path:
    """Write DEFAULT_CONFIG to path, refusing to overwrite an existing file."""
    path = Path(path)
    if path.exists():
        raise ConfigError(f'{path} already exists')
    with open(path, 'w') as f:
        json.dump(DEFAULT_CONFIG, f, indent=2)
        f.write('\n')
    return path
