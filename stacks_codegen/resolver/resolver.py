"""
Contract resolution.

Turns config entries into ResolvedContract records ready for generation:
splits contract identifiers, picks generated names, expands per-network
address maps into one contract per network, and loads the ABI JSON that was
fetched ahead of time.
"""

import json
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Union

from ..abi.parser import AbiParser
from ..abi.types import ContractAbi, ResolvedContract
from ..codegen.diagnostics import CodegenDiagnostics
from ..codegen.naming import contract_identifier, network_variant_name
from ..config import ContractSource, NetworkValue
from ..errors import AbiSourceError, ConfigError
from ..type_system.mappings import LOCAL_DEPLOYER_ADDRESS


# Network assumed for single-address contracts when the config names none
SINGLE_CONTRACT_NETWORK = 'testnet'
LOCAL_CONTRACT_NETWORK = 'devnet'

# (contract id, network, abi reference) -> raw ABI JSON
AbiLoader = Callable[[str, str, Optional[str]], Any]


def split_contract_id(contract_id: str) -> List[str]:
    """Split 'SP123.my-contract' into its address and contract name."""
    address, sep, name = contract_id.partition('.')
    if not sep or not address or not name:
        raise ConfigError(f'Contract address "{contract_id}" must look like "<address>.<contract-name>"')
    return [address, name]


def _for_network(value: Optional[NetworkValue], network: str) -> Optional[str]:
    if isinstance(value, dict):
        return value.get(network)
    return value


class ContractResolver:
    """
    Resolves ContractSource entries into ResolvedContract records.

    - Single-address contracts resolve once, for the configured network or
      testnet; failures propagate.
    - Per-network address maps resolve every listed network (or only the
      configured one). Non-mainnet variants are renamed, e.g.
      testnetDaoContract. A variant whose ABI cannot be loaded is reported
      and skipped.
    - Local sources read their ABI from the source path and default to the
      local devnet deployer address.
    """

    def __init__(
        self,
        base_dir: Union[str, Path] = '.',
        network: Optional[str] = None,
        diagnostics: Optional[CodegenDiagnostics] = None,
        abi_loader: Optional[AbiLoader] = None,
    ):
        """
        Initialize the resolver.

        Args:
            base_dir: Directory ABI paths are relative to
            network: The configured network, if any
            diagnostics: Collector for skipped-variant warnings
            abi_loader: Replaces reading ABI JSON files from base_dir
        """
        self.base_dir = Path(base_dir)
        self.network = network
        self.diagnostics = diagnostics or CodegenDiagnostics()
        self._abi_loader = abi_loader or self._read_abi_file
        self._parser = AbiParser()

    # =========================================================================
    # RESOLUTION
    # =========================================================================

    def resolve_all(self, sources: Sequence[ContractSource]) -> List[ResolvedContract]:
        """Resolve every source, keeping config order."""
        resolved: List[ResolvedContract] = []
        for source in sources:
            resolved.extend(self.resolve(source))
        return resolved

    def resolve(self, source: ContractSource) -> List[ResolvedContract]:
        """Resolve one config entry into zero or more contracts."""
        if source.source:
            return [self._resolve_local(source)]
        if source.is_multi_network:
            return self._resolve_networks(source)
        if isinstance(source.address, str):
            return [self._resolve_single(source, self.network or SINGLE_CONTRACT_NETWORK)]
        raise ConfigError('Contract must have either address or source')

    def _resolve_single(self, source: ContractSource, network: str) -> ResolvedContract:
        contract_id = source.address
        address, contract_name = split_contract_id(contract_id)
        return ResolvedContract(
            name=source.name or contract_identifier(contract_name),
            address=address,
            contract_name=contract_name,
            abi=self.load_abi(contract_id, network, _for_network(source.abi, network)),
            source='api',
            network=network,
        )

    def _resolve_networks(self, source: ContractSource) -> List[ResolvedContract]:
        addresses = source.address
        if self.network:
            networks = [self.network] if addresses.get(self.network) else []
        else:
            networks = list(addresses)

        resolved = []
        for network in networks:
            contract_id = addresses[network]
            address, contract_name = split_contract_id(contract_id)
            base_name = source.name or contract_identifier(contract_name)
            try:
                abi = self.load_abi(contract_id, network, _for_network(source.abi, network))
            except AbiSourceError as e:
                self.diagnostics.warn_network_skipped(network, e.reason, base_name)
                continue
            resolved.append(ResolvedContract(
                name=network_variant_name(base_name, network),
                address=address,
                contract_name=contract_name,
                abi=abi,
                source='api',
                network=network,
            ))
        return resolved

    def _resolve_local(self, source: ContractSource) -> ResolvedContract:
        network = self.network or LOCAL_CONTRACT_NETWORK
        stem = Path(source.source).name.split('.')[0]
        name = source.name or contract_identifier(stem)

        address = _for_network(source.address, network) or LOCAL_DEPLOYER_ADDRESS
        if '.' in address:
            address, contract_name = split_contract_id(address)
        else:
            contract_name = stem

        return ResolvedContract(
            name=name,
            address=address,
            contract_name=contract_name,
            abi=self.load_abi(f'{address}.{contract_name}', network, source.source),
            source='local',
            network=network,
        )

    # =========================================================================
    # ABI LOADING
    # =========================================================================

    def load_abi(self, contract_id: str, network: str, abi_ref: Optional[str]) -> ContractAbi:
        """Load and parse the ABI for one contract/network pair.

        Raises:
            AbiSourceError: If the ABI cannot be read
            AbiParseError: If it is read but is not a contract interface
        """
        raw = self._abi_loader(contract_id, network, abi_ref)
        return self._parser.parse_contract(raw)

    def _read_abi_file(self, contract_id: str, network: str, abi_ref: Optional[str]) -> Any:
        if not abi_ref:
            raise AbiSourceError(contract_id, f'no ABI file configured for {network}')
        path = self.base_dir / abi_ref
        try:
            with open(path, 'r') as f:
                return json.load(f)
        except OSError as e:
            raise AbiSourceError(contract_id, f'cannot read {path}: {e.strerror or e}') from e
        except json.JSONDecodeError as e:
            raise AbiSourceError(contract_id, f'{path} is not valid JSON: {e}') from e
