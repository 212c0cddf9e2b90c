"""
Provider module generation.

The hook modules read the active network and API endpoint from a React
context. This module generates that context (StacksProvider and
useStacksConfig) plus the small Hiro API fetch helpers the generic hooks use.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator, ts_string
from .generator import file_header
from .imports import ImportGenerator
from ..type_system.mappings import HELPER_NETWORKS, HIRO_API_URLS, REACT_PACKAGE, helper_network


CONTEXT_SECTION = '''export type StacksNetworkName = __NETWORK_UNION__

export interface StacksConfig {
  network: StacksNetworkName
  apiUrl: string
  senderAddress?: string
}

const DEFAULT_API_URLS: Record<StacksNetworkName, string> = __API_URLS__

const defaultConfig: StacksConfig = {
  network: __DEFAULT_NETWORK__,
  apiUrl: DEFAULT_API_URLS[__DEFAULT_NETWORK__],
}

const StacksConfigContext = createContext<StacksConfig>(defaultConfig)

export function StacksProvider({
  children,
  network,
  apiUrl,
  senderAddress,
}: {
  children?: ReactNode
  network?: StacksNetworkName
  apiUrl?: string
  senderAddress?: string
}) {
  const resolvedNetwork = network || defaultConfig.network
  const value: StacksConfig = {
    network: resolvedNetwork,
    apiUrl: apiUrl || DEFAULT_API_URLS[resolvedNetwork],
    senderAddress,
  }
  return createElement(StacksConfigContext.Provider, { value }, children)
}

export function useStacksConfig(): StacksConfig {
  return useContext(StacksConfigContext)
}'''

API_SECTION = '''type ApiParams = { network?: StacksNetworkName; apiUrl?: string }

function apiBase(params: ApiParams): string {
  return params.apiUrl || DEFAULT_API_URLS[params.network || defaultConfig.network]
}

async function getJson(url: string): Promise<any> {
  const response = await fetch(url)
  if (!response.ok) {
    throw new Error(`Stacks API request failed (${response.status}): ${url}`)
  }
  return response.json()
}

export async function fetchTransaction(params: ApiParams & { txId: string }) {
  return getJson(`${apiBase(params)}/extended/v1/tx/${params.txId}`)
}

export async function fetchBlock(params: ApiParams & { height: number }) {
  return getJson(`${apiBase(params)}/extended/v1/block/by_height/${params.height}`)
}

export async function fetchAccountTransactions(
  params: ApiParams & { address: string; limit?: number; offset?: number }
) {
  const limit = params.limit ?? 20
  const offset = params.offset ?? 0
  return getJson(
    `${apiBase(params)}/extended/v1/address/${params.address}/transactions?limit=${limit}&offset=${offset}`
  )
}

export async function fetchAccountInfo(params: ApiParams & { address: string }) {
  return getJson(`${apiBase(params)}/v2/accounts/${params.address}?proof=0`)
}'''


class ProviderGenerator(BaseGenerator):
    """Generates the provider module imported by both hook modules."""

    def generate_module(self, network: Optional[str] = None) -> str:
        """Generate the provider module.

        Args:
            network: The configured network, used as the provider default

        Returns:
            The TypeScript source of the provider module
        """
        imports = ImportGenerator(self._ctx)
        imports.add(REACT_PACKAGE, ['createContext', 'createElement', 'useContext'])
        imports.add(REACT_PACKAGE, ['ReactNode'], type_only=True)

        urls = {n: HIRO_API_URLS[n] for n in HELPER_NETWORKS}
        context = (
            CONTEXT_SECTION
            .replace('__NETWORK_UNION__', ' | '.join(ts_string(n) for n in HELPER_NETWORKS))
            .replace('__API_URLS__', self.ts_literal(urls))
            .replace('__DEFAULT_NETWORK__', ts_string(helper_network(network)))
        )

        parts = [file_header('Generated Stacks provider and API helpers'), imports.generate(), context, API_SECTION]
        return '\n\n'.join(parts) + '\n'
