"""
Generic Stacks React hooks.

These hooks do not depend on any contract ABI: wallet connection, network
info, generic contract calls and reads, and Hiro API lookups. Every hook is
registered once, at import time, in GENERIC_HOOKS together with the imports
its source needs; selecting hooks is a lookup in that table.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator
from .generator import file_header
from .imports import ImportGenerator
from ..type_system.mappings import (
    CONNECT_PACKAGE,
    REACT_PACKAGE,
    REACT_QUERY_PACKAGE,
    TRANSACTIONS_PACKAGE,
)


PROVIDER_MODULE = './provider'

Imports = Tuple[Tuple[str, Tuple[str, ...]], ...]


@dataclass(frozen=True)
class GenericHook:
    """A registered generic hook: its name, source emitter and imports."""
    name: str
    emit: Callable[[], str]
    imports: Imports


GENERIC_HOOKS: Dict[str, GenericHook] = {}


def register(name: str, *imports: Tuple[str, Sequence[str]]):
    """Register the decorated emitter as the generic hook `name`."""
    def decorator(emit: Callable[[], str]) -> Callable[[], str]:
        GENERIC_HOOKS[name] = GenericHook(
            name=name,
            emit=emit,
            imports=tuple((module, tuple(names)) for module, names in imports),
        )
        return emit
    return decorator


# =============================================================================
# WALLET CONNECTION
# =============================================================================

@register(
    'useAccount',
    (REACT_QUERY_PACKAGE, ['useQuery']),
    (CONNECT_PACKAGE, ['isConnected', 'request']),
    (PROVIDER_MODULE, ['useStacksConfig']),
)
def _use_account() -> str:
    return '''export function useAccount() {
  const config = useStacksConfig()

  return useQuery({
    queryKey: ['stacks-account', config.network],
    queryFn: async () => {
      const disconnected = {
        address: undefined,
        addresses: undefined,
        isConnected: false,
        isConnecting: false,
        isDisconnected: true,
        status: 'disconnected' as const,
      }

      try {
        if (!isConnected()) return disconnected

        const result = await request('stx_getAddresses')
        if (!result || !result.addresses || result.addresses.length === 0) return disconnected

        const stxAddresses = result.addresses
          .filter((addr: any) => addr.address.startsWith('SP') || addr.address.startsWith('ST'))
          .map((addr: any) => addr.address)

        return {
          address: stxAddresses[0] || undefined,
          addresses: stxAddresses,
          isConnected: true,
          isConnecting: false,
          isDisconnected: false,
          status: 'connected' as const,
        }
      } catch (error) {
        // No wallet installed or the request was rejected
        return disconnected
      }
    },
    refetchOnWindowFocus: false,
    retry: false,
    staleTime: 1000 * 60 * 5,
    refetchInterval: 1000 * 30,
  })
}'''


@register(
    'useConnect',
    (REACT_QUERY_PACKAGE, ['useMutation', 'useQueryClient']),
    (CONNECT_PACKAGE, ['connect']),
)
def _use_connect() -> str:
    return '''export function useConnect() {
  const queryClient = useQueryClient()

  const mutation = useMutation({
    mutationFn: async (options: { forceWalletSelect?: boolean } = {}) => {
      return await connect(options)
    },
    onSuccess: () => {
      queryClient.invalidateQueries({ queryKey: ['stacks-account'] })
    },
    onError: (error) => {
      console.error('Connection failed:', error)
    },
  })

  return {
    connect: (options?: { forceWalletSelect?: boolean }) => mutation.mutate(options || {}),
    connectAsync: async (options?: { forceWalletSelect?: boolean }) => mutation.mutateAsync(options || {}),
    isPending: mutation.isPending,
    isError: mutation.isError,
    isSuccess: mutation.isSuccess,
    error: mutation.error,
    data: mutation.data,
    reset: mutation.reset,
    mutate: mutation.mutate,
    mutateAsync: mutation.mutateAsync,
  }
}'''


@register(
    'useDisconnect',
    (REACT_QUERY_PACKAGE, ['useMutation', 'useQueryClient']),
    (CONNECT_PACKAGE, ['disconnect']),
)
def _use_disconnect() -> str:
    return '''export function useDisconnect() {
  const queryClient = useQueryClient()

  const mutation = useMutation({
    mutationFn: async () => {
      return await disconnect()
    },
    onSuccess: () => {
      queryClient.clear()
    },
    onError: (error) => {
      console.error('Disconnect failed:', error)
    },
  })

  return {
    disconnect: () => mutation.mutate(),
    disconnectAsync: async () => mutation.mutateAsync(),
    isPending: mutation.isPending,
    isError: mutation.isError,
    isSuccess: mutation.isSuccess,
    error: mutation.error,
    data: mutation.data,
    reset: mutation.reset,
    mutate: mutation.mutate,
    mutateAsync: mutation.mutateAsync,
  }
}'''


@register(
    'useNetwork',
    (REACT_QUERY_PACKAGE, ['useQuery']),
    (PROVIDER_MODULE, ['useStacksConfig']),
)
def _use_network() -> str:
    return '''export function useNetwork() {
  const config = useStacksConfig()

  return useQuery({
    queryKey: ['stacks-network', config.network],
    queryFn: async () => {
      const network = config.network
      return {
        network,
        isMainnet: network === 'mainnet',
        isTestnet: network === 'testnet',
        isDevnet: network === 'devnet',
      }
    },
    staleTime: Infinity,
    refetchOnWindowFocus: false,
    retry: false,
  })
}'''


# =============================================================================
# WALLET REQUESTS
# =============================================================================

@register(
    'useContract',
    (REACT_QUERY_PACKAGE, ['useQueryClient']),
    (REACT_PACKAGE, ['useState', 'useCallback']),
    (CONNECT_PACKAGE, ['request', 'openContractCall as stacksOpenContractCall']),
    (PROVIDER_MODULE, ['useStacksConfig']),
)
def _use_contract() -> str:
    return '''export function useContract() {
  const config = useStacksConfig()
  const queryClient = useQueryClient()
  const [isRequestPending, setIsRequestPending] = useState(false)

  const openContractCall = useCallback(async (params: {
    contractAddress: string
    contractName: string
    functionName: string
    functionArgs: any[]
    network?: string
    postConditions?: any[]
    attachment?: string
    onFinish?: (data: any) => void
    onCancel?: () => void
  }) => {
    setIsRequestPending(true)

    try {
      const { contractAddress, contractName, functionName, functionArgs, onFinish, onCancel, ...options } = params
      const network = params.network || config.network || 'mainnet'

      try {
        const result = await request('stx_callContract', {
          contract: `${contractAddress}.${contractName}`,
          functionName,
          functionArgs,
          network,
          ...options,
        } as any)
        queryClient.invalidateQueries({ queryKey: ['stacks-account'] })
        onFinish?.(result)
        return result
      } catch (connectError) {
        // Wallets without stx_callContract still support the popup flow
        console.warn('stx_callContract not supported, falling back to openContractCall:', connectError)

        return await new Promise((resolve, reject) => {
          stacksOpenContractCall({
            contractAddress,
            contractName,
            functionName,
            functionArgs,
            network,
            ...options,
            onFinish: (data: any) => {
              queryClient.invalidateQueries({ queryKey: ['stacks-account'] })
              onFinish?.(data)
              resolve(data)
            },
            onCancel: () => {
              onCancel?.()
              reject(new Error('User cancelled transaction'))
            },
          } as any)
        })
      }
    } catch (error) {
      console.error('Contract call failed:', error)
      throw error instanceof Error ? error : new Error('Contract call failed')
    } finally {
      setIsRequestPending(false)
    }
  }, [config.network, queryClient])

  return {
    openContractCall,
    isRequestPending,
  }
}'''


@register(
    'useOpenSTXTransfer',
    (REACT_QUERY_PACKAGE, ['useQueryClient']),
    (REACT_PACKAGE, ['useState', 'useCallback']),
    (CONNECT_PACKAGE, ['openSTXTransfer as stacksOpenSTXTransfer']),
    (PROVIDER_MODULE, ['useStacksConfig']),
)
def _use_open_stx_transfer() -> str:
    return '''export function useOpenSTXTransfer() {
  const config = useStacksConfig()
  const queryClient = useQueryClient()
  const [isRequestPending, setIsRequestPending] = useState(false)

  const openSTXTransfer = useCallback(async (params: {
    recipient: string
    amount: string | number
    memo?: string
    network?: string
    onFinish?: (data: any) => void
    onCancel?: () => void
  }) => {
    setIsRequestPending(true)

    try {
      const { recipient, amount, memo, onFinish, onCancel, ...options } = params
      const network = params.network || config.network || 'mainnet'

      return await new Promise((resolve, reject) => {
        stacksOpenSTXTransfer({
          recipient,
          amount: amount.toString(),
          memo,
          network,
          ...options,
          onFinish: (data: any) => {
            queryClient.invalidateQueries({ queryKey: ['stacks-account'] })
            onFinish?.(data)
            resolve(data)
          },
          onCancel: () => {
            onCancel?.()
            reject(new Error('User cancelled transaction'))
          },
        } as any)
      })
    } catch (error) {
      console.error('STX transfer failed:', error)
      throw error instanceof Error ? error : new Error('STX transfer failed')
    } finally {
      setIsRequestPending(false)
    }
  }, [config.network, queryClient])

  return {
    openSTXTransfer,
    isRequestPending,
  }
}'''


@register(
    'useSignMessage',
    (REACT_PACKAGE, ['useState', 'useCallback']),
    (CONNECT_PACKAGE, ['openSignatureRequestPopup']),
    (PROVIDER_MODULE, ['useStacksConfig']),
)
def _use_sign_message() -> str:
    return '''export function useSignMessage() {
  const config = useStacksConfig()
  const [isRequestPending, setIsRequestPending] = useState(false)

  const signMessage = useCallback(async (params: {
    message: string
    network?: string
    onFinish?: (data: any) => void
    onCancel?: () => void
  }) => {
    setIsRequestPending(true)

    try {
      const { message, onFinish, onCancel, ...options } = params
      const network = params.network || config.network || 'mainnet'

      return await new Promise((resolve, reject) => {
        openSignatureRequestPopup({
          message,
          network,
          ...options,
          onFinish: (data: any) => {
            onFinish?.(data)
            resolve(data)
          },
          onCancel: () => {
            onCancel?.()
            reject(new Error('User cancelled message signing'))
          },
        } as any)
      })
    } catch (error) {
      console.error('Message signing failed:', error)
      throw error instanceof Error ? error : new Error('Message signing failed')
    } finally {
      setIsRequestPending(false)
    }
  }, [config.network])

  return {
    signMessage,
    isRequestPending,
  }
}'''


@register(
    'useDeployContract',
    (REACT_QUERY_PACKAGE, ['useQueryClient']),
    (REACT_PACKAGE, ['useState', 'useCallback']),
    (CONNECT_PACKAGE, ['openContractDeploy']),
    (PROVIDER_MODULE, ['useStacksConfig']),
)
def _use_deploy_contract() -> str:
    return '''export function useDeployContract() {
  const config = useStacksConfig()
  const queryClient = useQueryClient()
  const [isRequestPending, setIsRequestPending] = useState(false)

  const deployContract = useCallback(async (params: {
    contractName: string
    codeBody: string
    network?: string
    postConditions?: any[]
    onFinish?: (data: any) => void
    onCancel?: () => void
  }) => {
    setIsRequestPending(true)

    try {
      const { contractName, codeBody, onFinish, onCancel, ...options } = params
      const network = params.network || config.network || 'mainnet'

      return await new Promise((resolve, reject) => {
        openContractDeploy({
          contractName,
          codeBody,
          network,
          ...options,
          onFinish: (data: any) => {
            queryClient.invalidateQueries({ queryKey: ['stacks-account'] })
            onFinish?.(data)
            resolve(data)
          },
          onCancel: () => {
            onCancel?.()
            reject(new Error('User cancelled contract deployment'))
          },
        } as any)
      })
    } catch (error) {
      console.error('Contract deployment failed:', error)
      throw error instanceof Error ? error : new Error('Contract deployment failed')
    } finally {
      setIsRequestPending(false)
    }
  }, [config.network, queryClient])

  return {
    deployContract,
    isRequestPending,
  }
}'''


# =============================================================================
# CHAIN READS
# =============================================================================

@register(
    'useReadContract',
    (REACT_QUERY_PACKAGE, ['useQuery']),
    (TRANSACTIONS_PACKAGE, ['fetchCallReadOnlyFunction']),
    (PROVIDER_MODULE, ['useStacksConfig']),
)
def _use_read_contract() -> str:
    return '''export function useReadContract<TResult = any>(params: {
  contractAddress: string
  contractName: string
  functionName: string
  args?: any[] | Record<string, any>
  network?: 'mainnet' | 'testnet' | 'devnet'
  enabled?: boolean
}) {
  const config = useStacksConfig()
  const network = params.network || config.network || 'mainnet'

  return useQuery<TResult>({
    queryKey: ['read-contract', params.contractAddress, params.contractName, params.functionName, params.args, network],
    queryFn: async () => {
      // Arguments must already be Clarity values; without the ABI they cannot be converted
      let functionArgs: any[] = []
      if (Array.isArray(params.args)) {
        functionArgs = params.args
      } else if (params.args && typeof params.args === 'object') {
        functionArgs = Object.values(params.args)
      }

      return (await fetchCallReadOnlyFunction({
        contractAddress: params.contractAddress,
        contractName: params.contractName,
        functionName: params.functionName,
        functionArgs,
        network,
        senderAddress: config.senderAddress || 'SP000000000000000000002Q6VF78',
      })) as TResult
    },
    enabled: params.enabled ?? true,
  })
}'''


@register(
    'useTransaction',
    (REACT_QUERY_PACKAGE, ['useQuery']),
    (PROVIDER_MODULE, ['useStacksConfig', 'fetchTransaction']),
)
def _use_transaction() -> str:
    return '''export function useTransaction(txId?: string) {
  const config = useStacksConfig()

  return useQuery({
    queryKey: ['transaction', txId, config.network],
    queryFn: () => fetchTransaction({
      txId: txId!,
      network: config.network,
      apiUrl: config.apiUrl,
    }),
    enabled: !!txId,
  })
}'''


@register(
    'useBlock',
    (REACT_QUERY_PACKAGE, ['useQuery']),
    (PROVIDER_MODULE, ['useStacksConfig', 'fetchBlock']),
)
def _use_block() -> str:
    return '''export function useBlock(height?: number) {
  const config = useStacksConfig()

  return useQuery({
    queryKey: ['block', height, config.network],
    queryFn: () => fetchBlock({
      height: height!,
      network: config.network,
      apiUrl: config.apiUrl,
    }),
    enabled: typeof height === 'number',
  })
}'''


@register(
    'useAccountTransactions',
    (REACT_QUERY_PACKAGE, ['useQuery']),
    (PROVIDER_MODULE, ['useStacksConfig', 'fetchAccountTransactions']),
)
def _use_account_transactions() -> str:
    return '''export function useAccountTransactions(address?: string) {
  const config = useStacksConfig()

  return useQuery({
    queryKey: ['account-transactions', address, config.network],
    queryFn: () => fetchAccountTransactions({
      address: address!,
      network: config.network,
      apiUrl: config.apiUrl,
    }),
    enabled: !!address,
  })
}'''


@register(
    'useWaitForTransaction',
    (REACT_QUERY_PACKAGE, ['useMutation']),
    (PROVIDER_MODULE, ['useStacksConfig', 'fetchTransaction']),
)
def _use_wait_for_transaction() -> str:
    return '''export function useWaitForTransaction() {
  const config = useStacksConfig()

  return useMutation({
    mutationFn: async (txId: string) => {
      return new Promise((resolve, reject) => {
        const poll = async () => {
          try {
            const tx = await fetchTransaction({
              txId,
              network: config.network,
              apiUrl: config.apiUrl,
            })
            if (tx.tx_status === 'success') {
              resolve(tx)
            } else if (tx.tx_status === 'abort_by_response' || tx.tx_status === 'abort_by_post_condition') {
              reject(new Error(`Transaction failed: ${tx.tx_status}`))
            } else {
              setTimeout(poll, 2000)
            }
          } catch (error) {
            reject(error)
          }
        }
        poll()
      })
    },
  })
}'''


# =============================================================================
# SELECTION AND MODULE GENERATION
# =============================================================================

class GenericHookGenerator(BaseGenerator):
    """
    Generates the generic hooks module from the registry.

    include_hooks selects hooks by name, in the given order (all registered
    hooks in registry order when None); unknown names are reported and
    skipped. exclude_hooks removes hooks by name afterwards.
    """

    def select(
        self,
        include: Optional[Sequence[str]] = None,
        exclude: Sequence[str] = (),
    ) -> List[GenericHook]:
        """Look up the generic hooks to generate."""
        names = list(GENERIC_HOOKS) if include is None else list(include)
        selected = []
        for name in names:
            hook = GENERIC_HOOKS.get(name)
            if hook is None:
                self._ctx.diagnostics.warn_unknown_hook(name)
                continue
            if name in exclude or hook in selected:
                continue
            selected.append(hook)
        return selected

    def generate_module(self) -> str:
        """Generate the generic hooks module for the current options."""
        hooks = self.select(self._ctx.options.include_hooks, self._ctx.options.exclude_hooks)

        imports = ImportGenerator(self._ctx)
        for hook in hooks:
            for module, names in hook.imports:
                imports.add(module, names)

        parts = [
            file_header('Generated generic Stacks React hooks'),
            imports.generate(),
            *(hook.emit() for hook in hooks),
        ]
        return '\n\n'.join(p for p in parts if p) + '\n'
