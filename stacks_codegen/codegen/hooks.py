"""
React hook generation for contract functions.

This module generates the contract hooks module: one useQuery hook per
read-only function and one useMutation hook per public function, each
built on the helpers of the generated contracts module.
"""

from typing import List, Optional, Sequence, Set, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator, ts_string
from .arguments import ArgumentSynthesizer, SynthesizedArgs
from .contract import FunctionMembers, plan_members
from .generator import check_contract_names, file_header
from .imports import ImportGenerator
from .naming import NameAllocator, capitalize, to_identifier
from ..abi.types import ResolvedContract
from ..type_system.mappings import READ_ONLY_SENDER_ADDRESS, REACT_QUERY_PACKAGE


# State exposed by every mutation hook next to the call functions
MUTATION_STATE = ('isPending', 'isError', 'isSuccess', 'error', 'data', 'reset')

# Names a read hook binds itself; argument parameters must not shadow them
READ_HOOK_LOCALS = ('options', 'config', 'useQuery', 'useStacksConfig')


def query_key_arg(param: str, ts_type: str) -> str:
    """Query key entry for an argument; bigints are not serialisable as keys."""
    if 'bigint' in ts_type and ts_type.endswith('[]'):
        return f'{param}?.map(String)'
    if 'bigint' in ts_type:
        return f'{param}?.toString()'
    return param


class HookGenerator(BaseGenerator):
    """
    Generates contract-specific React hooks.

    Hooks are named use{Contract}{Function}. Read hooks stay disabled until
    every argument is defined; write hooks wrap the contract's fetch helper
    and expose the mutation state. Functions without helpers (filtered by
    include/exclude functions) get no hooks, and hook names listed in
    exclude_hooks are skipped.
    """

    def __init__(self, ctx: 'CodeGenerationContext', arg_synthesizer: ArgumentSynthesizer):
        """
        Initialize the hook generator.

        Args:
            ctx: The code generation context
            arg_synthesizer: Synthesizer shared with the contracts module
        """
        super().__init__(ctx)
        self._args = arg_synthesizer
        self._module_contracts: Set[str] = set()

    # =========================================================================
    # MAIN ENTRY POINT
    # =========================================================================

    def generate_module(
        self,
        contracts: Sequence[ResolvedContract],
        contracts_import: str = './contracts',
    ) -> str:
        """Generate the contract hooks module.

        Args:
            contracts: Resolved contracts, in output order
            contracts_import: Module specifier of the generated contracts module

        Returns:
            The TypeScript source of the hooks module
        """
        check_contract_names(contracts)
        self._module_contracts = {c.name for c in contracts}

        imports = ImportGenerator(self._ctx)
        hook_names = NameAllocator()
        used_contracts = []
        blocks = []
        for contract in contracts:
            hooks = self.generate_contract_hooks(contract, hook_names)
            if not hooks:
                continue
            used_contracts.append(contract.name)
            blocks.extend(code for _, code in hooks)

        if any('useQuery(' in b for b in blocks):
            imports.add(REACT_QUERY_PACKAGE, ['useQuery'])
            imports.add('./provider', ['useStacksConfig'])
        if any('useMutation(' in b for b in blocks):
            imports.add(REACT_QUERY_PACKAGE, ['useMutation', 'useQueryClient'])
        imports.add(contracts_import, used_contracts)

        parts = [file_header('Generated contract-specific React hooks'), imports.generate(), *blocks]
        return '\n\n'.join(p for p in parts if p) + '\n'

    def generate_contract_hooks(
        self,
        contract: ResolvedContract,
        hook_names: Optional[NameAllocator] = None,
    ) -> List[Tuple[str, str]]:
        """Generate (hook name, source) pairs for one contract."""
        if hook_names is None:
            hook_names = NameAllocator()
        self._ctx.reset_for_contract(contract.name, contract.network)
        if not contract.abi.surfaced_functions:
            return []

        hooks = []
        for member in plan_members(self._ctx, contract):
            if not member.helper:
                continue
            name = f'use{capitalize(contract.name)}{capitalize(to_identifier(member.function.name))}'
            if name in self._ctx.options.exclude_hooks:
                continue
            name = hook_names.allocate(name)

            self._ctx.reset_for_function(member.function.name)
            args = self._args.synthesize(member.function.args)
            if member.function.is_read_only:
                hooks.append((name, self.generate_read_hook(contract, member, args, name)))
            else:
                hooks.append((name, self.generate_write_hook(contract, member, args, name)))
        return hooks

    # =========================================================================
    # READ HOOKS
    # =========================================================================

    def generate_read_hook(
        self,
        contract: ResolvedContract,
        member: FunctionMembers,
        args: SynthesizedArgs,
        hook_name: str,
    ) -> str:
        """Generate a useQuery hook around the read helper."""
        names = self._read_hook_params(contract, args)
        params = [f'{name}?: {b.ts_type}' for name, b in zip(names, args.bindings)]
        params.append('options?: { enabled?: boolean }')

        key = [ts_string(member.function.name), f'{contract.name}.address']
        key.extend(query_key_arg(name, b.ts_type) for name, b in zip(names, args.bindings))

        call_args = []
        if args.has_args:
            positional = ', '.join(names)
            call_args.append(f'[{positional}] as {args.tuple_type}')

        enabled = [f'{name} !== undefined' for name in names]
        enabled.append('(options?.enabled ?? true)' if args.has_args else 'options?.enabled ?? true')

        lines = [
            f'export function {hook_name}({", ".join(params)}) {{',
            '  const config = useStacksConfig()',
            '',
            '  return useQuery({',
            f'    queryKey: [{", ".join(key)}],',
            '    queryFn: () =>',
            f'      {contract.name}.read.{member.helper}({", ".join(call_args + ["{"])}',
            '        network: config.network,',
            f"        senderAddress: config.senderAddress || '{READ_ONLY_SENDER_ADDRESS}',",
            '      }),',
            f'    enabled: {" && ".join(enabled)},',
            '  })',
            '}',
        ]
        return '\n'.join(lines)

    def _read_hook_params(self, contract: ResolvedContract, args: SynthesizedArgs) -> List[str]:
        """Parameter names for a read hook, kept clear of its locals and imports."""
        taken = NameAllocator({*READ_HOOK_LOCALS, contract.name, *self._module_contracts})
        return [taken.allocate(b.param) for b in args.bindings]

    # =========================================================================
    # WRITE HOOKS
    # =========================================================================

    def generate_write_hook(
        self,
        contract: ResolvedContract,
        member: FunctionMembers,
        args: SynthesizedArgs,
        hook_name: str,
    ) -> str:
        """Generate a useMutation hook around the wallet fetch helper.

        A successful call refreshes the account query and every read query
        keyed by this contract's address.
        """
        fetch = f'{contract.name}.{member.fetch}'
        locals_ = NameAllocator(set(MUTATION_STATE))
        call_name = locals_.allocate(to_identifier(member.function.name))
        async_name = locals_.allocate(f'{call_name}Async')

        if args.has_args:
            options_type = f'Parameters<typeof {fetch}>[1]'
            variables_type = '\n'.join([
                '{',
                f'      args: {args.args_union_type}',
                f'      options?: {options_type}',
                '    }',
            ])
            mutation_fn = [
                f'    mutationFn: async ({{ args, options }}: {variables_type}) => {{',
                f'      return await {fetch}(args, options)',
                '    },',
            ]
            call_params = f'args: {args.args_union_type}, options?: {options_type}'
            variables = '{ args, options }'
        else:
            options_type = f'Parameters<typeof {fetch}>[0]'
            mutation_fn = [
                f'    mutationFn: async (options?: {options_type}) => {{',
                f'      return await {fetch}(options)',
                '    },',
            ]
            call_params = f'options?: {options_type}'
            variables = 'options'

        lines = [
            f'export function {hook_name}() {{',
            '  const queryClient = useQueryClient()',
            '',
            '  const mutation = useMutation({',
            *mutation_fn,
            '    onSuccess: () => {',
            "      queryClient.invalidateQueries({ queryKey: ['stacks-account'] })",
            '      queryClient.invalidateQueries({',
            f'        predicate: (query) => query.queryKey[1] === {contract.name}.address,',
            '      })',
            '    },',
            '  })',
            '',
            '  return {',
            f'    {call_name}: ({call_params}) => mutation.mutate({variables}),',
            f'    {async_name}: async ({call_params}) => mutation.mutateAsync({variables}),',
        ]
        lines.extend(f'    {state}: mutation.{state},' for state in MUTATION_STATE)
        lines.extend(['  }', '}'])
        return '\n'.join(lines)
