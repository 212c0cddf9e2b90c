#!/usr/bin/env python3
"""
Clarity to TypeScript Code Generator

Generates typed TypeScript clients for Stacks smart contracts from their
Clarity ABIs.

Key features:
- Call-object methods for every public and read-only function
- Optional read/write/wallet helpers (full runtime)
- Optional React hooks built on @tanstack/react-query
- Per-network contract variants (daoContract / testnetDaoContract)

Usage:
    stacks-codegen init
    stacks-codegen generate -c stacks.config.json

The generation functions in this module are pure: they take resolved
contracts and options and return GeneratedOutput records. Only main() and
write_output() touch the filesystem.
"""

import sys
from pathlib import Path, PurePosixPath
from typing import List, Optional, Sequence, Union

from .abi.types import GeneratedOutput, ResolvedContract
from .codegen import (
    ArgumentSynthesizer,
    CodeGenerationContext,
    CodegenDiagnostics,
    ContractsModuleGenerator,
    GenerationOptions,
    GenericHookGenerator,
    HookGenerator,
    ProviderGenerator,
    RuntimeMode,
    TypeConverter,
)
from .config import find_config_file, load_config, write_default_config, CONFIG_FILE_NAMES
from .errors import CodegenError
from .resolver import ContractResolver


HOOKS_FILE = 'hooks.ts'
GENERIC_HOOKS_FILE = 'generic-hooks.ts'
PROVIDER_FILE = 'provider.ts'


# =============================================================================
# GENERATION API
# =============================================================================

def generate(
    contracts: Sequence[ResolvedContract],
    options: Optional[GenerationOptions] = None,
    output_path: str = 'contracts.ts',
    network: Optional[str] = None,
    diagnostics: Optional[CodegenDiagnostics] = None,
) -> List[GeneratedOutput]:
    """Generate every output file for one run.

    Args:
        contracts: Resolved contracts, in output order
        options: Runtime and hook options (minimal runtime by default)
        output_path: Path of the contracts module; hook modules are written beside it
        network: Configured network, used as the provider default
        diagnostics: Collector to report into

    Returns:
        The contracts module, followed by the hook, generic-hook and
        provider modules when hooks are enabled
    """
    options = options or GenerationOptions()
    diagnostics = diagnostics if diagnostics is not None else CodegenDiagnostics()

    contracts_code = ContractsModuleGenerator(options, diagnostics).generate(contracts)
    outputs = [GeneratedOutput(output_path, contracts_code, 'contracts')]
    if not options.hooks:
        return outputs

    out_dir = PurePosixPath(output_path).parent
    contracts_import = f'./{PurePosixPath(output_path).stem}'
    outputs.extend([
        GeneratedOutput(
            str(out_dir / HOOKS_FILE),
            generate_contract_hooks(contracts, options, contracts_import, diagnostics),
            'hooks',
        ),
        GeneratedOutput(
            str(out_dir / GENERIC_HOOKS_FILE),
            generate_generic_hooks(options.include_hooks, options.exclude_hooks, diagnostics),
            'generic-hooks',
        ),
        GeneratedOutput(
            str(out_dir / PROVIDER_FILE),
            generate_provider(network),
            'provider',
        ),
    ])
    return outputs


def generate_contract_interface(
    contracts: Sequence[ResolvedContract],
    runtime: Union[str, RuntimeMode] = RuntimeMode.MINIMAL,
) -> str:
    """Generate only the contracts module for the given runtime."""
    return ContractsModuleGenerator(GenerationOptions(runtime=runtime)).generate(contracts)


def generate_contract_hooks(
    contracts: Sequence[ResolvedContract],
    options: Optional[GenerationOptions] = None,
    contracts_import: str = './contracts',
    diagnostics: Optional[CodegenDiagnostics] = None,
) -> str:
    """Generate the contract hooks module (full runtime only)."""
    options = options or GenerationOptions(runtime=RuntimeMode.FULL, hooks=True)
    if not options.is_full:
        raise CodegenError('Hook generation requires the "full" runtime')
    ctx = CodeGenerationContext(options=options, _diagnostics=diagnostics)
    arg_synthesizer = ArgumentSynthesizer(ctx, TypeConverter(ctx))
    return HookGenerator(ctx, arg_synthesizer).generate_module(contracts, contracts_import)


def generate_generic_hooks(
    include_hooks: Optional[Sequence[str]] = None,
    exclude_hooks: Sequence[str] = (),
    diagnostics: Optional[CodegenDiagnostics] = None,
) -> str:
    """Generate the generic hooks module, optionally filtered by hook name."""
    options = GenerationOptions(
        runtime=RuntimeMode.FULL,
        hooks=True,
        include_hooks=include_hooks,
        exclude_hooks=exclude_hooks,
    )
    ctx = CodeGenerationContext(options=options, _diagnostics=diagnostics)
    return GenericHookGenerator(ctx).generate_module()


def generate_provider(network: Optional[str] = None) -> str:
    """Generate the provider module the hook modules import."""
    return ProviderGenerator(CodeGenerationContext()).generate_module(network)


def write_output(outputs: Sequence[GeneratedOutput], base_dir: Union[str, Path] = '.') -> List[Path]:
    """Write generated files below base_dir, creating directories as needed."""
    written = []
    for output in outputs:
        path = Path(base_dir) / output.path
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            f.write(output.content)
        written.append(path)
    return written


# =============================================================================
# CLI
# =============================================================================

def run_generate(config_path: Optional[str], stdout: bool = False, verbose: bool = False) -> int:
    config = load_config(config_path)
    diagnostics = CodegenDiagnostics(verbose=verbose)

    resolver = ContractResolver(config.base_dir, config.network, diagnostics)
    contracts = resolver.resolve_all(config.contracts)
    print(f'Resolved {len(contracts)} contract(s)', file=sys.stderr)

    outputs = generate(
        contracts,
        config.output.generation_options(),
        output_path=config.output.path,
        network=config.network,
        diagnostics=diagnostics,
    )

    if stdout:
        for output in outputs:
            if len(outputs) > 1:
                print(f'// {output.path}')
            print(output.content)
    else:
        for path in write_output(outputs, config.base_dir):
            print(f'Written: {path}')

    diagnostics.print_summary()
    return 0


def run_init(cwd: Union[str, Path] = '.') -> int:
    existing = find_config_file(cwd)
    if existing is not None:
        print(f'{existing} already exists', file=sys.stderr)
        return 1
    path = write_default_config(Path(cwd) / CONFIG_FILE_NAMES[0])
    print(f'Created {path}')
    print('\nNext steps:')
    print(f'  1. Edit {path.name} to add your contracts and their ABI files')
    print('  2. Run "stacks-codegen generate" to generate TypeScript interfaces')
    return 0


def main(argv: Optional[List[str]] = None):
    import argparse

    parser = argparse.ArgumentParser(description='Clarity to TypeScript contract interface generator')
    subparsers = parser.add_subparsers(dest='command', required=True)

    generate_parser = subparsers.add_parser('generate', help='Generate TypeScript from the config file')
    generate_parser.add_argument('-c', '--config', help='Path to stacks.config.json')
    generate_parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of writing files')
    generate_parser.add_argument('-v', '--verbose', action='store_true', help='Print every diagnostic')

    subparsers.add_parser('init', help='Create a default stacks.config.json')

    args = parser.parse_args(argv)

    try:
        if args.command == 'init':
            status = run_init()
        else:
            status = run_generate(args.config, stdout=args.stdout, verbose=args.verbose)
    except CodegenError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    sys.exit(status)


if __name__ == '__main__':
    main()
