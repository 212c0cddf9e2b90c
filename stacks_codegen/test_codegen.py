#!/usr/bin/env python3
"""
Unit tests for the contracts module generator.

Run with: python3 -m pytest stacks_codegen/test_codegen.py
   or: python3 stacks_codegen/test_codegen.py
"""

import sys
import os
import io
import re
# Add parent directory to path so the package imports when run directly
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from stacks_codegen.abi import (
    BoolType,
    BufferType,
    FunctionArg,
    IntType,
    ListType,
    OpaqueType,
    OptionalType,
    PrincipalType,
    ResolvedContract,
    ResponseType,
    StringAsciiType,
    TupleType,
    UIntType,
    parse_contract_abi,
)
from stacks_codegen.codegen import (
    ArgumentSynthesizer,
    CodeGenerationContext,
    CodegenDiagnostics,
    ContractsModuleGenerator,
    GenerationOptions,
    NameAllocator,
    RuntimeMode,
    TypeConverter,
    capitalize,
    network_variant_name,
    to_camel_case,
    to_identifier,
)
from stacks_codegen.codegen.naming import contract_identifier, safe_param_name
from stacks_codegen.clarity2ts import generate, generate_contract_interface
from stacks_codegen.errors import CodegenError


TEST_ADDRESS = 'SP2PABAF9FTAJYNFZH93XENAJ8FVY99RRM50D2JG9'

BUFFER_UNION = "Uint8Array | string | { type: 'ascii' | 'utf8' | 'hex'; value: string }"

TRANSFER = {
    'name': 'transfer',
    'access': 'public',
    'args': [
        {'name': 'amount', 'type': 'uint128'},
        {'name': 'sender', 'type': 'principal'},
        {'name': 'recipient', 'type': 'principal'},
    ],
    'outputs': {'response': {'ok': 'bool', 'error': 'uint128'}},
}

GET_BALANCE = {
    'name': 'get-balance',
    'access': 'read-only',
    'args': [{'name': 'account', 'type': 'principal'}],
    'outputs': 'uint128',
}


def make_contract(functions, name='testContract', contract_name='test-contract',
                  address=TEST_ADDRESS, network=None):
    return ResolvedContract(
        name=name,
        address=address,
        contract_name=contract_name,
        abi=parse_contract_abi({'functions': functions}),
        source='api',
        network=network,
    )


def top_level_members(code, contract_name):
    """Names of the members written directly inside `export const <name> = {`."""
    block = code.split(f'export const {contract_name} = {{', 1)[1].split('\n} as const', 1)[0]
    pattern = re.compile(r'^  (?:async )?([A-Za-z_$][\w$]*)[(:]')
    return {m.group(1) for m in map(pattern.match, block.split('\n')) if m}


class TestTypeConverter(unittest.TestCase):
    """Test Clarity to TypeScript type and wire mapping."""

    def setUp(self):
        self.ctx = CodeGenerationContext()
        self.converter = TypeConverter(self.ctx)

    def test_simple_types(self):
        self.assertEqual(self.converter.map_type(UIntType()), 'bigint')
        self.assertEqual(self.converter.map_type(IntType()), 'bigint')
        self.assertEqual(self.converter.map_type(BoolType()), 'boolean')
        self.assertEqual(self.converter.map_type(PrincipalType()), 'string')
        self.assertEqual(self.converter.map_type(StringAsciiType(32)), 'string')

    def test_buffer_type_is_union(self):
        self.assertEqual(self.converter.map_type(BufferType(256)), BUFFER_UNION)

    def test_optional_type(self):
        self.assertEqual(self.converter.map_type(OptionalType(UIntType())), 'bigint | null')

    def test_response_and_tuple_are_opaque(self):
        self.assertEqual(self.converter.map_type(ResponseType(BoolType(), UIntType())), 'any')
        self.assertEqual(self.converter.map_type(TupleType((('a', UIntType()),))), 'any')

    def test_list_types(self):
        self.assertEqual(self.converter.map_type(ListType(10, UIntType())), 'bigint[]')
        self.assertEqual(
            self.converter.map_type(ListType(10, OptionalType(UIntType()))),
            '(bigint | null)[]',
        )
        self.assertEqual(self.converter.map_type(ListType(10, ListType(5, UIntType()))), 'any[]')

    def test_opaque_type_warns(self):
        self.assertEqual(self.converter.map_type(OpaqueType.from_value({'trait_reference': 1})), 'any')
        codes = [d.code for d in self.ctx.diagnostics.warnings]
        self.assertEqual(codes, ['W001'])

    def test_wire_expressions(self):
        self.assertEqual(self.converter.to_wire_expr(UIntType(), 'v'), 'Cl.uint(v)')
        self.assertEqual(self.converter.to_wire_expr(IntType(), 'v'), 'Cl.int(v)')
        self.assertEqual(self.converter.to_wire_expr(StringAsciiType(8), 'v'), 'Cl.stringAscii(v)')
        self.assertEqual(
            self.converter.to_wire_expr(OptionalType(PrincipalType()), 'v'),
            'v === null || v === undefined ? Cl.none() : Cl.some(Cl.principal(v))',
        )

    def test_composite_values_pass_through(self):
        self.assertEqual(self.converter.to_wire_expr(TupleType((('a', UIntType()),)), 'v'), 'v')
        self.assertEqual(self.converter.to_wire_expr(ListType(3, UIntType()), 'v'), 'v')
        self.assertEqual(self.converter.to_wire_expr(ResponseType(BoolType(), UIntType()), 'v'), 'v')

    def test_buffer_dispatch_is_complete(self):
        code = self.converter.to_wire_expr(BufferType(32), 'argsObj.memo')
        self.assertIn('value instanceof Uint8Array', code)
        self.assertIn('Cl.buffer(value)', code)
        self.assertIn("value.startsWith('0x')", code)
        self.assertIn("case 'ascii':", code)
        self.assertIn('Cl.bufferFromAscii(value.value)', code)
        self.assertIn("case 'utf8':", code)
        self.assertIn('Cl.bufferFromUtf8(value.value)', code)
        self.assertIn("case 'hex':", code)
        self.assertIn('Cl.bufferFromHex(value.value)', code)
        self.assertIn('throw new Error(`Invalid buffer value', code)
        self.assertTrue(code.endswith('})(argsObj.memo)'))


class TestNaming(unittest.TestCase):
    """Test identifier utilities."""

    def test_camel_case(self):
        self.assertEqual(to_camel_case('get-token-uri'), 'getTokenUri')
        self.assertEqual(to_camel_case('transfer'), 'transfer')

    def test_capitalize(self):
        self.assertEqual(capitalize('daoContract'), 'DaoContract')
        self.assertEqual(capitalize(''), '')

    def test_to_identifier_replaces_invalid_characters(self):
        self.assertEqual(to_identifier('is-owner?'), 'isOwner_')
        self.assertEqual(to_identifier('2fa-enabled'), '_2faEnabled')

    def test_safe_param_name(self):
        self.assertEqual(safe_param_name('default'), 'default_')
        self.assertEqual(safe_param_name('token-id'), 'tokenId')

    def test_contract_identifier(self):
        self.assertEqual(contract_identifier('nft-nyc'), 'nftNyc')
        self.assertEqual(contract_identifier('default'), 'default_')

    def test_network_variant_names(self):
        self.assertEqual(network_variant_name('daoContract', 'mainnet'), 'daoContract')
        self.assertEqual(network_variant_name('daoContract', 'testnet'), 'testnetDaoContract')
        self.assertEqual(network_variant_name('daoContract', 'devnet'), 'devnetDaoContract')
        self.assertEqual(network_variant_name('daoContract', 'simnet'), 'simnetDaoContract')

    def test_name_allocator(self):
        allocator = NameAllocator({'address'})
        self.assertEqual(allocator.allocate('address'), 'address_')
        self.assertEqual(allocator.allocate('transfer'), 'transfer')
        self.assertEqual(allocator.allocate('transfer'), 'transfer_')
        self.assertEqual(allocator.renamed, {'address': 'address_', 'transfer': 'transfer_'})


class TestArgumentSynthesizer(unittest.TestCase):
    """Test parameter lists and wire arrays for function arguments."""

    def setUp(self):
        ctx = CodeGenerationContext()
        self.synthesizer = ArgumentSynthesizer(ctx, TypeConverter(ctx))

    def test_transfer_signature(self):
        args = self.synthesizer.synthesize([
            FunctionArg('amount', UIntType()),
            FunctionArg('sender', PrincipalType()),
            FunctionArg('recipient', PrincipalType()),
        ])
        self.assertEqual(args.positional_params, 'amount: bigint, sender: string, recipient: string')
        self.assertEqual(args.object_type, '{ amount: bigint; sender: string; recipient: string }')
        self.assertEqual(args.tuple_type, '[bigint, string, string]')
        self.assertEqual(
            args.union_signature,
            '...args: [{ amount: bigint; sender: string; recipient: string }] | [bigint, string, string]',
        )
        self.assertEqual(
            args.wire_args_expr(),
            '[Cl.uint(argsObj.amount), Cl.principal(argsObj.sender), Cl.principal(argsObj.recipient)]',
        )

    def test_kebab_case_fields(self):
        args = self.synthesizer.synthesize([FunctionArg('token-id', UIntType())])
        self.assertEqual(args.object_type, '{ tokenId: bigint }')
        self.assertEqual(args.wire_args_expr(), '[Cl.uint(argsObj.tokenId)]')

    def test_reserved_word_parameter(self):
        args = self.synthesizer.synthesize([FunctionArg('default', BoolType())])
        self.assertEqual(args.positional_params, 'default_: boolean')
        self.assertEqual(args.object_params, '{ default: default_ }: { default: boolean }')

    def test_single_opaque_argument_dispatch(self):
        args = self.synthesizer.synthesize([FunctionArg('pair', TupleType((('a', UIntType()),)))])
        normalization = '\n'.join(args.rest_normalization())
        self.assertIn("argsList.length === 1", normalization)
        self.assertIn("'pair' in argsList[0]", normalization)
        self.assertIn('    : { pair: argsList[0] }', normalization)

    def test_zero_arguments(self):
        args = self.synthesizer.synthesize([])
        self.assertFalse(args.has_args)
        self.assertEqual(args.positional_params, '')
        self.assertEqual(args.union_signature, '')
        self.assertEqual(args.wire_args_expr(), '[]')

    def test_both_forms_share_one_wire_array(self):
        args = self.synthesizer.synthesize([
            FunctionArg('amount', UIntType()),
            FunctionArg('memo', OptionalType(StringAsciiType(34))),
        ])
        normalization = '\n'.join(args.rest_normalization())
        self.assertIn("'amount' in argsList[0]", normalization)
        self.assertIn('{ amount: argsList[0], memo: argsList[1] }', normalization)
        self.assertIn('{ amount: args[0], memo: args[1] }', '\n'.join(args.param_normalization()))

    def test_buffer_argument_breaks_wire_array(self):
        args = self.synthesizer.synthesize([
            FunctionArg('id', UIntType()),
            FunctionArg('memo', BufferType(34)),
        ])
        wire = args.wire_args_expr()
        self.assertTrue(wire.startswith('[\n  Cl.uint(argsObj.id),\n  ((value: '))
        self.assertTrue(wire.endswith('})(argsObj.memo),\n]'))


class TestMinimalRuntime(unittest.TestCase):
    """Test the contracts module in minimal runtime."""

    def setUp(self):
        self.contract = make_contract([TRANSFER, GET_BALANCE])
        self.code = generate_contract_interface([self.contract], 'minimal')

    def test_imports(self):
        self.assertIn(
            "import type { ClarityContract, ContractCallParams, ExtractFunctionArgs, ReadOnlyCallParams } "
            "from '@secondlayer/clarity-types'\n"
            "import { Cl } from '@stacks/transactions'\n",
            self.code,
        )
        self.assertNotIn('@stacks/connect', self.code)

    def test_contract_object(self):
        self.assertIn('export const testContract = {', self.code)
        self.assertIn(f"address: '{TEST_ADDRESS}'", self.code)
        self.assertIn("contractName: 'test-contract'", self.code)
        self.assertIn('transfer(', self.code)
        self.assertIn('getBalance(', self.code)

    def test_no_helper_groups(self):
        self.assertNotIn('read:', self.code)
        self.assertNotIn('write:', self.code)
        self.assertNotIn('fetchTransfer', self.code)

    def test_method_signatures(self):
        self.assertRegex(
            self.code,
            r'transfer\(\.\.\.args: \[\{ amount: bigint; sender: string; recipient: string \}\] '
            r'\| \[bigint, string, string\]\): ContractCallParams \{',
        )
        self.assertIn('getBalance(...args: [{ account: string }] | [string]): ReadOnlyCallParams {', self.code)

    def test_wire_call_uses_domain_names(self):
        self.assertIn("functionName: 'transfer'", self.code)
        self.assertIn("functionName: 'get-balance'", self.code)
        self.assertIn('functionArgs: [Cl.principal(argsObj.account)]', self.code)
        self.assertNotIn('get-balance(', self.code)

    def test_abi_constant(self):
        self.assertIn('export const testContractAbi = {', self.code)
        self.assertIn('} as const', self.code)
        self.assertIn("name: 'get-balance'", self.code)
        self.assertIn("access: 'read-only'", self.code)

    def test_zero_argument_function(self):
        contract = make_contract(
            [{'name': 'get-info', 'access': 'read-only', 'args': [], 'outputs': 'bool'}],
            name='simpleContract', contract_name='simple',
        )
        code = generate_contract_interface([contract])
        self.assertIn('getInfo(): ReadOnlyCallParams {', code)
        self.assertIn('functionArgs: []', code)
        self.assertNotIn('argsObj', code)

    def test_simple_abi_constant(self):
        contract = make_contract(
            [{'name': 'simple-func', 'access': 'public', 'args': [], 'outputs': 'bool'}],
            contract_name='test',
        )
        code = generate_contract_interface([contract])
        self.assertIn('export const testContractAbi = {', code)
        self.assertIn("name: 'simple-func'", code)
        self.assertIn("access: 'public'", code)

    def test_kebab_case_function(self):
        contract = make_contract([{
            'name': 'get-token-uri',
            'access': 'read-only',
            'args': [{'name': 'token-id', 'type': 'uint128'}],
            'outputs': {'string-ascii': {'length': 256}},
        }])
        code = generate_contract_interface([contract])
        self.assertIn('getTokenUri(', code)
        self.assertNotIn('get-token-uri(', code)
        self.assertIn("'string-ascii': { length: 256 }", code)


class TestFullRuntime(unittest.TestCase):
    """Test the read/write/fetch helpers of the full runtime."""

    def setUp(self):
        self.contract = make_contract([TRANSFER, GET_BALANCE])
        self.code = generate_contract_interface([self.contract], 'full')

    def test_helper_groups(self):
        self.assertIn('read: {', self.code)
        self.assertIn('write: {', self.code)
        self.assertIn('async fetchTransfer(', self.code)
        self.assertIn('validateWithAbi: true', self.code)

    def test_full_imports(self):
        self.assertIn(
            "import { Cl, fetchCallReadOnlyFunction, makeContractCall } from '@stacks/transactions'",
            self.code,
        )
        self.assertIn("import { openContractCall } from '@stacks/connect'", self.code)

    def test_read_helper(self):
        self.assertIn('async getBalance(args: { account: string } | [string], options: {', self.code)
        self.assertIn("network?: 'mainnet' | 'testnet' | 'devnet'", self.code)
        self.assertIn('return await fetchCallReadOnlyFunction({', self.code)
        self.assertIn("senderAddress: options.senderAddress || 'SP000000000000000000002Q6VF78'", self.code)
        self.assertIn("network: options.network || 'mainnet'", self.code)

    def test_write_helper_forces_abi_validation(self):
        self.assertIn('senderKey: string', self.code)
        self.assertIn('anchorMode?: 1 | 2 | 3', self.code)
        self.assertIn('return await makeContractCall({', self.code)
        self.assertRegex(self.code, r'\.\.\.txOptions,\n\s+validateWithAbi: true,')

    def test_fetch_helper_rejects_on_cancel(self):
        self.assertIn('return new Promise((resolve, reject) => {', self.code)
        self.assertIn('openContractCall({', self.code)
        self.assertIn("reject(new Error('User cancelled transaction'))", self.code)

    def test_helpers_default_to_contract_network(self):
        contract = make_contract([GET_BALANCE], network='testnet')
        code = generate_contract_interface([contract], 'full')
        self.assertIn("network: options.network || 'testnet'", code)

        contract = make_contract([TRANSFER], network='simnet')
        code = generate_contract_interface([contract], 'full')
        self.assertIn("network: network || 'devnet'", code)
        self.assertIn("network: 'devnet',", code)

    def test_mode_monotonicity(self):
        minimal = top_level_members(generate_contract_interface([self.contract], 'minimal'), 'testContract')
        full = top_level_members(self.code, 'testContract')
        self.assertEqual(minimal, {'address', 'contractName', 'transfer', 'getBalance'})
        self.assertTrue(minimal < full)
        self.assertEqual(full - minimal, {'read', 'write', 'fetchTransfer'})

    def test_read_only_contract_has_no_write_group(self):
        code = generate_contract_interface([make_contract([GET_BALANCE])], 'full')
        self.assertIn('read: {', code)
        self.assertNotIn('write:', code)
        self.assertNotIn('async fetch', code)

    def test_public_only_contract_has_no_read_group(self):
        code = generate_contract_interface([make_contract([TRANSFER])], 'full')
        self.assertIn('write: {', code)
        self.assertNotIn('read:', code)

    def test_function_filters_select_helpers(self):
        options = GenerationOptions(runtime=RuntimeMode.FULL, exclude_functions=('transfer',))
        code = ContractsModuleGenerator(options).generate([self.contract])
        self.assertIn('transfer(', code)
        self.assertNotIn('fetchTransfer', code)
        self.assertNotIn('write:', code)
        self.assertIn('read: {', code)

        options = GenerationOptions(runtime=RuntimeMode.FULL, include_functions=('^get-',))
        code = ContractsModuleGenerator(options).generate([self.contract])
        self.assertNotIn('fetchTransfer', code)
        self.assertIn('async getBalance(', code)


class TestContractsModule(unittest.TestCase):
    """Test module assembly across contracts."""

    def test_private_functions_never_surface(self):
        contract = make_contract([
            TRANSFER,
            {'name': 'secret-helper', 'access': 'private', 'args': [], 'outputs': 'bool'},
        ])
        for runtime in ('minimal', 'full'):
            generator = ContractsModuleGenerator(GenerationOptions(runtime=runtime))
            code = generator.generate([contract])
            self.assertNotIn('secret-helper', code)
            self.assertNotIn('secretHelper', code)
            self.assertIn('I001', [d.code for d in generator.diagnostics.diagnostics])

    def test_empty_contract_is_skipped(self):
        empty = make_contract(
            [{'name': 'only-private', 'access': 'private', 'args': [], 'outputs': 'bool'}],
            name='emptyContract', contract_name='empty',
        )
        generator = ContractsModuleGenerator()
        code = generator.generate([empty, make_contract([TRANSFER])])
        self.assertNotIn('emptyContract', code)
        self.assertIn('export const testContract = {', code)
        self.assertIn('I002', [d.code for d in generator.diagnostics.diagnostics])

    def test_network_variants(self):
        dao = [{'name': 'vote', 'access': 'public', 'args': [{'name': 'yes', 'type': 'bool'}], 'outputs': 'bool'}]
        contracts = [
            make_contract(dao, name='daoContract', contract_name='dao-contract', network='mainnet'),
            make_contract(dao, name='testnetDaoContract', contract_name='dao-test',
                          address='ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM', network='testnet'),
        ]
        code = generate_contract_interface(contracts)
        self.assertIn('export const daoContract = {', code)
        self.assertIn('export const testnetDaoContract = {', code)
        self.assertIn('export const daoContractAbi = {', code)
        self.assertIn('export const testnetDaoContractAbi = {', code)
        self.assertLess(code.index('export const daoContract ='), code.index('export const testnetDaoContract ='))

    def test_buffer_argument_type(self):
        contract = make_contract([{
            'name': 'set-memo',
            'access': 'public',
            'args': [{'name': 'memo', 'type': {'buff': {'length': 256}}}],
            'outputs': 'bool',
        }])
        code = generate_contract_interface([contract])
        self.assertIn(f'...args: [{{ memo: {BUFFER_UNION} }}] | [{BUFFER_UNION}]', code)
        self.assertIn('throw new Error(`Invalid buffer value', code)
        self.assertIn("type: { buff: { length: 256 } }", code)

    def test_member_collisions_are_renamed(self):
        contract = make_contract([
            {'name': 'address', 'access': 'read-only', 'args': [], 'outputs': 'principal'},
            {'name': 'read', 'access': 'read-only', 'args': [], 'outputs': 'bool'},
        ])
        generator = ContractsModuleGenerator(GenerationOptions(runtime='full'))
        code = generator.generate([contract])
        members = top_level_members(code, 'testContract')
        self.assertIn('address_', members)
        self.assertIn('read_', members)
        self.assertIn('read', members)
        self.assertIn('W002', [d.code for d in generator.diagnostics.warnings])

    def test_opaque_argument_is_passed_through(self):
        contract = make_contract([{
            'name': 'use-trait',
            'access': 'public',
            'args': [{'name': 'token', 'type': 'trait_reference'}],
            'outputs': 'bool',
        }])
        generator = ContractsModuleGenerator()
        code = generator.generate([contract])
        self.assertIn('[{ token: any }] | [any]', code)
        self.assertIn('functionArgs: [argsObj.token]', code)
        self.assertIn("type: 'trait_reference'", code)
        self.assertEqual(len(generator.diagnostics.warnings), 1)

    def test_duplicate_names_are_rejected(self):
        contract = make_contract([TRANSFER])
        with self.assertRaises(CodegenError):
            generate_contract_interface([contract, contract])

    def test_invalid_contract_name_is_rejected(self):
        with self.assertRaises(CodegenError):
            generate_contract_interface([make_contract([TRANSFER], name='test-contract')])

    def test_reserved_word_contract_name_is_rejected(self):
        with self.assertRaises(CodegenError):
            generate_contract_interface([make_contract([TRANSFER], name='default')])

    def test_imported_contract_name_is_rejected(self):
        for name in ('Cl', 'fetchCallReadOnlyFunction', 'makeContractCall', 'openContractCall', 'useQuery'):
            with self.subTest(name):
                with self.assertRaises(CodegenError):
                    generate_contract_interface([make_contract([TRANSFER], name=name)])

    def test_abi_constant_collision_is_rejected(self):
        contracts = [
            make_contract([TRANSFER], name='token'),
            make_contract([TRANSFER], name='tokenAbi', contract_name='token-abi'),
        ]
        with self.assertRaises(CodegenError):
            generate_contract_interface(contracts)

    def test_determinism(self):
        contracts = [make_contract([TRANSFER, GET_BALANCE])]
        options = GenerationOptions(runtime='full', hooks=True)
        first = generate(contracts, options)
        second = generate(contracts, options)
        self.assertEqual(first, second)

    def test_header(self):
        code = generate_contract_interface([make_contract([TRANSFER])])
        self.assertTrue(code.startswith('/**\n * Generated by stacks-codegen\n * DO NOT EDIT MANUALLY\n */\n'))


class TestGenerationOptions(unittest.TestCase):
    """Test option validation."""

    def test_hooks_require_full_runtime(self):
        with self.assertRaises(CodegenError):
            GenerationOptions(runtime='minimal', hooks=True)

    def test_unknown_runtime(self):
        with self.assertRaises(CodegenError):
            GenerationOptions(runtime='extended')

    def test_runtime_string_is_converted(self):
        self.assertEqual(GenerationOptions(runtime='full').runtime, RuntimeMode.FULL)

    def test_generate_outputs(self):
        contracts = [make_contract([TRANSFER, GET_BALANCE])]
        minimal = generate(contracts, output_path='src/generated/contracts.ts')
        self.assertEqual([o.kind for o in minimal], ['contracts'])

        full = generate(
            contracts,
            GenerationOptions(runtime='full', hooks=True),
            output_path='src/generated/contracts.ts',
        )
        self.assertEqual([o.kind for o in full], ['contracts', 'hooks', 'generic-hooks', 'provider'])
        self.assertEqual(
            [o.path for o in full],
            [
                'src/generated/contracts.ts',
                'src/generated/hooks.ts',
                'src/generated/generic-hooks.ts',
                'src/generated/provider.ts',
            ],
        )


class TestDiagnostics(unittest.TestCase):
    """Test the diagnostics collector."""

    def test_repeated_reports_are_collapsed(self):
        diagnostics = CodegenDiagnostics()
        diagnostics.warn_opaque_type('"x"', 'token', 'mint')
        diagnostics.warn_opaque_type('"x"', 'token', 'mint')
        diagnostics.info_private_skipped('token', 'helper')
        self.assertEqual(diagnostics.count, 2)
        self.assertEqual(diagnostics.get_summary(), 'Generator warnings: 1 opaque-type')

    def test_summary(self):
        diagnostics = CodegenDiagnostics(verbose=True)
        self.assertEqual(diagnostics.get_summary(), 'No generator warnings.')
        diagnostics.warn_unknown_hook('useNope')
        out = io.StringIO()
        diagnostics.print_summary(out)
        self.assertIn('Generator warnings (1):', out.getvalue())
        self.assertIn('Unknown generic hook "useNope" was ignored. (W004)', out.getvalue())


if __name__ == '__main__':
    unittest.main()
