#!/usr/bin/env python3
"""
Unit tests for the contract ABI parser.

Run with: python3 -m pytest stacks_codegen/test_abi.py
   or: python3 stacks_codegen/test_abi.py
"""

import sys
import os
import json
# Add parent directory to path so the package imports when run directly
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from stacks_codegen.abi import (
    AbiParser,
    BoolType,
    BufferType,
    FunctionAccess,
    IntType,
    ListType,
    OpaqueType,
    OptionalType,
    PrincipalType,
    ResponseType,
    StringAsciiType,
    StringUtf8Type,
    TupleType,
    UIntType,
    function_to_abi,
    parse_contract_abi,
    type_to_abi,
)
from stacks_codegen.errors import AbiParseError


class TestTypeParsing(unittest.TestCase):
    """Test parsing of individual type descriptions."""

    def setUp(self):
        self.parser = AbiParser()

    def test_atomic_types(self):
        self.assertEqual(self.parser.parse_type('uint128'), UIntType())
        self.assertEqual(self.parser.parse_type('int128'), IntType())
        self.assertEqual(self.parser.parse_type('bool'), BoolType())
        self.assertEqual(self.parser.parse_type('principal'), PrincipalType())

    def test_buffer_notations(self):
        self.assertEqual(self.parser.parse_type({'buffer': {'length': 32}}), BufferType(32))
        self.assertEqual(self.parser.parse_type({'buff': {'length': 32}}), BufferType(32))

    def test_strings(self):
        self.assertEqual(self.parser.parse_type({'string-ascii': {'length': 10}}), StringAsciiType(10))
        self.assertEqual(self.parser.parse_type({'string-utf8': {'length': 10}}), StringUtf8Type(10))

    def test_composite_types(self):
        self.assertEqual(
            self.parser.parse_type({'optional': 'principal'}),
            OptionalType(PrincipalType()),
        )
        self.assertEqual(
            self.parser.parse_type({'response': {'ok': 'bool', 'error': 'uint128'}}),
            ResponseType(BoolType(), UIntType()),
        )
        self.assertEqual(
            self.parser.parse_type({'list': {'type': 'uint128', 'length': 5}}),
            ListType(5, UIntType()),
        )
        self.assertEqual(
            self.parser.parse_type({'tuple': [
                {'name': 'owner', 'type': 'principal'},
                {'name': 'id', 'type': 'uint128'},
            ]}),
            TupleType((('owner', PrincipalType()), ('id', UIntType()))),
        )

    def test_unknown_shapes_are_opaque(self):
        self.assertEqual(self.parser.parse_type('trait_reference'), OpaqueType.from_value('trait_reference'))
        self.assertIsInstance(self.parser.parse_type({'buff': {}}), OpaqueType)
        self.assertIsInstance(self.parser.parse_type({'a': 1, 'b': 2}), OpaqueType)
        self.assertIsInstance(self.parser.parse_type(None), OpaqueType)

    def test_opaque_keeps_original_json(self):
        raw = {'future-type': {'bits': 256}}
        parsed = self.parser.parse_type(raw)
        self.assertEqual(type_to_abi(parsed), raw)


class TestContractParsing(unittest.TestCase):
    """Test parsing of whole contract interfaces."""

    ABI = {
        'functions': [
            {
                'name': 'transfer',
                'access': 'public',
                'args': [
                    {'name': 'amount', 'type': 'uint128'},
                    {'name': 'recipient', 'type': 'principal'},
                ],
                'outputs': {'type': {'response': {'ok': 'bool', 'error': 'uint128'}}},
            },
            {'name': 'get-owner', 'access': 'read-only', 'args': [], 'outputs': {'type': 'principal'}},
            {'name': 'check', 'access': 'private', 'args': [], 'outputs': {'type': 'bool'}},
        ],
        'variables': [],
        'maps': [],
    }

    def test_functions_in_order(self):
        abi = parse_contract_abi(self.ABI)
        self.assertEqual([f.name for f in abi.functions], ['transfer', 'get-owner', 'check'])
        self.assertEqual(abi.functions[0].access, FunctionAccess.PUBLIC)
        self.assertEqual(abi.functions[0].outputs, ResponseType(BoolType(), UIntType()))
        self.assertEqual(abi.functions[1].outputs, PrincipalType())

    def test_surfaced_functions_exclude_private(self):
        abi = parse_contract_abi(self.ABI)
        self.assertEqual([f.name for f in abi.surfaced_functions], ['transfer', 'get-owner'])
        self.assertEqual([f.name for f in abi.read_only_functions], ['get-owner'])
        self.assertEqual([f.name for f in abi.public_functions], ['transfer'])

    def test_contract_info_wrapper(self):
        abi = parse_contract_abi({'source_code': '(define-public ...)', 'abi': json.dumps(self.ABI)})
        self.assertEqual(len(abi.functions), 3)

    def test_malformed_contracts(self):
        with self.assertRaises(AbiParseError):
            parse_contract_abi([])
        with self.assertRaises(AbiParseError):
            parse_contract_abi({'functions': {}})
        with self.assertRaises(AbiParseError):
            parse_contract_abi({'functions': [{'access': 'public'}]})
        with self.assertRaises(AbiParseError):
            parse_contract_abi({'functions': [{'name': 'f', 'access': 'internal'}]})
        with self.assertRaises(AbiParseError):
            parse_contract_abi({'abi': '{not json'})

    def test_function_to_abi(self):
        func = parse_contract_abi(self.ABI).functions[0]
        self.assertEqual(function_to_abi(func), {
            'name': 'transfer',
            'access': 'public',
            'args': [
                {'name': 'amount', 'type': 'uint128'},
                {'name': 'recipient', 'type': 'principal'},
            ],
            'outputs': {'response': {'ok': 'bool', 'error': 'uint128'}},
        })

    def test_buffers_serialise_in_short_notation(self):
        self.assertEqual(type_to_abi(BufferType(34)), {'buff': {'length': 34}})
        self.assertEqual(
            type_to_abi(ListType(3, OptionalType(BufferType(8)))),
            {'list': {'type': {'optional': {'buff': {'length': 8}}}, 'length': 3}},
        )


if __name__ == '__main__':
    unittest.main()
