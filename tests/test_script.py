import unittest

from scriptasm.script import *

class TestDataPushes(unittest.TestCase):
    def test_direct(self):
        script = Script()
        script.push_bytes(b'\x00')
        self.assertEqual(script.serialize(), b'\x01\x00')

    def test_empty(self):
        script = Script()
        script.push_bytes(b'')
        self.assertEqual(script.serialize(), b'\x00')

    def test_largest_direct(self):
        msg = b'\x01' * 75
        script = Script()
        script.push_bytes(msg)
        self.assertEqual(script.serialize(), bytes([75]) + msg)

    def test_pushdata1(self):
        msg = b'\x01' * 76
        script = Script()
        script.push_bytes(msg)
        self.assertEqual(script.serialize(), bytes([OP_PUSHDATA1, 76]) + msg)

        msg = b'\x01' * 255
        script = Script()
        script.push_bytes(msg)
        self.assertEqual(script.serialize(), bytes([OP_PUSHDATA1, 255]) + msg)

    def test_pushdata2(self):
        msg = b'\x00' * 257
        script = Script()
        script.push_bytes(msg)
        self.assertEqual(script.serialize(), bytes([OP_PUSHDATA2, 0x01, 0x01]) + msg)

    def test_pushdata4(self):
        msg = b'\x00' * 0x10000
        script = Script()
        script.push_bytes(msg)
        self.assertEqual(script.serialize(), bytes([OP_PUSHDATA4, 0x00, 0x00, 0x01, 0x00]) + msg)
        self.assertEqual(script.serialize_size(), 5 + 0x10000)

class TestPushInt(unittest.TestCase):
    def test_small(self):
        for v in range(1, 17):
            script = Script()
            script.push_int(v)
            self.assertEqual(script.serialize(), bytes([OP_1 + v - 1]))

    def test_zero_and_negative_one(self):
        script = Script()
        script.push_int(0)
        script.push_int(-1)
        self.assertEqual(script.serialize(), bytes([OP_0, OP_1NEGATE]))

    def test_pushed(self):
        script = Script()
        script.push_int(17)
        script.push_int(-2)
        script.push_int(1000)
        self.assertEqual(script.serialize(), b'\x01\x11' + b'\x01\x82' + b'\x02\xe8\x03')

class TestScriptNum(unittest.TestCase):
    vectors = [
        (0, b''),
        (1, b'\x01'),
        (-1, b'\x81'),
        (127, b'\x7f'),
        (128, b'\x80\x00'),
        (-128, b'\x80\x80'),
        (255, b'\xff\x00'),
        (-255, b'\xff\x80'),
        (256, b'\x00\x01'),
        (-256, b'\x00\x81'),
        (0x7fffffff, b'\xff\xff\xff\x7f'),
        (-0x7fffffff, b'\xff\xff\xff\xff'),
        ((1 << 63) - 1, b'\xff\xff\xff\xff\xff\xff\xff\x7f'),
        (-(1 << 63), b'\x00\x00\x00\x00\x00\x00\x00\x80\x80'),
    ]

    def test_serialize(self):
        for v, data in TestScriptNum.vectors:
            self.assertEqual(ScriptNum.serialize(v), data, v)

    def test_unserialize(self):
        for v, data in TestScriptNum.vectors:
            self.assertEqual(ScriptNum.unserialize(data), v, v)

    def test_negative_zero(self):
        self.assertEqual(ScriptNum.unserialize(b'\x80'), 0)
        self.assertEqual(ScriptNum.unserialize(b'\x00\x80'), 0)

class TestOpNames(unittest.TestCase):
    def test_numbers(self):
        self.assertEqual(get_op_name(OP_0), '0')
        self.assertEqual(get_op_name(OP_FALSE), '0')
        self.assertEqual(get_op_name(OP_1NEGATE), '-1')
        self.assertEqual(get_op_name(OP_TRUE), '1')
        self.assertEqual(get_op_name(OP_16), '16')

    def test_named(self):
        self.assertEqual(get_op_name(OP_PUSHDATA1), 'OP_PUSHDATA1')
        self.assertEqual(get_op_name(OP_RESERVED), 'OP_RESERVED')
        self.assertEqual(get_op_name(OP_DUP), 'OP_DUP')
        self.assertEqual(get_op_name(OP_CHECKSIG), 'OP_CHECKSIG')
        self.assertEqual(get_op_name(OP_NOP10), 'OP_NOP10')

    def test_expansion_nops(self):
        self.assertEqual(get_op_name(OP_NOP2), 'OP_CHECKLOCKTIMEVERIFY')
        self.assertEqual(get_op_name(OP_NOP3), 'OP_CHECKSEQUENCEVERIFY')

    def test_unknown(self):
        self.assertEqual(get_op_name(0x01), UNKNOWN_OP_NAME)
        self.assertEqual(get_op_name(0x4b), UNKNOWN_OP_NAME)
        self.assertEqual(get_op_name(FIRST_UNDEFINED_OP_VALUE), UNKNOWN_OP_NAME)
        self.assertEqual(get_op_name(OP_INVALIDOPCODE), 'OP_INVALIDOPCODE')

    def test_all_defined(self):
        for op in range(OP_PUSHDATA1, FIRST_UNDEFINED_OP_VALUE):
            self.assertNotEqual(get_op_name(op), UNKNOWN_OP_NAME, hex(op))
