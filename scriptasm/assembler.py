import re
import struct
import types

from .script import *
from .util import *

class ScriptSyntaxError(Exception):
    '''Raised when a textual script can't be assembled.  *script* is always the complete input.'''
    def __init__(self, script, message, *args, **kwargs):
        Exception.__init__(self, message, *args, **kwargs)
        self.script = script

class MalformedHex(ScriptSyntaxError):
    def __init__(self, script, token):
        ScriptSyntaxError.__init__(self, script, "Hex numbers expected to be formatted in full-byte chunks (ex: 0x00 instead of 0x0): {}".format(token))
        self.token = token

class UnknownToken(ScriptSyntaxError):
    def __init__(self, script, token):
        ScriptSyntaxError.__init__(self, script, "Error parsing script: {}".format(script))
        self.token = token

class PushSizeMismatch(ScriptSyntaxError):
    def __init__(self, script, token, expected, actual):
        ScriptSyntaxError.__init__(self, script, "Wrong number of bytes being pushed. Expected:{} Pushed:{}".format(expected, actual))
        self.token = token
        self.expected = expected
        self.actual = actual

def _build_opcode_table():
    table = {}
    for op in range(OP_PUSHDATA1, FIRST_UNDEFINED_OP_VALUE):
        name = get_op_name(op)
        if name == UNKNOWN_OP_NAME:
            continue
        table[name] = op
        # OP_ADD and just ADD are both recognized
        table[name.replace('OP_', '', 1)] = op
    return types.MappingProxyType(table)

OPCODE_TABLE = _build_opcode_table()

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

TOKEN_SEPARATORS = re.compile('[ \t\n]+')
DECIMAL_TOKEN = re.compile('-?[0-9]+')

PUSHDATA_FIELD_WIDTHS = {
    OP_PUSHDATA1: 1,
    OP_PUSHDATA2: 2,
    OP_PUSHDATA4: 4,
}

PUSHDATA_FIELD_FORMATS = {
    1: '<B',
    2: '<H',
    4: '<L',
}

def tokenize(s):
    return [w for w in TOKEN_SEPARATORS.split(s) if len(w)]

def is_decimal_token(w):
    return DECIMAL_TOKEN.fullmatch(w) is not None

def is_hex_token(w):
    return w.startswith('0x') and len(w) > 2

def is_quoted_token(w):
    return len(w) >= 2 and w.startswith("'") and w.endswith("'")

def is_opcode_token(w):
    return w in OPCODE_TABLE

def push_decimal(script, s, w):
    # out of range values saturate, like strtoll
    n = max(INT64_MIN, min(INT64_MAX, int(w)))
    script.push_int(n)

def push_hex(script, s, w):
    if not is_hex(w[2:]):
        raise MalformedHex(s, w)

    # Raw hex data, inserted NOT pushed onto stack
    script.push_raw(parse_hex(w[2:]))

def push_quoted(script, s, w):
    # No escapes, so spaces/tabs/newlines can't appear in a quoted string. Undecodable bytes from
    # the command line come back out as the original bytes.
    script.push_bytes(w[1:-1].encode('utf8', 'surrogateescape'))

def push_opcode(script, s, w):
    script.push_op(OPCODE_TABLE[w])

TOKEN_RULES = (
    (is_decimal_token, push_decimal),
    (is_hex_token,     push_hex),
    (is_quoted_token,  push_quoted),
    (is_opcode_token,  push_opcode),
)

class ScriptAssembler:
    '''Assembles the textual form of a script into its serialized bytes.

    The text is a whitespace separated list of words, each of which is one of:

    * a decimal number, pushed as the shortest encoding of that number
    * ``0x`` followed by hex digits, inserted into the script verbatim without a push opcode
    * a single-quoted string, pushed as data
    * an opcode name, with or without the ``OP_`` prefix

    Because raw hex can write push opcodes and their length fields directly, the assembler checks that
    the word following a push opcode supplies exactly the number of bytes the push declares.

    :param logging_level: the print logging level
    :type logging_level: DEBUG, INFO, WARNING, ERROR, or CRITICAL
    '''

    def __init__(self, logging_level=WARNING):
        self.logging_level = logging_level

    def assemble(self, s):
        '''
        :param s: the script text
        :type s: string
        :returns: the serialized script
        :raises ScriptSyntaxError: if a word can't be parsed or a push has the wrong size
        '''
        try:
            return self.__assemble(s)
        except ScriptSyntaxError as e:
            if self.logging_level <= INFO:
                print('[SCRIPT] {}'.format(str(e)))
            raise

    def __assemble(self, s):
        script = Script()

        next_push_size = 0
        push_data_size = 0

        for w in tokenize(s):
            script_size = len(script)

            push_size = next_push_size
            next_push_size = 0

            for matches, push in TOKEN_RULES:
                if matches(w):
                    push(script, s, w)
                    break
            else:
                raise UnknownToken(s, w)

            size_change = len(script) - script_size

            if self.logging_level <= DEBUG:
                print('[SCRIPT] {} -> {}'.format(w, bytes_to_hexstring(script.program[script_size:], reverse=False)))

            if push_size != 0 and size_change != push_size:
                raise PushSizeMismatch(s, w, push_size, size_change)

            # The bytes just written are the length field of a PUSHDATA opcode, which sizes the next word
            if push_size != 0 and push_data_size != 0:
                field = bytes(script.program[script_size:script_size + push_data_size])
                next_push_size = struct.unpack(PUSHDATA_FIELD_FORMATS[push_data_size], field)[0]
                push_data_size = 0
            elif push_size == 0 and size_change == 1:
                op = script.program[-1]
                if op < OP_PUSHDATA1:
                    next_push_size = op
                elif op in PUSHDATA_FIELD_WIDTHS:
                    push_data_size = next_push_size = PUSHDATA_FIELD_WIDTHS[op]

        return script.serialize()

_default_assembler = ScriptAssembler()

def parse_script(s):
    '''Assemble *s* with a default :py:class:`ScriptAssembler`'''
    return _default_assembler.assemble(s)
