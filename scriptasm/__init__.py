from . import assembler
from . import block
from . import core_read
from . import script
from . import serialize
from . import transaction

from .assembler import ScriptAssembler, ScriptSyntaxError, MalformedHex, UnknownToken, PushSizeMismatch, OPCODE_TABLE, parse_script
from .bitcoin import *
from .block import Block, BlockHeader, BadSerializedBlock
from .core_read import InvalidHexString, decode_hex_tx, decode_hex_block, parse_hash_str, parse_hash_uv, parse_hex_uv
from .script import Script, ScriptNum, get_op_name
from .serialize import Serialize, SerializeDataTooShort
from .transaction import Transaction, TransactionInput, TransactionOutput, TransactionPrevOut

from .util import *

VERSION = 'scriptasm 0.0.1-alpha1'
VERSION_NUMBER = 0x00000101
