from .bitcoin import Bitcoin
from .block import Block
from .transaction import Transaction
from .util import *

class InvalidHexString(Exception):
    def __init__(self, name, value):
        Exception.__init__(self, "{} must be hexadecimal string (not '{}')".format(name, value))
        self.name = name
        self.value = value

def decode_hex_tx(hex_tx, coin=Bitcoin, logging_level=WARNING):
    '''
    :param hex_tx: a serialized transaction as a hex string
    :param coin: the coin definition
    :returns: a :py:class:`Transaction`, or None if *hex_tx* isn't exactly one valid transaction
    '''
    if not is_hex(hex_tx):
        return None

    try:
        tx, data = Transaction.unserialize(parse_hex(hex_tx), coin)
    except Exception as e:
        if logging_level <= DEBUG:
            print('[DECODE] transaction failed to unserialize: {}'.format(repr(e)))
        return None

    if len(data) != 0:
        if logging_level <= DEBUG:
            print('[DECODE] {} bytes left over after transaction'.format(len(data)))
        return None

    return tx

def decode_hex_block(hex_block, coin=Bitcoin, logging_level=WARNING):
    '''
    :param hex_block: a serialized block as a hex string
    :param coin: the coin definition
    :returns: a :py:class:`Block`, or None if *hex_block* isn't exactly one valid block
    '''
    if not is_hex(hex_block):
        return None

    try:
        block, data = Block.unserialize(parse_hex(hex_block), coin)
    except Exception as e:
        if logging_level <= DEBUG:
            print('[DECODE] block failed to unserialize: {}'.format(repr(e)))
        return None

    if len(data) != 0:
        if logging_level <= DEBUG:
            print('[DECODE] {} bytes left over after block'.format(len(data)))
        return None

    return block

def parse_hash_str(s, name):
    '''Parse a hash from its hex display form (most significant byte first).  The result is in
    internal byte order.  Short strings are zero extended and long strings keep their last 64 digits.

    :raises InvalidHexString: if *s* isn't a hex string
    '''
    if not is_hex(s):
        raise InvalidHexString(name, s)

    return hexstring_to_bytes(s[-64:].rjust(64, '0'), reverse=True)

def parse_hash_uv(v, name):
    '''Like :py:func:`parse_hash_str`, for a decoded JSON value.  Anything other than a string is
    treated as the empty string and rejected.'''
    return parse_hash_str(v if isinstance(v, str) else '', name)

def parse_hex_uv(v, name):
    '''
    :param v: a decoded JSON value
    :param name: the field name used in the error message
    :returns: the bytes encoded by *v*
    :raises InvalidHexString: if *v* isn't a hex string
    '''
    s = v if isinstance(v, str) else ''
    if not is_hex(s):
        raise InvalidHexString(name, s)
    return parse_hex(s)
