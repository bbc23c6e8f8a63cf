import string

DEBUG = 0
INFO = 1
WARNING = 2
ERROR = 3
CRITICAL = 4

HEX_DIGITS = frozenset(string.hexdigits)
HEX_WHITESPACE = ' \t\n\r\v\f'

def is_hex(s):
    '''
    :param s: a string
    :returns: True if *s* is a non-empty string of hex digit pairs
    '''
    if len(s) == 0 or (len(s) % 2) != 0:
        return False
    return all(c in HEX_DIGITS for c in s)

def parse_hex(s):
    '''Decode hex digit pairs from *s*.  Whitespace between bytes is skipped and decoding stops
    at the first pair that isn't valid hex.'''
    r = []
    i = 0
    while True:
        while i < len(s) and s[i] in HEX_WHITESPACE:
            i += 1
        pair = s[i:i+2]
        if len(pair) != 2 or not all(c in HEX_DIGITS for c in pair):
            break
        r.append(int(pair, 16))
        i += 2
    return bytes(r)

def bytes_to_hexstring(data, reverse=True):
    if reverse:
        return ''.join(reversed(['{:02x}'.format(v) for v in data]))
    else:
        return ''.join(['{:02x}'.format(v) for v in data])

def hexstring_to_bytes(s, reverse=True):
    if reverse:
        return bytes(reversed([int(s[x:x+2], 16) for x in range(0, len(s), 2)]))
    else:
        return bytes([int(s[x:x+2], 16) for x in range(0, len(s), 2)])

