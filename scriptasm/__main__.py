import argparse
import sys

from . import VERSION
from .assembler import ScriptAssembler, ScriptSyntaxError
from .bitcoin import Bitcoin
from .core_read import decode_hex_tx, decode_hex_block
from .util import *

def parse_arguments(argv):
    parser = argparse.ArgumentParser(prog='scriptasm', description='Assemble script text into hex, or decode hex transactions and blocks')
    parser.add_argument('words', nargs='*', help='script words, e.g. DUP HASH160 0x14 0x... EQUALVERIFY CHECKSIG')
    parser.add_argument('--tx', type=str, default=None, help='decode a hex encoded transaction')
    parser.add_argument('--block', type=str, default=None, help='decode a hex encoded block')
    parser.add_argument('--testnet', action='store_const', default=False, const=True)
    parser.add_argument('--debug', action='store_const', default=False, const=True)
    parser.add_argument('--version', action='version', version=VERSION)
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_arguments(sys.argv[1:] if argv is None else argv)

    coin = Bitcoin.Testnet if args.testnet else Bitcoin
    logging_level = DEBUG if args.debug else WARNING

    if args.tx is not None:
        tx = decode_hex_tx(args.tx, coin=coin, logging_level=logging_level)
        if tx is None:
            print('TX decode failed', file=sys.stderr)
            return 1
        print(coin.NAME)
        print(str(tx))
        return 0

    if args.block is not None:
        block = decode_hex_block(args.block, coin=coin, logging_level=logging_level)
        if block is None:
            print('Block decode failed', file=sys.stderr)
            return 1
        print(coin.NAME)
        print(str(block))
        print(str(block.header))
        return 0

    try:
        program = ScriptAssembler(logging_level=logging_level).assemble(' '.join(args.words))
    except ScriptSyntaxError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(bytes_to_hexstring(program, reverse=False))
    return 0

if __name__ == "__main__":
    sys.exit(main())
