import scriptasm
import sys
import traceback

HEADLINE = b'The Times 03/Jan/2009 Chancellor on brink of second bailout for banks'

GENESIS_PUBKEY = '04678afdb0fe5548271967f1a67130b7105cd6a828e03909a67962e0ea1f61deb649f6bc3f4cef38c4f35504e51ec112de5c384df7ba0b8d578a4c702b6bf11d5f'

def main():
    coin = scriptasm.Bitcoin
    logging_level = scriptasm.DEBUG if '--debug' in sys.argv else scriptasm.WARNING
    assembler = scriptasm.ScriptAssembler(logging_level=logging_level)

    # The headline has spaces in it, so it can't be a quoted word
    inscript = assembler.assemble('0x04 0xffff001d 0x01 0x04 0x{:02x} 0x{}'.format(len(HEADLINE), scriptasm.bytes_to_hexstring(HEADLINE, reverse=False)))
    outscript = assembler.assemble('0x41 0x{} CHECKSIG'.format(GENESIS_PUBKEY))

    tx = scriptasm.Transaction(coin)
    tx.inputs.append(scriptasm.TransactionInput(script=scriptasm.Script(inscript)))
    tx.outputs.append(scriptasm.TransactionOutput(amount=50 * 100000000, script=scriptasm.Script(outscript)))
    assert tx.is_coinbase()

    block = scriptasm.Block(coin)
    block.transactions.append(tx)
    block.header.merkle_root_hash = block.calculate_merkle_root()
    block.header.timestamp = 1231006505
    block.header.bits = 0x1d00ffff
    block.header.nonce = 2083236893

    print(str(block.header))
    print(scriptasm.bytes_to_hexstring(block.serialize(), reverse=False))

    if block.hash() != coin.GENESIS_BLOCK_HASH:
        print('block hash does not match the genesis block', file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except scriptasm.ScriptSyntaxError:
        traceback.print_exc()
        sys.exit(1)
