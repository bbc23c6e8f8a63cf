import hashlib

from .util import *

class Bitcoin:
    NAME                = 'Bitcoin'

    TRANSACTION_VERSION = 1

    # Genesis details
    GENESIS_BLOCK_HASH      = hexstring_to_bytes("000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f")

    @staticmethod
    def hash(data):
        hasher = hashlib.sha256()
        hasher.update(data)
        hasher2 = hashlib.sha256()
        hasher2.update(hasher.digest())
        return hasher2.digest()

class BitcoinTestnet(Bitcoin):
    NAME                = 'Bitcoin Testnet'

    GENESIS_BLOCK_HASH      = hexstring_to_bytes("000000000933ea01ad0ee984209779baaec3ced90fa3f408719526f8d77f4943")

Bitcoin.Testnet = BitcoinTestnet
