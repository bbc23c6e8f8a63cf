import struct

from .serialize import Serialize
from .util import *
from .transaction import Transaction

class BadSerializedBlock(Exception):
    pass

class BlockHeader:
    CURRENT_VERSION = 1

    def __init__(self, coin, version=CURRENT_VERSION, prev_block_hash=(b'\x00' * 32), merkle_root_hash=(b'\x00' * 32), timestamp=0, bits=0, nonce=0):
        self.version = version
        self.prev_block_hash = prev_block_hash
        self.merkle_root_hash = merkle_root_hash
        self.timestamp = timestamp if timestamp is not None else 0
        self.bits = bits
        self.nonce = nonce
        self.coin = coin

    def hash(self):
        return self.coin.hash(self.serialize())

    def serialize(self):
        version = struct.pack("<L", self.version)
        extra   = struct.pack("<LLL", self.timestamp, self.bits, self.nonce)
        return version + self.prev_block_hash + self.merkle_root_hash + extra

    def serialize_size(self):
        return 4 + 32 + 32 + 12

    @staticmethod
    def unserialize(data, coin):
        header, data = Serialize.unserialize_fixed(data, 80)
        version = struct.unpack("<L", header[:4])[0]
        prev_block_hash = header[4:36]
        merkle_root_hash = header[36:68]
        timestamp, bits, nonce = struct.unpack("<LLL", header[68:80])

        header = BlockHeader(coin, version=version, prev_block_hash=prev_block_hash, merkle_root_hash=merkle_root_hash, timestamp=timestamp, bits=bits, nonce=nonce)
        return header, data

    def __str__(self):
        return '<blockheader {}\n\tversion={}\n\tprev_block_hash={}\n\tmerkle_root_hash={}\n\ttimestamp={}\n\tbits={:08x}\n\tnonce={}>'.format \
            (bytes_to_hexstring(self.hash()), self.version, bytes_to_hexstring(self.prev_block_hash), bytes_to_hexstring(self.merkle_root_hash),
             self.timestamp, self.bits, self.nonce)

class Block:
    def __init__(self, coin, header=None, transactions=None):
        self.coin = coin
        self.header = BlockHeader(coin) if header is None else header
        self.transactions = [] if transactions is None else transactions

    def hash(self):
        return self.header.hash()

    def calculate_merkle_root(self):
        if len(self.transactions) == 0:
            return b'\x00' * 32

        hashes = [tx.hash() for tx in self.transactions]

        while len(hashes) != 1:
            if (len(hashes) % 2) == 1:
                hashes.append(hashes[-1])
            new_hashes = []
            for i in range(0, len(hashes), 2):
                k = hashes[i] + hashes[i+1]
                new_hashes.append(self.coin.hash(k))
            hashes = new_hashes

        return hashes[0]

    @staticmethod
    def unserialize(data, coin):
        header, data = BlockHeader.unserialize(data, coin)

        num_transactions, data = Serialize.unserialize_variable_int(data)
        transactions = []
        for i in range(num_transactions):
            try:
                tx, data = Transaction.unserialize(data, coin)
            except Exception as e:
                raise BadSerializedBlock("block {} couldn't unserialize because transaction {} failed to unserialize".format(bytes_to_hexstring(header.hash()), i)) from e
            transactions.append(tx)

        block = Block(coin, header=header, transactions=transactions)
        return block, data

    def serialize(self):
        data_list = []
        data_list.append(self.header.serialize())
        data_list.append(Serialize.serialize_variable_int(len(self.transactions)))

        for tx in self.transactions:
            data_list.append(tx.serialize())

        return b''.join(data_list)

    def serialize_size(self):
        data_size = 0
        data_size += self.header.serialize_size()
        data_size += Serialize.serialize_variable_int_size(len(self.transactions))

        for tx in self.transactions:
            data_size += tx.serialize_size()

        return data_size

    def __str__(self):
        return '<block {} ntx={}>'.format(bytes_to_hexstring(self.header.hash()), len(self.transactions))
