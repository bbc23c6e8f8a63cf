import struct

from .script import Script
from .serialize import Serialize
from .util import *

class TransactionOutput:
    def __init__(self, amount=0, script=None):
        assert amount >= 0
        self.amount = amount
        self.script = Script() if script is None else script

    def serialize(self):
        data_list = []

        data_list.append(struct.pack("<Q", self.amount))
        script_bytes = self.script.serialize()
        data_list.append(Serialize.serialize_bytes(script_bytes))

        return b''.join(data_list)

    def serialize_size(self):
        data_size = 8

        script_size = self.script.serialize_size()

        data_size += Serialize.serialize_variable_int_size(script_size)
        data_size += script_size

        return data_size

    @staticmethod
    def unserialize(data):
        amount, data = Serialize.unserialize_fixed(data, 8)
        amount = struct.unpack("<Q", amount)[0]
        script, data = Serialize.unserialize_bytes(data)

        tx_output = TransactionOutput(amount=amount, script=Script(script))
        return tx_output, data

    def __str__(self):
        return '<tx_output amount={} script={} bytes>'.format(self.amount, len(self.script.program))

class TransactionPrevOut:
    def __init__(self, tx_hash=(b'\x00' * 32), n=0xffffffff):
        self.tx_hash = tx_hash
        self.n = n

    def is_null(self):
        return self.tx_hash == (b'\x00' * 32) and self.n == 0xffffffff

    def serialize(self):
        return self.tx_hash + struct.pack("<L", self.n)

    def serialize_size(self):
        return 32 + 4

    @staticmethod
    def unserialize(data):
        prevout, data = Serialize.unserialize_fixed(data, 36)
        tx_hash = prevout[:32]
        n = struct.unpack("<L", prevout[32:36])[0]
        return TransactionPrevOut(tx_hash, n), data

    def __str__(self):
        return '<TransactionPrevOut {}:{}>'.format(bytes_to_hexstring(self.tx_hash), self.n)

class TransactionInput:
    def __init__(self, prevout=None, script=None, sequence=0xffffffff):
        self.prevout = TransactionPrevOut() if prevout is None else prevout
        self.script = Script() if script is None else script
        self.sequence = sequence

    def serialize(self):
        data_list = []
        data_list.append(self.prevout.serialize())

        script_bytes = self.script.serialize()
        data_list.append(Serialize.serialize_bytes(script_bytes))

        data_list.append(struct.pack("<L", self.sequence))

        return b''.join(data_list)

    def serialize_size(self):
        data_size = 0
        data_size += self.prevout.serialize_size()

        script_size = self.script.serialize_size()
        data_size += Serialize.serialize_variable_int_size(script_size)
        data_size += script_size

        data_size += 4
        return data_size

    @staticmethod
    def unserialize(data):
        prevout, data = TransactionPrevOut.unserialize(data)
        script, data = Serialize.unserialize_bytes(data)
        sequence, data = Serialize.unserialize_fixed(data, 4)
        sequence = struct.unpack("<L", sequence)[0]

        tx_input = TransactionInput(prevout=prevout, script=Script(script), sequence=sequence)
        return tx_input, data

    def __str__(self):
        return '<tx_input {}:{} sequence={:08x} script={} bytes>'.format(bytes_to_hexstring(self.prevout.tx_hash), self.prevout.n, self.sequence, len(self.script.program))

class Transaction:
    def __init__(self, coin, version=None, inputs=None, outputs=None, lock_time=0):
        self.coin = coin
        self.version = coin.TRANSACTION_VERSION if version is None else version
        self.inputs = [] if inputs is None else inputs
        self.outputs = [] if outputs is None else outputs
        self.lock_time = lock_time

    def hash(self):
        return self.coin.hash(self.serialize())

    def is_coinbase(self):
        return len(self.inputs) == 1 and self.inputs[0].prevout.is_null()

    def serialize(self):
        data_list = []
        data_list.append(struct.pack("<l", self.version))

        data_list.append(Serialize.serialize_variable_int(len(self.inputs)))
        for tx_input in self.inputs:
            data_list.append(tx_input.serialize())

        data_list.append(Serialize.serialize_variable_int(len(self.outputs)))
        for output in self.outputs:
            data_list.append(output.serialize())

        data_list.append(struct.pack("<L", self.lock_time))

        return b''.join(data_list)

    def serialize_size(self):
        data_size = 0
        data_size += 4

        data_size += Serialize.serialize_variable_int_size(len(self.inputs))
        for tx_input in self.inputs:
            data_size += tx_input.serialize_size()

        data_size += Serialize.serialize_variable_int_size(len(self.outputs))
        for output in self.outputs:
            data_size += output.serialize_size()

        data_size += 4
        return data_size

    @staticmethod
    def unserialize(data, coin):
        version, data = Serialize.unserialize_fixed(data, 4)
        version = struct.unpack('<l', version)[0]

        inputs = []
        num_inputs, data = Serialize.unserialize_variable_int(data)
        for i in range(num_inputs):
            tx_input, data = TransactionInput.unserialize(data)
            inputs.append(tx_input)

        outputs = []
        num_outputs, data = Serialize.unserialize_variable_int(data)
        for i in range(num_outputs):
            tx_output, data = TransactionOutput.unserialize(data)
            outputs.append(tx_output)

        lock_time, data = Serialize.unserialize_fixed(data, 4)
        lock_time = struct.unpack("<L", lock_time)[0]

        tx = Transaction(coin, version=version, inputs=inputs, outputs=outputs, lock_time=lock_time)
        return tx, data

    def __str__(self):
        s = '<tx {}\n\t{}\n\t{}\n\tlock_time={}>'.format(bytes_to_hexstring(self.hash()),
                '\n\t'.join('input: {}'.format(str(i)) for i in self.inputs),
                '\n\t'.join('output: {}'.format(str(o)) for o in self.outputs),
                self.lock_time)
        return s
