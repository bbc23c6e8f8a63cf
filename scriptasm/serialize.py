import struct

class SerializeDataTooShort(Exception):
    pass

class Serialize:
    @staticmethod
    def serialize_variable_int(i):
        if i < 0xfd:
            return struct.pack("B", i)
        if i <= 0xffff:
            return struct.pack("<BH", 0xfd, i)
        if i <= 0xffffffff:
            return struct.pack("<BL", 0xfe, i)
        return struct.pack("<BQ", 0xff, i)

    @staticmethod
    def serialize_variable_int_size(i):
        if i < 0xfd:
            return 1
        if i <= 0xffff:
            return 3
        if i <= 0xffffffff:
            return 5
        return 9

    @staticmethod
    def unserialize_variable_int(data):
        if len(data) == 0:
            raise SerializeDataTooShort()
        i = data[0]
        if i < 0xfd:
            return i, data[1:]
        elif i == 0xfd:
            if len(data) < 3:
                raise SerializeDataTooShort()
            return struct.unpack("<H", data[1:3])[0], data[3:]
        elif i == 0xfe:
            if len(data) < 5:
                raise SerializeDataTooShort()
            return struct.unpack("<L", data[1:5])[0], data[5:]
        else:
            if len(data) < 9:
                raise SerializeDataTooShort()
            return struct.unpack("<Q", data[1:9])[0], data[9:]

    @staticmethod
    def unserialize_fixed(data, size):
        '''Split *size* bytes off the front of *data*'''
        if len(data) < size:
            raise SerializeDataTooShort()
        return data[:size], data[size:]

    @staticmethod
    def serialize_bytes(b):
        length = Serialize.serialize_variable_int(len(b))
        return length + b

    @staticmethod
    def unserialize_bytes(data):
        length, data = Serialize.unserialize_variable_int(data)
        return Serialize.unserialize_fixed(data, length)
