"""Scalar values: addresses, big integers, booleans, byte strings and text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from drtabi.shared import (
    FALSE_AS_BYTE,
    PUB_KEY_LENGTH,
    TRUE_AS_BYTE,
    AbiError,
    SingleValue,
    decode_length,
    encode_length,
    int_to_twos_bytes,
    read_bytes_exactly,
    twos_bytes_to_int,
)


def _check_pub_key_length(pub_key: bytes) -> None:
    if len(pub_key) != PUB_KEY_LENGTH:
        raise AbiError(f"public key (address) has invalid length: {len(pub_key)}")


def _unsigned_bytes(value: int) -> bytes:
    if value < 0:
        raise AbiError(f"unsigned big integer cannot be negative: {value}")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


@dataclass
class AddressValue(SingleValue):
    """A 32-byte public key (address)."""

    value: bytes = b""

    def encode_nested(self, writer: BinaryIO) -> None:
        _check_pub_key_length(self.value)
        writer.write(self.value)

    def encode_top_level(self, writer: BinaryIO) -> None:
        self.encode_nested(writer)

    def decode_nested(self, reader: BinaryIO) -> None:
        self.value = read_bytes_exactly(reader, PUB_KEY_LENGTH)

    def decode_top_level(self, data: bytes) -> None:
        _check_pub_key_length(data)
        self.value = bytes(data)


@dataclass
class BigIntValue(SingleValue):
    """An arbitrary-size signed integer, in two's complement."""

    value: int = 0

    def encode_nested(self, writer: BinaryIO) -> None:
        data = int_to_twos_bytes(self.value)
        encode_length(writer, len(data))
        writer.write(data)

    def encode_top_level(self, writer: BinaryIO) -> None:
        writer.write(int_to_twos_bytes(self.value))

    def decode_nested(self, reader: BinaryIO) -> None:
        length = decode_length(reader)
        self.value = twos_bytes_to_int(read_bytes_exactly(reader, length))

    def decode_top_level(self, data: bytes) -> None:
        self.value = twos_bytes_to_int(data)


@dataclass
class BigUIntValue(SingleValue):
    """An arbitrary-size unsigned integer."""

    value: int = 0

    def encode_nested(self, writer: BinaryIO) -> None:
        data = _unsigned_bytes(self.value)
        encode_length(writer, len(data))
        writer.write(data)

    def encode_top_level(self, writer: BinaryIO) -> None:
        writer.write(_unsigned_bytes(self.value))

    def decode_nested(self, reader: BinaryIO) -> None:
        length = decode_length(reader)
        self.value = int.from_bytes(read_bytes_exactly(reader, length), "big")

    def decode_top_level(self, data: bytes) -> None:
        self.value = int.from_bytes(data, "big")


def _byte_to_bool(byte: int) -> bool:
    if byte == TRUE_AS_BYTE:
        return True
    if byte == FALSE_AS_BYTE:
        return False
    raise AbiError(f"unexpected boolean value: {byte}")


@dataclass
class BoolValue(SingleValue):
    """A boolean."""

    value: bool = False

    def encode_nested(self, writer: BinaryIO) -> None:
        writer.write(bytes([TRUE_AS_BYTE if self.value else FALSE_AS_BYTE]))

    def encode_top_level(self, writer: BinaryIO) -> None:
        if self.value:
            writer.write(bytes([TRUE_AS_BYTE]))

    def decode_nested(self, reader: BinaryIO) -> None:
        self.value = _byte_to_bool(read_bytes_exactly(reader, 1)[0])

    def decode_top_level(self, data: bytes) -> None:
        if not data:
            self.value = False
        elif len(data) == 1:
            self.value = _byte_to_bool(data[0])
        else:
            raise AbiError(f"unexpected boolean value: {list(data)}")


@dataclass
class BytesValue(SingleValue):
    """A byte string of any length."""

    value: bytes = b""

    def encode_nested(self, writer: BinaryIO) -> None:
        encode_length(writer, len(self.value))
        writer.write(self.value)

    def encode_top_level(self, writer: BinaryIO) -> None:
        writer.write(self.value)

    def decode_nested(self, reader: BinaryIO) -> None:
        length = decode_length(reader)
        self.value = read_bytes_exactly(reader, length)

    def decode_top_level(self, data: bytes) -> None:
        self.value = bytes(data)


@dataclass
class StringValue(SingleValue):
    """A text string, stored as UTF-8."""

    value: str = ""

    def _encoded(self) -> bytes:
        return self.value.encode("utf-8", errors="surrogateescape")

    def encode_nested(self, writer: BinaryIO) -> None:
        data = self._encoded()
        encode_length(writer, len(data))
        writer.write(data)

    def encode_top_level(self, writer: BinaryIO) -> None:
        writer.write(self._encoded())

    def decode_nested(self, reader: BinaryIO) -> None:
        length = decode_length(reader)
        self.decode_top_level(read_bytes_exactly(reader, length))

    def decode_top_level(self, data: bytes) -> None:
        self.value = bytes(data).decode("utf-8", errors="surrogateescape")