"""Wire-level helpers and the value protocol shared by every codec."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO

TRUE_AS_BYTE = 1
FALSE_AS_BYTE = 0
OPTION_MARKER_FOR_ABSENT_VALUE = 0
OPTION_MARKER_FOR_PRESENT_VALUE = 1
PUB_KEY_LENGTH = 32

_LENGTH = struct.Struct(">I")
_MAX_LENGTH = 0xFFFFFFFF


class AbiError(ValueError):
    """Raised when a value cannot be encoded or decoded."""


class SingleValue(ABC):
    """A value that has both a nested and a top-level binary form."""

    @abstractmethod
    def encode_nested(self, writer: BinaryIO) -> None:
        """Write the nested form of the value."""

    @abstractmethod
    def encode_top_level(self, writer: BinaryIO) -> None:
        """Write the top-level form of the value."""

    @abstractmethod
    def decode_nested(self, reader: BinaryIO) -> None:
        """Read the value from its nested form."""

    @abstractmethod
    def decode_top_level(self, data: bytes) -> None:
        """Read the value from its top-level form."""


@dataclass
class Field:
    """A named member of a struct or an enum variant."""

    value: SingleValue
    name: str = ""


def encode_length(writer: BinaryIO, length: int) -> None:
    """Write a length as four big-endian bytes."""
    if not 0 <= length <= _MAX_LENGTH:
        raise AbiError(f"length out of range: {length}")
    writer.write(_LENGTH.pack(length))


def decode_length(reader: BinaryIO) -> int:
    """Read a length stored as four big-endian bytes."""
    (length,) = _LENGTH.unpack(read_bytes_exactly(reader, _LENGTH.size))
    return length


def read_bytes_exactly(reader: BinaryIO, num_bytes: int) -> bytes:
    """Read exactly ``num_bytes`` bytes, or raise AbiError."""
    if num_bytes == 0:
        return b""
    data = reader.read(num_bytes)
    if not data:
        raise AbiError("EOF")
    if len(data) != num_bytes:
        raise AbiError(f"cannot read exactly {num_bytes} bytes")
    return data


def int_to_twos_bytes(value: int) -> bytes:
    """Minimal big-endian two's complement bytes; zero gives no bytes."""
    if value == 0:
        return b""
    magnitude = value if value >= 0 else ~value
    length = magnitude.bit_length() // 8 + 1
    return value.to_bytes(length, "big", signed=True)


def twos_bytes_to_int(data: bytes) -> int:
    """Interpret big-endian two's complement bytes; no bytes give zero."""
    return int.from_bytes(data, "big", signed=True)