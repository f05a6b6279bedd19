"""Fixed-width integer values (u8..u64, i8..i64)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from drtabi.shared import (
    AbiError,
    SingleValue,
    int_to_twos_bytes,
    read_bytes_exactly,
    twos_bytes_to_int,
)

_U64_MAX = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


@dataclass
class UnsignedSmallIntValue(SingleValue):
    """An unsigned integer stored on ``num_bytes`` bytes."""

    value: int = 0
    num_bytes: ClassVar[int] = 8

    @classmethod
    def max_value(cls) -> int:
        return (1 << (8 * cls.num_bytes)) - 1

    def _checked(self) -> int:
        if not 0 <= self.value <= self.max_value():
            raise AbiError(
                f"value {self.value} does not fit in {self.num_bytes} unsigned bytes"
            )
        return self.value

    def encode_nested(self, writer: BinaryIO) -> None:
        writer.write(self._checked().to_bytes(self.num_bytes, "big"))

    def encode_top_level(self, writer: BinaryIO) -> None:
        value = self._checked()
        writer.write(value.to_bytes((value.bit_length() + 7) // 8, "big"))

    def decode_nested(self, reader: BinaryIO) -> None:
        self.value = int.from_bytes(read_bytes_exactly(reader, self.num_bytes), "big")

    def decode_top_level(self, data: bytes) -> None:
        decoded = int.from_bytes(data, "big")
        if decoded > _U64_MAX:
            raise AbiError(f"decoded value is too large or invalid: {decoded}")
        maximum = self.max_value()
        if decoded > maximum:
            raise AbiError(f"decoded value is too large: {decoded} > {maximum}")
        self.value = decoded


@dataclass
class SignedSmallIntValue(SingleValue):
    """A signed (two's complement) integer stored on ``num_bytes`` bytes."""

    value: int = 0
    num_bytes: ClassVar[int] = 8

    @classmethod
    def max_value(cls) -> int:
        return (1 << (8 * cls.num_bytes - 1)) - 1

    @classmethod
    def min_value(cls) -> int:
        return -(1 << (8 * cls.num_bytes - 1))

    def _checked(self) -> int:
        if not self.min_value() <= self.value <= self.max_value():
            raise AbiError(
                f"value {self.value} does not fit in {self.num_bytes} signed bytes"
            )
        return self.value

    def _wrap(self, value: int) -> int:
        mask = (1 << (8 * self.num_bytes)) - 1
        return int.from_bytes((value & mask).to_bytes(self.num_bytes, "big"), "big", signed=True)

    def encode_nested(self, writer: BinaryIO) -> None:
        writer.write(self._checked().to_bytes(self.num_bytes, "big", signed=True))

    def encode_top_level(self, writer: BinaryIO) -> None:
        writer.write(int_to_twos_bytes(self._checked()))

    def decode_nested(self, reader: BinaryIO) -> None:
        data = read_bytes_exactly(reader, self.num_bytes)
        self.value = int.from_bytes(data, "big", signed=True)

    def decode_top_level(self, data: bytes) -> None:
        decoded = twos_bytes_to_int(data)
        if not _I64_MIN <= decoded <= _I64_MAX:
            raise AbiError(f"decoded value is too large or invalid: {decoded}")
        maximum = self.max_value()
        if decoded > maximum:
            raise AbiError(f"decoded value is too large: {decoded} > {maximum}")
        # Values below the minimum wrap around to the type's width.
        self.value = self._wrap(decoded)


@dataclass
class U8Value(UnsignedSmallIntValue):
    num_bytes: ClassVar[int] = 1


@dataclass
class U16Value(UnsignedSmallIntValue):
    num_bytes: ClassVar[int] = 2


@dataclass
class U32Value(UnsignedSmallIntValue):
    num_bytes: ClassVar[int] = 4


@dataclass
class U64Value(UnsignedSmallIntValue):
    num_bytes: ClassVar[int] = 8


@dataclass
class I8Value(SignedSmallIntValue):
    num_bytes: ClassVar[int] = 1


@dataclass
class I16Value(SignedSmallIntValue):
    num_bytes: ClassVar[int] = 2


@dataclass
class I32Value(SignedSmallIntValue):
    num_bytes: ClassVar[int] = 4


@dataclass
class I64Value(SignedSmallIntValue):
    num_bytes: ClassVar[int] = 8