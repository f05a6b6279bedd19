"""Composite values (enums, lists, options, structs) and multi-value holders."""

from __future__ import annotations

import io
from collections.abc import Callable
from dataclasses import dataclass, field as dc_field
from typing import Any, BinaryIO, Optional

from drtabi.shared import (
    OPTION_MARKER_FOR_ABSENT_VALUE,
    OPTION_MARKER_FOR_PRESENT_VALUE,
    AbiError,
    Field,
    SingleValue,
    decode_length,
    encode_length,
    read_bytes_exactly,
)
from drtabi.small_ints import U8Value


def _encode_fields(writer: BinaryIO, fields: list[Field], kind: str) -> None:
    for member in fields:
        try:
            member.value.encode_nested(writer)
        except ValueError as err:
            raise AbiError(
                f"cannot encode field '{member.name}' of {kind}, because of: {err}"
            ) from err


def _decode_fields(reader: BinaryIO, fields: list[Field], kind: str) -> None:
    for member in fields:
        try:
            member.value.decode_nested(reader)
        except ValueError as err:
            raise AbiError(
                f"cannot decode field '{member.name}' of {kind}, because of: {err}"
            ) from err


@dataclass
class EnumValue(SingleValue):
    """An enum: a discriminant followed by the fields of its variant."""

    discriminant: int = 0
    fields: list[Field] = dc_field(default_factory=list)
    fields_provider: Optional[Callable[[int], Optional[list[Field]]]] = dc_field(
        default=None, compare=False, repr=False
    )

    def encode_nested(self, writer: BinaryIO) -> None:
        U8Value(self.discriminant).encode_nested(writer)
        _encode_fields(writer, self.fields, "enum")

    def encode_top_level(self, writer: BinaryIO) -> None:
        if self.discriminant == 0 and not self.fields:
            return
        self.encode_nested(writer)

    def decode_nested(self, reader: BinaryIO) -> None:
        if self.fields_provider is None:
            raise AbiError("cannot decode enum: fields provider is nil")
        discriminant = U8Value()
        discriminant.decode_nested(reader)
        self.discriminant = discriminant.value
        self.fields = list(self.fields_provider(self.discriminant) or [])
        _decode_fields(reader, self.fields, "enum")

    def decode_top_level(self, data: bytes) -> None:
        if not data:
            self.discriminant = 0
            return
        self.decode_nested(io.BytesIO(data))


@dataclass
class ListValue(SingleValue):
    """A homogeneous list of values."""

    items: list[SingleValue] = dc_field(default_factory=list)
    item_creator: Optional[Callable[[], SingleValue]] = dc_field(
        default=None, compare=False, repr=False
    )

    def encode_nested(self, writer: BinaryIO) -> None:
        encode_length(writer, len(self.items))
        self._encode_items(writer)

    def encode_top_level(self, writer: BinaryIO) -> None:
        self._encode_items(writer)

    def _encode_items(self, writer: BinaryIO) -> None:
        for item in self.items:
            item.encode_nested(writer)

    def decode_nested(self, reader: BinaryIO) -> None:
        length = decode_length(reader)
        self.items = []
        for _ in range(length):
            self._decode_item(reader)

    def decode_top_level(self, data: bytes) -> None:
        reader = io.BytesIO(data)
        self.items = []
        while reader.tell() < len(data):
            position = reader.tell()
            self._decode_item(reader)
            if reader.tell() == position:
                raise AbiError("cannot decode list: item consumed no data")

    def _decode_item(self, reader: BinaryIO) -> None:
        if self.item_creator is None:
            raise AbiError("cannot decode list: item creator is nil")
        item = self.item_creator()
        item.decode_nested(reader)
        self.items.append(item)


@dataclass
class OptionValue(SingleValue):
    """A value that may be absent; ``None`` means absent.

    Before decoding, ``value`` must hold a placeholder of the expected type.
    """

    value: Optional[SingleValue] = None

    def encode_nested(self, writer: BinaryIO) -> None:
        if self.value is None:
            writer.write(bytes([OPTION_MARKER_FOR_ABSENT_VALUE]))
            return
        writer.write(bytes([OPTION_MARKER_FOR_PRESENT_VALUE]))
        self.value.encode_nested(writer)

    def encode_top_level(self, writer: BinaryIO) -> None:
        if self.value is None:
            return
        writer.write(bytes([OPTION_MARKER_FOR_PRESENT_VALUE]))
        self.value.encode_nested(writer)

    def _require_placeholder(self) -> SingleValue:
        if self.value is None:
            raise AbiError("placeholder value of option should be set before decoding")
        return self.value

    def decode_nested(self, reader: BinaryIO) -> None:
        placeholder = self._require_placeholder()
        marker = read_bytes_exactly(reader, 1)[0]
        if marker == OPTION_MARKER_FOR_ABSENT_VALUE:
            self.value = None
        elif marker == OPTION_MARKER_FOR_PRESENT_VALUE:
            placeholder.decode_nested(reader)
        else:
            raise AbiError(f"invalid first byte for nested encoded option: {marker}")

    def decode_top_level(self, data: bytes) -> None:
        placeholder = self._require_placeholder()
        if not data:
            self.value = None
            return
        marker = data[0]
        if marker != OPTION_MARKER_FOR_PRESENT_VALUE:
            raise AbiError(f"invalid first byte for top-level encoded option: {marker}")
        placeholder.decode_nested(io.BytesIO(data[1:]))


@dataclass
class StructValue(SingleValue):
    """A struct: an ordered collection of fields."""

    fields: list[Field] = dc_field(default_factory=list)

    def encode_nested(self, writer: BinaryIO) -> None:
        _encode_fields(writer, self.fields, "struct")

    def encode_top_level(self, writer: BinaryIO) -> None:
        self.encode_nested(writer)

    def decode_nested(self, reader: BinaryIO) -> None:
        _decode_fields(reader, self.fields, "struct")

    def decode_top_level(self, data: bytes) -> None:
        self.decode_nested(io.BytesIO(data))


@dataclass
class MultiValue:
    """A group of values, each taking its own part."""

    items: list[Any] = dc_field(default_factory=list)


@dataclass
class VariadicValues:
    """Any number of trailing values."""

    items: list[Any] = dc_field(default_factory=list)
    item_creator: Optional[Callable[[], Any]] = dc_field(
        default=None, compare=False, repr=False
    )


@dataclass
class OptionalValue:
    """A trailing value that may be left out entirely."""

    value: Any = None