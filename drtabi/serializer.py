"""Serialization of values into separator-joined hex parts, and back."""

from __future__ import annotations

import binascii
from collections.abc import Sequence
from typing import Any

from drtabi.codec import Codec
from drtabi.composites import MultiValue, OptionalValue, VariadicValues
from drtabi.parts import PartsHolder
from drtabi.shared import AbiError, SingleValue


class Serializer:
    """Turns values into a string of hex parts and parses such strings back.

    Each single value takes one part, in its top-level encoding. Multi-values,
    variadic values and optional values spread over several parts (or none).
    """

    def __init__(self, parts_separator: str) -> None:
        if not parts_separator:
            raise AbiError("cannot create serializer: parts separator must not be empty")
        self.parts_separator = parts_separator
        self._codec = Codec()

    def serialize(self, input_values: Sequence[Any]) -> str:
        """Serialize ``input_values`` into a string."""
        holder = PartsHolder()
        self._serialize_into(holder, input_values)
        return self.parts_separator.join(part.hex() for part in holder.parts)

    def deserialize(self, data: str, output_values: Sequence[Any]) -> None:
        """Decode ``data`` into the given output values, in place."""
        holder = PartsHolder(self._decode_into_parts(data))
        self._deserialize_from(holder, output_values)

    def _serialize_into(self, holder: PartsHolder, values: Sequence[Any]) -> None:
        last = len(values) - 1
        for index, value in enumerate(values):
            if value is None:
                raise AbiError("cannot serialize nil value")

            if isinstance(value, OptionalValue):
                if index != last:
                    raise AbiError("an optional value must be last among input values")
                if value.value is not None:
                    self._serialize_into(holder, [value.value])
            elif isinstance(value, MultiValue):
                self._serialize_into(holder, value.items)
            elif isinstance(value, VariadicValues):
                if index != last:
                    raise AbiError("variadic values must be last among input values")
                self._serialize_into(holder, value.items)
            elif isinstance(value, SingleValue):
                holder.append_empty_part()
                holder.append_to_last_part(self._codec.encode_top_level(value))
            else:
                raise AbiError(
                    f"unsupported type for serialization: {type(value).__name__}"
                )

    def _deserialize_from(self, holder: PartsHolder, values: Sequence[Any]) -> None:
        last = len(values) - 1
        for index, value in enumerate(values):
            if value is None:
                raise AbiError("cannot deserialize into nil value")

            if isinstance(value, OptionalValue):
                if index != last:
                    raise AbiError("an optional value must be last among output values")
                if holder.is_focused_beyond_last_part():
                    value.value = None
                else:
                    self._deserialize_from(holder, [value.value])
            elif isinstance(value, MultiValue):
                self._deserialize_from(holder, value.items)
            elif isinstance(value, VariadicValues):
                if index != last:
                    raise AbiError("variadic values must be last among output values")
                self._deserialize_variadic(holder, value)
            elif isinstance(value, SingleValue):
                self._deserialize_single(holder, value)
            else:
                raise AbiError(
                    f"unsupported type for deserialization: {type(value).__name__}"
                )

    def _deserialize_variadic(self, holder: PartsHolder, value: VariadicValues) -> None:
        if value.item_creator is None:
            raise AbiError("cannot deserialize variadic values: item creator is nil")
        while not holder.is_focused_beyond_last_part():
            item = value.item_creator()
            self._deserialize_from(holder, [item])
            value.items.append(item)

    def _deserialize_single(self, holder: PartsHolder, value: SingleValue) -> None:
        part = holder.read_whole_focused_part()
        self._codec.decode_top_level(part, value)
        holder.focus_on_next_part()

    def _decode_into_parts(self, encoded: str) -> list[bytes]:
        parts = []
        for part_hex in encoded.split(self.parts_separator):
            try:
                parts.append(binascii.unhexlify(part_hex))
            except ValueError as err:
                raise AbiError(f"invalid hex part {part_hex!r}: {err}") from err
        return parts