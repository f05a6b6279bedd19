"""Encoding and decoding of single values to and from bytes."""

from __future__ import annotations

import io
from typing import TypeVar

from drtabi.shared import AbiError, SingleValue

V = TypeVar("V", bound=SingleValue)


class Codec:
    """Applies the nested and top-level serialization rules to single values."""

    def encode_nested(self, value: SingleValue) -> bytes:
        """Return the nested encoding of ``value``."""
        buffer = io.BytesIO()
        value.encode_nested(buffer)
        return buffer.getvalue()

    def encode_top_level(self, value: SingleValue) -> bytes:
        """Return the top-level encoding of ``value``."""
        buffer = io.BytesIO()
        value.encode_top_level(buffer)
        return buffer.getvalue()

    def decode_nested(self, data: bytes, value: V) -> V:
        """Decode nested ``data`` into ``value`` and return it."""
        try:
            value.decode_nested(io.BytesIO(data))
        except ValueError as err:
            raise AbiError(
                f"cannot decode (nested) {type(value).__name__}, because of: {err}"
            ) from err
        return value

    def decode_top_level(self, data: bytes, value: V) -> V:
        """Decode top-level ``data`` into ``value`` and return it."""
        try:
            value.decode_top_level(data)
        except ValueError as err:
            raise AbiError(
                f"cannot decode (top-level) {type(value).__name__}, because of: {err}"
            ) from err
        return value