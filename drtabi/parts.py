"""A holder of raw data parts that works both as a builder and as a reader."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from drtabi.shared import AbiError


class PartsHolder:
    """Holds data parts, such as raw call arguments or raw return values.

    Parts can be built by appending an empty part and writing to it. Parts
    can also be read one at a time through a focus that only moves forward.
    """

    def __init__(self, parts: Optional[Iterable[bytes]] = None) -> None:
        self._parts: list[bytes] = [bytes(part) for part in parts or ()]
        self._focused_part_index = 0

    @property
    def parts(self) -> list[bytes]:
        """All parts, in order."""
        return self._parts

    @property
    def num_parts(self) -> int:
        """How many parts are held."""
        return len(self._parts)

    @property
    def focused_part_index(self) -> int:
        """Index of the part the focus is on."""
        return self._focused_part_index

    def get_part(self, index: int) -> bytes:
        """Return the part at ``index``."""
        if not 0 <= index < self.num_parts:
            raise AbiError(f"part index {index} is out of range")
        return self._parts[index]

    def append_to_last_part(self, data: bytes) -> None:
        """Append ``data`` to the last part."""
        if not self.has_any_part():
            raise AbiError("cannot write, since there is no part to write to")
        self._parts[-1] += bytes(data)

    def has_any_part(self) -> bool:
        """Whether at least one part is held."""
        return bool(self._parts)

    def append_empty_part(self) -> None:
        """Start a new, empty part at the end."""
        self._parts.append(b"")

    def read_whole_focused_part(self) -> bytes:
        """Return the whole focused part."""
        if self.is_focused_beyond_last_part():
            raise AbiError(
                f"cannot wholly read part {self._focused_part_index}: "
                "unexpected end of data"
            )
        return self.get_part(self._focused_part_index)

    def focus_on_next_part(self) -> None:
        """Move the focus to the next part."""
        if self.is_focused_beyond_last_part():
            raise AbiError(
                "cannot focus on next part, since the focus is already beyond "
                f"the last part; focused part index is {self._focused_part_index}"
            )
        self._focused_part_index += 1

    def is_focused_beyond_last_part(self) -> bool:
        """Whether the focus has moved past the last part."""
        return self._focused_part_index >= self.num_parts