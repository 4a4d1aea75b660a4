"""Bounded buffer for assembling string literal contents."""

from __future__ import annotations

MAX_STRING_LENGTH = 1024


class StringAccumulator:
    """Collect string literal text up to a fixed capacity.

    Appends past the capacity are counted but not stored, so the scanner can
    keep consuming an oversized literal up to its closing quote and report it
    once.
    """

    def __init__(self, capacity: int = MAX_STRING_LENGTH) -> None:
        if capacity < 0:
            raise ValueError(f"string capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._chars: list[str] = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    @property
    def overflowed(self) -> bool:
        return self._length > self.capacity

    def reset(self) -> None:
        self._chars.clear()
        self._length = 0

    def append(self, text: str) -> None:
        self._length += len(text)
        room = self.capacity - len(self._chars)
        if room > 0:
            self._chars.extend(text[:room])

    def text(self) -> str:
        return "".join(self._chars)
