"""The eight general-purpose 32-bit registers of the machine."""

from __future__ import annotations

from collections.abc import Iterator

REGISTER_COUNT = 8
_WORD_MASK = 0xFFFFFFFF


class Registers:
    """A fixed bank of eight 32-bit registers, all starting at zero."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values = [0] * REGISTER_COUNT

    @staticmethod
    def _check(index: int) -> int:
        if not 0 <= index < REGISTER_COUNT:
            raise IndexError(f"register {index} out of range")
        return index

    def __getitem__(self, index: int) -> int:
        return self._values[self._check(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._values[self._check(index)] = value & _WORD_MASK

    def __len__(self) -> int:
        return REGISTER_COUNT

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"Registers({self._values!r})"