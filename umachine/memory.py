"""Segmented memory: numbered segments of 32-bit words, mapped and unmapped."""

from __future__ import annotations

from collections import deque

_INITIAL_SLOTS = 10
_WORD_MASK = 0xFFFFFFFF


class SegmentError(LookupError):
    """Raised on access to an unmapped segment or an out-of-range offset."""


class SegmentedMemory:
    """Segments of zero-initialised words; segment 0 is mapped on creation."""

    def __init__(self, length: int) -> None:
        self._segments: list[list[int] | None] = [None] * _INITIAL_SLOTS
        self._free: deque[int] = deque(range(_INITIAL_SLOTS))
        self.map(length)

    def _segment(self, seg: int) -> list[int]:
        if not 0 <= seg < len(self._segments):
            raise SegmentError(f"segment {seg} does not exist")
        segment = self._segments[seg]
        if segment is None:
            raise SegmentError(f"segment {seg} is not mapped")
        return segment

    def _word_index(self, segment: list[int], seg: int, off: int) -> int:
        if not 0 <= off < len(segment):
            raise SegmentError(f"offset {off} out of range in segment {seg}")
        return off

    def get(self, seg: int, off: int) -> int:
        """Return the word at offset ``off`` of segment ``seg``."""
        segment = self._segment(seg)
        return segment[self._word_index(segment, seg, off)]

    def put(self, seg: int, off: int, value: int) -> None:
        """Store ``value`` (truncated to 32 bits) at ``off`` in segment ``seg``."""
        segment = self._segment(seg)
        segment[self._word_index(segment, seg, off)] = value & _WORD_MASK

    def map(self, length: int) -> int:
        """Map a new zeroed segment of ``length`` words and return its number."""
        if length < 0:
            raise ValueError("segment length must not be negative")
        segment = [0] * length
        if self._free:
            index = self._free.popleft()
            self._segments[index] = segment
        else:
            index = len(self._segments)
            self._segments.append(segment)
        return index

    def unmap(self, seg: int) -> None:
        """Unmap segment ``seg`` and make its number available for reuse."""
        if seg == 0:
            raise SegmentError("segment 0 cannot be unmapped")
        self._segment(seg)
        self._segments[seg] = None
        self._free.append(seg)

    def segment_length(self, seg: int) -> int:
        """Return the number of words in mapped segment ``seg``."""
        return len(self._segment(seg))

    def load_into_zero(self, seg: int) -> None:
        """Replace segment 0 with a copy of segment ``seg``."""
        if seg == 0:
            self._segment(0)
            return
        self._segments[0] = list(self._segment(seg))