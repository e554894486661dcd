"""Packing and unpacking of bit fields inside 64-bit words."""

from __future__ import annotations

WORD_BITS = 64
_WORD_MASK = (1 << WORD_BITS) - 1


class BitpackOverflow(OverflowError):
    """Raised when a value does not fit in the requested field width."""

    def __init__(self, message: str = "Overflow packing bits") -> None:
        super().__init__(message)


def _check_field(width: int, lsb: int) -> None:
    if width < 0 or lsb < 0 or width + lsb > WORD_BITS:
        raise ValueError(
            f"field of width {width} at bit {lsb} does not fit in a "
            f"{WORD_BITS}-bit word"
        )


def fits_signed(n: int, width: int) -> bool:
    """Return True if the signed integer ``n`` fits in ``width`` bits."""
    if width >= WORD_BITS:
        return True
    if width == 0:
        return n == 0
    bound = 1 << (width - 1)
    return -bound <= n < bound


def fits_unsigned(n: int, width: int) -> bool:
    """Return True if the unsigned 64-bit integer ``n`` fits in ``width`` bits."""
    if width >= WORD_BITS:
        return True
    return (n & _WORD_MASK) >> width == 0


def get_unsigned(word: int, width: int, lsb: int) -> int:
    """Extract the unsigned field of ``width`` bits starting at bit ``lsb``."""
    _check_field(width, lsb)
    return ((word & _WORD_MASK) >> lsb) & ((1 << width) - 1)


def get_signed(word: int, width: int, lsb: int) -> int:
    """Extract the two's-complement field of ``width`` bits at bit ``lsb``."""
    if width == 0:
        return 0
    raw = get_unsigned(word, width, lsb)
    if raw >> (width - 1):
        return raw - (1 << width)
    return raw


def new_unsigned(word: int, width: int, lsb: int, value: int) -> int:
    """Return ``word`` with its field at ``lsb`` replaced by unsigned ``value``."""
    _check_field(width, lsb)
    if not fits_unsigned(value, width):
        raise BitpackOverflow()
    field_mask = ((1 << width) - 1) << lsb
    return ((word & _WORD_MASK) & ~field_mask) | ((value << lsb) & field_mask)


def new_signed(word: int, width: int, lsb: int, value: int) -> int:
    """Return ``word`` with its field at ``lsb`` replaced by signed ``value``."""
    if not fits_signed(value, width):
        raise BitpackOverflow()
    return new_unsigned(word, width, lsb, get_unsigned(value & _WORD_MASK, width, 0))