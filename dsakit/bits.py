"""Small bit-manipulation helpers on Python integers."""

from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def _mask(position: int) -> int:
    """Mask for a 1-based bit position."""
    if position < 1:
        raise ValueError(f"bit positions start at 1, got {position}")
    return 1 << (position - 1)


def ones_complement(value: int) -> int:
    """Every bit of ``value`` inverted."""
    return ~value


def twos_complement(value: int) -> int:
    """The one's complement plus one, that is the negation of ``value``."""
    return ones_complement(value) + 1


def subsets(values: Sequence[T]) -> List[List[T]]:
    """Every subset of ``values``, in the order of the bitmask that selects it."""
    items = list(values)
    return [
        [item for bit, item in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def count_set_bits(value: int) -> int:
    """Number of one bits in a non-negative integer."""
    if value < 0:
        raise ValueError("count_set_bits needs a non-negative value")
    count = 0
    while value:
        value &= value - 1
        count += 1
    return count


def flip_bit(value: int, position: int) -> int:
    """``value`` with the bit at 1-based ``position`` inverted."""
    return value ^ _mask(position)


def is_odd(value: int) -> bool:
    """True if the lowest bit of ``value`` is set."""
    return bool(value & 1)


def is_power_of_two(value: int) -> bool:
    """True if ``value`` is a positive power of two."""
    return value > 0 and value & (value - 1) == 0


def largest_power_of_two(value: int) -> int:
    """Largest power of two not above ``value``; 0 when ``value`` is below 1."""
    if value < 1:
        return 0
    return 1 << (value.bit_length() - 1)


def is_bit_set(value: int, position: int) -> bool:
    """True if the bit at 1-based ``position`` is set."""
    return bool(value & _mask(position))


def rightmost_one_position(value: int) -> int:
    """0-based index of the lowest set bit, or -1 when ``value`` is 0."""
    if value == 0:
        return -1
    return (value & -value).bit_length() - 1


def set_bit(value: int, position: int) -> int:
    """``value`` with the bit at 1-based ``position`` set."""
    return value | _mask(position)


def xor_swap(a: int, b: int) -> Tuple[int, int]:
    """Return ``(b, a)``, exchanged with three exclusive-ors."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def toggle_case(char: str) -> str:
    """Flip the ASCII case bit of a single character."""
    if len(char) != 1:
        raise ValueError("toggle_case needs exactly one character")
    return chr(ord(char) ^ 32)


def unset_bit(value: int, position: int) -> int:
    """``value`` with the bit at 1-based ``position`` cleared."""
    return value & ~_mask(position)