"""
Single-word primitives.

Every multiprecision routine is built from these. Words are plain ints in
[0, radix.base); a DoubleWord is returned as a (high, low) pair.
"""
from typing import Tuple

from ..config import DEFAULT_RADIX, Radix
from ..exceptions import DivisionByZeroError


def add_word(a: int, b: int, carry_in: int = 0, radix: Radix = DEFAULT_RADIX) -> Tuple[int, int]:
    """Return ((a + b + carry_in) mod base, carry_out)."""
    total = a + b + carry_in
    return total & radix.mask, total >> radix.bits


def subtract_word(a: int, b: int, borrow_in: int = 0, radix: Radix = DEFAULT_RADIX) -> Tuple[int, int]:
    """Return ((a - b - borrow_in) mod base, borrow_out)."""
    diff = a - b - borrow_in
    return diff & radix.mask, 1 if diff < 0 else 0


def multiply_words(a: int, b: int, radix: Radix = DEFAULT_RADIX) -> Tuple[int, int]:
    """Exact word x word product as (high, low)."""
    uv = a * b
    return uv >> radix.bits, uv & radix.mask


def multiply_words_split(a: int, b: int, radix: Radix = DEFAULT_RADIX) -> Tuple[int, int]:
    """
    Word x word product built from half-word partial products only.

    Each partial product fits in one word, so no intermediate ever needs
    more than a word plus a carry bit. Same result as multiply_words.
    """
    hb, hm = radix.half_bits, radix.half_mask
    a_hi, a_lo = a >> hb, a & hm
    b_hi, b_lo = b >> hb, b & hm

    lo = a_lo * b_lo
    hi = a_hi * b_hi
    cross1 = a_hi * b_lo
    cross2 = a_lo * b_hi

    # Fold each cross term into the two result words
    lo, carry = add_word(lo, (cross1 & hm) << hb, 0, radix)
    hi += (cross1 >> hb) + carry
    lo, carry = add_word(lo, (cross2 & hm) << hb, 0, radix)
    hi += (cross2 >> hb) + carry
    return hi & radix.mask, lo


def divide_words(x1: int, x0: int, y: int, radix: Radix = DEFAULT_RADIX) -> int:
    """
    Return floor((x1 * base + x0) / y).

    The quotient exceeds one word when x1 >= y; callers clamp as needed.

    Raises:
        DivisionByZeroError: If y is zero
    """
    if y == 0:
        raise DivisionByZeroError(
            f"2-word by 1-word division of (0x{x1:x}, 0x{x0:x}) by zero"
        )
    return ((x1 << radix.bits) + x0) // y
