"""
Multiprecision addition, subtraction, comparison and buffer utilities.

Operands are word lists, least-significant word first, with the wordlength
passed explicitly. The output of add/subtract may be the same list as
either input: each word is read before it is written.
"""
from typing import Sequence

from ..config import DEFAULT_RADIX, Radix
from .buffers import Words, require_length, require_words
from .word import add_word, subtract_word


def add(c: Words, a: Sequence[int], b: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> int:
    """
    Multiprecision addition (HAC 14.7).

    c = (a + b) mod base^n; the carry out of the top word is returned,
    never written.
    """
    require_length('n', n)
    require_words('a', a, n)
    require_words('b', b, n)
    require_words('c', c, n)

    carry = 0
    for i in range(n):
        c[i], carry = add_word(a[i], b[i], carry, radix)
    return carry


def subtract(c: Words, a: Sequence[int], b: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> int:
    """
    Multiprecision subtraction (HAC 14.9).

    c = (a - b) mod base^n; returns 1 when b > a.
    """
    require_length('n', n)
    require_words('a', a, n)
    require_words('b', b, n)
    require_words('c', c, n)

    borrow = 0
    for i in range(n):
        c[i], borrow = subtract_word(a[i], b[i], borrow, radix)
    return borrow


def compare(a: Sequence[int], b: Sequence[int], n: int) -> bool:
    """Return True if a >= b, scanning from the most significant word."""
    require_length('n', n)
    require_words('a', a, n)
    require_words('b', b, n)

    for i in range(n - 1, -1, -1):
        if a[i] < b[i]:
            return False
        if a[i] > b[i]:
            return True
    # The elements are equal
    return True


def are_equal(a: Sequence[int], b: Sequence[int], n: int) -> bool:
    """Return True if the low n words of a and b match."""
    require_length('n', n)
    require_words('a', a, n)
    require_words('b', b, n)
    return all(a[i] == b[i] for i in range(n))


def copy(dst: Words, src: Sequence[int], n: int) -> None:
    """Copy n words of src into dst."""
    require_length('n', n)
    require_words('src', src, n)
    require_words('dst', dst, n)
    dst[:n] = src[:n]


def zero(dst: Words, n: int) -> None:
    """Set the low n words of dst to zero."""
    require_length('n', n)
    require_words('dst', dst, n)
    dst[:n] = [0] * n
