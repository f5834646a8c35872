"""
Arithmetic in Z_p for a multiprecision modulus p.

The modulus is n words long with a non-zero top word and n >= 2, since
reduction goes through long division.
"""
from typing import Sequence

from ..config import DEFAULT_MAX_CORRECTIONS, DEFAULT_RADIX, Radix
from ..exceptions import PreconditionError
from .buffers import Words, require_digits, require_words, scratch
from .division import reduce
from .multiply import multiply
from .vector import add, compare, subtract


def check_modulus(p: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> None:
    """
    Validate an n-word modulus.

    Raises:
        PreconditionError: If n < 2, an entry is not a word, or the top
            word of p is zero
    """
    if n < 2:
        raise PreconditionError(f"Modulus wordlength must be at least 2, got {n}")
    require_words('p', p, n)
    require_digits('p', p, n, radix)
    if p[n - 1] == 0:
        raise PreconditionError("Modulus leading word is zero")


def check_reduced(name: str, a: Sequence[int], p: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> None:
    """Raise PreconditionError unless a < p."""
    require_words(name, a, n)
    require_digits(name, a, n, radix)
    if compare(a, p, n):
        raise PreconditionError(f"Operand '{name}' is not reduced modulo p")


def add_mod(c: Words, a: Sequence[int], b: Sequence[int], p: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> None:
    """
    Addition in Z_p (HAC 14.27 style).

    Input: a, b in [0, p). Output: c = a + b mod p. c may alias a or b.
    """
    check_modulus(p, n, radix)
    check_reduced('a', a, p, n, radix)
    check_reduced('b', b, p, n, radix)

    carry = add(c, a, b, n, radix)
    if carry or compare(c, p, n):
        subtract(c, c, p, n, radix)


def subtract_mod(c: Words, a: Sequence[int], b: Sequence[int], p: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> None:
    """
    Subtraction in Z_p.

    Input: a, b in [0, p). Output: c = a - b mod p. c may alias a or b.
    """
    check_modulus(p, n, radix)
    check_reduced('a', a, p, n, radix)
    check_reduced('b', b, p, n, radix)

    if subtract(c, a, b, n, radix):
        add(c, c, p, n, radix)


def multiply_mod(
    c: Words,
    a: Sequence[int],
    b: Sequence[int],
    p: Sequence[int],
    n: int,
    radix: Radix = DEFAULT_RADIX,
    max_corrections: int = DEFAULT_MAX_CORRECTIONS
) -> None:
    """
    Multiplication in Z_p.

    The 2n-word product is reduced by long division; c may alias a or b.
    """
    check_modulus(p, n, radix)
    require_words('a', a, n)
    require_words('b', b, n)
    require_digits('a', a, n, radix)
    require_digits('b', b, n, radix)
    require_words('c', c, n)

    ab = scratch(2 * n)
    multiply(ab, a, b, n, radix)
    reduce(c, ab, 2 * n, p, n, radix, max_corrections)
