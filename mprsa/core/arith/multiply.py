"""
Multiprecision multiplication.

Schoolbook O(n^2) products (HAC 14.12). Results are accumulated in a
private buffer and copied out, so the output list may also be an input.
"""
from typing import Sequence

from ..config import DEFAULT_RADIX, Radix
from .buffers import Words, require_length, require_words, scratch
from .word import add_word, multiply_words


def multiply_word_by_vector(c: Words, a: int, b: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> None:
    """
    c = a * b for a single word a and an n-word b.

    c receives n + 1 words; the top word holds the final carry.
    """
    require_length('n', n)
    require_words('b', b, n)
    require_words('c', c, n + 1)

    result = scratch(n + 1)
    carry = 0
    for j in range(n):
        u, v = multiply_words(a, b[j], radix)
        v, overflow = add_word(v, carry, 0, radix)
        result[j] = v
        carry = u + overflow
    result[n] = carry
    c[:n + 1] = result


def multiply_rect(
    c: Words,
    a: Sequence[int],
    n_a: int,
    b: Sequence[int],
    n_b: int,
    radix: Radix = DEFAULT_RADIX
) -> None:
    """c = a * b with independent operand lengths; c receives n_a + n_b words."""
    require_length('n_a', n_a)
    require_length('n_b', n_b)
    require_words('a', a, n_a)
    require_words('b', b, n_b)
    require_words('c', c, n_a + n_b)

    w = scratch(n_a + n_b)
    for i in range(n_b):
        u = 0
        b_i = b[i]
        for j in range(n_a):
            # (u, v) = w[i+j] + a[j] * b[i] + u, which never exceeds two words
            hi, lo = multiply_words(a[j], b_i, radix)
            lo, carry = add_word(lo, w[i + j], 0, radix)
            hi += carry
            lo, carry = add_word(lo, u, 0, radix)
            hi += carry
            w[i + j] = lo
            u = hi
        w[i + n_a] = u
    c[:n_a + n_b] = w


def multiply(c: Words, a: Sequence[int], b: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> None:
    """c = a * b for two n-word operands; c receives 2n words."""
    multiply_rect(c, a, n, b, n, radix)
