"""Bit inspection helpers driving the exponentiation loop."""
from typing import Sequence

from ..config import DEFAULT_RADIX, Radix
from ..exceptions import PreconditionError
from .buffers import require_length, require_words


def bit_of_word(w: int, i: int) -> bool:
    """Bit i of a single word, 0 being the least significant."""
    return (w >> i) & 1 == 1


def word_bit_length(w: int, radix: Radix = DEFAULT_RADIX) -> int:
    """
    Index of the highest set bit of a word.

    Raises:
        PreconditionError: If w is zero
    """
    if w == 0:
        raise PreconditionError("A zero word has no highest set bit")
    for i in range(radix.bits - 1, -1, -1):
        if bit_of_word(w, i):
            return i
    raise PreconditionError(f"Word 0x{w:x} does not fit in {radix.bits} bits")


def highest_nonzero_word(e: Sequence[int], n: int) -> int:
    """Index of the most significant non-zero word, -1 if all n words are zero."""
    require_length('n', n)
    require_words('e', e, n)
    for i in range(n - 1, -1, -1):
        if e[i] != 0:
            return i
    return -1


def bit_length(e: Sequence[int], n: int, radix: Radix = DEFAULT_RADIX) -> int:
    """
    Index of the highest set bit of an n-word BigNat.

    Raises:
        PreconditionError: If e is zero
    """
    top = highest_nonzero_word(e, n)
    if top < 0:
        raise PreconditionError("A zero BigNat has no highest set bit")
    return radix.bits * top + word_bit_length(e[top], radix)


def bit_at(e: Sequence[int], i: int, radix: Radix = DEFAULT_RADIX) -> bool:
    """Bit i of a BigNat, counted from the least significant bit of word 0."""
    require_length('i', i)
    word, offset = divmod(i, radix.bits)
    require_words('e', e, word + 1)
    return bit_of_word(e[word], offset)
