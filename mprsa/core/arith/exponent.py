"""
Left-to-right binary modular exponentiation (HAC 14.79).

Note that square-and-multiply performs an extra multiplication exactly for
the set bits of the exponent, so its running time depends on secret
exponent bits. It is not suitable where timing side channels matter.
"""
from typing import Sequence

from ..config import DEFAULT_MAX_CORRECTIONS, DEFAULT_RADIX, Radix
from ..logging import get_logger
from .bits import bit_at, bit_length, highest_nonzero_word
from .buffers import Words, require_digits, require_length, require_words, scratch
from .modular import check_modulus, check_reduced, multiply_mod

logger = get_logger('arith.exponent')


def mod_exp(
    A: Words,
    g: Sequence[int],
    e: Sequence[int],
    e_len: int,
    p: Sequence[int],
    p_len: int,
    radix: Radix = DEFAULT_RADIX,
    max_corrections: int = DEFAULT_MAX_CORRECTIONS
) -> None:
    """
    A = g^e mod p.

    Args:
        A: Output, p_len words
        g: Base, p_len words, g < p
        e: Exponent, e_len words; zero gives A = 1
        e_len: Wordlength of e
        p: Modulus, top word non-zero
        p_len: Wordlength of p and g, at least 2
        radix: Word width
        max_corrections: Passed through to the division step

    Raises:
        PreconditionError: If the modulus is invalid, g >= p, an entry is
            not a word, or max_corrections < 1
        BufferSizeError: If any buffer is too short
    """
    check_modulus(p, p_len, radix)
    check_reduced('g', g, p, p_len, radix)
    require_length('e_len', e_len)
    require_length('max_corrections', max_corrections, 1)
    require_words('e', e, e_len)
    require_digits('e', e, e_len, radix)
    require_words('A', A, p_len)

    acc = scratch(p_len)
    acc[0] = 1

    if highest_nonzero_word(e, e_len) < 0:
        logger.debug("mod_exp: zero exponent")
        A[:p_len] = acc
        return

    base = list(g[:p_len])
    t = bit_length(e, e_len, radix)
    logger.debug("mod_exp: %d exponent bits, %d-word modulus", t + 1, p_len)

    for i in range(t, -1, -1):
        multiply_mod(acc, acc, acc, p, p_len, radix, max_corrections)
        if bit_at(e, i, radix):
            multiply_mod(acc, acc, base, p, p_len, radix, max_corrections)
        logger.debug("mod_exp: bit %d done", i)

    A[:p_len] = acc
