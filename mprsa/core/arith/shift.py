"""
Positional shifts of BigNats.

Radix shifts move whole words (multiply or divide by a power of the radix);
bit shifts move by less than one word and are used to normalize divisors.
"""
from typing import Sequence

from ..config import DEFAULT_RADIX, Radix
from ..exceptions import PreconditionError
from .buffers import Words, require_length, require_words


def shift_up_by_radix_power(out: Words, out_len: int, a: Sequence[int], a_len: int, k: int) -> None:
    """
    out = a * base^k, truncated to out_len words.

    Words of a that would land at or beyond out_len are dropped.
    """
    require_length('out_len', out_len)
    require_length('a_len', a_len)
    require_length('k', k)
    require_words('out', out, out_len)
    require_words('a', a, a_len)

    out[:out_len] = [0] * out_len
    i = 0
    while i + k < out_len:
        if i < a_len:
            out[i + k] = a[i]
        i += 1


def shift_down_by_radix_power(out: Words, out_len: int, a: Sequence[int], a_len: int, k: int) -> None:
    """
    out = floor(a / base^k).

    Raises:
        PreconditionError: If out_len + 1 <= a_len - k (out is left zeroed)
    """
    require_length('out_len', out_len)
    require_length('a_len', a_len)
    require_length('k', k)
    require_words('out', out, out_len)
    require_words('a', a, a_len)

    out[:out_len] = [0] * out_len
    if out_len + 1 <= a_len - k:
        raise PreconditionError(
            f"{out_len}-word output cannot hold a {a_len}-word value shifted down by {k}"
        )
    for i in range(out_len):
        if k + i < a_len:
            out[i] = a[k + i]


def mod_by_radix_power(out: Words, out_len: int, a: Sequence[int], a_len: int, k: int) -> None:
    """out = a mod base^k, zero-extended to out_len words."""
    require_length('out_len', out_len)
    require_length('a_len', a_len)
    require_length('k', k)
    require_words('out', out, out_len)
    require_words('a', a, a_len)

    for i in range(out_len):
        out[i] = a[i] if i < a_len and i < k else 0


def shift_left_bits(out: Words, a: Sequence[int], n: int, k: int, radix: Radix = DEFAULT_RADIX) -> int:
    """
    out = (a << k) mod base^n for 0 <= k < W.

    Returns the k bits shifted out of the top word. out may be a.
    """
    _check_bit_shift(out, a, n, k, radix)
    if k == 0:
        out[:n] = a[:n]
        return 0

    back = radix.bits - k
    carry = 0
    for i in range(n):
        word = a[i]
        out[i] = ((word << k) & radix.mask) | carry
        carry = word >> back
    return carry


def shift_right_bits(out: Words, a: Sequence[int], n: int, k: int, radix: Radix = DEFAULT_RADIX) -> int:
    """
    out = a >> k for 0 <= k < W.

    Returns the k bits shifted out of the bottom word. out may be a.
    """
    _check_bit_shift(out, a, n, k, radix)
    if k == 0:
        out[:n] = a[:n]
        return 0

    back = radix.bits - k
    low_mask = (1 << k) - 1
    carry = 0
    for i in range(n - 1, -1, -1):
        word = a[i]
        out[i] = (word >> k) | carry
        carry = (word & low_mask) << back
    return carry >> back


def _check_bit_shift(out, a, n, k, radix):
    require_length('n', n)
    require_words('a', a, n)
    require_words('out', out, n)
    if not 0 <= k < radix.bits:
        raise PreconditionError(f"Bit shift must be in [0, {radix.bits}), got {k}")
