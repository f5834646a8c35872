"""
Conversion between Python ints and word arrays.

Word arrays are least-significant word first, the layout every routine in
mprsa.core.arith expects.
"""
from typing import List, Optional, Sequence

from Crypto.Util.number import bytes_to_long, long_to_bytes

from .config import DEFAULT_RADIX, Radix
from .exceptions import PreconditionError


def word_length(value: int, radix: Radix = DEFAULT_RADIX) -> int:
    """Number of words needed to hold value (at least 1)."""
    if value < 0:
        raise PreconditionError(f"BigNats are unsigned, got {value}")
    return max(1, -(-value.bit_length() // radix.bits))


def to_words(value: int, length: Optional[int] = None, radix: Radix = DEFAULT_RADIX) -> List[int]:
    """
    Split a non-negative int into words.

    Args:
        value: Integer to convert
        length: Wordlength of the result; defaults to the minimum needed
        radix: Word width

    Returns:
        List of words, least significant first

    Raises:
        PreconditionError: If value is negative or does not fit in length words
    """
    needed = word_length(value, radix)
    if length is None:
        length = needed
    elif needed > length and value != 0:
        raise PreconditionError(
            f"Value needs {needed} words of {radix.bits} bits, only {length} available"
        )

    words = []
    for _ in range(length):
        words.append(value & radix.mask)
        value >>= radix.bits
    return words


def from_words(words: Sequence[int], n: Optional[int] = None, radix: Radix = DEFAULT_RADIX) -> int:
    """Join the low n words (default: all) back into an int."""
    if n is None:
        n = len(words)
    value = 0
    for i in reversed(range(n)):
        value = (value << radix.bits) | words[i]
    return value


def format_words(words: Sequence[int], n: Optional[int] = None, radix: Radix = DEFAULT_RADIX) -> str:
    """Hex rendering of a word array, most significant word first."""
    if n is None:
        n = len(words)
    digits = radix.bits // 4 + (1 if radix.bits % 4 else 0)
    return ' '.join(f"{words[i]:0{digits}x}" for i in reversed(range(n)))


def bytes_to_words(data: bytes, length: Optional[int] = None, radix: Radix = DEFAULT_RADIX) -> List[int]:
    """Big-endian byte string to a word array (see to_words)."""
    return to_words(bytes_to_long(data), length, radix)


def words_to_bytes(
    words: Sequence[int],
    n: Optional[int] = None,
    radix: Radix = DEFAULT_RADIX,
    blocksize: int = 0
) -> bytes:
    """
    Word array to a big-endian byte string.

    Args:
        words: Word array, least significant first
        n: Wordlength to read (default: all)
        radix: Word width
        blocksize: Left-pad the result with zero bytes to a multiple of this
    """
    return long_to_bytes(from_words(words, n, radix), blocksize)
