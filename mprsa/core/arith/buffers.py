"""Buffer validation shared by the word-array routines."""
from typing import List, MutableSequence, Sequence

from ..config import Radix
from ..exceptions import BufferSizeError, PreconditionError

Words = MutableSequence[int]


def require_words(name: str, buffer: Sequence[int], required: int) -> None:
    """Raise BufferSizeError unless `buffer` holds at least `required` words."""
    actual = len(buffer)
    if actual < required:
        raise BufferSizeError(name, required, actual)


def require_digits(name: str, buffer: Sequence[int], n: int, radix: Radix) -> None:
    """Raise PreconditionError unless the low n entries are words of `radix`."""
    for i in range(n):
        word = buffer[i]
        if not 0 <= word <= radix.mask:
            raise PreconditionError(
                f"{name}[{i}] = {word} is not a {radix.bits}-bit word"
            )


def require_length(name: str, length: int, minimum: int = 0) -> None:
    """Raise PreconditionError for a negative or too small wordlength."""
    if length < minimum:
        raise PreconditionError(f"{name} must be at least {minimum}, got {length}")


def scratch(length: int) -> List[int]:
    """Zero-filled private buffer."""
    return [0] * length
