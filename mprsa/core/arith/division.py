"""
Multiprecision division, HAC Algorithm 14.20.

The divisor is first normalized (HAC note 14.23) so that its top word has
its high bit set. With a normalized divisor every trial quotient digit is
at most two too large, which is what bounds the correction loops below.
The dividend is worked on in a private buffer, so q and r may alias x or y
(but not each other).
"""
from typing import Sequence

from ..config import DEFAULT_MAX_CORRECTIONS, DEFAULT_RADIX, Radix
from ..exceptions import ConvergenceError, PreconditionError
from ..logging import get_logger
from .bits import word_bit_length
from .buffers import Words, require_digits, require_length, require_words, scratch
from .multiply import multiply_word_by_vector
from .shift import shift_left_bits, shift_right_bits, shift_up_by_radix_power
from .vector import add, compare, subtract
from .word import divide_words

logger = get_logger('arith.division')


def divide(
    q: Words,
    r: Words,
    x: Sequence[int],
    n: int,
    y: Sequence[int],
    t: int,
    radix: Radix = DEFAULT_RADIX,
    max_corrections: int = DEFAULT_MAX_CORRECTIONS
) -> None:
    """
    Long division of an n-word x by a t-word y.

    Writes q (n - t + 1 words) and r (t words) such that x = q*y + r and
    0 <= r < y.

    Args:
        q: Quotient output
        r: Remainder output
        x: Dividend
        n: Wordlength of x
        y: Divisor, top word y[t-1] non-zero
        t: Wordlength of y, at least 2
        radix: Word width
        max_corrections: Bound on each correction loop per digit

    Raises:
        PreconditionError: On t <= 1, n < t, a zero leading divisor word,
            an entry that is not a word, max_corrections < 1, or q and r
            being the same list
        BufferSizeError: If any buffer is too short
        ConvergenceError: If a correction loop exceeds max_corrections
    """
    _check_division(q, r, x, n, y, t, radix, max_corrections)

    mask = radix.mask
    shift = radix.bits - 1 - word_bit_length(y[t - 1], radix)

    # Normalized dividend gains one word; one more spare word keeps
    # q_i * y * base^(i-t) inside the working width.
    big_n = n + 1
    width = big_n + 1
    xs = scratch(width)
    xs[n] = shift_left_bits(xs, x, n, shift, radix)
    ys = scratch(t)
    shift_left_bits(ys, y, t, shift, radix)
    qs = scratch(big_n - t + 1)

    logger.debug("divide: n=%d t=%d normalization shift=%d", n, t, shift)

    # Leading quotient digit
    ybnt = scratch(width)
    shift_up_by_radix_power(ybnt, width, ys, t, big_n - t)
    steps = 0
    while compare(xs, ybnt, width):
        if steps >= max_corrections:
            raise ConvergenceError('leading digit', steps)
        qs[big_n - t] += 1
        subtract(xs, xs, ybnt, width, radix)
        steps += 1

    y_top = ys[t - 1]
    y_pair = [ys[t - 2], y_top]
    ls = scratch(3)
    ybit = scratch(width)
    product = scratch(width + 1)

    for i in range(big_n - 1, t - 1, -1):
        # Trial digit from the two leading words
        if xs[i] == y_top:
            q_hat = mask
        else:
            q_hat = min(divide_words(xs[i], xs[i - 1], y_top, radix), mask)

        # Compare against the leading three words of the remainder
        rs = [xs[i - 2], xs[i - 1], xs[i]]
        multiply_word_by_vector(ls, q_hat, y_pair, 2, radix)
        steps = 0
        while not compare(rs, ls, 3):
            if steps >= max_corrections:
                raise ConvergenceError('trial digit', steps)
            q_hat -= 1
            multiply_word_by_vector(ls, q_hat, y_pair, 2, radix)
            steps += 1

        # x -= q_hat * y * base^(i-t), stepping q_hat down if that goes negative
        shift_up_by_radix_power(ybit, width, ys, t, i - t)
        multiply_word_by_vector(product, q_hat, ybit, width, radix)
        steps = 0
        while not compare(xs, product, width):
            if steps >= max_corrections:
                raise ConvergenceError('add back', steps)
            q_hat -= 1
            subtract(product, product, ybit, width, radix)
            steps += 1
        subtract(xs, xs, product, width, radix)

        qs[i - t] = q_hat
        logger.debug("divide: digit %d = 0x%x", i - t, q_hat)

    # Un-normalize the remainder
    shift_right_bits(r, xs, t, shift, radix)
    q[:n - t + 1] = qs[:n - t + 1]


def reduce(
    r: Words,
    x: Sequence[int],
    n: int,
    p: Sequence[int],
    t: int,
    radix: Radix = DEFAULT_RADIX,
    max_corrections: int = DEFAULT_MAX_CORRECTIONS
) -> None:
    """r = x mod p, discarding the quotient."""
    quotient = scratch(max(n - t + 1, 1))
    divide(quotient, r, x, n, p, t, radix, max_corrections)


def _check_division(q, r, x, n, y, t, radix, max_corrections):
    if t <= 1:
        raise PreconditionError(f"Divisor wordlength must be greater than 1, got {t}")
    if n < t:
        raise PreconditionError(
            f"Dividend wordlength {n} is shorter than divisor wordlength {t}"
        )
    require_length('max_corrections', max_corrections, 1)
    require_words('x', x, n)
    require_words('y', y, t)
    require_digits('x', x, n, radix)
    require_digits('y', y, t, radix)
    if y[t - 1] == 0:
        raise PreconditionError("Divisor leading word is zero")
    if q is r:
        raise PreconditionError("Quotient and remainder must be distinct buffers")
    require_words('q', q, n - t + 1)
    require_words('r', r, t)
