"""Tests for multiprecision long division."""
import pytest

from mprsa.core.arith.division import divide, reduce
from mprsa.core.codec import from_words, to_words
from mprsa.core.exceptions import BufferSizeError, ConvergenceError, PreconditionError


def run_divide(x_int, n, y_int, t, radix=None, **kwargs):
    """Divide ints through word arrays and return (q, r) as ints."""
    extra = {} if radix is None else {'radix': radix}
    q = [0] * (n - t + 1)
    r = [0] * t
    divide(q, r, to_words(x_int, n, **extra), n, to_words(y_int, t, **extra), t, **extra, **kwargs)
    return from_words(q, **extra), from_words(r, **extra)


class TestDivide:
    """Test suite for HAC 14.20 division."""

    def test_small_example(self):
        """Test a hand-checkable division."""
        x = 0x123456789ABC
        y = 0x10001
        q, r = run_divide(x, 3, y, 2)
        assert (q, r) == divmod(x, y)

    def test_division_identity_random(self, random_value):
        """Test x == q*y + r and 0 <= r < y for random normalized operands."""
        for n, t in ((2, 2), (3, 2), (4, 3), (8, 2), (16, 8), (33, 17), (64, 32)):
            for _ in range(5):
                x = random_value(n)
                y = random_value(t, top_nonzero=True)
                q, r = run_divide(x, n, y, t)
                assert x == q * y + r
                assert 0 <= r < y

    def test_divisor_top_word_one(self, random_value):
        """Test the divisor that needs the largest normalization shift."""
        for _ in range(20):
            x = random_value(10)
            y = (1 << 64) | random_value(4)
            assert run_divide(x, 10, y, 5) == divmod(x, y)

    def test_divisor_top_word_full(self, random_value):
        """Test an already normalized divisor."""
        for _ in range(20):
            x = random_value(10)
            y = (0xFFFF << 64) | random_value(4)
            assert run_divide(x, 10, y, 5) == divmod(x, y)

    def test_dividend_smaller_than_divisor(self):
        """Test q = 0 and r = x when x < y."""
        assert run_divide(0x1234, 3, 0x5_0000_0000, 3) == (0, 0x1234)

    def test_equal_operands(self):
        """Test x == y gives q = 1, r = 0."""
        y = 0xDEADBEEFCAFE
        assert run_divide(y, 3, y, 3) == (1, 0)

    def test_all_ones_dividend(self):
        """Test the largest dividend for its wordlength."""
        x = (1 << 128) - 1
        y = (1 << 33) + 1
        assert run_divide(x, 8, y, 3) == divmod(x, y)

    def test_trial_digit_needs_correction(self):
        """Test a dividend whose first trial digit overshoots."""
        x = 0x7FFFFFFF0000
        y = 0x8000FFFF
        assert run_divide(x, 3, y, 2) == divmod(x, y)

    def test_32_bit_radix(self, any_radix, random_value):
        """Test division with each supported radix."""
        for _ in range(10):
            x = random_value(9, any_radix)
            y = random_value(4, any_radix, top_nonzero=True)
            assert run_divide(x, 9, y, 4, any_radix) == divmod(x, y)

    def test_inputs_not_mutated(self, random_value):
        """Test x and y are left untouched."""
        x = to_words(random_value(6), 6)
        y = to_words(random_value(3, top_nonzero=True), 3)
        x_before, y_before = list(x), list(y)

        divide([0] * 4, [0] * 3, x, 6, y, 3)

        assert x == x_before
        assert y == y_before

    def test_remainder_may_alias_dividend(self, random_value):
        """Test the remainder can be written over the dividend."""
        x_int = random_value(6)
        y_int = random_value(3, top_nonzero=True)
        x = to_words(x_int, 6)
        q = [0] * 4

        divide(q, x, x, 6, to_words(y_int, 3), 3)

        assert from_words(q) == x_int // y_int
        assert from_words(x, 3) == x_int % y_int


class TestDividePreconditions:
    """Edge case tests for division preconditions."""

    def test_single_word_divisor_rejected(self):
        """Test t <= 1 is reported."""
        with pytest.raises(PreconditionError):
            divide([0] * 3, [0], [1, 2, 3], 3, [7], 1)

    def test_zero_leading_divisor_word_rejected(self):
        """Test a divisor with a zero top word is reported."""
        with pytest.raises(PreconditionError):
            divide([0] * 2, [0] * 2, [1, 2], 2, [5, 0], 2)

    def test_dividend_shorter_than_divisor_rejected(self):
        """Test n < t is reported."""
        with pytest.raises(PreconditionError):
            divide([0], [0] * 3, [1, 2], 2, [1, 2, 3], 3)

    def test_quotient_and_remainder_must_differ(self):
        """Test q and r cannot be the same buffer."""
        buf = [0] * 4
        with pytest.raises(PreconditionError):
            divide(buf, buf, [1, 2, 3], 3, [1, 2], 2)

    def test_short_quotient_rejected(self):
        """Test a quotient buffer shorter than n - t + 1 words."""
        with pytest.raises(BufferSizeError):
            divide([0], [0, 0], [1, 2, 3], 3, [1, 2], 2)

    def test_correction_bound_reported(self):
        """Test an exhausted correction budget raises instead of looping."""
        # Trial digit 0xFFFF is two too large: the true digit is 0xFFFD
        x, y = 0x7FFF80000000, 0x8000FFFF
        assert x // y == 0xFFFD

        with pytest.raises(ConvergenceError) as exc_info:
            run_divide(x, 3, y, 2, max_corrections=1)

        assert exc_info.value.stage == 'trial digit'
        assert exc_info.value.iterations == 1

    def test_two_corrections_within_default_bound(self):
        """Test the same dividend divides with the default bound."""
        x, y = 0x7FFF80000000, 0x8000FFFF
        assert run_divide(x, 3, y, 2) == divmod(x, y)

    @pytest.mark.parametrize("bound", [0, -1])
    def test_correction_bound_below_one_rejected(self, bound):
        """Test a correction bound below one is a precondition error."""
        with pytest.raises(PreconditionError):
            run_divide(10, 2, 1 << 16, 2, max_corrections=bound)

    def test_entry_wider_than_word_rejected(self):
        """Test an entry outside [0, base) is reported by name."""
        with pytest.raises(PreconditionError) as exc_info:
            divide([0] * 2, [0] * 2, [0x1FFFF, 1], 2, [1, 1], 2)
        assert 'x[0]' in str(exc_info.value)

        with pytest.raises(PreconditionError) as exc_info:
            divide([0] * 2, [0] * 2, [1, 1], 2, [1, 0x1FFFF], 2)
        assert 'y[1]' in str(exc_info.value)

    def test_negative_entry_rejected(self):
        """Test negative entries are not words."""
        with pytest.raises(PreconditionError):
            divide([0] * 2, [0] * 2, [-1, 1], 2, [1, 1], 2)


class TestReduce:
    """Test suite for remainder-only reduction."""

    def test_reduce(self, random_value):
        """Test reduce matches int modulo."""
        x = random_value(8)
        p = random_value(4, top_nonzero=True)
        r = [0] * 4
        reduce(r, to_words(x, 8), 8, to_words(p, 4), 4)
        assert from_words(r) == x % p
