"""Tests for modular addition, subtraction and multiplication."""
import pytest

from mprsa.core.arith.modular import add_mod, subtract_mod, multiply_mod
from mprsa.core.codec import from_words, to_words
from mprsa.core.exceptions import PreconditionError


@pytest.fixture
def modulus(random_value):
    """Random 8-word modulus with a non-zero top word."""
    return random_value(8, top_nonzero=True)


class TestAddMod:
    """Test suite for addition in Z_p."""

    def test_closure(self, rng, modulus):
        """Test a + b mod p stays in [0, p)."""
        p = to_words(modulus, 8)
        for _ in range(50):
            a, b = rng.randrange(modulus), rng.randrange(modulus)
            c = [0] * 8
            add_mod(c, to_words(a, 8), to_words(b, 8), p, 8)
            assert from_words(c) == (a + b) % modulus

    def test_carry_out_of_top_word(self):
        """Test a sum that overflows n words is still reduced."""
        modulus = (1 << 32) - 5
        a = b = modulus - 1
        c = [0, 0]
        add_mod(c, to_words(a, 2), to_words(b, 2), to_words(modulus, 2), 2)
        assert from_words(c) == (a + b) % modulus

    def test_sum_equal_to_modulus(self):
        """Test a + b == p reduces to zero."""
        modulus = 0x12345
        c = [9, 9]
        add_mod(c, to_words(0x12340, 2), to_words(5, 2), to_words(modulus, 2), 2)
        assert c == [0, 0]

    def test_in_place(self, modulus):
        """Test the output may alias an input."""
        a_int = modulus - 3
        a = to_words(a_int, 8)
        add_mod(a, a, to_words(7, 8), to_words(modulus, 8), 8)
        assert from_words(a) == 4


class TestSubtractMod:
    """Test suite for subtraction in Z_p."""

    def test_closure(self, rng, modulus):
        """Test a - b mod p stays in [0, p)."""
        p = to_words(modulus, 8)
        for _ in range(50):
            a, b = rng.randrange(modulus), rng.randrange(modulus)
            c = [0] * 8
            subtract_mod(c, to_words(a, 8), to_words(b, 8), p, 8)
            assert from_words(c) == (a - b) % modulus

    def test_borrow_adds_modulus_back(self):
        """Test a < b wraps around the modulus."""
        modulus = 0x10007
        c = [0, 0]
        subtract_mod(c, to_words(1, 2), to_words(2, 2), to_words(modulus, 2), 2)
        assert from_words(c) == modulus - 1


class TestMultiplyMod:
    """Test suite for multiplication in Z_p."""

    def test_random(self, rng, modulus):
        """Test a * b mod p against int arithmetic."""
        p = to_words(modulus, 8)
        for _ in range(30):
            a, b = rng.randrange(modulus), rng.randrange(modulus)
            c = [0] * 8
            multiply_mod(c, to_words(a, 8), to_words(b, 8), p, 8)
            assert from_words(c) == (a * b) % modulus

    def test_square_in_place(self, rng, modulus):
        """Test squaring into the operand's own buffer."""
        a_int = rng.randrange(modulus)
        a = to_words(a_int, 8)
        multiply_mod(a, a, a, to_words(modulus, 8), 8)
        assert from_words(a) == (a_int * a_int) % modulus

    def test_32_word_modulus(self, rng, random_value):
        """Test the modulus size used for 512-bit RSA."""
        modulus = random_value(32, top_nonzero=True)
        a, b = rng.randrange(modulus), rng.randrange(modulus)
        c = [0] * 32
        multiply_mod(c, to_words(a, 32), to_words(b, 32), to_words(modulus, 32), 32)
        assert from_words(c) == (a * b) % modulus


class TestModularPreconditions:
    """Edge case tests for modulus and operand validation."""

    def test_zero_leading_modulus_word(self):
        """Test a modulus whose top word is zero is rejected."""
        with pytest.raises(PreconditionError):
            multiply_mod([0, 0], [1, 0], [1, 0], [7, 0], 2)

    def test_single_word_modulus(self):
        """Test a one-word modulus is rejected."""
        with pytest.raises(PreconditionError):
            add_mod([0], [1], [1], [7], 1)

    def test_unreduced_operand(self):
        """Test operands must be below the modulus."""
        p = to_words(0x10007, 2)
        with pytest.raises(PreconditionError):
            add_mod([0, 0], to_words(0x10007, 2), [1, 0], p, 2)
        with pytest.raises(PreconditionError):
            subtract_mod([0, 0], [1, 0], to_words(0x20000, 2), p, 2)

    def test_entry_wider_than_word(self):
        """Test entries outside [0, base) are rejected rather than miscomputed."""
        p = to_words(0x30007, 2)
        with pytest.raises(PreconditionError):
            add_mod([0, 0], [0x1FFFF, 0], [1, 0], p, 2)
        with pytest.raises(PreconditionError):
            multiply_mod([0, 0], [1, 0], [0x10000, 0], p, 2)
        with pytest.raises(PreconditionError):
            subtract_mod([0, 0], [1, 0], [1, 0], [7, 0x10003], 2)
