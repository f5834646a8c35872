"""Word-array arithmetic: the multiprecision engine proper."""
from .word import add_word, subtract_word, multiply_words, multiply_words_split, divide_words
from .vector import add, subtract, compare, are_equal, copy, zero
from .shift import (
    shift_up_by_radix_power,
    shift_down_by_radix_power,
    mod_by_radix_power,
    shift_left_bits,
    shift_right_bits,
)
from .multiply import multiply_word_by_vector, multiply, multiply_rect
from .division import divide, reduce
from .modular import add_mod, subtract_mod, multiply_mod
from .bits import bit_of_word, word_bit_length, bit_length, bit_at, highest_nonzero_word
from .exponent import mod_exp

__all__ = [
    'add_word',
    'subtract_word',
    'multiply_words',
    'multiply_words_split',
    'divide_words',
    'add',
    'subtract',
    'compare',
    'are_equal',
    'copy',
    'zero',
    'shift_up_by_radix_power',
    'shift_down_by_radix_power',
    'mod_by_radix_power',
    'shift_left_bits',
    'shift_right_bits',
    'multiply_word_by_vector',
    'multiply',
    'multiply_rect',
    'divide',
    'reduce',
    'add_mod',
    'subtract_mod',
    'multiply_mod',
    'bit_of_word',
    'word_bit_length',
    'bit_length',
    'bit_at',
    'highest_nonzero_word',
    'mod_exp',
]
