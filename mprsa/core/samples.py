"""
Sample RSA encryption vector.

A 512-bit modulus, the public exponent 65537 and one plaintext block.
The word tuples below are written most significant word first, the way
the numbers read in hex; `sample_vectors` returns them in engine order.
"""
from dataclasses import dataclass
from typing import List

from .codec import from_words, to_words
from .config import RADIX_16, Radix

MODULUS_WORDS = (
    0xc318, 0x5456, 0xb119, 0x5ddc, 0xa9c7, 0x9c5e, 0x089e, 0x828d,
    0xd69e, 0xcb0d, 0xf000, 0xff1d, 0x2b9d, 0x2bed, 0xe9ca, 0x6788,
    0x4c41, 0x804e, 0xb2ce, 0x2836, 0x71e6, 0x3bef, 0xbba7, 0x9be1,
    0x8c8a, 0xd9c4, 0x982e, 0xf678, 0xc781, 0x303b, 0x494c, 0xcb75,
)

PLAINTEXT_WORDS = (
    0x074e, 0x9c01, 0x97b1, 0x6814, 0xa7c7, 0xb552, 0x93a5, 0xc651,
    0xe251, 0x0530, 0x11ce, 0x3da5, 0x37f0, 0x62b5, 0x49c5, 0x32c8,
    0x2678, 0x5131, 0x6840, 0xb819, 0x6fb3, 0x2728, 0xa273, 0x6b0d,
    0x9338, 0x5518, 0xaf9b, 0x9c6d, 0xeeec, 0xeadb, 0xb324, 0x74ee,
)

SAMPLE_MODULUS = from_words(MODULUS_WORDS[::-1], radix=RADIX_16)
SAMPLE_PLAINTEXT = from_words(PLAINTEXT_WORDS[::-1], radix=RADIX_16)
SAMPLE_EXPONENT = 65537

# Exponent buffer is two words wide even though only 17 bits are used
SAMPLE_EXPONENT_WORDLENGTH = 2


@dataclass
class SampleVectors:
    """Word arrays for one modular exponentiation."""
    modulus: List[int]
    exponent: List[int]
    plaintext: List[int]

    @property
    def modulus_length(self) -> int:
        return len(self.modulus)

    @property
    def exponent_length(self) -> int:
        return len(self.exponent)


def sample_vectors(radix: Radix = RADIX_16) -> SampleVectors:
    """Sample modulus, exponent and plaintext as word arrays for radix."""
    modulus = to_words(SAMPLE_MODULUS, radix=radix)
    e_len = max(1, (SAMPLE_EXPONENT_WORDLENGTH * 16) // radix.bits)
    return SampleVectors(
        modulus=modulus,
        exponent=to_words(SAMPLE_EXPONENT, e_len, radix),
        plaintext=to_words(SAMPLE_PLAINTEXT, len(modulus), radix),
    )
