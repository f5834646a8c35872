"""
Engine configuration module.

Provides the word radix and the tunables of the arithmetic engine.
Nothing here is read from the environment; callers build configurations
explicitly and pass them in.
"""
from dataclasses import dataclass, field
from typing import Optional
import logging

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class Radix:
    """
    Word width of a BigNat.

    A word holds `bits` bits, so the numeric radix is 2**bits. The width
    must be even because the split word multiplier works on half words.
    """
    bits: int = 16

    def __post_init__(self):
        if not isinstance(self.bits, int) or self.bits < 4 or self.bits % 2:
            raise ConfigurationError(
                f"Word width must be an even number of bits >= 4, got {self.bits!r}"
            )

    @property
    def base(self) -> int:
        """Numeric radix, 2**bits."""
        return 1 << self.bits

    @property
    def mask(self) -> int:
        """Largest word value."""
        return (1 << self.bits) - 1

    @property
    def half_bits(self) -> int:
        return self.bits >> 1

    @property
    def half_mask(self) -> int:
        return (1 << (self.bits >> 1)) - 1


RADIX_16 = Radix(16)
RADIX_32 = Radix(32)
DEFAULT_RADIX = RADIX_16

# A normalized divisor needs at most two downward corrections per digit
DEFAULT_MAX_CORRECTIONS = 2


@dataclass
class EngineConfig:
    """
    Complete engine configuration.

    Attributes:
        word_bits: Width of a word in bits
        max_corrections: Bound on each division correction loop
        batch_workers: Worker processes for batched exponentiation
            (None lets the executor decide, 0 runs inline)
        log_level: Level applied to the package logger by the CLI
    """
    word_bits: int = 16
    max_corrections: int = DEFAULT_MAX_CORRECTIONS
    batch_workers: Optional[int] = None
    log_level: int = logging.WARNING
    _radix: Radix = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._radix = Radix(self.word_bits)
        if self.max_corrections < 1:
            raise ConfigurationError(
                f"max_corrections must be at least 1, got {self.max_corrections}"
            )
        if self.batch_workers is not None and self.batch_workers < 0:
            raise ConfigurationError(
                f"batch_workers cannot be negative, got {self.batch_workers}"
            )

    @property
    def radix(self) -> Radix:
        """Radix built from word_bits."""
        return self._radix

    @classmethod
    def default(cls) -> 'EngineConfig':
        """Create default configuration (16-bit words)."""
        return cls()

    @classmethod
    def with_word_bits(cls, bits: int, **kwargs) -> 'EngineConfig':
        """Create configuration with a different word width."""
        return cls(word_bits=bits, **kwargs)
