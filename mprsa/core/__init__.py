"""Core engine: configuration, errors, logging and word-array arithmetic."""
from .config import Radix, EngineConfig, RADIX_16, RADIX_32, DEFAULT_RADIX
from .exceptions import (
    MPException,
    PreconditionError,
    BufferSizeError,
    DivisionByZeroError,
    ConvergenceError,
    ConfigurationError,
)

__all__ = [
    'Radix',
    'EngineConfig',
    'RADIX_16',
    'RADIX_32',
    'DEFAULT_RADIX',
    'MPException',
    'PreconditionError',
    'BufferSizeError',
    'DivisionByZeroError',
    'ConvergenceError',
    'ConfigurationError',
]
