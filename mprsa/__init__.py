"""
mprsa - Fixed-radix multiprecision arithmetic for RSA-style modular exponentiation.

Usage:
    >>> from mprsa import ArithmeticEngine
    >>>
    >>> engine = ArithmeticEngine()
    >>> hex(engine.multiply(0x10001, 0x10001))
    '0x100020001'
"""
import logging
from .engine import ArithmeticEngine

# Configuration
from .core.config import (
    EngineConfig,
    Radix,
    RADIX_16,
    RADIX_32,
    DEFAULT_RADIX
)

# Errors
from .core.exceptions import (
    MPException,
    PreconditionError,
    BufferSizeError,
    DivisionByZeroError,
    ConvergenceError,
    ConfigurationError
)

from .core.rsa import RSAService

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for mprsa modules.

    This ensures that all mprsa loggers are properly configured
    to show log messages at the specified level.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'mprsa',
        'mprsa.engine',
        'mprsa.rsa',
        'mprsa.arith.division',
        'mprsa.arith.exponent',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        # Ensure propagation is enabled
        logger.propagate = True


__all__ = [
    'ArithmeticEngine',
    'RSAService',
    'EngineConfig',
    'Radix',
    'RADIX_16',
    'RADIX_32',
    'DEFAULT_RADIX',
    'MPException',
    'PreconditionError',
    'BufferSizeError',
    'DivisionByZeroError',
    'ConvergenceError',
    'ConfigurationError',
    'setup_logging',
]
