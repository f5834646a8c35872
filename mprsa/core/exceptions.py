"""
Custom exceptions for multiprecision arithmetic.

This module defines the exception classes raised by the word-level engine.
Every failure is reported synchronously to the caller; nothing is retried.
"""
from typing import Optional


class MPException(Exception):
    """Base exception for all multiprecision arithmetic errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class PreconditionError(MPException):
    """Exception raised when an operation is called with invalid operands."""
    pass


class BufferSizeError(PreconditionError):
    """Exception raised when a word buffer is shorter than an operation needs."""

    def __init__(
        self,
        buffer_name: str,
        required: int,
        actual: int,
        message: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            buffer_name: Parameter name of the offending buffer
            required: Number of words the operation reads or writes
            actual: Number of words the buffer holds
            message: Optional override for the error message
        """
        self.buffer_name = buffer_name
        self.required = required
        self.actual = actual
        super().__init__(
            message or f"Buffer '{buffer_name}' holds {actual} words, {required} required"
        )


class DivisionByZeroError(MPException, ZeroDivisionError):
    """Exception raised when a word is divided by zero."""
    pass


class ConvergenceError(MPException):
    """Exception raised when a division correction loop does not settle."""

    def __init__(self, stage: str, iterations: int) -> None:
        """
        Initialize the exception.

        Args:
            stage: Name of the correction step that failed
            iterations: Number of corrections applied before giving up
        """
        self.stage = stage
        self.iterations = iterations
        super().__init__(
            f"Division correction '{stage}' did not converge after {iterations} steps"
        )


class ConfigurationError(MPException, ValueError):
    """Exception raised for an invalid radix or engine configuration."""
    pass
