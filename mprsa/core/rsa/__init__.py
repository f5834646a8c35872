"""Textbook RSA over the word-array engine."""
from .rsa_service import RSAService

__all__ = [
    'RSAService',
]
