"""Textbook RSA on top of the multiprecision engine."""
from typing import Optional, Tuple, Union

from Crypto.PublicKey import RSA
from cryptography.hazmat.primitives.asymmetric import rsa

from ..logging import get_logger

logger = get_logger('rsa')

KeyLike = Union[RSA.RsaKey, rsa.RSAPublicKey, rsa.RSAPrivateKey]


class RSAService:
    """Raw RSA encryption/decryption service (no padding).

    Keys may be pycryptodome RsaKey objects or cryptography RSA keys.
    """

    def __init__(self, engine=None):
        """Initializes RSA service."""
        if engine is None:
            from ...engine import ArithmeticEngine
            engine = ArithmeticEngine()
        self.engine = engine

    @staticmethod
    def key_numbers(key: KeyLike) -> Tuple[int, int, Optional[int]]:
        """Returns (n, e, d) of a key; d is None for a public key."""
        if isinstance(key, rsa.RSAPrivateKey):
            numbers = key.private_numbers()
            return numbers.public_numbers.n, numbers.public_numbers.e, numbers.d
        if isinstance(key, rsa.RSAPublicKey):
            numbers = key.public_numbers()
            return numbers.n, numbers.e, None
        d = int(key.d) if key.has_private() else None
        return int(key.n), int(key.e), d

    @staticmethod
    def _check_block(value: int, n: int) -> None:
        if not 0 <= value < n:
            raise ValueError("Block value is out of range for this key")

    def encrypt(self, message: int, key: KeyLike) -> int:
        """Computes message^e mod n."""
        n, e, _ = self.key_numbers(key)
        self._check_block(message, n)
        logger.debug(f"encrypt(): modulus bits={n.bit_length()}, e={e}")
        return self.engine.mod_exp(message, e, n)

    def decrypt(self, ciphertext: int, key: KeyLike) -> int:
        """Computes ciphertext^d mod n with a private key."""
        n, _, d = self.key_numbers(key)
        if d is None:
            raise TypeError("This is not a private key")
        self._check_block(ciphertext, n)
        logger.debug(f"decrypt(): modulus bits={n.bit_length()}")
        return self.engine.mod_exp(ciphertext, d, n)

    @staticmethod
    def public_key(modulus: int, exponent: int, check: bool = True) -> RSA.RsaKey:
        """Builds a public RsaKey from (n, e)."""
        return RSA.construct((modulus, exponent), consistency_check=check)
