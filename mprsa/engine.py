"""
Int-level facade over the word-array engine.

Converts Python ints to word arrays sized for each operation, runs the
routines from mprsa.core.arith and converts the results back.
"""
import concurrent.futures
from functools import partial
from typing import Iterable, List, Optional, Sequence, Tuple

from .core.arith import divide, mod_exp, multiply_rect
from .core.codec import from_words, to_words, word_length
from .core.config import EngineConfig, Radix
from .core.logging import get_logger

logger = get_logger('engine')

ModExpJob = Tuple[int, int, int]


class ArithmeticEngine:
    """
    Multiprecision arithmetic on Python ints through fixed-radix word arrays.

    Example:
        >>> engine = ArithmeticEngine()
        >>> engine.mod_exp(4, 13, 497 << 16)
        1966080
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize engine.

        Args:
            config: Engine configuration (defaults to 16-bit words)
        """
        self.config = config or EngineConfig.default()

    @property
    def radix(self) -> Radix:
        return self.config.radix

    def to_words(self, value: int, length: Optional[int] = None) -> List[int]:
        """Split value into words of this engine's radix."""
        return to_words(value, length, self.radix)

    def from_words(self, words: Sequence[int], n: Optional[int] = None) -> int:
        """Join words of this engine's radix into an int."""
        return from_words(words, n, self.radix)

    def multiply(self, a: int, b: int) -> int:
        """Schoolbook product a * b."""
        a_words = self.to_words(a)
        b_words = self.to_words(b)
        c = [0] * (len(a_words) + len(b_words))
        multiply_rect(c, a_words, len(a_words), b_words, len(b_words), self.radix)
        return self.from_words(c)

    def divmod(self, x: int, y: int) -> Tuple[int, int]:
        """
        Long division of x by y.

        y must span at least two words, i.e. y >= base.

        Returns:
            Tuple (quotient, remainder)
        """
        t = word_length(y, self.radix)
        n = max(word_length(x, self.radix), t)
        x_words = self.to_words(x, n)
        y_words = self.to_words(y, t)
        q = [0] * (n - t + 1)
        r = [0] * t
        divide(q, r, x_words, n, y_words, t, self.radix, self.config.max_corrections)
        return self.from_words(q), self.from_words(r)

    def mod_exp(self, base: int, exponent: int, modulus: int) -> int:
        """
        base^exponent mod modulus.

        The modulus must span at least two words and base must be below it.
        """
        p_len = word_length(modulus, self.radix)
        p = self.to_words(modulus, p_len)
        g = self.to_words(base, p_len)
        e = self.to_words(exponent)
        result = [0] * p_len
        mod_exp(result, g, e, len(e), p, p_len, self.radix, self.config.max_corrections)
        return self.from_words(result)

    def mod_exp_many(
        self,
        jobs: Iterable[ModExpJob],
        max_workers: Optional[int] = None
    ) -> List[int]:
        """
        Run independent exponentiations, possibly in parallel.

        Args:
            jobs: (base, exponent, modulus) triples
            max_workers: Worker processes; 0 runs inline. Defaults to
                config.batch_workers.

        Returns:
            Results in job order
        """
        jobs = list(jobs)
        workers = self.config.batch_workers if max_workers is None else max_workers
        logger.info(f"Running {len(jobs)} modular exponentiations (workers={workers})")

        if workers == 0 or len(jobs) <= 1:
            return [self.mod_exp(*job) for job in jobs]

        run = partial(_run_mod_exp, self.config)
        with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(run, jobs))


def _run_mod_exp(config: EngineConfig, job: ModExpJob) -> int:
    return ArithmeticEngine(config).mod_exp(*job)
