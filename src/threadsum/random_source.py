import logging
import os
import random

from .utils import clock_ns

logger = logging.getLogger(__name__)

_WORD_MASK = 0xFFFFFFFF
_GOLDEN_GAMMA = 0x9E3779B9


class RandomSource:
    """
    Uniform integer generator owned by a single worker.

    Every instance carries its own Mersenne Twister state, seeded from OS
    entropy, the current clock and a caller hint, so generators built at the
    same moment on different threads do not correlate. Sequences are not
    reproducible across runs.
    """

    def __init__(self, seed_hint: int) -> None:
        self.seed_hint = seed_hint
        self._rng = random.Random(self._make_seed(seed_hint))

    @staticmethod
    def _entropy_word() -> int:
        return int.from_bytes(os.urandom(4), "little")

    @classmethod
    def _make_seed(cls, seed_hint: int) -> int:
        stamp = clock_ns() & _WORD_MASK
        words = [
            cls._entropy_word(),
            stamp,
            seed_hint & _WORD_MASK,
            cls._entropy_word(),
            stamp ^ _GOLDEN_GAMMA,
        ]
        seed = 0
        for i, word in enumerate(words):
            seed |= word << (32 * i)
        logger.debug(f"Seeded RandomSource(hint={seed_hint}) from {len(words)} words")
        return seed

    def next_int(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from the closed range [low, high]."""
        if low > high:
            raise ValueError(f"empty range: low={low} > high={high}")
        return self._rng.randint(low, high)
