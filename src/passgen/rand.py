import logging
import random
import threading
from collections.abc import MutableSequence
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ("RandomSource",)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RandomSource:
    """
    Pseudo-random source seeded once at construction.

    Every draw goes through a lock, so a single instance may be shared between
    threads. The generator is :class:`random.Random`; it is not suitable where
    cryptographic strength is required.

    Args:
        seed: Seed of the underlying generator. ``None`` seeds from the operating
            system once.
    """

    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False, compare=False)
    _lock: threading.Lock = field(
        init=False, repr=False, compare=False, default_factory=threading.Lock
    )

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        logger.debug("seeded random source with %r", self.seed)

    def random_index(self, low: int, high: int) -> int:
        """Returns a random integer in the half-open interval ``[low, high)``."""
        if high <= low:
            raise ValueError(
                f"empty range: high ({high}) must be greater than low ({low})"
            )
        with self._lock:
            return self._rng.randrange(high - low) + low

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Fisher-Yates shuffle of ``seq`` in place."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.random_index(0, i + 1)
            seq[i], seq[j] = seq[j], seq[i]

    def create_random(self, pool: str, length: int) -> list[str]:
        """
        Returns ``length`` characters, each drawn independently and uniformly from
        ``pool``.

        Raises:
            ValueError: If ``length`` is negative, or ``pool`` is empty while
                ``length`` is positive.
        """
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if length and not pool:
            raise ValueError("pool must contain at least one character")

        chars = list(pool)
        filled: list[str] = []
        for _ in range(length):
            self.shuffle(chars)
            filled.append(chars[self.random_index(0, len(chars))])
        return filled
