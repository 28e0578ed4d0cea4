"""
Challenge Sources.

The Verifier never touches a global random generator. It asks an injected
ChallengeSource for one bit per round, which keeps runs reproducible
(seeded or fully scripted) and independent of each other.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
import random

from .errors import ChallengeError


class ChallengeSource(ABC):
    """Produces one challenge bit in {0, 1} per call."""

    @abstractmethod
    def sample_bit(self) -> int:
        """Sample one challenge."""

    def __call__(self) -> int:
        return self.sample_bit()


class RandomBitSource(ChallengeSource):
    """
    Uniform random bits from a private random.Random instance.

    Args:
        seed: Random seed for reproducible challenges (None = OS entropy)
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def sample_bit(self) -> int:
        return self._rng.randint(0, 1)

    def __repr__(self) -> str:
        return f"RandomBitSource(seed={self.seed})"


class FixedChallenges(ChallengeSource):
    """
    Replays a scripted sequence of challenge bits.

    Used by tests and by exhaustive sweeps over every challenge sequence.

    Example:
        >>> source = FixedChallenges([1, 0])
        >>> source.sample_bit(), source.sample_bit()
        (1, 0)
    """

    def __init__(self, bits: Iterable[int]):
        self.bits: List[int] = [int(b) for b in bits]
        for i, bit in enumerate(self.bits):
            if bit not in (0, 1):
                raise ValueError(f"Challenge {i} must be 0 or 1, got {bit}")
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self.bits) - self.position

    def sample_bit(self) -> int:
        if self.position >= len(self.bits):
            raise ChallengeError(
                f"Fixed challenge sequence exhausted after {len(self.bits)} bits"
            )
        bit = self.bits[self.position]
        self.position += 1
        return bit

    def __repr__(self) -> str:
        return f"FixedChallenges({self.bits}, position={self.position})"
