"""
Protocol Run Configuration.

Collects the knobs of a SumCheck run in one validated object: how many
variables, where the challenges come from, and how chatty the run is.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from ..common.randomness import ChallengeSource, FixedChallenges, RandomBitSource


@dataclass
class ProtocolConfig:
    """
    Configuration for one SumCheck run.

    Attributes:
        name: Configuration name for identification
        num_vars: Number of boolean variables n
        seed: Seed for random challenges (None = OS entropy)
        challenges: Scripted challenges; overrides seed when given
        verbose: Print each round to the console

    Example:
        >>> config = ProtocolConfig(name="tiny", num_vars=2, challenges=[0, 1])
        >>> config.challenge_source()
        FixedChallenges([0, 1], position=0)
    """

    name: str = "default"
    num_vars: int = 5
    seed: Optional[int] = None
    challenges: Optional[List[int]] = None
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if self.num_vars < 1:
            raise ValueError("num_vars must be at least 1")
        if self.challenges is not None:
            if len(self.challenges) != self.num_vars:
                raise ValueError(
                    f"Expected {self.num_vars} challenges, got {len(self.challenges)}"
                )
            if any(c not in (0, 1) for c in self.challenges):
                raise ValueError("challenges must all be 0 or 1")

    @property
    def is_deterministic(self) -> bool:
        """True if the run's challenges are fully determined."""
        return self.challenges is not None or self.seed is not None

    def challenge_source(self) -> ChallengeSource:
        """Build a fresh challenge source for one run."""
        if self.challenges is not None:
            return FixedChallenges(self.challenges)
        return RandomBitSource(self.seed)

    def summary(self) -> str:
        if self.challenges is not None:
            source = f"fixed {self.challenges}"
        elif self.seed is not None:
            source = f"random (seed={self.seed})"
        else:
            source = "random (unseeded)"
        return (
            f"ProtocolConfig '{self.name}':\n"
            f"  Variables: {self.num_vars}\n"
            f"  Rounds: {self.num_vars}\n"
            f"  Challenges: {source}\n"
            f"  Verbose: {self.verbose}"
        )


def create_demo_config(verbose: bool = True) -> ProtocolConfig:
    """Seeded configuration for the 5-variable demo polynomial."""
    return ProtocolConfig(name="demo", num_vars=5, seed=42, verbose=verbose)


def create_deterministic_config(num_vars: int, challenges: List[int],
                                verbose: bool = False) -> ProtocolConfig:
    """Configuration with every challenge pinned in advance."""
    return ProtocolConfig(
        name=f"fixed-{''.join(str(c) for c in challenges)}",
        num_vars=num_vars,
        challenges=list(challenges),
        verbose=verbose,
    )
