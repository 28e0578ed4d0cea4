"""
Function Oracles.

The oracle is the function being summed. The protocol never looks inside
it; the Prover only calls evaluate() on boolean assignments.

Key Components:
    - Oracle: The one-method capability ("evaluate at assignment")
    - FunctionOracle: Adapts any plain Python callable
    - CountingOracle: Counts evaluations, for complexity measurements

Example:
    >>> oracle = FunctionOracle(lambda x: x[0] + x[1], name="x0 + x1")
    >>> oracle((1, 1))
    2
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence


class Oracle(ABC):
    """
    An opaque function over {0,1}^n.

    Implementations must be total over all boolean inputs, deterministic
    and free of side effects for the duration of a protocol run.
    """

    name: str = "f"

    @abstractmethod
    def evaluate(self, assignment: Sequence[int]) -> int:
        """Evaluate the function at a boolean assignment."""

    def __call__(self, assignment: Sequence[int]) -> int:
        return self.evaluate(assignment)


class FunctionOracle(Oracle):
    """Wraps a plain callable taking an assignment and returning an int."""

    def __init__(self, func: Callable[[Sequence[int]], int],
                 name: Optional[str] = None):
        self.func = func
        self.name = name or getattr(func, "__name__", "f")

    def evaluate(self, assignment: Sequence[int]) -> int:
        return self.func(assignment)

    def __repr__(self) -> str:
        return f"FunctionOracle({self.name})"


class CountingOracle(Oracle):
    """
    Oracle wrapper that counts evaluations.

    Used to check the cost claims of the protocol: calculate_sum makes
    2^n calls and round i of evaluate_polynomial makes 2^(n-i).

    Attributes:
        inner: The wrapped oracle
        calls: Number of evaluate() calls since creation or last reset()
    """

    def __init__(self, inner: Oracle):
        self.inner = as_oracle(inner)
        self.name = self.inner.name
        self.calls = 0

    def evaluate(self, assignment: Sequence[int]) -> int:
        self.calls += 1
        return self.inner.evaluate(assignment)

    def reset(self):
        """Zero the call counter."""
        self.calls = 0

    def __repr__(self) -> str:
        return f"CountingOracle({self.name}, calls={self.calls})"


def as_oracle(obj) -> Oracle:
    """Return obj as an Oracle, wrapping plain callables."""
    if isinstance(obj, Oracle):
        return obj
    if callable(obj):
        return FunctionOracle(obj)
    raise TypeError(f"Expected an Oracle or callable, got {type(obj).__name__}")
