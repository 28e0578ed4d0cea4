"""
Polynomial Oracles over Boolean Variables.

This module represents the function being summed as data: a sum of terms,
each term a coefficient times a product of variables raised to powers.

Key Concepts:
    - On boolean inputs x^k = x for every k >= 1, so every polynomial agrees
      with a multilinear one on {0,1}^n. The protocol only ever evaluates
      boolean points, so exponents do not change any sum, but they are kept
      so the polynomial prints the way it was written.
    - A Polynomial is an Oracle: the Prover can own it directly.

Example:
    The demo polynomial 2*b1^2 + b2 + b1*b2*b3 - b4 + b2*b5^3 (variables
    numbered from 0 here):

        Polynomial([
            Term({0: 2}, coefficient=2),
            Term({1: 1}),
            Term({0: 1, 1: 1, 2: 1}),
            Term({3: 1}, coefficient=-1),
            Term({1: 1, 4: 3}),
        ], num_vars=5)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set
import re

from .oracle import Oracle


@dataclass
class Term:
    """
    A single term: coefficient * prod(x_v ^ e_v).

    Attributes:
        powers: Mapping of variable index to exponent (exponent >= 1)
        coefficient: Scalar multiplier (use -1 for subtraction)

    Example:
        >>> Term({0: 2}, coefficient=2)
        2 * x0^2
    """
    powers: Dict[int, int] = field(default_factory=dict)
    coefficient: int = 1

    def __post_init__(self):
        for var, exp in self.powers.items():
            if var < 0:
                raise ValueError(f"Variable index must be non-negative, got {var}")
            if exp < 1:
                raise ValueError(f"Exponent of x{var} must be at least 1, got {exp}")

    @property
    def degree(self) -> int:
        """Total degree of the term."""
        return sum(self.powers.values())

    @property
    def variables(self) -> Set[int]:
        return set(self.powers)

    def evaluate(self, assignment: Sequence[int]) -> int:
        value = self.coefficient
        for var, exp in self.powers.items():
            value *= assignment[var] ** exp
        return value

    def __repr__(self) -> str:
        factors = []
        for var in sorted(self.powers):
            exp = self.powers[var]
            factors.append(f"x{var}" if exp == 1 else f"x{var}^{exp}")
        if not factors:
            return str(self.coefficient)
        body = " * ".join(factors)
        if self.coefficient == 1:
            return body
        if self.coefficient == -1:
            return f"-{body}"
        return f"{self.coefficient} * {body}"


@dataclass
class Polynomial(Oracle):
    """
    A polynomial over `num_vars` variables, represented as a sum of terms.

    Attributes:
        terms: List of Term objects
        num_vars: Arity of the assignments this polynomial accepts
        name: Optional name for display
    """
    terms: List[Term]
    num_vars: int
    name: str = "f"

    def __post_init__(self):
        if self.num_vars < 0:
            raise ValueError(f"num_vars must be non-negative, got {self.num_vars}")
        for term in self.terms:
            out_of_range = [v for v in term.variables if v >= self.num_vars]
            if out_of_range:
                raise ValueError(
                    f"Term {term} uses x{max(out_of_range)} but polynomial "
                    f"has only {self.num_vars} variables"
                )

    def evaluate(self, assignment: Sequence[int]) -> int:
        if len(assignment) != self.num_vars:
            raise ValueError(
                f"Expected assignment of length {self.num_vars}, "
                f"got {len(assignment)}"
            )
        return sum(term.evaluate(assignment) for term in self.terms)

    @property
    def num_terms(self) -> int:
        return len(self.terms)

    @property
    def max_degree(self) -> int:
        """Largest total degree of any term."""
        if not self.terms:
            return 0
        return max(term.degree for term in self.terms)

    def degree_in(self, var: int) -> int:
        """Highest exponent of one variable across all terms."""
        return max((term.powers.get(var, 0) for term in self.terms), default=0)

    @property
    def is_multilinear(self) -> bool:
        """True if no variable appears with exponent above 1."""
        return all(self.degree_in(v) <= 1 for v in range(self.num_vars))

    @property
    def variables(self) -> Set[int]:
        """Variables that actually appear in some term."""
        used: Set[int] = set()
        for term in self.terms:
            used.update(term.variables)
        return used

    def summary(self) -> str:
        return (
            f"Polynomial '{self.name}':\n"
            f"  {self}\n"
            f"  Variables: {self.num_vars}\n"
            f"  Terms: {self.num_terms}\n"
            f"  Max degree: {self.max_degree}\n"
            f"  Multilinear: {self.is_multilinear}"
        )

    def __repr__(self) -> str:
        if not self.terms:
            return f"{self.name} = 0"
        parts = []
        for i, term in enumerate(self.terms):
            text = repr(term)
            if i > 0:
                text = f"- {text[1:]}" if text.startswith("-") else f"+ {text}"
            parts.append(text)
        return f"{self.name} = {' '.join(parts)}"


# =============================================================================
# PREDEFINED POLYNOMIALS
# =============================================================================

def example_function(assignment: Sequence[int]) -> int:
    """The demo function 2*b1^2 + b2 + b1*b2*b3 - b4 + b2*b5^3, as code."""
    b1, b2, b3, b4, b5 = assignment
    return 2 * b1 ** 2 + b2 + b1 * b2 * b3 - b4 + b2 * b5 ** 3


def create_example_polynomial() -> Polynomial:
    """
    The 5-variable demo polynomial, as data.

    f = 2*x0^2 + x1 + x0*x1*x2 - x3 + x1*x4^3

    Its sum over {0,1}^5 is 32 + 16 + 4 - 16 + 8 = 44.
    """
    return Polynomial(
        terms=[
            Term({0: 2}, coefficient=2),
            Term({1: 1}),
            Term({0: 1, 1: 1, 2: 1}),
            Term({3: 1}, coefficient=-1),
            Term({1: 1, 4: 3}),
        ],
        num_vars=5,
        name="f",
    )


def create_linear_sum(num_vars: int) -> Polynomial:
    """f = x0 + x1 + ... + x_{n-1}. Sums to n * 2^(n-1)."""
    return Polynomial(
        terms=[Term({v: 1}) for v in range(num_vars)],
        num_vars=num_vars,
        name=f"Sum{num_vars}",
    )


def create_product(num_vars: int) -> Polynomial:
    """f = x0 * x1 * ... * x_{n-1}. Sums to 1 (only the all-ones point)."""
    return Polynomial(
        terms=[Term({v: 1 for v in range(num_vars)})],
        num_vars=num_vars,
        name=f"Product{num_vars}",
    )


EXAMPLE_POLYNOMIAL = create_example_polynomial()


_TERM_SPLIT = re.compile(r"\s*([+-])\s*")
_FACTOR = re.compile(r"^x(\d+)(?:\^(\d+))?$")


def parse_polynomial(specification: str, num_vars: int,
                     name: str = "f") -> Polynomial:
    """
    Parse a polynomial written as text.

    Format: terms joined by + and -, each term a product of an optional
    integer coefficient and factors "x<i>" or "x<i>^<e>".

    Example:
        >>> parse_polynomial("2*x0^2 + x1 - x3", num_vars=4)
        f = 2 * x0^2 + x1 - x3

    Raises:
        ValueError: On any factor that is neither an integer nor x<i>[^e]
    """
    text = specification.strip()
    if not text:
        raise ValueError("Empty polynomial specification")
    parts = _TERM_SPLIT.split(text)
    if parts[0] == "":
        parts = parts[1:]
    else:
        parts = ["+"] + parts

    terms: List[Term] = []
    for sign, body in zip(parts[0::2], parts[1::2]):
        coefficient = -1 if sign == "-" else 1
        powers: Dict[int, int] = {}
        for factor in (f.strip() for f in body.split("*")):
            if factor.isdigit():
                coefficient *= int(factor)
                continue
            match = _FACTOR.match(factor)
            if match is None:
                raise ValueError(f"Cannot parse factor '{factor}' in '{body}'")
            var = int(match.group(1))
            exp = int(match.group(2) or 1)
            powers[var] = powers.get(var, 0) + exp
        terms.append(Term(powers, coefficient))
    return Polynomial(terms, num_vars=num_vars, name=name)
