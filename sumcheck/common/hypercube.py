"""
Boolean Hypercube Enumeration.

Every SumCheck computation walks some slice of the boolean hypercube {0,1}^k.
This module owns the single index-to-assignment convention used everywhere
in the toolkit:

    bit j of the assignment = (index >> j) & 1

So index 0 is (0, 0, ..., 0), index 1 is (1, 0, ..., 0), index 2 is
(0, 1, 0, ..., 0), and so on (LSB = first variable).

Example:
    >>> decode_index(6, 3)
    (0, 1, 1)
    >>> list(iter_assignments(2))
    [(0, 0), (1, 0), (0, 1), (1, 1)]
"""

from __future__ import annotations
from typing import Iterator, List, Tuple

import numpy as np


def _check_width(width: int):
    if width < 0:
        raise ValueError(f"Width must be non-negative, got {width}")


def decode_index(index: int, width: int) -> Tuple[int, ...]:
    """
    Decode an integer into an ordered assignment of `width` bits.

    Args:
        index: Integer in [0, 2^width - 1]
        width: Number of variables in the assignment

    Returns:
        Tuple of 0/1 values, position j holding bit j of index
    """
    _check_width(width)
    if index < 0 or index >= (1 << width):
        raise ValueError(f"Index {index} out of range for width {width}")
    return tuple((index >> j) & 1 for j in range(width))


def iter_assignments(width: int) -> Iterator[Tuple[int, ...]]:
    """Yield all 2^width assignments in index order."""
    _check_width(width)
    for index in range(1 << width):
        yield decode_index(index, width)


def hypercube(width: int) -> np.ndarray:
    """
    Build the full hypercube as a (2^width, width) matrix of 0/1 entries.

    Row i equals decode_index(i, width). This is the vectorised form used
    by the analysis tools; the protocol itself decodes lazily.
    """
    _check_width(width)
    indices = np.arange(1 << width, dtype=np.int64)[:, None]
    shifts = np.arange(width, dtype=np.int64)[None, :]
    return (indices >> shifts) & 1


def write_suffix(assignment: List[int], offset: int, index: int, width: int):
    """
    Write decode_index(index, width) into assignment[offset:offset + width].

    The Prover uses this to sweep the still-free variables of a round while
    keeping the fixed prefix in place.
    """
    if offset + width > len(assignment):
        raise ValueError(
            f"Suffix of width {width} at offset {offset} does not fit "
            f"assignment of length {len(assignment)}"
        )
    assignment[offset:offset + width] = decode_index(index, width)
