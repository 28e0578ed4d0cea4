"""
Common module tests: hypercube.py, oracle.py, polynomial.py, randomness.py
"""
import numpy as np
import pytest

from sumcheck.common.errors import ChallengeError
from sumcheck.common.hypercube import (
    decode_index,
    iter_assignments,
    hypercube,
    write_suffix,
)
from sumcheck.common.oracle import CountingOracle, FunctionOracle, Oracle, as_oracle
from sumcheck.common.polynomial import (
    EXAMPLE_POLYNOMIAL,
    Polynomial,
    Term,
    create_linear_sum,
    create_product,
    example_function,
    parse_polynomial,
)
from sumcheck.common.randomness import FixedChallenges, RandomBitSource


# =====================================================================
# Hypercube decoding
# =====================================================================

class TestHypercube:
    def test_decode_lsb_first(self):
        assert decode_index(0, 3) == (0, 0, 0)
        assert decode_index(1, 3) == (1, 0, 0)
        assert decode_index(6, 3) == (0, 1, 1)
        assert decode_index(7, 3) == (1, 1, 1)

    def test_decode_zero_width(self):
        assert decode_index(0, 0) == ()

    def test_decode_out_of_range(self):
        with pytest.raises(ValueError):
            decode_index(8, 3)
        with pytest.raises(ValueError):
            decode_index(-1, 3)
        with pytest.raises(ValueError):
            decode_index(0, -1)

    def test_iter_assignments_order(self):
        assert list(iter_assignments(2)) == [(0, 0), (1, 0), (0, 1), (1, 1)]
        assert list(iter_assignments(0)) == [()]

    def test_hypercube_matches_decode(self):
        cube = hypercube(4)
        assert cube.shape == (16, 4)
        for i, row in enumerate(cube):
            assert tuple(int(b) for b in row) == decode_index(i, 4)

    def test_hypercube_columns_balanced(self):
        cube = hypercube(5)
        assert np.all(cube.sum(axis=0) == 16)

    def test_write_suffix(self):
        assignment = [1, 0, 0, 0, 0]
        write_suffix(assignment, 2, 5, 3)
        assert assignment == [1, 0, 1, 0, 1]

    def test_write_suffix_too_wide(self):
        with pytest.raises(ValueError):
            write_suffix([0, 0], 1, 0, 2)


# =====================================================================
# Oracles
# =====================================================================

class TestOracle:
    def test_function_oracle(self):
        oracle = FunctionOracle(lambda x: 10 * x[0] + x[1], name="g")
        assert oracle((1, 1)) == 11
        assert oracle.evaluate((0, 1)) == 1
        assert oracle.name == "g"

    def test_function_oracle_default_name(self):
        assert FunctionOracle(example_function).name == "example_function"

    def test_counting_oracle(self):
        counter = CountingOracle(lambda x: x[0])
        for assignment in iter_assignments(3):
            counter(assignment)
        assert counter.calls == 8
        counter.reset()
        assert counter.calls == 0

    def test_as_oracle(self):
        poly = create_linear_sum(2)
        assert as_oracle(poly) is poly
        assert isinstance(as_oracle(lambda x: 0), Oracle)
        with pytest.raises(TypeError):
            as_oracle(42)


# =====================================================================
# Polynomials
# =====================================================================

class TestTerm:
    def test_evaluate(self):
        term = Term({0: 2, 2: 1}, coefficient=3)
        assert term.evaluate((1, 0, 1)) == 3
        assert term.evaluate((1, 1, 0)) == 0
        assert term.degree == 3
        assert term.variables == {0, 2}

    def test_constant_term(self):
        assert Term({}, coefficient=5).evaluate((0, 0)) == 5

    def test_repr(self):
        assert repr(Term({0: 2}, coefficient=2)) == "2 * x0^2"
        assert repr(Term({3: 1}, coefficient=-1)) == "-x3"
        assert repr(Term({1: 1, 0: 1})) == "x0 * x1"

    def test_invalid(self):
        with pytest.raises(ValueError):
            Term({-1: 1})
        with pytest.raises(ValueError):
            Term({0: 0})


class TestPolynomial:
    def test_example_matches_function(self):
        for assignment in iter_assignments(5):
            assert EXAMPLE_POLYNOMIAL(assignment) == example_function(assignment)

    def test_example_sum(self):
        assert sum(EXAMPLE_POLYNOMIAL(a) for a in iter_assignments(5)) == 44

    def test_example_structure(self):
        assert EXAMPLE_POLYNOMIAL.num_terms == 5
        assert EXAMPLE_POLYNOMIAL.max_degree == 4
        assert EXAMPLE_POLYNOMIAL.degree_in(4) == 3
        assert EXAMPLE_POLYNOMIAL.degree_in(3) == 1
        assert not EXAMPLE_POLYNOMIAL.is_multilinear
        assert EXAMPLE_POLYNOMIAL.variables == {0, 1, 2, 3, 4}

    def test_example_repr(self):
        assert repr(EXAMPLE_POLYNOMIAL) == (
            "f = 2 * x0^2 + x1 + x0 * x1 * x2 - x3 + x1 * x4^3"
        )

    def test_linear_sum(self):
        poly = create_linear_sum(4)
        assert poly.is_multilinear
        assert sum(poly(a) for a in iter_assignments(4)) == 4 * 2 ** 3

    def test_product(self):
        poly = create_product(3)
        assert sum(poly(a) for a in iter_assignments(3)) == 1

    def test_wrong_arity(self):
        with pytest.raises(ValueError):
            EXAMPLE_POLYNOMIAL((0, 1))

    def test_variable_out_of_range(self):
        with pytest.raises(ValueError):
            Polynomial([Term({3: 1})], num_vars=2)

    def test_empty_polynomial(self):
        poly = Polynomial([], num_vars=2, name="z")
        assert poly((1, 1)) == 0
        assert poly.max_degree == 0
        assert repr(poly) == "z = 0"


class TestParsePolynomial:
    def test_parse(self):
        poly = parse_polynomial("2*x0^2 + x1 - x3", num_vars=4)
        assert repr(poly) == "f = 2 * x0^2 + x1 - x3"
        assert poly((1, 1, 0, 1)) == 2

    def test_parse_matches_example(self):
        poly = parse_polynomial("2*x0^2 + x1 + x0*x1*x2 - x3 + x1*x4^3", num_vars=5)
        for assignment in iter_assignments(5):
            assert poly(assignment) == EXAMPLE_POLYNOMIAL(assignment)

    def test_leading_minus_and_constant(self):
        poly = parse_polynomial("-x0 + 3", num_vars=1)
        assert poly((0,)) == 3
        assert poly((1,)) == 2

    def test_repeated_factor(self):
        poly = parse_polynomial("x0*x0", num_vars=1)
        assert poly.terms[0].powers == {0: 2}

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_polynomial("y1 + x0", num_vars=2)
        with pytest.raises(ValueError):
            parse_polynomial("   ", num_vars=2)


# =====================================================================
# Challenge sources
# =====================================================================

class TestChallengeSources:
    def test_random_bits_are_binary(self):
        source = RandomBitSource(seed=1)
        assert {source.sample_bit() for _ in range(200)} == {0, 1}

    def test_seeded_reproducible(self):
        a = RandomBitSource(seed=42)
        b = RandomBitSource(seed=42)
        assert [a() for _ in range(32)] == [b() for _ in range(32)]

    def test_fixed_replay(self):
        source = FixedChallenges([1, 0, 1])
        assert [source.sample_bit() for _ in range(3)] == [1, 0, 1]
        assert source.remaining == 0

    def test_fixed_exhausted(self):
        source = FixedChallenges([0])
        source.sample_bit()
        with pytest.raises(ChallengeError):
            source.sample_bit()

    def test_fixed_rejects_non_binary(self):
        with pytest.raises(ValueError):
            FixedChallenges([0, 2])
