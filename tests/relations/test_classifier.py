from collections import namedtuple

import pytest

from rangekit.core.interval import Interval
from rangekit.relations.classifier import classify, compare_scalar
from rangekit.relations.codes import RelationCode

Span = namedtuple("Span", ["start", "stop"])


class TestCompareScalar:
    @pytest.mark.parametrize("a, b, expected", [(1, 2, -1), (2, 2, 0), (3, 2, 1)])
    def test_compare_scalar(self, a, b, expected):
        assert compare_scalar(a, b) == expected


class TestClassify:
    @pytest.mark.parametrize("a, b, expected", [
        ((3, 7), (3, 7), RelationCode.EQ),
        ((3, 7), (6, 8), RelationCode.OVERLAPS_LT),
        ((6, 8), (3, 7), RelationCode.OVERLAPS_GT),
        ((3, 7), (4, 4), RelationCode.CONTAINS),
        ((4, 4), (3, 7), RelationCode.CONTAINED_BY),
        ((3, 7), (3, 5), RelationCode.CONTAINS),
        ((3, 5), (3, 7), RelationCode.CONTAINED_BY),
        ((3, 7), (5, 7), RelationCode.CONTAINS),
        ((5, 7), (3, 7), RelationCode.CONTAINED_BY),
        ((1, 2), (5, 6), RelationCode.STRICTLY_LT),
        ((5, 6), (1, 2), RelationCode.STRICTLY_GT),
    ])
    def test_classify(self, a, b, expected):
        assert classify(Interval(*a), Interval(*b)) is expected

    def test_touching_intervals_are_strict(self):
        assert classify(Interval(0, 5), Interval(5, 10)) is RelationCode.STRICTLY_LT
        assert classify(Interval(5, 10), Interval(0, 5)) is RelationCode.STRICTLY_GT

    def test_instant_on_shared_boundary(self):
        assert classify(Interval(2, 2), Interval(2, 6)) is RelationCode.STRICTLY_LT
        assert classify(Interval(2, 6), Interval(2, 2)) is RelationCode.STRICTLY_GT
        assert classify(Interval(6, 6), Interval(2, 6)) is RelationCode.STRICTLY_GT
        assert classify(Interval(2, 6), Interval(6, 6)) is RelationCode.STRICTLY_LT

    def test_coinciding_instants_are_equal(self):
        assert classify(Interval(4, 4), Interval(4, 4)) is RelationCode.EQ

    def test_classify_duck_typed_ranges(self):
        assert classify(Span(0.5, 2.5), Span(1.0, 2.0)) is RelationCode.CONTAINS
        assert classify(Span("a", "c"), Span("b", "d")) is RelationCode.OVERLAPS_LT


class TestClassifyGrid:
    """Exhaustive checks over every interval with endpoints in {2, 4, 6, 8, 10}"""

    @pytest.fixture
    def grid(self):
        points = range(2, 11, 2)
        return [Interval(start, stop) for start in points for stop in points if start <= stop]

    def test_antisymmetry(self, grid):
        for a in grid:
            for b in grid:
                assert classify(a, b) == -classify(b, a), f"{a} vs {b}"

    def test_self_equality(self, grid):
        for a in grid:
            assert classify(a, a) is RelationCode.EQ

    def test_eq_only_for_equal_intervals(self, grid):
        for a in grid:
            for b in grid:
                assert (classify(a, b) is RelationCode.EQ) == (a == b)
