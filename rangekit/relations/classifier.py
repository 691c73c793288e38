from typing import Any

from rangekit.core.exceptions import ClassifierLogicError, ErrorMessages
from rangekit.relations.codes import RelationCode


def compare_scalar(a: Any, b: Any) -> int:
    """Returns 0 if a == b, -1 if a < b, 1 if a > b"""
    return 0 if a == b else (-1 if a < b else 1)


def classify(interval: Any, other: Any) -> RelationCode:
    """
    Classifies how interval relates to other.

    Works on any pair of objects exposing mutually comparable ``start`` and
    ``stop`` attributes. The result is antisymmetric: classify(b, a) is always
    the negation of classify(a, b).
    """
    # equality first, so coinciding instants never fall into the strict branches
    if interval.start == other.start and interval.stop == other.stop:
        return RelationCode.EQ

    if interval.stop <= other.start:
        return RelationCode.STRICTLY_LT
    if interval.start >= other.stop:
        return RelationCode.STRICTLY_GT

    start_cmp = compare_scalar(interval.start, other.start)
    stop_cmp = compare_scalar(interval.stop, other.stop)

    if start_cmp < 0:
        return RelationCode.CONTAINS if stop_cmp >= 0 else RelationCode.OVERLAPS_LT
    if start_cmp > 0:
        return RelationCode.OVERLAPS_GT if stop_cmp > 0 else RelationCode.CONTAINED_BY
    if stop_cmp < 0:
        return RelationCode.CONTAINED_BY
    if stop_cmp > 0:
        return RelationCode.CONTAINS

    raise ClassifierLogicError(
        ErrorMessages.UNREACHABLE_RELATION.format(start_cmp, stop_cmp)
    )
