from enum import IntEnum


class RelationCode(IntEnum):
    """
    How interval A relates to interval B.

    The integer values are fixed and deliberately non-contiguous so that
    negating a code gives the relation of B to A, and so that predicates can
    keep accepted codes as bits.
    """

    STRICTLY_LT = -4  # A ends at or before B starts
    OVERLAPS_LT = -2  # A starts first and ends inside B
    CONTAINED_BY = -1  # A lies inside B, not equal
    EQ = 0  # same start and stop
    CONTAINS = 1  # B lies inside A, not equal
    OVERLAPS_GT = 2  # B starts first and ends inside A
    STRICTLY_GT = 4  # A starts at or after B ends

    def inverse(self) -> "RelationCode":
        """The relation of B to A, given this relation of A to B"""
        return RelationCode(-int(self))

    def __neg__(self) -> "RelationCode":
        return self.inverse()
