from typing import Any, Callable, Protocol, runtime_checkable

from rangekit.relations.codes import RelationCode


@runtime_checkable
class Classifiable(Protocol):
    """An item that can classify itself against another item of its kind"""

    def compare_range(self, other: Any) -> RelationCode: ...


class Predicate(Protocol):
    """Anything that can accept or reject a relation code"""

    def accept(self, code: RelationCode) -> bool: ...


# external comparator: comparator(a, b) is the relation of a to b
RangeComparator = Callable[[Any, Any], RelationCode]
