from typing import Optional

from rangekit.core.exceptions import ErrorMessages, InvalidArgumentError, InvalidConfigError
from rangekit.relations.predicates import CONTAINS, RelationPredicate, get_predicate

DEFAULT_MAX_HOURS = 3.0


class MatchConfig:
    """Configuration for nearest-match and collection matching behavior"""

    def __init__(
        self,
        max_hours: float = DEFAULT_MAX_HOURS,
        default_predicate: Optional[RelationPredicate] = None,
    ):
        self.max_hours = max_hours
        self.default_predicate = default_predicate or CONTAINS
        self._validate()

    def _validate(self) -> None:
        """Validate the tolerance and predicate"""
        if self.max_hours is None or self.max_hours < 0:
            raise InvalidConfigError(ErrorMessages.NEGATIVE_TOLERANCE.format(self.max_hours))

        if not isinstance(self.default_predicate, RelationPredicate):
            raise InvalidConfigError(
                ErrorMessages.INVALID_PREDICATE.format(type(self.default_predicate).__name__)
            )

    @staticmethod
    def get_predicate(name: str) -> RelationPredicate:
        """Resolve a standard predicate by name"""
        try:
            return get_predicate(name)
        except InvalidArgumentError as e:
            raise InvalidConfigError(str(e)) from e

    def set_predicate(self, name: str) -> None:
        """Set the default predicate from a standard predicate name"""
        self.default_predicate = self.get_predicate(name)

    def __repr__(self) -> str:
        return f"MatchConfig(max_hours={self.max_hours}, default_predicate={self.default_predicate!r})"
