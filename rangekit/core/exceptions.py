class RangeError(Exception):
    """Base exception for all interval-relation errors"""
    pass


class InvalidArgumentError(RangeError, ValueError):
    """Raised when a caller supplies an argument the engine cannot use"""
    pass


class InvalidIntervalError(InvalidArgumentError):
    """Raised when interval boundaries are malformed or reversed"""
    pass


class MissingComparatorError(InvalidArgumentError):
    """Raised when no comparator is given and the exemplar cannot classify itself"""
    pass


class InvalidLayoutError(InvalidArgumentError):
    """Raised when a time layout cannot be built from its inputs"""
    pass


class InvalidConfigError(InvalidArgumentError):
    """Raised when match configuration values are invalid"""
    pass


class NonNumericSeriesError(RangeError):
    """Raised when numeric access is attempted on a non-numeric series"""
    pass


class ClassifierLogicError(RangeError, AssertionError):
    """Raised when the relation classifier reaches a branch that cannot happen"""
    pass


class ErrorMessages:
    """Centralized error message definitions for consistent error handling"""
    REVERSED_INTERVAL = "Interval start must not be after stop, got start={} stop={}"
    UNSUPPORTED_BOUNDARY = "Unsupported boundary type: {}"
    UNPARSEABLE_BOUNDARY = "Cannot convert boundary value {!r} to a timestamp"
    MISSING_COMPARATOR = "A comparator must be provided when the exemplar ({}) cannot classify itself"
    UNREACHABLE_RELATION = "Unreachable relation branch for start_cmp={} stop_cmp={}"
    EMPTY_LAYOUT_KEY = "layout_key must be a non-empty string"
    SERIES_LENGTH = "Series {} has {} values but layout {} has {} intervals"
    LAYOUT_TIMES_LENGTH = "Layout {} has {} end times but only {} start times"
    NEGATIVE_TOLERANCE = "max_hours must be non-negative, got {}"
    UNKNOWN_PREDICATE = "Unknown predicate name: {}"
    INVALID_RELATION_CODE = "Not a relation code: {!r}"
    INVALID_PREDICATE = "default_predicate must be a RelationPredicate, got {}"
    NON_NUMERIC_SERIES = "Series {} is not numeric"
