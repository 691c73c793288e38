import logging
from typing import Iterable, List, Optional

from rangekit.config import MatchConfig
from rangekit.core.exceptions import ErrorMessages, MissingComparatorError
from rangekit.core.types import T
from rangekit.matching.protocols import Classifiable, Predicate, RangeComparator

logger = logging.getLogger(__name__)


def _natural_comparator(a: Classifiable, b: Classifiable):
    return a.compare_range(b)


def resolve_comparator(exemplar: T, comparator: Optional[RangeComparator] = None) -> RangeComparator:
    """
    Picks the comparator to use for a match.

    An explicit comparator always wins. Without one, the exemplar has to be able
    to classify itself, otherwise the call fails before any item is examined.
    """
    if comparator is not None:
        return comparator
    if isinstance(exemplar, Classifiable):
        return _natural_comparator
    raise MissingComparatorError(
        ErrorMessages.MISSING_COMPARATOR.format(type(exemplar).__name__)
    )


def resolve_predicate(predicate: Optional[Predicate] = None, config: Optional[MatchConfig] = None) -> Predicate:
    """An explicit predicate wins, otherwise the configured default is used"""
    if predicate is not None:
        return predicate
    return (config or MatchConfig()).default_predicate


def exemplar_accepts_list(
        exemplar: T,
        items: Iterable[T],
        predicate: Optional[Predicate] = None,
        comparator: Optional[RangeComparator] = None,
        config: Optional[MatchConfig] = None,
) -> List[T]:
    """
    Selects every item for which predicate accepts the relation of exemplar to item.

    Returns a new list in the input order; duplicates are kept. Without a
    predicate, the default predicate of config (or of MatchConfig()) is used.
    """
    compare = resolve_comparator(exemplar, comparator)
    predicate = resolve_predicate(predicate, config)
    matches = [item for item in items if predicate.accept(compare(exemplar, item))]
    logger.debug("exemplar %s accepted %d items", exemplar, len(matches))
    return matches


def list_accepts_exemplar(
        items: Iterable[T],
        exemplar: T,
        predicate: Optional[Predicate] = None,
        comparator: Optional[RangeComparator] = None,
        config: Optional[MatchConfig] = None,
) -> List[T]:
    """
    Selects every item for which predicate accepts the relation of item to exemplar.

    This is the reversed-role counterpart of exemplar_accepts_list; for a
    predicate p it returns the same items as
    ``exemplar_accepts_list(exemplar, items, p.inverse())``.
    """
    compare = resolve_comparator(exemplar, comparator)
    predicate = resolve_predicate(predicate, config)
    matches = [item for item in items if predicate.accept(compare(item, exemplar))]
    logger.debug("%d items accepted exemplar %s", len(matches), exemplar)
    return matches


def exemplar_accepts_indices(
        exemplar: T,
        items: Iterable[T],
        predicate: Optional[Predicate] = None,
        comparator: Optional[RangeComparator] = None,
        config: Optional[MatchConfig] = None,
) -> List[int]:
    """Returns the 0-based, strictly increasing positions of the items exemplar_accepts_list would select"""
    compare = resolve_comparator(exemplar, comparator)
    predicate = resolve_predicate(predicate, config)
    return [idx for idx, item in enumerate(items) if predicate.accept(compare(exemplar, item))]
