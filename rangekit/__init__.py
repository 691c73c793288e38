from rangekit.config import MatchConfig
from rangekit.core.interval import Interval
from rangekit.layouts.layout import TimeLayout
from rangekit.layouts.series import AlignedSeries
from rangekit.matching.matcher import exemplar_accepts_indices, exemplar_accepts_list, list_accepts_exemplar
from rangekit.relations.classifier import classify
from rangekit.relations.codes import RelationCode
from rangekit.relations.predicates import (
    CONTAINED_BY,
    CONTAINS,
    EQUALS,
    NONE,
    OVERLAPS,
    STRICTLY_CONTAINED_BY,
    STRICTLY_CONTAINS,
    STRICTLY_GREATER,
    STRICTLY_LESS,
    STRICTLY_OVERLAPS,
    RelationPredicate,
)
from rangekit.search.nearest import NOT_FOUND, find_closest
