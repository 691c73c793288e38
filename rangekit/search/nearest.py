import logging
from typing import Optional, Sequence, Union

from rangekit.core.boundaries import to_tick
from rangekit.core.interval import Interval
from rangekit.core.types import IntervalBoundary, Tick
from rangekit.search.hours import hour_diff, ms_to_hours

logger = logging.getLogger(__name__)

# find_closest signals "no interval close enough" with None rather than raising
NOT_FOUND = None


def find_closest(
        intervals: Sequence[Interval],
        point: Union[Tick, IntervalBoundary],
        max_hours: float,
) -> Optional[int]:
    """
    Finds the index of the interval closest to point, within max_hours.

    The intervals must be sorted ascending by start and must not overlap
    (touching at endpoints is fine); this is not checked. An interval that
    contains the point is returned, except that the scan starts at index 1,
    so a point inside the first of several intervals resolves to index 1.
    Otherwise:

    - before the first interval, index 0 matches if the gap is strictly less
      than max_hours;
    - after the last interval, the last index matches under the same strict
      rule;
    - between two intervals, the gap is the smaller of the distances to the
      neighbours on either side, compared with ``<=``, and the *following*
      interval's index is returned even when the preceding one is nearer.

    Returns NOT_FOUND (None) when nothing qualifies.
    """
    last_idx = len(intervals) - 1
    if last_idx < 0:
        return NOT_FOUND

    point = to_tick(point)

    first = intervals[0]
    if first.after(point):
        hours = hour_diff(point, first.start)
        return _within(0, hours < max_hours, point, hours)

    last = intervals[last_idx]
    if last.before(point):
        hours = hour_diff(last.stop, point)
        return _within(last_idx, hours < max_hours, point, hours)

    # a lone interval that neither follows nor precedes the point contains it
    if last_idx == 0:
        return 0

    idx = 1
    while point > intervals[idx].stop:
        idx += 1

    candidate = intervals[idx]
    if candidate.contains(point):
        return idx

    # the point falls before the candidate
    forward_gap = candidate.start - point
    backward_gap = point - intervals[idx - 1].stop
    hours = ms_to_hours(min(forward_gap, backward_gap))
    # the forward index wins even when the backward gap is smaller; when the point
    # lies inside interval 0 the backward gap is negative, so idx 1 is returned
    return _within(idx, hours <= max_hours, point, hours)


def _within(idx: int, is_close: bool, point: Tick, hours: float) -> Optional[int]:
    if is_close:
        return idx
    logger.debug("no interval within tolerance of %s (nearest is %.3f hours away)", point, hours)
    return NOT_FOUND
