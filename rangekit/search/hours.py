from rangekit.core.types import Tick

HOUR_MS = 1000 * 60 * 60


def ms_to_hours(ms: Tick) -> float:
    """Converts milliseconds to hours"""
    return ms / HOUR_MS


def hour_diff(ms1: Tick, ms2: Tick) -> float:
    """Signed difference in hours from ms1 to ms2"""
    return (ms2 - ms1) / HOUR_MS
