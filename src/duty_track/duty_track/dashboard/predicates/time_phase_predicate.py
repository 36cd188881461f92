from __future__ import annotations

from ...common.datetime_utils import hour_24, split_scanned_on
from ..model import TimePhase
from .base import ScanPredicate


def is_time_in_phase(time_str: str, phase: TimePhase) -> bool:
    hour = hour_24(time_str)
    if hour is None:
        return False

    if phase.wraps_midnight:
        return hour >= phase.start_hour or hour < phase.end_hour
    return phase.start_hour <= hour < phase.end_hour


class TimePhasePredicate(ScanPredicate):
    def __init__(self, phase: TimePhase):
        self._phase = phase

    def matches(self, item: dict) -> bool:
        _, time_str = split_scanned_on(item.get("scannedOn") or "")
        # A scan recorded without a time is not excluded by the phase filter.
        if not time_str:
            return True
        return is_time_in_phase(time_str, self._phase)
