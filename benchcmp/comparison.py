"""Differences between an old and a new measurement.

Differences are reported in terms of improvements (negative) and regressions
(positive): if the new run is faster, ``diff_value`` is negative.
"""

import dataclasses
from typing import Optional

from .measurement import Measurement


@dataclasses.dataclass(frozen=True)
class Comparison:
    name: str
    old: Measurement
    new: Measurement
    diff_value: int
    # None when the old value is zero.
    diff_percent: Optional[float]
    # old / new; None when either value is zero.
    speedup: Optional[float]


def compare(old, new):
    """Compare an old measurement with a new one of the same name."""
    diff_value = new.value - old.value
    diff_percent = None
    if old.value:
        diff_percent = 100.0 * diff_value / old.value
    speedup = None
    if old.value and new.value:
        speedup = old.value / new.value
    return Comparison(
        name=old.name,
        old=old,
        new=new,
        diff_value=diff_value,
        diff_percent=diff_percent,
        speedup=speedup,
    )


def compare_all(pairs):
    return [compare(old, new) for old, new in pairs]
