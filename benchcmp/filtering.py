"""Selection of which comparisons make it into the table."""

import dataclasses
import enum
from typing import Optional

from .errors import ConfigError


class Verdict(enum.Enum):
    IMPROVEMENT = 'improvement'
    REGRESSION = 'regression'
    NEUTRAL = 'neutral'


@dataclasses.dataclass(frozen=True)
class FilterConfig:
    improvements_only: bool = False
    regressions_only: bool = False
    # Minimum absolute percent change; a row exactly at the threshold is kept.
    threshold_percent: Optional[float] = None

    def validate(self):
        if self.improvements_only and self.regressions_only:
            raise ConfigError('--improvements and --regressions are mutually exclusive')
        if self.threshold_percent is not None and self.threshold_percent < 0:
            raise ConfigError(f'threshold must be non-negative, got {self.threshold_percent}')


def classify(comparison):
    if comparison.diff_value < 0:
        return Verdict.IMPROVEMENT
    if comparison.diff_value > 0:
        return Verdict.REGRESSION
    return Verdict.NEUTRAL


def keep(comparison, config):
    verdict = classify(comparison)
    if config.improvements_only and verdict is not Verdict.IMPROVEMENT:
        return False
    if config.regressions_only and verdict is not Verdict.REGRESSION:
        return False
    if config.threshold_percent is not None and comparison.diff_percent is not None:
        return abs(comparison.diff_percent) >= config.threshold_percent
    return True


def apply_filters(comparisons, config):
    """Return the comparisons selected by config, in their original order."""
    return [c for c in comparisons if keep(c, config)]
