"""
progress.py - Comparison progress and effort readiness

Helpers the comparison screen shows around each pair: how far along the
session is, the next pair together with its prompt, and how effort
estimates are spread across the items.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..models import Decision, EffortLevel, Item, Pair
from ..prompts import generate_decision_prompt
from .config import RankingConfig
from .pair_selection import select_next_pair


@dataclass(frozen=True)
class ComparisonProgress:
    completed: int
    total: int
    percentage: int

    @property
    def complete(self) -> bool:
        return self.percentage >= 100


@dataclass(frozen=True)
class NextComparison:
    pair: Optional[Pair]
    prompt: Optional[str]
    progress: ComparisonProgress

    @property
    def complete(self) -> bool:
        return self.pair is None


@dataclass(frozen=True)
class EffortDistribution:
    small: int = 0
    medium: int = 0
    large: int = 0
    unestimated: int = 0

    @property
    def estimated(self) -> int:
        return self.small + self.medium + self.large

    @property
    def mostly_large(self) -> bool:
        return self.large > self.small + self.medium

    @property
    def no_small(self) -> bool:
        return self.small == 0 and self.estimated > 0

    def percent(self, level: EffortLevel) -> float:
        if self.estimated == 0:
            return 0.0
        return 100.0 * getattr(self, level.value.lower()) / self.estimated


def estimated_comparisons(item_count: int) -> int:
    """Rough n*log2(n) budget for ranking *item_count* items."""
    if item_count < 2:
        return 0
    return math.ceil(item_count * math.log2(item_count))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def comparison_progress(items: Sequence[Item], decisions: Sequence[Decision]) -> ComparisonProgress:
    completed = len(decisions)
    total = estimated_comparisons(len(items))
    if total == 0:
        return ComparisonProgress(completed=completed, total=0, percentage=100)
    percentage = min(100, _round_half_up(100.0 * completed / total))
    return ComparisonProgress(completed=completed, total=total, percentage=percentage)


def next_comparison(
    items: Sequence[Item],
    decisions: Sequence[Decision],
    config: Optional[RankingConfig] = None,
) -> NextComparison:
    """Next pair with its prompt, or a completed marker when none remain."""
    pair = select_next_pair(items, decisions, config)
    if pair is None:
        done = len(decisions)
        return NextComparison(pair=None, prompt=None,
                              progress=ComparisonProgress(done, done, 100))
    return NextComparison(
        pair=pair,
        prompt=generate_decision_prompt(pair.item_a, pair.item_b),
        progress=comparison_progress(items, decisions),
    )


def effort_distribution(items: Sequence[Item]) -> EffortDistribution:
    counts = {level: 0 for level in EffortLevel}
    unestimated = 0
    for item in items:
        if item.effort_level is None:
            unestimated += 1
        else:
            counts[item.effort_level] += 1
    return EffortDistribution(
        small=counts[EffortLevel.SMALL],
        medium=counts[EffortLevel.MEDIUM],
        large=counts[EffortLevel.LARGE],
        unestimated=unestimated,
    )


def ready_to_compare(items: Sequence[Item]) -> bool:
    """At least two items need an effort estimate before comparing starts."""
    return sum(1 for item in items if item.effort_level is not None) >= 2
