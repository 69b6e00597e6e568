"""
scoring.py - Elo rating and ranking of compared items

This module handles:
- Elo rating calculations and updates
- Replaying the full decision history in chronological order
- Converting final ratings into ranked, confidence-scored records

Rankings are always rebuilt from the complete history; nothing is carried
between calls.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ranker.utils.logging_helper import get_logger
from ..models import Decision, Item, RankedItem
from .config import CONFIDENCE_STEPS, DEFAULT_CONFIG, MIN_CONFIDENCE, RankingConfig

log = get_logger()


class Elo:
    """Minimal Elo rating helper."""

    def __init__(self, k: float = 32.0, base: float = 1500.0) -> None:
        self.k = k
        self.base = base
        self._ratings: Dict[str, float] = {}

    def rating(self, name: str) -> float:
        return self._ratings.get(name, self.base)

    def _expect(self, ra: float, rb: float) -> float:
        return 1.0 / (1.0 + 10 ** ((rb - ra) / 400.0))

    def update(self, winner: str, loser: str) -> float:
        """Apply one result and return the points that moved to the winner."""
        ra, rb = self.rating(winner), self.rating(loser)
        delta = self.k * (1.0 - self._expect(ra, rb))
        self._ratings[winner] = ra + delta
        self._ratings[loser] = rb - delta
        return delta

    def forget(self, name: str) -> None:
        self._ratings.pop(name, None)

    def leaderboard(self) -> List[Tuple[str, float]]:
        return sorted(self._ratings.items(), key=lambda x: x[1], reverse=True)


def confidence_for(comparisons: int) -> float:
    """Step function: 0-1 -> 0.3, 2 -> 0.5, 3-4 -> 0.7, 5+ -> 0.9."""
    for minimum, confidence in CONFIDENCE_STEPS:
        if comparisons >= minimum:
            return confidence
    return MIN_CONFIDENCE


def chronological(decisions: Sequence[Decision]) -> List[Decision]:
    """Decisions ordered by decided_at; equal timestamps keep their given order."""
    return sorted(decisions, key=lambda d: d.decided_at)


def calculate_ranking(
    items: Sequence[Item],
    decisions: Sequence[Decision],
    config: Optional[RankingConfig] = None,
) -> List[RankedItem]:
    """
    Replay every decision through Elo and rank the items.

    Args:
        items: All items to rank; their order breaks score ties
        decisions: The complete decision history, in any order

    Returns:
        RankedItem list ordered by rank_position (1..n, no gaps)
    """
    config = config or DEFAULT_CONFIG
    elo = Elo(k=config.k_factor, base=config.initial_score)
    comparisons = {item.id: 0 for item in items}
    wins = {item.id: 0 for item in items}

    for decision in chronological(decisions):
        if not decision.is_valid():
            log.warning(
                "Skipping malformed decision %s vs %s (winner %s)",
                decision.item_a_id, decision.item_b_id, decision.winner_id,
            )
            continue
        winner_id, loser_id = decision.winner_id, decision.loser_id
        outsiders = [i for i in (winner_id, loser_id) if i not in comparisons]
        if len(outsiders) == 2:
            log.warning("Skipping decision %s vs %s: neither item is in this ranking",
                        decision.item_a_id, decision.item_b_id)
            continue
        if outsiders:
            log.warning("Decision %s vs %s: %s is not in this ranking, scored at %.0f",
                        decision.item_a_id, decision.item_b_id, outsiders[0], config.initial_score)

        elo.update(winner_id, loser_id)
        for outsider in outsiders:
            # unknown opponents never keep a rating of their own
            elo.forget(outsider)
        for item_id in (winner_id, loser_id):
            if item_id in comparisons:
                comparisons[item_id] += 1
        if winner_id in wins:
            wins[winner_id] += 1

    ranked = [
        RankedItem(
            id=item.id,
            rank_position=0,  # assigned after sorting
            confidence=confidence_for(comparisons[item.id]),
            impact_score=elo.rating(item.id),
            wins=wins[item.id],
            comparisons=comparisons[item.id],
        )
        for item in items
    ]

    # stable sort: equal scores keep input order
    ranked.sort(key=lambda r: r.impact_score, reverse=True)
    for position, entry in enumerate(ranked, 1):
        entry.rank_position = position
    return ranked
