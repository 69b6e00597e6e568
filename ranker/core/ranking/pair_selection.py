"""
pair_selection.py - Choose the next pair of items to compare

Least-compared items go first. Every unordered pair is shown once; after
that, larger sets get extra cross-effort comparisons for items that are
still thinly sampled. When nothing useful is left, None signals that the
comparison round is complete.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Set

from ..models import Decision, Item, Pair, pair_key
from .config import DEFAULT_CONFIG, UNKNOWN_EFFORT, RankingConfig


def comparison_counts(items: Iterable[Item], decisions: Sequence[Decision]) -> Dict[str, int]:
    """Number of decisions each item took part in, as A or as B."""
    return {item.id: sum(1 for d in decisions if d.involves(item.id)) for item in items}


def compared_pairs(decisions: Iterable[Decision]) -> Set[str]:
    return {pair_key(d.item_a_id, d.item_b_id) for d in decisions}


def _effort_group(item: Item) -> str:
    return item.effort_level.value if item.effort_level is not None else UNKNOWN_EFFORT


def select_next_pair(
    items: Sequence[Item],
    decisions: Sequence[Decision],
    config: Optional[RankingConfig] = None,
) -> Optional[Pair]:
    """
    Pick the next pair to present, or None when comparisons have converged.

    Args:
        items: All items in the ranking session, in display order
        decisions: Every decision recorded so far

    Returns:
        Pair(item_a, item_b), or None for fewer than two items or when
        neither strategy finds a useful pair
    """
    config = config or DEFAULT_CONFIG
    items = list(items)
    if len(items) < 2:
        return None

    counts = comparison_counts(items, decisions)
    compared = compared_pairs(decisions)
    # sorted() is stable: equal counts keep input order
    under_compared: List[Item] = sorted(items, key=lambda item: counts[item.id])

    # Strategy 1: cover every unordered pair, starting with the least-compared items
    for item_a in under_compared:
        for item_b in items:
            if item_a.id == item_b.id:
                continue
            if pair_key(item_a.id, item_b.id) not in compared:
                return Pair(item_a, item_b)

    # Strategy 2: full coverage reached; pit different effort levels against each other
    if len(items) >= config.cross_effort_min_items:
        limit = config.cross_effort_max_comparisons
        for item_a in under_compared:
            for item_b in items:
                if item_a.id == item_b.id:
                    continue
                if _effort_group(item_a) == _effort_group(item_b):
                    continue
                if counts[item_a.id] < limit or counts[item_b.id] < limit:
                    return Pair(item_a, item_b)

    return None
