"""
ranker - pairwise-comparison prioritisation engine

Users log improvement items and decide, one pair at a time, which matters
more. This package picks the next pair to show and turns the decision
history into a ranked list.
"""

from ranker.core.models import Category, Decision, EffortLevel, Item, Pair, RankedItem
from ranker.core.prompts import generate_decision_prompt
from ranker.core.ranking import calculate_ranking, select_next_pair

__all__ = [
    'Category',
    'Decision',
    'EffortLevel',
    'Item',
    'Pair',
    'RankedItem',
    'calculate_ranking',
    'generate_decision_prompt',
    'select_next_pair',
]
