"""
Ranking module - Pairwise comparison ranking of improvement items

This module provides:
- Pair selection for the next comparison
- Elo-style scoring of the full decision history
- Comparison progress and effort readiness helpers
"""

from .config import DEFAULT_CONFIG, RankingConfig, load_ranking_config
from .pair_selection import select_next_pair
from .progress import comparison_progress, effort_distribution, next_comparison, ready_to_compare
from .scoring import Elo, calculate_ranking, confidence_for

__all__ = [
    'DEFAULT_CONFIG',
    'Elo',
    'RankingConfig',
    'calculate_ranking',
    'comparison_progress',
    'confidence_for',
    'effort_distribution',
    'load_ranking_config',
    'next_comparison',
    'ready_to_compare',
    'select_next_pair',
]
