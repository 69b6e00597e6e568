import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Ensure the project root is importable so the "ranker" package can be found
repo_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(repo_root))

from ranker.core.models import Category, Decision, EffortLevel, Item

START = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


def make_item(item_id, category=Category.FEATURE, effort=EffortLevel.MEDIUM, evidence=()):
    return Item(id=item_id, category=category, effort_level=effort, evidence_entries=tuple(evidence))


def decide(a, b, winner, minute=0):
    """Decision between ids *a* and *b*, recorded *minute* minutes after START."""
    return Decision(item_a_id=a, item_b_id=b, winner_id=winner,
                    decided_at=START + timedelta(minutes=minute))


@pytest.fixture()
def feature_items():
    return [make_item("A"), make_item("B"), make_item("C")]
