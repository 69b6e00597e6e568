"""
models.py - Records exchanged between the host and the ranking engine

This module defines:
- Category / EffortLevel enumerations
- Item and Decision input records
- RankedItem output record and the Pair returned by the selector
- pair_key for order-independent pair identity
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Tuple

from .errors import InvalidDecisionError


class Category(str, Enum):
    UI_UX = "UI_UX"
    DATA_QUALITY = "DATA_QUALITY"
    WORKFLOW = "WORKFLOW"
    BUG_FIX = "BUG_FIX"
    FEATURE = "FEATURE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: Any) -> "Category":
        """Map *value* onto the closed set; anything unlisted becomes OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.OTHER


class EffortLevel(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"

    @classmethod
    def parse(cls, value: Any) -> Optional["EffortLevel"]:
        """Return the effort level for *value*, or None when unestimated."""
        if value is None or isinstance(value, cls):
            return value
        text = str(value).strip().upper()
        if not text:
            return None
        return cls(text)


@dataclass(frozen=True)
class Item:
    """An improvement under comparison. The engine only ever reads these."""

    id: str
    category: Category = Category.OTHER
    effort_level: Optional[EffortLevel] = None
    evidence_entries: Tuple[Any, ...] = ()
    title: str = ""
    # label as recorded; unlisted categories all parse to OTHER
    category_name: str = ""

    @property
    def category_key(self) -> str:
        return normalise_category(self.category_name) or self.category.value

    @property
    def has_evidence(self) -> bool:
        return len(self.evidence_entries) > 0


@dataclass(frozen=True)
class Decision:
    """One completed comparison: *winner_id* beat the other item."""

    item_a_id: str
    item_b_id: str
    winner_id: str
    decided_at: datetime

    @property
    def loser_id(self) -> str:
        return self.item_b_id if self.winner_id == self.item_a_id else self.item_a_id

    def involves(self, item_id: str) -> bool:
        return item_id == self.item_a_id or item_id == self.item_b_id

    def is_valid(self) -> bool:
        return (self.item_a_id != self.item_b_id
                and self.winner_id in (self.item_a_id, self.item_b_id))

    def validate(self) -> "Decision":
        """Raise InvalidDecisionError unless the record is well-formed."""
        if self.item_a_id == self.item_b_id:
            raise InvalidDecisionError(f"Item {self.item_a_id} cannot be compared with itself")
        if self.winner_id not in (self.item_a_id, self.item_b_id):
            raise InvalidDecisionError(
                f"Winner {self.winner_id} must be either {self.item_a_id} or {self.item_b_id}"
            )
        return self


@dataclass
class RankedItem:
    id: str
    rank_position: int
    confidence: float
    impact_score: float
    wins: int
    comparisons: int

    def to_dict(self) -> Dict[str, Any]:
        """Host-facing record, keyed the way item stores persist it."""
        return {
            "id": self.id,
            "rankPosition": self.rank_position,
            "confidence": self.confidence,
            "impactScore": self.impact_score,
            "wins": self.wins,
            "comparisons": self.comparisons,
        }


class Pair(NamedTuple):
    item_a: Item
    item_b: Item


def pair_key(id_a: str, id_b: str) -> str:
    """Order-independent identity for the unordered pair {id_a, id_b}."""
    return f"{id_a}:{id_b}" if id_a < id_b else f"{id_b}:{id_a}"


def normalise_category(value: Any) -> str:
    """Case-folded category label used to decide whether two items share one."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().upper()
