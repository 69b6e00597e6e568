"""
file_loaders.py - Loading ranking sessions from disk

This module handles:
- Reading a session file (JSON or YAML) of items and decisions
- Accepting both camelCase and snake_case record keys
- Writing a computed ranking back out as JSON
"""

import json
import pathlib
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Sequence, Tuple

import yaml

from ranker.utils.io_helpers import read_utf8, write_json
from ranker.utils.logging_helper import get_logger
from .errors import InvalidDecisionError, SessionFormatError
from .models import Category, Decision, EffortLevel, Item, RankedItem, normalise_category

log = get_logger()


def _field(record: Mapping[str, Any], *names: str, default: Any = None) -> Any:
    for name in names:
        if name in record:
            return record[name]
    return default


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        stamp = value
    elif isinstance(value, (int, float)):
        stamp = datetime.fromtimestamp(value, tz=timezone.utc)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        stamp = datetime.fromisoformat(text)
    # naive and aware datetimes cannot be sorted together
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp


def parse_item(record: Mapping[str, Any]) -> Item:
    """Build an Item from one session record."""
    if not isinstance(record, Mapping) or "id" not in record:
        raise SessionFormatError(f"Item record without an id: {record!r}")
    try:
        effort = EffortLevel.parse(_field(record, "effortLevel", "effort_level"))
    except ValueError as e:
        raise SessionFormatError(f"Item {record['id']}: {e}") from e

    evidence = _field(record, "evidenceEntries", "evidence_entries", "evidence", default=()) or ()
    return Item(
        id=str(record["id"]),
        category=Category.parse(_field(record, "category", default=Category.OTHER.value)),
        effort_level=effort,
        evidence_entries=tuple(evidence),
        title=str(_field(record, "title", "name", default="")),
        category_name=normalise_category(_field(record, "category", default="")),
    )


def parse_decision(record: Mapping[str, Any]) -> Decision:
    """Build and validate a Decision from one session record."""
    ids = (_field(record, "itemAId", "item_a_id"),
           _field(record, "itemBId", "item_b_id"),
           _field(record, "winnerId", "winner_id"))
    if any(i is None for i in ids):
        raise SessionFormatError(f"Decision record missing an item or winner id: {record!r}")
    try:
        decision = Decision(
            item_a_id=str(ids[0]),
            item_b_id=str(ids[1]),
            winner_id=str(ids[2]),
            decided_at=_parse_timestamp(_field(record, "decidedAt", "decided_at")),
        )
        return decision.validate()
    except (TypeError, ValueError, InvalidDecisionError) as e:
        raise SessionFormatError(f"Bad decision record {record!r}: {e}") from e


def load_session(path: pathlib.Path) -> Tuple[List[Item], List[Decision]]:
    """
    Load items and decisions from a session file.

    Args:
        path: A .json, .yaml or .yml file holding ``items`` and ``decisions``

    Returns:
        (items, decisions) with items in file order
    """
    path = pathlib.Path(path)
    if not path.exists():
        raise SessionFormatError(f"Session file not found: {path}")

    text = read_utf8(path)
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SessionFormatError(f"Could not parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise SessionFormatError(f"{path} must contain a mapping with 'items' and 'decisions'")

    items = [parse_item(r) for r in data.get("items") or []]
    decisions = [parse_decision(r) for r in data.get("decisions") or []]

    known = {item.id for item in items}
    dangling = [d for d in decisions if d.item_a_id not in known or d.item_b_id not in known]
    if dangling:
        log.warning(f"{len(dangling)} decision(s) in {path} reference items not in the session")

    log.info(f"Loaded {len(items)} items and {len(decisions)} decisions from {path}")
    return items, decisions


def ranking_to_records(ranked: Sequence[RankedItem]) -> List[Dict[str, Any]]:
    return [entry.to_dict() for entry in ranked]


def save_ranking(path: pathlib.Path, ranked: Sequence[RankedItem]) -> None:
    """Write *ranked* as a JSON document ``{"ranking": [...]}``."""
    write_json(pathlib.Path(path), {"ranking": ranking_to_records(ranked)})
    log.info(f"Saved ranking → {path}")
