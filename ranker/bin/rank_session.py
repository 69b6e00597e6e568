#!/usr/bin/env python
"""
rank_session.py – Drive a pairwise ranking session from a session file

The session file holds the items and every decision recorded so far.

Usage:
    python -m ranker.bin.rank_session next data/sessions/q3.json
    python -m ranker.bin.rank_session rank q3 --output outputs/q3_ranking.json
    python -m ranker.bin.rank_session efforts q3
    python -m ranker.bin.rank_session rank q3 --config config/ranking.yaml
"""

import argparse
import os
import pathlib
import sys
from typing import List, Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ranker.core.errors import RankerError
from ranker.core.file_loaders import load_session, save_ranking
from ranker.core.models import EffortLevel, Item, RankedItem
from ranker.core.ranking import (
    RankingConfig,
    calculate_ranking,
    effort_distribution,
    load_ranking_config,
    next_comparison,
    ready_to_compare,
)
from ranker.utils.io_helpers import ensure_utf8_windows
from ranker.utils.logging_helper import get_logger
from ranker.utils.paths import DEFAULT_CONFIG_PATH, resolve_session_path

console = Console()
log = get_logger()


def _label(item: Item) -> str:
    return f"{item.title} [dim]({item.id})[/]" if item.title else item.id


def _resolve_config(arg: Optional[str]) -> RankingConfig:
    # --config beats $RANKER_CONFIG beats config/ranking.yaml (if present)
    if arg:
        return load_ranking_config(pathlib.Path(arg))
    env_path = os.getenv("RANKER_CONFIG")
    if env_path:
        return load_ranking_config(pathlib.Path(env_path))
    if DEFAULT_CONFIG_PATH.exists():
        return load_ranking_config(DEFAULT_CONFIG_PATH)
    return load_ranking_config(None)


def show_next(items: Sequence[Item], decisions, config: RankingConfig) -> None:
    if not ready_to_compare(items):
        console.print("[yellow]Estimate effort for at least 2 items before comparing.[/]")

    upcoming = next_comparison(items, decisions, config)
    if upcoming.complete:
        console.print(Panel(
            f"All comparisons complete ({upcoming.progress.completed} decisions).",
            title="Done", border_style="green",
        ))
        return

    progress = upcoming.progress
    body = (
        f"[bold]{upcoming.prompt}[/]\n\n"
        f"  A: {_label(upcoming.pair.item_a)}\n"
        f"  B: {_label(upcoming.pair.item_b)}\n\n"
        f"[dim]{progress.completed}/{progress.total} comparisons (~{progress.percentage}%)[/]"
    )
    console.print(Panel(body, title="Next comparison", border_style="blue"))


def ranking_table(items: Sequence[Item], ranked: Sequence[RankedItem]) -> Table:
    titles = {item.id: item.title for item in items}
    table = Table(title="Ranking")
    table.add_column("Rank", justify="right")
    table.add_column("Item")
    table.add_column("Impact", justify="right")
    table.add_column("Wins", justify="right")
    table.add_column("Comparisons", justify="right")
    table.add_column("Confidence", justify="right")
    for entry in ranked:
        name = titles.get(entry.id) or entry.id
        table.add_row(
            str(entry.rank_position),
            name,
            f"{entry.impact_score:.1f}",
            str(entry.wins),
            str(entry.comparisons),
            f"{entry.confidence:.0%}",
        )
    return table


def show_efforts(items: Sequence[Item]) -> None:
    dist = effort_distribution(items)
    table = Table(title="Effort distribution")
    table.add_column("Effort")
    table.add_column("Items", justify="right")
    table.add_column("Share", justify="right")
    for level in EffortLevel:
        table.add_row(level.value.title(), str(getattr(dist, level.value.lower())),
                      f"{dist.percent(level):.0f}%")
    table.add_row("Unestimated", str(dist.unestimated), "")
    console.print(table)

    if dist.mostly_large:
        console.print("[yellow]⚠️  Mostly large efforts - consider breaking some improvements into smaller chunks[/]")
    if dist.no_small:
        console.print("[cyan]💡 No small efforts found - look for quick wins to build momentum[/]")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Pairwise ranking of improvement items")
    ap.add_argument("--config", help="YAML file overriding ranking constants")
    sub = ap.add_subparsers(dest="command", required=True)

    p_next = sub.add_parser("next", help="Show the next pair to compare")
    p_next.add_argument("session", help="Session file or name under data/sessions")

    p_rank = sub.add_parser("rank", help="Recompute and show the ranking")
    p_rank.add_argument("session", help="Session file or name under data/sessions")
    p_rank.add_argument("--output", help="Write the ranking as JSON to this file")

    p_eff = sub.add_parser("efforts", help="Show how effort estimates are spread")
    p_eff.add_argument("session", help="Session file or name under data/sessions")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    ensure_utf8_windows()
    args = build_parser().parse_args(argv)

    try:
        config = _resolve_config(args.config)
        items, decisions = load_session(resolve_session_path(args.session))

        if args.command == "next":
            show_next(items, decisions, config)
        elif args.command == "rank":
            ranked = calculate_ranking(items, decisions, config)
            console.print(ranking_table(items, ranked))
            if args.output:
                save_ranking(pathlib.Path(args.output), ranked)
        elif args.command == "efforts":
            show_efforts(items)
    except RankerError as e:
        log.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
