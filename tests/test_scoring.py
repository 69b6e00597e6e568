import random

import pytest

from ranker.core.models import Decision
from ranker.core.ranking import Elo, calculate_ranking, confidence_for

from conftest import START, decide, make_item


def by_id(ranked):
    return {entry.id: entry for entry in ranked}


def test_single_decision_moves_sixteen_points():
    items = [make_item("A"), make_item("B")]
    ranked = by_id(calculate_ranking(items, [decide("A", "B", "B")]))

    assert ranked["B"].impact_score == 1516.0
    assert ranked["A"].impact_score == 1484.0
    assert ranked["B"].rank_position == 1
    assert ranked["A"].rank_position == 2


def test_winner_sweeps_two_opponents(feature_items):
    decisions = [decide("A", "B", "A", 0), decide("A", "C", "A", 1)]
    ranked = calculate_ranking(feature_items, decisions)
    scores = by_id(ranked)

    assert ranked[0].id == "A"
    assert scores["A"].impact_score > 1500
    assert (scores["A"].comparisons, scores["A"].wins) == (2, 2)
    for loser in ("B", "C"):
        assert scores[loser].impact_score < 1500
        assert (scores[loser].comparisons, scores[loser].wins) == (1, 0)
    # C lost to an already-stronger A, so it gives up fewer points than B
    assert scores["C"].impact_score > scores["B"].impact_score
    assert [r.id for r in ranked] == ["A", "C", "B"]


def test_equal_scores_keep_input_order():
    items = [make_item(name) for name in "ABCD"]
    decisions = [decide("A", "B", "A", 0), decide("C", "D", "C", 1)]
    ranked = calculate_ranking(items, decisions)

    assert by_id(ranked)["A"].impact_score == by_id(ranked)["C"].impact_score
    assert [r.id for r in ranked] == ["A", "C", "B", "D"]


def test_no_decisions_ranks_by_input_order():
    items = [make_item(name) for name in "ZYX"]
    ranked = calculate_ranking(items, [])

    assert [r.id for r in ranked] == ["Z", "Y", "X"]
    for entry in ranked:
        assert entry.impact_score == 1500
        assert (entry.wins, entry.comparisons, entry.confidence) == (0, 0, 0.3)


def test_empty_item_set():
    assert calculate_ranking([], []) == []


@pytest.mark.parametrize("comparisons, expected", [
    (0, 0.3), (1, 0.3), (2, 0.5), (3, 0.7), (4, 0.7), (5, 0.9), (12, 0.9),
])
def test_confidence_steps(comparisons, expected):
    assert confidence_for(comparisons) == expected


def test_confidence_follows_comparison_count_only():
    items = [make_item(name) for name in "ABCDEF"]
    decisions = [decide("A", other, "A" if i % 2 else other, i)
                 for i, other in enumerate("BCDEF")]
    for entry in calculate_ranking(items, decisions):
        assert entry.confidence == confidence_for(entry.comparisons)
    assert by_id(calculate_ranking(items, decisions))["A"].confidence == 0.9


def test_rank_positions_are_dense():
    items = [make_item(f"item{i}") for i in range(7)]
    rng = random.Random(7)
    decisions = []
    for minute in range(20):
        a, b = rng.sample([i.id for i in items], 2)
        decisions.append(decide(a, b, rng.choice([a, b]), minute))

    ranked = calculate_ranking(items, decisions)
    assert sorted(r.rank_position for r in ranked) == list(range(1, 8))
    assert [r.rank_position for r in ranked] == list(range(1, 8))


def test_decisions_replay_in_time_order_not_list_order():
    items = [make_item("A"), make_item("B")]
    first, second = decide("A", "B", "A", 0), decide("A", "B", "B", 5)

    stored_out_of_order = calculate_ranking(items, [second, first])
    chronological = calculate_ranking(items, [first, second])
    assert [(r.id, r.impact_score) for r in stored_out_of_order] == \
           [(r.id, r.impact_score) for r in chronological]
    # the later win counts against a stronger opponent, so B finishes ahead
    assert chronological[0].id == "B"


def test_recomputation_is_deterministic():
    items = [make_item(name) for name in "ABCDE"]
    decisions = [decide("A", "B", "A", 0), decide("C", "D", "D", 1),
                 decide("E", "A", "E", 2), decide("B", "C", "B", 3)]
    shuffled = list(reversed(decisions))

    first = calculate_ranking(items, decisions)
    again = calculate_ranking(items, shuffled)
    assert [r.to_dict() for r in first] == [r.to_dict() for r in again]


def test_unknown_opponent_scores_at_initial_rating():
    items = [make_item("A"), make_item("B")]
    ranked = by_id(calculate_ranking(items, [decide("A", "ghost", "A")]))

    assert (ranked["A"].impact_score, ranked["A"].wins, ranked["A"].comparisons) == (1516.0, 1, 1)
    assert ranked["B"].impact_score == 1500.0
    assert "ghost" not in ranked


def test_unknown_opponent_does_not_carry_a_rating():
    items = [make_item("A"), make_item("B")]
    decisions = [decide("ghost", "B", "ghost", 0), decide("A", "ghost", "A", 1)]
    ranked = by_id(calculate_ranking(items, decisions))

    # each loss or win against the outsider is scored from 1500
    assert ranked["B"].impact_score == 1484.0
    assert ranked["A"].impact_score == 1516.0
    assert (ranked["B"].wins, ranked["B"].comparisons) == (0, 1)


def test_decisions_between_two_outsiders_are_skipped():
    items = [make_item("A")]
    ranked = calculate_ranking(items, [decide("x", "y", "x")])
    assert (ranked[0].impact_score, ranked[0].comparisons) == (1500, 0)


def test_malformed_decisions_are_skipped():
    # out-of-scope data corruption: must not crash or score anything
    items = [make_item("A"), make_item("B")]
    decisions = [
        Decision("A", "A", "A", START),
        Decision("A", "B", "C", START),
    ]
    for entry in calculate_ranking(items, decisions):
        assert (entry.impact_score, entry.comparisons, entry.wins) == (1500, 0, 0)


def test_elo_helper_conserves_points():
    elo = Elo()
    delta = elo.update("a", "b")
    assert delta == 16.0
    assert elo.rating("a") + elo.rating("b") == 3000.0
    assert elo.leaderboard()[0] == ("a", 1516.0)
    assert elo.rating("never-seen") == 1500.0
    elo.forget("a")
    assert elo.rating("a") == 1500.0
