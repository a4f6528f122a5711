import random
from datetime import date

import pytest

from team_balancer import (
    Config,
    InvalidInput,
    Player,
    Team,
    WeekSnapshot,
    build_partition,
    evaluate_partition,
    generate_teams,
    generate_teams_with_history,
    imbalance,
    unassigned_players,
)


def _pool(size):
    return [Player(f"p{i}", float((i * 41) % 89)) for i in range(size)]


def test_generate_teams_improves_or_keeps_build():
    players = _pool(16)
    built = build_partition(players, 4)

    teams = generate_teams(players, 4, iterations=500, rng=random.Random(9))

    assert imbalance(teams) <= imbalance(built)
    assert unassigned_players(teams, players) == []


def test_generate_teams_uses_config_seed():
    players = _pool(12)
    cfg = Config(iterations=200, seed=123)

    assert generate_teams(players, 3, cfg=cfg) == generate_teams(players, 3, cfg=cfg)


def test_generate_teams_single_team_skips_refinement():
    players = _pool(5)

    teams = generate_teams(players, 1, iterations=100)

    assert len(teams) == 1
    assert len(teams[0].players) == 5


def test_generate_teams_zero_iterations_matches_build():
    players = _pool(10)

    assert generate_teams(players, 2, iterations=0) == build_partition(players, 2)


def test_generate_teams_with_history_keeps_everyone_when_possible():
    pool = _pool(8)
    weeks = [
        WeekSnapshot(date(2026, 10, 1), [Team(i, pool[2 * i : 2 * i + 2]) for i in range(4)]),
    ]

    teams = generate_teams_with_history(
        weeks, 2, iterations=100, rng=random.Random(2), current_month="2026-10"
    )

    assert unassigned_players(teams, pool) == []
    assert [len(t.players) for t in teams] == [4, 4]


def test_evaluate_partition_report():
    teams = [
        Team(0, [Player("a", 90), Player("d", 40)]),
        Team(1, [Player("b", 80), Player("c", 51)]),
    ]

    report = evaluate_partition(teams)

    assert report["teams"] == [["a", "d"], ["b", "c"]]
    assert report["totals"] == [130, 131]
    assert report["averages"] == [65.0, 65.5]
    assert report["sizes"] == [2, 2]
    assert report["imbalance"] == 1


def test_unassigned_players_in_pool_order():
    pool = [Player("a", 1), Player("b", 2), Player("c", 3)]
    teams = [Team(0, [Player("b", 2)])]

    assert unassigned_players(teams, pool) == [Player("a", 1), Player("c", 3)]


def test_negative_iterations_rejected_even_for_one_team():
    with pytest.raises(InvalidInput, match="invalid_iterations"):
        generate_teams(_pool(4), 1, iterations=-5)


def test_history_negative_iterations_rejected():
    weeks = [WeekSnapshot(date(2026, 10, 1), [Team(0, _pool(2))])]
    with pytest.raises(InvalidInput, match="invalid_iterations"):
        generate_teams_with_history(weeks, 1, iterations=-1, current_month="2026-10")
