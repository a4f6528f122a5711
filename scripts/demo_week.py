import logging
import random
from datetime import date

from team_balancer import (
    Config,
    Player,
    Team,
    WeekSnapshot,
    evaluate_partition,
    generate_teams,
    generate_teams_with_history,
    unassigned_players,
)


def _print_teams(title: str, teams) -> None:
    report = evaluate_partition(teams)
    print(title)
    for team, total, avg in zip(teams, report["totals"], report["averages"]):
        names = ", ".join(p.name or p.id for p in team.players)
        print(f"  Team {team.id}: [{names}]  total={total:.0f}  avg={avg:.1f}")
    print(f"  imbalance={report['imbalance']:.0f}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    cfg = Config.from_env()

    players = [
        Player("1", 86, "Alex"),
        Player("2", 82, "Ben"),
        Player("3", 79, "Chen"),
        Player("4", 77, "Dana"),
        Player("5", 74, "Eli"),
        Player("6", 71, "Fran"),
        Player("7", 70, "Gus"),
        Player("8", 66, "Hana"),
        Player("9", 63, "Ivo"),
        Player("10", 58, "Jo"),
        Player("11", 55, "Kai"),
        Player("12", 51, "Lia"),
    ]
    by_name = {p.name: p for p in players}

    def roster(*names):
        return [by_name[n] for n in names]

    teams = generate_teams(players, 3, iterations=2000, rng=random.Random(cfg.seed))
    _print_teams("Balanced week:", teams)

    weeks = [
        WeekSnapshot(
            date(2026, 10, 7),
            [
                Team(0, roster("Alex", "Ben", "Ivo", "Jo")),
                Team(1, roster("Chen", "Dana", "Hana", "Kai")),
                Team(2, roster("Eli", "Fran", "Gus", "Lia")),
            ],
        ),
        WeekSnapshot(
            date(2026, 10, 14),
            [
                Team(0, roster("Alex", "Ben", "Gus", "Lia")),
                Team(1, roster("Chen", "Eli", "Ivo", "Kai")),
                Team(2, roster("Dana", "Fran", "Hana", "Jo")),
            ],
        ),
    ]
    teams = generate_teams_with_history(
        weeks,
        3,
        iterations=2000,
        rng=random.Random(cfg.seed),
        cfg=cfg,
        current_month="2026-10",
        target_date=date(2026, 10, 21),
    )
    _print_teams("\nWeek of 2026-10-21 (history-aware):", teams)
    missing = unassigned_players(teams, players)
    if missing:
        print("  unplaced: " + ", ".join(p.name or p.id for p in missing))


if __name__ == "__main__":
    main()
