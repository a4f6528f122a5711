import logging
import random
from datetime import date
from typing import List, Optional, Sequence, Union

from .config import Config
from .distribute import build_partition
from .history import build_history_aware_partition
from .scoring import imbalance, team_totals
from .search import check_iterations, refine_partition
from .types import Player, Team, WeekSnapshot

logger = logging.getLogger("team_balancer.teamgen")


def _rng_for(rng: Optional[random.Random], cfg: Config) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(cfg.seed)


def generate_teams(
    players: Sequence[Player],
    team_count: int,
    iterations: Optional[int] = None,
    rng: Optional[random.Random] = None,
    cfg: Optional[Config] = None,
) -> List[Team]:
    cfg = cfg or Config()
    iterations = cfg.iterations if iterations is None else iterations
    check_iterations(iterations)
    teams = build_partition(players, team_count)
    logger.debug("initial imbalance %.2f for %d teams", imbalance(teams), team_count)
    if team_count < 2 or iterations == 0:
        return teams
    return refine_partition(teams, iterations, _rng_for(rng, cfg))


def generate_teams_with_history(
    weeks: Sequence[WeekSnapshot],
    team_count: int,
    iterations: Optional[int] = None,
    rng: Optional[random.Random] = None,
    cfg: Optional[Config] = None,
    current_month: Optional[Union[str, date]] = None,
    target_date: Optional[date] = None,
    players: Optional[Sequence[Player]] = None,
) -> List[Team]:
    """History-aware build followed by swap refinement.

    Swaps ignore pairing history, so refinement may re-form a pair the
    builder avoided.
    """
    cfg = cfg or Config()
    iterations = cfg.iterations if iterations is None else iterations
    check_iterations(iterations)
    teams = build_history_aware_partition(
        weeks,
        team_count,
        current_month=current_month,
        target_date=target_date,
        players=players,
        cfg=cfg,
    )
    logger.debug("history-aware build placed %d players", sum(len(t.players) for t in teams))
    if team_count < 2 or iterations == 0:
        return teams
    # every team gets a seed in the first round, so none is empty here
    return refine_partition(teams, iterations, _rng_for(rng, cfg))


def evaluate_partition(partition: Sequence[Team]) -> dict:
    return {
        "teams": [team.player_ids for team in partition],
        "totals": team_totals(partition),
        "averages": [team.average_rating for team in partition],
        "overalls": [team.overall for team in partition],
        "sizes": [len(team.players) for team in partition],
        "imbalance": imbalance(partition),
    }


def unassigned_players(partition: Sequence[Team], pool: Sequence[Player]) -> List[Player]:
    placed = {player.id for team in partition for player in team.players}
    return [player for player in pool if player.id not in placed]
