import logging
from datetime import date
from typing import Dict, List, Optional, Sequence, Set, Union

from .config import Config
from .distribute import sort_by_rating, validate_pool
from .types import PairingHistory, Player, Team, WeekSnapshot
from .utils import month_key, normalize_month, pair_key, pairs

logger = logging.getLogger("team_balancer.history")


def build_history(weeks: Sequence[WeekSnapshot], before: Optional[date] = None) -> PairingHistory:
    """Count teammate pairs per month and remember the most recent week's pairs.

    ``before`` limits which week counts as "last week" to those strictly
    earlier than it; every week still contributes to the monthly counts.
    """
    history = PairingHistory()
    for week in weeks:
        month = month_key(week.date)
        for team in week.teams:
            for a, b in pairs(team.player_ids):
                history.add(month, a, b)

    eligible = [w for w in weeks if before is None or w.date < before]
    if eligible:
        latest = max(eligible, key=lambda w: w.date)
        for team in latest.teams:
            history.last_week.update(pair_key(a, b) for a, b in pairs(team.player_ids))
    return history


def collect_pool(weeks: Sequence[WeekSnapshot]) -> List[Player]:
    """Every player seen across ``weeks`` once, in first-seen order.

    A player listed in several weeks keeps the rating from their last listing.
    """
    by_id: Dict[str, Player] = {}
    for week in weeks:
        for team in week.teams:
            for player in team.players:
                by_id[player.id] = player
    return list(by_id.values())


def allows(
    history: PairingHistory,
    candidate: Player,
    members: Sequence[Player],
    months: Sequence[str],
    cfg: Config,
) -> bool:
    for member in members:
        for month in months:
            if history.get(month, candidate.id, member.id) >= cfg.pair_month_cap:
                return False
        if cfg.avoid_last_week_pairs and history.played_last_week(candidate.id, member.id):
            return False
    return True


def _pick(
    team: Team,
    pool: Sequence[Player],
    history: PairingHistory,
    months: Sequence[str],
    cfg: Config,
) -> Optional[int]:
    eligible = [i for i, p in enumerate(pool) if allows(history, p, team.players, months, cfg)]
    if not eligible:
        return None
    if not team.players:
        return eligible[0]
    average = team.average_rating
    return min(eligible, key=lambda i: (abs(pool[i].rating - average), i))


def build_history_aware_partition(
    weeks: Sequence[WeekSnapshot],
    team_count: int,
    current_month: Optional[Union[str, date]] = None,
    target_date: Optional[date] = None,
    players: Optional[Sequence[Player]] = None,
    cfg: Optional[Config] = None,
) -> List[Team]:
    """Round-robin best-fit split that avoids over-repeated teammate pairs.

    A team that finds no acceptable candidate is closed for the rest of the
    run, so the result may leave players out. Callers that need every player
    placed should compare against :func:`team_balancer.teamgen.unassigned_players`.
    """
    cfg = cfg or Config()
    current_month = month_key(date.today()) if current_month is None else normalize_month(current_month)
    target_month = month_key(target_date) if target_date is not None else current_month
    # a set, so coinciding months are only counted once per new pair
    months = sorted({current_month, target_month})

    history = build_history(weeks, before=target_date)
    source = collect_pool(weeks) if players is None else list(players)
    validate_pool(source, team_count)
    pool = sort_by_rating(source)
    total = len(pool)

    teams = [Team(id=index) for index in range(team_count)]
    closed: Set[int] = set()
    while pool and len(closed) < team_count:
        for team in teams:
            if not pool:
                break
            if team.id in closed:
                continue
            index = _pick(team, pool, history, months, cfg)
            if index is None:
                logger.debug("team %d closed with %d players", team.id, len(team.players))
                closed.add(team.id)
                continue
            player = pool.pop(index)
            for member in team.players:
                for month in months:
                    history.add(month, player.id, member.id)
            team.players.append(player)

    if pool:
        logger.warning(
            "incomplete assignment: %d of %d players left unplaced (%s)",
            len(pool),
            total,
            ", ".join(p.id for p in pool),
        )
    return teams
