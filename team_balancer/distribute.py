import logging
from typing import List, Sequence

from .errors import InvalidInput
from .types import Player, Team, validate_player

logger = logging.getLogger("team_balancer.distribute")


def validate_pool(players: Sequence[Player], team_count: int) -> None:
    if isinstance(team_count, bool) or not isinstance(team_count, int) or team_count <= 0:
        raise InvalidInput("invalid_team_count")
    if len(players) < team_count:
        raise InvalidInput("not_enough_players")
    seen = set()
    for player in players:
        validate_player(player)
        if player.id in seen:
            raise InvalidInput("duplicate_player")
        seen.add(player.id)


def sort_by_rating(players: Sequence[Player]) -> List[Player]:
    # sorted() is stable, equal ratings keep their input order
    return sorted(players, key=lambda p: p.rating, reverse=True)


def _fill_round(open_teams: List[Team], pool: List[Player]) -> None:
    open_teams = list(open_teams)
    while open_teams and pool:
        player = pool.pop(0)
        team = min(open_teams, key=lambda t: (abs(player.rating - t.average_rating), t.id))
        team.players.append(player)
        open_teams.remove(team)


def build_partition(players: Sequence[Player], team_count: int) -> List[Team]:
    """Greedy seed-then-best-fit split of ``players`` into ``team_count`` teams.

    The strongest ``team_count`` players seed one team each. Every following
    round hands each team one more player: the next strongest player joins the
    open team whose current average is nearest to their rating. When the pool
    does not divide evenly the first teams take one extra player each.

    Players choose teams rather than teams choosing players, which differs
    from a team-by-team draft. For ratings 90, 80, 50, 40 over two teams this
    gives {90, 40} and {80, 50}, both totalling 130.
    """
    validate_pool(players, team_count)
    pool = sort_by_rating(players)
    teams = [Team(id=index) for index in range(team_count)]

    for team, player in zip(teams, pool[:team_count]):
        team.players.append(player)
    pool = pool[team_count:]

    per_team, remainder = divmod(len(players), team_count)
    for _ in range(per_team - 1):
        _fill_round(teams, pool)
    if remainder:
        _fill_round(teams[:remainder], pool)

    logger.debug(
        "built %d teams from %d players, sizes=%s",
        team_count,
        len(players),
        [len(team.players) for team in teams],
    )
    return teams
