from typing import List, Sequence

from .errors import InvalidInput
from .types import Team


def team_totals(partition: Sequence[Team]) -> List[float]:
    return [team.total_rating for team in partition]


def imbalance(partition: Sequence[Team]) -> float:
    """Spread between the strongest and weakest team, measured on rating sums."""
    if not partition:
        raise InvalidInput("empty_partition")
    totals = team_totals(partition)
    return max(totals) - min(totals)


def clone_partition(partition: Sequence[Team]) -> List[Team]:
    return [team.clone() for team in partition]
