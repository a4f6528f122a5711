import logging
import random
from typing import List, Optional, Sequence

from .errors import InvalidInput
from .scoring import clone_partition, imbalance
from .types import Team

logger = logging.getLogger("team_balancer.search")


def check_iterations(iterations: int) -> None:
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 0:
        raise InvalidInput("invalid_iterations")


def _check_swappable(partition: Sequence[Team]) -> None:
    if len(partition) < 2:
        raise InvalidInput("not_enough_teams")
    if any(not team.players for team in partition):
        raise InvalidInput("empty_team")


def perturb(partition: Sequence[Team], rng: random.Random) -> List[Team]:
    """Return a copy of ``partition`` with one random cross-team swap applied."""
    candidate = clone_partition(partition)
    index_a, index_b = rng.sample(range(len(candidate)), 2)
    team_a = candidate[index_a]
    team_b = candidate[index_b]
    slot_a = rng.randrange(len(team_a.players))
    slot_b = rng.randrange(len(team_b.players))
    team_a.players[slot_a], team_b.players[slot_b] = team_b.players[slot_b], team_a.players[slot_a]
    return candidate


def refine_partition(
    initial: Sequence[Team],
    iterations: int,
    rng: Optional[random.Random] = None,
) -> List[Team]:
    """Hill-climb on random swaps, keeping only strict improvements.

    Runs exactly ``iterations`` trials. ``initial`` is left untouched.
    """
    check_iterations(iterations)
    _check_swappable(initial)
    rng = rng if rng is not None else random.Random()

    best = clone_partition(initial)
    best_score = imbalance(best)
    start_score = best_score
    accepted = 0
    for step in range(iterations):
        candidate = perturb(best, rng)
        score = imbalance(candidate)
        if score < best_score:
            logger.debug("step %d: imbalance %.2f -> %.2f", step, best_score, score)
            best = candidate
            best_score = score
            accepted += 1

    logger.info(
        "refined %d teams over %d iterations: imbalance %.2f -> %.2f (%d swaps kept)",
        len(best),
        iterations,
        start_score,
        best_score,
        accepted,
    )
    return best
