from .config import Config
from .distribute import build_partition
from .errors import InvalidInput
from .history import build_history, build_history_aware_partition
from .scoring import imbalance
from .search import refine_partition
from .teamgen import evaluate_partition, generate_teams, generate_teams_with_history, unassigned_players
from .types import PairingHistory, Player, Team, WeekSnapshot

__all__ = [
    "Config",
    "InvalidInput",
    "PairingHistory",
    "Player",
    "Team",
    "WeekSnapshot",
    "build_history",
    "build_history_aware_partition",
    "build_partition",
    "evaluate_partition",
    "generate_teams",
    "generate_teams_with_history",
    "imbalance",
    "refine_partition",
    "unassigned_players",
]
