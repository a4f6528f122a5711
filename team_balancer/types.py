import math
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Mapping, Optional, Set

from .errors import InvalidInput
from .utils import mean, pair_key


@dataclass(frozen=True)
class Player:
    id: str
    rating: float
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Player":
        if not isinstance(data, Mapping):
            raise InvalidInput("player_missing_id")
        player_id = data.get("id")
        if player_id is None or str(player_id) == "":
            raise InvalidInput("player_missing_id")
        if "rating" in data:
            rating = data["rating"]
        elif "overall" in data:
            # player documents keep the rating under "overall"
            rating = data["overall"]
        else:
            raise InvalidInput("player_missing_rating")
        player = cls(id=str(player_id), rating=rating, name=data.get("name"))
        validate_player(player)
        return player


def validate_player(player: Player) -> None:
    if not isinstance(player.id, str) or not player.id:
        raise InvalidInput("player_missing_id")
    rating = player.rating
    if rating is None:
        raise InvalidInput("player_missing_rating")
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        raise InvalidInput("invalid_rating")
    if math.isnan(rating) or math.isinf(rating) or rating < 0:
        raise InvalidInput("invalid_rating")


@dataclass
class Team:
    id: int
    players: List[Player] = field(default_factory=list)

    @property
    def total_rating(self) -> float:
        return sum(p.rating for p in self.players)

    @property
    def average_rating(self) -> float:
        return mean(p.rating for p in self.players)

    @property
    def overall(self) -> int:
        return round(self.average_rating)

    @property
    def player_ids(self) -> List[str]:
        return [p.id for p in self.players]

    def clone(self) -> "Team":
        return Team(id=self.id, players=list(self.players))


@dataclass(frozen=True)
class WeekSnapshot:
    date: date
    teams: List[Team]

    @classmethod
    def from_dict(cls, data: Mapping) -> "WeekSnapshot":
        if not isinstance(data, Mapping):
            raise InvalidInput("invalid_week")
        raw_date = data.get("date")
        if isinstance(raw_date, str):
            try:
                day = date.fromisoformat(raw_date[:10])
            except ValueError:
                raise InvalidInput("invalid_week") from None
        elif isinstance(raw_date, date):
            day = raw_date
        else:
            raise InvalidInput("invalid_week")
        teams = []
        for index, raw_team in enumerate(data.get("teams") or []):
            if not isinstance(raw_team, Mapping):
                raise InvalidInput("invalid_week")
            members = [p if isinstance(p, Player) else Player.from_dict(p) for p in raw_team.get("players") or []]
            teams.append(Team(id=index, players=members))
        return cls(date=day, teams=teams)


@dataclass
class PairingHistory:
    counts: Dict[str, Dict[str, int]] = field(default_factory=dict)
    last_week: Set[str] = field(default_factory=set)

    def get(self, month: str, id_a: str, id_b: str) -> int:
        return self.counts.get(month, {}).get(pair_key(id_a, id_b), 0)

    def add(self, month: str, id_a: str, id_b: str, value: int = 1) -> None:
        if id_a == id_b:
            return
        self.counts.setdefault(month, {})
        key = pair_key(id_a, id_b)
        self.counts[month][key] = self.counts[month].get(key, 0) + value

    def played_last_week(self, id_a: str, id_b: str) -> bool:
        return pair_key(id_a, id_b) in self.last_week
