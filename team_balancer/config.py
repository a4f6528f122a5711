import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from .errors import InvalidInput

ENV_PREFIX = "TEAM_BALANCER_"


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    iterations: int = 10000

    pair_month_cap: int = 2
    avoid_last_week_pairs: bool = True

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int) or self.iterations < 0:
            raise InvalidInput("invalid_iterations")
        if isinstance(self.pair_month_cap, bool) or not isinstance(self.pair_month_cap, int) or self.pair_month_cap < 1:
            raise InvalidInput("invalid_pair_month_cap")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from ``TEAM_BALANCER_*`` variables.

        Unset variables keep the dataclass default, so
        ``TEAM_BALANCER_ITERATIONS=500`` alone only changes the iteration budget.
        """
        env = os.environ if environ is None else environ
        values = {}
        for item in fields(cls):
            raw = env.get(f"{ENV_PREFIX}{item.name.upper()}")
            if raw is None or raw.strip() == "":
                continue
            if item.name == "avoid_last_week_pairs":
                values[item.name] = _parse_bool(raw)
            else:
                values[item.name] = int(raw)
        return cls(**values)
