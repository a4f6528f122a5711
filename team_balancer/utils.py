import re
from datetime import date
from itertools import combinations
from typing import Iterable, Iterator, Sequence, TypeVar, Union

from .errors import InvalidInput

T = TypeVar("T")

PAIR_SEPARATOR = "|"
MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def mean(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def pairs(items: Sequence[T]) -> Iterator[tuple[T, T]]:
    return combinations(items, 2)


def pair_key(id_a: str, id_b: str) -> str:
    return PAIR_SEPARATOR.join(sorted((id_a, id_b)))


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def normalize_month(value: Union[str, date]) -> str:
    """Return ``value`` as a ``"YYYY-MM"`` key; a date is reduced to its month."""
    if isinstance(value, date):
        return month_key(value)
    match = MONTH_KEY_RE.match(value) if isinstance(value, str) else None
    if match is None or not 1 <= int(match.group(2)) <= 12:
        raise InvalidInput("invalid_month")
    return value
