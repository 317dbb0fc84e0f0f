"""Dictionary exercises: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from collections.abc import MutableMapping
from dataclasses import dataclass

_DEFAULT_FRUIT_COUNT = 5


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and at least five fruits."""
    return {"banana": 2, "apple": 15, "sfd": 15, "afs": 15}


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> MutableMapping[Fruit, int]:
    """Add five of every fruit kind missing from the basket; leave present kinds alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _DEFAULT_FRUIT_COUNT)
    return basket


@dataclass
class Team:
    """A team's name and its goal totals."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 255:
        raise ValueError(f"goal count out of range: {text}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals from lines of 'team_1,team_2,goals_1,goals_2'."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        name_1, name_2 = fields[0], fields[1]
        goals_1, goals_2 = _goals(fields[2]), _goals(fields[3])
        for name, scored, conceded in ((name_1, goals_1, goals_2), (name_2, goals_2, goals_1)):
            team = scores.setdefault(name, Team(name))
            team.goals_scored += scored
            team.goals_conceded += conceded
    return scores