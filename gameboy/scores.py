"""Session score keeping and the shared ``scores.txt`` table."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import ClassVar, Iterator, Union

__all__ = [
    "MAX_PLAYERS",
    "ScoreEntry",
    "ScoreKeeper",
    "read_scores",
    "highest_score",
    "save_score",
    "leaderboard",
]

log = logging.getLogger(__name__)

MAX_PLAYERS = 100

PathLike = Union[str, Path]

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class ScoreEntry:
    """One ``name score`` line of the score table."""

    name: str
    score: int

    def to_line(self) -> str:
        return f"{self.name} {self.score}\n"


@dataclass
class ScoreKeeper:
    """The running score shared by the games of one session."""

    value: int = 0

    POINTS: ClassVar[int] = 10
    BONUS_POINTS: ClassVar[int] = 30

    def increase(self) -> None:
        """Award the regular points for a win or a meal."""
        self.value += self.POINTS

    def add_bonus(self) -> None:
        """Award the bonus points for an easter egg."""
        self.value += self.BONUS_POINTS

    def reset(self) -> None:
        self.value = 0


def _parse_line(line: str) -> ScoreEntry | None:
    tokens = line.split(maxsplit=2)
    if len(tokens) < 2:
        return None
    match = _LEADING_INT.match(tokens[1])
    if match is None:
        return None
    return ScoreEntry(tokens[0], int(match.group()))


def _iter_entries(path: PathLike) -> Iterator[ScoreEntry]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            entry = _parse_line(line)
            if entry is not None:
                yield entry


def read_scores(path: PathLike) -> list[ScoreEntry]:
    """Return the first ``MAX_PLAYERS`` well-formed entries of the table.

    Raises ``FileNotFoundError`` when the table does not exist.
    """
    return list(islice(_iter_entries(path), MAX_PLAYERS))


def highest_score(path: PathLike, player_name: str) -> int:
    """Return the best score recorded for ``player_name``, or 0."""
    try:
        scores = [e.score for e in _iter_entries(path) if e.name == player_name]
    except FileNotFoundError:
        log.error("Unable to open file for reading: %s", path)
        return 0
    return max([0, *scores])


def save_score(path: PathLike, player_name: str, score: int) -> None:
    """Record ``score`` for ``player_name``, keeping only a higher score."""
    try:
        entries = read_scores(path)
    except FileNotFoundError:
        entries = []

    for index, entry in enumerate(entries):
        if entry.name == player_name:
            if score > entry.score:
                entries[index] = ScoreEntry(player_name, score)
            break
    else:
        if len(entries) < MAX_PLAYERS:
            entries.append(ScoreEntry(player_name, score))

    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(entry.to_line() for entry in entries)


def leaderboard(path: PathLike) -> list[ScoreEntry]:
    """Return each player's best score, highest first.

    Players with equal scores keep the order of the table. At most
    ``MAX_PLAYERS`` distinct players are read. Raises ``FileNotFoundError``
    when the table does not exist.
    """
    best: dict[str, int] = {}
    for entry in _iter_entries(path):
        if entry.name in best:
            best[entry.name] = max(best[entry.name], entry.score)
        else:
            best[entry.name] = entry.score
            if len(best) >= MAX_PLAYERS:
                break
    ranked = [ScoreEntry(name, score) for name, score in best.items()]
    ranked.sort(key=lambda entry: entry.score, reverse=True)
    return ranked