"""The profile of the player at the console."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

__all__ = ["Player"]

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass
class Player:
    """A named player with a score."""

    name: str
    score: int = 0

    def save(self, path: Union[str, Path]) -> None:
        """Write the name and the score on two lines."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{self.name}\n{self.score}\n")

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Player":
        """Read a profile written by :meth:`save`.

        A missing or unreadable score loads as 0.
        """
        with open(path, encoding="utf-8") as handle:
            name = handle.readline().rstrip("\n")
            rest = handle.read().split()
        score = 0
        if rest:
            match = _LEADING_INT.match(rest[0])
            if match is not None:
                score = int(match.group())
        return cls(name, score)