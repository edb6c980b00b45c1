"""Mini README: Building level ranking shared by every object of a request.

Levels arrive as labels such as ``"Nivel 7"``. They are ordered by their
trailing number, highest first; labels without one rank as level 0.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .records import StatusRecord

_TRAILING_NUMBER = re.compile(r"(-?\d+(?:\.\d+)?)\s*$")


def level_number(level: Optional[str]) -> float:
    """Return the trailing number of a level label, or 0."""

    if not isinstance(level, str):
        return 0.0
    match = _TRAILING_NUMBER.search(level)
    return float(match.group(1)) if match else 0.0


@dataclass(frozen=True, slots=True)
class LevelRanking:
    """Distinct levels of a status dataset, highest first."""

    levels: Tuple[str, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[StatusRecord]) -> "LevelRanking":
        seen = dict.fromkeys(
            record.level for record in records if isinstance(record.level, str) and record.level
        )
        # sorted() is stable, so equal numbers keep first-seen order.
        ordered = sorted(seen, key=level_number, reverse=True)
        return cls(levels=tuple(ordered))

    @property
    def highest(self) -> Optional[str]:
        return self.levels[0] if self.levels else None

    def contains(self, level: Optional[str]) -> bool:
        return isinstance(level, str) and level in self.levels
