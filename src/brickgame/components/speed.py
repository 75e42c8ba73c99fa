from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True, slots=True)
class SpeedLevel:
    """Maps an inclusive score range to a gravity delay and a level number."""

    level: int
    speed: int
    low: int
    high: Optional[int] = None

    def matches_score(self, score: int) -> bool:
        if score < self.low:
            return False
        return self.high is None or score <= self.high


def speed_table_from_rows(rows: Iterable[tuple[int, int, int, Optional[int]]]) -> Tuple[SpeedLevel, ...]:
    return tuple(SpeedLevel(level=level, speed=speed, low=low, high=high) for level, speed, low, high in rows)


@dataclass(slots=True)
class SpeedState:
    """Current gravity level and its delay in milliseconds."""

    level: int
    speed: int
