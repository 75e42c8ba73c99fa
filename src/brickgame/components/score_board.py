from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class ScoreBoard:
    score: int = 0
    history: List[int] = field(default_factory=list)

    def add(self, delta: int) -> int:
        self.history.append(delta)
        self.score += delta
        return self.score
