from dataclasses import dataclass
from typing import Iterable

from dtpredict.core.outcomes import Outcome

ALTERNATION_MIN_CHANGES = 3


@dataclass(frozen=True)
class PatternFeatures:
    dragon_streak: int = 0
    tiger_streak: int = 0
    is_alternating: bool = False
    tie_frequency: int = 0

    def as_dict(self) -> dict:
        return {
            "dragon_streak": self.dragon_streak,
            "tiger_streak": self.tiger_streak,
            "is_alternating": self.is_alternating,
            "tie_frequency": self.tie_frequency,
        }


def analyze(window: Iterable[Outcome]) -> PatternFeatures:
    """Summary features of a window, recomputed from scratch.

    Streaks count adjacent pairs (i-1, i) that are both the same side, so
    D D D gives a Dragon streak of 2. The window is alternating when at least
    three adjacent pairs differ. Ties are counted over the whole window.
    """
    labels = list(window)
    dragon = tiger = changes = 0
    for i in range(1, len(labels)):
        prev, cur = labels[i - 1], labels[i]
        if cur != prev:
            changes += 1
        elif cur == Outcome.DRAGON:
            dragon += 1
        elif cur == Outcome.TIGER:
            tiger += 1
    return PatternFeatures(
        dragon_streak=dragon,
        tiger_streak=tiger,
        is_alternating=changes >= ALTERNATION_MIN_CHANGES,
        tie_frequency=sum(1 for o in labels if o == Outcome.TIE),
    )
