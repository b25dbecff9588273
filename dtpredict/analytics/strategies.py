"""
Prediction strategies, one per Mode.

Each strategy is a plain decision rule over the window and its
PatternFeatures, returning the text shown to the player. Expert mode
returns advisory text instead of a side in most branches.
"""

from dataclasses import dataclass
from typing import Callable, Sequence

from dtpredict.analytics.patterns import PatternFeatures
from dtpredict.core.outcomes import Mode, Outcome

DRAGON = "Dragon"
TIGER = "Tiger"
HIGH_VARIANCE = "Dragon/Tiger (High variance detected)"
FOLLOW_TREND = "Follow trend"
BREAK_PATTERN = "Break pattern"

ADVANCED_STREAK_THRESHOLD = 2
EXPERT_TIE_THRESHOLD = 2

Window = Sequence[Outcome]
StrategyFn = Callable[[Window, PatternFeatures], str]


def predict_normal(window: Window, f: PatternFeatures) -> str:
    return TIGER if f.dragon_streak > f.tiger_streak else DRAGON


def predict_advanced(window: Window, f: PatternFeatures) -> str:
    if f.is_alternating:
        # a trailing Tie counts as "not Dragon"
        last = window[-1] if window else None
        return TIGER if last == Outcome.DRAGON else DRAGON
    return TIGER if f.dragon_streak > ADVANCED_STREAK_THRESHOLD else DRAGON


def predict_expert(window: Window, f: PatternFeatures) -> str:
    if f.tie_frequency >= EXPERT_TIE_THRESHOLD:
        return HIGH_VARIANCE
    return FOLLOW_TREND if f.is_alternating else BREAK_PATTERN


@dataclass(frozen=True)
class Strategy:
    mode: Mode
    description: str
    fn: StrategyFn

    def __call__(self, window: Window, features: PatternFeatures) -> str:
        return self.fn(window, features)


STRATEGIES: dict[Mode, Strategy] = {
    Mode.NORMAL: Strategy(Mode.NORMAL, "Basic prediction", predict_normal),
    Mode.ADVANCED: Strategy(Mode.ADVANCED, "Improved accuracy", predict_advanced),
    Mode.EXPERT: Strategy(Mode.EXPERT, "Highest accuracy", predict_expert),
}


def get_strategy(mode: Mode | str) -> Strategy:
    """Look up a strategy by Mode or mode name.

    Raises:
        ValueError: if the name is not a known mode
    """
    return STRATEGIES[Mode(mode)]


def side_for_label(label: str | None) -> Outcome | None:
    """The side a label names, or None for advisory labels."""
    if label == DRAGON:
        return Outcome.DRAGON
    if label == TIGER:
        return Outcome.TIGER
    return None
