import logging
from dataclasses import dataclass

from dtpredict.analytics.stats import accuracy_pct
from dtpredict.core.outcomes import Mode

logger = logging.getLogger(__name__)


@dataclass
class ModeStat:
    correct: int = 0
    total: int = 0

    @property
    def accuracy(self) -> int:
        return accuracy_pct(self.correct, self.total)


@dataclass(frozen=True)
class ToolPerformance:
    total_predictions: int = 0
    correct_predictions: int = 0

    @property
    def accuracy(self) -> int:
        return accuracy_pct(self.correct_predictions, self.total_predictions)


class FeedbackTracker:
    """Per-mode hit counts from user feedback.

    The aggregate ``performance`` is summed from the per-mode entries on every
    read, so it cannot drift from them.
    """

    def __init__(self):
        self.stats: dict[Mode, ModeStat] = {m: ModeStat() for m in Mode}

    def record(self, mode: Mode, was_correct: bool):
        stat = self.stats[Mode(mode)]
        stat.total += 1
        if was_correct:
            stat.correct += 1
        logger.debug("feedback %s correct=%s -> %d/%d", Mode(mode).value, was_correct, stat.correct, stat.total)

    @property
    def performance(self) -> ToolPerformance:
        return ToolPerformance(
            total_predictions=sum(s.total for s in self.stats.values()),
            correct_predictions=sum(s.correct for s in self.stats.values()),
        )

    def accuracy(self, mode: Mode | None = None) -> int:
        if mode is None:
            return self.performance.accuracy
        return self.stats[Mode(mode)].accuracy

    def reset(self):
        self.stats = {m: ModeStat() for m in Mode}
