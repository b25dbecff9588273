"""
Session engine for the Dragon Tiger predictor.

One ``PredictorEngine`` owns every piece of session state: the outcome
buffer, the selected mode, the last prediction, per-mode feedback counts and
the history log. Commands return ``True`` when applied and ``False`` when
they were a no-op (busy, full, empty, nothing pending). None of them raise
for bad timing; the invariants are kept here, not by callers.

A prediction cycle:

    submit_outcome() x5 or set_input_mode(automatic) on a full buffer,
    or request_prediction() (manual)
        -> busy, completion scheduled after ``processing_delay``
        -> analyze window, run the mode's strategy, append window[-1] to history
        -> not busy, prediction awaiting feedback
    submit_feedback(correct) -> per-mode stats updated once
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from dtpredict.analytics.patterns import PatternFeatures, analyze
from dtpredict.analytics.strategies import get_strategy, side_for_label
from dtpredict.config import settings
from dtpredict.core.buffer import WINDOW_SIZE, OutcomeBuffer
from dtpredict.core.history import HistoryLog
from dtpredict.core.outcomes import InputMode, Mode, Outcome
from dtpredict.core.scheduling import AsyncioScheduler, Scheduler
from dtpredict.core.tracker import FeedbackTracker, ModeStat, ToolPerformance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prediction:
    label: str
    mode: Mode
    window: tuple[Outcome, ...]
    features: PatternFeatures

    @property
    def side(self) -> Outcome | None:
        return side_for_label(self.label)


class PredictorEngine:
    def __init__(
        self,
        scheduler: Scheduler | None = None,
        *,
        processing_delay: float | None = None,
        auto_clear_buffer: bool | None = None,
        mode: Mode | str | None = None,
        input_mode: InputMode | str | None = None,
    ):
        self.scheduler = scheduler or AsyncioScheduler()
        self.processing_delay = settings.processing_delay if processing_delay is None else processing_delay
        self.auto_clear_buffer = settings.auto_clear_buffer if auto_clear_buffer is None else auto_clear_buffer
        self._buffer = OutcomeBuffer(WINDOW_SIZE)
        self._mode = Mode(mode or settings.default_mode)
        self._input_mode = InputMode(input_mode or settings.default_input_mode)
        self.tracker = FeedbackTracker()
        self._history = HistoryLog()
        self._prediction: Prediction | None = None
        self._awaiting_feedback = False
        self._busy = False
        self._inflight: Any = None
        self._listeners: list[Callable[[Prediction], None]] = []

    # ---------------- queries ----------------
    @property
    def buffer(self) -> tuple[Outcome, ...]:
        return self._buffer.snapshot()

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    @property
    def prediction(self) -> str | None:
        return self._prediction.label if self._prediction else None

    @property
    def last_prediction(self) -> Prediction | None:
        return self._prediction

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def inflight(self) -> Any:
        """Future of the running cycle, or None when idle."""
        return self._inflight

    @property
    def awaiting_feedback(self) -> bool:
        return self._awaiting_feedback

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def input_mode(self) -> InputMode:
        return self._input_mode

    @property
    def mode_stats(self) -> dict[Mode, ModeStat]:
        return {m: ModeStat(s.correct, s.total) for m, s in self.tracker.stats.items()}

    @property
    def tool_performance(self) -> ToolPerformance:
        return self.tracker.performance

    @property
    def history(self) -> HistoryLog:
        return self._history

    def accuracy(self, mode: Mode | None = None) -> int:
        return self.tracker.accuracy(mode)

    def can_predict(self) -> bool:
        return not self._busy and self._buffer.is_full()

    def add_listener(self, callback: Callable[[Prediction], None]):
        """Call ``callback(prediction)`` after every completed cycle."""
        self._listeners.append(callback)

    # ---------------- commands ----------------
    def submit_outcome(self, outcome: Outcome | str) -> bool:
        if self._reject_if_busy("submit_outcome"):
            return False
        outcome = Outcome(outcome)
        if not self._buffer.append(outcome):
            logger.debug("buffer full, dropped %s", outcome.value)
            return False
        if self._input_mode is InputMode.AUTOMATIC and self._buffer.is_full():
            self._start_cycle()
        return True

    def undo_last_outcome(self) -> bool:
        if self._reject_if_busy("undo_last_outcome"):
            return False
        if self._buffer.remove_last() is None:
            return False
        self._drop_prediction()
        return True

    def clear_buffer(self) -> bool:
        if self._reject_if_busy("clear_buffer"):
            return False
        self._buffer.clear()
        self._drop_prediction()
        return True

    def full_reset(self) -> bool:
        if self._reject_if_busy("full_reset"):
            return False
        self._buffer.clear()
        self._drop_prediction()
        self._history.reset()
        self.tracker.reset()
        logger.info("session reset")
        return True

    def set_mode(self, mode: Mode | str) -> bool:
        if self._reject_if_busy("set_mode"):
            return False
        self._mode = Mode(mode)
        return True

    def set_input_mode(self, input_mode: InputMode | str) -> bool:
        if self._reject_if_busy("set_input_mode"):
            return False
        self._input_mode = InputMode(input_mode)
        if self._input_mode is InputMode.AUTOMATIC and self._buffer.is_full():
            self._start_cycle()
        return True

    def request_prediction(self) -> Any:
        """Manual trigger; returns the cycle's future, or None if rejected."""
        if self._reject_if_busy("request_prediction"):
            return None
        if len(self._buffer) < self._buffer.capacity:
            logger.debug("prediction requested with %d/%d outcomes", len(self._buffer), self._buffer.capacity)
            return None
        return self._start_cycle()

    def submit_feedback(self, correct: bool) -> bool:
        if self._reject_if_busy("submit_feedback"):
            return False
        if not self._awaiting_feedback or self._prediction is None:
            logger.debug("feedback ignored, no pending prediction")
            return False
        # credited to the mode selected now, not the one that predicted
        self.tracker.record(self._mode, bool(correct))
        self._awaiting_feedback = False
        return True

    # ---------------- cycle ----------------
    def _start_cycle(self) -> Any:
        window = self._buffer.snapshot()
        mode = self._mode
        self._busy = True
        logger.info("cycle started mode=%s window=%s", mode.value, "".join(o.short for o in window))
        self._inflight = self.scheduler.schedule(self.processing_delay, lambda: self._complete(window, mode))
        return self._inflight

    def _complete(self, window: tuple[Outcome, ...], mode: Mode) -> Prediction:
        try:
            features = analyze(window)
            label = get_strategy(mode)(window, features)
            prediction = Prediction(label=label, mode=mode, window=window, features=features)
            self._prediction = prediction
            self._awaiting_feedback = True
            self._history.append(window[-1])
            if self.auto_clear_buffer:
                self._buffer.clear()
        finally:
            self._busy = False
            self._inflight = None
        logger.info("prediction %r mode=%s features=%s", label, mode.value, features.as_dict())
        for callback in list(self._listeners):
            callback(prediction)
        return prediction

    def _drop_prediction(self):
        self._prediction = None
        self._awaiting_feedback = False

    def _reject_if_busy(self, command: str) -> bool:
        if self._busy:
            logger.debug("%s rejected while processing", command)
        return self._busy
