import json
import logging
from typing import Iterable

from dtpredict.analytics.strategies import STRATEGIES
from dtpredict.core.engine import PredictorEngine
from dtpredict.core.outcomes import InputMode, Mode, Outcome
from dtpredict.core.scheduling import ManualScheduler

logger = logging.getLogger(__name__)


def get_state(engine: PredictorEngine) -> dict:
    last = engine.last_prediction
    return {
        'buffer': [o.value for o in engine.buffer],
        'window': engine.capacity,
        'prediction': engine.prediction,
        'features': last.features.as_dict() if last else None,
        'busy': engine.busy,
        'awaiting_feedback': engine.awaiting_feedback,
        'can_predict': engine.can_predict(),
        'mode': engine.mode.value,
        'input_mode': engine.input_mode.value,
        'history': [o.value for o in engine.history],
        'summary': engine.history.summary(),
    }


def get_stats(engine: PredictorEngine) -> dict:
    perf = engine.tool_performance
    return {
        'mode_stats': {
            m.value: {'correct': s.correct, 'total': s.total, 'accuracy': s.accuracy}
            for m, s in engine.mode_stats.items()
        },
        'tool_performance': {
            'total_predictions': perf.total_predictions,
            'correct_predictions': perf.correct_predictions,
            'accuracy': perf.accuracy,
        },
        'summary': engine.history.summary(),
    }


def get_modes(engine: PredictorEngine) -> list[dict]:
    return [
        {'mode': m.value, 'description': s.description, 'active': m is engine.mode}
        for m, s in STRATEGIES.items()
    ]


def export_snapshot(engine: PredictorEngine) -> dict:
    perf = engine.tool_performance
    return {
        'history': [o.value for o in engine.history],
        'modeStats': {
            m.value: {'correct': s.correct, 'total': s.total}
            for m, s in engine.mode_stats.items()
        },
        'toolPerformance': {
            'totalPredictions': perf.total_predictions,
            'correctPredictions': perf.correct_predictions,
        },
    }


def export_json(engine: PredictorEngine) -> str:
    return json.dumps(export_snapshot(engine), indent=2)


def submit_bulk(engine: PredictorEngine, outcomes: Iterable[Outcome]) -> int:
    accepted = 0
    for o in outcomes:
        if engine.submit_outcome(o):
            accepted += 1
    return accepted


def replay(outcomes: Iterable[Outcome], mode: Mode = Mode.NORMAL) -> dict:
    """Run a recorded sequence through a local engine in automatic mode.

    Every full window produces a prediction. When it names a side, it is
    scored against the next outcome in the sequence (ties count as misses);
    advisory labels are listed but not scored.
    """
    sched = ManualScheduler()
    engine = PredictorEngine(sched, mode=mode, input_mode=InputMode.AUTOMATIC,
                             auto_clear_buffer=True)
    rows = []
    for i, o in enumerate(outcomes):
        if engine.awaiting_feedback:
            side = engine.last_prediction.side
            if side is not None:
                engine.submit_feedback(side == o)
                rows[-1]['actual'] = o.value
                rows[-1]['correct'] = side == o
        engine.submit_outcome(o)
        if engine.busy:
            sched.advance()
            rows.append({'index': i, 'prediction': engine.prediction, 'actual': None, 'correct': None})
    logger.info("replayed %d predictions in %s mode", len(rows), Mode(mode).value)
    return {'rows': rows, 'stats': get_stats(engine), 'export': export_snapshot(engine)}
