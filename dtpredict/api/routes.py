from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from dtpredict.api.deps import get_engine, require_api_key
from dtpredict.api.schemas import (
    BulkIn, BulkOut, CommandOut, FeedbackIn, InputModeIn, ModeIn, ModeInfo,
    OutcomeIn, StateOut, StatsOut,
)
from dtpredict.config import settings
from dtpredict.core.engine import PredictorEngine
from dtpredict.core.validation import parse_bulk
from dtpredict.services import (
    export_json, get_modes, get_state, get_stats, submit_bulk,
)

router = APIRouter()


def _command(engine: PredictorEngine, accepted) -> dict:
    return {'accepted': bool(accepted), 'state': get_state(engine)}


@router.get('/state', response_model=StateOut)
async def state(engine: PredictorEngine = Depends(get_engine)):
    return get_state(engine)


@router.get('/stats', response_model=StatsOut)
async def stats(engine: PredictorEngine = Depends(get_engine)):
    return get_stats(engine)


@router.get('/modes', response_model=list[ModeInfo])
async def modes(engine: PredictorEngine = Depends(get_engine)):
    return get_modes(engine)


@router.post('/outcome', response_model=CommandOut)
async def outcome(data: OutcomeIn, engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    return _command(engine, engine.submit_outcome(data.outcome))


@router.post('/bulk', response_model=BulkOut)
async def bulk(data: BulkIn, engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    seq = parse_bulk(data.text)
    if not seq:
        raise HTTPException(400, detail="no outcomes recognised (use dragon/tiger/tie or d/t/x)")
    if data.mode == "replace" and not engine.clear_buffer():
        return {**_command(engine, False), 'parsed': len(seq), 'added': 0}
    added = submit_bulk(engine, seq)
    return {**_command(engine, added > 0), 'parsed': len(seq), 'added': added}


@router.post('/undo', response_model=CommandOut)
async def undo(engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    return _command(engine, engine.undo_last_outcome())


@router.post('/clear', response_model=CommandOut)
async def clear(engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    return _command(engine, engine.clear_buffer())


@router.post('/reset', response_model=CommandOut)
async def reset(engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    return _command(engine, engine.full_reset())


@router.post('/mode', response_model=CommandOut)
async def mode(data: ModeIn, engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    return _command(engine, engine.set_mode(data.mode))


@router.post('/input-mode', response_model=CommandOut)
async def input_mode(data: InputModeIn, engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    return _command(engine, engine.set_input_mode(data.input_mode))


@router.post('/predict', response_model=CommandOut)
async def predict(engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    return _command(engine, engine.request_prediction() is not None)


@router.post('/feedback', response_model=CommandOut)
async def feedback(data: FeedbackIn, engine: PredictorEngine = Depends(get_engine), ok=Depends(require_api_key)):
    return _command(engine, engine.submit_feedback(data.correct))


@router.get('/export')
async def export(engine: PredictorEngine = Depends(get_engine)):
    return Response(export_json(engine), media_type="application/json",
                    headers={"Content-Disposition": f"attachment; filename={settings.export_filename}"})
