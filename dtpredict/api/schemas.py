from pydantic import BaseModel
from typing import Optional

from dtpredict.core.outcomes import InputMode, Mode, Outcome


class OutcomeIn(BaseModel):
    outcome: Outcome


class BulkIn(BaseModel):
    text: str
    mode: str = "append"  # 'append' | 'replace'


class ModeIn(BaseModel):
    mode: Mode


class InputModeIn(BaseModel):
    input_mode: InputMode


class FeedbackIn(BaseModel):
    correct: bool


class FeaturesOut(BaseModel):
    dragon_streak: int
    tiger_streak: int
    is_alternating: bool
    tie_frequency: int


class SummaryOut(BaseModel):
    total: int
    dragon: int
    tiger: int
    tie: int


class StateOut(BaseModel):
    buffer: list[Outcome]
    window: int
    prediction: Optional[str] = None
    features: Optional[FeaturesOut] = None
    busy: bool
    awaiting_feedback: bool
    can_predict: bool
    mode: Mode
    input_mode: InputMode
    history: list[Outcome]
    summary: SummaryOut


class CommandOut(BaseModel):
    accepted: bool
    state: StateOut


class BulkOut(CommandOut):
    parsed: int
    added: int


class ModeStatOut(BaseModel):
    correct: int
    total: int
    accuracy: int


class ToolPerformanceOut(BaseModel):
    total_predictions: int
    correct_predictions: int
    accuracy: int


class StatsOut(BaseModel):
    mode_stats: dict[Mode, ModeStatOut]
    tool_performance: ToolPerformanceOut
    summary: SummaryOut


class ModeInfo(BaseModel):
    mode: Mode
    description: str
    active: bool
