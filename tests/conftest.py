import pytest

from dtpredict.core.engine import PredictorEngine
from dtpredict.core.scheduling import ManualScheduler
from dtpredict.core.validation import parse_outcome
from dtpredict.log import setup_logging


def seq(s: str):
    """'DDTX' -> [dragon, dragon, tiger, tie]"""
    return [parse_outcome(c) for c in s]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def engine(scheduler):
    return PredictorEngine(scheduler, processing_delay=1.0, auto_clear_buffer=True,
                           mode="Normal", input_mode="manual")


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Setup logging for all tests"""
    setup_logging()
