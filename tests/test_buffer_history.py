import pytest

from dtpredict.core.buffer import OutcomeBuffer
from dtpredict.core.history import HistoryLog
from dtpredict.core.outcomes import Outcome
from conftest import seq


def test_buffer_cap():
    b = OutcomeBuffer()
    added = [b.append(o) for o in seq("DTXDTDD")]
    assert added == [True] * 5 + [False, False]
    assert len(b) == 5 and b.is_full()
    assert b.snapshot() == tuple(seq("DTXDT"))


def test_buffer_remove_and_clear():
    b = OutcomeBuffer(3)
    assert b.remove_last() is None
    b.append(Outcome.TIE); b.append("dragon")
    assert b.last is Outcome.DRAGON
    assert b.remove_last() is Outcome.DRAGON and len(b) == 1
    b.clear(); b.clear()
    assert len(b) == 0 and not b.is_full()


def test_buffer_rejects_bad_capacity():
    with pytest.raises(ValueError):
        OutcomeBuffer(0)


def test_history_counts():
    h = HistoryLog()
    for o in seq("DDTX"):
        h.append(o)
    assert len(h) == 4
    assert h.count(Outcome.DRAGON) == 2
    assert h.summary() == {"total": 4, "dragon": 2, "tiger": 1, "tie": 1}
    h.reset()
    assert h.to_list() == [] and h.summary()["total"] == 0
