from dtpredict.analytics.stats import accuracy_pct
from dtpredict.core.outcomes import Mode
from dtpredict.core.tracker import FeedbackTracker


def test_accuracy_pct():
    assert accuracy_pct(0, 0) == 0
    assert accuracy_pct(1, 3) == 33
    assert accuracy_pct(2, 3) == 67
    assert accuracy_pct(1, 8) == 13  # half rounds up
    assert accuracy_pct(5, 5) == 100
    for total in range(1, 30):
        for correct in range(total + 1):
            expect = int(100 * correct / total + 0.5)
            assert accuracy_pct(correct, total) == expect


def test_record_and_aggregate():
    t = FeedbackTracker()
    t.record(Mode.NORMAL, True)
    t.record(Mode.NORMAL, False)
    t.record(Mode.EXPERT, True)
    assert (t.stats[Mode.NORMAL].correct, t.stats[Mode.NORMAL].total) == (1, 2)
    perf = t.performance
    assert perf.total_predictions == 3 and perf.correct_predictions == 2
    assert perf.total_predictions == sum(s.total for s in t.stats.values())
    assert all(s.correct <= s.total for s in t.stats.values())
    assert t.accuracy(Mode.NORMAL) == 50
    assert t.accuracy(Mode.ADVANCED) == 0
    assert t.accuracy() == 67


def test_reset():
    t = FeedbackTracker()
    t.record("Advanced", True)
    t.reset()
    assert t.performance.total_predictions == 0
