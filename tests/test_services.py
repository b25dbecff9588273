import json

from dtpredict.core.outcomes import Mode
from dtpredict.core.validation import parse_bulk, parse_mode, parse_outcome
from dtpredict.services import export_json, export_snapshot, get_modes, get_state, replay
from conftest import seq


def test_parse_labels():
    assert parse_outcome(" Dragon ") == parse_outcome("d")
    assert parse_outcome("HOA").value == "tie"
    assert parse_outcome("banker") is None
    assert parse_bulk("d,t x|dragon\nTIE  ??") == seq("DTXDX")
    # compact runs of d/t/x split per letter
    assert parse_bulk("DDDDT") == seq("DDDDT")
    assert parse_bulk("ddx, tiger") == seq("DDXT")
    assert parse_bulk("dxq") == []
    assert parse_mode("expert") is Mode.EXPERT
    assert parse_mode("ultra") is None


def test_export_shape(engine, scheduler):
    for o in seq("DDTDD"):
        engine.submit_outcome(o)
    engine.request_prediction()
    scheduler.advance()
    engine.submit_feedback(True)

    data = json.loads(export_json(engine))
    assert list(data) == ["history", "modeStats", "toolPerformance"]
    assert data["history"] == ["dragon"]
    assert data["modeStats"]["Normal"] == {"correct": 1, "total": 1}
    assert data["modeStats"]["Expert"] == {"correct": 0, "total": 0}
    assert data["toolPerformance"] == {"totalPredictions": 1, "correctPredictions": 1}
    assert export_snapshot(engine) == data


def test_state_and_modes(engine):
    engine.submit_outcome("tie")
    st = get_state(engine)
    assert st["buffer"] == ["tie"] and st["prediction"] is None
    assert st["can_predict"] is False and st["summary"]["total"] == 0
    active = [m["mode"] for m in get_modes(engine) if m["active"]]
    assert active == ["Normal"]


def test_replay_scores_side_predictions():
    # DDTDD -> Tiger, next T (hit); TDDDD -> Tiger, next D (miss); DTTDT -> Dragon, no next
    out = replay(seq("DDTDD" "TDDDD" "DTTDT"), mode=Mode.NORMAL)
    rows = out["rows"]
    assert [r["prediction"] for r in rows] == ["Tiger", "Tiger", "Dragon"]
    assert rows[0]["actual"] == "tiger" and rows[0]["correct"] is True
    assert rows[1]["actual"] == "dragon" and rows[1]["correct"] is False
    assert rows[2]["actual"] is None
    perf = out["stats"]["tool_performance"]
    assert perf["total_predictions"] == 2 and perf["correct_predictions"] == 1
    assert out["export"]["history"] == ["dragon", "dragon", "tiger"]


def test_replay_leaves_advisory_unscored():
    out = replay(seq("DDDDT" "D"), mode=Mode.EXPERT)
    assert out["rows"][0]["prediction"] == "Break pattern"
    assert out["rows"][0]["correct"] is None
    assert out["stats"]["tool_performance"]["total_predictions"] == 0
