from dtpredict.analytics.patterns import PatternFeatures, analyze
from conftest import seq

def test_streaks():
    f = analyze(seq("DDTDD"))
    assert f.dragon_streak == 2 and f.tiger_streak == 0
    assert analyze(seq("TTTDX")).tiger_streak == 2

def test_alt():
    assert analyze(seq("DTDTD")).is_alternating
    assert analyze(seq("DTDDD")).is_alternating is False  # 2 changes
    assert analyze(seq("DTXDD")).is_alternating  # ties count as a change

def test_ties_whole_window():
    assert analyze(seq("XDDXD")).tie_frequency == 2
    # tie pairs are not streaks
    f = analyze(seq("XXXXX"))
    assert f.tie_frequency == 5 and f.dragon_streak == 0 and f.tiger_streak == 0

def test_short_windows():
    assert analyze([]) == PatternFeatures()
    assert analyze(seq("D")) == PatternFeatures()
    assert analyze(seq("X")).tie_frequency == 1
