import pytest

from spectrum_analyzer.run_log import RunLog


def test_levels_and_messages():
    log = RunLog()
    log.info("a")
    log.warning("b")
    log.error("c")
    assert len(log) == 3
    assert log.messages() == ("a", "b", "c")
    assert log.messages("warning") == ("b",)
    assert log.lines() == ["INFO: a", "WARNING: b", "ERROR: c"]


def test_consecutive_duplicates_coalesce():
    log = RunLog()
    log.info("same")
    log.info("same")
    log.info("same")
    log.warning("same")
    assert len(log) == 2
    assert log.lines() == ["INFO: same (x3)", "WARNING: same"]


def test_bounded_history():
    log = RunLog(max_entries=3)
    for i in range(5):
        log.info(str(i))
    assert log.messages() == ("2", "3", "4")


def test_rejects_non_positive_bound():
    with pytest.raises(ValueError):
        RunLog(max_entries=0)
