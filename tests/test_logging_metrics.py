# tests/test_logging_metrics.py
import pytest

from prefix_autocompleter.utils.logger_utils import Log
from prefix_autocompleter.utils.metrics_tracker import Metrics


def test_log_writes_levels_to_file(tmp_path):
    path = tmp_path / "nested" / "app.log"
    log = Log(path=str(path), echo=False, level="INFO")
    log.debug("hidden")
    log.info("booted")
    log.error("broke")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "INFO    | booted" in lines[0]
    assert "ERROR   | broke" in lines[1]


def test_log_echo_with_and_without_color(tmp_path, capsys):
    Log(path=str(tmp_path / "a.log"), use_color=True).warning("careful")
    Log(path=str(tmp_path / "b.log"), use_color=False).info("plain")
    out = capsys.readouterr().out
    assert "\033[93m" in out and "careful" in out
    assert "plain" in out


def test_time_block_records_metric(tmp_path):
    log = Log(path=str(tmp_path / "t.log"), echo=False)
    with log.time_block("load") as t:
        pass
    assert t.elapsed >= 0
    assert "load done:" in (tmp_path / "t.log").read_text(encoding="utf-8")


def test_bad_level():
    with pytest.raises(ValueError):
        Log(level="LOUD")


def test_metrics_average_and_persist(tmp_path):
    p = tmp_path / "metrics.json"
    m = Metrics(path=str(p))
    m.record("suggest_time", 1.0)
    m.record("suggest_time", 3.0)
    assert m.avg("suggest_time") == 2.0
    assert m.avg("unknown") == 0.0
    again = Metrics(path=str(p))
    assert again.summary()["suggest_time"] == {"avg": 2.0, "count": 2}

