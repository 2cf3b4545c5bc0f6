import json

import pytest
from pydantic import ValidationError

from bcanalysis.config import Settings, load_settings
from bcanalysis.types import AnalysisMode


def test_defaults():
    s = Settings()
    assert s.analysis.mode is AnalysisMode.SQUARE_ROOT_TIME
    assert s.analysis.window == 15
    assert s.logging.level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("BCANALYSIS_ANALYSIS__WINDOW", "9")
    monkeypatch.setenv("BCANALYSIS_ANALYSIS__MODE", "g-function")
    s = Settings()
    assert s.analysis.window == 9
    assert s.analysis.mode is AnalysisMode.G_FUNCTION


def test_negative_window_rejected():
    with pytest.raises(ValidationError):
        Settings(analysis={"window": -1})


def test_unknown_mode_rejected():
    with pytest.raises(ValidationError):
        Settings(analysis={"mode": "bourdet"})


def test_load_settings_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"analysis": {"mode": "sqrt", "window": 7}, "logging": {"level": "debug"}}))
    s = load_settings(p)
    assert s.analysis.mode is AnalysisMode.SQUARE_ROOT_TIME
    assert s.analysis.window == 7
    assert s.logging.level == "DEBUG"


def test_load_settings_rejects_non_mapping(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("[1, 2]")
    with pytest.raises(TypeError):
        load_settings(p)


try:
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


@pytest.mark.skipif(yaml is None, reason="PyYAML not installed")
def test_load_settings_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("analysis:\n  mode: G\n  window: 11\n")
    s = load_settings(p)
    assert s.analysis.mode is AnalysisMode.G_FUNCTION
    assert s.analysis.window == 11


def test_logging_level_names():
    assert Settings(logging={"level": " warning "}).logging.level == "WARNING"
    assert Settings(logging={"level": 10}).logging.level == "DEBUG"


def test_unknown_logging_level_rejected():
    with pytest.raises(ValidationError):
        Settings(logging={"level": "verbose"})
