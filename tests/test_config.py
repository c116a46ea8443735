import logging

from finz.core.config import load_settings
from finz.utils.logging import ContextFilter, SimpleStructuredFormatter, set_log_context


def _clear_env(monkeypatch):
    for key in ("FINZ_ENV", "LOG_LEVEL", "FINZ_CURRENCY_SYMBOL"):
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_config_file(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    s = load_settings(str(tmp_path / "missing.yaml"))
    assert s.env == "dev"
    assert s.log_level == "WARNING"
    assert s.currency_symbol == "€"


def test_yaml_values(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    cfg = tmp_path / "config.yaml"
    cfg.write_text("app:\n  env: prod\n  log_level: debug\ndisplay:\n  currency_symbol: '£'\n", encoding="utf-8")
    s = load_settings(str(cfg))
    assert s.env == "prod"
    assert s.log_level == "DEBUG"
    assert s.currency_symbol == "£"


def test_env_overrides_yaml_and_empty_env_is_ignored(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    cfg = tmp_path / "config.yaml"
    cfg.write_text("app:\n  log_level: info\ndisplay:\n  currency_symbol: '£'\n", encoding="utf-8")
    monkeypatch.setenv("FINZ_CURRENCY_SYMBOL", "$")
    monkeypatch.setenv("LOG_LEVEL", "  ")
    s = load_settings(str(cfg))
    assert s.currency_symbol == "$"
    assert s.log_level == "INFO"


def test_structured_log_line_carries_context():
    set_log_context(run_id="abc123", command="loan")
    record = logging.LogRecord("calc_tools", logging.INFO, __file__, 1, "dispatch %s", ("loan",), None)
    assert ContextFilter().filter(record)
    line = SimpleStructuredFormatter().format(record)
    assert "level=INFO" in line
    assert "run_id=abc123 command=loan" in line
    assert line.endswith("msg=dispatch loan")
