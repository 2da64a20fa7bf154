#!filepath: tests/base_test/test_app_config.py
import pytest
import yaml
from pydantic import ValidationError

from threadsearch.config import AppConfig, LogConfig, OracleConfig, SearchConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "log": {
            "dir": None,
            "rotation": "1 day",
            "retention": "7 days",
            "level": "DEBUG",
        },
        "search": {
            "seek_multiplier": 4,
            "max_seek_steps": 16,
            "validate_monotonic": False,
        },
        "oracle": {
            "base_grow_rate": 1.002,
            "max_grow_percent": 10.0,
            "weaken_per_thread": 0.1,
            "hack_fraction": 0.01,
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.search, SearchConfig)
    assert isinstance(cfg.oracle, OracleConfig)


def test_search_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.search.seek_multiplier == 4
    assert cfg.search.max_seek_steps == 16
    assert cfg.search.validate_monotonic is False


def test_oracle_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.oracle.weaken_per_thread == 0.1
    assert cfg.oracle.hack_fraction == 0.01


def test_default_config_file_loads(monkeypatch):
    monkeypatch.delenv("THREADSEARCH_LOG_LEVEL", raising=False)
    cfg = AppConfig.load()

    assert cfg.search.seek_multiplier == 2
    assert cfg.log.dir is None
    assert cfg.log.level == "WARNING"


def test_partial_file_uses_defaults(tmp_path):
    f = tmp_path / "partial.yaml"
    f.write_text(yaml.safe_dump({"search": {"max_seek_steps": 3}}))

    cfg = AppConfig.load(path=str(f))

    assert cfg.search.max_seek_steps == 3
    assert cfg.search.seek_multiplier == 2
    assert cfg.oracle == OracleConfig()


def test_env_overrides_log_level(sample_config_file, monkeypatch):
    monkeypatch.setenv("THREADSEARCH_LOG_LEVEL", "ERROR")
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "ERROR"


def test_missing_file_should_fail(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize(
    "section, values",
    [
        ("search", {"seek_multiplier": 1}),
        ("search", {"max_seek_steps": 0}),
        ("oracle", {"hack_fraction": 1.5}),
        ("oracle", {"weaken_per_thread": 0}),
        ("oracle", {"base_grow_rate": 0.9}),
    ],
)
def test_invalid_values_should_fail(tmp_path, section, values):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({section: values}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))
