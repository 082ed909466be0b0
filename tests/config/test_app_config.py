#!filepath: tests/config/test_app_config.py
import pytest
import yaml
from pydantic import ValidationError

from bb_machine.config import AppConfig, LogConfig, MachineConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "log": {
            "dir": "logs",
            "rotation": "1 day",
            "retention": "30 days",
            "level": "DEBUG",
        },
        "machine": {
            "max_steps": 1000,
            "log_every": 100,
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


@pytest.fixture(autouse=True)
def _clear_level_override(monkeypatch):
    monkeypatch.delenv("BB_LOG_LEVEL", raising=False)


def test_app_config_load(sample_config_file):
    """测试 AppConfig 是否能正确加载 YAML"""
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.machine, MachineConfig)


def test_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "DEBUG"
    assert cfg.log.dir == "logs"
    assert cfg.machine.max_steps == 1000
    assert cfg.machine.log_every == 100


def test_default_config_file():
    cfg = AppConfig.load()

    assert cfg.log.dir is None
    assert cfg.machine.max_steps is None
    assert cfg.machine.log_every == 0


def test_missing_sections_use_defaults(tmp_path):
    f = tmp_path / "partial.yaml"
    f.write_text(yaml.safe_dump({"machine": {"log_every": 5}}), encoding="utf-8")

    cfg = AppConfig.load(path=str(f))

    assert cfg.log.level == "INFO"
    assert cfg.machine.log_every == 5
    assert cfg.machine.max_steps is None


def test_env_overrides_level(sample_config_file, monkeypatch):
    monkeypatch.setenv("BB_LOG_LEVEL", "WARNING")

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "WARNING"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yml"))


@pytest.mark.parametrize("machine", [{"max_steps": 0}, {"log_every": -1}, {"max_steps": "many"}])
def test_bad_machine_values(tmp_path, machine):
    """当配置值非法时，AppConfig 应该抛出 ValidationError"""
    f = tmp_path / "bad.yaml"
    f.write_text(yaml.safe_dump({"machine": machine}), encoding="utf-8")

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(f))


def test_env_level_with_null_log_section(tmp_path, monkeypatch):
    f = tmp_path / "null_log.yaml"
    f.write_text("log: null\nmachine:\n  log_every: 3\n", encoding="utf-8")
    monkeypatch.setenv("BB_LOG_LEVEL", "DEBUG")

    cfg = AppConfig.load(path=str(f))

    assert cfg.log.level == "DEBUG"
    assert cfg.log.dir is None
    assert cfg.machine.log_every == 3
