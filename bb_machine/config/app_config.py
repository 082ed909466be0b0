#!filepath: bb_machine/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .machine_config import MachineConfig


def package_root() -> str:
    """
    bb_machine/config/app_config.py → bb_machine/config
    """
    return os.path.abspath(os.path.dirname(__file__))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    machine: MachineConfig = Field(default_factory=MachineConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 bb_machine/config/base.yml
        - BB_LOG_LEVEL 覆盖 log.level
        """
        # 1) 先加载 .env（当前工作目录）
        load_dotenv()

        # 2) 决定配置文件路径
        if path is None:
            path = os.path.join(package_root(), "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv("BB_LOG_LEVEL")
        if level:
            raw["log"] = {**(raw.get("log") or {}), "level": level}

        return cls(**raw)
