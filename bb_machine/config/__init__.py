from .app_config import AppConfig
from .log_config import LogConfig
from .machine_config import MachineConfig

__all__ = ["AppConfig", "LogConfig", "MachineConfig"]
