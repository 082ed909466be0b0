#!filepath: bb_machine/utils/logger.py
import os
import sys
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - 默认只输出到 stderr（库模式，不落盘）
    - 指定 log_dir 后按日期切割 + 保留周期
    - 包含函数级计时装饰器
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self) -> None:
        """
        重置全局 logger sinks
        """
        logger.remove()

        logger.add(sys.stderr, level=self.level, format=_FORMAT)

        if self.log_dir is not None:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=_FORMAT,
                backtrace=True,
                diagnose=True,
            )

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(self, msg: str = "Exception occurred", log_time: bool = True) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(cfg) -> Logging:
    """
    按 LogConfig 原地重配全局 logs（已导入的引用仍然有效）
    """
    logs.log_dir = cfg.dir
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level
    logs._configure()
    return logs


# 默认全局 logs（可被 init_logging 重配）
logs = Logging()
