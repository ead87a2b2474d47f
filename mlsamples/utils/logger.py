#!filepath: mlsamples/utils/logger.py
import os
import json
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable


class Logging:
    """
    生产级日志模块
    ---------------------------------------
    - 支持按日期切割
    - 支持日志保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    Tutorial output (metrics, predictions) goes to stdout via print;
    this logger only records what the pipeline did.
    """

    def __init__(
        self,
        log_dir: str = "logs",
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
        配置全局 logger
        """
        os.makedirs(self.log_dir, exist_ok=True)

        logger.remove()

        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )

        logger.info("\n-----------Logger initialized successfully.-----------")

    def reconfigure(
        self,
        *,
        log_dir: str,
        rotation: str,
        retention: str,
        log_level: str,
    ) -> None:
        """Re-point the global sink, e.g. after AppConfig has been loaded."""
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self._configure()

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        print(msg)
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        print(msg)
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.info(
                        f"[CALL] {func.__name__} args={args}, "
                        f"kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.info(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs（可被 init_logging 替换）
logs = Logging()


def init_logging(cfg) -> Logging:
    """
    Apply a LogConfig to the global `logs` instance.
    """
    logs.reconfigure(
        log_dir=cfg.dir,
        rotation=cfg.rotation,
        retention=cfg.retention,
        log_level=cfg.level,
    )
    return logs
