"""
日誌與計時工具

所有模組透過 get_logger() 取得 "phononame.*" 之下的 logger。
預設只掛 NullHandler（函式庫不主動輸出），需要時再以
setup_logger() / enable_debug_logging() 開啟。

使用方式:
    from phononame.utils.logger import get_logger, TimingContext

    logger = get_logger("engine.phonetic")
    with TimingContext("encode", logger=logger):
        ...
"""

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "phononame"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())

# 計時日誌獨立一個 logger，方便只開計時不開 debug
_timing_logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.timing")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得套件內的 logger

    Args:
        name: 子 logger 名稱（如 "engine.phonetic"），None 表示根 logger

    Returns:
        logging.Logger: "phononame.<name>" logger
    """
    if not name:
        return _root_logger
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為套件根 logger 加上 StreamHandler

    重複呼叫只會調整等級，不會重複掛 handler。
    """
    _root_logger.setLevel(level)

    for handler in _root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "_phononame", False):
            handler.setLevel(level)
            return _root_logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    handler._phononame = True  # type: ignore[attr-defined]
    _root_logger.addHandler(handler)
    return _root_logger


def enable_debug_logging() -> logging.Logger:
    """開啟完整 DEBUG 日誌"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌（其他模組維持原等級）"""
    setup_logger(level=_root_logger.level or logging.WARNING)
    _timing_logger.setLevel(logging.DEBUG)
    for handler in _root_logger.handlers:
        if getattr(handler, "_phononame", False):
            handler.setLevel(logging.DEBUG)
    return _timing_logger


class TimingContext:
    """
    計時 context manager

    離開區塊時寫一筆日誌，並呼叫選用的回呼 callback(operation, elapsed)。

    範例:
        >>> with TimingContext("load rules") as timer:
        ...     load()
        >>> timer.elapsed
        0.0012
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or _timing_logger
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        message = f"[Timing] {self.operation}: {self.elapsed * 1000:.3f} ms"
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, message)
        elif _timing_logger.isEnabledFor(logging.DEBUG):
            _timing_logger.debug(message)
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    函式計時裝飾器

    範例:
        @log_timing("build table")
        def build(): ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
