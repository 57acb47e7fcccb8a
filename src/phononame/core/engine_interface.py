"""
編碼引擎抽象基類

定義所有語音編碼引擎必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from phononame.utils.logger import TimingContext, get_logger, setup_logger


class EncoderEngine(ABC):
    """
    編碼引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有建構時解析完成的規則（不可變）
    - 提供 encode() 進行名字 → 音素字串轉換
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次
    - 之後可在多執行緒中重複呼叫 encode()，不需加鎖
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def encode(self, name: str) -> str:
        pass
