"""
全域配置模組

提供統一的配置類別，控制編碼參數、日誌、計時等行為。

使用方式:
    from phononame import PhoneticEngine, NameType, RuleType

    # 直接建構
    engine = PhoneticEngine(NameType.GENERIC, RuleType.APPROX, verbose=True)

    # 進階: 使用配置物件
    from phononame.config import EncoderConfig
    config = EncoderConfig(name_type="ash", rule_type="exact", max_phonemes=5)
    engine = PhoneticEngine.from_config(config)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("phononame").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .core.errors import ConfigurationError
from .core.types import NameType, RuleType
from .utils.logger import setup_logger

# 與原始 Beider-Morse 實作一致的預設上限
DEFAULT_MAX_PHONEMES = 20


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    # 非 verbose 時不主動設定，讓使用者透過標準 logging 控制
    if verbose:
        setup_logger(level=logging.DEBUG)


def coerce_name_type(value: Any) -> NameType:
    """接受 NameType 或其值 ("gen" / "ash" / "sep") 或名稱 ("GENERIC")"""
    if isinstance(value, NameType):
        return value
    try:
        return NameType(value)
    except ValueError:
        pass
    if isinstance(value, str) and value.upper() in NameType.__members__:
        return NameType[value.upper()]
    raise ConfigurationError(f"Unknown name type: {value!r}")


def coerce_rule_type(value: Any) -> RuleType:
    """接受 RuleType 或其值 ("approx" / "exact") 或名稱 ("APPROX")"""
    if isinstance(value, RuleType):
        return value
    try:
        return RuleType(value)
    except ValueError:
        pass
    if isinstance(value, str) and value.upper() in RuleType.__members__:
        return RuleType[value.upper()]
    raise ConfigurationError(f"Unknown rule type: {value!r}")


def validate_max_phonemes(value: Any) -> int:
    """max_phonemes 必須是正整數（bool 不算）"""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"max_phonemes must be a positive integer, got {value!r}")
    return value


@dataclass(frozen=True)
class EncoderConfig:
    """
    編碼器配置類別

    屬性:
        name_type: 名字類型 (GENERIC / ASHKENAZI / SEPHARDIC)
        rule_type: 規則類型 (APPROX / EXACT)
        concatenate: 多詞名字是否先交叉乘積再截斷（False 則逐詞以 '-' 串接）
        max_phonemes: 每個前緣的候選上限
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None

    使用範例:
        config = EncoderConfig(NameType.SEPHARDIC, RuleType.APPROX, concatenate=False)
    """

    name_type: NameType = NameType.GENERIC
    rule_type: RuleType = RuleType.APPROX
    concatenate: bool = True
    max_phonemes: int = DEFAULT_MAX_PHONEMES

    # 日誌控制
    verbose: bool = False

    # 計時回呼
    on_timing: Optional[Callable[[str, float], None]] = None

    def __post_init__(self):
        """正規化列舉值、驗證上限，並設定 logger"""
        object.__setattr__(self, "name_type", coerce_name_type(self.name_type))
        object.__setattr__(self, "rule_type", coerce_rule_type(self.rule_type))
        object.__setattr__(self, "concatenate", bool(self.concatenate))
        validate_max_phonemes(self.max_phonemes)
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = EncoderConfig()
