"""
phononame - 人名語音編碼器 (Beider-Morse Phonetic Name Encoder)

核心概念：
- 名字先依名字類型 (GENERIC / ASHKENAZI / SEPHARDIC) 切分成單詞
- 每個單詞猜測可能的語言，套用各語言規則產生發音候選
- 套用與語言無關的最終化規則 (APPROX / EXACT)
- 所有候選集合都有上限 (max_phonemes)，保留最先產生的 N 個

官方入口（穩定 API）：
- `phononame.PhoneticEngine`
- `phononame.BeiderMorseEncoder`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from phononame.encoder import BeiderMorseEncoder
from phononame.phonetic import Frontier, PhoneticEngine, RuleApplier

# =============================================================================
# 型別與錯誤
# =============================================================================
from phononame.core.errors import ConfigurationError, EncoderError, PhononameError
from phononame.core.types import ANY_LANGUAGE, LanguageRule, NameType, Rule, RuleType

# =============================================================================
# 配置
# =============================================================================
from phononame.config import DEFAULT_MAX_PHONEMES, EncoderConfig

# =============================================================================
# 日誌工具
# =============================================================================
from phononame.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 規則表（進階用途）
# =============================================================================
from phononame.core.protocols.rule_table import RuleTableProtocol
from phononame.rules import NameTypeRules, StaticRuleTable, get_default_rule_table

__all__ = [
    # Engines
    "PhoneticEngine",
    "BeiderMorseEncoder",
    "Frontier",
    "RuleApplier",
    # Types
    "NameType",
    "RuleType",
    "Rule",
    "LanguageRule",
    "ANY_LANGUAGE",
    # Errors
    "PhononameError",
    "ConfigurationError",
    "EncoderError",
    # Config
    "EncoderConfig",
    "DEFAULT_MAX_PHONEMES",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Rule tables (advanced)
    "RuleTableProtocol",
    "StaticRuleTable",
    "NameTypeRules",
    "get_default_rule_table",
]

__version__ = "0.1.0"
