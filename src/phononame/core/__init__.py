"""
核心抽象層

定義共用型別、例外、規則表介面與引擎抽象基類。
"""

from .errors import ConfigurationError, EncoderError, PhononameError
from .types import ANY_LANGUAGE, LanguageRule, NameType, Rule, RuleType
from .engine_interface import EncoderEngine
from .tokenizer_interface import Tokenizer
from .protocols import RuleTableProtocol

__all__ = [
    "ANY_LANGUAGE",
    "NameType",
    "RuleType",
    "Rule",
    "LanguageRule",
    "PhononameError",
    "ConfigurationError",
    "EncoderError",
    "EncoderEngine",
    "Tokenizer",
    "RuleTableProtocol",
]
