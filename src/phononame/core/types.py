"""
共用型別

定義名字類型 (NameType)、規則類型 (RuleType)、改寫規則 (Rule)
與語言猜測規則 (LanguageRule)。

Rule 的左右語境皆為正規表達式：
- left_context 必須匹配「結束於游標位置」的文字
- right_context 必須匹配「緊接在 pattern 之後」的文字
- 空字串代表不限制

範例：
    >>> rule = Rule("lt", left_context="au", right_context="$", phonemes=("", "lt"))
    >>> rule.matches("renault", 5)
    True
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Pattern, Tuple

from .errors import ConfigurationError

ANY_LANGUAGE = "any"


class NameType(Enum):
    """名字類型：決定使用哪一組語言猜測規則與改寫規則表"""
    GENERIC = "gen"
    ASHKENAZI = "ash"
    SEPHARDIC = "sep"


class RuleType(Enum):
    """
    規則類型：決定最終化 (finalization) 規則

    - APPROX: 合併聽感相近的音素
    - EXACT: 保留音素差異
    """
    APPROX = "approx"
    EXACT = "exact"


def _compile(expression: str, what: str) -> Pattern:
    try:
        return re.compile(expression)
    except re.error as e:
        raise ConfigurationError(f"Invalid {what} {expression!r}: {e}") from e


@dataclass(frozen=True)
class Rule:
    """
    改寫規則（不可變）

    Attributes:
        pattern: 要匹配的輸入片段（非空）
        left_context: 左語境正規表達式
        right_context: 右語境正規表達式
        phonemes: 音素候選，依宣告順序展開（可包含空字串）
    """
    pattern: str
    left_context: str = ""
    right_context: str = ""
    phonemes: Tuple[str, ...] = ("",)

    _left: Pattern = field(init=False, repr=False, compare=False)
    _right: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.pattern, str) or not self.pattern:
            raise ConfigurationError("Rule pattern must be a non-empty string")
        phonemes = self.phonemes
        if isinstance(phonemes, str):
            phonemes = (phonemes,)
        phonemes = tuple(phonemes)
        if not phonemes:
            raise ConfigurationError(f"Rule {self.pattern!r} has no phoneme alternatives")
        object.__setattr__(self, "phonemes", phonemes)
        object.__setattr__(self, "_left", _compile(f"(?:{self.left_context})$", "left context"))
        object.__setattr__(self, "_right", _compile(self.right_context, "right context"))

    def matches(self, word: str, index: int) -> bool:
        """檢查規則是否能在 word[index:] 套用（pattern 與左右語境都需符合）"""
        if not word.startswith(self.pattern, index):
            return False
        if self.left_context and not self._left.search(word, 0, index):
            return False
        if self.right_context and not self._right.match(word, index + len(self.pattern)):
            return False
        return True

    @classmethod
    def from_tuple(cls, spec: Tuple) -> "Rule":
        """由 (pattern, left, right, phonemes) tuple 建立規則"""
        pattern, left, right, phonemes = spec
        return cls(pattern, left, right, phonemes)


@dataclass(frozen=True)
class LanguageRule:
    """
    語言猜測規則

    Attributes:
        pattern: 對整個單詞做 re.search 的正規表達式（可含 ^ / $）
        languages: 匹配時加入的語言
    """
    pattern: str
    languages: Tuple[str, ...]

    _compiled: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        languages = self.languages
        if isinstance(languages, str):
            languages = (languages,)
        languages = tuple(languages)
        if not languages:
            raise ConfigurationError(f"Language rule {self.pattern!r} names no language")
        object.__setattr__(self, "languages", languages)
        object.__setattr__(self, "_compiled", _compile(self.pattern, "language pattern"))

    def matches(self, word: str) -> bool:
        return self._compiled.search(word) is not None
