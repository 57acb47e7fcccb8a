"""
名字分詞器

將名字切分為單詞，並依名字類型處理前綴與撇號。
"""

import re
from typing import FrozenSet, List

from phononame.core.errors import ConfigurationError
from phononame.core.tokenizer_interface import Tokenizer
from phononame.core.types import NameType

# 字母、數字與撇號之外的字元都視為單詞邊界（撇號留給 SEPHARDIC 處理）
DEFAULT_WORD_BOUNDARY = r"[^\w'’]+"

# 輸出分隔符號一律切開，不論規則表的單詞邊界為何
_SEPARATORS = r"[|\-]+"


class NameTokenizer(Tokenizer):
    """
    名字分詞器

    處理流程:
    1. 轉小寫並去除首尾空白
    2. 依規則表的單詞邊界（預設為空白與標點）切分；
       輸出分隔符號 '|' 與 '-' 永遠視為邊界
    3. SEPHARDIC：每個單詞只保留最後一個撇號之後的部分（d'avila -> avila）
    4. SEPHARDIC / ASHKENAZI：移除名字前綴（van, de, ben ...），
       但若會把所有單詞都移除則保留原樣
    5. 丟棄空單詞
    """

    def __init__(
        self,
        name_type: NameType,
        prefixes: FrozenSet[str] = frozenset(),
        word_boundary: str = DEFAULT_WORD_BOUNDARY,
    ):
        self._name_type = name_type
        self._prefixes = frozenset(prefixes)
        try:
            self._boundary = re.compile(f"(?:{word_boundary})|{_SEPARATORS}")
        except re.error as e:
            raise ConfigurationError(f"Invalid word boundary {word_boundary!r}: {e}") from e

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []

        words = [w for w in self._boundary.split(text.lower().strip()) if w]

        if self._name_type is NameType.SEPHARDIC:
            words = [w.rsplit("'", 1)[-1] for w in words]
            words = [w for w in words if w]

        if self._name_type in (NameType.SEPHARDIC, NameType.ASHKENAZI) and self._prefixes:
            remaining = [w for w in words if w not in self._prefixes]
            if remaining:
                words = remaining

        return words
