"""
改寫規則套用器 (RuleApplier)

以一組有序規則把單詞改寫成一或多個音素字串：

1. 游標從 0 開始，依宣告順序找出第一條符合的規則
   （pattern、左語境、右語境皆符合；先到先得，不取最長匹配）
2. 找到規則：每個候選 × 每個音素候選，去重後截斷為 max_phonemes，
   游標前進 pattern 長度
3. 找不到規則：把游標所在字元原樣接到每個候選，游標前進 1

游標每一步都嚴格前進，長度 L 的單詞最多 L 步。

規則依 pattern 首字元建立索引，桶內維持宣告順序，
因此結果與線性掃描完全相同。
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from phononame.core.types import Rule

from .frontier import Frontier


@dataclass(frozen=True)
class Segment:
    """單一步驟的解析結果：word[start:end] 由 rule 改寫（rule 為 None 表示原樣複製）"""
    start: int
    end: int
    rule: Optional[Rule] = None

    @property
    def phonemes(self) -> Tuple[str, ...]:
        return self.rule.phonemes if self.rule is not None else ()


class RuleApplier:
    """
    單一規則列表的套用器（建構後不可變，可跨執行緒共用）

    Args:
        rules: 有序規則列表
        max_phonemes: 前緣容量上限
    """

    def __init__(self, rules: Iterable[Rule], max_phonemes: int):
        self._rules: Tuple[Rule, ...] = tuple(rules)
        self._max_phonemes = max_phonemes

        index: Dict[str, List[Rule]] = {}
        for rule in self._rules:
            index.setdefault(rule.pattern[0], []).append(rule)
        self._index: Dict[str, Tuple[Rule, ...]] = {k: tuple(v) for k, v in index.items()}

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def max_phonemes(self) -> int:
        return self._max_phonemes

    def find_rule(self, word: str, index: int) -> Optional[Rule]:
        """回傳在 index 處第一條符合的規則（宣告順序）"""
        for rule in self._index.get(word[index], ()):
            if rule.matches(word, index):
                return rule
        return None

    def segment(self, word: str) -> Iterator[Segment]:
        """逐步解析單詞，每一步產生一個 Segment"""
        index = 0
        length = len(word)
        while index < length:
            rule = self.find_rule(word, index)
            if rule is None:
                yield Segment(index, index + 1)
                index += 1
            else:
                end = index + len(rule.pattern)
                yield Segment(index, end, rule)
                index = end

    def apply(self, word: str) -> Frontier:
        """將單詞改寫為候選音素字串前緣"""
        frontier = Frontier.empty(self._max_phonemes)
        for segment in self.segment(word):
            if segment.rule is None:
                frontier = frontier.append(word[segment.start])
            else:
                frontier = frontier.apply(segment.phonemes)
        return frontier

    def apply_all(self, frontier: Frontier) -> Frontier:
        """
        對前緣中每個候選各自套用規則，再依序合併

        最終化 (finalization) 步驟使用此方法；輸入前緣的截斷狀態會保留。
        """
        merged = Frontier.merge((self.apply(candidate) for candidate in frontier), self._max_phonemes)
        if frontier.truncated and not merged.truncated:
            return Frontier(merged.candidates, self._max_phonemes, True)
        return merged
