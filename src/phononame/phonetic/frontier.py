"""
候選音素前緣 (Frontier)

規則套用過程中的「進行中候選字串」集合：
- 保留插入順序
- 以完整字串去重
- 容量上限為 max_phonemes

截斷策略固定為「保留最先產生的前 N 個」，不做任何排序或評分，
因此同一組輸入與設定永遠得到相同輸出；調高 max_phonemes
只會在尾端追加新候選，調低則得到較大上限結果的前綴。

每個操作都回傳新的 Frontier，原物件不會被修改。
"""

from typing import Dict, Iterable, Iterator, Sequence, Tuple

from phononame.core.errors import ConfigurationError


class Frontier:
    """
    有上限、有序、去重的候選字串集合

    範例：
        >>> frontier = Frontier.empty(max_phonemes=3)
        >>> frontier = frontier.append("r").apply(("a", "o")).apply(("", "lt"))
        >>> frontier.candidates
        ('ra', 'ralt', 'ro')
        >>> frontier.truncated
        True
    """

    __slots__ = ("_candidates", "_max_phonemes", "_truncated")

    def __init__(self, candidates: Iterable[str], max_phonemes: int, truncated: bool = False):
        if not isinstance(max_phonemes, int) or isinstance(max_phonemes, bool) or max_phonemes < 1:
            raise ConfigurationError(f"max_phonemes must be a positive integer, got {max_phonemes!r}")

        unique: Dict[str, None] = {}
        for candidate in candidates:
            if len(unique) >= max_phonemes:
                if candidate not in unique:
                    truncated = True
                    break
                continue
            unique.setdefault(candidate, None)

        self._candidates: Tuple[str, ...] = tuple(unique)
        self._max_phonemes = max_phonemes
        self._truncated = truncated

    @classmethod
    def empty(cls, max_phonemes: int) -> "Frontier":
        """只含一個空字串的起始前緣"""
        return cls(("",), max_phonemes)

    # ========== 屬性 ==========

    @property
    def candidates(self) -> Tuple[str, ...]:
        return self._candidates

    @property
    def max_phonemes(self) -> int:
        return self._max_phonemes

    @property
    def truncated(self) -> bool:
        """是否曾因容量上限丟棄候選（會沿著後續操作傳遞）"""
        return self._truncated

    def __iter__(self) -> Iterator[str]:
        return iter(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, item: object) -> bool:
        return item in self._candidates

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frontier):
            return NotImplemented
        return self._candidates == other._candidates and self._max_phonemes == other._max_phonemes

    def __hash__(self) -> int:
        return hash((self._candidates, self._max_phonemes))

    def __repr__(self) -> str:
        return f"Frontier({list(self._candidates)!r}, max_phonemes={self._max_phonemes}, truncated={self._truncated})"

    # ========== 展開 ==========

    def append(self, text: str) -> "Frontier":
        """將 text 原樣接到每個候選之後（不分支）"""
        if not text:
            return self
        return Frontier((c + text for c in self._candidates), self._max_phonemes, self._truncated)

    def apply(self, alternatives: Sequence[str]) -> "Frontier":
        """
        以 (候選順序 × 候選音素順序) 做交叉乘積

        產生器在達到上限後即停止，不會先展開完整組合再截斷。
        """
        if len(alternatives) == 1:
            return self.append(alternatives[0])

        expanded = (candidate + alternative for candidate in self._candidates for alternative in alternatives)
        return Frontier(expanded, self._max_phonemes, self._truncated)

    # ========== 合併 ==========

    @classmethod
    def merge(cls, frontiers: Iterable["Frontier"], max_phonemes: int) -> "Frontier":
        """
        依序聯集多個前緣，並套用上限

        若某個來源本身曾被截斷，合併在它之後結束：後面的來源
        在較大上限下會排在它多出來的候選之後，因此不能先放進來。
        """
        unique: Dict[str, None] = {}
        truncated = False
        for frontier in frontiers:
            for candidate in frontier:
                if candidate in unique:
                    continue
                if len(unique) >= max_phonemes:
                    return cls(unique, max_phonemes, True)
                unique[candidate] = None
            if frontier.truncated:
                truncated = True
                break
        return cls(unique, max_phonemes, truncated)

    @classmethod
    def product(cls, frontiers: Sequence["Frontier"], max_phonemes: int) -> "Frontier":
        """
        依序對多個前緣做交叉乘積（串接策略使用）

        被截斷的前緣只接在目前第一個候選之後：其餘組合在較大上限下
        會排在它多出來的候選之後。
        """
        result = cls.empty(max_phonemes)
        for frontier in frontiers:
            if frontier.truncated:
                head = Frontier(result.candidates[:1], max_phonemes, True)
                result = head.apply(frontier.candidates)
            else:
                result = result.apply(frontier.candidates)
        return result

    def join(self, separator: str = "|") -> str:
        return separator.join(self._candidates)
