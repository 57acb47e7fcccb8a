"""
語言猜測模組

依名字類型的猜測規則，為單詞挑選可能的語言集合，
以便分派給對應語言的改寫規則處理。
"""

from typing import Iterable, Sequence, Tuple

from phononame.core.types import LanguageRule


class LanguageGuesser:
    """
    語言猜測器

    功能:
    - 以每條猜測規則對整個單詞做比對
    - 結果為所有命中規則語言的聯集，依規則表宣告的語言順序排列
    - 沒有任何規則命中時回傳後備語言（通常為 ("any",)）

    不保證語言判斷正確；只保證結果非空且可重現。
    """

    def __init__(
        self,
        rules: Iterable[LanguageRule],
        languages: Sequence[str],
        fallback: Sequence[str],
    ):
        self._rules: Tuple[LanguageRule, ...] = tuple(rules)
        self._fallback: Tuple[str, ...] = tuple(fallback)
        self._order = {language: position for position, language in enumerate(languages)}

    @property
    def fallback(self) -> Tuple[str, ...]:
        return self._fallback

    def guess(self, word: str) -> Tuple[str, ...]:
        """
        猜測單詞的語言

        Args:
            word: 已轉小寫的單詞

        Returns:
            Tuple[str, ...]: 非空的語言 tuple，例如 ('german', 'spanish')
        """
        matched = {}
        for rule in self._rules:
            if rule.matches(word):
                for language in rule.languages:
                    matched.setdefault(language, None)

        if not matched:
            return self._fallback

        # 未宣告的語言排在最後，保持規則中的出現順序
        last = len(self._order)
        return tuple(sorted(matched, key=lambda language: self._order.get(language, last)))
