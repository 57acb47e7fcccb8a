"""
測試 LanguageGuesser 語言猜測
"""

import pytest

from phononame.core.errors import ConfigurationError
from phononame.core.types import LanguageRule, NameType
from phononame.router.language_guesser import LanguageGuesser
from phononame.rules import get_default_rule_table


@pytest.fixture
def guesser():
    rules = [
        LanguageRule(r"x$", ("german",)),
        LanguageRule(r"^a", ("english", "german")),
        LanguageRule(r"q", ("klingon",)),
    ]
    return LanguageGuesser(rules, ("any", "english", "german"), ("any",))


class TestLanguageGuesser:
    """測試猜測規則的聯集與排序"""

    def test_union_in_declared_order(self, guesser):
        """命中多條規則時取聯集，依宣告的語言順序排列"""
        assert guesser.guess("ax") == ("english", "german")

    def test_single_rule(self, guesser):
        """只命中一條規則"""
        assert guesser.guess("bx") == ("german",)

    def test_fallback(self, guesser):
        """沒有規則命中時回傳後備語言"""
        assert guesser.guess("bob") == ("any",)
        assert guesser.fallback == ("any",)

    def test_undeclared_language_sorted_last(self, guesser):
        """未宣告的語言排在最後"""
        assert guesser.guess("aqx") == ("english", "german", "klingon")

    def test_deterministic(self, guesser):
        """相同輸入永遠得到相同結果"""
        assert guesser.guess("ax") == guesser.guess("ax")


class TestLanguageRule:
    """測試 LanguageRule"""

    def test_single_language_string(self):
        """單一語言字串轉為 tuple"""
        assert LanguageRule("sch", "german").languages == ("german",)

    def test_no_language(self):
        """沒有語言的規則不合法"""
        with pytest.raises(ConfigurationError):
            LanguageRule("sch", ())

    def test_invalid_pattern(self):
        """正規表達式錯誤"""
        with pytest.raises(ConfigurationError):
            LanguageRule("[", ("german",))


class TestDefaultGenericGuesses:
    """測試內建 GENERIC 猜測規則"""

    @pytest.fixture
    def generic(self):
        table = get_default_rule_table()
        return LanguageGuesser(
            table.language_rules(NameType.GENERIC),
            table.languages(NameType.GENERIC),
            table.fallback_languages(NameType.GENERIC),
        )

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("judenburg", ("dutch", "german", "spanish", "french")),
            ("renault", ("any",)),
            ("sntjohn", ("english",)),
            ("smith", ("english",)),
            ("kowalski", ("english", "dutch", "german", "polish")),
        ],
    )
    def test_guess(self, generic, word, expected):
        assert generic.guess(word) == expected
