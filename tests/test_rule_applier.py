"""
測試 RuleApplier 規則套用

驗證：
1. 先到先得（宣告順序，不取最長匹配）
2. 左右語境
3. 未匹配字元原樣複製
4. 分支展開與上限
5. 游標嚴格前進（步數不超過單詞長度）
"""

import pytest

from phononame.core.errors import ConfigurationError
from phononame.core.types import Rule
from phononame.phonetic.frontier import Frontier
from phononame.phonetic.rule_applier import RuleApplier, Segment


class TestRule:
    """測試 Rule 資料結構"""

    def test_defaults(self):
        """預設無語境、音素為空字串（刪除）"""
        rule = Rule("h")
        assert rule.left_context == ""
        assert rule.right_context == ""
        assert rule.phonemes == ("",)

    def test_phonemes_string_is_coerced(self):
        """單一字串音素轉為 tuple"""
        assert Rule("ph", phonemes="f").phonemes == ("f",)

    def test_from_tuple(self):
        """由 tuple 建立"""
        rule = Rule.from_tuple(("c", "", "[eiy]", ("s", "ts")))
        assert rule == Rule("c", "", "[eiy]", ("s", "ts"))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"pattern": ""},
            {"pattern": "a", "phonemes": ()},
            {"pattern": "a", "left_context": "[a"},
            {"pattern": "a", "right_context": "(b"},
        ],
    )
    def test_invalid_rules(self, kwargs):
        """格式錯誤的規則在建立時拋出 ConfigurationError"""
        with pytest.raises(ConfigurationError):
            Rule(**kwargs)

    def test_left_context_ends_at_cursor(self):
        """左語境必須結束於游標位置"""
        rule = Rule("lt", "au", "$", ("", "lt"))
        assert rule.matches("renault", 5)
        assert not rule.matches("renalt", 4)

    def test_right_context_follows_pattern(self):
        """右語境從 pattern 之後開始匹配"""
        rule = Rule("c", "", "[eiy]", ("s",))
        assert rule.matches("ce", 0)
        assert not rule.matches("ca", 0)
        assert not rule.matches("c", 0)

    def test_anchors(self):
        """^ 與 $ 對整個單詞生效"""
        start = Rule("kn", "^", "", ("n",))
        assert start.matches("knight", 0)
        assert not start.matches("aknight", 1)
        end = Rule("g", "", "$", ("k",))
        assert end.matches("berg", 3)
        assert not end.matches("bergs", 3)


class TestRuleApplier:
    """測試單一規則列表的套用"""

    def test_literal_copy(self):
        """沒有規則時原樣複製"""
        applier = RuleApplier([], 5)
        assert applier.apply("xyz").candidates == ("xyz",)

    def test_empty_word(self):
        """空單詞得到只含空字串的前緣"""
        assert RuleApplier([Rule("a", phonemes="b")], 5).apply("").candidates == ("",)

    def test_first_match_wins(self):
        """宣告順序優先，不取最長匹配"""
        applier = RuleApplier([Rule("a", phonemes="1"), Rule("ab", phonemes="2")], 5)
        assert applier.apply("ab").candidates == ("1b",)

        applier = RuleApplier([Rule("ab", phonemes="2"), Rule("a", phonemes="1")], 5)
        assert applier.apply("ab").candidates == ("2",)

    def test_context_dispatch_order(self):
        """同首字元的規則依宣告順序嘗試"""
        applier = RuleApplier([Rule("c", "", "[ei]", ("s",)), Rule("c", phonemes="k")], 5)
        assert applier.apply("ce").candidates == ("se",)
        assert applier.apply("ca").candidates == ("ka",)

    def test_left_context(self):
        """左語境不符時規則不套用"""
        applier = RuleApplier([Rule("h", "[aeiou]", "", ("",))], 5)
        assert applier.apply("aha").candidates == ("aa",)
        assert applier.apply("ha").candidates == ("ha",)

    def test_deletion(self):
        """空字串音素刪除該片段"""
        applier = RuleApplier([Rule("'")], 5)
        assert applier.apply("d'avila").candidates == ("davila",)

    def test_branching(self):
        """多個音素候選依序展開"""
        applier = RuleApplier([Rule("a", phonemes=("a", "o"))], 10)
        assert applier.apply("bab").candidates == ("bab", "bob")
        assert applier.apply("aa").candidates == ("aa", "ao", "oa", "oo")

    def test_branching_cap(self):
        """展開超過上限時保留前 N 個並標記截斷"""
        applier = RuleApplier([Rule("a", phonemes=("a", "o"))], 3)
        frontier = applier.apply("aa")
        assert frontier.candidates == ("aa", "ao", "oa")
        assert frontier.truncated

    def test_find_rule(self):
        """find_rule 回傳第一條符合的規則或 None"""
        first = Rule("c", "", "[ei]", ("s",))
        second = Rule("c", phonemes="k")
        applier = RuleApplier([first, second], 5)
        assert applier.find_rule("ce", 0) is first
        assert applier.find_rule("ca", 0) is second
        assert applier.find_rule("ca", 1) is None

    def test_segment(self):
        """segment 逐步產生解析結果"""
        rule = Rule("ab", phonemes="x")
        applier = RuleApplier([rule], 5)
        assert list(applier.segment("abc")) == [Segment(0, 2, rule), Segment(2, 3)]
        assert Segment(2, 3).phonemes == ()
        assert Segment(0, 2, rule).phonemes == ("x",)

    @pytest.mark.parametrize("word", ["", "a", "schwarzenegger", "'''", "ñüß", "aaaaaaaaaaaa"])
    def test_steps_bounded_by_length(self, word):
        """游標每一步都前進，步數不超過單詞長度"""
        applier = RuleApplier(
            [Rule("sch", phonemes="S"), Rule("a", phonemes=("a", "o")), Rule("'")],
            4,
        )
        segments = list(applier.segment(word))
        assert len(segments) <= len(word)
        assert all(s.end > s.start for s in segments)
        if segments:
            assert segments[-1].end == len(word)


class TestApplyAll:
    """測試對整個前緣套用（最終化步驟）"""

    def test_merges_in_candidate_order(self):
        """每個候選的結果依序合併並去重"""
        applier = RuleApplier([Rule("e", phonemes="i")], 10)
        result = applier.apply_all(Frontier(["re", "ri", "ra"], 10))
        assert result.candidates == ("ri", "ra")

    def test_keeps_input_truncation(self):
        """輸入前緣曾被截斷時，結果也標記截斷"""
        applier = RuleApplier([], 5)
        result = applier.apply_all(Frontier(["a", "b", "c"], 2))
        assert result.candidates == ("a", "b")
        assert result.truncated
