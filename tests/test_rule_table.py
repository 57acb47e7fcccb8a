"""
測試規則表 (StaticRuleTable / NameTypeRules) 與內建規則
"""

import logging

import pytest

from phononame.core.errors import ConfigurationError
from phononame.core.protocols.rule_table import RuleTableProtocol
from phononame.core.types import ANY_LANGUAGE, NameType, Rule, RuleType
from phononame.router.name_tokenizer import DEFAULT_WORD_BOUNDARY
from phononame.rules import (
    AshkenaziRuleConfig,
    GenericRuleConfig,
    NameTypeRules,
    SephardicRuleConfig,
    StaticRuleTable,
    get_default_rule_table,
)


class TinyConfig:
    NAME_TYPE = NameType.GENERIC
    LANGUAGES = ("any", "english")
    FALLBACK_LANGUAGES = ("any",)
    NAME_PREFIXES = ()
    LANGUAGE_RULES = [(r"th", ("english",))]
    RULES = {
        "any": [("ph", "", "", ("f",))],
        "english": [("th", "", "", ("t",))],
    }
    FINAL_RULES = {"approx": [("e", "", "", ("i",))], "exact": []}


class TestNameTypeRules:
    """測試由配置類別建立規則"""

    def test_from_config(self):
        record = NameTypeRules.from_config(TinyConfig)
        assert record.name_type is NameType.GENERIC
        assert record.languages == ("any", "english")
        assert record.rules["english"] == (Rule("th", phonemes="t"),)
        assert set(record.final_rules) == {RuleType.APPROX, RuleType.EXACT}
        assert record.final_rules[RuleType.EXACT] == ()
        assert record.fallback == ("any",)

    def test_mappings_are_read_only(self):
        """規則映射不可修改"""
        record = NameTypeRules.from_config(TinyConfig)
        with pytest.raises(TypeError):
            record.rules["french"] = ()

    def test_undeclared_language_rejected(self):
        """猜測規則引用未宣告語言時拋出 ConfigurationError"""

        class BadConfig(TinyConfig):
            LANGUAGE_RULES = [(r"sch", ("german",))]

        with pytest.raises(ConfigurationError, match="german"):
            StaticRuleTable([NameTypeRules.from_config(BadConfig)])

    def test_missing_fallback_rejected(self):
        class BadConfig(TinyConfig):
            FALLBACK_LANGUAGES = ()

        with pytest.raises(ConfigurationError):
            StaticRuleTable([NameTypeRules.from_config(BadConfig)])

    def test_malformed_rule_rejected(self):
        class BadConfig(TinyConfig):
            RULES = {"any": [("", "", "", ("x",))], "english": []}

        with pytest.raises(ConfigurationError):
            NameTypeRules.from_config(BadConfig)


class TestStaticRuleTable:
    """測試規則表查詢"""

    @pytest.fixture
    def table(self):
        return StaticRuleTable([NameTypeRules.from_config(TinyConfig)])

    def test_satisfies_protocol(self, table):
        assert isinstance(table, RuleTableProtocol)
        assert table.word_boundary == DEFAULT_WORD_BOUNDARY

    def test_lookups(self, table):
        assert table.name_types == (NameType.GENERIC,)
        assert table.languages(NameType.GENERIC) == ("any", "english")
        assert table.rules(NameType.GENERIC, RuleType.APPROX, "any") == (Rule("ph", phonemes="f"),)
        assert table.final_rules(NameType.GENERIC, RuleType.APPROX) == (Rule("e", phonemes="i"),)
        assert table.fallback_languages(NameType.GENERIC) == ("any",)
        assert table.name_prefixes(NameType.GENERIC) == frozenset()
        assert len(table.language_rules(NameType.GENERIC)) == 1

    def test_missing_name_type(self, table):
        with pytest.raises(KeyError):
            table.languages(NameType.SEPHARDIC)

    def test_missing_language(self, table):
        with pytest.raises(KeyError):
            table.rules(NameType.GENERIC, RuleType.APPROX, "french")

    def test_missing_rule_type(self):
        class ApproxOnly(TinyConfig):
            FINAL_RULES = {"approx": []}

        table = StaticRuleTable([NameTypeRules.from_config(ApproxOnly)])
        with pytest.raises(KeyError):
            table.final_rules(NameType.GENERIC, RuleType.EXACT)
        with pytest.raises(KeyError):
            table.rules(NameType.GENERIC, RuleType.EXACT, "any")


class TestDefaultRuleTable:
    """測試內建規則表"""

    def test_cached(self):
        assert get_default_rule_table() is get_default_rule_table()

    def test_first_build_is_timed(self, caplog):
        """第一次建立規則表時寫入計時日誌，之後直接取快取"""
        get_default_rule_table.cache_clear()
        with caplog.at_level(logging.DEBUG, logger="phononame"):
            table = get_default_rule_table()
        assert "[Timing] get_default_rule_table" in caplog.text

        caplog.clear()
        with caplog.at_level(logging.DEBUG, logger="phononame"):
            assert get_default_rule_table() is table
        assert "[Timing]" not in caplog.text

    def test_all_name_types(self):
        table = get_default_rule_table()
        assert set(table.name_types) == set(NameType)

    @pytest.mark.parametrize("config", [GenericRuleConfig, AshkenaziRuleConfig, SephardicRuleConfig])
    def test_every_language_has_rules(self, config):
        """每個宣告語言都有主要規則，兩種規則類型都有最終化規則"""
        table = get_default_rule_table()
        name_type = config.NAME_TYPE
        assert table.languages(name_type)[0] == ANY_LANGUAGE
        for rule_type in RuleType:
            assert table.final_rules(name_type, rule_type)
            for language in table.languages(name_type):
                assert table.rules(name_type, rule_type, language)

    def test_prefixes(self):
        table = get_default_rule_table()
        assert table.name_prefixes(NameType.GENERIC) == frozenset()
        assert "van" in table.name_prefixes(NameType.ASHKENAZI)
        assert "de" in table.name_prefixes(NameType.SEPHARDIC)
