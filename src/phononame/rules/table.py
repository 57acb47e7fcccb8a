"""
靜態規則表

不可變的記憶體內規則表實作，滿足 RuleTableProtocol。
每個名字類型一筆 NameTypeRules，可由配置類別（如 GenericRuleConfig）建立。
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, FrozenSet, Iterable, Mapping, Sequence, Tuple

from phononame.core.errors import ConfigurationError
from phononame.core.types import LanguageRule, NameType, Rule, RuleType
from phononame.router.name_tokenizer import DEFAULT_WORD_BOUNDARY
from phononame.utils.logger import get_logger

_logger = get_logger("rules.table")


@dataclass(frozen=True, eq=False)
class NameTypeRules:
    """
    單一名字類型的完整規則

    Attributes:
        name_type: 名字類型
        languages: 宣告順序的語言
        rules: 語言 -> 主要改寫規則（兩種 RuleType 共用）
        final_rules: RuleType -> 最終化規則
        language_rules: 語言猜測規則
        fallback: 猜測失敗時的後備語言
        prefixes: 要移除的名字前綴
    """
    name_type: NameType
    languages: Tuple[str, ...]
    rules: Mapping[str, Tuple[Rule, ...]]
    final_rules: Mapping[RuleType, Tuple[Rule, ...]]
    language_rules: Tuple[LanguageRule, ...]
    fallback: Tuple[str, ...]
    prefixes: FrozenSet[str] = frozenset()

    @classmethod
    def from_config(cls, config: Any) -> "NameTypeRules":
        """
        由配置類別建立

        配置類別需提供 NAME_TYPE, LANGUAGES, FALLBACK_LANGUAGES,
        NAME_PREFIXES, LANGUAGE_RULES, RULES, FINAL_RULES。
        """
        rules = {
            language: tuple(Rule.from_tuple(spec) for spec in specs)
            for language, specs in config.RULES.items()
        }
        final_rules = {
            RuleType(rule_type): tuple(Rule.from_tuple(spec) for spec in specs)
            for rule_type, specs in config.FINAL_RULES.items()
        }
        language_rules = tuple(LanguageRule(pattern, languages) for pattern, languages in config.LANGUAGE_RULES)

        return cls(
            name_type=config.NAME_TYPE,
            languages=tuple(config.LANGUAGES),
            rules=MappingProxyType(rules),
            final_rules=MappingProxyType(final_rules),
            language_rules=language_rules,
            fallback=tuple(config.FALLBACK_LANGUAGES),
            prefixes=frozenset(config.NAME_PREFIXES),
        )

    def validate(self) -> None:
        """檢查猜測規則與後備語言引用的語言都已宣告"""
        declared = set(self.languages)
        referenced = set(self.fallback)
        for rule in self.language_rules:
            referenced.update(rule.languages)
        missing = sorted(referenced - declared)
        if missing:
            raise ConfigurationError(
                f"{self.name_type.name} rules reference undeclared languages: {', '.join(missing)}"
            )
        if not self.fallback:
            raise ConfigurationError(f"{self.name_type.name} rules declare no fallback language")


class StaticRuleTable:
    """
    不可變的規則表

    範例：
        >>> table = StaticRuleTable([NameTypeRules.from_config(GenericRuleConfig)])
        >>> table.languages(NameType.GENERIC)[:2]
        ('any', 'english')
    """

    def __init__(self, records: Iterable[NameTypeRules], word_boundary: str = DEFAULT_WORD_BOUNDARY):
        by_type = {}
        for record in records:
            record.validate()
            by_type[record.name_type] = record
        self._records: Mapping[NameType, NameTypeRules] = MappingProxyType(by_type)
        self._word_boundary = word_boundary

        _logger.debug(f"Rule table built for {[t.name for t in by_type]}")

    @property
    def word_boundary(self) -> str:
        return self._word_boundary

    @property
    def name_types(self) -> Tuple[NameType, ...]:
        return tuple(self._records)

    def _record(self, name_type: NameType) -> NameTypeRules:
        try:
            return self._records[name_type]
        except KeyError:
            raise KeyError(f"No rules for name type {name_type!r}") from None

    def languages(self, name_type: NameType) -> Sequence[str]:
        return self._record(name_type).languages

    def rules(self, name_type: NameType, rule_type: RuleType, language: str) -> Sequence[Rule]:
        record = self._record(name_type)
        if rule_type not in record.final_rules:
            raise KeyError(f"No {rule_type.name} rules for {name_type.name}")
        try:
            return record.rules[language]
        except KeyError:
            raise KeyError(f"No {name_type.name}/{rule_type.name} rules for language {language!r}") from None

    def final_rules(self, name_type: NameType, rule_type: RuleType) -> Sequence[Rule]:
        try:
            return self._record(name_type).final_rules[rule_type]
        except KeyError:
            raise KeyError(f"No {rule_type.name} final rules for {name_type.name}") from None

    def language_rules(self, name_type: NameType) -> Sequence[LanguageRule]:
        return self._record(name_type).language_rules

    def fallback_languages(self, name_type: NameType) -> Sequence[str]:
        return self._record(name_type).fallback

    def name_prefixes(self, name_type: NameType) -> FrozenSet[str]:
        return self._record(name_type).prefixes
