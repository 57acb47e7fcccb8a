"""
Rule Table Protocol

定義引擎所依賴的規則表最小介面（唯讀查詢）。
引擎本身不解析、不持久化規則定義。
"""

from typing import FrozenSet, Protocol, Sequence, runtime_checkable

from phononame.core.types import LanguageRule, NameType, Rule, RuleType


@runtime_checkable
class RuleTableProtocol(Protocol):
    word_boundary: str

    def languages(self, name_type: NameType) -> Sequence[str]:
        """宣告順序的語言列表"""
        ...

    def rules(self, name_type: NameType, rule_type: RuleType, language: str) -> Sequence[Rule]:
        """主要改寫規則；不存在時拋出 KeyError"""
        ...

    def final_rules(self, name_type: NameType, rule_type: RuleType) -> Sequence[Rule]:
        """最終化規則；不存在時拋出 KeyError"""
        ...

    def language_rules(self, name_type: NameType) -> Sequence[LanguageRule]:
        ...

    def fallback_languages(self, name_type: NameType) -> Sequence[str]:
        ...

    def name_prefixes(self, name_type: NameType) -> FrozenSet[str]:
        ...
