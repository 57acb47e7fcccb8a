"""
規則表模組

提供靜態規則表實作與內建的精簡參考規則。

使用方式:
    from phononame.rules import get_default_rule_table

    table = get_default_rule_table()
    table.languages(NameType.GENERIC)
"""

from functools import lru_cache

from phononame.utils.logger import log_timing

from .ashkenazi import AshkenaziRuleConfig
from .generic import GenericRuleConfig
from .sephardic import SephardicRuleConfig
from .table import NameTypeRules, StaticRuleTable


@lru_cache(maxsize=1)
@log_timing("get_default_rule_table")
def get_default_rule_table() -> StaticRuleTable:
    """取得內建規則表（只建立一次）"""
    return StaticRuleTable(
        NameTypeRules.from_config(config)
        for config in (GenericRuleConfig, AshkenaziRuleConfig, SephardicRuleConfig)
    )


__all__ = [
    "StaticRuleTable",
    "NameTypeRules",
    "GenericRuleConfig",
    "AshkenaziRuleConfig",
    "SephardicRuleConfig",
    "get_default_rule_table",
]
