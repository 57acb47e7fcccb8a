"""
語音編碼核心

- Frontier: 有上限、有序、去重的候選集合
- RuleApplier: 單一規則列表的改寫器
- PhoneticEngine: 分詞、語言猜測、規則套用、合併與串接
"""

from .engine import ALTERNATIVE_SEPARATOR, WORD_SEPARATOR, PhoneticEngine
from .frontier import Frontier
from .rule_applier import RuleApplier, Segment

__all__ = [
    "PhoneticEngine",
    "Frontier",
    "RuleApplier",
    "Segment",
    "ALTERNATIVE_SEPARATOR",
    "WORD_SEPARATOR",
]
