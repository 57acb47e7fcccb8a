"""
Protocol 定義
"""

from .rule_table import RuleTableProtocol

__all__ = ["RuleTableProtocol"]
