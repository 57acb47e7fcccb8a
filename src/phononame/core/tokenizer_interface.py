"""
分詞器抽象基類
"""

from abc import ABC, abstractmethod
from typing import List


class Tokenizer(ABC):
    """將輸入字串切分為單詞列表"""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        pass
