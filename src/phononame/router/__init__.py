"""
路由模組

負責把名字切成單詞，並為每個單詞猜測語言。
"""

from .language_guesser import LanguageGuesser
from .name_tokenizer import DEFAULT_WORD_BOUNDARY, NameTokenizer

__all__ = [
    "LanguageGuesser",
    "NameTokenizer",
    "DEFAULT_WORD_BOUNDARY",
]
