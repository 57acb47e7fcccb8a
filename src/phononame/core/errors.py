"""
例外類別

- ConfigurationError: 建構期的設定錯誤（max_phonemes 非法、規則表缺漏、規則格式錯誤）
- EncoderError: 字串編碼器收到非字串輸入

encode() 對任何字串輸入都不會拋出例外；錯誤只會出現在建構階段。
"""


class PhononameError(Exception):
    """phononame 所有例外的基類"""


class ConfigurationError(PhononameError, ValueError):
    """設定或規則表不合法，於建構時立即拋出"""


class EncoderError(PhononameError, TypeError):
    """編碼器收到無法處理的輸入型別"""
