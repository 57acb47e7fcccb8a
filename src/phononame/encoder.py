"""
字串編碼器介面 (BeiderMorseEncoder)

包裝 PhoneticEngine，提供一般字串編碼器的行為：
- encode(None) 回傳 None
- 非字串輸入拋出 EncoderError
- 參數可調整；每次調整都會重建（不可變的）引擎並重新驗證
"""

from typing import Any, Optional

from .config import DEFAULT_MAX_PHONEMES, coerce_name_type, coerce_rule_type, validate_max_phonemes
from .core.errors import EncoderError
from .core.protocols.rule_table import RuleTableProtocol
from .core.types import NameType, RuleType
from .phonetic.engine import PhoneticEngine


class BeiderMorseEncoder:
    """
    Beider-Morse 字串編碼器

    範例:
        >>> encoder = BeiderMorseEncoder()
        >>> encoder.rule_type = RuleType.EXACT
        >>> encoder.encode("SntJohn-Smith")
        'sntjonsmit'
    """

    def __init__(
        self,
        name_type: NameType = NameType.GENERIC,
        rule_type: RuleType = RuleType.APPROX,
        concatenate: bool = True,
        max_phonemes: int = DEFAULT_MAX_PHONEMES,
        *,
        rule_table: Optional[RuleTableProtocol] = None,
    ):
        self._rule_table = rule_table
        self._engine = PhoneticEngine(name_type, rule_type, concatenate, max_phonemes, rule_table=rule_table)

    def _rebuild(self, **changes: Any) -> None:
        settings = {
            "name_type": self._engine.name_type,
            "rule_type": self._engine.rule_type,
            "concatenate": self._engine.concatenate,
            "max_phonemes": self._engine.max_phonemes,
        }
        settings.update(changes)
        self._engine = PhoneticEngine(rule_table=self._rule_table, **settings)

    @property
    def engine(self) -> PhoneticEngine:
        return self._engine

    @property
    def name_type(self) -> NameType:
        return self._engine.name_type

    @name_type.setter
    def name_type(self, value: NameType) -> None:
        self._rebuild(name_type=coerce_name_type(value))

    @property
    def rule_type(self) -> RuleType:
        return self._engine.rule_type

    @rule_type.setter
    def rule_type(self, value: RuleType) -> None:
        self._rebuild(rule_type=coerce_rule_type(value))

    @property
    def concatenate(self) -> bool:
        return self._engine.concatenate

    @concatenate.setter
    def concatenate(self, value: bool) -> None:
        self._rebuild(concatenate=bool(value))

    @property
    def max_phonemes(self) -> int:
        return self._engine.max_phonemes

    @max_phonemes.setter
    def max_phonemes(self, value: int) -> None:
        self._rebuild(max_phonemes=validate_max_phonemes(value))

    def encode(self, source: Any) -> Optional[str]:
        """
        編碼任意輸入

        Raises:
            EncoderError: source 不是字串也不是 None
        """
        if source is None:
            return None
        if not isinstance(source, str):
            raise EncoderError(
                f"BeiderMorseEncoder encode parameter is not of type str: {type(source).__name__}"
            )
        return self._engine.encode(source)
