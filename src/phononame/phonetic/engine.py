"""
語音編碼引擎 (PhoneticEngine)

把人名轉成一或多個音素字串，用於跨語言、跨書寫系統的名字比對。

處理流程（每次 encode 一次同步完成）:
1. Split: 轉小寫、依單詞邊界切分、依名字類型處理前綴
2. Guess: 每個單詞猜測語言
3. Apply: 每個語言各自套用主要規則，得到有上限的前緣
4. Merge: 依語言宣告順序合併各語言前緣
5. Finalize: 套用與語言無關的最終化規則 (APPROX / EXACT)
6. Join:
   - concatenate=True: 所有單詞交叉乘積、截斷後以 '|' 串接
   - concatenate=False: 每個單詞以 '|' 串接，單詞之間以 '-' 串接

建構時即解析所有需要的規則列表；encode() 不做任何可能失敗的查詢，
對任何字串輸入都不會拋出例外。
"""

from typing import Callable, Dict, List, Optional

from phononame.config import (
    DEFAULT_MAX_PHONEMES,
    EncoderConfig,
    coerce_name_type,
    coerce_rule_type,
    validate_max_phonemes,
)
from phononame.core.engine_interface import EncoderEngine
from phononame.core.errors import ConfigurationError
from phononame.core.protocols.rule_table import RuleTableProtocol
from phononame.core.types import NameType, RuleType
from phononame.router.language_guesser import LanguageGuesser
from phononame.router.name_tokenizer import NameTokenizer
from phononame.rules import get_default_rule_table

from .frontier import Frontier
from .rule_applier import RuleApplier

ALTERNATIVE_SEPARATOR = "|"
WORD_SEPARATOR = "-"


class PhoneticEngine(EncoderEngine):
    """
    Beider-Morse 風格語音編碼引擎

    建構後不可變，可在多執行緒間共用；每次 encode 都建立自己的前緣。

    Args:
        name_type: 名字類型
        rule_type: 規則類型
        concatenate: 多詞名字的串接策略
        max_phonemes: 前緣容量上限（正整數）
        rule_table: 規則表，None 表示使用內建規則表
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼

    Raises:
        ConfigurationError: max_phonemes 非法，或規則表缺少需要的規則

    範例:
        >>> engine = PhoneticEngine(NameType.GENERIC, RuleType.APPROX, True, 10)
        >>> engine.encode("Renault")
        'rinD|rinDlt|rina|rinalt|rino|rinolt|rinu|rinult'
    """

    _engine_name = "phonetic"

    def __init__(
        self,
        name_type: NameType = NameType.GENERIC,
        rule_type: RuleType = RuleType.APPROX,
        concatenate: bool = True,
        max_phonemes: int = DEFAULT_MAX_PHONEMES,
        *,
        rule_table: Optional[RuleTableProtocol] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._init_logger(verbose=verbose, on_timing=on_timing)

        self._name_type = coerce_name_type(name_type)
        self._rule_type = coerce_rule_type(rule_type)
        self._concatenate = bool(concatenate)
        self._max_phonemes = validate_max_phonemes(max_phonemes)

        with self._log_timing("PhoneticEngine.__init__"):
            if rule_table is None:
                rule_table = get_default_rule_table()
            self._rule_table = rule_table
            self._resolve_rules(rule_table)

        self._logger.info(
            f"PhoneticEngine initialized ({self._name_type.name}/{self._rule_type.name}, "
            f"concatenate={self._concatenate}, max_phonemes={self._max_phonemes})"
        )

    @classmethod
    def from_config(cls, config: EncoderConfig, rule_table: Optional[RuleTableProtocol] = None) -> "PhoneticEngine":
        return cls(
            config.name_type,
            config.rule_type,
            config.concatenate,
            config.max_phonemes,
            rule_table=rule_table,
            verbose=config.verbose,
            on_timing=config.on_timing,
        )

    def _resolve_rules(self, table: RuleTableProtocol) -> None:
        name_type, rule_type = self._name_type, self._rule_type
        try:
            languages = tuple(table.languages(name_type))
            appliers: Dict[str, RuleApplier] = {
                language: RuleApplier(table.rules(name_type, rule_type, language), self._max_phonemes)
                for language in languages
            }
            self._finalizer = RuleApplier(table.final_rules(name_type, rule_type), self._max_phonemes)
            self._guesser = LanguageGuesser(
                table.language_rules(name_type),
                languages,
                table.fallback_languages(name_type),
            )
            self._tokenizer = NameTokenizer(
                name_type,
                prefixes=table.name_prefixes(name_type),
                word_boundary=table.word_boundary,
            )
        except KeyError as e:
            raise ConfigurationError(f"Rule table lookup failed: {e.args[0] if e.args else e}") from e

        if not self._guesser.fallback:
            raise ConfigurationError(f"No fallback languages for {name_type.name}")

        # 猜測結果可能出現的語言都必須有規則
        possible = set(self._guesser.fallback)
        for rule in table.language_rules(name_type):
            possible.update(rule.languages)
        missing = sorted(possible - set(appliers))
        if missing:
            raise ConfigurationError(
                f"No {name_type.name}/{rule_type.name} rules for language(s): {', '.join(missing)}"
            )

        self._appliers = appliers
        self._logger.debug(f"Resolved rules for languages: {list(languages)}")

    # ========== 屬性 ==========

    @property
    def name_type(self) -> NameType:
        return self._name_type

    @property
    def rule_type(self) -> RuleType:
        return self._rule_type

    @property
    def concatenate(self) -> bool:
        return self._concatenate

    @property
    def max_phonemes(self) -> int:
        return self._max_phonemes

    @property
    def rule_table(self) -> RuleTableProtocol:
        return self._rule_table

    # ========== 編碼 ==========

    def encode(self, name: str) -> str:
        """
        將名字編碼為音素字串

        Args:
            name: 任意字串（可為空字串或純標點）

        Returns:
            str: 以 '|' / '-' 串接的音素字串；退化輸入得到空字串
        """
        words = self._tokenizer.tokenize(name)
        if not words:
            return ""

        frontiers = [self.encode_word(word) for word in words]

        if self._concatenate:
            result = Frontier.product(frontiers, self._max_phonemes).join(ALTERNATIVE_SEPARATOR)
        else:
            result = WORD_SEPARATOR.join(f.join(ALTERNATIVE_SEPARATOR) for f in frontiers)

        self._logger.debug(f"[Encode] {name!r} -> {result!r}")
        return result

    def encode_word(self, word: str) -> Frontier:
        """
        單一（已正規化）單詞: 猜測語言 -> 各語言套用規則 -> 合併 -> 最終化
        """
        languages = self.guess_languages(word)
        raw = Frontier.merge(
            (self._appliers[language].apply(word) for language in languages),
            self._max_phonemes,
        )
        final = self._finalizer.apply_all(raw)

        self._logger.debug(f"  [Word] {word!r} languages={list(languages)} raw={list(raw)} final={list(final)}")
        return final

    def guess_languages(self, word: str) -> List[str]:
        return list(self._guesser.guess(word))

    def __repr__(self) -> str:
        return (
            f"PhoneticEngine(name_type={self._name_type.name}, rule_type={self._rule_type.name}, "
            f"concatenate={self._concatenate}, max_phonemes={self._max_phonemes})"
        )
