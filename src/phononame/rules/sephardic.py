"""
塞法迪 (SEPHARDIC) 名字規則配置

以伊比利亞、義大利、法語拼寫與希伯來語羅馬化為主。
"""

from phononame.core.types import NameType

_COMMON_RULES = [
    ("'", "", "", ("",)),
    ("’", "", "", ("",)),
]


class SephardicRuleConfig:
    """塞法迪名字規則配置類別"""

    NAME_TYPE = NameType.SEPHARDIC

    LANGUAGES = ("any", "french", "hebrew", "italian", "portuguese", "spanish")

    FALLBACK_LANGUAGES = ("any",)

    NAME_PREFIXES = (
        "al", "el", "da", "dal", "de", "del", "dela", "della",
        "des", "di", "do", "dos", "du", "van", "von",
    )

    # =========================================================================
    # 1. 語言猜測規則
    # =========================================================================
    LANGUAGE_RULES = [
        (r"eau|aux$|eux$|oi", ("french",)),
        (r"ç", ("french", "portuguese")),
        (r"kh|tz$|^ha|^ben", ("hebrew",)),
        (r"gli|zz|cc[ei]|ini$", ("italian",)),
        (r"ão|ões|lh|nh", ("portuguese",)),
        (r"ñ|ez$|^ll", ("spanish",)),
    ]

    # =========================================================================
    # 2. 各語言改寫規則
    # =========================================================================
    RULES = {
        "any": [
            # 單獨的阿拉伯語冠詞可省略
            ("al", "^", "$", ("", "al")),
            ("ch", "", "", ("S", "tS", "k")),
            ("sh", "", "", ("S",)),
            ("ph", "", "", ("f",)),
            ("qu", "", "", ("k",)),
            ("ou", "", "", ("u",)),
            ("j", "", "", ("x", "Z", "dZ")),
            ("c", "", "[eiy]", ("s", "tS")),
            ("c", "", "", ("k",)),
            ("h", "", "", ("", "h")),
            ("v", "", "", ("v", "b")),
            ("y", "", "", ("i",)),
            ("z", "", "", ("z", "s")),
        ] + _COMMON_RULES,
        "french": [
            ("eau", "", "", ("o",)),
            ("au", "", "", ("o",)),
            ("ou", "", "", ("u",)),
            ("oi", "", "", ("ua",)),
            ("ch", "", "", ("S",)),
            ("j", "", "", ("Z",)),
            ("ç", "", "", ("s",)),
            ("c", "", "[eiy]", ("s",)),
            ("c", "", "", ("k",)),
            ("h", "", "", ("",)),
            ("s", "", "$", ("",)),
        ] + _COMMON_RULES,
        "hebrew": [
            ("kh", "", "", ("x",)),
            ("ch", "", "", ("x",)),
            ("tz", "", "", ("ts",)),
            ("sh", "", "", ("S",)),
            ("w", "", "", ("v",)),
            ("y", "", "", ("i",)),
        ] + _COMMON_RULES,
        "italian": [
            ("gli", "", "", ("li",)),
            ("gn", "", "", ("nj",)),
            ("ch", "", "", ("k",)),
            ("c", "", "[ei]", ("tS",)),
            ("c", "", "", ("k",)),
            ("zz", "", "", ("ts", "dz")),
            ("z", "", "", ("ts", "dz")),
            ("h", "", "", ("",)),
        ] + _COMMON_RULES,
        "portuguese": [
            ("ão", "", "", ("aun",)),
            ("ões", "", "", ("ois",)),
            ("lh", "", "", ("li",)),
            ("nh", "", "", ("nj",)),
            ("ch", "", "", ("S",)),
            ("ç", "", "", ("s",)),
            ("j", "", "", ("Z",)),
            ("h", "", "", ("",)),
        ] + _COMMON_RULES,
        "spanish": [
            ("ch", "", "", ("tS",)),
            ("ll", "", "", ("l", "j")),
            ("ñ", "", "", ("nj",)),
            ("qu", "", "[ei]", ("k",)),
            ("j", "", "", ("x",)),
            ("c", "", "[ei]", ("s",)),
            ("c", "", "", ("k",)),
            ("z", "", "", ("s",)),
            ("h", "", "", ("",)),
            ("v", "", "", ("b",)),
        ] + _COMMON_RULES,
    }

    # =========================================================================
    # 3. 最終化規則
    # =========================================================================
    _COLLAPSE_DOUBLES = [
        ("ss", "", "", ("s",)),
        ("tt", "", "", ("t",)),
        ("ll", "", "", ("l",)),
        ("nn", "", "", ("n",)),
        ("rr", "", "", ("r",)),
    ]

    FINAL_RULES = {
        "approx": [
            ("au", "", "", ("D",)),
            ("e", "", "", ("i",)),
            ("o", "", "", ("o", "u")),
            ("b", "", "", ("b", "v")),
            ("Z", "", "", ("z",)),
            ("d", "", "$", ("t",)),
            ("z", "", "$", ("s",)),
        ] + _COLLAPSE_DOUBLES,
        "exact": list(_COLLAPSE_DOUBLES),
    }
