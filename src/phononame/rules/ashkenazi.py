"""
阿什肯納茲 (ASHKENAZI) 名字規則配置

以中東歐拼寫為主（德語、波蘭語、俄語羅馬化、匈牙利語、英語）。
"""

from phononame.core.types import NameType

_CONSONANT = "[bcdfgkpqstvxz]"

_COMMON_RULES = [
    ("'", "", "", ("",)),
    ("’", "", "", ("",)),
]


class AshkenaziRuleConfig:
    """阿什肯納茲名字規則配置類別"""

    NAME_TYPE = NameType.ASHKENAZI

    LANGUAGES = ("any", "english", "german", "hungarian", "polish", "russian")

    FALLBACK_LANGUAGES = ("any",)

    NAME_PREFIXES = ("bar", "ben", "da", "de", "van", "von")

    # =========================================================================
    # 1. 語言猜測規則
    # =========================================================================
    LANGUAGE_RULES = [
        (r"th|wh|ck$", ("english",)),
        (r"sch|tz|mann$|stein$|berg$|baum$|ä|ö|ü", ("german",)),
        (r"cs|gy|zs|ny$", ("hungarian",)),
        (r"sz|cz|rz|ł|ski$|wicz$", ("polish",)),
        (r"ov$|ova$|sky$|vich$|kh|zh", ("russian",)),
        (r"w", ("german", "polish")),
    ]

    # =========================================================================
    # 2. 各語言改寫規則
    # =========================================================================
    RULES = {
        "any": [
            ("au", "", "", ("au", "o", "u")),
            ("b", "", "", ("b", "v")),
            ("sch", "", "", ("S",)),
            ("sh", "", "", ("S",)),
            ("ch", "", "", ("x", "tS")),
            ("ck", "", "", ("k",)),
            ("ph", "", "", ("f",)),
            ("tz", "", "", ("ts",)),
            ("ei", "", "", ("aj", "ej")),
            ("ie", "", "", ("i",)),
            ("oi", "", "", ("oj",)),
            ("j", "", "", ("i", "dZ")),
            ("w", "", "", ("v",)),
            ("y", "", "", ("i",)),
            ("c", "", "[eiy]", ("ts", "s")),
            ("c", "", "", ("k",)),
            ("z", "", "", ("z", "ts")),
        ] + _COMMON_RULES,
        "english": [
            ("th", "", "", ("t",)),
            ("sh", "", "", ("S",)),
            ("ch", "", "", ("tS",)),
            ("ck", "", "", ("k",)),
            ("w", "", "", ("v",)),
            ("h", "[aeiou]", "", ("",)),
            ("c", "", "[eiy]", ("s",)),
            ("c", "", "", ("k",)),
            ("y", "", "$", ("i",)),
        ] + _COMMON_RULES,
        "german": [
            ("tsch", "", "", ("tS",)),
            ("tz", "", "", ("ts",)),
            ("sch", "", "", ("S",)),
            ("ch", "", "", ("x",)),
            ("ck", "", "", ("k",)),
            ("ei", "", "", ("aj",)),
            ("eu", "", "", ("oj",)),
            ("ie", "", "", ("i",)),
            ("ä", "", "", ("e",)),
            ("ö", "", "", ("Y",)),
            ("ü", "", "", ("Y",)),
            ("z", "", "", ("ts",)),
            ("w", "", "", ("v",)),
            ("v", "", "", ("f",)),
            ("j", "", "", ("i",)),
        ] + _COMMON_RULES,
        "hungarian": [
            ("cs", "", "", ("tS",)),
            ("sz", "", "", ("s",)),
            ("zs", "", "", ("Z",)),
            ("gy", "", "", ("dj",)),
            ("ny", "", "", ("nj",)),
            ("s", "", "", ("S",)),
            ("c", "", "", ("ts",)),
            ("ö", "", "", ("Y",)),
            ("ü", "", "", ("Y",)),
            ("j", "", "", ("i",)),
        ] + _COMMON_RULES,
        "polish": [
            ("szcz", "", "", ("StS",)),
            ("sz", "", "", ("S",)),
            ("cz", "", "", ("tS",)),
            ("ch", "", "", ("x",)),
            ("c", "", "", ("ts",)),
            ("rz", "", "", ("Z", "rz")),
            ("ł", "", "", ("l", "v")),
            ("ó", "", "", ("u",)),
            ("w", "", "", ("v",)),
            ("j", "", "", ("i",)),
        ] + _COMMON_RULES,
        "russian": [
            ("shch", "", "", ("StS",)),
            ("kh", "", "", ("x",)),
            ("zh", "", "", ("Z",)),
            ("sh", "", "", ("S",)),
            ("ch", "", "", ("tS",)),
            ("ts", "", "", ("ts",)),
            ("yu", "", "", ("iu",)),
            ("ya", "", "", ("ia",)),
            ("y", "", "$", ("i",)),
            ("w", "", "", ("v",)),
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
        ("mm", "", "", ("m",)),
        ("rr", "", "", ("r",)),
    ]

    FINAL_RULES = {
        # 意第緒語影響下 o/u 不分
        "approx": [
            ("au", "", "", ("D",)),
            ("a", "", "", ("a", "o")),
            ("en", "", _CONSONANT, ("n",)),
            ("e", "", "", ("i",)),
            ("o", "", "", ("o", "u")),
            ("ü", "", "", ("Y", "i")),
            ("ö", "", "", ("Y", "i")),
            ("g", "", "$", ("k",)),
            ("d", "", "$", ("t",)),
            ("b", "", "$", ("p",)),
            ("z", "", "$", ("s",)),
        ] + _COLLAPSE_DOUBLES,
        "exact": [
            ("ü", "", "", ("Y",)),
            ("ö", "", "", ("Y",)),
            ("ä", "", "", ("e",)),
        ] + _COLLAPSE_DOUBLES,
    }
