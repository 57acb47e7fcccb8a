"""
通用 (GENERIC) 名字規則配置

精簡版參考規則表：涵蓋常見的西歐語言拼寫，
足以處理一般人名；更完整的規則表請由呼叫端注入。

格式:
- 改寫規則: (pattern, left_context, right_context, (音素候選, ...))
- 猜測規則: (正規表達式, (語言, ...))
"""

from phononame.core.types import NameType

_CONSONANT = "[bcdfgkpqstvxz]"

# 各語言共用（放在語言規則之後）
_COMMON_RULES = [
    ("'", "", "", ("",)),
    ("’", "", "", ("",)),
]


class GenericRuleConfig:
    """通用名字規則配置類別"""

    NAME_TYPE = NameType.GENERIC

    LANGUAGES = ("any", "english", "dutch", "german", "spanish", "french", "italian", "polish")

    FALLBACK_LANGUAGES = ("any",)

    # 通用名字不移除前綴
    NAME_PREFIXES = ()

    # =========================================================================
    # 1. 語言猜測規則
    # =========================================================================
    # 命中的規則語言取聯集；全部未命中時使用 FALLBACK_LANGUAGES
    LANGUAGE_RULES = [
        (r"th|wh|ck$|^kn|ey$|ay$|john", ("english",)),
        (r"ij|aa|uu|oo[^r]", ("dutch",)),
        (r"burg$|berg$|dorf$", ("dutch", "german")),
        (r"sch|tz|mann$|stein$|ß|ä|ö|ü", ("german",)),
        (r"^j[aeiou]", ("dutch", "german", "spanish", "french")),
        (r"ñ|ez$|^ll|rr", ("spanish",)),
        (r"gn", ("french", "italian")),
        (r"eau|aux$|eux$|ç|oi", ("french",)),
        (r"gli|zz|cc[ei]|[aeiou]tti$|ini$", ("italian",)),
        (r"sz|cz|rz|ł|ś|ż|ź|ń|ó|ski$|wicz$", ("polish",)),
        (r"w", ("english", "dutch", "german", "polish")),
    ]

    # =========================================================================
    # 2. 各語言改寫規則（宣告順序即優先順序）
    # =========================================================================
    RULES = {
        # 語言不明時，列出各語言讀法的聯集
        "any": [
            ("au", "", "", ("au", "a", "o", "u")),
            ("lt", "au", "$", ("", "lt")),
            # 語言不明時詞尾 a 可能弱化
            ("a", "", "$", ("a", "i")),
            ("ph", "", "", ("f",)),
            ("sch", "", "", ("S",)),
            ("sh", "", "", ("S",)),
            ("ch", "", "", ("tS", "x", "S")),
            ("ck", "", "", ("k",)),
            ("qu", "", "", ("k", "kv")),
            ("ou", "", "", ("u",)),
            ("ei", "", "", ("aj", "i")),
            ("ie", "", "", ("i",)),
            ("j", "", "", ("i", "dZ", "x", "Z")),
            ("w", "", "", ("v",)),
            ("y", "", "", ("i",)),
            ("c", "", "[eiy]", ("s", "ts", "tS")),
            ("c", "", "", ("k",)),
            ("z", "", "", ("z", "ts")),
        ] + _COMMON_RULES,
        "english": [
            ("th", "", "", ("t",)),
            ("sh", "", "", ("S",)),
            ("ch", "", "", ("tS",)),
            ("ph", "", "", ("f",)),
            ("wh", "", "", ("v",)),
            ("w", "", "", ("v",)),
            ("ck", "", "", ("k",)),
            ("kn", "^", "", ("n",)),
            ("gh", "", "", ("",)),
            ("oo", "", "", ("u",)),
            ("ee", "", "", ("i",)),
            ("ea", "", "", ("i",)),
            ("c", "", "[eiy]", ("s",)),
            ("c", "", "", ("k",)),
            ("qu", "", "", ("kv",)),
            ("h", "[aeiou]", "", ("",)),
            ("y", "", "$", ("i",)),
        ] + _COMMON_RULES,
        "dutch": [
            ("sch", "", "", ("sx",)),
            ("ch", "", "", ("x",)),
            ("ij", "", "", ("ej",)),
            ("oe", "", "", ("u",)),
            ("ui", "", "", ("Yj",)),
            ("uu", "", "", ("ü",)),
            ("u", "", "[^aeiouy]{2}", ("ü",)),
            ("eu", "", "", ("Y",)),
            ("ee", "", "", ("e",)),
            ("ou", "", "", ("au",)),
            ("aa", "", "", ("a",)),
            ("oo", "", "", ("o",)),
            ("j", "", "", ("i",)),
            ("w", "", "", ("v",)),
            ("v", "^", "", ("f", "v")),
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
            ("äu", "", "", ("oj",)),
            ("ä", "", "", ("e",)),
            ("ö", "", "", ("Y",)),
            ("ü", "", "", ("Y",)),
            ("ß", "", "", ("s",)),
            ("z", "", "", ("ts",)),
            ("w", "", "", ("v",)),
            ("v", "", "", ("f", "v")),
            ("j", "", "", ("i",)),
            ("ph", "", "", ("f",)),
            ("qu", "", "", ("kv",)),
        ] + _COMMON_RULES,
        "spanish": [
            ("ch", "", "", ("tS",)),
            ("ll", "", "", ("l", "j")),
            ("ñ", "", "", ("nj",)),
            ("qu", "", "[ei]", ("k",)),
            ("gu", "", "[ei]", ("g",)),
            ("g", "", "[ei]", ("x",)),
            ("j", "", "", ("x",)),
            ("c", "", "[ei]", ("s",)),
            ("c", "", "", ("k",)),
            ("z", "", "", ("s",)),
            ("h", "", "", ("",)),
            ("v", "", "", ("b",)),
            ("y", "", "$", ("i",)),
        ] + _COMMON_RULES,
        "french": [
            ("eau", "", "", ("o",)),
            ("au", "", "", ("o",)),
            ("ou", "", "", ("u",)),
            ("oi", "", "", ("ua",)),
            ("ch", "", "", ("S",)),
            ("gn", "", "", ("nj",)),
            ("g", "", "[eiy]", ("Z",)),
            ("j", "", "", ("Z",)),
            ("qu", "", "", ("k",)),
            ("ç", "", "", ("s",)),
            ("c", "", "[eiy]", ("s",)),
            ("c", "", "", ("k",)),
            ("h", "", "", ("",)),
            ("x", "", "$", ("",)),
            ("s", "", "$", ("",)),
        ] + _COMMON_RULES,
        "italian": [
            ("gli", "", "", ("li",)),
            ("gn", "", "", ("nj",)),
            ("gh", "", "", ("g",)),
            ("g", "", "[ei]", ("dZ",)),
            ("ch", "", "", ("k",)),
            ("sc", "", "[ei]", ("S",)),
            ("c", "", "[ei]", ("tS",)),
            ("c", "", "", ("k",)),
            ("zz", "", "", ("ts", "dz")),
            ("z", "", "", ("ts", "dz")),
            ("h", "", "", ("",)),
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
            ("ś", "", "", ("S",)),
            ("ć", "", "", ("tS",)),
            ("ż", "", "", ("Z",)),
            ("ź", "", "", ("Z",)),
            ("ń", "", "", ("n",)),
            ("ą", "", "", ("on",)),
            ("ę", "", "", ("en",)),
            ("w", "", "", ("v",)),
            ("j", "", "", ("i",)),
        ] + _COMMON_RULES,
    }

    # =========================================================================
    # 3. 最終化規則（與語言無關）
    # =========================================================================
    _COLLAPSE_DOUBLES = [
        ("ss", "", "", ("s",)),
        ("tt", "", "", ("t",)),
        ("ll", "", "", ("l",)),
        ("nn", "", "", ("n",)),
        ("mm", "", "", ("m",)),
        ("rr", "", "", ("r",)),
        ("pp", "", "", ("p",)),
        ("kk", "", "", ("k",)),
    ]

    FINAL_RULES = {
        # APPROX: 合併聽感相近的音素、詞尾清化、弱化母音
        "approx": [
            ("au", "", "", ("D",)),
            ("en", "", _CONSONANT, ("n",)),
            ("e", "", "", ("i",)),
            ("ü", "", "", ("Y", "i")),
            ("ö", "", "", ("Y", "i")),
            ("u", "", "r" + _CONSONANT, ("i", "u")),
            ("Z", "", "", ("z",)),
            ("g", "", "$", ("k",)),
            ("d", "", "$", ("t",)),
            ("b", "", "$", ("p",)),
            ("v", "", "$", ("f",)),
            ("z", "", "$", ("s",)),
        ] + _COLLAPSE_DOUBLES,
        # EXACT: 只統一書寫差異
        "exact": [
            ("ü", "", "", ("Y",)),
            ("ö", "", "", ("Y",)),
            ("ä", "", "", ("e",)),
        ] + _COLLAPSE_DOUBLES,
    }
