"""
语法表模块

拼音与注音的声母、韵母词表，以及两套记音之间的对应关系。
所有表在导入时构建一次，之后只读。

韵母分为两类：
- 组合韵母 (combination)：跟在声母后面的写法，如 "i", "uo", "ian"
- 独立韵母 (standalone)：没有声母时的写法，如 "yi", "wo", "yan"

zhi/chi/shi/ri/zi/ci/si 作为独立韵母处理，而不是 声母 + "i"。
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple


def _frozen(mapping: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


def _invert(mapping: Mapping[str, str]) -> Mapping[str, str]:
    # 多个键映射到同一个值时保留第一个
    inverted: Dict[str, str] = {}
    for key, value in mapping.items():
        inverted.setdefault(value, key)
    return MappingProxyType(inverted)


def longest_first(words: Iterable[str]) -> Tuple[str, ...]:
    """按长度降序排序（同长度按字典序，保证结果稳定）"""
    return tuple(sorted(set(words), key=lambda w: (-len(w), w)))


# ===== 拼音 =====

PINYIN_INITIALS: FrozenSet[str] = frozenset("""
    b  p  m  f
    d  t  n  l
    g  k  h
    j  q  x
    zh ch sh r
    z  c  s
""".split())

# 这些声母后不能接以 i 开头的韵母（zhi 等是独立韵母）
SIBILANT_INITIALS: FrozenSet[str] = frozenset("zh ch sh r z c s".split())

# j/q/x 后的 u 实际是 ü
UMLAUT_INITIALS: FrozenSet[str] = frozenset("j q x".split())

# 组合韵母，ü 和 v 两种写法都接受
PINYIN_COMBINATION_FINALS: FrozenSet[str] = frozenset("""
    i  e  a  o  ei  ai  ou  ao  en  an  ong  eng  ang
    ie ia       iu  iao     in  ian iong ing  iang
    u  uo ua    ui  uai     un  uan           uang
    ue
    ü  üe                   ün  üan
    v  ve                   vn  van
""".split())

PINYIN_STANDALONE_FINALS: FrozenSet[str] = frozenset("""
    a   o   e   ê   ai  ei  ao  ou  an  en  ang  eng  er
    yi  ya  yo  ye  yao you yan yin yang ying yong
    wu  wa  wo  wai wei wan wen wang weng wong
    yu  yue yuan yun
    zhi chi shi ri  zi  ci  si
    m   n   ng  hm  hng
""".split())

# 拼音韵母的规范写法：ü 一律存为 v
def canonical_final(final: str) -> str:
    return final.replace("ü", "v").replace("Ü", "V")


# ===== 注音 =====

ZHUYIN_TONES: Tuple[str, ...] = ("˙", "", "ˊ", "ˇ", "ˋ")

ZHUYIN_INITIALS: Mapping[str, str] = _frozen({
    "ㄅ": "b",
    "ㄆ": "p",
    "ㄇ": "m",
    "ㄈ": "f",
    "ㄉ": "d",
    "ㄊ": "t",
    "ㄋ": "n",
    "ㄌ": "l",
    "ㄍ": "g",
    "ㄎ": "k",
    "ㄏ": "h",
    "ㄐ": "j",
    "ㄑ": "q",
    "ㄒ": "x",
    "ㄓ": "zh",
    "ㄔ": "ch",
    "ㄕ": "sh",
    "ㄖ": "r",
    "ㄗ": "z",
    "ㄘ": "c",
    "ㄙ": "s",
})

# 可单独成音节的声母，不能与 ㄧ 组合
ZHUYIN_STANDALONE_INITIALS: FrozenSet[str] = frozenset("ㄓ ㄔ ㄕ ㄖ ㄗ ㄘ ㄙ".split())

# 跟在声母后的韵母 → 拼音组合韵母
ZHUYIN_COMBINATION_FINALS: Mapping[str, str] = _frozen({
    "ㄧ": "i",
    "ㄨ": "u",
    "ㄩ": "v",
    "ㄚ": "a",
    "ㄛ": "o",
    "ㄜ": "e",
    "ㄞ": "ai",
    "ㄟ": "ei",
    "ㄠ": "ao",
    "ㄡ": "ou",
    "ㄢ": "an",
    "ㄣ": "en",
    "ㄤ": "ang",
    "ㄥ": "eng",
    "ㄧㄚ": "ia",
    "ㄨㄚ": "ua",
    "ㄧㄥ": "ing",
    "ㄧㄤ": "iang",
    "ㄧㄝ": "ie",
    "ㄨㄛ": "uo",
    "ㄨㄥ": "ong",
    "ㄨㄤ": "uang",
    "ㄧㄠ": "iao",
    "ㄨㄞ": "uai",
    "ㄩㄝ": "ve",
    "ㄩㄥ": "iong",
    "ㄧㄡ": "iu",
    "ㄨㄟ": "ui",
    "ㄧㄢ": "ian",
    "ㄨㄢ": "uan",
    "ㄩㄢ": "van",
    "ㄧㄣ": "in",
    "ㄨㄣ": "un",
    "ㄩㄣ": "vn",
})

# 无声母时的韵母 → 拼音独立韵母
ZHUYIN_STANDALONE_FINALS: Mapping[str, str] = _frozen({
    "ㄧ": "yi",
    "ㄨ": "wu",
    "ㄩ": "yu",
    "ㄧㄚ": "ya",
    "ㄨㄚ": "wa",
    "ㄧㄛ": "yo",
    "ㄧㄥ": "ying",
    "ㄧㄤ": "yang",
    "ㄧㄝ": "ye",
    "ㄨㄛ": "wo",
    "ㄨㄥ": "weng",
    "ㄨㄤ": "wang",
    "ㄧㄠ": "yao",
    "ㄨㄞ": "wai",
    "ㄩㄝ": "yue",
    "ㄩㄥ": "yong",
    "ㄧㄡ": "you",
    "ㄨㄟ": "wei",
    "ㄧㄢ": "yan",
    "ㄨㄢ": "wan",
    "ㄩㄢ": "yuan",
    "ㄧㄣ": "yin",
    "ㄨㄣ": "wen",
    "ㄩㄣ": "yun",
    # 单独成音节的声母，当作韵母处理
    "ㄓ": "zhi",
    "ㄔ": "chi",
    "ㄕ": "shi",
    "ㄖ": "ri",
    "ㄗ": "zi",
    "ㄘ": "ci",
    "ㄙ": "si",
    # 与组合写法相同的独立韵母
    "ㄚ": "a",
    "ㄛ": "o",
    "ㄜ": "e",
    "ㄝ": "ê",
    "ㄞ": "ai",
    "ㄟ": "ei",
    "ㄠ": "ao",
    "ㄡ": "ou",
    "ㄢ": "an",
    "ㄣ": "en",
    "ㄤ": "ang",
    "ㄥ": "eng",
    "ㄦ": "er",
})

# 反向表（拼音 → 注音）
PINYIN_TO_ZHUYIN_INITIALS: Mapping[str, str] = _invert(ZHUYIN_INITIALS)

PINYIN_TO_ZHUYIN_COMBINATION_FINALS: Mapping[str, str] = MappingProxyType({
    **_invert(ZHUYIN_COMBINATION_FINALS),
    # lue/nue 是 lüe/nüe 的常见写法
    "ue": "ㄩㄝ",
})

PINYIN_TO_ZHUYIN_STANDALONE_FINALS: Mapping[str, str] = MappingProxyType({
    **_invert(ZHUYIN_STANDALONE_FINALS),
    "wong": "ㄨㄥ",
})


# ===== 合法性检查 =====

def is_valid_pinyin(initial: str, final: str) -> bool:
    """(声母, 韵母) 是否属于拼音语法"""
    initial = initial.lower()
    final = canonical_final(final.lower())
    if not initial:
        return final in PINYIN_STANDALONE_FINALS
    if initial not in PINYIN_INITIALS:
        return False
    if initial in SIBILANT_INITIALS and final.startswith("i"):
        return False
    return final in PINYIN_COMBINATION_FINALS


def is_valid_zhuyin(initial: str, final: str) -> bool:
    """(声母, 韵母) 是否属于注音语法"""
    if not initial or (initial in ZHUYIN_STANDALONE_INITIALS and not final):
        return (final or initial) in ZHUYIN_STANDALONE_FINALS
    if initial not in ZHUYIN_INITIALS:
        return False
    if initial in ZHUYIN_STANDALONE_INITIALS and final.startswith("ㄧ"):
        return False
    return final in ZHUYIN_COMBINATION_FINALS
