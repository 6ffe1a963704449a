"""
声调符号模块

- mark: 无调韵母 + 声调 → 带调字符串
- unmark: 带调字符串 → (无调韵母, 声调)
- 注音声调符号与声调数字互转

标调规则：a > e/ê > o > iu/ui 标在第二个字母 > 唯一的元音；
m/n/ng/hm/hng 标在 m 或 n 上。
输出统一为 NFC（有预组合字符时用预组合字符，否则基字母 + 组合附加符）。
"""

import unicodedata
from typing import Optional, Tuple

from .errors import AmbiguousMark, InvalidTone
from .tables import ZHUYIN_TONES

# 声调 → 组合附加符
TONE_MARKS = {
    1: "\u0304",  # macron  ā
    2: "\u0301",  # acute   á
    3: "\u030c",  # caron   ǎ
    4: "\u0300",  # grave   à
}

MARK_TONES = {mark: tone for tone, mark in TONE_MARKS.items()}

_VOWELS = "aeiouüê"
_NASALS = "mn"


def _check_tone(tone: int) -> None:
    if not isinstance(tone, int) or isinstance(tone, bool) or not 0 <= tone <= 4:
        raise InvalidTone(tone)


def _select_index(word: str) -> Optional[int]:
    """选择承载声调符号的字母位置"""
    lower = word.lower()

    for vowel in ("a", "e", "ê", "o"):
        idx = lower.find(vowel)
        if idx != -1:
            return idx

    # iu/ui 标在第二个字母，单元音标在本身：都是最后一个元音
    vowel_positions = [i for i, c in enumerate(lower) if c in _VOWELS]
    if vowel_positions:
        return vowel_positions[-1]

    # m, n, ng, hm, hng
    nasal_positions = [i for i, c in enumerate(lower) if c in _NASALS]
    if nasal_positions:
        return nasal_positions[0]

    return None


def mark(final: str, tone: int) -> str:
    """
    给韵母加声调符号

    Args:
        final: 无调韵母（可用 v 表示 ü，大小写保留）
        tone: 0-4，0 为轻声（不标调）

    Returns:
        NFC 规范化后的带调字符串

    >>> mark("ve", 4)
    'üè'
    >>> mark("m", 1)
    'm̄'
    """
    _check_tone(tone)
    word = unicodedata.normalize("NFC", final.replace("v", "ü").replace("V", "Ü"))
    if tone == 0:
        return word

    idx = _select_index(word)
    if idx is None:
        return word

    # 先分解，避免 ê/ü 上的符号顺序错乱
    head = unicodedata.normalize("NFD", word[:idx + 1])
    marked = head + TONE_MARKS[tone] + word[idx + 1:]
    return unicodedata.normalize("NFC", marked)


def unmark(text: str) -> Tuple[str, int]:
    """
    去掉声调符号，返回 (无调字符串, 声调)

    第 0 个码位不检查：合法音节不会以声调符号开头。
    找到第二个声调符号时抛出 AmbiguousMark。
    没有声调符号时声调为 0。
    """
    decomposed = unicodedata.normalize("NFD", text)

    position = None
    tone = 0
    for i in range(1, len(decomposed)):
        if decomposed[i] in MARK_TONES:
            position = i
            tone = MARK_TONES[decomposed[i]]
            break

    if position is None:
        return unicodedata.normalize("NFC", text), 0

    remainder = decomposed[position + 1:]
    if any(c in MARK_TONES for c in remainder):
        raise AmbiguousMark(text)

    stripped = decomposed[:position] + remainder
    return unicodedata.normalize("NFC", stripped), tone


def has_tone_mark(text: str) -> bool:
    """字符串中是否含有声调符号"""
    return any(c in MARK_TONES for c in unicodedata.normalize("NFD", text))


# ===== 注音声调 =====

def zhuyin_tone_glyph(tone: int) -> str:
    """声调数字 → 注音声调符号（一声为空字符串）"""
    _check_tone(tone)
    return ZHUYIN_TONES[tone]


def zhuyin_tone_index(glyph: str) -> int:
    """注音声调符号 → 声调数字"""
    try:
        return ZHUYIN_TONES.index(glyph)
    except ValueError:
        raise ValueError(f"Unknown zhuyin tone glyph: {glyph!r}") from None
