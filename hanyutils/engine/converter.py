"""
拼音 ↔ 注音 转换

按 "是否有真正的声母" 选择组合韵母表或独立韵母表，而不是看哪张表能查到：
两张表的键有重叠（如 ㄢ、ㄦ），查错表会得到错误结果。

不支持：儿化后缀 "ㄦ˙" 不映射为拼音 "r"，而是按普通音节转换为轻声 er，
见 tests/test_converter.py 的 test_erhua_suffix_unsupported。
"""

from typing import Sequence, Union

from . import tables
from .errors import UnmappableSyllable
from .syllable import Pinyin, Zhuyin


def _true_initial(zhuyin: Zhuyin) -> bool:
    """注音音节是否有真正的声母（单独成音节的 ㄓ 等不算）"""
    return bool(zhuyin.initial) and bool(zhuyin.final)


def zhuyin_to_pinyin(zhuyin: Zhuyin) -> Pinyin:
    """
    单个注音音节 → 拼音，声调数字保持不变

    >>> zhuyin_to_pinyin(Zhuyin("ㄋ", "ㄧ", 3))
    Pinyin(initial='n', final='i', tone=3)
    """
    if _true_initial(zhuyin):
        if zhuyin.initial in tables.ZHUYIN_STANDALONE_INITIALS and zhuyin.final.startswith("ㄧ"):
            raise UnmappableSyllable(zhuyin.initial, zhuyin.final, "zhuyin")
        initial = tables.ZHUYIN_INITIALS.get(zhuyin.initial)
        final = tables.ZHUYIN_COMBINATION_FINALS.get(zhuyin.final)
        if initial is None or final is None:
            raise UnmappableSyllable(zhuyin.initial, zhuyin.final, "zhuyin")
        # ㄐㄩ → ju
        if initial in tables.UMLAUT_INITIALS and final.startswith("v"):
            final = "u" + final[1:]
        return Pinyin(initial, final, zhuyin.tone)

    key = zhuyin.final or zhuyin.initial
    final = tables.ZHUYIN_STANDALONE_FINALS.get(key)
    if final is None:
        raise UnmappableSyllable(zhuyin.initial, zhuyin.final, "zhuyin")
    return Pinyin("", final, zhuyin.tone)


def pinyin_to_zhuyin(pinyin: Pinyin) -> Zhuyin:
    """
    单个拼音音节 → 注音，声调数字保持不变

    拼音轻声 (0) 对应注音 "˙"，拼音一声 (1) 对应注音无符号。
    """
    if not pinyin.is_valid():
        raise UnmappableSyllable(pinyin.initial, pinyin.final, "pinyin")

    initial = pinyin.initial.lower()
    final = tables.canonical_final(pinyin.final.lower())

    if initial:
        # ju/qu/xu 中的 u 是 ü
        if initial in tables.UMLAUT_INITIALS and final.startswith("u"):
            final = "v" + final[1:]
        zhuyin_initial = tables.PINYIN_TO_ZHUYIN_INITIALS[initial]
        zhuyin_final = tables.PINYIN_TO_ZHUYIN_COMBINATION_FINALS.get(final)
    else:
        zhuyin_initial = ""
        zhuyin_final = tables.PINYIN_TO_ZHUYIN_STANDALONE_FINALS.get(final)

    # m/n/ng/hm/hng 没有注音写法
    if zhuyin_final is None:
        raise UnmappableSyllable(pinyin.initial, pinyin.final, "pinyin")
    return Zhuyin(zhuyin_initial, zhuyin_final, pinyin.tone)


def to_pinyin(items: Union[Zhuyin, Sequence[Union[Zhuyin, str]]]):
    """注音音节或注音序列 → 拼音；序列中的字符串原样保留"""
    if isinstance(items, Zhuyin):
        return zhuyin_to_pinyin(items)
    return [zhuyin_to_pinyin(i) if isinstance(i, Zhuyin) else i for i in items]


def from_pinyin(items: Union[Pinyin, Sequence[Union[Pinyin, str]]]):
    """拼音音节或拼音序列 → 注音；序列中的字符串原样保留"""
    if isinstance(items, Pinyin):
        return pinyin_to_zhuyin(items)
    return [pinyin_to_zhuyin(i) if isinstance(i, Pinyin) else i for i in items]
