"""
汉字 → 拼音

读音数据来自 pypinyin：第一个读音作为常用读音，其余作为异读。
pypinyin 没有台湾读音数据，pron_tw 始终为 None。
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, Optional, Sequence, Tuple, Union

from pypinyin import Style, pinyin

from .errors import HanyuError
from .logging import get_logger
from .syllable import Pinyin

logger = get_logger(__name__)


@dataclass(frozen=True)
class Hanzi:
    """
    单个汉字及其读音

    Attributes:
        char: 汉字
        pron: 常用读音
        pron_tw: 台湾读音（无数据时为 None）
        alt: 其他读音
    """
    char: str
    pron: Pinyin
    pron_tw: Optional[Pinyin] = None
    alt: Tuple[Pinyin, ...] = ()


HanziList = List[Union[Hanzi, str]]
Converter = Callable[[Hanzi], Union[Pinyin, List[Union[Pinyin, str]]]]


def _readings(char: str) -> List[Pinyin]:
    result = []
    for reading in pinyin(char, style=Style.TONE, heteronym=True, errors='ignore'):
        for text in reading:
            try:
                syllable = Pinyin.from_marked(text)
            except HanyuError as e:
                logger.warning(f"跳过无法解析的读音 {char} -> {text!r}: {e}")
                continue
            if syllable not in result:
                result.append(syllable)
    return result


@lru_cache(maxsize=8192)
def lookup(char: str) -> Optional[Hanzi]:
    """
    查询单个汉字，不是已知汉字时返回 None

    >>> lookup("好").pron.marked()
    'hǎo'
    """
    if len(char) != 1:
        return None
    readings = _readings(char)
    if not readings:
        return None
    return Hanzi(char, readings[0], None, tuple(readings[1:]))


def is_character(char: str) -> bool:
    return lookup(char) is not None


def characters(text: str) -> bool:
    """text 中除空白外的每个字符是否都是已知汉字"""
    chars = [c for c in text if not c.isspace()]
    return bool(chars) and all(is_character(c) for c in chars)


def read(text: str) -> HanziList:
    """
    把字符串拆成汉字与普通文本交错的列表，相邻的普通字符合并

    >>> [h.char if isinstance(h, Hanzi) else h for h in read("你好, hi")]
    ['你', '好', ', hi']
    """
    result: HanziList = []
    for char in text:
        hanzi = lookup(char)
        if hanzi is not None:
            result.append(hanzi)
        elif result and isinstance(result[-1], str):
            result[-1] += char
        else:
            result.append(char)
    return result


def common_pronunciation(hanzi: Hanzi) -> Pinyin:
    return hanzi.pron


def taiwan_pronunciation(hanzi: Hanzi) -> Pinyin:
    """台湾读音，没有时回退到常用读音"""
    return hanzi.pron_tw or hanzi.pron


def all_pronunciations(hanzi: Hanzi) -> List[Union[Pinyin, str]]:
    """
    全部读音

    只有一个读音时返回 [pron]，否则返回 ["[ ", pron, " | ", alt1, ..., " ]"]
    """
    if not hanzi.alt:
        return [hanzi.pron]
    result: List[Union[Pinyin, str]] = ["[ ", hanzi.pron]
    for alt in hanzi.alt:
        result.extend([" | ", alt])
    result.append(" ]")
    return result


def to_pinyin(items: Sequence[Union[Hanzi, str]], converter: Converter = common_pronunciation) -> List[Union[Pinyin, str]]:
    """
    汉字序列 → 拼音序列，普通文本原样保留

    converter 返回列表时展开到结果中。
    """
    result: List[Union[Pinyin, str]] = []
    for item in items:
        if not isinstance(item, Hanzi):
            result.append(item)
            continue
        converted = converter(item)
        if isinstance(converted, list):
            result.extend(converted)
        else:
            result.append(converted)
    return result
