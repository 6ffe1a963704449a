"""
hanyutils - 汉字、拼音、注音互转

常用入口：

    >>> import hanyutils
    >>> hanyutils.to_marked_pinyin("你好")
    'nǐhǎo'
    >>> hanyutils.number_pinyin("nǐhǎo")
    'ni3hao3'
    >>> hanyutils.pinyin_to_zhuyin("ni3hao3")
    'ㄋㄧˇㄏㄠˇ'
"""

__version__ = "0.1.0"

from typing import Optional, Union

from hanyutils.engine import (
    HanyuError,
    ParseFailure,
    AmbiguousMark,
    InvalidTone,
    UnmappableSyllable,
    ReadMode,
    ConverterConfig,
    DEFAULT_CONFIG,
    Pinyin,
    Zhuyin,
    Hanzi,
    common_pronunciation,
    taiwan_pronunciation,
    all_pronunciations,
    setup_logging,
)
from hanyutils.engine import converter as _converter
from hanyutils.engine import hanzi as _hanzi
from hanyutils.engine import parser as _parser
from hanyutils.engine import syllable as _syllable

Mode = Optional[Union[ReadMode, str]]


def _mode(mode: Mode) -> ReadMode:
    return ReadMode(mode) if mode is not None else DEFAULT_CONFIG.default_mode


# ===== 汉字 =====

def characters(text: str) -> bool:
    """text 是否只由汉字组成（忽略空白）"""
    return _hanzi.characters(text)


def _hanzi_pinyin(text: str, converter):
    return _hanzi.to_pinyin(_hanzi.read(text), converter)


def to_marked_pinyin(text: str, converter=common_pronunciation) -> str:
    """
    汉字 → 符号标调拼音，非汉字原样保留

    >>> to_marked_pinyin("你好。我是你的哥哥")
    'nǐhǎo。wǒshìnǐdegēgē'
    """
    return _syllable.marked(_hanzi_pinyin(text, converter))


def to_numbered_pinyin(text: str, converter=common_pronunciation) -> str:
    """汉字 → 数字标调拼音"""
    return _syllable.numbered(_hanzi_pinyin(text, converter))


def to_zhuyin(text: str, converter=common_pronunciation) -> str:
    """汉字 → 注音"""
    return _syllable.zhuyin_string(_converter.from_pinyin(_hanzi_pinyin(text, converter)))


# ===== 拼音 =====

def mark_pinyin(text: str, mode: Mode = None) -> str:
    """
    数字标调 → 符号标调，已是符号标调的音节保持不变

    >>> mark_pinyin("Ni3hao3, hello!")
    'Nǐhǎo, hello!'
    """
    return _syllable.marked(_parser.read_pinyin(text, _mode(mode)))


def number_pinyin(text: str, mode: Mode = None) -> str:
    """符号标调 → 数字标调"""
    return _syllable.numbered(_parser.read_pinyin(text, _mode(mode)))


def pinyin_to_zhuyin(text: str, mode: Mode = None) -> str:
    """拼音（任意标调方式）→ 注音"""
    items = _parser.read_pinyin(text, _mode(mode))
    return _syllable.zhuyin_string(_converter.from_pinyin(items))


# ===== 注音 =====

def zhuyin_to_marked_pinyin(text: str, mode: Mode = None) -> str:
    """
    注音 → 符号标调拼音

    >>> zhuyin_to_marked_pinyin("ㄋㄧˇㄏㄠˇ")
    'nǐhǎo'
    """
    items = _parser.read_zhuyin(text, _mode(mode))
    return _syllable.marked(_converter.to_pinyin(items))


def zhuyin_to_numbered_pinyin(text: str, mode: Mode = None) -> str:
    """注音 → 数字标调拼音"""
    items = _parser.read_zhuyin(text, _mode(mode))
    return _syllable.numbered(_converter.to_pinyin(items))


__all__ = [
    "__version__",
    # 转换
    "to_marked_pinyin",
    "to_numbered_pinyin",
    "to_zhuyin",
    "mark_pinyin",
    "number_pinyin",
    "pinyin_to_zhuyin",
    "zhuyin_to_marked_pinyin",
    "zhuyin_to_numbered_pinyin",
    "characters",
    # 类型
    "Pinyin",
    "Zhuyin",
    "Hanzi",
    "ReadMode",
    "ConverterConfig",
    "common_pronunciation",
    "taiwan_pronunciation",
    "all_pronunciations",
    # 异常
    "HanyuError",
    "ParseFailure",
    "AmbiguousMark",
    "InvalidTone",
    "UnmappableSyllable",
    # 日志
    "setup_logging",
]
