"""
音节数据模型

Pinyin 和 Zhuyin 两种音节值类型，以及音节/字符串混合序列的渲染。

声调约定：
- Pinyin: 0 为轻声（不标调），1-4 标调
- Zhuyin: 1 为一声（不加符号），0 为轻声 "˙"
"""

from dataclasses import dataclass
from typing import List, Sequence, Union

from . import diacritics
from .errors import InvalidTone, UnmappableSyllable
from .tables import canonical_final, is_valid_pinyin, is_valid_zhuyin


def _validate_tone(tone) -> None:
    if not isinstance(tone, int) or isinstance(tone, bool) or not 0 <= tone <= 4:
        raise InvalidTone(tone)


@dataclass(frozen=True)
class Pinyin:
    """
    拼音音节

    Attributes:
        initial: 声母（可为空，保留输入的大小写）
        final: 无调韵母，ü 统一存为 v
        tone: 0-4，0 为轻声
    """
    initial: str = ""
    final: str = ""
    tone: int = 0

    def __post_init__(self):
        _validate_tone(self.tone)
        object.__setattr__(self, "final", canonical_final(self.final))

    @classmethod
    def create(cls, initial: str, final: str, tone: int = 0) -> "Pinyin":
        return cls(initial, final, tone)

    @classmethod
    def from_numbered(cls, text: str) -> "Pinyin":
        """解析单个数字标调音节，如 "ni3" """
        from .parser import parse_numbered_syllable
        return parse_numbered_syllable(text)

    @classmethod
    def from_marked(cls, text: str) -> "Pinyin":
        """解析单个符号标调音节，如 "nǐ"；多个声调符号抛出 AmbiguousMark"""
        from .parser import parse_marked_syllable
        return parse_marked_syllable(text)

    @classmethod
    def from_string(cls, text: str) -> "Pinyin":
        """解析单个音节（先按符号标调，再按数字标调）"""
        from .parser import parse_pinyin_syllable
        return parse_pinyin_syllable(text)

    @classmethod
    def read(cls, text: str, mode: str = "exclusive") -> List[Union["Pinyin", str]]:
        from .parser import read_pinyin
        return read_pinyin(text, mode)

    @property
    def word(self) -> str:
        return self.initial + self.final

    def is_valid(self) -> bool:
        return is_valid_pinyin(self.initial, self.final)

    def _check(self) -> None:
        if not self.is_valid():
            raise UnmappableSyllable(self.initial, self.final, "pinyin")

    def numbered(self) -> str:
        """数字标调：ni3, lve4；轻声不加数字"""
        self._check()
        if self.tone == 0:
            return self.word
        return f"{self.word}{self.tone}"

    def marked(self) -> str:
        """符号标调：nǐ, lüè"""
        self._check()
        return self.initial + diacritics.mark(self.final, self.tone)

    def __str__(self) -> str:
        return self.marked()


@dataclass(frozen=True)
class Zhuyin:
    """
    注音音节

    单独成音节的声母（ㄓ 等）存为 initial="", final="ㄓ"。
    """
    initial: str = ""
    final: str = ""
    tone: int = 1

    def __post_init__(self):
        _validate_tone(self.tone)

    @classmethod
    def create(cls, initial: str, final: str, tone: int = 1) -> "Zhuyin":
        return cls(initial, final, tone)

    @classmethod
    def from_string(cls, text: str) -> "Zhuyin":
        """解析单个注音音节；失败时 ParseFailure.remainder 为未解析部分"""
        from .parser import parse_zhuyin_syllable
        return parse_zhuyin_syllable(text)

    @classmethod
    def read(cls, text: str, mode: str = "exclusive") -> List[Union["Zhuyin", str]]:
        from .parser import read_zhuyin
        return read_zhuyin(text, mode)

    def is_valid(self) -> bool:
        return is_valid_zhuyin(self.initial, self.final)

    def render(self) -> str:
        if not self.is_valid():
            raise UnmappableSyllable(self.initial, self.final, "zhuyin")
        return self.initial + self.final + diacritics.zhuyin_tone_glyph(self.tone)

    def __str__(self) -> str:
        return self.render()


Syllable = Union[Pinyin, Zhuyin]
PinyinList = List[Union[Pinyin, str]]
ZhuyinList = List[Union[Zhuyin, str]]


def _as_sequence(items) -> Sequence:
    if isinstance(items, (Pinyin, Zhuyin, str)):
        return [items]
    return items


def numbered(items: Union[Pinyin, Sequence[Union[Pinyin, str]]]) -> str:
    """
    拼音序列 → 数字标调字符串，非拼音文本原样保留

    >>> numbered([Pinyin("N", "i", 3), Pinyin("h", "ao", 3), "!"])
    'Ni3hao3!'
    """
    return "".join(
        item.numbered() if isinstance(item, Pinyin) else item
        for item in _as_sequence(items)
    )


def marked(items: Union[Pinyin, Sequence[Union[Pinyin, str]]]) -> str:
    """拼音序列 → 符号标调字符串，非拼音文本原样保留"""
    return "".join(
        item.marked() if isinstance(item, Pinyin) else item
        for item in _as_sequence(items)
    )


def zhuyin_string(items: Union[Zhuyin, Sequence[Union[Zhuyin, str]]]) -> str:
    """注音序列 → 字符串"""
    return "".join(
        item.render() if isinstance(item, Zhuyin) else item
        for item in _as_sequence(items)
    )
