"""
音节语法 / 解析模块

在任意文本中识别拼音和注音音节，输出音节与普通文本交错的列表。

三种模式（见 ReadMode）：
- exclusive: 全部必须是音节（空白和标点除外），否则抛出 ParseFailure
- words: 按空白/标点切词，整词可解析才当作音节，否则整词原样保留
- mixed: 词内逐字匹配，能识别为音节的部分就识别，其余原样保留

每个词表按长度降序编译为正则（re 的分支按顺序取第一个匹配），
保证 "iang" 在 "ia" 之前尝试。
"""

import re
import unicodedata
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from . import tables
from .config import ReadMode
from .diacritics import mark, unmark
from .errors import ParseFailure
from .logging import get_logger
from .syllable import Pinyin, Zhuyin

logger = get_logger(__name__)

# 切分字符：空白之外的中英文标点
SPLIT_PUNCTUATION = frozenset(",.;:?!'\"()，。；：？！、（）「」《》")

_TONE_DIGIT = re.compile(r"[1-4]")


def is_split(char: str) -> bool:
    return char.isspace() or char in SPLIT_PUNCTUATION


class WordList:
    """
    词表匹配器

    词表按长度降序编译为一个正则分支，match 返回 (匹配文本, 对应值, 结束位置)。
    """

    def __init__(self, entries: Mapping[str, Any]):
        self._values: Dict[str, Any] = dict(entries)
        self.words = tables.longest_first(self._values)
        pattern = "|".join(re.escape(w) for w in self.words)
        self._pattern = re.compile(pattern) if self.words else None

    def match(self, text: str, pos: int) -> Optional[Tuple[str, Any, int]]:
        if self._pattern is None:
            return None
        m = self._pattern.match(text, pos)
        if m is None:
            return None
        word = m.group()
        return word, self._values[word], m.end()


Match = Optional[Tuple[Union[Pinyin, Zhuyin], int]]
Matcher = Callable[[str, int], Match]


# ===== 拼音语法 =====

def _base_letter(char: str) -> str:
    return unicodedata.normalize("NFD", char)[0].lower()


def _identity(s: str) -> str:
    return s


class _PinyinVariant:
    """
    一种大小写写法下的拼音语法

    - 小写: ni3, zhong
    - 首字母大写: Ni3, Zhong, Yi
    - 全大写: NI3, ZHONG
    """

    def __init__(self, initial_case, final_case, standalone_case):
        self.initials = WordList({
            initial_case(i): initial_case(i) for i in tables.PINYIN_INITIALS
        })
        self.sibilants = frozenset(initial_case(i) for i in tables.SIBILANT_INITIALS)

        self.combination = self._numbered_finals(tables.PINYIN_COMBINATION_FINALS, final_case)
        self.standalone = self._numbered_finals(tables.PINYIN_STANDALONE_FINALS, standalone_case)
        self.marked_combination = self._marked_finals(tables.PINYIN_COMBINATION_FINALS, final_case)
        self.marked_standalone = self._marked_finals(tables.PINYIN_STANDALONE_FINALS, standalone_case)

    @staticmethod
    def _numbered_finals(finals, case) -> WordList:
        return WordList({
            case(f): case(tables.canonical_final(f)) for f in finals
        })

    @staticmethod
    def _marked_finals(finals, case) -> WordList:
        # 只含 1-4 声，无调写法由数字标调语法处理
        entries = {}
        for final in finals:
            for tone in range(1, 5):
                marked = unicodedata.normalize("NFC", case(mark(final, tone)))
                entries[marked] = (case(tables.canonical_final(final)), tone)
        return WordList(entries)

    def _base(self, text: str, pos: int, combination: WordList, standalone: WordList):
        m = self.initials.match(text, pos)
        if m is not None:
            initial, _, end = m
            # zh/ch/sh/r/z/c/s 后不接 i 开头的韵母
            blocked = (
                initial in self.sibilants
                and end < len(text)
                and _base_letter(text[end]) == "i"
            )
            if not blocked:
                f = combination.match(text, end)
                if f is not None:
                    return initial, f[1], f[2]

        s = standalone.match(text, pos)
        if s is not None:
            return "", s[1], s[2]
        return None

    def match_numbered(self, text: str, pos: int, with_tone: bool = True) -> Match:
        base = self._base(text, pos, self.combination, self.standalone)
        if base is None:
            return None
        initial, final, end = base
        tone = 0
        if with_tone:
            t = _TONE_DIGIT.match(text, end)
            if t is not None:
                tone = int(t.group())
                end = t.end()
        return Pinyin(initial, final, tone), end

    def match_marked(self, text: str, pos: int) -> Match:
        base = self._base(text, pos, self.marked_combination, self.marked_standalone)
        if base is None:
            return None
        initial, (final, tone), end = base
        return Pinyin(initial, final, tone), end


_PINYIN_VARIANTS = (
    _PinyinVariant(_identity, _identity, _identity),
    _PinyinVariant(str.capitalize, _identity, str.capitalize),
    _PinyinVariant(str.upper, str.upper, str.upper),
)


def _longest(matches) -> Match:
    # 结束位置最远者优先，相同时取先出现的
    best = None
    for m in matches:
        if m is not None and (best is None or m[1] > best[1]):
            best = m
    return best


def match_numbered_pinyin(text: str, pos: int) -> Match:
    """在 pos 处匹配一个数字标调（或无调）拼音音节"""
    return _longest(variant.match_numbered(text, pos) for variant in _PINYIN_VARIANTS)


def match_marked_pinyin(text: str, pos: int) -> Match:
    """在 pos 处匹配一个符号标调拼音音节"""
    return _longest(variant.match_marked(text, pos) for variant in _PINYIN_VARIANTS)


def match_pinyin(text: str, pos: int) -> Match:
    """
    在 pos 处匹配一个拼音音节

    各种大小写写法都尝试，取最长的匹配：首字母大写语法会把 "NI3" 的 "N"
    识别为独立韵母 n。同样长度时符号标调优先。
    """
    return _longest((match_marked_pinyin(text, pos), match_numbered_pinyin(text, pos)))


# ===== 注音语法 =====

class _ZhuyinGrammar:
    """音节 = (独立韵母 | 声母 韵母 | 独立声母) 声调?"""

    def __init__(self):
        standalone_finals = {
            f: f for f in tables.ZHUYIN_STANDALONE_FINALS
            if f not in tables.ZHUYIN_STANDALONE_INITIALS
        }
        self.standalone_finals = WordList(standalone_finals)
        self.initials = WordList({i: i for i in tables.ZHUYIN_INITIALS})
        self.combination = WordList({f: f for f in tables.ZHUYIN_COMBINATION_FINALS})
        self.standalone_initials = WordList({i: i for i in tables.ZHUYIN_STANDALONE_INITIALS})
        self.tones = WordList({
            glyph: tone for tone, glyph in enumerate(tables.ZHUYIN_TONES) if glyph
        })

    def _base(self, text: str, pos: int):
        f = self.standalone_finals.match(text, pos)
        if f is not None:
            return "", f[1], f[2]

        i = self.initials.match(text, pos)
        if i is not None:
            initial, _, end = i
            # 独立声母不能与 ㄧ 组合
            if not (initial in tables.ZHUYIN_STANDALONE_INITIALS and text.startswith("ㄧ", end)):
                c = self.combination.match(text, end)
                if c is not None:
                    return initial, c[1], c[2]

        s = self.standalone_initials.match(text, pos)
        if s is not None:
            return "", s[1], s[2]
        return None

    def match(self, text: str, pos: int) -> Match:
        base = self._base(text, pos)
        if base is None:
            return None
        initial, final, end = base
        tone = 1
        t = self.tones.match(text, end)
        if t is not None:
            tone, end = t[1], t[2]
        return Zhuyin(initial, final, tone), end


_ZHUYIN = _ZhuyinGrammar()


def match_zhuyin(text: str, pos: int) -> Match:
    """在 pos 处匹配一个注音音节"""
    return _ZHUYIN.match(text, pos)


# ===== 解析模式 =====

def _split_end(text: str, pos: int) -> int:
    while pos < len(text) and is_split(text[pos]):
        pos += 1
    return pos


def _token_end(text: str, pos: int) -> int:
    while pos < len(text) and not is_split(text[pos]):
        pos += 1
    return pos


def _match_word(text: str, pos: int, match: Matcher):
    """
    贪心匹配一整个词的音节序列

    只有在音节之后紧跟切分字符或输入结束时才接受。
    """
    syllables = []
    while pos < len(text):
        m = match(text, pos)
        if m is None:
            break
        syllable, pos = m
        syllables.append(syllable)

    if syllables and (pos == len(text) or is_split(text[pos])):
        return syllables, pos
    return None


def _read_exclusive(text: str, match: Matcher) -> list:
    result = []
    pos = 0
    while pos < len(text):
        end = _split_end(text, pos)
        if end > pos:
            result.append(text[pos:end])
            pos = end
            continue

        word = _match_word(text, pos, match)
        if word is None:
            logger.debug(f"exclusive 解析失败: {text[pos:]!r}")
            raise ParseFailure(text[pos:])
        syllables, pos = word
        result.extend(syllables)
    return result


def _read_words(text: str, match: Matcher) -> list:
    result = []
    pos = 0
    while pos < len(text):
        end = _split_end(text, pos)
        if end > pos:
            result.append(text[pos:end])
            pos = end
            continue

        word = _match_word(text, pos, match)
        if word is None:
            end = _token_end(text, pos)
            result.append(text[pos:end])
            pos = end
        else:
            syllables, pos = word
            result.extend(syllables)
    return result


def _read_mixed(text: str, match: Matcher) -> list:
    result = []
    pos = 0
    while pos < len(text):
        end = _split_end(text, pos)
        if end > pos:
            result.append(text[pos:end])
            pos = end
            continue

        m = match(text, pos)
        if m is not None:
            syllable, pos = m
            result.append(syllable)
            continue

        # 累积普通文本，直到出现可识别的音节
        start = pos
        pos += 1
        while pos < len(text) and not is_split(text[pos]) and match(text, pos) is None:
            pos += 1
        result.append(text[start:pos])
    return result


_READERS = {
    ReadMode.EXCLUSIVE: _read_exclusive,
    ReadMode.WORDS: _read_words,
    ReadMode.MIXED: _read_mixed,
}


def _read(text: str, mode, match: Matcher) -> list:
    reader = _READERS[ReadMode(mode)]
    return reader(unicodedata.normalize("NFC", text), match)


def read_pinyin(text: str, mode: Union[ReadMode, str] = ReadMode.EXCLUSIVE) -> List[Union[Pinyin, str]]:
    """
    读取含拼音的字符串

    >>> read_pinyin("Ni3hao3!")
    [Pinyin(initial='N', final='i', tone=3), Pinyin(initial='h', final='ao', tone=3), '!']

    Raises:
        ParseFailure: exclusive 模式下出现无法解析的词
    """
    return _read(text, mode, match_pinyin)


def read_zhuyin(text: str, mode: Union[ReadMode, str] = ReadMode.EXCLUSIVE) -> List[Union[Zhuyin, str]]:
    """读取含注音的字符串，模式同 read_pinyin"""
    return _read(text, mode, match_zhuyin)


# ===== 单音节 =====

def _parse_single(text: str, match: Matcher):
    text = unicodedata.normalize("NFC", text)
    m = match(text, 0)
    if m is None:
        raise ParseFailure(text)
    syllable, end = m
    if end != len(text):
        raise ParseFailure(text[end:])
    return syllable


def parse_numbered_syllable(text: str) -> Pinyin:
    """解析恰好一个数字标调音节"""
    return _parse_single(text, match_numbered_pinyin)


def parse_pinyin_syllable(text: str) -> Pinyin:
    """解析恰好一个拼音音节（符号或数字标调）"""
    return _parse_single(text, match_pinyin)


def _match_unmarked(text: str, pos: int) -> Match:
    return _longest(variant.match_numbered(text, pos, with_tone=False) for variant in _PINYIN_VARIANTS)


def parse_marked_syllable(text: str) -> Pinyin:
    """
    解析恰好一个符号标调音节

    先用 unmark 取出声调（多个声调符号抛出 AmbiguousMark），
    再把无调部分切分为声母和韵母。
    """
    word, tone = unmark(text)
    syllable = _parse_single(word, _match_unmarked)
    return Pinyin(syllable.initial, syllable.final, tone)


def parse_zhuyin_syllable(text: str) -> Zhuyin:
    """解析恰好一个注音音节"""
    return _parse_single(text, match_zhuyin)
