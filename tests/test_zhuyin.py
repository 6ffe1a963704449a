"""
注音音节与解析单元测试
"""

import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

import hanyutils
from hanyutils.engine import (
    InvalidTone,
    ParseFailure,
    UnmappableSyllable,
    Zhuyin,
    read_zhuyin,
    zhuyin_string,
)


class TestZhuyinSyllable:
    """Zhuyin 数据模型"""

    def test_default_tone(self):
        """注音默认一声"""
        assert Zhuyin("ㄇ", "ㄚ").tone == 1

    def test_render(self):
        assert Zhuyin("ㄋ", "ㄧ", 3).render() == "ㄋㄧˇ"
        assert Zhuyin("ㄇ", "ㄚ", 1).render() == "ㄇㄚ"
        assert Zhuyin("ㄉ", "ㄜ", 0).render() == "ㄉㄜ˙"
        assert str(Zhuyin("", "ㄓ", 4)) == "ㄓˋ"

    def test_invalid_tone(self):
        with pytest.raises(InvalidTone):
            Zhuyin("ㄋ", "ㄧ", 7)

    def test_invalid_syllable(self):
        """独立声母不能与 ㄧ 组合"""
        z = Zhuyin("ㄕ", "ㄧ", 3)
        assert not z.is_valid()
        with pytest.raises(UnmappableSyllable):
            z.render()

    def test_sequence_rendering(self):
        items = [Zhuyin("ㄋ", "ㄧ", 3), Zhuyin("ㄏ", "ㄠ", 3), "!"]
        assert zhuyin_string(items) == "ㄋㄧˇㄏㄠˇ!"


class TestSingleSyllable:
    """单音节解析"""

    @pytest.mark.parametrize("text,expected", [
        ("ㄋㄧˇ", Zhuyin("ㄋ", "ㄧ", 3)),
        ("ㄓㄠˊ", Zhuyin("ㄓ", "ㄠ", 2)),
        ("ㄓˋ", Zhuyin("", "ㄓ", 4)),
        ("ㄌㄧㄤˊ", Zhuyin("ㄌ", "ㄧㄤ", 2)),
        ("ㄩㄢˊ", Zhuyin("", "ㄩㄢ", 2)),
        ("ㄦˊ", Zhuyin("", "ㄦ", 2)),
        ("ㄉㄜ˙", Zhuyin("ㄉ", "ㄜ", 0)),
        ("ㄇㄚ", Zhuyin("ㄇ", "ㄚ", 1)),
        ("ㄝ", Zhuyin("", "ㄝ", 1)),
    ])
    def test_from_string(self, text, expected):
        assert Zhuyin.from_string(text) == expected

    def test_standalone_initial_before_i(self):
        """ㄕ 不与 ㄧ 组合，剩余部分报错"""
        with pytest.raises(ParseFailure) as exc:
            Zhuyin.from_string("ㄕㄧˇ")
        assert exc.value.remainder == "ㄧˇ"

    def test_incomplete(self):
        """声母后缺少韵母"""
        with pytest.raises(ParseFailure) as exc:
            Zhuyin.from_string("ㄐˇ")
        assert exc.value.remainder == "ㄐˇ"


class TestReadModes:
    """解析模式"""

    def test_exclusive(self):
        assert read_zhuyin("ㄋㄧˇ ㄏㄠˇ") == [Zhuyin("ㄋ", "ㄧ", 3), " ", Zhuyin("ㄏ", "ㄠ", 3)]

    def test_exclusive_no_spaces(self):
        assert read_zhuyin("ㄋㄧˇㄏㄠˇ") == [Zhuyin("ㄋ", "ㄧ", 3), Zhuyin("ㄏ", "ㄠ", 3)]

    def test_exclusive_failure(self):
        with pytest.raises(ParseFailure) as exc:
            read_zhuyin("ㄋㄧˇ hello")
        assert exc.value.remainder == "hello"

    def test_words(self):
        assert read_zhuyin("ㄋㄧˇ hello", "words") == [Zhuyin("ㄋ", "ㄧ", 3), " ", "hello"]

    def test_mixed(self):
        assert read_zhuyin("test ㄓㄨyu", "mixed") == ["test", " ", Zhuyin("ㄓ", "ㄨ", 1), "yu"]

    def test_class_method(self):
        assert Zhuyin.read("ㄇㄚ", "words") == [Zhuyin("ㄇ", "ㄚ", 1)]


class TestDecode:
    """注音 → 拼音"""

    @pytest.mark.parametrize("zhuyin,pinyin", [
        ("ㄐㄩ˙", "ju"),
        ("ㄌㄩˇ", "lv3"),
        ("ㄓㄠˊ", "zhao2"),
        ("ㄓˋ", "zhi4"),
        ("ㄌㄥ", "leng1"),
        ("ㄕㄨㄟˇ", "shui3"),
        ("ㄌㄧㄡˊ", "liu2"),
        ("ㄧˊ", "yi2"),
        ("ㄇㄧㄣˊ", "min2"),
        ("ㄨㄥˊ", "weng2"),
        ("ㄨˊ", "wu2"),
        ("ㄩ", "yu1"),
        ("ㄩㄝˇ", "yue3"),
        ("ㄩㄢˊ", "yuan2"),
        ("ㄌㄩㄢˋ", "lvan4"),
        ("ㄌㄢˇ", "lan3"),
        ("ㄦˊ", "er2"),
        ("ㄒㄩㄝˊ", "xue2"),
    ])
    def test_numbered(self, zhuyin, pinyin):
        assert hanyutils.zhuyin_to_numbered_pinyin(zhuyin) == pinyin

    def test_marked(self):
        assert hanyutils.zhuyin_to_marked_pinyin("ㄋㄧˇㄏㄠˇ") == "nǐhǎo"

    def test_mixed_text(self):
        assert hanyutils.zhuyin_to_marked_pinyin("test ㄓㄨyu", "mixed") == "test zhūyu"

    def test_incomplete_syllable_in_text(self):
        with pytest.raises(ParseFailure):
            hanyutils.zhuyin_to_numbered_pinyin("ㄐˇ", "exclusive")
