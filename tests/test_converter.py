"""
拼音 ↔ 注音 转换单元测试
"""

import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

import hanyutils
from hanyutils.engine import (
    Pinyin,
    UnmappableSyllable,
    Zhuyin,
    from_pinyin,
    pinyin_to_zhuyin,
    to_pinyin,
    zhuyin_to_pinyin,
)


class TestPinyinToZhuyin:
    """拼音 → 注音"""

    def test_basic(self):
        assert pinyin_to_zhuyin(Pinyin("n", "i", 3)) == Zhuyin("ㄋ", "ㄧ", 3)
        assert pinyin_to_zhuyin(Pinyin("zh", "ong", 1)) == Zhuyin("ㄓ", "ㄨㄥ", 1)

    def test_standalone_sibilants(self):
        """整体认读音节转为单独的声母符号"""
        text = "cì zì sì zhī chī shì rì"
        assert hanyutils.pinyin_to_zhuyin(text).split(" ") == [
            "ㄘˋ", "ㄗˋ", "ㄙˋ", "ㄓ", "ㄔ", "ㄕˋ", "ㄖˋ",
        ]

    def test_tone_convention(self):
        """拼音轻声对应 ˙，拼音一声对应无符号"""
        assert pinyin_to_zhuyin(Pinyin("d", "e", 0)) == Zhuyin("ㄉ", "ㄜ", 0)
        assert pinyin_to_zhuyin(Pinyin("m", "a", 1)).render() == "ㄇㄚ"

    def test_jqx_u_is_umlaut(self):
        """ju/qu/xu 的 u 是 ü"""
        assert pinyin_to_zhuyin(Pinyin("j", "u", 1)) == Zhuyin("ㄐ", "ㄩ", 1)
        assert pinyin_to_zhuyin(Pinyin("x", "ue", 2)) == Zhuyin("ㄒ", "ㄩㄝ", 2)
        assert pinyin_to_zhuyin(Pinyin("q", "uan", 2)) == Zhuyin("ㄑ", "ㄩㄢ", 2)
        assert pinyin_to_zhuyin(Pinyin("j", "un", 4)) == Zhuyin("ㄐ", "ㄩㄣ", 4)

    def test_umlaut_finals(self):
        assert pinyin_to_zhuyin(Pinyin("l", "v", 4)) == Zhuyin("ㄌ", "ㄩ", 4)
        assert pinyin_to_zhuyin(Pinyin("l", "ue", 4)) == Zhuyin("ㄌ", "ㄩㄝ", 4)

    def test_standalone_finals(self):
        assert pinyin_to_zhuyin(Pinyin("", "yuan", 2)) == Zhuyin("", "ㄩㄢ", 2)
        assert pinyin_to_zhuyin(Pinyin("", "wong", 1)) == Zhuyin("", "ㄨㄥ", 1)
        assert pinyin_to_zhuyin(Pinyin("", "ê", 1)) == Zhuyin("", "ㄝ", 1)

    def test_capitalized(self):
        assert pinyin_to_zhuyin(Pinyin("N", "i", 3)) == Zhuyin("ㄋ", "ㄧ", 3)
        assert pinyin_to_zhuyin(Pinyin("", "Ai", 4)) == Zhuyin("", "ㄞ", 4)

    @pytest.mark.parametrize("final", ["m", "n", "ng", "hm", "hng"])
    def test_nasals_unmappable(self, final):
        """m/n/ng/hm/hng 没有注音写法"""
        with pytest.raises(UnmappableSyllable):
            pinyin_to_zhuyin(Pinyin("", final, 2))

    def test_invalid_syllable(self):
        with pytest.raises(UnmappableSyllable):
            pinyin_to_zhuyin(Pinyin("zh", "i", 1))


class TestZhuyinToPinyin:
    """注音 → 拼音"""

    def test_basic(self):
        assert zhuyin_to_pinyin(Zhuyin("ㄋ", "ㄧ", 3)) == Pinyin("n", "i", 3)

    def test_standalone_initial(self):
        assert zhuyin_to_pinyin(Zhuyin("", "ㄓ", 1)) == Pinyin("", "zhi", 1)

    def test_erhua_suffix_unsupported(self):
        """儿化后缀 ㄦ˙ 不转为 r，按普通音节得到轻声 er"""
        assert zhuyin_to_pinyin(Zhuyin("", "ㄦ", 0)) == Pinyin("", "er", 0)
        assert hanyutils.zhuyin_to_numbered_pinyin("ㄦ˙") == "er"
        assert hanyutils.zhuyin_to_marked_pinyin("ㄏㄨㄚ ㄦ˙") == "huā er"

    def test_jqx(self):
        assert zhuyin_to_pinyin(Zhuyin("ㄐ", "ㄩ", 1)) == Pinyin("j", "u", 1)
        assert zhuyin_to_pinyin(Zhuyin("ㄌ", "ㄩ", 3)) == Pinyin("l", "v", 3)

    def test_unmappable(self):
        with pytest.raises(UnmappableSyllable):
            zhuyin_to_pinyin(Zhuyin("ㄕ", "ㄧ", 3))


class TestSequences:
    """音节与字符串混合序列"""

    def test_from_pinyin_keeps_strings(self):
        items = [Pinyin("n", "i", 3), ", ", Pinyin("h", "ao", 3)]
        assert from_pinyin(items) == [Zhuyin("ㄋ", "ㄧ", 3), ", ", Zhuyin("ㄏ", "ㄠ", 3)]

    def test_to_pinyin_keeps_strings(self):
        items = [Zhuyin("ㄋ", "ㄧ", 3), "!"]
        assert to_pinyin(items) == [Pinyin("n", "i", 3), "!"]

    def test_single_value(self):
        assert from_pinyin(Pinyin("m", "a", 1)) == Zhuyin("ㄇ", "ㄚ", 1)
        assert to_pinyin(Zhuyin("ㄇ", "ㄚ", 1)) == Pinyin("m", "a", 1)

    @pytest.mark.parametrize("text", ["ni3hao3", "zhong1guo2", "lv4se4", "xue2xiao4", "shi4jie4"])
    def test_roundtrip(self, text):
        zhuyin = hanyutils.pinyin_to_zhuyin(text)
        assert hanyutils.zhuyin_to_numbered_pinyin(zhuyin) == text

    def test_text_with_prose(self):
        assert hanyutils.pinyin_to_zhuyin("Ni3hao3, hello!") == "ㄋㄧˇㄏㄠˇ, hello!"
