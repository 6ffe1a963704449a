"""
异常定义

解析、声调提取、拼音/注音转换失败时抛出的异常。
所有异常都继承 HanyuError，CLI 和 API 层统一捕获。
"""


class HanyuError(Exception):
    """hanyutils 异常基类"""


class ParseFailure(HanyuError, ValueError):
    """
    解析失败（exclusive 模式或单音节解析）

    Attributes:
        remainder: 未能解析的剩余输入
    """

    def __init__(self, remainder: str):
        self.remainder = remainder
        super().__init__(f'Error occurred when attempting to parse: "{remainder}"')


class AmbiguousMark(HanyuError, ValueError):
    """一个音节中出现多个声调符号（通常是多个音节被拼接在一起）"""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Multiple tone marks present in '{text}'")


class InvalidTone(HanyuError, ValueError):
    """声调不在 0-4 范围内"""

    def __init__(self, tone):
        self.tone = tone
        super().__init__(f"Invalid tone {tone!r}, expected an integer in 0..4")


class UnmappableSyllable(HanyuError, ValueError):
    """(声母, 韵母) 组合不在语法表中，无法渲染或转换"""

    def __init__(self, initial: str, final: str, notation: str = "pinyin"):
        self.initial = initial
        self.final = final
        self.notation = notation
        super().__init__(
            f"Cannot map {notation} syllable with initial {initial!r} and final {final!r}"
        )
