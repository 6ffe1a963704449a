from .errors import HanyuError, ParseFailure, AmbiguousMark, InvalidTone, UnmappableSyllable
from .config import ReadMode, ConverterConfig, DEFAULT_CONFIG
from .syllable import Pinyin, Zhuyin, numbered, marked, zhuyin_string
from .diacritics import mark, unmark
from .parser import read_pinyin, read_zhuyin
from .converter import pinyin_to_zhuyin, zhuyin_to_pinyin, to_pinyin, from_pinyin
from .hanzi import Hanzi, lookup, is_character, common_pronunciation, taiwan_pronunciation, all_pronunciations
from .logging import setup_logging, setup_from_config, get_logger, get_api_logger

__all__ = [
    # 异常
    'HanyuError',
    'ParseFailure',
    'AmbiguousMark',
    'InvalidTone',
    'UnmappableSyllable',
    # 配置
    'ReadMode',
    'ConverterConfig',
    'DEFAULT_CONFIG',
    # 音节
    'Pinyin',
    'Zhuyin',
    'numbered',
    'marked',
    'zhuyin_string',
    'mark',
    'unmark',
    # 解析
    'read_pinyin',
    'read_zhuyin',
    # 转换
    'pinyin_to_zhuyin',
    'zhuyin_to_pinyin',
    'to_pinyin',
    'from_pinyin',
    # 汉字
    'Hanzi',
    'lookup',
    'is_character',
    'common_pronunciation',
    'taiwan_pronunciation',
    'all_pronunciations',
    # 日志
    'setup_logging',
    'setup_from_config',
    'get_logger',
    'get_api_logger',
]
