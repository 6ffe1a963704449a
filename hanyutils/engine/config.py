"""
hanyutils 配置
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ReadMode(str, Enum):
    """
    解析模式

    - EXCLUSIVE: 除空白和标点外必须全部是音节，否则报错
    - WORDS: 按空白/标点切词，整词可解析为音节才当作音节，否则原样保留
    - MIXED: 词内混合音节与普通文本，能解析的都解析
    """
    EXCLUSIVE = "exclusive"
    WORDS = "words"
    MIXED = "mixed"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ConverterConfig:
    """转换器配置"""

    # 便捷函数默认的解析模式
    default_mode: ReadMode = ReadMode.WORDS

    # 日志
    log_level: str = "INFO"
    json_logs: bool = False
    log_to_file: bool = False
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """从环境变量读取配置"""
        return cls(
            default_mode=ReadMode(os.getenv("HANYUTILS_MODE", ReadMode.WORDS.value)),
            log_level=os.getenv("HANYUTILS_LOG_LEVEL", "INFO").upper(),
            json_logs=_env_bool("HANYUTILS_JSON_LOGS", False),
            log_to_file=_env_bool("HANYUTILS_LOG_TO_FILE", False),
            log_dir=os.getenv("HANYUTILS_LOG_DIR"),
        )


# 默认配置实例
DEFAULT_CONFIG = ConverterConfig()
