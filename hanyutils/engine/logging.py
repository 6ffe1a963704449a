"""
统一日志配置模块

提供结构化日志（orjson）、彩色控制台输出、可选的文件轮转
"""

import sys
import logging
import orjson
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


ROOT_LOGGER_NAME = 'hanyutils'
DEFAULT_LOG_DIR = Path.cwd() / 'logs'

# 库默认不输出任何日志，由调用方（CLI / API）配置
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    """JSON 格式日志（便于日志分析工具解析）"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # 额外字段
        if hasattr(record, 'request_id'):
            log_data['request_id'] = record.request_id
        if hasattr(record, 'duration_ms'):
            log_data['duration_ms'] = record.duration_ms

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return orjson.dumps(log_data, default=str).decode('utf-8')


class ColorFormatter(logging.Formatter):
    """彩色控制台输出"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, '')
        message = super().format(record)
        if not color:
            return message
        return message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    level: str = 'INFO',
    log_to_file: bool = False,
    log_to_console: bool = True,
    json_format: bool = False,
    log_dir: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    stream=None,
) -> logging.Logger:
    """
    配置日志系统

    Args:
        name: 日志器名称
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: 是否写入文件
        log_to_console: 是否输出到控制台（stderr）
        json_format: 是否使用 JSON 格式
        log_dir: 日志目录，默认当前目录下的 logs/
        max_bytes: 单个日志文件最大大小
        backup_count: 保留的日志文件数量
        stream: 控制台输出流，默认 sys.stderr

    Returns:
        配置好的 Logger 实例
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # 清除已有 handlers（避免重复添加）
    logger.handlers.clear()

    detailed_format = '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s'
    simple_format = '%(asctime)s | %(levelname)-8s | %(message)s'

    if log_to_console:
        stream = stream or sys.stderr
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(logging.DEBUG)

        if json_format:
            console_handler.setFormatter(JsonFormatter())
        elif hasattr(stream, 'isatty') and stream.isatty():
            console_handler.setFormatter(ColorFormatter(simple_format))
        else:
            console_handler.setFormatter(logging.Formatter(simple_format))

        logger.addHandler(console_handler)

    if log_to_file:
        directory = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
        directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            directory / f'{name}.log',
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        if json_format:
            file_handler.setFormatter(JsonFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(detailed_format))

        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def setup_from_config(config, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """按 ConverterConfig 配置日志"""
    return setup_logging(
        name,
        level=config.log_level,
        log_to_file=config.log_to_file,
        json_format=config.json_logs,
        log_dir=config.log_dir,
    )


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """获取 hanyutils 命名空间下的 logger（不添加 handler）"""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f'{ROOT_LOGGER_NAME}.{name}'
    return logging.getLogger(name)


# 预配置的日志器
api_logger = None


def get_api_logger() -> logging.Logger:
    """获取 API 日志器"""
    global api_logger
    if api_logger is None:
        api_logger = setup_logging(f'{ROOT_LOGGER_NAME}.api', level='INFO')
    return api_logger

