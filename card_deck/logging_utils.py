"""
日志工具
统一日志格式，供宿主程序在启动时调用一次
"""

import logging
from typing import Union


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def setup_logging(level: Union[str, int] = 'INFO', log_format: str = LOG_FORMAT) -> logging.Logger:
    """
    设置日志记录

    Args:
        level: 日志级别名称或数值
        log_format: 日志格式

    Returns:
        logging.Logger: card_deck包的根日志记录器
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=log_format)

    package_logger = logging.getLogger('card_deck')
    package_logger.setLevel(level)
    return package_logger
