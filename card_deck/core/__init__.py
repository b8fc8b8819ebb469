"""
Core Module - 纯领域逻辑层

该模块只包含牌组的核心逻辑，不依赖配置层或日志配置.

Modules:
    deck: 牌组管理和抽牌逻辑
    random_source: 可注入的随机源
    exceptions: 异常定义
"""

from .deck import Deck
from .exceptions import (
    DeckError,
    RandomSourceError,
    RandomSourceExhaustedError,
    DeckConfigError,
)
from .random_source import (
    RandomSource,
    SystemRandomSource,
    SeededRandomSource,
    SequenceRandomSource,
    as_random_source,
)

__all__ = [
    # 牌组
    'Deck',

    # 随机源
    'RandomSource', 'SystemRandomSource', 'SeededRandomSource',
    'SequenceRandomSource', 'as_random_source',

    # 异常类型
    'DeckError', 'RandomSourceError', 'RandomSourceExhaustedError',
    'DeckConfigError',
]
