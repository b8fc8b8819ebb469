"""
card_deck - 可注入随机源的有序牌组

模拟一叠实体牌: 替换、洗牌、按位置查看，从两端、按条件或随机抽牌，
以及按确定或随机顺序把牌放回任意位置.
"""

from .core.deck import Deck
from .core.exceptions import (
    DeckError,
    RandomSourceError,
    RandomSourceExhaustedError,
    DeckConfigError,
)
from .core.random_source import (
    RandomSource,
    SystemRandomSource,
    SeededRandomSource,
    SequenceRandomSource,
    as_random_source,
)
from .config import DeckConfig, create_deck
from .logging_utils import setup_logging

__version__ = "1.0.0"

__all__ = [
    # 牌组
    'Deck', 'create_deck',

    # 随机源
    'RandomSource', 'SystemRandomSource', 'SeededRandomSource',
    'SequenceRandomSource', 'as_random_source',

    # 配置与日志
    'DeckConfig', 'setup_logging',

    # 异常类型
    'DeckError', 'RandomSourceError', 'RandomSourceExhaustedError',
    'DeckConfigError',
]
