"""
牌组配置相关类的实现
包含随机种子、日志设置以及根据配置创建牌组的工厂函数
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .core.deck import Deck
from .core.exceptions import DeckConfigError
from .core.random_source import RandomSource, SeededRandomSource, SystemRandomSource
from .logging_utils import VALID_LOG_LEVELS


logger = logging.getLogger(__name__)

# 环境变量名
ENV_SEED = 'CARD_DECK_SEED'
ENV_LOG_LEVEL = 'CARD_DECK_LOG_LEVEL'
ENV_DETAILED_LOGGING = 'CARD_DECK_DETAILED_LOGGING'

_TRUE_VALUES = ('1', 'true', 'yes', 'on')

PACKAGE_LOGGER = 'card_deck'


@dataclass
class DeckConfig:
    """
    牌组配置类
    包含随机性和日志相关的设置参数
    """
    random_seed: Optional[Union[int, str]] = None   # 随机种子，None表示非确定性
    log_level: str = 'INFO'                         # 日志级别
    detailed_logging: bool = False                  # 是否记录每次牌组变更

    def __post_init__(self):
        """验证配置的有效性"""
        if isinstance(self.random_seed, bool) or not (
            self.random_seed is None or isinstance(self.random_seed, (int, str))
        ):
            raise DeckConfigError(f"随机种子必须是整数或字符串: {self.random_seed!r}")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise DeckConfigError(f"无效的日志级别: {self.log_level!r}")
        self.log_level = self.log_level.upper()

    @property
    def is_deterministic(self) -> bool:
        """检查是否使用固定种子"""
        return self.random_seed is not None

    def build_random_source(self) -> RandomSource:
        """根据种子设置创建随机源"""
        if self.random_seed is None:
            return SystemRandomSource()
        return SeededRandomSource(self.random_seed)

    def apply_logging(self) -> logging.Logger:
        """把日志级别应用到card_deck包的日志记录器"""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(self.log_level)
        return package_logger

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'DeckConfig':
        """
        从环境变量读取配置

        Args:
            environ: 环境变量映射，默认使用os.environ

        Returns:
            DeckConfig: 配置对象

        Raises:
            DeckConfigError: 当环境变量的值无效时
        """
        if environ is None:
            environ = os.environ

        raw_seed = environ.get(ENV_SEED, '').strip()
        seed: Optional[Union[int, str]] = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                # 非整数种子按字符串使用
                seed = raw_seed

        detailed = environ.get(ENV_DETAILED_LOGGING, '').strip().lower() in _TRUE_VALUES

        return cls(
            random_seed=seed,
            log_level=environ.get(ENV_LOG_LEVEL, 'INFO'),
            detailed_logging=detailed,
        )


def create_deck(cards: Any = None, config: Optional[DeckConfig] = None) -> Deck:
    """
    根据配置创建牌组

    Args:
        cards: 初始牌序列
        config: 牌组配置，默认使用DeckConfig()

    Returns:
        Deck: 新牌组
    """
    if config is None:
        config = DeckConfig()

    config.apply_logging()

    deck = Deck(
        cards,
        random_source=config.build_random_source(),
        detailed_logging=config.detailed_logging,
    )
    if config.is_deterministic:
        logger.info(f"[创建牌组] 使用固定种子 {config.random_seed!r}，共 {deck.remaining()} 张牌")
    return deck
