"""
测试配置文件 - pytest共享fixture

提供标准的五张牌牌组和脚本化随机源的牌组工厂.
"""

import logging
from typing import Callable, Iterable, Tuple

import pytest

from card_deck import Deck, SequenceRandomSource


FIVE_CARDS = ['a', 'b', 'c', 'd', 'e']


@pytest.fixture
def deck() -> Deck:
    """包含a到e五张牌的牌组，使用系统随机源"""
    return Deck(list(FIVE_CARDS))


@pytest.fixture
def scripted_deck() -> Callable[..., Tuple[Deck, SequenceRandomSource]]:
    """
    创建使用脚本化随机源的牌组

    Returns:
        工厂函数: (随机数脚本, 初始牌) -> (牌组, 随机源)
    """
    def _make(values: Iterable[int], cards=None) -> Tuple[Deck, SequenceRandomSource]:
        source = SequenceRandomSource(values)
        initial = list(FIVE_CARDS) if cards is None else cards
        return Deck(initial, random_source=source), source
    return _make


@pytest.fixture(autouse=True)
def restore_logging():
    """测试结束后恢复根日志记录器和card_deck日志记录器的状态"""
    root = logging.getLogger()
    package_logger = logging.getLogger('card_deck')
    saved_handlers = list(root.handlers)
    saved_root_level = root.level
    saved_package_level = package_logger.level
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
    root.setLevel(saved_root_level)
    package_logger.setLevel(saved_package_level)
