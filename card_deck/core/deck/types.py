"""
牌组相关类型定义.

定义卡牌类型变量、过滤函数类型，以及数量参数和批量参数的规范化规则.
"""

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any, Callable, List, Optional, TypeVar


CardT = TypeVar('CardT')

# 抽牌过滤函数: 接收一张牌，返回是否选中
Predicate = Callable[[Any], bool]

# 单个字符串/字节串视为一张牌，而不是一批牌
_SCALAR_SEQUENCE_TYPES = (str, bytes, bytearray)


def normalize_count(count: Any, available: int) -> Optional[int]:
    """
    规范化数量参数.

    Args:
        count: 调用方传入的数量参数
        available: 牌组中当前可用的牌数

    Returns:
        Optional[int]: None表示单张调用(未提供数量或数量无效)，
            否则为截断到[0, available]区间的整数
    """
    if count is None or isinstance(count, bool) or not isinstance(count, Real):
        return None
    if isinstance(count, float) and not math.isfinite(count):
        return None
    return max(0, min(int(count), available))


def is_card_batch(value: Any) -> bool:
    """
    判断参数是否为一批牌.

    列表、元组等序列视为一批牌；字符串和字节串视为单张牌.
    """
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCE_TYPES)


def as_card_list(value: Any) -> List[Any]:
    """把单张牌或一批牌统一转换为新列表"""
    if is_card_batch(value):
        return list(value)
    return [value]
