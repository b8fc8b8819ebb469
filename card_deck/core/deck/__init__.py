"""
牌组管理模块.

提供Deck类，实现一叠有序牌的查看、抽牌、洗牌和放回操作.
"""

from .deck import Deck
from .types import Predicate, normalize_count, is_card_batch

__all__ = ['Deck', 'Predicate', 'normalize_count', 'is_card_batch']
