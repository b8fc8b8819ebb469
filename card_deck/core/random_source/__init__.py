"""
随机源模块.

提供RandomSource协议及其系统、种子化和脚本化实现.
"""

from .random_source import (
    RandomSource,
    SystemRandomSource,
    SeededRandomSource,
    SequenceRandomSource,
    as_random_source,
    checked_next_int,
    seed_to_int,
)

__all__ = [
    'RandomSource',
    'SystemRandomSource',
    'SeededRandomSource',
    'SequenceRandomSource',
    'as_random_source',
    'checked_next_int',
    'seed_to_int',
]
