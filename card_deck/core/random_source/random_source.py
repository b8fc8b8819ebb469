"""
随机源定义.

牌组的洗牌和随机抽牌只通过RandomSource协议获取随机整数，
从不直接调用全局random函数，因此测试可以注入确定性的实现.
"""

import hashlib
import random
from typing import Any, Iterable, List, Optional, Protocol, Union, runtime_checkable

from ..exceptions import RandomSourceError, RandomSourceExhaustedError


SeedType = Union[int, str]


@runtime_checkable
class RandomSource(Protocol):
    """随机源协议"""

    def next_int(self, max_exclusive: int) -> int:
        """
        返回一个均匀分布在[0, max_exclusive)区间内的整数.

        Args:
            max_exclusive: 上界(不包含)，调用方保证大于0

        Returns:
            int: 随机整数
        """
        ...


class SystemRandomSource:
    """
    基于random.Random的随机源适配器.

    Attributes:
        _rng: 底层随机数生成器

    Examples:
        >>> source = SystemRandomSource(random.Random(42))
        >>> 0 <= source.next_int(10) < 10
        True
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        初始化随机源.

        Args:
            rng: 随机数生成器，如果为None，使用新的非确定性随机数生成器
        """
        self._rng = rng or random.Random()

    def next_int(self, max_exclusive: int) -> int:
        return self._rng.randrange(max_exclusive)

    def reseed(self, seed: Optional[SeedType] = None) -> None:
        """重新设置种子(None表示恢复非确定性)."""
        self._rng.seed(seed_to_int(seed) if seed is not None else None)

    def state(self) -> Any:
        """返回底层生成器的内部状态，用于高级测试断言."""
        return self._rng.getstate()

    def set_state(self, state: Any) -> None:
        self._rng.setstate(state)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SeededRandomSource(SystemRandomSource):
    """
    确定性随机源.

    相同的种子总是产生相同的整数序列。字符串种子先经过SHA-256
    转换为整数，因此可以用测试文件名之类的字符串作为种子.
    """

    def __init__(self, seed: SeedType) -> None:
        self._seed = seed
        super().__init__(random.Random(seed_to_int(seed)))

    @property
    def seed(self) -> SeedType:
        return self._seed

    def reseed(self, seed: Optional[SeedType] = None) -> None:
        """
        重新设置种子.

        Args:
            seed: 新种子，如果为None则复用构造时的种子，从头重放序列
        """
        if seed is not None:
            self._seed = seed
        super().reseed(self._seed)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed!r})"


class SequenceRandomSource:
    """
    按预设脚本依次返回整数的随机源.

    每次调用都会把请求的上界记录在calls中，便于断言牌组向随机源
    提出了哪些请求。脚本用完后抛出RandomSourceExhaustedError.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self._position = 0
        self.calls: List[int] = []

    def next_int(self, max_exclusive: int) -> int:
        self.calls.append(max_exclusive)
        if self._position >= len(self._values):
            raise RandomSourceExhaustedError(
                f"Scripted random source exhausted after {len(self._values)} values"
            )
        value = self._values[self._position]
        self._position += 1
        return value

    @property
    def remaining_values(self) -> int:
        """剩余未使用的脚本数值个数"""
        return len(self._values) - self._position

    def __repr__(self) -> str:
        return f"SequenceRandomSource(used={self._position}, total={len(self._values)})"


def seed_to_int(seed: SeedType) -> int:
    """
    把种子转换为整数.

    Args:
        seed: 整数种子或字符串种子

    Returns:
        int: 整数种子，字符串经过SHA-256哈希后截取到31位

    Raises:
        TypeError: 当种子既不是整数也不是字符串时
    """
    if isinstance(seed, bool) or not isinstance(seed, (int, str)):
        raise TypeError(f"Seed must be an int or str, got {type(seed).__name__}")
    if isinstance(seed, int):
        return seed
    digest = hashlib.sha256(seed.encode("utf-8")).hexdigest()
    return int(digest, 16) & ((1 << 31) - 1)


def as_random_source(source: Any = None) -> RandomSource:
    """
    把任意受支持的对象转换为RandomSource.

    Args:
        source: None、random.Random实例或实现了next_int的对象

    Returns:
        RandomSource: 可供牌组使用的随机源

    Raises:
        TypeError: 当对象无法作为随机源使用时
    """
    if source is None:
        return SystemRandomSource()
    if isinstance(source, random.Random):
        return SystemRandomSource(source)
    if isinstance(source, RandomSource):
        return source
    raise TypeError(f"{type(source).__name__} does not provide next_int(max_exclusive)")


def checked_next_int(source: RandomSource, max_exclusive: int) -> int:
    """
    从随机源取一个整数并校验其范围.

    Raises:
        RandomSourceError: 当随机源返回非整数或越界值时
    """
    value = source.next_int(max_exclusive)
    if isinstance(value, bool) or not isinstance(value, int):
        raise RandomSourceError(
            f"{source!r} returned {value!r}, expected an int in [0, {max_exclusive})"
        )
    if not 0 <= value < max_exclusive:
        raise RandomSourceError(
            f"{source!r} returned {value}, outside [0, {max_exclusive})"
        )
    return value
