"""
牌组管理.

定义Deck类，模拟一叠实体牌: 支持替换全部牌、洗牌、查看顶部/底部/随机牌，
从两端、按过滤条件或随机位置抽牌，以及把牌放回顶部、底部或随机位置.
"""

import logging
from typing import Any, Dict, Generic, Iterator, List, Optional, overload

from ..random_source import RandomSource, as_random_source, checked_next_int
from .types import CardT, Predicate, as_card_list, is_card_batch, normalize_count


logger = logging.getLogger(__name__)


class Deck(Generic[CardT]):
    """
    表示一叠有序的牌.

    索引0为顶部，最后一个索引为底部。牌是调用方提供的任意值，牌组从不
    检查牌的内容。所有随机行为都通过注入的RandomSource完成.

    数量参数的约定:
        - 不传数量: 返回单张牌，牌组为空时返回None
        - 传入数量n: 返回列表(即使n为1)，长度截断到[0, remaining()]
        - 数量无效(字符串、布尔值、NaN等): 按不传数量处理

    Attributes:
        _cards: 当前牌组中的牌列表
        _random_source: 随机源
        _detailed_logging: 是否在DEBUG级别记录每次变更

    Examples:
        >>> deck = Deck(['a', 'b', 'c', 'd', 'e'])
        >>> deck.draw(2)
        ['a', 'b']
        >>> deck.top()
        'c'
        >>> deck.remaining()
        3
    """

    def __init__(
        self,
        cards: Any = None,
        random_source: Any = None,
        detailed_logging: bool = False,
    ) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始牌序列，非序列参数被忽略(得到空牌组)
            random_source: 随机源、random.Random实例或None(使用系统随机源)
            detailed_logging: 是否记录每次变更的调试日志
        """
        self._cards: List[CardT] = []
        self._random_source: RandomSource = as_random_source(random_source)
        self._detailed_logging = detailed_logging
        self.cards(cards)

    # ------------------------------------------------------------------
    # 内容替换与计数
    # ------------------------------------------------------------------

    def cards(self, sequence: Any = None) -> 'Deck[CardT]':
        """
        用新序列替换牌组中的全部牌.

        Args:
            sequence: 新的牌序列(会被浅拷贝)，空序列会清空牌组；
                非序列参数不产生任何效果

        Returns:
            Deck: 牌组本身，支持链式调用
        """
        if is_card_batch(sequence):
            self._cards = list(sequence)
            self._trace("设置牌组", f"载入 {len(self._cards)} 张牌")
        elif sequence is not None:
            self._trace("设置牌组", f"忽略非序列参数 {type(sequence).__name__}")
        return self

    def remaining(self) -> int:
        """返回牌组中剩余的牌数"""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return not self._cards

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    # ------------------------------------------------------------------
    # 查看(不改变牌组)
    # ------------------------------------------------------------------

    @overload
    def top(self) -> Optional[CardT]: ...

    @overload
    def top(self, count: int) -> List[CardT]: ...

    def top(self, count: Any = None) -> Any:
        """
        查看顶部的牌但不抽出.

        Args:
            count: 要查看的牌数，不传时返回单张牌

        Returns:
            顶部的牌(牌组为空时为None)，或从上到下排列的前count张牌
        """
        normalized = normalize_count(count, len(self._cards))
        if normalized is None:
            return self.top_card()
        return self.top_cards(normalized)

    def top_card(self) -> Optional[CardT]:
        """返回顶部的牌，牌组为空时返回None"""
        return self._cards[0] if self._cards else None

    def top_cards(self, count: Any) -> List[CardT]:
        """返回从上到下排列的前count张牌"""
        return self._cards[:self._count_or_one(count)]

    @overload
    def bottom(self) -> Optional[CardT]: ...

    @overload
    def bottom(self, count: int) -> List[CardT]: ...

    def bottom(self, count: Any = None) -> Any:
        """
        查看底部的牌但不抽出.

        Args:
            count: 要查看的牌数，不传时返回单张牌

        Returns:
            底部的牌(牌组为空时为None)，或从底部往上排列的count张牌
        """
        normalized = normalize_count(count, len(self._cards))
        if normalized is None:
            return self.bottom_card()
        return self.bottom_cards(normalized)

    def bottom_card(self) -> Optional[CardT]:
        """返回底部的牌，牌组为空时返回None"""
        return self._cards[-1] if self._cards else None

    def bottom_cards(self, count: Any) -> List[CardT]:
        """返回从底部往上排列的count张牌"""
        size = self._count_or_one(count)
        return self._cards[::-1][:size]

    @overload
    def random(self) -> Optional[CardT]: ...

    @overload
    def random(self, count: int) -> List[CardT]: ...

    def random(self, count: Any = None) -> Any:
        """
        随机查看牌组中的牌但不抽出，也不改变顺序.

        Args:
            count: 要查看的牌数，不传时返回单张牌

        Returns:
            随机的一张牌(牌组为空时为None)，或无放回随机选出的count张牌
        """
        normalized = normalize_count(count, len(self._cards))
        if normalized is None:
            return self.random_card()
        return self.random_cards(normalized)

    def random_card(self) -> Optional[CardT]:
        """返回随机的一张牌，牌组为空时返回None"""
        if not self._cards:
            return None
        return self._cards[checked_next_int(self._random_source, len(self._cards))]

    def random_cards(self, count: Any) -> List[CardT]:
        """返回按选中顺序排列的count张随机牌(无放回)"""
        positions = self._sample_positions(len(self._cards), self._count_or_one(count))
        return [self._cards[position] for position in positions]

    # ------------------------------------------------------------------
    # 抽牌
    # ------------------------------------------------------------------

    @overload
    def draw(self) -> Optional[CardT]: ...

    @overload
    def draw(self, count: int) -> List[CardT]: ...

    def draw(self, count: Any = None) -> Any:
        """
        从顶部抽牌.

        Args:
            count: 要抽的牌数，不传时抽一张并返回单张牌

        Returns:
            抽出的牌(牌组为空时为None)，或从上到下排列的抽出牌列表
        """
        normalized = normalize_count(count, len(self._cards))
        if normalized is None:
            return self.draw_card()
        return self.draw_cards(normalized)

    def draw_card(self) -> Optional[CardT]:
        """从顶部抽一张牌，牌组为空时返回None"""
        if not self._cards:
            return None
        card = self._cards.pop(0)
        self._trace("抽牌", "从顶部抽出 1 张")
        return card

    def draw_cards(self, count: Any) -> List[CardT]:
        """从顶部抽count张牌，按从上到下的顺序返回"""
        size = self._count_or_one(count)
        drawn = self._cards[:size]
        del self._cards[:size]
        self._trace("抽牌", f"从顶部抽出 {len(drawn)} 张")
        return drawn

    @overload
    def draw_from_bottom(self) -> Optional[CardT]: ...

    @overload
    def draw_from_bottom(self, count: int) -> List[CardT]: ...

    def draw_from_bottom(self, count: Any = None) -> Any:
        """
        从底部抽牌.

        Args:
            count: 要抽的牌数，不传时抽一张并返回单张牌

        Returns:
            抽出的牌(牌组为空时为None)，或从底部往上排列的抽出牌列表
        """
        normalized = normalize_count(count, len(self._cards))
        if normalized is None:
            return self.draw_card_from_bottom()
        return self.draw_cards_from_bottom(normalized)

    def draw_card_from_bottom(self) -> Optional[CardT]:
        """从底部抽一张牌，牌组为空时返回None"""
        if not self._cards:
            return None
        card = self._cards.pop()
        self._trace("抽牌", "从底部抽出 1 张")
        return card

    def draw_cards_from_bottom(self, count: Any) -> List[CardT]:
        """从底部抽count张牌，按从底部往上的顺序返回"""
        size = self._count_or_one(count)
        split = len(self._cards) - size
        drawn = self._cards[split:]
        del self._cards[split:]
        drawn.reverse()
        self._trace("抽牌", f"从底部抽出 {len(drawn)} 张")
        return drawn

    @overload
    def draw_where(self, predicate: Predicate) -> Optional[CardT]: ...

    @overload
    def draw_where(self, predicate: Predicate, count: int) -> List[CardT]: ...

    def draw_where(self, predicate: Predicate, count: Any = None) -> Any:
        """
        从顶部开始查找并抽出满足过滤条件的牌.

        过滤函数抛出的异常原样向上传播，此时牌组保持不变.

        Args:
            predicate: 过滤函数，返回真值表示选中
            count: 要抽的牌数，不传时抽一张并返回单张牌

        Returns:
            第一张满足条件的牌(没有时为None)，或前count张满足条件的牌，
            保持它们在牌组中的相对顺序
        """
        normalized = normalize_count(count, len(self._cards))
        if normalized is None:
            return self.draw_card_where(predicate)
        return self.draw_cards_where(predicate, normalized)

    def draw_card_where(self, predicate: Predicate) -> Optional[CardT]:
        """抽出第一张满足条件的牌，没有时返回None"""
        drawn = self._draw_matching(predicate, 1)
        return drawn[0] if drawn else None

    def draw_cards_where(self, predicate: Predicate, count: Any) -> List[CardT]:
        """抽出从顶部开始前count张满足条件的牌"""
        return self._draw_matching(predicate, self._count_or_one(count))

    @overload
    def draw_random(self) -> Optional[CardT]: ...

    @overload
    def draw_random(self, count: int) -> List[CardT]: ...

    def draw_random(self, count: Any = None) -> Any:
        """
        随机抽牌(无放回).

        Args:
            count: 要抽的牌数，不传时抽一张并返回单张牌

        Returns:
            随机抽出的牌(牌组为空时为None)，或按选中顺序排列的抽出牌列表；
            剩余的牌保持原有相对顺序
        """
        normalized = normalize_count(count, len(self._cards))
        if normalized is None:
            return self.draw_random_card()
        return self.draw_random_cards(normalized)

    def draw_random_card(self) -> Optional[CardT]:
        """随机抽一张牌，牌组为空时返回None"""
        if not self._cards:
            return None
        card = self._cards.pop(checked_next_int(self._random_source, len(self._cards)))
        self._trace("抽牌", "随机抽出 1 张")
        return card

    def draw_random_cards(self, count: Any) -> List[CardT]:
        """随机抽count张牌，按选中顺序返回"""
        positions = self._sample_positions(len(self._cards), self._count_or_one(count))
        drawn = self._remove_positions(positions)
        self._trace("抽牌", f"随机抽出 {len(drawn)} 张")
        return drawn

    # ------------------------------------------------------------------
    # 洗牌与放回
    # ------------------------------------------------------------------

    def shuffle(self) -> 'Deck[CardT]':
        """
        洗牌.

        使用Fisher-Yates洗牌算法原地随机打乱全部牌的顺序.

        Returns:
            Deck: 牌组本身，支持链式调用
        """
        self._fisher_yates(self._cards)
        self._trace("洗牌", f"打乱 {len(self._cards)} 张牌")
        return self

    def discard_to_top(self, cards: Any) -> 'Deck[CardT]':
        """
        把一张牌或一批牌放到顶部.

        一批牌保持给定顺序，第一张位于最顶部.
        """
        batch = as_card_list(cards)
        self._cards[0:0] = batch
        self._trace("弃牌", f"{len(batch)} 张放回顶部")
        return self

    def discard_to_bottom(self, cards: Any) -> 'Deck[CardT]':
        """
        把一张牌或一批牌放到底部.

        一批牌保持给定顺序，最后一张位于最底部.
        """
        batch = as_card_list(cards)
        self._cards.extend(batch)
        self._trace("弃牌", f"{len(batch)} 张放回底部")
        return self

    def shuffle_to_top(self, cards: Any) -> 'Deck[CardT]':
        """把一张牌或一批牌按随机顺序放到顶部"""
        batch = as_card_list(cards)
        self._fisher_yates(batch)
        self._cards[0:0] = batch
        self._trace("弃牌", f"{len(batch)} 张随机顺序放回顶部")
        return self

    def shuffle_to_bottom(self, cards: Any) -> 'Deck[CardT]':
        """把一张牌或一批牌按随机顺序放到底部"""
        batch = as_card_list(cards)
        self._fisher_yates(batch)
        self._cards.extend(batch)
        self._trace("弃牌", f"{len(batch)} 张随机顺序放回底部")
        return self

    def discard_random(self, cards: Any) -> 'Deck[CardT]':
        """
        把一张牌或一批牌放到牌组中的随机位置.

        k张牌放入m张牌的牌组时，从最终的m+k个位置中无放回地随机选出k个，
        第i个选中的位置放第i张牌；原有的牌按原顺序填满其余位置.

        Returns:
            Deck: 牌组本身，支持链式调用
        """
        batch = as_card_list(cards)
        if not batch:
            return self

        final_size = len(self._cards) + len(batch)
        slots = self._sample_positions(final_size, len(batch))
        placed: Dict[int, CardT] = dict(zip(slots, batch))

        existing = iter(self._cards)
        self._cards = [
            placed[slot] if slot in placed else next(existing)
            for slot in range(final_size)
        ]
        self._trace("弃牌", f"{len(batch)} 张放回随机位置")
        return self

    # ------------------------------------------------------------------
    # 内部辅助
    # ------------------------------------------------------------------

    def _count_or_one(self, count: Any) -> int:
        """单形态接口的数量规范化: 无效数量按1张处理"""
        normalized = normalize_count(count, len(self._cards))
        if normalized is None:
            return min(1, len(self._cards))
        return normalized

    def _fisher_yates(self, items: List[Any]) -> None:
        for index in range(len(items) - 1, 0, -1):
            swap = checked_next_int(self._random_source, index + 1)
            items[index], items[swap] = items[swap], items[index]

    def _sample_positions(self, population: int, count: int) -> List[int]:
        """
        从range(population)中无放回地随机选出count个位置.

        使用部分Fisher-Yates，只调用随机源count次.

        Returns:
            List[int]: 按选中顺序排列的位置
        """
        pool = list(range(population))
        chosen = []
        for index in range(count):
            swap = index + checked_next_int(self._random_source, population - index)
            pool[index], pool[swap] = pool[swap], pool[index]
            chosen.append(pool[index])
        return chosen

    def _draw_matching(self, predicate: Predicate, count: int) -> List[CardT]:
        positions = []
        for position, card in enumerate(self._cards):
            if len(positions) >= count:
                break
            if predicate(card):
                positions.append(position)
        drawn = self._remove_positions(positions)
        self._trace("抽牌", f"按条件抽出 {len(drawn)} 张")
        return drawn

    def _remove_positions(self, positions: List[int]) -> List[CardT]:
        """移除指定位置的牌，按positions的顺序返回，其余牌保持相对顺序"""
        drawn = [self._cards[position] for position in positions]
        removed = set(positions)
        self._cards = [
            card for position, card in enumerate(self._cards)
            if position not in removed
        ]
        return drawn

    def _trace(self, tag: str, message: str) -> None:
        if self._detailed_logging:
            logger.debug(f"[{tag}] {message}，剩余 {len(self._cards)} 张")

    # ------------------------------------------------------------------
    # Python协议
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        """返回牌组中的牌数"""
        return len(self._cards)

    def __iter__(self) -> Iterator[CardT]:
        """从上到下遍历当前牌组的快照"""
        return iter(list(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        """返回牌组的调试表示"""
        return f"Deck(remaining={len(self._cards)})"

    def __str__(self) -> str:
        """返回牌组的可读表示"""
        return f"牌组剩余: {len(self._cards)} 张"
