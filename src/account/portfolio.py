"""组合管理"""

import logging
from typing import Dict, Iterator, Tuple

from src.account.errors import InsufficientStockError
from src.market.stock import Stock

logger = logging.getLogger(__name__)


class Portfolio:
    """投资组合

    记录单个账户每只股票的持有数量。数量归零的持仓直接移除。
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._stocks: Dict[Stock, int] = {}

    def __len__(self) -> int:
        return len(self._stocks)

    def __contains__(self, stock: object) -> bool:
        return stock in self._stocks

    def __iter__(self) -> Iterator[Tuple[Stock, int]]:
        return iter(list(self._stocks.items()))

    def __repr__(self) -> str:
        return f"Portfolio({self.name!r}, positions={len(self._stocks)})"

    def get_stocks(self) -> Dict[Stock, int]:
        """获取全部持仓（快照副本）"""
        return dict(self._stocks)

    def get_quantity(self, stock: Stock) -> int:
        """获取持有数量，未持有返回 0"""
        return self._stocks.get(stock, 0)

    def has_stock(self, stock: Stock) -> bool:
        """是否有持仓"""
        return self._stocks.get(stock, 0) > 0

    def add_stocks(self, stock: Stock, quantity: int) -> int:
        """
        增加持仓

        Args:
            stock: 股票
            quantity: 增加数量（必须为正数）

        Returns:
            增加后的持有数量
        """
        if quantity <= 0:
            raise ValueError("增加数量必须为正数")

        held = self._stocks.get(stock, 0) + quantity
        self._stocks[stock] = held
        logger.debug(f"{self.name}: 增加 {stock} {quantity}，当前 {held}")
        return held

    def remove_stocks(self, stock: Stock, quantity: int) -> int:
        """
        减少持仓

        Args:
            stock: 股票
            quantity: 减少数量（必须为正数）

        Returns:
            减少后的持有数量

        Raises:
            ValueError: 数量无效
            InsufficientStockError: 持有数量不足
        """
        if quantity <= 0:
            raise ValueError("减少数量必须为正数")

        held = self._stocks.get(stock, 0)
        if quantity > held:
            raise InsufficientStockError(stock, requested=quantity, held=held)

        remaining = held - quantity
        if remaining == 0:
            del self._stocks[stock]
        else:
            self._stocks[stock] = remaining

        logger.debug(f"{self.name}: 减少 {stock} {quantity}，剩余 {remaining}")
        return remaining

    def clear(self) -> None:
        """清空持仓"""
        self._stocks.clear()

    @property
    def total_units(self) -> int:
        """持仓总股数"""
        return sum(self._stocks.values())

    def summary(self) -> Dict:
        """获取组合摘要"""
        return {
            "name": self.name,
            "position_count": len(self._stocks),
            "total_units": self.total_units,
        }
