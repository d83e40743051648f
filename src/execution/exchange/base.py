"""交易所客户端基类"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from src.market.stock import Stock


class OrderRejectedError(Exception):
    """委托被交易所拒绝"""

    def __init__(self, order_id: str, reason: str):
        self.order_id = order_id
        self.reason = reason
        super().__init__(f"委托 {order_id} 被拒绝: {reason}")


class StockExchangeClient(ABC):
    """交易所客户端基类

    提供行情查询和买卖委托。具体实现负责连接真实或模拟的交易场所。
    """

    @abstractmethod
    def get_price(self, stock: Stock) -> Decimal:
        """获取当前价格"""
        pass

    @abstractmethod
    def submit_buy(self, stock: Stock, quantity: int) -> Optional[Decimal]:
        """
        提交买入委托

        Returns:
            成交总金额；股票不存在或不可交易时返回 None
        """
        pass

    @abstractmethod
    def submit_sell(self, stock: Stock, quantity: int) -> Decimal:
        """
        提交卖出委托

        Returns:
            成交总金额

        Raises:
            OrderRejectedError: 交易所拒绝委托
        """
        pass
