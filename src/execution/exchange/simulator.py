"""模拟交易所"""

import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Union

from config.base import Direction, ExchangeConfig
from src.execution.exchange.base import OrderRejectedError, StockExchangeClient
from src.execution.order import Order, OrderBook
from src.market.stock import Stock

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]


class SimulatedExchangeClient(StockExchangeClient):
    """模拟交易所

    按设置的行情立即成交。未设置行情的股票视为不存在。
    """

    def __init__(self, config: Optional[ExchangeConfig] = None):
        self.config = config or ExchangeConfig()

        self._quotes: Dict[Stock, Decimal] = {}
        self._quote_times: Dict[Stock, datetime] = {}
        self._order_book = OrderBook()

    # ========== 行情 ==========

    def set_quote(self, stock: Stock, price: Number) -> None:
        """设置行情"""
        price = Decimal(str(price))
        if price <= 0:
            raise ValueError(f"价格必须为正数: {stock} {price}")

        self._quotes[stock] = price
        self._quote_times[stock] = datetime.now()

    def set_quotes(self, quotes: Dict[Stock, Number]) -> None:
        """批量设置行情"""
        for stock, price in quotes.items():
            self.set_quote(stock, price)

    def is_listed(self, stock: Stock) -> bool:
        """是否有行情"""
        return stock in self._quotes

    def get_quote_time(self, stock: Stock) -> Optional[datetime]:
        return self._quote_times.get(stock)

    def get_price(self, stock: Stock) -> Decimal:
        """获取当前价格"""
        try:
            return self._quotes[stock]
        except KeyError:
            raise KeyError(f"无行情数据: {stock}") from None

    # ========== 委托 ==========

    def submit_buy(self, stock: Stock, quantity: int) -> Optional[Decimal]:
        """提交买入委托（立即模拟成交）"""
        order = self._submit(stock, Direction.BUY, quantity)
        if not order.is_filled:
            return None
        return self._quantize(order.filled_amount)

    def submit_sell(self, stock: Stock, quantity: int) -> Decimal:
        """提交卖出委托（立即模拟成交），无行情时拒绝"""
        order = self._submit(stock, Direction.SELL, quantity)
        if not order.is_filled:
            raise OrderRejectedError(order.order_id, order.reject_reason)
        return self._quantize(order.filled_amount)

    def _submit(self, stock: Stock, direction: Direction, quantity: int) -> Order:
        if quantity <= 0:
            raise ValueError("委托数量必须为正数")

        order = self._order_book.add(
            Order(stock=stock, direction=direction.value, quantity=quantity)
        )

        price = self._quotes.get(stock)
        if price is None:
            order.reject("无行情数据")
            logger.warning(f"{self.config.name}: 拒绝 {order}，{order.reject_reason}")
            return order

        order.fill(price)
        logger.debug(f"{self.config.name}: 成交 {order} @ {price}")
        return order

    def _quantize(self, amount: Decimal) -> Decimal:
        exp = Decimal(1).scaleb(-self.config.price_places)
        return amount.quantize(exp, rounding=ROUND_HALF_UP)

    # ========== 查询 ==========

    def get_orders(self) -> List[Order]:
        """获取全部委托"""
        return self._order_book.all()

    @property
    def order_book(self) -> OrderBook:
        return self._order_book

    def reset(self) -> None:
        """重置行情和委托"""
        self._quotes.clear()
        self._quote_times.clear()
        self._order_book.clear()
