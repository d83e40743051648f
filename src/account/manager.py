"""组合管理器

组合 Portfolio 持仓与 StockExchangeClient 行情/委托，提供估值和买卖操作。
Portfolio 和交易所客户端由外部构造后注入。
"""

import logging
from decimal import Decimal
from typing import Dict, Optional

from config.base import PortfolioConfig
from src.account.errors import InsufficientStockError
from src.account.portfolio import Portfolio
from src.execution.exchange.base import StockExchangeClient
from src.market.stock import Stock
from src.utils.logging import TradeLogger

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class PortfolioManager:
    """组合管理器"""

    def __init__(
        self,
        portfolio: Portfolio,
        client: StockExchangeClient,
        config: Optional[PortfolioConfig] = None,
    ):
        self.portfolio = portfolio
        self.client = client
        self.config = config or PortfolioConfig()
        self._trade_log = TradeLogger(self.config.name)

    def get_holdings_value(self) -> Dict[Stock, Decimal]:
        """按持仓计算各股票市值"""
        return {
            stock: self.client.get_price(stock) * quantity
            for stock, quantity in self.portfolio.get_stocks().items()
        }

    def get_market_value(self) -> Decimal:
        """
        计算组合总市值

        Returns:
            各持仓 当前价格 × 数量 之和，空组合为 0
        """
        holdings = self.get_holdings_value()
        total = sum(holdings.values(), ZERO)
        self._trade_log.market_valued(len(holdings), total)
        return total

    def buy(self, stock: Stock, quantity: int) -> Optional[Decimal]:
        """
        买入

        Args:
            stock: 股票
            quantity: 买入数量

        Returns:
            买入花费；股票不存在时返回 None
        """
        cost = self.client.submit_buy(stock, quantity)
        if cost is None:
            self._trade_log.buy_rejected(stock.symbol, quantity)
            return None

        if self.config.record_buys:
            self.portfolio.add_stocks(stock, quantity)

        self._trade_log.buy_executed(stock.symbol, quantity, cost)
        return cost

    def sell(self, stock: Stock, quantity: int) -> Decimal:
        """
        卖出

        先从组合中减仓，持仓不足时不委托，返回 0。
        委托异常时恢复持仓后重新抛出。

        Args:
            stock: 股票
            quantity: 卖出数量

        Returns:
            卖出所得
        """
        try:
            self.portfolio.remove_stocks(stock, quantity)
        except InsufficientStockError as e:
            self._trade_log.sell_skipped(stock.symbol, e.requested, e.held)
            return ZERO

        try:
            proceeds = self.client.submit_sell(stock, quantity)
        except Exception:
            # 委托失败，恢复持仓
            self.portfolio.add_stocks(stock, quantity)
            raise

        self._trade_log.sell_executed(stock.symbol, quantity, proceeds)
        return proceeds
