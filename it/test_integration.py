"""集成测试

测试各模块协同工作：
- 配置 -> 模拟交易所 -> 组合管理器
- 买入 -> 估值 -> 卖出 完整流程
"""

from decimal import Decimal

import pytest

from config.base import AppSettings, ExchangeConfig, PortfolioConfig
from src.account.manager import PortfolioManager
from src.account.portfolio import Portfolio
from src.execution.exchange.base import OrderRejectedError
from src.execution.exchange.simulator import SimulatedExchangeClient
from src.execution.order import OrderStatus
from src.market.stock import Stock


# ============================================================
# Fixtures
# ============================================================


AMZN = Stock("amzn", "Amazon")
GOOG = Stock("goog", "Alphabet")
UNKNOWN = Stock("id", "name")


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        exchange=ExchangeConfig(price_places=2),
        portfolio=PortfolioConfig(name="it"),
    )


@pytest.fixture
def exchange(settings) -> SimulatedExchangeClient:
    client = SimulatedExchangeClient(settings.exchange)
    client.set_quotes({AMZN: "1000", GOOG: "150.25"})
    return client


@pytest.fixture
def manager(settings, exchange) -> PortfolioManager:
    return PortfolioManager(Portfolio(settings.portfolio.name), exchange, settings.portfolio)


# ============================================================
# 测试
# ============================================================


class TestTradingWorkflow:
    """交易完整流程"""

    def test_buy_value_sell(self, manager, exchange):
        assert manager.buy(AMZN, 3) == Decimal("3000")
        assert manager.buy(GOOG, 2) == Decimal("300.50")
        assert manager.get_market_value() == Decimal("3300.50")

        assert manager.sell(AMZN, 2) == Decimal("2000")
        assert manager.portfolio.get_quantity(AMZN) == 1
        assert manager.get_market_value() == Decimal("1300.50")

        assert [o.status for o in exchange.get_orders()] == [OrderStatus.FILLED] * 3

    def test_price_move_changes_value(self, manager, exchange):
        manager.buy(AMZN, 3)
        exchange.set_quote(AMZN, "1100")

        assert manager.get_market_value() == Decimal("3300")

    def test_buy_unknown_stock(self, manager, exchange):
        assert manager.buy(UNKNOWN, 5) is None
        assert UNKNOWN not in manager.portfolio
        assert exchange.order_book.rejected()[0].stock == UNKNOWN

    def test_oversell_does_not_reach_exchange(self, manager, exchange):
        manager.buy(AMZN, 3)

        assert manager.sell(AMZN, 4) == Decimal("0")
        assert manager.portfolio.get_quantity(AMZN) == 3
        assert len(exchange.order_book.filled()) == 1

    def test_sell_everything(self, manager):
        manager.buy(AMZN, 3)

        assert manager.sell(AMZN, 3) == Decimal("3000")
        assert manager.get_market_value() == Decimal("0")

    def test_rejected_sell_keeps_holdings(self, manager, exchange):
        manager.portfolio.add_stocks(UNKNOWN, 3)

        with pytest.raises(OrderRejectedError):
            manager.sell(UNKNOWN, 2)

        assert manager.portfolio.get_quantity(UNKNOWN) == 3
        assert exchange.order_book.rejected()[0].is_sell

    def test_valuation_of_unquoted_holding_propagates(self, manager):
        manager.portfolio.add_stocks(UNKNOWN, 1)

        with pytest.raises(KeyError):
            manager.get_market_value()
