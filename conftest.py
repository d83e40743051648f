"""Pytest配置和fixtures"""

import logging
from decimal import Decimal
from unittest.mock import Mock

import pytest
import structlog

from src.account.portfolio import Portfolio
from src.execution.exchange.base import StockExchangeClient
from src.market.stock import Stock


@pytest.fixture(autouse=True)
def reset_logging():
    """每个用例后恢复日志配置"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def amzn() -> Stock:
    return Stock("amzn", "Amazon")


@pytest.fixture
def unknown_stock() -> Stock:
    return Stock("id", "name")


@pytest.fixture
def amzn_price() -> Decimal:
    return Decimal("1000")


@pytest.fixture
def mock_portfolio(amzn) -> Mock:
    """持有 3 股 amzn 的 Mock 组合"""
    portfolio = Mock(spec=Portfolio)
    portfolio.get_stocks.return_value = {amzn: 3}
    return portfolio


@pytest.fixture
def mock_client() -> Mock:
    return Mock(spec=StockExchangeClient)
