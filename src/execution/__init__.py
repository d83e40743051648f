"""交易执行系统"""

from .order import Order, OrderBook, OrderStatus
from .exchange import StockExchangeClient, SimulatedExchangeClient

__all__ = [
    "Order",
    "OrderBook",
    "OrderStatus",
    "StockExchangeClient",
    "SimulatedExchangeClient",
]
