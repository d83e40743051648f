"""交易所接口"""

from src.execution.exchange.base import OrderRejectedError, StockExchangeClient
from src.execution.exchange.simulator import SimulatedExchangeClient

__all__ = ["OrderRejectedError", "StockExchangeClient", "SimulatedExchangeClient"]
