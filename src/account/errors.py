"""账户异常"""

from typing import Optional

from src.market.stock import Stock


class PortfolioError(Exception):
    """组合操作异常基类"""


class InsufficientStockError(PortfolioError):
    """持仓不足

    减仓数量超过当前持有数量时抛出，调用方可据此恢复。
    """

    def __init__(self, stock: Stock, requested: int, held: int, message: Optional[str] = None):
        self.stock = stock
        self.requested = requested
        self.held = held
        super().__init__(
            message or f"持仓不足: {stock} 请求 {requested}，当前持有 {held}"
        )
