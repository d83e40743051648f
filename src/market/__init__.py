"""市场标的"""

from src.market.stock import Stock

__all__ = ["Stock"]
