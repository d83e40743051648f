"""账户管理系统"""

from src.account.errors import InsufficientStockError, PortfolioError
from src.account.portfolio import Portfolio
from src.account.manager import PortfolioManager

__all__ = [
    "InsufficientStockError",
    "PortfolioError",
    "Portfolio",
    "PortfolioManager",
]
