"""股票标的"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stock:
    """股票

    以 (symbol, name) 判等，不可变，可作为字典键使用。
    """

    symbol: str  # 股票代码
    name: str = ""  # 显示名称

    def __post_init__(self):
        if not self.symbol:
            raise ValueError("股票代码不能为空")

    def __str__(self) -> str:
        if self.name:
            return f"{self.symbol} ({self.name})"
        return self.symbol
