"""订单管理"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Dict, Any, List
import uuid

from src.market.stock import Stock


class OrderStatus(Enum):
    """订单状态"""

    PENDING = "pending"  # 待成交
    FILLED = "filled"  # 全部成交
    REJECTED = "rejected"  # 已拒绝


@dataclass
class Order:
    """订单"""

    stock: Stock
    direction: str  # buy/sell
    quantity: int

    order_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None

    filled_price: Decimal = Decimal("0")
    reject_reason: Optional[str] = None

    @property
    def is_buy(self) -> bool:
        return self.direction == "buy"

    @property
    def is_sell(self) -> bool:
        return self.direction == "sell"

    @property
    def is_filled(self) -> bool:
        return self.status == OrderStatus.FILLED

    @property
    def filled_amount(self) -> Decimal:
        if not self.is_filled:
            return Decimal("0")
        return self.filled_price * self.quantity

    def fill(self, price: Decimal) -> None:
        """按价格全部成交"""
        self.status = OrderStatus.FILLED
        self.filled_price = price
        self.updated_at = datetime.now()

    def reject(self, reason: str) -> None:
        """拒绝订单"""
        self.status = OrderStatus.REJECTED
        self.reject_reason = reason
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "order_id": self.order_id,
            "symbol": self.stock.symbol,
            "name": self.stock.name,
            "direction": self.direction,
            "quantity": self.quantity,
            "status": self.status.value,
            "filled_price": str(self.filled_price),
            "reject_reason": self.reject_reason,
            "created_at": self.created_at.isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"Order({self.order_id}, {self.stock.symbol}, {self.direction}, "
            f"{self.quantity}, {self.status.value})"
        )


class OrderBook:
    """订单簿，记录已提交的订单"""

    def __init__(self):
        self._orders: Dict[str, Order] = {}

    def __len__(self) -> int:
        return len(self._orders)

    def add(self, order: Order) -> Order:
        self._orders[order.order_id] = order
        return order

    def get(self, order_id: str) -> Optional[Order]:
        """获取订单"""
        return self._orders.get(order_id)

    def get_orders_by_stock(self, stock: Stock) -> List[Order]:
        """按股票获取订单"""
        return [o for o in self._orders.values() if o.stock == stock]

    def all(self) -> List[Order]:
        return list(self._orders.values())

    def filled(self) -> List[Order]:
        return [o for o in self._orders.values() if o.is_filled]

    def rejected(self) -> List[Order]:
        return [o for o in self._orders.values() if o.status == OrderStatus.REJECTED]

    def clear(self) -> None:
        self._orders.clear()
