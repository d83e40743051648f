"""订单测试"""

from decimal import Decimal

from src.execution.order import Order, OrderBook, OrderStatus
from src.market.stock import Stock


AMZN = Stock("amzn", "Amazon")
GOOG = Stock("goog", "Alphabet")


class TestOrder:
    """订单测试"""

    def test_default_state(self):
        order = Order(stock=AMZN, direction="buy", quantity=5)
        assert order.status == OrderStatus.PENDING
        assert order.is_buy
        assert not order.is_sell
        assert order.filled_amount == Decimal("0")
        assert len(order.order_id) == 8

    def test_fill(self):
        order = Order(stock=AMZN, direction="sell", quantity=2)
        order.fill(Decimal("1000"))

        assert order.is_filled
        assert order.filled_amount == Decimal("2000")
        assert order.updated_at is not None

    def test_reject(self):
        order = Order(stock=AMZN, direction="buy", quantity=2)
        order.reject("无行情数据")

        assert order.status == OrderStatus.REJECTED
        assert order.reject_reason == "无行情数据"
        assert order.filled_amount == Decimal("0")

    def test_to_dict(self):
        order = Order(stock=AMZN, direction="buy", quantity=5)
        order.fill(Decimal("10.5"))
        data = order.to_dict()

        assert data["symbol"] == "amzn"
        assert data["name"] == "Amazon"
        assert data["status"] == "filled"
        assert data["filled_price"] == "10.5"


class TestOrderBook:
    """订单簿测试"""

    def test_add_and_get(self):
        book = OrderBook()
        order = book.add(Order(stock=AMZN, direction="buy", quantity=1))

        assert book.get(order.order_id) is order
        assert book.get("missing") is None
        assert len(book) == 1

    def test_filters(self):
        book = OrderBook()
        filled = book.add(Order(stock=AMZN, direction="buy", quantity=1))
        filled.fill(Decimal("1"))
        rejected = book.add(Order(stock=GOOG, direction="buy", quantity=1))
        rejected.reject("无行情数据")

        assert book.filled() == [filled]
        assert book.rejected() == [rejected]
        assert book.get_orders_by_stock(GOOG) == [rejected]

    def test_clear(self):
        book = OrderBook()
        book.add(Order(stock=AMZN, direction="buy", quantity=1))
        book.clear()
        assert len(book) == 0
