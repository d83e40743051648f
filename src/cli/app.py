"""StockFolio CLI 主入口

使用 Typer 构建命令行接口
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict, List, Tuple

import typer
from rich.console import Console
from rich.table import Table


# 创建 Typer 应用
app = typer.Typer(
    name="stockfolio",
    help="StockFolio - 组合估值与交易",
    add_completion=False,
)

console = Console()


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
):
    """初始化日志"""
    import logging

    from src.utils.logging import init_logging

    init_logging()
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


# ============================================================
# 参数解析
# ============================================================


def _split(raw: str, option: str) -> Tuple[str, str, str]:
    parts = raw.split(":")
    if len(parts) != 3 or not parts[0]:
        raise typer.BadParameter(
            f"格式应为 SYMBOL:NAME:VALUE，实际: {raw}",
            param_hint=option,
        )
    return parts[0], parts[1], parts[2]


def parse_holding(raw: str):
    """解析持仓参数 SYMBOL:NAME:QTY"""
    from src.market.stock import Stock

    symbol, name, qty = _split(raw, "--hold")
    try:
        quantity = int(qty)
    except ValueError:
        raise typer.BadParameter(f"数量无效: {qty}", param_hint="--hold") from None
    if quantity <= 0:
        raise typer.BadParameter(f"数量必须为正数: {qty}", param_hint="--hold")
    return Stock(symbol, name), quantity


def parse_price(raw: str):
    """解析行情参数 SYMBOL:NAME:PRICE"""
    from src.market.stock import Stock

    symbol, name, value = _split(raw, "--price")
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise typer.BadParameter(f"价格无效: {value}", param_hint="--price") from None
    if price <= 0:
        raise typer.BadParameter(f"价格必须为正数: {value}", param_hint="--price")
    return Stock(symbol, name), price


# ============================================================
# 估值命令
# ============================================================


@app.command("value")
def value(
    holds: List[str] = typer.Option(..., "--hold", help="持仓 SYMBOL:NAME:QTY"),
    prices: List[str] = typer.Option(..., "--price", help="行情 SYMBOL:NAME:PRICE"),
):
    """计算组合市值"""
    from config.base import get_settings
    from src.account.manager import PortfolioManager
    from src.account.portfolio import Portfolio
    from src.execution.exchange.simulator import SimulatedExchangeClient

    settings = get_settings()

    portfolio = Portfolio(name=settings.portfolio.name)
    for raw in holds:
        stock, quantity = parse_holding(raw)
        portfolio.add_stocks(stock, quantity)

    quotes: Dict = dict(parse_price(raw) for raw in prices)
    missing = [str(s) for s in portfolio.get_stocks() if s not in quotes]
    if missing:
        raise typer.BadParameter(f"缺少行情: {', '.join(missing)}", param_hint="--price")

    client = SimulatedExchangeClient(settings.exchange)
    client.set_quotes(quotes)

    manager = PortfolioManager(portfolio, client, settings.portfolio)
    holdings = manager.get_holdings_value()

    table = Table(title=f"组合市值 ({settings.exchange.currency})")
    table.add_column("股票", style="cyan")
    table.add_column("数量", justify="right")
    table.add_column("价格", justify="right")
    table.add_column("市值", justify="right", style="green")

    # 金额按交易所小数位四舍五入
    exp = Decimal(1).scaleb(-settings.exchange.price_places)

    stocks = portfolio.get_stocks()
    for stock, amount in holdings.items():
        table.add_row(
            str(stock),
            str(stocks[stock]),
            str(quotes[stock]),
            str(amount.quantize(exp, rounding=ROUND_HALF_UP)),
        )

    total = sum(holdings.values(), Decimal("0")).quantize(exp, rounding=ROUND_HALF_UP)

    console.print(table)
    console.print(f"[bold]总市值:[/bold] {total}")


# ============================================================
# 系统命令
# ============================================================


@app.command("version")
def version():
    """显示版本信息"""
    console.print("[bold]StockFolio[/bold] v0.1.0")
    console.print("组合估值与交易")


@app.command("config")
def show_config():
    """显示当前配置"""
    from config.base import get_settings

    settings = get_settings()

    table = Table(title="当前配置")
    table.add_column("配置项", style="cyan")
    table.add_column("值", style="green")

    table.add_row("交易所", settings.exchange.name)
    table.add_row("币种", settings.exchange.currency)
    table.add_row("金额小数位", str(settings.exchange.price_places))
    table.add_row("组合名称", settings.portfolio.name)
    table.add_row("买入记入持仓", str(settings.portfolio.record_buys))
    table.add_row("日志级别", settings.logging.level.value)

    console.print(table)


# ============================================================
# 入口点
# ============================================================


def main():
    """CLI 入口点"""
    app()


if __name__ == "__main__":
    main()
