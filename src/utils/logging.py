"""日志配置模块

基于 structlog 的统一日志配置，支持：
- 控制台输出
- 文件持久化
- 结构化日志 (structlog)
"""

import logging
import sys
from contextlib import contextmanager
from decimal import Decimal
from pathlib import Path
from typing import Optional

import structlog
from structlog.types import Processor


# ============================================================
# 结构化日志 (structlog)
# ============================================================


def configure_structlog(
    level: str = "INFO",
    json_format: bool = False,
    add_timestamp: bool = True,
    log_file: Optional[str] = None,
) -> None:
    """
    配置结构化日志

    Args:
        level: 日志级别
        json_format: 是否使用 JSON 格式
        add_timestamp: 是否添加时间戳
        log_file: 日志文件路径
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        renderer = structlog.processors.JSONRenderer(default=str)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(getattr(logging, level.upper()))


def get_structlog(name: Optional[str] = None):
    """获取结构化日志器"""
    return structlog.get_logger(name)


@contextmanager
def log_context(**kwargs):
    """
    临时绑定上下文变量

    Example:
        with log_context(portfolio="default"):
            manager.sell(stock, 10)
    """
    structlog.contextvars.bind_contextvars(**kwargs)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*kwargs.keys())


def init_logging(settings=None) -> None:
    """按应用配置初始化日志"""
    if settings is None:
        from config.base import get_settings
        settings = get_settings()

    cfg = settings.logging
    log_file = None
    if cfg.log_dir is not None:
        Path(cfg.log_dir).mkdir(parents=True, exist_ok=True)
        log_file = str(Path(cfg.log_dir) / cfg.log_file)

    configure_structlog(
        level=cfg.level.value,
        json_format=cfg.json_format,
        log_file=log_file,
    )


# ============================================================
# 业务日志辅助
# ============================================================


class TradeLogger:
    """交易专用日志器"""

    def __init__(self, portfolio: str = "default"):
        self.logger = get_structlog("trade").bind(portfolio=portfolio)

    def market_valued(self, positions: int, value: Decimal) -> None:
        self.logger.debug(
            "market_valued",
            positions=positions,
            value=str(value),
        )

    def buy_executed(self, symbol: str, quantity: int, cost: Decimal) -> None:
        self.logger.info(
            "buy_executed",
            symbol=symbol,
            quantity=quantity,
            cost=str(cost),
        )

    def buy_rejected(self, symbol: str, quantity: int) -> None:
        self.logger.warning(
            "buy_rejected",
            symbol=symbol,
            quantity=quantity,
        )

    def sell_executed(self, symbol: str, quantity: int, proceeds: Decimal) -> None:
        self.logger.info(
            "sell_executed",
            symbol=symbol,
            quantity=quantity,
            proceeds=str(proceeds),
        )

    def sell_skipped(self, symbol: str, requested: int, held: int) -> None:
        self.logger.warning(
            "sell_skipped",
            symbol=symbol,
            requested=requested,
            held=held,
        )
