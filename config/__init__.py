"""配置模块"""

from .base import (
    # 枚举
    Direction,
    LogLevel,
    # 配置类
    ExchangeConfig,
    PortfolioConfig,
    LoggingConfig,
    AppSettings,
    # 全局函数
    get_settings,
    reload_settings,
)

__all__ = [
    "Direction",
    "LogLevel",
    "ExchangeConfig",
    "PortfolioConfig",
    "LoggingConfig",
    "AppSettings",
    "get_settings",
    "reload_settings",
]
