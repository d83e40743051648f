"""StockFolio CLI 模块

提供统一的命令行接口：
- 组合估值命令
- 系统管理命令
"""

from src.cli.app import app, main

__all__ = ["app", "main"]
