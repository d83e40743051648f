"""Pydantic 配置基类

使用 Pydantic 进行配置校验，支持：
- 类型自动转换
- 值范围校验
- 环境变量加载
- 配置文件加载 (YAML/JSON)
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ============================================================
# 枚举类型
# ============================================================


class Direction(str, Enum):
    """交易方向"""
    BUY = "buy"
    SELL = "sell"


class LogLevel(str, Enum):
    """日志级别"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ============================================================
# 配置模型
# ============================================================


class ExchangeConfig(BaseModel):
    """交易所配置"""

    name: str = Field(default="simulator")
    currency: str = Field(default="USD", min_length=3, max_length=3)
    price_places: int = Field(default=2, ge=0, le=8)  # 金额保留小数位

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        return v.upper()


class PortfolioConfig(BaseModel):
    """组合配置"""

    name: str = Field(default="default", min_length=1)
    # 买入成交后是否记入持仓
    record_buys: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """日志配置"""

    level: LogLevel = Field(default=LogLevel.INFO)
    log_dir: Optional[Path] = Field(default=None)
    log_file: str = Field(default="stockfolio.log")
    json_format: bool = Field(default=False)
    console: bool = Field(default=True)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


# ============================================================
# 主配置类
# ============================================================


class AppSettings(BaseSettings):
    """应用主配置

    支持从环境变量和 .env 文件加载
    """

    model_config = SettingsConfigDict(
        env_prefix="STOCKFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # 子配置
    exchange: ExchangeConfig = Field(default_factory=ExchangeConfig)
    portfolio: PortfolioConfig = Field(default_factory=PortfolioConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """导出为字典"""
        return self.model_dump()

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "AppSettings":
        """从 YAML 文件加载"""
        import yaml

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "AppSettings":
        """从 JSON 文件加载"""
        import json

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(**data)

    def save_yaml(self, path: Union[str, Path]) -> None:
        """保存为 YAML 文件"""
        import yaml

        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True, default_flow_style=False)

    def save_json(self, path: Union[str, Path]) -> None:
        """保存为 JSON 文件"""
        import json

        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)


# ============================================================
# 全局配置实例
# ============================================================

_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """获取全局配置实例"""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """重新加载配置"""
    global _settings
    _settings = AppSettings()
    return _settings
