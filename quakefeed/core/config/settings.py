"""配置管理模块 - 处理quakefeed的配置"""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from quakefeed.core.exceptions import InvalidQueryError

DEFAULT_FEED_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_month.csv"
# Public CORS relay, rate-limited and frequently unavailable.
DEFAULT_PROXY_URL = "https://cors-anywhere.herokuapp.com/"
DEVELOPMENT = "development"


@dataclass
class FeedConfig:
    """Feed endpoint and query defaults."""

    base_url: str = DEFAULT_FEED_URL
    proxy_url: str = DEFAULT_PROXY_URL
    environment: str = "production"
    timeout: float = 30.0
    default_limit: int | None = None
    y_axis_key: str = "longitude"


@dataclass
class LoggingConfig:
    """日志配置"""

    level: str = "INFO"
    file: str | None = None


@dataclass
class QuakeFeedConfig:
    """quakefeed主配置"""

    feed: FeedConfig = field(default_factory=FeedConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "QuakeFeedConfig":
        """从字典创建配置"""
        feed_config = FeedConfig(**config_dict.get("feed", {}))
        logging_config = LoggingConfig(**config_dict.get("logging", {}))

        return cls(feed=feed_config, logging=logging_config)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "feed": asdict(self.feed),
            "logging": asdict(self.logging),
        }


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_path: Path | None = None):
        """初始化配置管理器

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
        """
        self.config_path = config_path or Path.home() / ".quakefeed" / "config.toml"
        self.config = self._load_config()

    def _load_config(self) -> QuakeFeedConfig:
        """加载配置"""
        if not self.config_path.exists():
            return QuakeFeedConfig()

        try:
            with open(self.config_path, "rb") as f:
                config_dict = tomllib.load(f)
            return QuakeFeedConfig.from_dict(config_dict)
        except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
            logger.warning("Failed to load config from {}: {}", self.config_path, e)
            return QuakeFeedConfig()

    def get_config(self) -> QuakeFeedConfig:
        """获取当前配置"""
        return self.config

    def update_config(self, **updates: Any) -> None:
        """更新配置"""
        config_dict = self.config.to_dict()

        def deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
            for k, v in u.items():
                if isinstance(v, dict):
                    d[k] = deep_update(d.get(k, {}), v)
                else:
                    d[k] = v
            return d

        deep_update(config_dict, updates)
        self.config = QuakeFeedConfig.from_dict(config_dict)


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidQueryError(f"{name} must be an integer, got {raw!r}", parameter=name) from e


def _env_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise InvalidQueryError(f"{name} must be a number, got {raw!r}", parameter=name) from e


def load_config_from_env() -> dict[str, Any]:
    """从环境变量加载配置"""
    config: dict[str, Any] = {}

    # 数据源配置
    feed_config: dict[str, Any] = {}
    environment = os.getenv("QUAKEFEED_ENV")
    if environment is not None:
        feed_config["environment"] = environment
    if os.getenv("QUAKEFEED_FEED_URL"):
        feed_config["base_url"] = os.getenv("QUAKEFEED_FEED_URL")
    if os.getenv("QUAKEFEED_PROXY_URL"):
        feed_config["proxy_url"] = os.getenv("QUAKEFEED_PROXY_URL")
    timeout = _env_float("QUAKEFEED_TIMEOUT")
    if timeout is not None:
        feed_config["timeout"] = timeout
    limit = _env_int("QUAKEFEED_LIMIT")
    if limit is not None:
        feed_config["default_limit"] = limit

    if feed_config:
        config["feed"] = feed_config

    # 日志配置
    logging_config: dict[str, Any] = {}
    level = os.getenv("QUAKEFEED_LOGGING_LEVEL")
    if level is not None:
        logging_config["level"] = level
    log_file = os.getenv("QUAKEFEED_LOGGING_FILE")
    if log_file is not None:
        logging_config["file"] = log_file

    if logging_config:
        config["logging"] = logging_config

    return config


def resolve_feed_url(feed: FeedConfig) -> str:
    """Return the URL to fetch, prefixed with the CORS relay in development."""

    is_development = feed.environment == DEVELOPMENT
    url = feed.proxy_url + feed.base_url if is_development else feed.base_url
    logger.info(
        "Running in {} mode. Using URL: {}",
        DEVELOPMENT if is_development else "production",
        url,
    )
    return url
