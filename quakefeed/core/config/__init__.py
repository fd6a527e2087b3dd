"""Configuration management module."""

from quakefeed.core.config.settings import (
    DEFAULT_FEED_URL,
    DEFAULT_PROXY_URL,
    ConfigManager,
    FeedConfig,
    LoggingConfig,
    QuakeFeedConfig,
    load_config_from_env,
    resolve_feed_url,
)

__all__ = [
    "DEFAULT_FEED_URL",
    "DEFAULT_PROXY_URL",
    "ConfigManager",
    "FeedConfig",
    "LoggingConfig",
    "QuakeFeedConfig",
    "load_config_from_env",
    "resolve_feed_url",
]
