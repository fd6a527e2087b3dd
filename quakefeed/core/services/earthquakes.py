"""地震数据服务：抓取、解析、映射、过滤、排序与截断."""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from quakefeed.core.config import FeedConfig, QuakeFeedConfig, resolve_feed_url
from quakefeed.core.data.ingestion import fetch_text, map_rows, parse_csv
from quakefeed.core.logging import get_logger, log_context
from quakefeed.core.models import EarthquakeFilters, EarthquakeQuery, EarthquakeRecord
from quakefeed.core.services.filtering import filter_invalid_earthquakes
from quakefeed.core.services.limits import apply_limit
from quakefeed.core.services.sorting import sort_records

logger = get_logger(__name__)


class EarthquakeService:
    """核心地震数据服务.

    Each call fetches the feed once and runs every stage in order. The first
    failing stage aborts the call; nothing is cached between calls.
    """

    def __init__(
        self,
        config: QuakeFeedConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """初始化地震数据服务.

        Args:
            config: 配置，默认使用内置配置
            client: 可选的共享 HTTP 客户端
        """
        self.config = config or QuakeFeedConfig()
        self.client = client

    @property
    def feed(self) -> FeedConfig:
        return self.config.feed

    async def get_earthquakes(
        self,
        filters: EarthquakeFilters | None = None,
        sort_by: str | None = None,
    ) -> Sequence[EarthquakeRecord]:
        """Fetch the feed and return records shaped for display.

        Args:
            filters: 过滤条件（目前仅 ``limit``）
            sort_by: 排序字段，``None`` 表示保持原始顺序

        Raises:
            FetchError, CsvParseError, FieldCoercionError: propagated unchanged.
        """
        limit = filters.limit if filters is not None else self.feed.default_limit
        y_axis_key = self.feed.y_axis_key

        with log_context(sort_by=sort_by, limit=limit):
            logger.info("Fetching earthquakes with limit={}, sort_by={}", limit, sort_by)

            url = resolve_feed_url(self.feed)
            csv_text = await fetch_text(url, client=self.client, timeout=self.feed.timeout)

            rows = parse_csv(csv_text)
            earthquakes: Sequence[EarthquakeRecord] = map_rows(rows)
            logger.bind(stage="map").info("Parsed {} records.", len(earthquakes))

            earthquakes = filter_invalid_earthquakes(earthquakes, sort_by, y_axis_key)
            logger.bind(stage="filter").info(
                "Filtered down to {} valid records for sorting/plotting.", len(earthquakes)
            )

            earthquakes = sort_records(earthquakes, sort_by)
            logger.bind(stage="sort").info("Sorted records by: {}.", sort_by or "default order")

            earthquakes = apply_limit(earthquakes, limit)
            logger.bind(stage="limit").info(
                "Applied limit: {}. Final count: {}", "none" if limit is None else limit, len(earthquakes)
            )

        return earthquakes

    async def run_query(self, query: EarthquakeQuery) -> Sequence[EarthquakeRecord]:
        """Run a prepared :class:`EarthquakeQuery`."""
        service = self
        if query.y_axis_key != self.feed.y_axis_key:
            config = QuakeFeedConfig.from_dict(self.config.to_dict())
            config.feed.y_axis_key = query.y_axis_key
            service = EarthquakeService(config, client=self.client)
        return await service.get_earthquakes(query.filters, query.sort_by)


async def get_earthquakes(
    filters: EarthquakeFilters | None = None,
    sort_by: str | None = None,
    *,
    config: QuakeFeedConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> Sequence[EarthquakeRecord]:
    """Convenience wrapper around :meth:`EarthquakeService.get_earthquakes`."""

    return await EarthquakeService(config, client).get_earthquakes(filters, sort_by)


__all__ = ["EarthquakeService", "get_earthquakes"]
