#!/usr/bin/env python3
"""
quakefeed - 地震数据源
库模式示例启动脚本
"""

import argparse
import asyncio

from loguru import logger

from quakefeed.core.config import ConfigManager, load_config_from_env
from quakefeed.core.exceptions import QuakeFeedError
from quakefeed.core.formatting import format_timestamp
from quakefeed.core.logging import configure_logging
from quakefeed.core.models import EarthquakeFilters
from quakefeed.core.services import EarthquakeService, paginate


async def run_library_mode(limit: int | None, sort_by: str | None, page: int, page_size: int) -> int:
    """运行库模式示例"""
    manager = ConfigManager()
    manager.update_config(**load_config_from_env())
    config = manager.get_config()
    configure_logging(
        level=config.logging.level,
        file_output=config.logging.file is not None,
        file_path=config.logging.file,
    )
    service = EarthquakeService(config)

    try:
        records = await service.get_earthquakes(EarthquakeFilters(limit=limit), sort_by=sort_by)
    except QuakeFeedError as e:
        logger.error("Earthquake data unavailable: {}", e.to_payload())
        return 1

    window = paginate(records, page, page_size)
    logger.info("Page {}/{} ({} records)", page, window.total_pages, len(records))
    for record in window.page_items:
        logger.info(
            "{} M{} {} ({})",
            format_timestamp(record.time),
            record.mag,
            record.place,
            record.id,
        )
    return 0


def main() -> int:
    """主入口函数"""
    parser = argparse.ArgumentParser(description="quakefeed - 地震数据源")
    parser.add_argument("--limit", type=int, default=None, help="最大记录数")
    parser.add_argument("--sort-by", default=None, help="排序字段，例如 mag 或 depth")
    parser.add_argument("--page", type=int, default=1, help="页码（从 1 开始）")
    parser.add_argument("--page-size", type=int, default=10, help="每页记录数")
    args = parser.parse_args()

    return asyncio.run(run_library_mode(args.limit, args.sort_by, args.page, args.page_size))


if __name__ == "__main__":
    raise SystemExit(main())
