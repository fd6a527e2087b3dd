"""Query models and builders."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class EarthquakeFilters(BaseModel):
    """Filter bag accepted by the earthquake query."""

    model_config = ConfigDict(frozen=True)

    limit: int | None = None


class EarthquakeQuery(BaseModel):
    """地震数据查询模型."""

    model_config = ConfigDict(frozen=True)

    filters: EarthquakeFilters = EarthquakeFilters()
    sort_by: str | None = None
    y_axis_key: str = "longitude"


class QueryBuilder:
    """查询构建器."""

    def __init__(self) -> None:
        self._query: dict[str, Any] = {}

    def limit(self, limit: int | None) -> "QueryBuilder":
        """设置返回记录数上限."""
        self._query["filters"] = EarthquakeFilters(limit=limit)
        return self

    def sort_by(self, key: str | None) -> "QueryBuilder":
        """设置排序字段."""
        self._query["sort_by"] = key
        return self

    def y_axis(self, key: str) -> "QueryBuilder":
        """设置Y轴字段."""
        self._query["y_axis_key"] = key
        return self

    def build(self) -> EarthquakeQuery:
        """构建查询对象."""
        return EarthquakeQuery(**self._query)
