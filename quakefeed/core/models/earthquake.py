"""Earthquake record model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from quakefeed.core.models.fields import CANONICAL_FIELDS, COLUMN_TO_ATTRIBUTE


class EarthquakeRecord(BaseModel):
    """单条地震记录模型.

    Attributes use snake_case; the feed's camelCase column names are accepted
    as aliases and by :meth:`get_field`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    time: str | None = None
    updated: str | None = None

    latitude: float | None = None
    longitude: float | None = None
    depth: float | None = None

    mag: float | None = None
    mag_type: str | None = Field(default=None, alias="magType")
    mag_error: float | None = Field(default=None, alias="magError")
    mag_nst: int | float | None = Field(default=None, alias="magNst")

    nst: int | float | None = None
    gap: float | None = None
    dmin: float | None = None
    rms: float | None = None
    horizontal_error: float | None = Field(default=None, alias="horizontalError")
    depth_error: float | None = Field(default=None, alias="depthError")

    net: str | None = None
    place: str | None = None
    type: str | None = None
    status: str | None = None
    location_source: str | None = Field(default=None, alias="locationSource")
    mag_source: str | None = Field(default=None, alias="magSource")

    extra: dict[str, Any] | None = None

    def get_field(self, key: str) -> Any:
        """Return the value stored under an attribute name, a feed column name or an extra column."""

        if key in type(self).model_fields:
            return getattr(self, key)
        attribute = COLUMN_TO_ATTRIBUTE.get(key)
        if attribute is not None:
            return getattr(self, attribute)
        if self.extra and key in self.extra:
            return self.extra[key]
        return None

    def as_row(self) -> dict[str, Any]:
        """Flatten the record into feed column order followed by extra columns."""

        row = {column: self.get_field(column) for column in CANONICAL_FIELDS}
        if self.extra:
            for key, value in self.extra.items():
                row.setdefault(key, value)
        return row


__all__ = ["EarthquakeRecord"]
