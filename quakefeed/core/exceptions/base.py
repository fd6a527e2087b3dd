"""quakefeed核心异常类."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from quakefeed.core.exceptions.codes import ErrorCode


class QuakeFeedError(Exception):
    """quakefeed基础异常类."""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GENERAL.value,
        details: dict[str, Any] | None = None,
    ):
        """初始化异常.

        Args:
            message: 错误消息
            error_code: 错误代码
            details: 额外详情
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.error_code,
            "message": self.message,
            "details": dict(self.details),
        }


class FetchError(QuakeFeedError):
    """Transport failure while retrieving the feed."""

    def __init__(
        self,
        message: str,
        url: str,
        cause: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["url"] = url
        if cause is not None:
            super_details["cause"] = cause
        super().__init__(message, ErrorCode.FETCH.value, super_details)
        self.url = url
        self.cause = cause


@dataclass(slots=True, frozen=True)
class CsvRowError:
    """A single structural problem reported while parsing CSV text."""

    row: int | None
    code: str
    message: str

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


class CsvParseError(QuakeFeedError):
    """Structurally malformed CSV input."""

    def __init__(
        self,
        message: str,
        errors: list[CsvRowError] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if errors:
            super_details["errors"] = [error.as_dict() for error in errors]
        super().__init__(message, ErrorCode.CSV_PARSE.value, super_details)
        self.errors = list(errors or [])


class FieldCoercionError(QuakeFeedError):
    """A required field could not be interpreted as its expected type."""

    def __init__(
        self,
        message: str,
        field: str,
        value: Any = None,
        row_id: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["field"] = field
        super_details["value"] = repr(value)
        if row_id is not None:
            super_details["row_id"] = row_id
        super().__init__(message, ErrorCode.FIELD_COERCION.value, super_details)
        self.field = field
        self.value = value
        self.row_id = row_id


class InvalidQueryError(QuakeFeedError):
    """查询参数无效."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if parameter:
            super_details["parameter"] = parameter
        super().__init__(message, ErrorCode.INVALID_QUERY.value, super_details)
        self.parameter = parameter
