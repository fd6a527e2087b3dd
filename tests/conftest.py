"""Pytest configuration for quakefeed test suite."""

from __future__ import annotations

import pytest

FEED_HEADER = (
    "time,latitude,longitude,depth,mag,magType,nst,gap,dmin,rms,net,id,updated,place,type,"
    "horizontalError,depthError,magError,magNst,status,locationSource,magSource"
)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--quakefeed-run-integration",
        action="store_true",
        default=False,
        help="Run quakefeed integration tests that fetch the live feed.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker for quakefeed tests."""

    config.addinivalue_line(
        "markers",
        "integration: marks quakefeed tests requiring network access",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--quakefeed-run-integration"):
        return

    skip_integration = pytest.mark.skip(
        reason="integration tests require --quakefeed-run-integration",
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def feed_csv() -> str:
    """A small feed snapshot in the USGS summary layout."""

    return "\n".join(
        [
            FEED_HEADER,
            "2024-03-01T10:00:00.000Z,38.5,-122.7,5.1,2.4,md,30,55,0.01,0.05,nc,nc001,"
            "2024-03-01T10:20:00.000Z,\"5km N of The Geysers, CA\",earthquake,0.2,0.4,0.15,25,reviewed,nc,nc",
            "2024-03-01T09:00:00.000Z,61.2,-150.1,40.0,1.1,ml,,,,0.4,ak,ak002,"
            "2024-03-01T09:30:00.000Z,\"20km W of Anchorage, Alaska\",earthquake,,0.3,,,automatic,ak,ak",
            "2024-03-01T08:00:00.000Z,-20.0,-70.0,35.0,4.6,mb,0,90,1.2,0.9,us,us003,"
            "2024-03-01T08:45:00.000Z,\"offshore Tarapaca, Chile\",earthquake,7.1,1.9,0.08,44,reviewed,us,us",
            "",
        ]
    )
