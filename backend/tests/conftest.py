"""
Shared fixtures for the flight itinerary test suite.

The core is pure, so no external service is mocked; the HTTP tests run the
FastAPI app in-process through TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from flight_itinerary.config import Settings
from flight_itinerary.main import create_app


# ---------------------------------------------------------------------------
# Flight path sets
# ---------------------------------------------------------------------------

@pytest.fixture
def single_leg():
    """Kuala Belait → Singapore, one leg only."""
    return [["GBB", "SGP"]]


@pytest.fixture
def shuffled_trail():
    """GBB → BKK → GSO → MYS → SGP, submitted out of order."""
    return [
        ["MYS", "SGP"],
        ["GBB", "BKK"],
        ["GSO", "MYS"],
        ["BKK", "GSO"],
    ]


@pytest.fixture
def trail_with_cycle():
    """MYS → SGP → BKK → MYS → BKK: the start is revisited along the way."""
    return [
        ["MYS", "SGP"],
        ["MYS", "BKK"],
        ["SGP", "BKK"],
        ["BKK", "MYS"],
    ]


@pytest.fixture
def closed_loop():
    """Pure cycle: every airport is balanced, no start/end exists."""
    return [
        ["MYS", "SGP"],
        ["SGP", "BKK"],
        ["BKK", "MYS"],
    ]


@pytest.fixture
def two_origins():
    """Closed graph plus a chord REN → BKK: SGP and REN both look like starts (+1), BKK is -2."""
    return [
        ["MYS", "SGP"],
        ["MYS", "BKK"],
        ["SGP", "BKK"],
        ["BKK", "MYS"],
        ["SGP", "MYS"],
        ["REN", "BKK"],
    ]


@pytest.fixture
def two_destinations():
    """Closed graph plus a detached leg REN → BEN: two ends show up."""
    return [
        ["MYS", "SGP"],
        ["MYS", "BKK"],
        ["SGP", "BKK"],
        ["BKK", "MYS"],
        ["SGP", "MYS"],
        ["REN", "BEN"],
    ]


# ---------------------------------------------------------------------------
# HTTP app
# ---------------------------------------------------------------------------

@pytest.fixture
def test_settings():
    return Settings(server={"name": "itinerary-test", "host": "127.0.0.1", "port": 8099})


@pytest.fixture
def client(test_settings):
    """TestClient that turns unhandled exceptions into 500 responses."""
    with TestClient(create_app(test_settings), raise_server_exceptions=False) as c:
        yield c
