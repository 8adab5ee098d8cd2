"""
Shared pytest fixtures for the data broker.

Every test gets its own in-memory SQLite database, so tests never
see each other's rows and no cleanup is needed.

DATABROKER_LOG_FILE must be set BEFORE any project module is imported,
because loggers are created at import time.
"""

import os

# --- env must be set before any project import ---
os.environ.setdefault("DATABROKER_LOG_FILE", "false")

import pytest

from core.registry import ServiceRegistry
from db.database import create_test_database_manager, DatabaseManager
from services.configuration import add_server_data_services, add_server_report_services
from services.data_broker import DataBroker
from services.report_broker import ServerReportBroker
from weather import WeatherTestDataProvider, add_weather_services


# ============================================================
# Database fixtures
# ============================================================


@pytest.fixture
async def db_manager() -> DatabaseManager:
    """Fresh in-memory database with all tables created."""
    manager = create_test_database_manager()
    await manager.initialize()
    yield manager
    await manager.close()


@pytest.fixture
def test_data() -> WeatherTestDataProvider:
    """The deterministic 100-record weather data set."""
    return WeatherTestDataProvider.instance()


@pytest.fixture
async def populated_db(db_manager: DatabaseManager, test_data: WeatherTestDataProvider) -> DatabaseManager:
    """db_manager with the weather test data loaded."""
    await test_data.load_database(db_manager)
    return db_manager


# ============================================================
# Service fixtures
# ============================================================


@pytest.fixture
def registry(db_manager: DatabaseManager) -> ServiceRegistry:
    """Registry with the weather sorter, filter and report registered."""
    return add_weather_services(ServiceRegistry(), db_manager)


@pytest.fixture
def data_broker(populated_db: DatabaseManager, registry: ServiceRegistry) -> DataBroker:
    return add_server_data_services(populated_db, registry)


@pytest.fixture
def report_broker(populated_db: DatabaseManager, registry: ServiceRegistry) -> ServerReportBroker:
    return add_server_report_services(registry)
