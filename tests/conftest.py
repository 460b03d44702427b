"""
Fixtures de teste — MonitoringSystem novo por teste, relógio manual e
client HTTP sobre a app FastAPI.
"""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from emergency_monitor.application.system import MonitoringSystem
from emergency_monitor.main import create_app

START = datetime(2026, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Relógio lógico avançado manualmente pelos testes."""

    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def system(clock: FakeClock) -> MonitoringSystem:
    return MonitoringSystem(clock=clock)


@pytest.fixture
def event_log(system: MonitoringSystem):
    return system.event_log


@pytest.fixture
def persons(system: MonitoringSystem):
    return system.persons


@pytest.fixture
def failures(system: MonitoringSystem):
    return system.failures


@pytest.fixture
def devices(system: MonitoringSystem):
    return system.devices


@pytest_asyncio.fixture
async def client(system: MonitoringSystem) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=create_app(system))
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
