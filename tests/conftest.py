"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from simpleswap.api.endpoints import get_exchange
from simpleswap.api.main import app
from simpleswap.clock import ManualClock
from simpleswap.config import LedgerConfig
from simpleswap.custody import InMemoryCustody
from simpleswap.exchange import Exchange
from simpleswap.pool import PoolLedger, SwapEngine
from tests.helpers import ALICE, E18, NOW, deposit, make_custody, make_ledger


@pytest.fixture
def clock() -> ManualClock:
    """A clock frozen at NOW."""
    return ManualClock(NOW)


@pytest.fixture
def custody() -> InMemoryCustody:
    """Custody where ALICE and BOB each hold 1000 of both tokens."""
    return make_custody()


@pytest.fixture
def ledger(custody: InMemoryCustody, clock: ManualClock) -> PoolLedger:
    """An empty TOKEN_A/TOKEN_B ledger."""
    return make_ledger(custody=custody, clock=clock)


@pytest.fixture
def funded_ledger(ledger: PoolLedger) -> PoolLedger:
    """A ledger after ALICE deposited 100 A and 200 B."""
    deposit(ledger, ALICE, 100 * E18, 200 * E18)
    return ledger


@pytest.fixture
def engine(funded_ledger: PoolLedger) -> SwapEngine:
    """A swap engine over the funded ledger."""
    return SwapEngine(funded_ledger)


@pytest.fixture
def exchange(clock: ManualClock) -> Exchange:
    """An exchange on the default deployment with a manual clock."""
    return Exchange(config=LedgerConfig(), clock=clock)


@pytest.fixture
def client(exchange: Exchange) -> Iterator[TestClient]:
    """A test client whose requests are served by the exchange fixture."""
    app.dependency_overrides[get_exchange] = lambda: exchange
    yield TestClient(app)
    app.dependency_overrides.clear()
