"""
Pytest configuration for ticket kiosk tests.

Provides fresh engines, services and displays for each test.
"""

import pytest

from ticket_kiosk.application.kiosk_service import KioskService
from ticket_kiosk.domain.catalog import DenominationSet, FareCatalog
from ticket_kiosk.domain.transaction_engine import TransactionEngine
from ticket_kiosk.infrastructure.display import MemoryDisplay


@pytest.fixture
def catalog():
    """Fare catalog built from the configured fares."""
    return FareCatalog.from_config()


@pytest.fixture
def denominations():
    """Configured denomination set."""
    return DenominationSet.from_config()


@pytest.fixture
def engine(catalog):
    """Fresh transaction engine."""
    return TransactionEngine(catalog)


@pytest.fixture
def display():
    """In-memory display surface."""
    return MemoryDisplay()


@pytest.fixture
def service(engine, display, denominations):
    """Kiosk service wired to an in-memory display."""
    return KioskService(engine=engine, display=display, denominations=denominations)
