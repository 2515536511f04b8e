"""
Unit tests for core value objects and exceptions.
"""

from decimal import Decimal

import pytest

from ticket_kiosk.core.exceptions import (
    KioskError,
    CatalogError,
    UnknownDestinationError,
    PaymentError,
    UnsupportedDenominationError,
)
from ticket_kiosk.core.value_objects import (
    Destination,
    Money,
    Report,
    ReportKind,
    Selection,
    TicketRecord,
)


# =============================================================================
# Money Tests
# =============================================================================


class TestMoney:
    """Tests for Money value object."""

    def test_money_creation(self):
        """Test creating Money from cents."""
        m = Money(cents=5000)
        assert m.cents == 5000
        assert m.dollars == Decimal("50")

    def test_money_from_dollars(self):
        """Test creating Money from dollars."""
        assert Money.from_dollars(10).cents == 1000
        assert Money.from_dollars("20.00").cents == 2000
        assert Money.from_dollars(5.5).cents == 550
        assert Money.from_dollars(Decimal("0.1")).cents == 10

    def test_money_from_dollars_rounds_half_to_even(self):
        """Test sub-cent amounts round half to even."""
        assert Money.from_dollars("0.125").cents == 12
        assert Money.from_dollars("0.135").cents == 14

    def test_money_addition(self):
        """Test adding Money objects."""
        assert (Money(1000) + Money(500)).cents == 1500

    def test_money_subtraction(self):
        assert (Money(1000) - Money(300)).cents == 700
        assert (Money(500) - Money(500)).is_zero

    def test_money_subtraction_below_zero_raises(self):
        """Test that an overdrawn subtraction is an error, not zero."""
        with pytest.raises(ValueError):
            Money(100) - Money(500)

    def test_money_ordering(self):
        """Test Money compares by amount."""
        assert Money(1000) < Money(2000)
        assert Money(2000) >= Money(2000)
        assert Money(1000) == Money.from_dollars(10)

    def test_money_str_two_decimals(self):
        """Test Money string representation."""
        assert str(Money(0)) == "0.00"
        assert str(Money(5)) == "0.05"
        assert str(Money(2000)) == "20.00"
        assert str(Money(123456)) == "1234.56"

    def test_money_negative_raises(self):
        """Test that negative cents raises error."""
        with pytest.raises(ValueError):
            Money(cents=-100)
        with pytest.raises(ValueError):
            Money.from_dollars(-5)

    def test_money_is_zero(self):
        assert Money().is_zero
        assert not Money(1).is_zero


# =============================================================================
# Report Tests
# =============================================================================


class TestReport:
    """Tests for Report and TicketRecord value objects."""

    @pytest.fixture
    def destination(self):
        return Destination(id="StationB", name="Station B", fare=Money(2000))

    def test_error_kinds(self):
        """Test only the two recoverable error kinds are errors."""
        errors = {kind for kind in ReportKind if kind.is_error}
        assert errors == {
            ReportKind.NO_DESTINATION_SELECTED,
            ReportKind.INSUFFICIENT_FUNDS,
        }

    def test_report_to_dict_minimal(self):
        """Test converting a report without optional fields."""
        report = Report(kind=ReportKind.WELCOME, text="hello")
        assert report.to_dict() == {
            "kind": "welcome",
            "text": "hello",
            "balance": "0.00",
            "selection": None,
        }

    def test_report_to_dict_with_ticket(self, destination):
        """Test converting a success report includes the ticket."""
        ticket = TicketRecord(
            destination=destination,
            fare=Money(2000),
            paid=Money(3000),
            change=Money(1000),
        )
        report = Report(kind=ReportKind.TICKET_ISSUED, text="", ticket=ticket)
        d = report.to_dict()
        assert d["ticket"] == {
            "destination": "StationB",
            "destination_name": "Station B",
            "fare": "20.00",
            "paid": "30.00",
            "change": "10.00",
        }
        assert report.change == Money(1000)

    def test_report_to_dict_with_selection_and_shortfall(self, destination):
        report = Report(
            kind=ReportKind.SELECTION,
            text="",
            balance=Money(500),
            selection=Selection(destination),
            shortfall=Money(1500),
        )
        d = report.to_dict()
        assert d["selection"] == {"id": "StationB", "name": "Station B", "fare": "20.00"}
        assert d["shortfall"] == "15.00"
        assert "ticket" not in d
        assert report.change is None


# =============================================================================
# Exception Tests
# =============================================================================


class TestExceptions:
    """Tests for custom exceptions."""

    def test_kiosk_error(self):
        """Test KioskError creation and to_dict."""
        error = KioskError("Test error", code="TEST_001")
        assert error.message == "Test error"
        assert error.code == "TEST_001"

        d = error.to_dict()
        assert d["error"] == "TEST_001"
        assert d["message"] == "Test error"

    def test_default_code_is_class_name(self):
        assert KioskError("x").code == "KioskError"

    def test_unknown_destination_error(self):
        """Test UnknownDestinationError carries the destination id."""
        error = UnknownDestinationError("Nowhere")
        assert isinstance(error, CatalogError)
        assert error.destination_id == "Nowhere"
        assert error.details["destination"] == "Nowhere"
        assert "Nowhere" in error.message

    def test_unsupported_denomination_error(self):
        error = UnsupportedDenominationError("bad", amount=700, accepted=[500, 1000])
        assert isinstance(error, PaymentError)
        assert error.details == {"amount": 700, "accepted": [500, 1000]}
