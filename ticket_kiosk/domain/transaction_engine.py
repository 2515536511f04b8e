"""
Transaction Engine - Manages the ticket purchase lifecycle.

Holds the only mutable state of the kiosk and exposes one operation per
input event. Every operation completes synchronously and returns the
report to be shown on the display surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

from ticket_kiosk.core.exceptions import InvalidAmountError
from ticket_kiosk.core.value_objects import Money, Report, Selection, TicketRecord
from ticket_kiosk.domain import reports
from ticket_kiosk.domain.catalog import FareCatalog
from ticket_kiosk.loggers import logger


# =============================================================================
# Transaction Phases
# =============================================================================


class TransactionPhase(Enum):
    """Phases of a ticket transaction."""

    IDLE = auto()       # No destination selected
    SELECTED = auto()   # Destination selected, awaiting payment or print


# =============================================================================
# Transaction State
# =============================================================================


@dataclass
class TransactionState:
    """
    Mutable state of the current transaction.

    The balance only grows through insertion and only returns to zero
    through issuance or cancellation.
    """

    balance: Money = Money()
    selection: Optional[Selection] = None

    @property
    def phase(self) -> TransactionPhase:
        """Get the current transaction phase."""
        if self.selection is None:
            return TransactionPhase.IDLE
        return TransactionPhase.SELECTED

    @property
    def is_funded(self) -> bool:
        """Check if the balance covers the selected fare."""
        return self.selection is not None and self.balance >= self.selection.fare

    @property
    def shortfall(self) -> Optional[Money]:
        """Get the amount still owed, or None when nothing is owed."""
        if self.selection is None or self.is_funded:
            return None
        return self.selection.fare - self.balance

    def reset(self) -> None:
        """Return to the initial state."""
        self.balance = Money()
        self.selection = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        shortfall = self.shortfall
        return {
            "phase": self.phase.name.lower(),
            "balance": str(self.balance),
            "selection": self.selection.to_dict() if self.selection else None,
            "shortfall": str(shortfall) if shortfall is not None else None,
        }


# =============================================================================
# Transaction Engine
# =============================================================================


class TransactionEngine:
    """
    State machine for ticket transactions.

    Two phases, IDLE and SELECTED, crossed with a balance counter.
    Selecting moves to SELECTED, inserting loops on either phase,
    a funded print or a cancel returns to IDLE, and an unfunded print
    leaves the state untouched.

    Not safe for concurrent callers; serialize access externally.
    """

    def __init__(self, catalog: Optional[FareCatalog] = None) -> None:
        """
        Initialize the engine.

        Args:
            catalog: Fare catalog. Defaults to the configured fares.
        """
        self._catalog = catalog or FareCatalog.from_config()
        self._state = TransactionState()

    @property
    def catalog(self) -> FareCatalog:
        """Get the fare catalog."""
        return self._catalog

    @property
    def state(self) -> TransactionState:
        """Get the current transaction state."""
        return self._state

    @property
    def balance(self) -> Money:
        return self._state.balance

    @property
    def selection(self) -> Optional[Selection]:
        return self._state.selection

    def snapshot(self) -> dict[str, Any]:
        """Get a read-only view of the current state."""
        return self._state.to_dict()

    def welcome(self) -> Report:
        """Get the start-up greeting. State is unchanged."""
        return reports.welcome_report(self._state.balance, self._state.selection)

    def select_destination(self, destination_id: str) -> Report:
        """
        Select a destination.

        Money already inserted is kept for the new selection.

        Args:
            destination_id: Destination identifier from the fare catalog.

        Returns:
            Selection report.

        Raises:
            UnknownDestinationError: If the id is not in the catalog.
        """
        destination = self._catalog.get(destination_id)
        self._state.selection = Selection(destination)

        logger.info(
            f"Destination selected: {destination.name} "
            f"(fare {destination.fare}, balance {self._state.balance})"
        )
        return reports.selection_report(self._state.selection, self._state.balance)

    def insert_money(self, amount: Money) -> Report:
        """
        Add money to the balance.

        Args:
            amount: Inserted amount.

        Returns:
            Insertion report.

        Raises:
            InvalidAmountError: If amount is not positive.
        """
        if amount.is_zero:
            raise InvalidAmountError(f"Invalid insertion amount: {amount}")

        self._state.balance = self._state.balance + amount

        logger.info(f"Money inserted: {amount}. Balance: {self._state.balance}")
        return reports.insertion_report(amount, self._state.balance, self._state.selection)

    def print_ticket(self) -> Report:
        """
        Issue a ticket for the selected destination.

        A missing selection is reported before a short balance. On
        failure the state is unchanged; on success it is reset.

        Returns:
            Ticket report, or an error report.
        """
        selection = self._state.selection
        balance = self._state.balance

        if selection is None:
            logger.warning("Print requested with no destination selected")
            return reports.no_destination_report(balance)

        if balance < selection.fare:
            logger.warning(
                f"Print requested with insufficient funds: "
                f"fare {selection.fare}, balance {balance}"
            )
            return reports.insufficient_funds_report(selection, balance)

        ticket = TicketRecord(
            destination=selection.destination,
            fare=selection.fare,
            paid=balance,
            change=balance - selection.fare,
        )
        self._state.reset()

        logger.info(
            f"Ticket issued: {ticket.destination.name}, paid {ticket.paid}, "
            f"change {ticket.change}"
        )
        return reports.ticket_report(ticket)

    def cancel_transaction(self) -> Report:
        """
        Cancel the transaction and return any inserted money.

        Returns:
            Cancellation report.
        """
        refunded = self._state.balance
        self._state.reset()

        logger.info(f"Transaction cancelled. Returning: {refunded}")
        return reports.cancellation_report(refunded)
