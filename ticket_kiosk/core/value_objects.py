"""
Value Objects for the ticket kiosk.

Immutable objects that represent values in the domain.
Value objects are compared by value, not by identity.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from enum import Enum
from typing import Any, Optional, Union


# =============================================================================
# Enums
# =============================================================================


class ReportKind(str, Enum):
    """Kind of status report returned to the display surface."""

    WELCOME = "welcome"
    SELECTION = "selection"
    INSERTION = "insertion"
    NO_DESTINATION_SELECTED = "no_destination_selected"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    TICKET_ISSUED = "ticket_issued"
    CANCELLED = "cancelled"

    @property
    def is_error(self) -> bool:
        """Check if this kind reports a recoverable error."""
        return self in (
            ReportKind.NO_DESTINATION_SELECTED,
            ReportKind.INSUFFICIENT_FUNDS,
        )


# =============================================================================
# Money Value Object
# =============================================================================


_CENT = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable value object representing monetary amounts.

    Internally stores amounts in cents (smallest unit) to avoid
    floating-point precision issues.

    Attributes:
        cents: Amount in cents.
    """

    cents: int = 0

    def __post_init__(self) -> None:
        """Validate the amount."""
        if self.cents < 0:
            raise ValueError("Amount cannot be negative")

    @classmethod
    def from_dollars(cls, dollars: Union[int, float, str, Decimal]) -> "Money":
        """
        Create Money from a dollar amount.

        Fractions of a cent are rounded half to even.

        Args:
            dollars: Amount in dollars.

        Returns:
            Money instance.
        """
        quantized = Decimal(str(dollars)).quantize(_CENT, rounding=ROUND_HALF_EVEN)
        return cls(cents=int(quantized * 100))

    @property
    def dollars(self) -> Decimal:
        """Get amount in dollars."""
        return Decimal(self.cents) / 100

    @property
    def is_zero(self) -> bool:
        """Check if the amount is zero."""
        return self.cents == 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """
        Subtract two Money objects.

        Raises:
            ValueError: If the result would be negative.
        """
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents - other.cents)

    def __str__(self) -> str:
        """String representation with exactly two decimals."""
        units, cents = divmod(self.cents, 100)
        return f"{units}.{cents:02d}"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"Money(cents={self.cents})"


# =============================================================================
# Catalog Value Objects
# =============================================================================


@dataclass(frozen=True)
class Destination:
    """
    A destination offered by the kiosk.

    Attributes:
        id: Destination identifier used by input surfaces.
        name: Human-readable name printed on reports and tickets.
        fare: Fixed fare for the destination.
    """

    id: str
    name: str
    fare: Money

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "name": self.name, "fare": str(self.fare)}


@dataclass(frozen=True)
class Selection:
    """The active destination together with its fare."""

    destination: Destination

    @property
    def fare(self) -> Money:
        return self.destination.fare

    def to_dict(self) -> dict[str, Any]:
        return self.destination.to_dict()


# =============================================================================
# Ticket and Report Value Objects
# =============================================================================


@dataclass(frozen=True)
class TicketRecord:
    """
    An issued ticket.

    Attributes:
        destination: Destination the ticket is valid for.
        fare: Fare charged.
        paid: Balance at the time of issuance.
        change: Amount returned to the customer.
    """

    destination: Destination
    fare: Money
    paid: Money
    change: Money

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "destination": self.destination.id,
            "destination_name": self.destination.name,
            "fare": str(self.fare),
            "paid": str(self.paid),
            "change": str(self.change),
        }


@dataclass(frozen=True)
class Report:
    """
    Outcome of a single kiosk operation.

    The text is rendered verbatim by the display surface; the remaining
    fields describe the same outcome for programmatic consumers.

    Attributes:
        kind: What the report describes.
        text: Multi-line display text.
        balance: Balance after the operation.
        selection: Active selection after the operation.
        inserted: Amount inserted by this operation.
        shortfall: Amount still owed, if any.
        ticket: Issued ticket on success.
        refunded: Amount returned on cancellation.
    """

    kind: ReportKind
    text: str
    balance: Money = Money()
    selection: Optional[Selection] = None
    inserted: Optional[Money] = None
    shortfall: Optional[Money] = None
    ticket: Optional[TicketRecord] = None
    refunded: Optional[Money] = None

    @property
    def is_error(self) -> bool:
        """Check if the report describes a recoverable error."""
        return self.kind.is_error

    @property
    def change(self) -> Optional[Money]:
        """Change returned with the issued ticket."""
        return self.ticket.change if self.ticket else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API and display transport."""
        result: dict[str, Any] = {
            "kind": self.kind.value,
            "text": self.text,
            "balance": str(self.balance),
            "selection": self.selection.to_dict() if self.selection else None,
        }
        if self.inserted is not None:
            result["inserted"] = str(self.inserted)
        if self.shortfall is not None:
            result["shortfall"] = str(self.shortfall)
        if self.ticket is not None:
            result["ticket"] = self.ticket.to_dict()
        if self.refunded is not None:
            result["refunded"] = str(self.refunded)
        return result
