"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces (Protocols)
- Value Objects
"""

from .exceptions import (
    KioskError,
    CatalogError,
    InvalidCatalogError,
    UnknownDestinationError,
    PaymentError,
    InvalidAmountError,
    UnsupportedDenominationError,
)
from .interfaces import DisplaySurface
from .value_objects import (
    Money,
    Destination,
    Selection,
    TicketRecord,
    Report,
    ReportKind,
)


__all__ = [
    # Exceptions
    "KioskError",
    "CatalogError",
    "InvalidCatalogError",
    "UnknownDestinationError",
    "PaymentError",
    "InvalidAmountError",
    "UnsupportedDenominationError",
    # Interfaces
    "DisplaySurface",
    # Value Objects
    "Money",
    "Destination",
    "Selection",
    "TicketRecord",
    "Report",
    "ReportKind",
]
