"""
Custom exceptions for the ticket kiosk.

Provides a hierarchy of typed exceptions for caller contract violations.
Recoverable outcomes such as a missing selection or a short balance are
not exceptions: they are reported through the normal report channel.
"""

from typing import Any, Optional


class KioskError(Exception):
    """Base exception for all ticket kiosk errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Catalog Errors
# =============================================================================


class CatalogError(KioskError):
    """Base exception for fare catalog and denomination errors."""

    pass


class InvalidCatalogError(CatalogError):
    """A fare or denomination is not a positive amount."""

    pass


class UnknownDestinationError(CatalogError):
    """Destination identifier is not part of the fare catalog."""

    def __init__(self, destination_id: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown destination: {destination_id}", **kwargs)
        self.destination_id = destination_id
        self.details["destination"] = destination_id


# =============================================================================
# Payment Errors
# =============================================================================


class PaymentError(KioskError):
    """Base exception for money insertion errors."""

    pass


class InvalidAmountError(PaymentError):
    """Inserted amount is not positive."""

    pass


class UnsupportedDenominationError(PaymentError):
    """Inserted amount is not one of the accepted denominations."""

    def __init__(
        self,
        message: str,
        amount: int = 0,
        accepted: Optional[list[int]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.details["amount"] = amount
        self.details["accepted"] = accepted or []
