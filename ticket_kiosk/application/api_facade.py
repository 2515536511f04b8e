"""
API Facade - Unified interface for the ticket kiosk.

Wraps the kiosk service in dictionary responses suitable for
JSON transport over the command channel.
"""

from typing import Any

from ticket_kiosk.application.kiosk_service import AmountLike, KioskService
from ticket_kiosk.core.value_objects import Report


class KioskFacade:
    """
    Facade for the ticket kiosk API.

    Every method returns a dictionary with ``success``, ``message``
    and ``data`` keys. Error reports are answered with success False.
    """

    def __init__(self, service: KioskService) -> None:
        """
        Initialize the facade.

        Args:
            service: Kiosk service instance.
        """
        self._service = service

    @property
    def service(self) -> KioskService:
        return self._service

    @staticmethod
    def _response(report: Report) -> dict[str, Any]:
        return {
            "success": not report.is_error,
            "message": report.text,
            "data": report.to_dict(),
        }

    # =========================================================================
    # Transaction Operations
    # =========================================================================

    async def select_destination(self, destination: str) -> dict[str, Any]:
        """
        Select a destination.

        Args:
            destination: Destination identifier.
        """
        return self._response(await self._service.select_destination(destination))

    async def insert_money(self, amount: AmountLike) -> dict[str, Any]:
        """
        Insert money.

        Args:
            amount: Amount in dollars, one of the accepted denominations.
        """
        return self._response(await self._service.insert_money(amount))

    async def print_ticket(self) -> dict[str, Any]:
        """Print a ticket for the selected destination."""
        return self._response(await self._service.print_ticket())

    async def cancel_transaction(self) -> dict[str, Any]:
        """Cancel the transaction."""
        return self._response(await self._service.cancel_transaction())

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_status(self) -> dict[str, Any]:
        """Get the current transaction state."""
        return {
            "success": True,
            "message": "Current transaction state",
            "data": await self._service.get_status(),
        }

    async def list_destinations(self) -> dict[str, Any]:
        """List destinations and accepted denominations."""
        catalog = self._service.engine.catalog
        return {
            "success": True,
            "message": f"{len(catalog)} destinations available",
            "data": {
                "destinations": [d.to_dict() for d in catalog.destinations()],
                "denominations": [str(m) for m in self._service.denominations.values()],
            },
        }
