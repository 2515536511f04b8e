"""
Input Dispatcher - Maps input events to kiosk operations.

An input surface publishes one event per user action; the dispatcher
forwards each event to the matching kiosk service operation.
"""

from typing import Any

from ticket_kiosk.application.kiosk_service import KioskService
from ticket_kiosk.core.exceptions import KioskError
from ticket_kiosk.event_system import EventConsumer, EventType
from ticket_kiosk.loggers import logger


class InputDispatcher:
    """Routes input events from the event queue to the kiosk service."""

    def __init__(self, service: KioskService, consumer: EventConsumer) -> None:
        """
        Initialize the dispatcher.

        Args:
            service: Kiosk service receiving the operations.
            consumer: Event consumer to register handlers on.
        """
        self._service = service
        self._consumer = consumer

    def register(self) -> None:
        """Register handlers for all input events."""
        self._consumer.register_handler(
            EventType.DESTINATION_SELECTED,
            self.handle_destination_selected,
        )
        self._consumer.register_handler(
            EventType.MONEY_INSERTED,
            self.handle_money_inserted,
        )
        self._consumer.register_handler(
            EventType.PRINT_REQUESTED,
            self.handle_print_requested,
        )
        self._consumer.register_handler(
            EventType.CANCEL_REQUESTED,
            self.handle_cancel_requested,
        )

    async def handle_destination_selected(self, event: dict[str, Any]) -> None:
        """
        Handle destination selection.

        Args:
            event: Event dictionary with the destination id.
        """
        try:
            await self._service.select_destination(event["destination"])
        except KioskError as e:
            logger.error(f"Rejected destination event: {e.message}")

    async def handle_money_inserted(self, event: dict[str, Any]) -> None:
        """
        Handle money insertion.

        Args:
            event: Event dictionary with the inserted amount.
        """
        try:
            await self._service.insert_money(event["amount"])
        except KioskError as e:
            logger.error(f"Rejected insertion event: {e.message}")

    async def handle_print_requested(self, event: dict[str, Any]) -> None:
        """Handle a print request."""
        await self._service.print_ticket()

    async def handle_cancel_requested(self, event: dict[str, Any]) -> None:
        """Handle a cancel request."""
        await self._service.cancel_transaction()
