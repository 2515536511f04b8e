"""
Kiosk Service - Application service for ticket transactions.

Serializes access to the transaction engine and pushes every report
to the display surface.
"""

import asyncio
from decimal import Decimal
from typing import Any, Optional, Union

from ticket_kiosk.core.exceptions import InvalidAmountError
from ticket_kiosk.core.interfaces import DisplaySurface
from ticket_kiosk.core.value_objects import Money, Report
from ticket_kiosk.domain.catalog import DenominationSet
from ticket_kiosk.domain.transaction_engine import TransactionEngine
from ticket_kiosk.infrastructure.display import MemoryDisplay
from ticket_kiosk.loggers import logger


AmountLike = Union[Money, int, float, str, Decimal]


class KioskService:
    """
    Application service for ticket transactions.

    The engine is not reentrant, so every operation runs under a lock:
    each report reflects one consistent before/after pair of states.
    """

    def __init__(
        self,
        engine: Optional[TransactionEngine] = None,
        display: Optional[DisplaySurface] = None,
        denominations: Optional[DenominationSet] = None,
    ) -> None:
        """
        Initialize the kiosk service.

        Args:
            engine: Transaction engine (default: configured catalog).
            display: Surface receiving every report (default: in memory).
            denominations: Accepted insertion amounts (default: configured).
        """
        self._engine = engine or TransactionEngine()
        self._display = display or MemoryDisplay()
        self._denominations = denominations or DenominationSet.from_config()
        self._lock = asyncio.Lock()

    @property
    def engine(self) -> TransactionEngine:
        return self._engine

    @property
    def display(self) -> DisplaySurface:
        return self._display

    @property
    def denominations(self) -> DenominationSet:
        return self._denominations

    def to_money(self, amount: AmountLike) -> Money:
        """
        Convert an inserted dollar amount to an accepted denomination.

        Raises:
            InvalidAmountError: If the amount is not a positive number.
            UnsupportedDenominationError: If it is not accepted.
        """
        if isinstance(amount, Money):
            money = amount
        else:
            try:
                money = Money.from_dollars(amount)
            except (ValueError, ArithmeticError) as e:
                raise InvalidAmountError(f"Invalid insertion amount: {amount}") from e

        if money.is_zero:
            raise InvalidAmountError(f"Invalid insertion amount: {amount}")
        return self._denominations.validate(money)

    async def _show(self, report: Report) -> Report:
        # The engine has already committed the operation
        try:
            await self._display.render(report)
        except Exception:
            logger.exception(f"Display failed to render {report.kind.value} report")
        return report

    async def welcome(self) -> Report:
        """Show the start-up greeting."""
        async with self._lock:
            return await self._show(self._engine.welcome())

    async def select_destination(self, destination_id: str) -> Report:
        """Select a destination and show the fare."""
        async with self._lock:
            return await self._show(self._engine.select_destination(destination_id))

    async def insert_money(self, amount: AmountLike) -> Report:
        """Insert one accepted denomination."""
        money = self.to_money(amount)
        async with self._lock:
            return await self._show(self._engine.insert_money(money))

    async def print_ticket(self) -> Report:
        """Issue a ticket, or report why it cannot be issued."""
        async with self._lock:
            report = await self._show(self._engine.print_ticket())
        if report.ticket:
            logger.info(f"Ticket handed out: {report.ticket.to_dict()}")
        return report

    async def cancel_transaction(self) -> Report:
        """Cancel the transaction and return inserted money."""
        async with self._lock:
            return await self._show(self._engine.cancel_transaction())

    async def get_status(self) -> dict[str, Any]:
        """Get the current transaction state."""
        async with self._lock:
            return self._engine.snapshot()
