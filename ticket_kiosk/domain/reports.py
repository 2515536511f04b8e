"""
Report builders - Display text for every kiosk outcome.

Each builder returns a fully populated Report. The text layout is the
contract shared with the display surface and golden-output tests.
"""

from __future__ import annotations

from typing import Final, Optional

from ticket_kiosk.configs import CURRENCY_SYMBOL
from ticket_kiosk.core.value_objects import (
    Money,
    Report,
    ReportKind,
    Selection,
    TicketRecord,
)


HEADER_RULE: Final[str] = "═" * 31
SECTION_RULE: Final[str] = "─" * 31
TICKET_WIDTH: Final[int] = 29
# Data rows are two columns narrower than the border
TICKET_ROW_WIDTH: Final[int] = 27


def money(amount: Money) -> str:
    """Format an amount for display."""
    return f"{CURRENCY_SYMBOL}{amount}"


def _header(title: str) -> list[str]:
    return [HEADER_RULE, title, HEADER_RULE, ""]


def _ticket_row(label: str, value: str) -> str:
    cell = f" {label} {value}"
    return f"║{cell:<{TICKET_ROW_WIDTH}}║"


def _ticket_block(ticket: TicketRecord) -> list[str]:
    return [
        "╔" + "═" * TICKET_WIDTH + "╗",
        "║" + "     CITY METRO TICKET".ljust(TICKET_WIDTH) + "║",
        "╠" + "═" * TICKET_WIDTH + "╣",
        _ticket_row("TO:", ticket.destination.name),
        _ticket_row("FARE:", money(ticket.fare)),
        _ticket_row("PAID:", money(ticket.paid)),
        "╚" + "═" * TICKET_WIDTH + "╝",
    ]


# =============================================================================
# Report Builders
# =============================================================================


def welcome_report(balance: Money, selection: Optional[Selection]) -> Report:
    """Greeting shown when the kiosk starts."""
    text = "Welcome to RideVibe! ✌️\n\nPick your destination and let's go!"
    return Report(
        kind=ReportKind.WELCOME,
        text=text,
        balance=balance,
        selection=selection,
    )


def selection_report(selection: Selection, balance: Money) -> Report:
    """Report for a newly selected destination."""
    fare = selection.fare
    shortfall: Optional[Money] = None

    lines = _header("       TICKET SELECTED")
    lines.append(f"Destination: {selection.destination.name}")
    lines.append(f"Ticket Price: {money(fare)}")
    lines.append("")
    lines.append(SECTION_RULE)
    lines.append(f"Current Balance: {money(balance)}")

    if balance < fare:
        shortfall = fare - balance
        lines.append(f"Amount Needed: {money(shortfall)}")
        lines.append("")
        lines.append("⚠ Please insert money to continue.")
    else:
        lines.append("")
        lines.append("✓ Sufficient funds! Press PRINT TICKET.")

    return Report(
        kind=ReportKind.SELECTION,
        text="\n".join(lines),
        balance=balance,
        selection=selection,
        shortfall=shortfall,
    )


def insertion_report(
    inserted: Money,
    balance: Money,
    selection: Optional[Selection],
) -> Report:
    """Report for money added to the balance."""
    shortfall: Optional[Money] = None

    lines = _header("       MONEY INSERTED")
    lines.append(f"Inserted: {money(inserted)}")
    lines.append(f"Current Balance: {money(balance)}")
    lines.append("")

    if selection is not None:
        lines.append(SECTION_RULE)
        lines.append(f"Selected: {selection.destination.name}")
        lines.append(f"Price: {money(selection.fare)}")
        lines.append("")
        if balance >= selection.fare:
            lines.append("✓ Sufficient funds!")
            lines.append("Press PRINT TICKET to continue.")
        else:
            shortfall = selection.fare - balance
            lines.append(f"Still needed: {money(shortfall)}")
    else:
        lines.append("Please select a destination.")

    return Report(
        kind=ReportKind.INSERTION,
        text="\n".join(lines),
        balance=balance,
        selection=selection,
        inserted=inserted,
        shortfall=shortfall,
    )


def no_destination_report(balance: Money) -> Report:
    """Error report for printing without a selection."""
    lines = _header("          ⚠ ERROR")
    lines.append("No destination selected!")
    lines.append("")
    lines.append("Please select a destination first.")
    return Report(
        kind=ReportKind.NO_DESTINATION_SELECTED,
        text="\n".join(lines),
        balance=balance,
    )


def insufficient_funds_report(selection: Selection, balance: Money) -> Report:
    """Error report for printing while under-funded."""
    shortfall = selection.fare - balance

    lines = _header("    ⚠ INSUFFICIENT FUNDS")
    lines.append(f"Ticket Price: {money(selection.fare)}")
    lines.append(f"Your Balance: {money(balance)}")
    lines.append(SECTION_RULE)
    lines.append(f"Short by: {money(shortfall)}")
    lines.append("")
    lines.append("Please insert more money.")

    return Report(
        kind=ReportKind.INSUFFICIENT_FUNDS,
        text="\n".join(lines),
        balance=balance,
        selection=selection,
        shortfall=shortfall,
    )


def ticket_report(ticket: TicketRecord) -> Report:
    """Success report embedding the issued ticket."""
    lines = _header("     🎫 TICKET PRINTED! 🎫")
    lines.extend(_ticket_block(ticket))
    lines.append("")

    if not ticket.change.is_zero:
        lines.append(f"💰 CHANGE RETURNED: {money(ticket.change)}")
        lines.append("")

    lines.append("Thank you for traveling with us!")
    lines.append("Have a safe journey! 🚇")

    return Report(
        kind=ReportKind.TICKET_ISSUED,
        text="\n".join(lines),
        ticket=ticket,
    )


def cancellation_report(refunded: Money) -> Report:
    """Report for a cancelled transaction."""
    lines = _header("     TRANSACTION CANCELLED")

    if not refunded.is_zero:
        lines.append(f"💰 Returning: {money(refunded)}")
        lines.append("")

    lines.append("Transaction has been reset.")
    lines.append("")
    lines.append(SECTION_RULE)
    lines.append("Welcome to City Metro!")
    lines.append("Please select your destination.")

    return Report(
        kind=ReportKind.CANCELLED,
        text="\n".join(lines),
        refunded=refunded,
    )
