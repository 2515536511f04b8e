"""
Interactive terminal kiosk.

Acts as both input surface and display surface: key presses are
published as input events and every report replaces the screen.
"""

import asyncio
from typing import Any, Final, Optional

from ticket_kiosk.application.input_dispatcher import InputDispatcher
from ticket_kiosk.application.kiosk_service import KioskService
from ticket_kiosk.event_system import EventConsumer, EventPublisher, EventType
from ticket_kiosk.infrastructure.display import ConsoleDisplay
from ticket_kiosk.loggers import logger


QUIT_KEYS: Final[frozenset[str]] = frozenset({"q", "quit", "exit"})


def build_keymap(service: KioskService) -> dict[str, tuple[EventType, dict[str, Any]]]:
    """
    Map keys to input events.

    Destinations are bound to 1..n in display order, denominations to
    $5-style keys, and ``p`` / ``c`` to print and cancel.
    """
    keymap: dict[str, tuple[EventType, dict[str, Any]]] = {}

    for index, destination in enumerate(service.engine.catalog.destinations(), start=1):
        keymap[str(index)] = (
            EventType.DESTINATION_SELECTED,
            {"destination": destination.id},
        )

    for amount in service.denominations.values():
        keymap[f"${amount.dollars:.0f}"] = (EventType.MONEY_INSERTED, {"amount": amount})

    keymap["p"] = (EventType.PRINT_REQUESTED, {})
    keymap["c"] = (EventType.CANCEL_REQUESTED, {})
    return keymap


def menu(service: KioskService) -> str:
    """Build the key help shown under each report."""
    destinations = "  ".join(
        f"[{index}] {d.name} ${d.fare}"
        for index, d in enumerate(service.engine.catalog.destinations(), start=1)
    )
    money = "  ".join(f"[${m.dollars:.0f}]" for m in service.denominations.values())
    return f"\n{destinations}\nInsert: {money}\n[p] Print ticket  [c] Cancel  [q] Quit"


async def run_console(service: Optional[KioskService] = None) -> None:
    """
    Run the interactive kiosk until the user quits.

    Args:
        service: Kiosk service (default: console display).
    """
    service = service or KioskService(display=ConsoleDisplay())
    queue: asyncio.Queue = asyncio.Queue()
    publisher = EventPublisher(queue)
    consumer = EventConsumer(queue)
    InputDispatcher(service, consumer).register()
    keymap = build_keymap(service)

    await consumer.start_consuming()
    await service.welcome()

    try:
        while True:
            key = (await asyncio.to_thread(input, menu(service) + "\n> ")).strip().lower()
            if key in QUIT_KEYS:
                break
            if key not in keymap:
                print(f"Unknown key: {key!r}")
                continue

            event_type, data = keymap[key]
            await publisher.publish(event_type, **data)
            await queue.join()
    except EOFError:
        pass
    finally:
        await consumer.stop_consuming()


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(run_console())
    except KeyboardInterrupt:
        logger.info("Console kiosk stopped by user")


if __name__ == "__main__":
    run()
