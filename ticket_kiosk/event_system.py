"""
Event system for the ticket kiosk.

This module provides a publish-subscribe event system that carries
input events (destination chosen, money inserted, print and cancel
requests) from an input surface to the kiosk service.
"""

import asyncio
import inspect
from enum import Enum
from typing import Callable, Any, Union

from ticket_kiosk.loggers import logger


class EventType(str, Enum):
    """
    Enumeration of input event types.

    These events are published by input surfaces when the user acts.
    """

    DESTINATION_SELECTED = "destination_selected"
    MONEY_INSERTED = "money_inserted"
    PRINT_REQUESTED = "print_requested"
    CANCEL_REQUESTED = "cancel_requested"


class EventPublisher:
    """
    Publisher for sending events to the event queue.

    Provides a simple interface for publishing events with associated data.

    Attributes:
        event_queue: The asyncio queue to publish events to.
    """

    def __init__(self, event_queue: asyncio.Queue) -> None:
        """
        Initialize the event publisher.

        Args:
            event_queue: The asyncio queue for event distribution.
        """
        self.event_queue = event_queue

    async def publish(self, event_type: Union[EventType, str], **data: Any) -> None:
        """
        Publish an event to the queue.

        Args:
            event_type: The type of event to publish.
            **data: Additional event data as keyword arguments.
        """
        event = {"type": event_type, **data}
        await self.event_queue.put(event)


class EventConsumer:
    """
    Consumer for processing events from the event queue.

    Events are taken from the queue one at a time; the next event is not
    dispatched until every handler for the current one has finished.

    Attributes:
        event_queue: The asyncio queue to consume events from.
        handlers: Mapping of event types to their handler functions.
        is_consuming: Flag indicating if the consumer is active.
    """

    def __init__(self, event_queue: asyncio.Queue) -> None:
        """
        Initialize the event consumer.

        Args:
            event_queue: The asyncio queue to consume events from.
        """
        self.event_queue = event_queue
        self.handlers: dict[Union[EventType, str], list[Callable]] = {}
        self.is_consuming = False
        self._consume_task: asyncio.Task | None = None

    def register_handler(
        self,
        event_type: Union[EventType, str],
        handler: Callable,
    ) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type: The event type to handle.
            handler: The handler function (sync or async).
        """
        if event_type not in self.handlers:
            self.handlers[event_type] = []
        self.handlers[event_type].append(handler)

    def unregister_handler(
        self,
        event_type: Union[EventType, str],
        handler: Callable,
    ) -> None:
        """
        Unregister a handler for an event type.

        Args:
            event_type: The event type.
            handler: The handler function to remove.
        """
        if handler in self.handlers.get(event_type, []):
            self.handlers[event_type].remove(handler)

    async def process_event(self, event: dict[str, Any]) -> None:
        """
        Process a single event by calling all registered handlers.

        Handler errors are logged and do not stop the remaining handlers.

        Args:
            event: The event dictionary containing type and data.
        """
        event_type = event.get("type")
        handlers = self.handlers.get(event_type)
        if not handlers:
            logger.warning(f"No handler registered for event: {event_type}")
            return

        for handler in handlers:
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Handler error for event {event_type}: {e}")

    async def _consume_loop(self) -> None:
        """
        Main consumption loop that processes events from the queue.
        """
        while self.is_consuming:
            try:
                # Use wait_for with timeout to allow checking is_consuming flag
                event = await asyncio.wait_for(
                    self.event_queue.get(),
                    timeout=0.5,
                )
            except asyncio.TimeoutError:
                continue

            try:
                await self.process_event(event)
            finally:
                self.event_queue.task_done()

    async def start_consuming(self) -> None:
        """
        Start the event consumption loop.

        This method starts processing events from the queue.
        """
        if self.is_consuming:
            return

        self.is_consuming = True
        self._consume_task = asyncio.create_task(self._consume_loop())

    async def stop_consuming(self) -> None:
        """
        Stop the event consumption loop.

        This method stops processing events and cancels the consumption task.
        """
        self.is_consuming = False

        if self._consume_task:
            self._consume_task.cancel()
            try:
                await self._consume_task
            except asyncio.CancelledError:
                pass
            self._consume_task = None
