"""
Unit tests for the application layer.

Tests the kiosk service, API facade, command routing and the
input event dispatcher.
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from ticket_kiosk.application.api_facade import KioskFacade
from ticket_kiosk.application.command_handler import CommandHandler, CommandResponse
from ticket_kiosk.application.input_dispatcher import InputDispatcher
from ticket_kiosk.application.kiosk_service import KioskService
from ticket_kiosk.core.exceptions import (
    InvalidAmountError,
    UnsupportedDenominationError,
)
from ticket_kiosk.core.value_objects import Money, ReportKind
from ticket_kiosk.event_system import EventConsumer, EventPublisher, EventType


# =============================================================================
# Kiosk Service Tests
# =============================================================================


class TestKioskService:
    """Tests for KioskService."""

    @pytest.mark.asyncio
    async def test_reports_are_rendered(self, service, display):
        """Test every operation pushes its report to the display."""
        report = await service.select_destination("StationB")
        assert display.current is report

        report = await service.insert_money(20)
        assert display.current is report
        assert display.render_count == 2

    @pytest.mark.asyncio
    async def test_last_report_wins(self, service, display):
        await service.select_destination("StationA")
        await service.cancel_transaction()
        assert display.current.kind == ReportKind.CANCELLED
        assert "TRANSACTION CANCELLED" in display.text

    @pytest.mark.asyncio
    async def test_full_purchase(self, service, engine):
        await service.insert_money("20")
        await service.select_destination("StationA")
        report = await service.print_ticket()

        assert report.kind == ReportKind.TICKET_ISSUED
        assert report.change == Money(1000)
        assert engine.balance == Money(0)

    @pytest.mark.asyncio
    async def test_insert_accepts_money_and_dollars(self, service, engine):
        await service.insert_money(Money(500))
        await service.insert_money(10)
        await service.insert_money("20.00")
        assert engine.balance == Money(3500)

    @pytest.mark.asyncio
    async def test_insert_unsupported_denomination(self, service, engine, display):
        """Test amounts outside the denomination set are rejected."""
        with pytest.raises(UnsupportedDenominationError):
            await service.insert_money(7)
        assert engine.balance == Money(0)
        assert display.current is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -5, "abc"])
    async def test_insert_invalid_amount(self, service, amount):
        with pytest.raises(InvalidAmountError):
            await service.insert_money(amount)

    @pytest.mark.asyncio
    async def test_concurrent_callers_are_serialized(self, service, engine):
        """Test concurrent insertions all land on the balance."""
        await asyncio.gather(*(service.insert_money(5) for _ in range(10)))
        assert engine.balance == Money(5000)

    @pytest.mark.asyncio
    async def test_get_status(self, service):
        await service.select_destination("StationC")
        status = await service.get_status()
        assert status["phase"] == "selected"
        assert status["shortfall"] == "30.00"

    @pytest.mark.asyncio
    async def test_welcome_rendered(self, service, display):
        await service.welcome()
        assert display.current.kind == ReportKind.WELCOME

    @pytest.mark.asyncio
    async def test_custom_display(self, engine):
        """Test any surface with a render coroutine can be used."""
        surface = AsyncMock()
        service = KioskService(engine=engine, display=surface)
        report = await service.print_ticket()
        surface.render.assert_awaited_once_with(report)

    @pytest.mark.asyncio
    async def test_display_failure_keeps_report(self, engine):
        """Test a broken display does not lose a completed ticket."""
        surface = AsyncMock()
        surface.render.side_effect = RuntimeError("display offline")
        service = KioskService(engine=engine, display=surface)

        await service.select_destination("StationA")
        await service.insert_money(20)
        report = await service.print_ticket()

        assert report.kind == ReportKind.TICKET_ISSUED
        assert report.change == Money(1000)
        assert engine.balance == Money(0)
        assert engine.selection is None
        assert surface.render.await_count == 3


# =============================================================================
# API Facade Tests
# =============================================================================


class TestKioskFacade:
    """Tests for KioskFacade."""

    @pytest.fixture
    def facade(self, service):
        return KioskFacade(service)

    @pytest.mark.asyncio
    async def test_success_response(self, facade):
        result = await facade.select_destination("StationB")
        assert result["success"] is True
        assert "TICKET SELECTED" in result["message"]
        assert result["data"]["kind"] == "selection"

    @pytest.mark.asyncio
    async def test_error_report_is_unsuccessful(self, facade):
        """Test error reports map to success False."""
        result = await facade.print_ticket()
        assert result["success"] is False
        assert result["data"]["kind"] == "no_destination_selected"

    @pytest.mark.asyncio
    async def test_list_destinations(self, facade):
        result = await facade.list_destinations()
        data = result["data"]
        assert [d["id"] for d in data["destinations"]] == [
            "StationA",
            "StationB",
            "StationC",
            "StationD",
        ]
        assert data["denominations"] == ["5.00", "10.00", "20.00"]


# =============================================================================
# Command Handler Tests
# =============================================================================


class TestCommandHandler:
    """Tests for CommandHandler."""

    @pytest.fixture
    def handler(self, service):
        return CommandHandler(KioskFacade(service))

    def test_available_commands(self, handler):
        names = {cmd["name"] for cmd in handler.get_available_commands()}
        assert names == {
            "select_destination",
            "insert_money",
            "print_ticket",
            "cancel_transaction",
            "get_status",
            "list_destinations",
        }

    @pytest.mark.asyncio
    async def test_command_flow(self, handler):
        """Test a purchase driven entirely by commands."""
        await handler.execute({"command": "select_destination", "data": {"destination": "StationA"}})
        await handler.execute({"command": "insert_money", "data": {"amount": 5}})
        await handler.execute({"command": "insert_money", "data": {"amount": 10}})
        response = await handler.execute({"command": "print_ticket", "command_id": 7})

        assert response["command_id"] == 7
        assert response["success"] is True
        assert response["data"]["ticket"]["change"] == "5.00"

    @pytest.mark.asyncio
    async def test_unknown_command(self, handler):
        response = await handler.execute({"command": "dispense_gold", "command_id": 1})
        assert response["success"] is False
        assert "Unknown command" in response["message"]

    @pytest.mark.asyncio
    async def test_missing_arguments(self, handler):
        response = await handler.execute({"command": "insert_money", "data": {}})
        assert response["success"] is False
        assert "amount" in response["message"]

    @pytest.mark.asyncio
    async def test_kiosk_error_is_reported(self, handler):
        """Test contract violations become failed responses."""
        response = await handler.execute(
            {"command": "select_destination", "data": {"destination": "Mars"}}
        )
        assert response["success"] is False
        assert response["data"]["error"] == "UnknownDestinationError"

    @pytest.mark.asyncio
    async def test_malformed_destination_is_reported(self, handler):
        response = await handler.execute(
            {"command": "select_destination", "data": {"destination": ["StationA"]}}
        )
        assert response["success"] is False
        assert response["data"]["error"] == "UnknownDestinationError"

    @pytest.mark.asyncio
    async def test_ticket_issued_despite_display_failure(self, engine):
        """Test a ticket response stays successful when rendering fails."""
        surface = AsyncMock()
        surface.render.side_effect = OSError("display offline")
        handler = CommandHandler(KioskFacade(KioskService(engine=engine, display=surface)))

        await handler.execute({"command": "insert_money", "data": {"amount": 20}})
        await handler.execute({"command": "select_destination", "data": {"destination": "StationB"}})
        response = await handler.execute({"command": "print_ticket", "command_id": 9})

        assert response["success"] is True
        assert response["data"]["kind"] == "ticket_issued"
        assert response["data"]["ticket"]["change"] == "0.00"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_reported(self, handler):
        handler.register("boom", AsyncMock(side_effect=RuntimeError("broken")), [])
        response = await handler.execute({"command": "boom"})
        assert response["success"] is False
        assert "broken" in response["message"]

    def test_command_response_to_dict(self):
        response = CommandResponse(command_id=3, success=True, message="ok")
        assert response.to_dict() == {
            "command_id": 3,
            "success": True,
            "message": "ok",
            "data": None,
        }


# =============================================================================
# Input Dispatcher Tests
# =============================================================================


class TestInputDispatcher:
    """Tests for InputDispatcher and the event queue."""

    @pytest.fixture
    def consumer(self, service):
        consumer = EventConsumer(asyncio.Queue())
        InputDispatcher(service, consumer).register()
        return consumer

    @pytest.mark.asyncio
    async def test_events_map_to_operations(self, consumer, engine, display):
        await consumer.process_event(
            {"type": EventType.DESTINATION_SELECTED, "destination": "StationB"}
        )
        await consumer.process_event({"type": EventType.MONEY_INSERTED, "amount": 20})
        assert engine.balance == Money(2000)

        await consumer.process_event({"type": EventType.PRINT_REQUESTED})
        assert display.current.kind == ReportKind.TICKET_ISSUED

        await consumer.process_event({"type": EventType.CANCEL_REQUESTED})
        assert display.current.kind == ReportKind.CANCELLED

    @pytest.mark.asyncio
    async def test_rejected_event_keeps_state(self, consumer, engine, display):
        await consumer.process_event({"type": EventType.MONEY_INSERTED, "amount": 3})
        await consumer.process_event(
            {"type": EventType.DESTINATION_SELECTED, "destination": "Mars"}
        )
        assert engine.balance == Money(0)
        assert display.current is None

    @pytest.mark.asyncio
    async def test_queue_processes_in_order(self, consumer, engine, display):
        """Test published events are consumed one at a time, in order."""
        publisher = EventPublisher(consumer.event_queue)
        await consumer.start_consuming()
        try:
            await publisher.publish(EventType.MONEY_INSERTED, amount=20)
            await publisher.publish(EventType.DESTINATION_SELECTED, destination="StationA")
            await publisher.publish(EventType.PRINT_REQUESTED)
            await asyncio.wait_for(consumer.event_queue.join(), timeout=2)
        finally:
            await consumer.stop_consuming()

        assert display.current.kind == ReportKind.TICKET_ISSUED
        assert display.current.change == Money(1000)
        assert display.render_count == 3


class TestEventConsumer:
    """Tests for EventConsumer handler registration."""

    @pytest.mark.asyncio
    async def test_sync_and_async_handlers(self):
        consumer = EventConsumer(asyncio.Queue())
        seen = []
        async_handler = AsyncMock()
        consumer.register_handler("ping", async_handler)
        consumer.register_handler("ping", seen.append)

        await consumer.process_event({"type": "ping"})
        async_handler.assert_awaited_once_with({"type": "ping"})
        assert seen == [{"type": "ping"}]

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        consumer = EventConsumer(asyncio.Queue())
        seen = []

        def broken(event):
            raise RuntimeError("broken")

        consumer.register_handler("ping", broken)
        consumer.register_handler("ping", seen.append)
        await consumer.process_event({"type": "ping"})
        assert seen == [{"type": "ping"}]

    def test_unregister_handler(self):
        consumer = EventConsumer(asyncio.Queue())
        handler = AsyncMock()
        consumer.register_handler("ping", handler)
        consumer.unregister_handler("ping", handler)
        consumer.unregister_handler("ping", handler)
        assert consumer.handlers["ping"] == []
