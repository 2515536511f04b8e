"""
Display surfaces - Renderers for kiosk reports.

Every surface is a passive "last report wins" renderer.
"""

from __future__ import annotations

import json
import sys
from typing import Optional, TextIO

import websockets
from websockets.exceptions import WebSocketException

from ticket_kiosk.core.value_objects import Report
from ticket_kiosk.infrastructure.settings import get_settings
from ticket_kiosk.loggers import logger


class MemoryDisplay:
    """Keeps the last rendered report in memory."""

    def __init__(self) -> None:
        self.current: Optional[Report] = None
        self.render_count = 0

    @property
    def text(self) -> str:
        """Get the text currently on screen."""
        return self.current.text if self.current else ""

    async def render(self, report: Report) -> None:
        self.current = report
        self.render_count += 1


class ConsoleDisplay:
    """Prints each report to a terminal stream, replacing the previous one."""

    CLEAR_SCREEN = "\033[2J\033[H"

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = True) -> None:
        """
        Initialize the console display.

        Args:
            stream: Output stream (default: stdout).
            clear: Whether to clear the screen before each report.
        """
        self._stream = stream or sys.stdout
        self._clear = clear

    async def render(self, report: Report) -> None:
        if self._clear:
            self._stream.write(self.CLEAR_SCREEN)
        self._stream.write(report.text + "\n")
        self._stream.flush()


class WebSocketDisplay:
    """Pushes each report to the kiosk frontend over WebSocket."""

    def __init__(
        self,
        ws_url: Optional[str] = None,
        event: Optional[str] = None,
    ) -> None:
        """
        Initialize the WebSocket display.

        Args:
            ws_url: Frontend WebSocket URL (default from settings).
            event: Event name for reports (default from settings).
        """
        settings = get_settings()
        self._ws_url = ws_url or settings.services.websocket_url
        self._event = event or settings.kiosk.display_event

    async def render(self, report: Report) -> None:
        message = {"event": self._event, "data": report.to_dict()}

        try:
            async with websockets.connect(self._ws_url) as ws:
                await ws.send(json.dumps(message, ensure_ascii=False))
                logger.debug(f"Report sent to display: {report.kind.value}")
        except WebSocketException as e:
            logger.warning(f"Display connection error, {report.kind.value} report dropped: {e}")
        except OSError as e:
            logger.error(f"Display unreachable at {self._ws_url}, {report.kind.value} report dropped: {e}")
