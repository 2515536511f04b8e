"""
Application layer - Application services and use cases.

Contains:
- Kiosk service
- API facade
- Command handlers
- Input event dispatcher
"""

from .kiosk_service import KioskService
from .api_facade import KioskFacade
from .command_handler import CommandHandler, CommandResponse
from .input_dispatcher import InputDispatcher


__all__ = [
    "KioskService",
    "KioskFacade",
    "CommandHandler",
    "CommandResponse",
    "InputDispatcher",
]
