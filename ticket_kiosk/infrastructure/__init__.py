"""
Infrastructure layer - Settings and display surfaces.

Contains:
- Application settings
- Display surface implementations
"""

from .settings import (
    Settings,
    RedisSettings,
    ServiceSettings,
    KioskSettings,
    get_settings,
)
from .display import (
    MemoryDisplay,
    ConsoleDisplay,
    WebSocketDisplay,
)


__all__ = [
    # Settings
    "Settings",
    "RedisSettings",
    "ServiceSettings",
    "KioskSettings",
    "get_settings",
    # Displays
    "MemoryDisplay",
    "ConsoleDisplay",
    "WebSocketDisplay",
]
