"""
Configuration module for the ticket kiosk.

This module provides centralized configuration for the fare catalog,
accepted denominations, and external services such as Redis,
WebSocket and Loki.
"""

import os
from typing import Final, Optional


# =============================================================================
# Fare Catalog
# =============================================================================

# Destination id -> (display name, fare in cents)
FARES: Final[dict[str, tuple[str, int]]] = {
    "StationA": ("Station A", 1000),
    "StationB": ("Station B", 2000),
    "StationC": ("Station C", 3000),
    "StationD": ("Station D", 5000),
}


# =============================================================================
# Accepted Denominations
# =============================================================================

DENOMINATIONS: Final[tuple[int, ...]] = (
    500,   # 5 USD
    1000,  # 10 USD
    2000,  # 20 USD
)

CURRENCY_SYMBOL: Final[str] = "$"


# =============================================================================
# Redis Configuration
# =============================================================================

REDIS_HOST: Final[str] = "localhost"
REDIS_PORT: Final[int] = 6379


# =============================================================================
# External Services Configuration
# =============================================================================

WS_URL: Final[str] = "ws://localhost:8005/ws"

# Remote logging and file logging are disabled unless configured
LOKI_URL: Final[Optional[str]] = os.getenv("TICKET_KIOSK_LOKI_URL") or None
LOG_FILE: Final[Optional[str]] = os.getenv("TICKET_KIOSK_LOG_FILE") or None
