"""
Application settings.

Provides typed, grouped configuration built from the defaults in configs.
"""

from dataclasses import dataclass, field
from typing import Optional

from ticket_kiosk.configs import LOG_FILE, LOKI_URL, REDIS_HOST, REDIS_PORT, WS_URL


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class RedisSettings:
    """Redis connection settings."""

    host: str = REDIS_HOST
    port: int = REDIS_PORT
    decode_responses: bool = True


@dataclass(frozen=True)
class ServiceSettings:
    """External service URLs."""

    loki_url: Optional[str] = LOKI_URL
    websocket_url: str = WS_URL
    log_file: Optional[str] = LOG_FILE


@dataclass(frozen=True)
class KioskSettings:
    """Ticket kiosk settings."""

    command_channel: str = "ticket_kiosk_commands"
    display_event: str = "kioskReport"

    @property
    def response_channel(self) -> str:
        """Get response channel name."""
        return f"{self.command_channel}_response"


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    redis: RedisSettings = field(default_factory=RedisSettings)
    services: ServiceSettings = field(default_factory=ServiceSettings)
    kiosk: KioskSettings = field(default_factory=KioskSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
