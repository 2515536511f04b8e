"""
Ticket Kiosk - Main entry point.

Runs the kiosk as a service driven by commands on Redis pub/sub.
Each report is pushed to the frontend over WebSocket and the command
response is published on the response channel.
"""

import asyncio
import json
from typing import Any

from redis.asyncio import Redis

from ticket_kiosk.application.api_facade import KioskFacade
from ticket_kiosk.application.command_handler import CommandHandler
from ticket_kiosk.application.kiosk_service import KioskService
from ticket_kiosk.infrastructure.display import WebSocketDisplay
from ticket_kiosk.infrastructure.settings import get_settings
from ticket_kiosk.loggers import logger


# =============================================================================
# Redis Command Listener
# =============================================================================


async def handle_message(
    redis: Redis,
    handler: CommandHandler,
    raw_data: Any,
    response_channel: str,
) -> None:
    """
    Execute one raw command message and publish the response.

    Args:
        redis: Redis client instance.
        handler: Command handler for execution.
        raw_data: Raw message payload.
        response_channel: Channel to publish the response on.
    """
    # Handle ping messages
    if raw_data == "ping":
        return

    try:
        command = json.loads(raw_data)
    except (TypeError, json.JSONDecodeError) as e:
        logger.error(f"Command parsing error: {e}")
        return

    if not isinstance(command, dict):
        logger.error(f"Command must be a JSON object: {command!r}")
        return

    logger.info(f"Received command: {command}")
    response = await handler.execute(command)

    await redis.publish(response_channel, json.dumps(response, ensure_ascii=False))
    logger.info(f"Response sent to {response_channel}: {response['message']!r}")


async def listen_to_redis(redis: Redis, handler: CommandHandler) -> None:
    """
    Listen for commands on Redis pub/sub and process them.

    Args:
        redis: Redis client instance.
        handler: Command handler for execution.
    """
    settings = get_settings()
    command_channel = settings.kiosk.command_channel
    response_channel = settings.kiosk.response_channel

    pubsub = redis.pubsub()
    await pubsub.subscribe(command_channel)
    logger.info(f"Listening for commands on channel: {command_channel}")

    async for message in pubsub.listen():
        if message.get("type") != "message":
            continue
        await handle_message(redis, handler, message.get("data"), response_channel)


# =============================================================================
# Main Entry Point
# =============================================================================


async def main() -> None:
    """
    Main entry point for the ticket kiosk service.

    Initializes the Redis connection, shows the welcome report and starts
    the command listener.
    """
    settings = get_settings()

    redis = Redis(
        host=settings.redis.host,
        port=settings.redis.port,
        decode_responses=settings.redis.decode_responses,
    )

    service = KioskService(display=WebSocketDisplay())
    handler = CommandHandler(KioskFacade(service))

    await service.welcome()

    try:
        await listen_to_redis(redis, handler)
    finally:
        await redis.aclose()


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Application stopped by user")


if __name__ == "__main__":
    run()
