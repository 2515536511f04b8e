"""
Command Handler - Routes Redis commands to API methods.

Provides clean command routing with validation and error handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Awaitable, Optional

from ticket_kiosk.application.api_facade import KioskFacade
from ticket_kiosk.core.exceptions import KioskError
from ticket_kiosk.loggers import logger


# Type alias for command handlers
CommandHandlerFunc = Callable[..., Awaitable[dict[str, Any]]]


@dataclass
class CommandResponse:
    """
    Standardized response for command execution.

    Attributes:
        command_id: The ID of the executed command.
        success: Whether the command succeeded.
        message: Human-readable message.
        data: Optional response data.
    """

    command_id: Optional[int] = None
    success: bool = False
    message: Optional[str] = None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the response to a dictionary."""
        return {
            "command_id": self.command_id,
            "success": self.success,
            "message": self.message,
            "data": self.data,
        }


@dataclass
class CommandDefinition:
    """
    Definition of a command.

    Attributes:
        name: Command name.
        handler: Handler function.
        required_args: List of required argument names.
        description: Human-readable description.
    """

    name: str
    handler: CommandHandlerFunc
    required_args: list[str]
    description: str = ""


class CommandHandler:
    """
    Routes commands to their appropriate handlers.

    Provides a clean way to register and dispatch commands
    to their handler methods on the API facade.
    """

    def __init__(self, api: KioskFacade) -> None:
        """
        Initialize the command handler.

        Args:
            api: The KioskFacade instance.
        """
        self._api = api
        self._commands: dict[str, CommandDefinition] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        """Register all default command handlers."""
        # Transaction flow
        self.register(
            "select_destination",
            self._api.select_destination,
            ["destination"],
            "Select a destination and show its fare",
        )
        self.register(
            "insert_money",
            self._api.insert_money,
            ["amount"],
            "Insert an accepted denomination",
        )
        self.register(
            "print_ticket",
            self._api.print_ticket,
            [],
            "Print a ticket for the selected destination",
        )
        self.register(
            "cancel_transaction",
            self._api.cancel_transaction,
            [],
            "Cancel and return inserted money",
        )

        # Queries
        self.register(
            "get_status",
            self._api.get_status,
            [],
            "Get the current transaction state",
        )
        self.register(
            "list_destinations",
            self._api.list_destinations,
            [],
            "List destinations, fares and denominations",
        )

    def register(
        self,
        command_name: str,
        handler: CommandHandlerFunc,
        required_args: list[str],
        description: str = "",
    ) -> None:
        """
        Register a command handler.

        Args:
            command_name: The name of the command.
            handler: The async handler function.
            required_args: List of required argument names.
            description: Human-readable description.
        """
        self._commands[command_name] = CommandDefinition(
            name=command_name,
            handler=handler,
            required_args=required_args,
            description=description,
        )

    def get_available_commands(self) -> list[dict[str, Any]]:
        """Get list of available commands with their descriptions."""
        return [
            {
                "name": cmd.name,
                "required_args": cmd.required_args,
                "description": cmd.description,
            }
            for cmd in self._commands.values()
        ]

    async def execute(self, command_data: dict[str, Any]) -> dict[str, Any]:
        """
        Execute a command based on command data.

        Args:
            command_data: Dictionary containing 'command', 'command_id', and 'data'.

        Returns:
            Response dictionary with execution result.
        """
        command = command_data.get("command")
        command_id = command_data.get("command_id")
        data = command_data.get("data", {}) or {}

        response = CommandResponse(command_id=command_id)

        # Validate command exists
        if command not in self._commands:
            logger.warning(f"Unknown command: {command}")
            response.message = f"Unknown command: {command}"
            return response.to_dict()

        definition = self._commands[command]

        # Extract required arguments from data
        kwargs = {arg: data.get(arg) for arg in definition.required_args}

        # Validate required arguments
        missing = [arg for arg in definition.required_args if kwargs.get(arg) is None]
        if missing:
            response.message = f"Missing required arguments: {missing}"
            return response.to_dict()

        try:
            result = await definition.handler(**kwargs)
        except KioskError as e:
            logger.warning(f"Command '{command}' rejected: {e.message}")
            response.message = e.message
            response.data = e.to_dict()
            return response.to_dict()
        except Exception as e:
            logger.exception(f"Error executing command '{command}': {e}")
            response.message = f"Error: {e}"
            return response.to_dict()

        response.success = result.get("success", False)
        response.message = result.get("message")
        response.data = result.get("data")
        return response.to_dict()
