"""Gateway framework — front ends over the journal core."""

from .base import Command, Gateway, Reply, Request
from .cli_gateway import ConsoleGateway
from .dispatcher import CommandDispatcher

__all__ = [
    "Command",
    "CommandDispatcher",
    "ConsoleGateway",
    "Gateway",
    "Reply",
    "Request",
]
