"""Command contract, base class, and metadata models."""

from command_toolkit.commands.base import BaseCommand, namespace_of
from command_toolkit.commands.models import (
    ArgumentDefinition,
    CommandContract,
    CommandMetaData,
    FlagDefinition,
    FlagType,
)

__all__ = [
    "ArgumentDefinition",
    "BaseCommand",
    "CommandContract",
    "CommandMetaData",
    "FlagDefinition",
    "FlagType",
    "namespace_of",
]
