"""Loader contract and registry entry types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from command_toolkit.commands.models import CommandContract, CommandMetaData

MetaDataLike = Mapping[str, Any] | CommandMetaData


@dataclass(frozen=True)
class RegisteredCommand:
    """Command definition paired with the file it was loaded from."""

    command: CommandContract
    file_path: str


class LoadersContract(Protocol):
    """Interface shared by every command loader."""

    async def get_metadata(self) -> list[dict[str, Any]]:
        """Return the metadata of every known command."""
        ...

    async def get_command(self, metadata: MetaDataLike) -> CommandContract | None:
        """Return the command named by ``metadata``, or None."""
        ...


def requested_name(metadata: MetaDataLike) -> str | None:
    """Extract the command name a lookup asks for."""
    if isinstance(metadata, Mapping):
        name = metadata.get("command_name")
    else:
        name = getattr(metadata, "command_name", None)
    return name if isinstance(name, str) else None


def find_command(
    commands: list[RegisteredCommand], metadata: MetaDataLike
) -> CommandContract | None:
    """Return the first registered command matching ``metadata``."""
    name = requested_name(metadata)
    if name is None:
        return None
    for entry in commands:
        if entry.command.command_name == name:
            return entry.command
    return None
