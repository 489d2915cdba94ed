"""Load commands from an in-process list."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from command_toolkit.loaders.contract import MetaDataLike, RegisteredCommand, find_command
from command_toolkit.validation import validate_command

if TYPE_CHECKING:
    from collections.abc import Iterable

    from command_toolkit.commands.models import CommandContract


class ListLoader:
    """Serve commands that were handed over directly instead of discovered."""

    def __init__(self, commands: Iterable[Any]) -> None:
        self._candidates = list(commands)
        self._commands: list[RegisteredCommand] | None = None

    def _validated(self) -> list[RegisteredCommand]:
        if self._commands is None:
            registered: list[RegisteredCommand] = []
            for candidate in self._candidates:
                name = getattr(candidate, "command_name", None) or type(candidate).__name__
                command = validate_command(candidate, f'"{name}" command')
                registered.append(RegisteredCommand(command=command, file_path=""))
            self._commands = registered
        return self._commands

    async def get_metadata(self) -> list[dict[str, Any]]:
        """Return the metadata of every command, in list order."""
        return [entry.command.serialize() for entry in self._validated()]

    async def get_command(self, metadata: MetaDataLike) -> CommandContract | None:
        """Return the first command with the requested name, or None."""
        return find_command(self._validated(), metadata)
