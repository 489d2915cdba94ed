"""Load commands from the files of a directory."""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from command_toolkit.errors import MissingDefaultExportError
from command_toolkit.loaders.contract import MetaDataLike, RegisteredCommand, find_command
from command_toolkit.loaders.modules import ImportlibModuleLoader, ModuleLoader
from command_toolkit.loaders.sources import (
    PY_SOURCE_FILTER,
    DirectoryScanner,
    FsDirectoryScanner,
    SourceFilter,
    discover_sources,
)
from command_toolkit.validation import validate_command

if TYPE_CHECKING:
    from command_toolkit.commands.models import CommandContract

logger = logging.getLogger(__name__)


class LoadState(StrEnum):
    """Progress of the one-time scan-and-load pass."""

    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"


class FsLoader:
    """Discover, load, and validate the commands stored in a directory.

    The directory is scanned lazily by the first ``get_metadata`` call and the
    resulting registry is reused for the lifetime of the loader. A pass either
    registers every eligible file or fails as a whole.
    """

    def __init__(
        self,
        directory: str | Path,
        module_loader: ModuleLoader | None = None,
        scanner: DirectoryScanner | None = None,
        source_filter: SourceFilter | None = None,
    ) -> None:
        self.directory = Path(directory)
        self._module_loader = module_loader or ImportlibModuleLoader()
        self._scanner = scanner or FsDirectoryScanner()
        self._source_filter = source_filter or PY_SOURCE_FILTER
        self._commands: list[RegisteredCommand] = []
        self._state = LoadState.NOT_LOADED
        self._lock = asyncio.Lock()

    @property
    def state(self) -> LoadState:
        """Return the current load state."""
        return self._state

    async def _load_commands(self) -> list[RegisteredCommand]:
        sources = await discover_sources(self.directory, self._scanner, self._source_filter)
        commands: list[RegisteredCommand] = []
        for source in sources:
            exported = await self._module_loader.load(source.path)
            # Falsy exports count as missing, like an absent attribute
            if not exported:
                raise MissingDefaultExportError(source.identity)
            command = validate_command(exported, f'"{source.identity}" file')
            commands.append(RegisteredCommand(command=command, file_path=source.identity))
            logger.debug("Loaded command '%s' from %s", command.command_name, source.identity)
        return commands

    async def _ensure_loaded(self) -> None:
        if self._state is LoadState.LOADED:
            return
        async with self._lock:
            if self._state is LoadState.LOADED:
                return
            self._state = LoadState.LOADING
            try:
                commands = await self._load_commands()
            except BaseException:
                self._state = LoadState.NOT_LOADED
                raise
            self._commands = commands
            self._state = LoadState.LOADED
            logger.debug("Registered %d commands from %s", len(commands), self.directory)

    async def get_metadata(self) -> list[dict[str, Any]]:
        """Return the metadata of every command, in discovery order."""
        await self._ensure_loaded()
        return [
            {**entry.command.serialize(), "file_path": entry.file_path}
            for entry in self._commands
        ]

    async def get_command(self, metadata: MetaDataLike) -> CommandContract | None:
        """Return the first loaded command with the requested name.

        Lookups never trigger a scan; before ``get_metadata`` every lookup
        returns None.
        """
        return find_command(self._commands, metadata)
