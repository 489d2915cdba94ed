"""Module loaders that turn a source path into its exported command."""

from __future__ import annotations

import asyncio
import hashlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "COMMAND"


class ModuleLoader(Protocol):
    """Loads the default export of the unit stored at ``path``."""

    async def load(self, path: Path) -> Any:
        """Return the default export, or None when the unit has none."""
        ...


def _module_name_for(path: Path) -> str:
    digest = hashlib.sha1(str(path.resolve()).encode("utf-8")).hexdigest()[:12]  # noqa: S324
    return f"command_toolkit_loaded_{path.stem}_{digest}"


class ImportlibModuleLoader:
    """Import Python files by path and read their default export attribute."""

    def __init__(self, export_name: str = DEFAULT_EXPORT_NAME) -> None:
        self.export_name = export_name

    async def load(self, path: Path) -> Any:
        """Import ``path`` in a worker thread and return its export."""
        return await asyncio.to_thread(self._load_sync, path)

    def _load_sync(self, path: Path) -> Any:
        module_name = _module_name_for(path)
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            message = f"Cannot import command module from {path}"
            raise ImportError(message)

        module = importlib.util.module_from_spec(spec)
        # Registered before execution so dataclasses and pickling can resolve the module
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise

        logger.debug("Imported %s as %s", path, module_name)
        return getattr(module, self.export_name, None)


class InMemoryModuleLoader:
    """Serve pre-built exports from a path mapping.

    Paths that are not in the mapping behave like modules without a default
    export. Every requested path is recorded in ``loaded``.
    """

    def __init__(self, exports: Mapping[str | Path, Any]) -> None:
        self._exports = {Path(key): value for key, value in exports.items()}
        self.loaded: list[Path] = []

    async def load(self, path: Path) -> Any:
        """Return the export registered for ``path``."""
        self.loaded.append(path)
        return self._exports.get(Path(path))
