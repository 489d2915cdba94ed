"""Discovery of command source files."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFilter:
    """Eligibility policy for files found while scanning."""

    extensions: tuple[str, ...]
    excluded_suffixes: tuple[str, ...] = ()
    skip_private: bool = False

    def accepts(self, path: Path) -> bool:
        """Return True when ``path`` should be loaded as a command."""
        name = path.name
        if path.suffix not in self.extensions:
            return False
        if any(name.endswith(suffix) for suffix in self.excluded_suffixes):
            return False
        return not (self.skip_private and name.startswith("_"))


# Runtime JavaScript modules plus TypeScript sources; declaration files carry no value.
JS_SOURCE_FILTER = SourceFilter(
    extensions=(".js", ".cjs", ".mjs", ".ts"),
    excluded_suffixes=(".d.ts",),
)

# Python modules; .pyi stubs never match and package/private modules are skipped.
PY_SOURCE_FILTER = SourceFilter(extensions=(".py",), skip_private=True)


@dataclass(frozen=True)
class CommandSource:
    """Eligible file discovered during a scan."""

    path: Path
    identity: str
    extension: str


class DirectoryScanner(Protocol):
    """Recursively lists the files under a directory."""

    async def scan(self, directory: Path) -> list[Path]:
        """Return every file below ``directory`` in discovery order."""
        ...


def _raise(error: OSError) -> None:
    raise error


def _walk(directory: Path) -> list[Path]:
    files: list[Path] = []
    for root, dirnames, filenames in os.walk(directory, onerror=_raise):
        dirnames.sort()
        files.extend(Path(root) / filename for filename in sorted(filenames))
    return files


class FsDirectoryScanner:
    """Walk the local filesystem in a stable, sorted order."""

    async def scan(self, directory: Path) -> list[Path]:
        """List files below ``directory``; OS errors propagate unchanged."""
        return await asyncio.to_thread(_walk, directory)


def relative_identity(directory: Path, path: Path) -> str:
    """Return ``path`` relative to ``directory`` with POSIX separators."""
    return Path(os.path.relpath(path, directory)).as_posix()


async def discover_sources(
    directory: Path, scanner: DirectoryScanner, source_filter: SourceFilter
) -> list[CommandSource]:
    """Scan ``directory`` and keep the files the filter accepts."""
    files = await scanner.scan(directory)
    sources = [
        CommandSource(
            path=path,
            identity=relative_identity(directory, path),
            extension=path.suffix,
        )
        for path in files
        if source_filter.accepts(path)
    ]
    logger.debug(
        "Discovered %d command sources out of %d files in %s", len(sources), len(files), directory
    )
    return sources


class StaticDirectoryScanner:
    """Scanner over a fixed file list; counts how often it is asked to scan."""

    def __init__(self, files: list[str | Path]) -> None:
        self._files = [Path(item) for item in files]
        self.scan_count = 0

    async def scan(self, directory: Path) -> list[Path]:
        """Return the configured files rooted at ``directory``."""
        self.scan_count += 1
        await asyncio.sleep(0)
        return [directory / item for item in self._files]
