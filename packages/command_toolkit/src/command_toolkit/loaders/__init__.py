"""Command loaders."""

from command_toolkit.loaders.contract import LoadersContract, RegisteredCommand
from command_toolkit.loaders.fs_loader import FsLoader, LoadState
from command_toolkit.loaders.list_loader import ListLoader
from command_toolkit.loaders.modules import (
    DEFAULT_EXPORT_NAME,
    ImportlibModuleLoader,
    InMemoryModuleLoader,
    ModuleLoader,
)
from command_toolkit.loaders.sources import (
    JS_SOURCE_FILTER,
    PY_SOURCE_FILTER,
    CommandSource,
    DirectoryScanner,
    FsDirectoryScanner,
    SourceFilter,
    StaticDirectoryScanner,
    discover_sources,
)

__all__ = [
    "DEFAULT_EXPORT_NAME",
    "JS_SOURCE_FILTER",
    "PY_SOURCE_FILTER",
    "CommandSource",
    "DirectoryScanner",
    "FsDirectoryScanner",
    "FsLoader",
    "ImportlibModuleLoader",
    "InMemoryModuleLoader",
    "ListLoader",
    "LoadState",
    "LoadersContract",
    "ModuleLoader",
    "RegisteredCommand",
    "SourceFilter",
    "StaticDirectoryScanner",
    "discover_sources",
]
