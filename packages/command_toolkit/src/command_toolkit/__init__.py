"""Command discovery and loading for command-line applications."""

from command_toolkit.commands import (
    ArgumentDefinition,
    BaseCommand,
    CommandContract,
    CommandMetaData,
    FlagDefinition,
)
from command_toolkit.config import LoaderSettings, build_loader, load_settings
from command_toolkit.errors import (
    CommandLoadError,
    InvalidCommandShapeError,
    LoadValidationError,
    MissingDefaultExportError,
)
from command_toolkit.loaders import (
    JS_SOURCE_FILTER,
    PY_SOURCE_FILTER,
    FsLoader,
    ImportlibModuleLoader,
    InMemoryModuleLoader,
    ListLoader,
    LoadersContract,
    LoadState,
    ModuleLoader,
    SourceFilter,
)
from command_toolkit.logging_utils import configure_logging
from command_toolkit.validation import validate_command, validate_metadata

__all__ = [
    "JS_SOURCE_FILTER",
    "PY_SOURCE_FILTER",
    "ArgumentDefinition",
    "BaseCommand",
    "CommandContract",
    "CommandLoadError",
    "CommandMetaData",
    "FlagDefinition",
    "FsLoader",
    "ImportlibModuleLoader",
    "InMemoryModuleLoader",
    "InvalidCommandShapeError",
    "ListLoader",
    "LoadState",
    "LoadValidationError",
    "LoaderSettings",
    "LoadersContract",
    "MissingDefaultExportError",
    "ModuleLoader",
    "SourceFilter",
    "build_loader",
    "configure_logging",
    "load_settings",
    "validate_command",
    "validate_metadata",
]
