"""Pydantic models for loader settings."""

from __future__ import annotations

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from command_toolkit.loaders.fs_loader import FsLoader
from command_toolkit.loaders.modules import (
    DEFAULT_EXPORT_NAME,
    ImportlibModuleLoader,
    ModuleLoader,
)
from command_toolkit.loaders.sources import JS_SOURCE_FILTER, PY_SOURCE_FILTER, SourceFilter
from command_toolkit.logging_utils import configure_logging

SourcePolicy = Literal["python", "javascript"]

_SOURCE_FILTERS: dict[str, SourceFilter] = {
    "python": PY_SOURCE_FILTER,
    "javascript": JS_SOURCE_FILTER,
}


class LoaderSettings(BaseModel, frozen=True):
    """Runtime configuration loaded from environment variables."""

    commands_dir: str
    export_name: str = Field(default=DEFAULT_EXPORT_NAME, min_length=1)
    source_policy: SourcePolicy = "python"
    log_level: str = "WARNING"


def load_settings() -> LoaderSettings:
    """Load settings from environment variables with defaults."""
    load_dotenv()

    commands_dir = os.getenv("COMMANDS_DIR")
    if not commands_dir:
        msg = "COMMANDS_DIR environment variable is required. Point it at your commands directory."
        raise ValueError(msg)

    source_policy = os.getenv("COMMAND_SOURCE_POLICY", "python").strip().lower()
    if source_policy not in _SOURCE_FILTERS:
        msg = f"Unknown COMMAND_SOURCE_POLICY '{source_policy}'. Use 'python' or 'javascript'."
        raise ValueError(msg)

    return LoaderSettings(
        commands_dir=commands_dir,
        export_name=os.getenv("COMMAND_EXPORT_NAME", DEFAULT_EXPORT_NAME),
        source_policy=source_policy,  # type: ignore[arg-type]
        log_level=os.getenv("COMMAND_LOG_LEVEL", "WARNING").upper(),
    )


def build_loader(settings: LoaderSettings, module_loader: ModuleLoader | None = None) -> FsLoader:
    """Create an FsLoader wired according to ``settings``.

    The importlib loader only executes Python, so the javascript policy needs
    an explicit ``module_loader`` that can load those files.
    """
    if module_loader is None:
        if settings.source_policy != "python":
            msg = (
                f"COMMAND_SOURCE_POLICY='{settings.source_policy}' requires a module loader "
                "for those files; the importlib loader only imports Python modules."
            )
            raise ValueError(msg)
        module_loader = ImportlibModuleLoader(export_name=settings.export_name)

    configure_logging(settings.log_level)
    return FsLoader(
        settings.commands_dir,
        module_loader=module_loader,
        source_filter=_SOURCE_FILTERS[settings.source_policy],
    )
