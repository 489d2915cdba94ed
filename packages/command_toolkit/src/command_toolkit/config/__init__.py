from command_toolkit.config.settings import (
    LoaderSettings,
    SourcePolicy,
    build_loader,
    load_settings,
)

__all__ = [
    "LoaderSettings",
    "SourcePolicy",
    "build_loader",
    "load_settings",
]
