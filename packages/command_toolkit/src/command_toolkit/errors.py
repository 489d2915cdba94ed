"""Errors raised while discovering and loading commands."""

from __future__ import annotations


class CommandLoadError(RuntimeError):
    """Base error for a failed scan-and-load pass."""


class MissingDefaultExportError(CommandLoadError):
    """A discovered file did not export a command."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        message = f'Invalid command exported from "{file_path}" file. Missing default export'
        super().__init__(message)


class InvalidCommandShapeError(CommandLoadError):
    """A loaded value does not satisfy the command contract."""

    def __init__(self, source_label: str, reason: str, detail: str = "") -> None:
        self.source_label = source_label
        self.reason = reason
        self.detail = detail
        message = f"Invalid command exported from {source_label}: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


LoadValidationError = InvalidCommandShapeError
