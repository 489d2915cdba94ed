"""Shape validation for loaded command values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from command_toolkit.commands.models import CommandContract, CommandMetaData
from command_toolkit.errors import InvalidCommandShapeError

MISSING_DEFAULT_EXPORT = "missing default export"
NOT_A_COMMAND = "not a command"
MISSING_REQUIRED_FIELD = "missing required field"
INVALID_METADATA = "invalid metadata"


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def validate_metadata(payload: Any, source_label: str) -> CommandMetaData:
    """Validate a serialized metadata view and return it as a model."""
    if not isinstance(payload, Mapping):
        raise InvalidCommandShapeError(
            source_label, INVALID_METADATA, "serialize() must return a mapping"
        )
    try:
        return CommandMetaData.model_validate(dict(payload))
    except ValidationError as exc:
        raise InvalidCommandShapeError(source_label, INVALID_METADATA, _summarize(exc)) from exc


def validate_command(candidate: Any, source_label: str) -> CommandContract:
    """Return ``candidate`` if it satisfies the command contract, else raise.

    A command exposes a non-empty ``command_name`` string and a callable
    ``serialize`` whose output is valid command metadata for the same name.
    """
    if candidate is None:
        raise InvalidCommandShapeError(source_label, MISSING_DEFAULT_EXPORT)
    if isinstance(candidate, str | bytes | int | float | bool | Mapping):
        raise InvalidCommandShapeError(
            source_label, NOT_A_COMMAND, f"got {type(candidate).__name__}"
        )

    name = getattr(candidate, "command_name", None)
    if not isinstance(name, str) or not name.strip():
        raise InvalidCommandShapeError(
            source_label, MISSING_REQUIRED_FIELD, "command_name must be a non-empty string"
        )
    if not callable(getattr(candidate, "serialize", None)):
        raise InvalidCommandShapeError(source_label, NOT_A_COMMAND, "serialize() is missing")

    try:
        payload = candidate.serialize()
    except TypeError as exc:
        detail = f"serialize() is not callable without arguments: {exc}"
        raise InvalidCommandShapeError(source_label, NOT_A_COMMAND, detail) from exc

    metadata = validate_metadata(payload, source_label)
    if metadata.command_name != name:
        detail = f"serialized name '{metadata.command_name}' does not match '{name}'"
        raise InvalidCommandShapeError(source_label, INVALID_METADATA, detail)
    return candidate
