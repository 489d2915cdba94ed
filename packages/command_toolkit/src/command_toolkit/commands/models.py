"""Pydantic models for serialized command metadata."""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, Field

FlagType = Literal["boolean", "string", "number", "array"]


class ArgumentDefinition(BaseModel, frozen=True):
    """Positional argument accepted by a command."""

    name: str = Field(min_length=1)
    description: str = ""
    required: bool = True
    spread: bool = False
    default: Any = None


class FlagDefinition(BaseModel, frozen=True):
    """Named flag accepted by a command."""

    name: str = Field(min_length=1)
    type: FlagType = "boolean"
    description: str = ""
    alias: list[str] = Field(default_factory=list)
    required: bool = False
    default: Any = None


class CommandMetaData(BaseModel, frozen=True):
    """Display-oriented view of a command definition."""

    command_name: str = Field(min_length=1)
    description: str = ""
    namespace: str | None = None
    aliases: list[str] = Field(default_factory=list)
    help: str | list[str] = ""
    args: list[ArgumentDefinition] = Field(default_factory=list)
    flags: list[FlagDefinition] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)

    # Serializers may add their own descriptive fields; file_path is one of them.
    model_config = {"extra": "allow"}


@runtime_checkable
class CommandContract(Protocol):
    """Capabilities every loadable command must expose."""

    command_name: str

    def serialize(self) -> dict[str, Any]:
        """Return the metadata view of the command."""
        ...
