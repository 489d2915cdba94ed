"""Base class for command definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from command_toolkit.commands.models import ArgumentDefinition, CommandMetaData, FlagDefinition


def namespace_of(command_name: str) -> str | None:
    """Return the namespace of a ``namespace:name`` command, if any."""
    namespace, separator, _ = command_name.partition(":")
    return namespace if separator and namespace else None


class BaseCommand(ABC):
    """Commands subclass this and declare their metadata as class attributes.

    The class itself is the command definition: loaders register the class,
    and the invoker instantiates it and awaits ``run``.
    """

    command_name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    aliases: ClassVar[tuple[str, ...]] = ()
    help: ClassVar[str | list[str]] = ""
    args: ClassVar[tuple[ArgumentDefinition, ...]] = ()
    flags: ClassVar[tuple[FlagDefinition, ...]] = ()
    options: ClassVar[Mapping[str, Any]] = MappingProxyType({})

    def __init__(self, argv: list[str] | None = None) -> None:
        self.argv = list(argv or [])

    @classmethod
    def serialize(cls) -> dict[str, Any]:
        """Serialize the class declarations into a metadata dict."""
        metadata = CommandMetaData(
            command_name=cls.command_name,
            description=cls.description,
            namespace=namespace_of(cls.command_name),
            aliases=list(cls.aliases),
            help=cls.help,
            args=list(cls.args),
            flags=list(cls.flags),
            options=dict(cls.options),
        )
        return metadata.model_dump()

    @abstractmethod
    async def run(self) -> Any:
        """Execute the command."""
