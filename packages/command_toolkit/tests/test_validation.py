"""Unit tests for command shape validation."""

from __future__ import annotations

from typing import Any

import pytest
from command_toolkit.commands import BaseCommand
from command_toolkit.errors import InvalidCommandShapeError, LoadValidationError
from command_toolkit.validation import (
    INVALID_METADATA,
    MISSING_DEFAULT_EXPORT,
    MISSING_REQUIRED_FIELD,
    NOT_A_COMMAND,
    validate_command,
    validate_metadata,
)


class MakeModel(BaseCommand):
    command_name = "make:model"
    description = "Make a new model"


class Unnamed(BaseCommand):
    description = "No name declared"


class NoSerialize:
    command_name = "raw"


class WrongSerializedName:
    command_name = "first"

    @classmethod
    def serialize(cls) -> dict[str, Any]:
        return {"command_name": "second"}


class BadSerializedPayload:
    command_name = "broken"

    @classmethod
    def serialize(cls) -> Any:
        return ["not", "a", "mapping"]


def test_accepts_base_command_subclass() -> None:
    assert validate_command(MakeModel, '"make_model.py" file') is MakeModel


def test_accepts_any_object_with_contract() -> None:
    class Duck:
        command_name = "quack"

        def serialize(self) -> dict[str, Any]:
            return {"command_name": "quack", "sound": "loud"}

    duck = Duck()
    assert validate_command(duck, '"duck.py" file') is duck


def test_rejects_plain_string() -> None:
    with pytest.raises(InvalidCommandShapeError, match="greeting.ts") as exc_info:
        validate_command("hello", '"greeting.ts" file')
    assert exc_info.value.reason == NOT_A_COMMAND
    assert exc_info.value.source_label == '"greeting.ts" file'


def test_rejects_none_as_missing_export() -> None:
    with pytest.raises(InvalidCommandShapeError) as exc_info:
        validate_command(None, '"empty.py" file')
    assert exc_info.value.reason == MISSING_DEFAULT_EXPORT


def test_rejects_mapping() -> None:
    with pytest.raises(InvalidCommandShapeError) as exc_info:
        validate_command({"command_name": "x"}, '"dict.py" file')
    assert exc_info.value.reason == NOT_A_COMMAND


def test_rejects_blank_command_name() -> None:
    with pytest.raises(InvalidCommandShapeError) as exc_info:
        validate_command(Unnamed, '"unnamed.py" file')
    assert exc_info.value.reason == MISSING_REQUIRED_FIELD


def test_rejects_instance_method_serialize_on_class() -> None:
    class InstanceSerialize:
        command_name = "serve"

        def serialize(self) -> dict[str, Any]:
            return {"command_name": "serve"}

    with pytest.raises(
        InvalidCommandShapeError, match="not callable without arguments"
    ) as exc_info:
        validate_command(InstanceSerialize, '"serve.py" file')
    assert exc_info.value.reason == NOT_A_COMMAND
    assert exc_info.value.source_label == '"serve.py" file'
    assert isinstance(exc_info.value.__cause__, TypeError)


def test_rejects_missing_serialize() -> None:
    with pytest.raises(InvalidCommandShapeError, match="serialize") as exc_info:
        validate_command(NoSerialize, '"raw.py" file')
    assert exc_info.value.reason == NOT_A_COMMAND


def test_rejects_mismatched_serialized_name() -> None:
    with pytest.raises(InvalidCommandShapeError, match="does not match") as exc_info:
        validate_command(WrongSerializedName, '"wrong.py" file')
    assert exc_info.value.reason == INVALID_METADATA


def test_rejects_non_mapping_metadata() -> None:
    with pytest.raises(InvalidCommandShapeError, match="must return a mapping"):
        validate_command(BadSerializedPayload, '"broken.py" file')


def test_validate_metadata_reports_field_errors() -> None:
    with pytest.raises(LoadValidationError, match="args.0.name") as exc_info:
        validate_metadata({"command_name": "serve", "args": [{"name": ""}]}, '"serve.py" file')
    assert exc_info.value.reason == INVALID_METADATA


def test_validate_metadata_keeps_extra_fields() -> None:
    metadata = validate_metadata({"command_name": "serve", "file_path": "serve.py"}, "label")
    assert metadata.command_name == "serve"
    assert metadata.model_dump()["file_path"] == "serve.py"
