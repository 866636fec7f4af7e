"""
Pydantic field types for version identifiers.

These annotated types let pydantic models accept a Version, its string
form or its packed integer form, and control which form is emitted in
JSON output.

Example:
    class AgentInfo(BaseModel):
        version: VersionField
        min_server: PackedVersionField

    AgentInfo(version="1.2", min_server=281479271677952)
"""

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from versionid.version import Version

# Serialized string form: four signed decimal segments
VERSION_STRING_PATTERN = r"^[+-]?[0-9]+(\.[+-]?[0-9]+){3}$"


def coerce_version(value: Any) -> Version:
    """
    Convert a supported input into a Version.

    Args:
        value: Version instance, version string or packed integer

    Returns:
        Version

    Raises:
        InvalidFormat: If a string cannot be parsed (a ValueError)
        ValueError: If the input type is not supported
    """
    if isinstance(value, Version):
        return value

    # bool is an int subclass but never a meaningful packed version
    if isinstance(value, bool):
        raise ValueError("Version cannot be a boolean")

    if isinstance(value, int):
        return Version.from_packed(value)

    if isinstance(value, str):
        return Version.parse(value)

    raise ValueError(
        f"Version must be a string, an integer or a Version, got {type(value).__name__}"
    )


class VersionAnnotation:
    """
    Pydantic annotation for Version fields.

    Validation accepts the same inputs as coerce_version(). In JSON mode
    the value is serialized to its string form, or to its packed integer
    form when packed=True; Python mode keeps the Version instance.
    """

    def __init__(self, packed: bool = False):
        self.packed = packed

    def _serialize(self, value: Version, info: core_schema.SerializationInfo) -> Any:
        if not info.mode_is_json():
            return value
        if self.packed:
            return value.to_packed()
        return str(value)

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            coerce_version,
            serialization=core_schema.plain_serializer_function_ser_schema(
                self._serialize, info_arg=True, when_used="always"
            ),
        )

    def __get_pydantic_json_schema__(
        self, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        packed_schema = {
            "type": "integer",
            "description": "Version packed as a 64-bit big-endian integer",
            "examples": [281483566841860],
        }
        string_schema = {
            "type": "string",
            "pattern": VERSION_STRING_PATTERN,
            "description": "Version identifier in format {major}.{minor}.{build}.{name}",
            "examples": ["1.2.3.4"],
        }

        if handler.mode == "serialization":
            return packed_schema if self.packed else string_schema

        # Input side: any string goes through Version.parse, so no pattern
        return {
            "anyOf": [
                {
                    "type": "string",
                    "description": "Dot-separated version, missing parts default to 0",
                    "examples": ["1.2.3.4", "1.2"],
                },
                {
                    "type": "integer",
                    "description": "Version packed as a 64-bit big-endian integer",
                },
            ],
        }


VersionField = Annotated[Version, VersionAnnotation()]

PackedVersionField = Annotated[Version, VersionAnnotation(packed=True)]
