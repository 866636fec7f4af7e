"""
Four-part version identifier.

A version is made of four signed 16-bit integers: major, minor, build
and name, most significant first. It has three interchangeable encodings:

- String form: "{major}.{minor}.{build}.{name}" (e.g. "1.2.3.4")
- Packed form: 64-bit signed integer, the four fields big-endian
- Byte form: the 8 big-endian bytes of the packed form

Usage:
    from versionid import Version

    required = Version.parse("1.2")
    if Version(1, 5).is_compatible_with(required):
        ...
"""

import logging
import operator
import re
import struct
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

from versionid.exceptions import InvalidFormat

logger = logging.getLogger(__name__)

# Version identifier parts separator
SEPARATOR = "."

# Signed 16-bit range of each field
FIELD_MIN = -0x8000
FIELD_MAX = 0x7FFF

PACKED_SIZE = 8

_MASK_16 = 0xFFFF
_MASK_64 = 0xFFFF_FFFF_FFFF_FFFF

# Four big-endian signed shorts: major, minor, build, name
_FIELDS_STRUCT = struct.Struct(">hhhh")

# Base-10 literal with optional sign, ASCII digits only
_TOKEN_PATTERN = re.compile(r"[+-]?[0-9]+")


def _to_int16(value) -> int:
    """Truncate an integer to 16 bits, two's complement."""
    value = operator.index(value) & _MASK_16
    return value - 0x10000 if value > FIELD_MAX else value


def _parse_token(token: str, text: str) -> int:
    """Parse one version segment as a signed 16-bit decimal integer."""
    if _TOKEN_PATTERN.fullmatch(token):
        value = int(token, 10)
        if FIELD_MIN <= value <= FIELD_MAX:
            return value

    logger.debug(f"Rejected version segment {token!r} in {text!r}")
    raise InvalidFormat(
        f"Invalid version segment '{token}' in '{text}'. "
        f"Expected a decimal integer between {FIELD_MIN} and {FIELD_MAX}",
        text=text,
        token=token,
    )


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """
    Immutable four-part version identifier.

    Values passed to the constructor are truncated to 16 bits as they
    are, without validation (Version(65537) has major 1).

    Attributes:
        major: Major version number
        minor: Minor version number
        build: Build number
        name: Build name
    """

    major: int = 0
    minor: int = 0
    build: int = 0
    name: int = 0

    def __post_init__(self):
        for field_name in ("major", "minor", "build", "name"):
            object.__setattr__(self, field_name, _to_int16(getattr(self, field_name)))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a version identifier string.

        Segments are read left to right into major, minor, build and
        name. Empty segments (leading, trailing or doubled separators)
        are skipped, missing trailing parts become 0 and segments past
        the fourth are ignored.

        Args:
            text: Version string (e.g., "1.2.3.4", "1.2")

        Returns:
            Parsed Version

        Raises:
            InvalidFormat: If text is not a string or a segment is not a
                decimal integer within the signed 16-bit range
        """
        if not isinstance(text, str):
            raise InvalidFormat(
                f"Version must be a string, got {type(text).__name__}",
                text=text,
            )

        tokens = [token for token in text.split(SEPARATOR) if token]
        return cls(*(_parse_token(token, text) for token in tokens[:4]))

    @classmethod
    def try_parse(cls, text: str) -> Optional["Version"]:
        """
        Parse a version identifier string without raising.

        Returns:
            Parsed Version, or None if text is malformed
        """
        try:
            return cls.parse(text)
        except InvalidFormat:
            return None

    @classmethod
    def from_packed(cls, value: int) -> "Version":
        """
        Unpack a version from its 64-bit integer form.

        Both signed and unsigned 64-bit values are accepted; wider
        integers are truncated to their low 64 bits.
        """
        data = (operator.index(value) & _MASK_64).to_bytes(PACKED_SIZE, "big")
        return cls(*_FIELDS_STRUCT.unpack(data))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Version":
        """
        Decode a version from its 8-byte big-endian form.

        Raises:
            InvalidFormat: If data is not bytes-like or not exactly 8 bytes long
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidFormat(
                f"Packed version must be bytes, got {type(data).__name__}",
                text=data,
            )
        if len(data) != PACKED_SIZE:
            raise InvalidFormat(
                f"Packed version must be {PACKED_SIZE} bytes, got {len(data)}",
                text=bytes(data),
            )
        return cls(*_FIELDS_STRUCT.unpack(data))

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Encode as 8 bytes: four big-endian 16-bit fields."""
        return _FIELDS_STRUCT.pack(self.major, self.minor, self.build, self.name)

    def to_packed(self) -> int:
        """Encode as a signed 64-bit integer (inverse of from_packed)."""
        return int.from_bytes(self.to_bytes(), "big", signed=True)

    def __str__(self) -> str:
        return SEPARATOR.join(
            str(part) for part in (self.major, self.minor, self.build, self.name)
        )

    def __reduce__(self):
        # Pickled form is the packed integer only
        return (type(self).from_packed, (self.to_packed(),))

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_greater_than(self, other: Optional["Version"]) -> bool:
        """
        Check whether this version is strictly greater than other.

        Major, minor and build are compared in turn; when all three are
        equal the name decides. Equal versions are never greater.
        """
        if not isinstance(other, Version):
            return False
        if self.major != other.major:
            return self.major > other.major
        if self.minor != other.minor:
            return self.minor > other.minor
        if self.build != other.build:
            return self.build > other.build
        return self.name > other.name

    def is_greater_or_equal_to(self, other: Optional["Version"]) -> bool:
        """
        Check whether this version is greater than or equal to other.

        True if major is greater, or majors are equal and minor is
        greater, or majors and minors are equal and build is greater, or
        all four parts are equal. Equal major, minor and build with a
        different name is False in both directions.
        """
        if not isinstance(other, Version):
            return False
        if self.major > other.major:
            return True
        if self.major == other.major and self.minor > other.minor:
            return True
        if self.major == other.major and self.minor == other.minor and self.build > other.build:
            return True
        return self == other

    def is_compatible_with(self, other: Optional["Version"]) -> bool:
        """
        Check whether this version satisfies other as a requirement.

        Majors must be equal. A greater minor is compatible regardless of
        build; an equal minor needs a build at least as high.
        """
        if not isinstance(other, Version):
            return False
        if self.major != other.major:
            return False
        if self.minor != other.minor:
            return self.minor > other.minor
        return self.build >= other.build

    def is_equivalent_to(self, other: Optional["Version"]) -> bool:
        """Same major and minor, at least the same build; name is ignored."""
        if not isinstance(other, Version):
            return False
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.build >= other.build
        )

    # ------------------------------------------------------------------
    # Equality and ordering
    # ------------------------------------------------------------------

    def compare_to(self, other: "Version") -> int:
        """
        Compare for sorting.

        Returns:
            0 if equal, otherwise the difference of the first differing
            part in order major, minor, build, name
        """
        if not isinstance(other, Version):
            raise TypeError(
                f"Cannot compare Version with {type(other).__name__}"
            )
        if self == other:
            return 0
        if self.major != other.major:
            return self.major - other.major
        if self.minor != other.minor:
            return self.minor - other.minor
        if self.build != other.build:
            return self.build - other.build
        return self.name - other.name

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Version):
            return NotImplemented
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.build == other.build
            and self.name == other.name
        )

    def __hash__(self):
        return hash(str(self))

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0
