"""
versionid - four-part version identifiers.

Key modules:
- version: Version value type (parsing, packing, comparisons)
- exceptions: VersionError and InvalidFormat
- schemas: pydantic field types for Version
- settings: environment-driven settings
- logging_config: optional logger setup
"""

import logging

from versionid.exceptions import InvalidFormat, VersionError
from versionid.version import SEPARATOR, Version

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidFormat",
    "SEPARATOR",
    "Version",
    "VersionError",
]
