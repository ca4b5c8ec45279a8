"""
Access permissions for store properties.

A Permission controls which directions of access (read, write) are
allowed on a single named property.

    r     -> read-only
    w     -> write-only
    rw    -> read-write
    none  -> no access
"""

from enum import Enum
from typing import Union


class Permission(Enum):
    """
    Access permission of a property.

    Values are the short forms used in class-level policy schemas.
    Long forms ("read-only", ...) are accepted by parse().
    """

    READ_ONLY = "r"
    WRITE_ONLY = "w"
    READ_WRITE = "rw"
    NONE = "none"

    @property
    def readable(self) -> bool:
        return self in (Permission.READ_ONLY, Permission.READ_WRITE)

    @property
    def writable(self) -> bool:
        return self in (Permission.WRITE_ONLY, Permission.READ_WRITE)

    @property
    def long_name(self) -> str:
        return _LONG_NAMES[self]

    @classmethod
    def parse(cls, value: Union["Permission", str]) -> "Permission":
        """
        Convert a Permission or its string form to a Permission.

        Accepts short values ("r", "w", "rw", "none") and long names
        ("read-only", "write-only", "read-write", "none"), case-insensitive.

        Raises:
            ValueError: If the value names no permission
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value or key == member.long_name:
                    return member
        raise ValueError(f"Unknown permission: {value!r}")


_LONG_NAMES = {
    Permission.READ_ONLY: "read-only",
    Permission.WRITE_ONLY: "write-only",
    Permission.READ_WRITE: "read-write",
    Permission.NONE: "none",
}
