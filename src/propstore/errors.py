"""
Errors raised by the property store.

Only two kinds surface from path operations:
    - InvalidPath: malformed path, or a property missing at a resolution step
    - PermissionDenied: the terminal property forbids the requested direction

"Not found" and "malformed" are deliberately the same error.
"""


class StoreError(Exception):
    """Base class for all property store errors."""
    pass


class InvalidPath(StoreError):
    """Raised when a path is malformed or does not resolve."""
    pass


class PermissionDenied(StoreError):
    """Raised when a property's policy forbids the requested access."""
    pass
