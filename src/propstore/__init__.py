"""
Permissioned Property Store Package

A hierarchical, path-addressed property container with per-property
read/write permission enforcement.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Files, databases or any persistence medium
    - Network exposure
    - Concurrency control

Paths are ':'-delimited property names ("user:profile:email").
Only the terminal segment of a path is permission-checked.
"""

from propstore.errors import StoreError, InvalidPath, PermissionDenied
from propstore.permissions import Permission
from propstore.policy import PropertyPolicyRegistry, POLICIES
from propstore.store import Store, Lazy, lazy

__version__ = "0.1.0"

__all__ = [
    "StoreError",
    "InvalidPath",
    "PermissionDenied",
    "Permission",
    "PropertyPolicyRegistry",
    "POLICIES",
    "Store",
    "Lazy",
    "lazy",
]
