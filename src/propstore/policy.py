"""
Per-type property policy registry.

Each concrete store type owns an ordered table mapping property name to
Permission. Tables are declared once, at class-definition time, and are
keyed by the exact type:

    class AdminStore(Store):
        policies = {"user": "r", "name": None}

IMPORTANT:
    Tables are NOT merged across a type hierarchy.
    A subclass that declares no policies of its own resolves every
    property through the instance default policy, even if its parent
    declared some.
"""

import warnings
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from propstore.permissions import Permission

PermissionLike = Union[Permission, str]


class PropertyPolicyRegistry:
    """Type-keyed tables of declared property permissions."""

    def __init__(self) -> None:
        self._tables: Dict[type, Dict[str, Permission]] = {}

    def declare(self, owner: type, name: str, permission: Optional[PermissionLike] = None) -> None:
        """
        Declare the permission of property `name` on type `owner`.

        The owner's table is created on first declaration. Declaring a
        property without a permission records nothing, so the property
        falls back to the instance default policy.

        Args:
            owner: Concrete store type
            name: Property name
            permission: Permission or its string form (optional)
        """
        table = self._tables.setdefault(owner, {})
        if permission is None:
            return

        parsed = Permission.parse(permission)
        previous = table.get(name)
        if previous is not None and previous is not parsed:
            warnings.warn(
                f"Policy for {owner.__name__}.{name} redeclared: "
                f"{previous.value} -> {parsed.value}",
                UserWarning,
            )
        table[name] = parsed

    def declare_all(
        self,
        owner: type,
        schema: Union[Mapping[str, Optional[PermissionLike]], Iterable[Tuple[str, Optional[PermissionLike]]]],
    ) -> None:
        """Declare every (name, permission) pair of `schema`, in order."""
        items = schema.items() if isinstance(schema, Mapping) else schema
        self._tables.setdefault(owner, {})
        for name, permission in items:
            self.declare(owner, name, permission)

    def resolve(self, owner: type, name: str, default: Permission) -> Permission:
        """Return the declared permission of `name` on `owner`, else `default`."""
        table = self._tables.get(owner)
        if table is None:
            return default
        return table.get(name, default)

    def is_declared(self, owner: type, name: str) -> bool:
        table = self._tables.get(owner)
        return table is not None and name in table

    def policies_for(self, owner: type) -> Dict[str, Permission]:
        return dict(self._tables.get(owner, {}))


# Registry consulted by every Store.
POLICIES = PropertyPolicyRegistry()
