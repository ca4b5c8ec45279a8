"""
Core Property Store

Defines the hierarchical, path-addressed container.

A Store holds an ordered set of named properties. Each property value is
one of:
    - a primitive (str, int, float, bool, None)
    - a sequence or a mapping installed as-is
    - a nested Store (owned by this store, forming a tree)
    - a deferred value: a zero-argument callable invoked on every access

ARCHITECTURAL RULES:
    - Paths are ':'-joined property names, one segment per level
    - Only the terminal segment of a path is permission-checked
    - Writing through missing segments creates child stores that inherit
      the parent's default policy
    - Deferred values are never cached by the store
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Union

from propstore.errors import InvalidPath, PermissionDenied
from propstore.permissions import Permission
from propstore.policy import POLICIES

PATH_SEPARATOR = ":"


@dataclass(frozen=True)
class Lazy:
    """
    A deferred property value.

    Calling it runs the factory again each time. If the result should be
    computed once, the factory must memoize it itself.
    """

    factory: Callable[[], Any]

    def __call__(self) -> Any:
        return self.factory()


def lazy(factory: Callable[[], Any]) -> Lazy:
    """Mark a zero-argument callable as a deferred property value."""
    return Lazy(factory)


def split_path(path: str) -> List[str]:
    """
    Split a path into its segments.

    Raises:
        InvalidPath: If the path is not a string, is empty, or has an
            empty segment ("a::b", ":a", "a:")
    """
    if not isinstance(path, str) or not path:
        raise InvalidPath(f"Invalid path: {path!r}")
    segments = path.split(PATH_SEPARATOR)
    if any(segment == "" for segment in segments):
        raise InvalidPath(f"Invalid path: {path!r}")
    return segments


def is_deferred(value: Any) -> bool:
    return callable(value)


class Store:
    """
    Hierarchical property container with per-property permissions.

    Concrete subclasses declare property permissions with a class-level
    schema literal, and set their default policy and initial properties
    in the constructor:

        class AdminStore(Store):
            policies = {"user": "r", "name": None}

            def __init__(self, user):
                super().__init__(default_policy="none", user=user, name="John Doe")

    A property absent from the schema (or declared with None) uses the
    instance's default_policy.

    Initial properties given to the constructor or to define() bypass
    permission checks. read(), write() and write_entries() enforce them.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Only the schema written in this class body; parents are not merged.
        schema = cls.__dict__.get("policies")
        if schema is not None:
            POLICIES.declare_all(cls, schema)

    def __init__(self, default_policy: Union[Permission, str] = Permission.READ_WRITE, **properties: Any) -> None:
        self._properties: Dict[str, Any] = {}
        self.default_policy = default_policy
        for name, value in properties.items():
            self.define(name, value)

    @property
    def default_policy(self) -> Permission:
        return self._default_policy

    @default_policy.setter
    def default_policy(self, value: Union[Permission, str]) -> None:
        self._default_policy = Permission.parse(value)

    # ------------------------------------------------------------------
    # Permissions
    # ------------------------------------------------------------------

    def property_policy(self, key: str) -> Permission:
        """Effective permission of `key`: declared on this type, else the default."""
        return POLICIES.resolve(type(self), key, self._default_policy)

    def allowed_to_read(self, key: str) -> bool:
        return self.property_policy(key).readable

    def allowed_to_write(self, key: str) -> bool:
        return self.property_policy(key).writable

    # ------------------------------------------------------------------
    # Own properties
    # ------------------------------------------------------------------

    def define(self, name: str, value: Any) -> Any:
        """Install a property directly, without permission checks."""
        self._properties[name] = value
        return value

    def keys(self) -> List[str]:
        return list(self._properties)

    def raw(self, name: str) -> Any:
        """Stored value of an own property, deferred values not invoked."""
        try:
            return self._properties[name]
        except KeyError:
            raise InvalidPath(f"No property named {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(default_policy={self._default_policy.value!r}, keys={self.keys()!r})"

    def _child_store(self) -> "Store":
        return Store(default_policy=self._default_policy)

    # ------------------------------------------------------------------
    # Path operations
    # ------------------------------------------------------------------

    def read(self, path: str) -> Any:
        """
        Read the value at `path`.

        Deferred values met along the way are invoked. Only the last
        segment is checked against its read permission.

        Raises:
            InvalidPath: If the path is malformed, a property is missing,
                or an intermediate value is not a Store
            PermissionDenied: If the last property is not readable
        """
        segments = split_path(path)
        name = segments[0]

        if name not in self._properties:
            raise InvalidPath(f"Path argument of read is invalid: {path!r}")
        value = self._properties[name]
        if is_deferred(value):
            value = value()

        if len(segments) == 1:
            if not self.allowed_to_read(name):
                raise PermissionDenied(f"Reading property {name!r} is not allowed.")
            return value

        if not isinstance(value, Store):
            raise InvalidPath(f"Path argument of read is invalid: {path!r} ({name!r} is not a store)")
        return value.read(PATH_SEPARATOR.join(segments[1:]))

    def write(self, path: str, value: Any) -> Any:
        """
        Write `value` at `path` and return it.

        Missing intermediate properties become new child stores with this
        store's default policy. A plain mapping written to a missing
        property becomes a child store populated entry by entry.

        Raises:
            InvalidPath: If the path is malformed or an existing
                intermediate value is not a Store
            PermissionDenied: If the last property is not writable
        """
        segments = split_path(path)
        name = segments[0]

        if len(segments) == 1:
            if not self.allowed_to_write(name):
                raise PermissionDenied(f"Writing to property {name!r} is not allowed.")
            return self._write_final(name, value)

        if name not in self._properties:
            self._properties[name] = self._child_store()
        child = self._properties[name]
        if is_deferred(child):
            child = child()
        if not isinstance(child, Store):
            raise InvalidPath(f"Path argument of write is invalid: {path!r} ({name!r} is not a store)")
        return child.write(PATH_SEPARATOR.join(segments[1:]), value)

    def _write_final(self, name: str, value: Any) -> Any:
        if name not in self._properties and isinstance(value, Mapping):
            child = self._child_store()
            self._properties[name] = child
            child.write_entries(value)
        else:
            self._properties[name] = value
        return value

    def write_entries(self, entries: Mapping[str, Any]) -> None:
        """
        Write every key/value pair of `entries`, in order.

        Not transactional: keys written before a failing key stay written.
        """
        for key, value in entries.items():
            self.write(key, value)

    def entries(self) -> Dict[str, Any]:
        """
        Serialize the readable subset of this store to plain dicts.

        Nested stores apply their own policies. Deferred values are invoked.
        """
        result: Dict[str, Any] = {}
        for key, value in self._properties.items():
            if not self.allowed_to_read(key):
                continue
            if is_deferred(value):
                value = value()
            if isinstance(value, Store):
                value = value.entries()
            result[key] = value
        return result
