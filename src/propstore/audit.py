"""
Store Audit: read-only inventory of effective permissions.

This module walks a Store tree and reports, for every property path:
    - the effective permission
    - whether it was declared on the type or taken from the default policy
    - what kind of value it holds

It also flags structures worth a second look:
    - unreadable properties whose readable descendants can still be read
      by path (permissions gate only the terminal segment)
    - stores that contain themselves (read/write/entries would not terminate)

IMPORTANT: The audit does NOT modify the store and does NOT invoke
deferred values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Set

from propstore.permissions import Permission
from propstore.policy import POLICIES
from propstore.store import PATH_SEPARATOR, Store, is_deferred


@dataclass
class PropertyAudit:
    """Effective access facts about one property path."""
    path: str
    permission: Permission
    declared: bool
    kind: str
    depth: int


@dataclass
class StoreReport:
    """
    Audit report for one store tree.

    Paths are listed in walk order (depth-first, definition order).
    """

    store_type: str

    properties: List[PropertyAudit] = field(default_factory=list)
    readable_paths: List[str] = field(default_factory=list)
    hidden_paths: List[str] = field(default_factory=list)
    write_only_paths: List[str] = field(default_factory=list)
    lazy_paths: List[str] = field(default_factory=list)
    max_depth: int = 0

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def get(self, path: str) -> PropertyAudit | None:
        for entry in self.properties:
            if entry.path == path:
                return entry
        return None


def value_kind(value: Any) -> str:
    if isinstance(value, Store):
        return "store"
    if is_deferred(value):
        return "lazy"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return "primitive"


def audit_store(store: Store) -> StoreReport:
    """
    Audit the permissions of every property reachable in `store`.

    Returns a StoreReport with per-path facts and warnings.
    """
    report = StoreReport(store_type=type(store).__name__)
    _walk(store, "", 1, {id(store)}, report)
    return report


def _walk(store: Store, prefix: str, depth: int, ancestors: Set[int], report: StoreReport) -> bool:
    """Record the properties of `store`; True if any path below is readable."""
    any_readable = False

    for key in store.keys():
        path = prefix + key
        value = store.raw(key)
        permission = store.property_policy(key)

        report.properties.append(
            PropertyAudit(
                path=path,
                permission=permission,
                declared=POLICIES.is_declared(type(store), key),
                kind=value_kind(value),
                depth=depth,
            )
        )
        report.max_depth = max(report.max_depth, depth)

        if permission.readable:
            report.readable_paths.append(path)
            any_readable = True
        else:
            report.hidden_paths.append(path)
        if permission is Permission.WRITE_ONLY:
            report.write_only_paths.append(path)
        if is_deferred(value):
            report.lazy_paths.append(path)

        if not isinstance(value, Store):
            continue
        if id(value) in ancestors:
            report.add_warning(f"Cycle: '{path}' refers to a store that contains it")
            continue

        nested_readable = _walk(value, path + PATH_SEPARATOR, depth + 1, ancestors | {id(value)}, report)
        if nested_readable:
            any_readable = True
            if not permission.readable:
                report.add_warning(
                    f"'{path}' is not readable ({permission.long_name}) "
                    f"but readable paths below it can still be read"
                )

    return any_readable
