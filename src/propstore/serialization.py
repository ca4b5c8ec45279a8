"""
Serialization helpers for Store trees.

Only the visible tree is serialized: what Store.entries() exposes under
each store's policies. Loading builds a fresh Store with write_entries(),
so nested mappings become nested stores.

Text in, text out. Nothing here touches files.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from propstore.permissions import Permission
from propstore.store import Store


def store_to_dict(store: Store) -> Dict[str, Any]:
    return store.entries()


def store_from_dict(d: Any, default_policy: Permission | str = Permission.READ_WRITE) -> Store:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported store document type: {type(d).__name__}")
    store = Store(default_policy=default_policy)
    store.write_entries(d)
    return store


def store_to_json(store: Store) -> str:
    return json.dumps(store_to_dict(store), sort_keys=True)


def store_from_json(s: str, default_policy: Permission | str = Permission.READ_WRITE) -> Store:
    d = json.loads(s)
    return store_from_dict(d, default_policy)


def store_to_yaml(store: Store) -> str:
    return yaml.safe_dump(store_to_dict(store))


def store_from_yaml(s: str, default_policy: Permission | str = Permission.READ_WRITE) -> Store:
    d = yaml.safe_load(s)
    return store_from_dict(d, default_policy)
