"""
Test the example admin/user stores.

Validates cross-type nesting, fallback to a "none" default policy,
and deferred credentials built on every access.
"""

import pytest
from propstore.errors import InvalidPath, PermissionDenied
from propstore.permissions import Permission
from propstore.policy import POLICIES
from propstore.examples import AdminStore, UserStore, build_example_admin_store


def test_admin_entries():
    admin = build_example_admin_store()
    assert admin.entries() == {
        "user": {"name": "Jane Doe", "profile": {"email": "jane@example.com"}},
        "get_credentials": {"username": "user1"},
    }


def test_admin_schema():
    assert POLICIES.policies_for(AdminStore) == {
        "user": Permission.READ_ONLY,
        "get_credentials": Permission.READ_WRITE,
    }


def test_name_falls_back_to_none_policy():
    admin = build_example_admin_store()
    with pytest.raises(PermissionDenied):
        admin.read("name")
    with pytest.raises(PermissionDenied):
        admin.write("name", "Other")


def test_user_reference_is_read_only():
    admin = build_example_admin_store()
    assert isinstance(admin.read("user"), UserStore)
    with pytest.raises(PermissionDenied):
        admin.write("user", UserStore())


def test_user_policies_apply_below_admin():
    admin = build_example_admin_store()
    assert admin.read("user:name") == "Jane Doe"
    with pytest.raises(PermissionDenied):
        admin.write("user:name", "Other")

    admin.write("user:password", "new-secret")
    with pytest.raises(PermissionDenied):
        admin.read("user:password")
    assert admin.read("user").raw("password") == "new-secret"


def test_user_profile_is_writable_through_admin():
    admin = build_example_admin_store()
    admin.write("user:profile:email", "other@example.com")
    assert admin.read("user:profile:email") == "other@example.com"


def test_credentials_are_rebuilt_each_read():
    admin = build_example_admin_store()
    first = admin.read("get_credentials")
    second = admin.read("get_credentials")
    assert first is not second
    assert admin.read("get_credentials:username") == "user1"


def test_undeclared_property_rejected():
    admin = build_example_admin_store()
    with pytest.raises(PermissionDenied):
        admin.write("extra", 1)
    with pytest.raises(InvalidPath):
        admin.read("extra")
