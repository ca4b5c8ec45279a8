"""
Demo: Build the example admin store, read through it, and audit it.
"""

from propstore.examples import build_example_admin_store
from propstore.audit import audit_store
from propstore.errors import PermissionDenied
from propstore.serialization import store_to_yaml


def print_report(report):
    """Pretty-print a StoreReport."""
    print()
    print("=" * 70)
    print(f"STORE AUDIT REPORT: {report.store_type}")
    print("=" * 70)
    print()

    print("PROPERTIES")
    for entry in report.properties:
        source = "declared" if entry.declared else "default"
        print(f"  {entry.path:<30} {entry.permission.long_name:<11} ({source}, {entry.kind})")
    print()

    print(f"  Readable paths:   {len(report.readable_paths)}")
    print(f"  Hidden paths:     {len(report.hidden_paths)}")
    print(f"  Lazy paths:       {report.lazy_paths if report.lazy_paths else 'None'}")
    print(f"  Max depth:        {report.max_depth}")
    print()

    if report.warnings:
        print("WARNINGS")
        for warning in report.warnings:
            print(f"  - {warning}")
        print()


def main():
    admin = build_example_admin_store()

    print("VISIBLE ENTRIES (YAML):")
    print("-" * 70)
    print(store_to_yaml(admin))

    print("READS:")
    print("-" * 70)
    print(f"  user:name                 -> {admin.read('user:name')}")
    print(f"  get_credentials:username  -> {admin.read('get_credentials:username')}")
    try:
        admin.read("name")
    except PermissionDenied as e:
        print(f"  name                      -> denied ({e})")

    print_report(audit_store(admin))


if __name__ == "__main__":
    main()
