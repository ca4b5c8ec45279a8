"""
Example store types built on the core Store.

UserStore and AdminStore show the three declaration cases:
    - explicit permission in the class schema ("user": "r")
    - declared without permission ("name": None), falling back to the
      instance default policy
    - properties not declared at all

AdminStore also composes a UserStore (cross-type nesting) and exposes a
deferred credentials sub-store built on every access.
"""
from propstore.permissions import Permission
from propstore.store import Store, lazy


class UserStore(Store):
    policies = {
        "name": "r",
        "password": "w",
    }

    def __init__(self, name: str = "Jane Doe", password: str = "secret") -> None:
        super().__init__(default_policy=Permission.READ_WRITE, name=name, password=password)
        self.define("profile", Store(default_policy=Permission.READ_WRITE, email="jane@example.com"))


def _build_credentials() -> Store:
    credentials = Store()
    credentials.write_entries({"username": "user1"})
    return credentials


class AdminStore(Store):
    policies = {
        "user": "r",
        "name": None,
        "get_credentials": "rw",
    }

    def __init__(self, user: UserStore) -> None:
        super().__init__(default_policy=Permission.NONE)
        self.define("user", user)
        self.define("name", "John Doe")
        self.define("get_credentials", lazy(_build_credentials))


def build_example_admin_store() -> AdminStore:
    return AdminStore(UserStore())
