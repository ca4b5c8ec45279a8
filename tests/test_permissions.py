"""
Tests for Permission values and parsing.
"""

import pytest
from propstore.permissions import Permission


class TestPermission:
    """Test readable/writable membership."""

    @pytest.mark.parametrize(
        "permission, readable, writable",
        [
            (Permission.READ_ONLY, True, False),
            (Permission.WRITE_ONLY, False, True),
            (Permission.READ_WRITE, True, True),
            (Permission.NONE, False, False),
        ],
    )
    def test_directions(self, permission, readable, writable):
        """Each permission allows exactly its directions."""
        assert permission.readable is readable
        assert permission.writable is writable


class TestParse:
    """Test Permission.parse."""

    def test_short_values(self):
        """Should accept the short schema values."""
        assert Permission.parse("r") is Permission.READ_ONLY
        assert Permission.parse("w") is Permission.WRITE_ONLY
        assert Permission.parse("rw") is Permission.READ_WRITE
        assert Permission.parse("none") is Permission.NONE

    def test_long_names(self):
        """Should accept long names, ignoring case and whitespace."""
        assert Permission.parse("read-only") is Permission.READ_ONLY
        assert Permission.parse(" Write-Only ") is Permission.WRITE_ONLY
        assert Permission.parse("READ-WRITE") is Permission.READ_WRITE

    def test_permission_passthrough(self):
        """Should return Permission members unchanged."""
        assert Permission.parse(Permission.NONE) is Permission.NONE

    @pytest.mark.parametrize("value", ["x", "", "readonly", None, 1])
    def test_unknown_values(self, value):
        """Should reject anything that names no permission."""
        with pytest.raises(ValueError):
            Permission.parse(value)
