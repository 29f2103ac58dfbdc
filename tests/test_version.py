"""Tests for version information."""

from tidy_tools import __version__


class TestVersion:
    """Tests for the version constant."""

    def test_version_constant(self) -> None:
        """Test that version constant is defined."""
        assert isinstance(__version__, str)
        assert __version__.count(".") == 2
