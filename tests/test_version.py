"""Tests for the urlbench version information."""

from datetime import datetime

from urlbench.version.urlbench_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(major=1, minor=2, patch=3, date=datetime(2023, 1, 1))

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.date_string("%Y") == "2023"
    assert v.full_version() == "1.2.3 (date: 2023-01-01)"


def test_package_version_matches_instance():
    """The package __version__ mirrors URLBENCH_VERSION."""
    import urlbench
    from urlbench.version import URLBENCH_VERSION

    assert isinstance(URLBENCH_VERSION, Version)
    assert urlbench.__version__ == str(URLBENCH_VERSION)
