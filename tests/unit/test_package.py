"""Unit tests for package metadata."""

from __future__ import annotations

from importlib import metadata

import pytest

import mbutil


def test_version_matches_distribution() -> None:
    """Installed distribution version is read from mbutil.__version__."""
    try:
        dist_version = metadata.version("mbutil")
    except metadata.PackageNotFoundError:
        pytest.skip("mbutil is not installed")
    assert dist_version == mbutil.__version__
