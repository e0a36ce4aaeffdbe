"""Test pygaschem package metadata."""

from __future__ import annotations

import pygaschem


def test_license_attribution() -> None:
    """Check the package license header names its developers."""
    assert "Copyright 2024 The pygaschem developers" in pygaschem.__doc__
    assert "Breakthrough" not in pygaschem.__doc__
    assert pygaschem.__license__ == "Apache-2.0"


def test_public_api() -> None:
    """Check both prebuilt mechanisms are exported."""
    assert "build_fullchem" in pygaschem.__all__
    assert "build_superfast" in pygaschem.__all__
    assert len(pygaschem.build_superfast().species) == 18
