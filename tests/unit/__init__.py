"""Unit tests for the package."""
