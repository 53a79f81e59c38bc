"""Shared helpers used across Tallyman sub-packages."""
