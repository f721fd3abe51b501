"""Shared constants for platformtester."""
