"""Utilities for FileKit."""
