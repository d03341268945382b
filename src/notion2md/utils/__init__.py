"""Utilities for notion2md."""
