"""Utility functions for dropx."""
