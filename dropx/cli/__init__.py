"""CLI module for dropx."""
