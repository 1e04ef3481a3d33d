"""CLI module for matrix-contacts."""
