"""Utility functions for matrix-contacts."""
