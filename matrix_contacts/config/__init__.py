"""Configuration module for matrix-contacts."""
