"""Shared logging, configuration and constants."""
