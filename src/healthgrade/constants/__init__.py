"""Shared constants for Healthgrade."""
