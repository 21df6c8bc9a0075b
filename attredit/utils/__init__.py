"""Utilities package: logging, events, paths and persistent configuration."""
