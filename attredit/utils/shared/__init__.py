"""Shared utilities: persistent JSON configuration."""
