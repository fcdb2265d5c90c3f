"""Shared utilities: subprocess execution and logging setup."""
