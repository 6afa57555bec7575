"""Shared utilities for the hash table package and its scripts."""

from .logging_config import configure_logging  # noqa: F401

__all__ = ["configure_logging"]
