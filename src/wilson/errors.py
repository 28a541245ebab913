# src/wilson/errors.py
"""Semantic errors raised by the wilson package."""

from __future__ import annotations


class WilsonError(Exception):
    """Base error for this package."""


class DomainError(WilsonError, ValueError):
    """Arithmetic left the real domain (e.g. successes > trials, negative counts)."""


class ConfigError(WilsonError, ValueError):
    """User-fixable configuration error."""
