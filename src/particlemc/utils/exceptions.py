"""Custom exceptions for particlemc."""

from __future__ import annotations


class ParticleMCError(Exception):
    """Base exception for particlemc."""


class ConfigError(ParticleMCError):
    """Invalid configuration."""


class ExportError(ParticleMCError):
    """An export target could not be opened or written."""


class InvalidGeometryError(ParticleMCError, ValueError):
    """Dimension, box size or particle position has the wrong shape."""
