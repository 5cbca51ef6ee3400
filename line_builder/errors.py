"""Error types raised while building or serializing messages."""

from __future__ import annotations


class BuilderError(Exception):
    """Base class for every error raised by the builder."""


class RequiredFieldError(BuilderError):
    """A mandatory field was never set."""


class ValidationError(BuilderError):
    """A field value is outside its declared domain."""


class StructuralError(BuilderError):
    """A required compositional relationship is missing."""
