"""Utility modules for line_builder."""

from line_builder.utils.logging import get_logger

__all__ = ["get_logger"]
