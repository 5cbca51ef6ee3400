"""Structured logging using structlog.

The builder only emits events; the host application configures structlog.
"""

from __future__ import annotations

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
