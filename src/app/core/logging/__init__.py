"""Structured logging: process configuration and per-request access logs."""

from app.core.logging.config import configure_logging
from app.core.logging.middleware import RequestLoggingMiddleware, get_client_ip


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
    "get_client_ip",
]
