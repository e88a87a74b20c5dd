"""Utility modules for plugin functionality."""

from .handshake import announce, format_handshake
from .logging import setup_logging
from .retry import RetryConfig, RetryHandler

__all__ = ["announce", "format_handshake", "setup_logging", "RetryConfig", "RetryHandler"]
