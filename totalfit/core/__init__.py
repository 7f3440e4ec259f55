"""
Core utilities and configuration for TotalFit.

This package provides core functionality including logging configuration,
monitoring, error types, persistence and shared schemas.
"""

from totalfit.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
