# src/gcurrency/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Logging configuration
"""

from gcurrency.shared.logging_conf import setup_logging

__all__ = ["setup_logging"]
