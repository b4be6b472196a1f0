"""Utility modules for colonmark."""

from colonmark.utils.logger import get_logger

__all__ = ["get_logger"]
