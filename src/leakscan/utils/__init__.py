"""Utility modules for LeakScan."""

from .logger import get_logger
from .config import Config

__all__ = ["get_logger", "Config"]
