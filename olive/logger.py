# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Olive."""
import logging

logger: logging.Logger = logging.getLogger("olive")
