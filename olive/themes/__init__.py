"""
Olive Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import OliveColors, get_olive_theme

__all__ = [
    "OliveColors",
    "get_olive_theme",
]
