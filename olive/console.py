# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Olive output."""
from rich.console import Console

from olive.themes import get_olive_theme

console = Console(theme=get_olive_theme(), highlight=False)
