# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Default console instance for Clade CLI applications."""
from rich.console import Console

from clade.themes import get_theme

console = Console(color_system="truecolor", theme=get_theme())
