"""Terminal typography building blocks: ANSI styles, palettes, themes, fieldsets and list items."""

__version__ = "0.1.0"