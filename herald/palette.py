"""Colour palettes from which themes and semantic styles are derived."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .style import Color, Style

__all__ = [
    "ColorPalette",
    "SemanticPalette",
    "default_semantic_palette",
    "semantic_badge_styles",
    "semantic_tag_styles",
]

StyleQuad = Tuple[Style, Style, Style, Style]


@dataclass(frozen=True)
class ColorPalette:
    """A minimal set of colours from which a full theme can be derived."""

    primary: Optional[Color] = None  # main text, H1 headings
    secondary: Optional[Color] = None  # H2, list bullets, accents
    tertiary: Optional[Color] = None  # H3, links
    accent: Optional[Color] = None  # H4, marks/highlights
    highlight: Optional[Color] = None  # H5, abbreviations
    muted: Optional[Color] = None  # H6, blockquote, DD, HR
    text: Optional[Color] = None  # body text, list items, DT
    surface: Optional[Color] = None  # background for kbd and tags
    base: Optional[Color] = None  # background for code, mark foreground


@dataclass(frozen=True)
class SemanticPalette:
    """Four colours for common status semantics (badges and tags)."""

    success: Optional[Color] = None
    warning: Optional[Color] = None
    error: Optional[Color] = None
    info: Optional[Color] = None


def default_semantic_palette(palette: ColorPalette) -> SemanticPalette:
    """Derive a semantic palette: success=tertiary, warning=accent,
    error=highlight, info=secondary."""
    return SemanticPalette(
        success=palette.tertiary,
        warning=palette.accent,
        error=palette.highlight,
        info=palette.secondary,
    )


def _each(palette: SemanticPalette, make) -> StyleQuad:
    return (
        make(palette.success),
        make(palette.warning),
        make(palette.error),
        make(palette.info),
    )


def semantic_badge_styles(
    palette: SemanticPalette, base: Optional[Color]
) -> StyleQuad:
    """Build bold pill styles (success, warning, error, info) with the
    semantic colour as background and ``base`` as foreground."""
    return _each(
        palette,
        lambda bg: Style(
            background=bg,
            foreground=base,
            bold=True,
            padding_left=1,
            padding_right=1,
        ),
    )


def semantic_tag_styles(
    palette: SemanticPalette, surface: Optional[Color]
) -> StyleQuad:
    """Build tag styles (success, warning, error, info) with the semantic
    colour as foreground and ``surface`` as background."""
    return _each(
        palette,
        lambda fg: Style(
            foreground=fg,
            background=surface,
            padding_left=1,
            padding_right=1,
        ),
    )