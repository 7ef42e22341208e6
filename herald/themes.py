"""Ready-made themes built on popular terminal colour schemes."""

from __future__ import annotations

from typing import Callable, Tuple

from .palette import ColorPalette, SemanticPalette
from .style import Color, light_dark
from .theme import Theme, apply_semantic_palette, has_dark_bg, theme_from_palette

__all__ = ["dracula_theme", "catppuccin_theme", "base16_theme", "charm_theme"]

_Pair = Tuple[str, str]


def _chooser() -> Callable[[_Pair], Color]:
    choose = light_dark(has_dark_bg())
    return lambda pair: Color(choose(*pair))


def _build(
    primary: _Pair,
    secondary: _Pair,
    tertiary: _Pair,
    accent: _Pair,
    highlight: _Pair,
    muted: _Pair,
    text: _Pair,
    surface: _Pair,
    base: _Pair,
    *,
    success: _Pair,
    warning: _Pair,
    error: _Pair,
    info: _Pair,
) -> Theme:
    """Build a theme from (light, dark) colour pairs for the current background."""
    pick = _chooser()
    theme = theme_from_palette(
        ColorPalette(
            primary=pick(primary),
            secondary=pick(secondary),
            tertiary=pick(tertiary),
            accent=pick(accent),
            highlight=pick(highlight),
            muted=pick(muted),
            text=pick(text),
            surface=pick(surface),
            base=pick(base),
        )
    )
    apply_semantic_palette(
        theme,
        SemanticPalette(
            success=pick(success),
            warning=pick(warning),
            error=pick(error),
            info=pick(info),
        ),
    )
    return theme


def dracula_theme() -> Theme:
    """A theme based on the Dracula colours (a dark-first palette)."""
    return _build(
        ("#282a36", "#f8f8f2"),
        ("#6d3fc0", "#bd93f9"),
        ("#1e9651", "#50fa7b"),
        ("#b07d2b", "#f1fa8c"),
        ("#d63384", "#ff79c6"),
        ("#6272a4", "#6272a4"),
        ("#282a36", "#f8f8f2"),
        ("#e8e6ef", "#44475a"),
        ("#f8f8f2", "#282a36"),
        success=("#1e9651", "#50fa7b"),
        warning=("#b07d2b", "#f1fa8c"),
        error=("#c44040", "#ff5555"),
        info=("#1e6e99", "#8be9fd"),
    )


def catppuccin_theme() -> Theme:
    """A theme based on Catppuccin: Mocha on dark, Latte on light."""
    return _build(
        ("#4c4f69", "#cdd6f4"),
        ("#8839ef", "#cba6f7"),
        ("#179299", "#94e2d5"),
        ("#ea76cb", "#f5c2e7"),
        ("#e64553", "#eba0ac"),
        ("#9ca0b0", "#6c7086"),
        ("#4c4f69", "#cdd6f4"),
        ("#ccd0da", "#313244"),
        ("#eff1f5", "#1e1e2e"),
        success=("#40a02b", "#a6e3a1"),
        warning=("#fe640b", "#fab387"),
        error=("#d20f39", "#f38ba8"),
        info=("#1e66f5", "#89b4fa"),
    )


def base16_theme() -> Theme:
    """A theme using the standard ANSI base16 colour indices."""
    return _build(
        ("0", "7"),
        ("4", "6"),
        ("2", "2"),
        ("5", "3"),
        ("1", "1"),
        ("8", "8"),
        ("0", "7"),
        ("7", "8"),
        ("7", "0"),
        success=("2", "2"),
        warning=("3", "3"),
        error=("1", "1"),
        info=("4", "4"),
    )


def charm_theme() -> Theme:
    """A theme based on a purple/green/pink brand palette."""
    return _build(
        ("235", "#FFFDF5"),
        ("#5A56E0", "#7571F9"),
        ("#02BA84", "#02BF87"),
        ("#C740B0", "#F780E2"),
        ("#C7304E", "#ED567A"),
        ("243", "243"),
        ("235", "#FFFDF5"),
        ("254", "238"),
        ("255", "236"),
        success=("#02BA84", "#02BF87"),
        warning=("#C740B0", "#F780E2"),
        error=("#C7304E", "#ED567A"),
        info=("#2563EB", "#60A5FA"),
    )