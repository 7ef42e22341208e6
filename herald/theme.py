"""Themes: every style and token used to render typographic elements."""

from __future__ import annotations

import dataclasses
import functools
import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .palette import (
    ColorPalette,
    SemanticPalette,
    default_semantic_palette,
    semantic_badge_styles,
    semantic_tag_styles,
)
from .style import Color, Style, light_dark

__all__ = [
    "Theme",
    "TableBorderSet",
    "box_border_set",
    "minimal_border_set",
    "default_nested_bullet_chars",
    "has_dark_bg",
    "theme_from_palette",
    "default_theme",
    "DEFAULT_H1_UNDERLINE_CHAR",
    "DEFAULT_H2_UNDERLINE_CHAR",
    "DEFAULT_H3_UNDERLINE_CHAR",
    "DEFAULT_HEADING_BAR_CHAR",
    "DEFAULT_BULLET_CHAR",
    "DEFAULT_LIST_INDENT",
    "DEFAULT_HR_CHAR",
    "DEFAULT_HR_WIDTH",
    "DEFAULT_BLOCKQUOTE_BAR",
    "DEFAULT_ALERT_BAR",
    "DEFAULT_CODE_LINE_NUMBER_SEP",
    "DEFAULT_CODE_LINE_NUMBER_OFFSET",
    "DEFAULT_TABLE_CELL_PAD",
    "DEFAULT_INS_PREFIX",
    "DEFAULT_DEL_PREFIX",
    "DEFAULT_FOOTNOTE_DIVIDER_CHAR",
    "DEFAULT_FOOTNOTE_DIVIDER_WIDTH",
    "DEFAULT_KV_SEPARATOR",
    "DEFAULT_QUOTE_OPEN",
    "DEFAULT_QUOTE_CLOSE",
    "MAX_WIDTH_CHARS",
]

DEFAULT_H1_UNDERLINE_CHAR = "═"
DEFAULT_H2_UNDERLINE_CHAR = "─"
DEFAULT_H3_UNDERLINE_CHAR = "·"
DEFAULT_HEADING_BAR_CHAR = "▎"
DEFAULT_BULLET_CHAR = "•"
DEFAULT_LIST_INDENT = 2
DEFAULT_HR_CHAR = "─"
DEFAULT_HR_WIDTH = 40
DEFAULT_BLOCKQUOTE_BAR = "│"

DEFAULT_ALERT_BAR = "│"
DEFAULT_CODE_LINE_NUMBER_SEP = "│"
DEFAULT_CODE_LINE_NUMBER_OFFSET = 1
DEFAULT_TABLE_CELL_PAD = 1
DEFAULT_INS_PREFIX = "+"
DEFAULT_DEL_PREFIX = "-"
DEFAULT_FOOTNOTE_DIVIDER_CHAR = "─"
DEFAULT_FOOTNOTE_DIVIDER_WIDTH = 20
DEFAULT_KV_SEPARATOR = ":"
DEFAULT_QUOTE_OPEN = "\u201c"
DEFAULT_QUOTE_CLOSE = "\u201d"
MAX_WIDTH_CHARS = 500


@dataclass(frozen=True)
class TableBorderSet:
    """Box-drawing characters needed to render a table."""

    top: str = ""
    bottom: str = ""
    left: str = ""
    right: str = ""
    header: str = ""
    row: str = ""  # empty means no row separators
    top_left: str = ""
    top_right: str = ""
    bottom_left: str = ""
    bottom_right: str = ""
    top_junction: str = ""
    bottom_junction: str = ""
    left_junction: str = ""
    right_junction: str = ""
    cross: str = ""
    header_left: str = ""
    header_right: str = ""
    header_cross: str = ""
    footer_left: str = ""
    footer_right: str = ""
    footer_cross: str = ""
    column_sep: str = ""


def box_border_set() -> TableBorderSet:
    """A border set using full Unicode box-drawing characters."""
    return TableBorderSet(
        top="─",
        bottom="─",
        left="│",
        right="│",
        header="─",
        row="─",
        top_left="┌",
        top_right="┐",
        bottom_left="└",
        bottom_right="┘",
        top_junction="┬",
        bottom_junction="┴",
        left_junction="├",
        right_junction="┤",
        cross="┼",
        header_left="├",
        header_right="┤",
        header_cross="┼",
        footer_left="├",
        footer_right="┤",
        footer_cross="┼",
        column_sep="│",
    )


def minimal_border_set() -> TableBorderSet:
    """A border set with no outer borders: column separators and a header rule."""
    return TableBorderSet(
        header="─",
        row="─",
        header_cross="┼",
        footer_cross="┼",
        cross="┼",
        column_sep="│",
    )


def default_nested_bullet_chars() -> List[str]:
    """A fresh list of the bullets cycled through nesting levels."""
    return ["•", "◦", "▪", "▹"]


@dataclass
class Theme:
    """All styles and tokens used to render elements."""

    h1: Style = field(default_factory=Style)
    h2: Style = field(default_factory=Style)
    h3: Style = field(default_factory=Style)
    h4: Style = field(default_factory=Style)
    h5: Style = field(default_factory=Style)
    h6: Style = field(default_factory=Style)

    paragraph: Style = field(default_factory=Style)
    blockquote: Style = field(default_factory=Style)
    blockquote_bar_style: Style = field(default_factory=Style)
    code_inline: Style = field(default_factory=Style)
    code_block: Style = field(default_factory=Style)
    hr: Style = field(default_factory=Style)
    hr_label: Style = field(default_factory=Style)

    list_bullet: Style = field(default_factory=Style)
    list_item: Style = field(default_factory=Style)

    bold: Style = field(default_factory=Style)
    italic: Style = field(default_factory=Style)
    underline: Style = field(default_factory=Style)
    strikethrough: Style = field(default_factory=Style)
    small: Style = field(default_factory=Style)
    mark: Style = field(default_factory=Style)
    link: Style = field(default_factory=Style)
    kbd: Style = field(default_factory=Style)
    abbr: Style = field(default_factory=Style)
    sub: Style = field(default_factory=Style)
    sup: Style = field(default_factory=Style)
    ins: Style = field(default_factory=Style)
    del_: Style = field(default_factory=Style)
    q: Style = field(default_factory=Style)
    cite: Style = field(default_factory=Style)
    samp: Style = field(default_factory=Style)
    var: Style = field(default_factory=Style)

    dt: Style = field(default_factory=Style)
    dd: Style = field(default_factory=Style)

    kv_key: Style = field(default_factory=Style)
    kv_value: Style = field(default_factory=Style)
    kv_separator: str = DEFAULT_KV_SEPARATOR

    address: Style = field(default_factory=Style)
    address_card: Style = field(default_factory=Style)
    address_card_border: Style = field(default_factory=Style)

    badge: Style = field(default_factory=Style)
    tag: Style = field(default_factory=Style)

    success_badge: Style = field(default_factory=Style)
    warning_badge: Style = field(default_factory=Style)
    error_badge: Style = field(default_factory=Style)
    info_badge: Style = field(default_factory=Style)

    success_tag: Style = field(default_factory=Style)
    warning_tag: Style = field(default_factory=Style)
    error_tag: Style = field(default_factory=Style)
    info_tag: Style = field(default_factory=Style)

    footnote_ref: Style = field(default_factory=Style)
    footnote_item: Style = field(default_factory=Style)
    footnote_divider: Style = field(default_factory=Style)

    code_formatter: Optional[Callable[[str, str], str]] = None

    h1_underline_char: str = DEFAULT_H1_UNDERLINE_CHAR
    h2_underline_char: str = DEFAULT_H2_UNDERLINE_CHAR
    h3_underline_char: str = DEFAULT_H3_UNDERLINE_CHAR
    heading_bar_char: str = DEFAULT_HEADING_BAR_CHAR

    code_line_number: Style = field(default_factory=Style)
    code_line_number_sep: str = DEFAULT_CODE_LINE_NUMBER_SEP
    show_line_numbers: bool = False
    code_line_number_offset: int = DEFAULT_CODE_LINE_NUMBER_OFFSET

    bullet_char: str = DEFAULT_BULLET_CHAR
    nested_bullet_chars: List[str] = field(default_factory=default_nested_bullet_chars)
    list_indent: int = DEFAULT_LIST_INDENT
    hierarchical_numbers: bool = False
    hr_char: str = DEFAULT_HR_CHAR
    hr_width: int = DEFAULT_HR_WIDTH
    blockquote_bar: str = DEFAULT_BLOCKQUOTE_BAR
    ins_prefix: str = DEFAULT_INS_PREFIX
    del_prefix: str = DEFAULT_DEL_PREFIX
    quote_open: str = DEFAULT_QUOTE_OPEN
    quote_close: str = DEFAULT_QUOTE_CLOSE
    footnote_divider_char: str = DEFAULT_FOOTNOTE_DIVIDER_CHAR
    footnote_divider_width: int = DEFAULT_FOOTNOTE_DIVIDER_WIDTH

    figure_caption: Style = field(default_factory=Style)

    fieldset: Style = field(default_factory=Style)
    fieldset_border: Style = field(default_factory=Style)
    fieldset_legend: Style = field(default_factory=Style)
    fieldset_width: int = 0  # 0 means auto-fit

    table_header: Style = field(default_factory=Style)
    table_cell: Style = field(default_factory=Style)
    table_striped_cell: Style = field(default_factory=Style)
    table_footer: Style = field(default_factory=Style)
    table_caption: Style = field(default_factory=Style)
    table_border: Style = field(default_factory=Style)
    table_border_set: TableBorderSet = field(default_factory=box_border_set)
    table_cell_pad: int = DEFAULT_TABLE_CELL_PAD

    alert_bar: str = DEFAULT_ALERT_BAR

    def copy(self) -> "Theme":
        """Return an independent copy of this theme."""
        return dataclasses.replace(
            self, nested_bullet_chars=list(self.nested_bullet_chars)
        )


@functools.lru_cache(maxsize=1)
def _detect_dark_bg() -> bool:
    """Guess the terminal background from COLORFGBG; assume dark otherwise."""
    value = os.environ.get("COLORFGBG", "")
    background = value.split(";")[-1].strip()
    if background.isdigit():
        index = int(background)
        return index <= 6 or index == 8
    return True


def has_dark_bg() -> bool:
    """Whether the terminal background is dark.

    HERALD_FORCE_DARK is always checked first; otherwise the detected
    result is cached.
    """
    forced = os.environ.get("HERALD_FORCE_DARK", "")
    if forced:
        return forced in ("1", "true")
    return _detect_dark_bg()


def _padded(**kwargs) -> Style:
    return Style(padding_left=1, padding_right=1, **kwargs)


def theme_from_palette(palette: ColorPalette) -> Theme:
    """Build a complete theme by mapping palette colours to every style."""
    p = palette
    sp = default_semantic_palette(p)
    sb_success, sb_warning, sb_error, sb_info = semantic_badge_styles(sp, p.base)
    st_success, st_warning, st_error, st_info = semantic_tag_styles(sp, p.surface)

    return Theme(
        h1=Style(bold=True, foreground=p.primary, margin_bottom=1),
        h2=Style(bold=True, foreground=p.secondary, margin_bottom=1),
        h3=Style(bold=True, foreground=p.tertiary, margin_bottom=1),
        h4=Style(bold=True, foreground=p.accent, margin_bottom=1),
        h5=Style(bold=True, foreground=p.highlight, margin_bottom=1),
        h6=Style(bold=True, foreground=p.muted, margin_bottom=1),
        paragraph=Style(margin_bottom=1),
        blockquote=Style(foreground=p.muted, italic=True),
        blockquote_bar_style=Style(foreground=p.muted, padding_left=1),
        code_inline=Style(foreground=p.text, background=p.base),
        code_block=Style(
            foreground=p.text,
            background=p.base,
            padding_top=1,
            padding_bottom=1,
            padding_left=2,
            padding_right=2,
            margin_bottom=1,
        ),
        hr=Style(foreground=p.muted),
        hr_label=Style(foreground=p.muted),
        list_bullet=Style(foreground=p.secondary),
        list_item=Style(),
        bold=Style(bold=True),
        italic=Style(italic=True),
        underline=Style(underline=True),
        strikethrough=Style(strikethrough=True),
        small=Style(faint=True),
        mark=Style(background=p.accent, foreground=p.base),
        link=Style(foreground=p.tertiary, underline=True),
        kbd=_padded(foreground=p.text, background=p.surface, bold=True),
        abbr=Style(underline=True, foreground=p.highlight),
        sub=Style(foreground=p.muted),
        sup=Style(foreground=p.muted),
        ins=Style(foreground=p.tertiary),
        del_=Style(foreground=p.highlight, strikethrough=True),
        q=Style(foreground=p.muted, italic=True),
        cite=Style(foreground=p.muted, italic=True),
        samp=Style(foreground=p.text, background=p.base),
        var=Style(foreground=p.accent, italic=True),
        dt=Style(bold=True, foreground=p.text),
        dd=Style(padding_left=4, foreground=p.muted),
        kv_key=Style(foreground=p.muted, bold=True),
        kv_value=Style(foreground=p.text),
        kv_separator=DEFAULT_KV_SEPARATOR,
        address=Style(foreground=p.muted, italic=True, padding_left=2),
        address_card=Style(foreground=p.muted, italic=True),
        address_card_border=Style(foreground=p.muted),
        badge=_padded(background=p.secondary, foreground=p.base, bold=True),
        tag=_padded(foreground=p.secondary, background=p.surface),
        success_badge=sb_success,
        warning_badge=sb_warning,
        error_badge=sb_error,
        info_badge=sb_info,
        success_tag=st_success,
        warning_tag=st_warning,
        error_tag=st_error,
        info_tag=st_info,
        footnote_ref=Style(foreground=p.tertiary),
        footnote_item=Style(foreground=p.muted),
        footnote_divider=Style(foreground=p.muted),
        code_line_number=Style(foreground=p.muted, background=p.base),
        figure_caption=Style(foreground=p.muted, italic=True),
        fieldset=Style(foreground=p.text),
        fieldset_border=Style(foreground=p.muted),
        fieldset_legend=Style(bold=True, foreground=p.primary),
        table_header=Style(bold=True, foreground=p.primary),
        table_cell=Style(foreground=p.text),
        table_striped_cell=Style(foreground=p.text, background=p.surface),
        table_footer=Style(bold=True, foreground=p.text),
        table_caption=Style(foreground=p.muted, italic=True),
        table_border=Style(foreground=p.muted),
        table_border_set=box_border_set(),
        table_cell_pad=DEFAULT_TABLE_CELL_PAD,
        alert_bar=DEFAULT_ALERT_BAR,
    )


def apply_semantic_palette(theme: Theme, palette: SemanticPalette) -> None:
    """Rebuild the semantic badge and tag styles of ``theme`` in place,
    keeping its badge foreground and tag background."""
    base = theme.badge.foreground
    surface = theme.tag.background
    (
        theme.success_badge,
        theme.warning_badge,
        theme.error_badge,
        theme.info_badge,
    ) = semantic_badge_styles(palette, base)
    (
        theme.success_tag,
        theme.warning_tag,
        theme.error_tag,
        theme.info_tag,
    ) = semantic_tag_styles(palette, surface)


def _pick(is_dark: bool):
    choose = light_dark(is_dark)
    return lambda light, dark: choose(Color(light), Color(dark))


def default_theme() -> Theme:
    """The default theme, built on the Rose Pine colours."""
    ld = _pick(has_dark_bg())
    theme = theme_from_palette(
        ColorPalette(
            primary=ld("#286983", "#E0DEF4"),
            secondary=ld("#7c6f93", "#C4A7E7"),
            tertiary=ld("#3e8fb0", "#9CCFD8"),
            accent=ld("#D7827E", "#F6C177"),
            highlight=ld("#B4637A", "#EA9A97"),
            muted=ld("#9893A5", "#6E6A86"),
            text=ld("#575279", "#E0DEF4"),
            surface=ld("#DFDAD9", "#393552"),
            base=ld("#FAF4ED", "#191724"),
        )
    )
    apply_semantic_palette(
        theme,
        SemanticPalette(
            success=ld("#286983", "#9CCFD8"),
            warning=ld("#D7827E", "#F6C177"),
            error=ld("#B4637A", "#EB6F92"),
            info=ld("#3e8fb0", "#9CCFD8"),
        ),
    )
    return theme