"""Options that customise a theme, applied in order by ``configure``."""

from __future__ import annotations

import dataclasses
from typing import Callable, Iterable, Optional

from .palette import ColorPalette, SemanticPalette
from .style import Style
from .theme import (
    MAX_WIDTH_CHARS,
    TableBorderSet,
    Theme,
    apply_semantic_palette,
    default_theme,
    theme_from_palette,
)

__all__ = [
    "Option",
    "configure",
    "with_theme",
    "with_palette",
    "with_h1_style",
    "with_h2_style",
    "with_h3_style",
    "with_h4_style",
    "with_h5_style",
    "with_h6_style",
    "with_paragraph_style",
    "with_blockquote_style",
    "with_blockquote_bar_style",
    "with_code_inline_style",
    "with_code_block_style",
    "with_hr_style",
    "with_hr_label_style",
    "with_bold_style",
    "with_italic_style",
    "with_underline_style",
    "with_strikethrough_style",
    "with_small_style",
    "with_mark_style",
    "with_link_style",
    "with_kbd_style",
    "with_abbr_style",
    "with_ins_style",
    "with_del_style",
    "with_q_style",
    "with_cite_style",
    "with_samp_style",
    "with_var_style",
    "with_list_bullet_style",
    "with_list_item_style",
    "with_dt_style",
    "with_dd_style",
    "with_kv_key_style",
    "with_kv_value_style",
    "with_kv_separator",
    "with_address_style",
    "with_address_card_style",
    "with_address_card_border_style",
    "with_badge_style",
    "with_tag_style",
    "with_semantic_palette",
    "with_success_badge_style",
    "with_warning_badge_style",
    "with_error_badge_style",
    "with_info_badge_style",
    "with_success_tag_style",
    "with_warning_tag_style",
    "with_error_tag_style",
    "with_info_tag_style",
    "with_footnote_ref_style",
    "with_footnote_item_style",
    "with_footnote_divider_style",
    "with_footnote_divider_char",
    "with_footnote_divider_width",
    "with_h1_underline_char",
    "with_h2_underline_char",
    "with_h3_underline_char",
    "with_heading_bar_char",
    "with_bullet_char",
    "with_hr_char",
    "with_hr_width",
    "with_blockquote_bar",
    "with_ins_prefix",
    "with_del_prefix",
    "with_quote_open",
    "with_quote_close",
    "with_list_indent",
    "with_nested_bullet_chars",
    "with_hierarchical_numbers",
    "with_figure_caption_style",
    "with_fieldset_style",
    "with_fieldset_border_style",
    "with_fieldset_legend_style",
    "with_fieldset_width",
    "with_table_header_style",
    "with_table_cell_style",
    "with_table_striped_cell_style",
    "with_table_footer_style",
    "with_table_caption_style",
    "with_table_border_style",
    "with_table_border_set",
    "with_table_cell_pad",
    "with_code_line_numbers",
    "with_code_line_number_style",
    "with_code_line_number_sep",
    "with_code_line_number_offset",
    "with_code_formatter",
]

Option = Callable[[Theme], Theme]


def configure(*args: Option, theme: Optional[Theme] = None) -> Theme:
    """Apply options in order to ``theme`` (default: the default theme).

    The given theme is never modified; a new theme is returned.
    """
    result = theme.copy() if theme is not None else default_theme()
    for option in args:
        result = option(result)
    return result


def _set(name: str, value) -> Option:
    return lambda theme: dataclasses.replace(theme, **{name: value})


def _set_if(condition: bool, name: str, value) -> Option:
    if condition:
        return _set(name, value)
    return lambda theme: theme


def _in_width_range(width: int) -> bool:
    return 0 < width <= MAX_WIDTH_CHARS


def with_theme(theme: Theme) -> Option:
    """Replace the whole theme."""
    return lambda _current: theme.copy()


def with_palette(palette: ColorPalette) -> Option:
    """Replace the theme with one derived from ``palette``."""
    return lambda _current: theme_from_palette(palette)


# Headings


def with_h1_style(style: Style) -> Option:
    """Override the H1 heading style."""
    return _set("h1", style)


def with_h2_style(style: Style) -> Option:
    """Override the H2 heading style."""
    return _set("h2", style)


def with_h3_style(style: Style) -> Option:
    """Override the H3 heading style."""
    return _set("h3", style)


def with_h4_style(style: Style) -> Option:
    """Override the H4 heading style."""
    return _set("h4", style)


def with_h5_style(style: Style) -> Option:
    """Override the H5 heading style."""
    return _set("h5", style)


def with_h6_style(style: Style) -> Option:
    """Override the H6 heading style."""
    return _set("h6", style)


# Block elements


def with_paragraph_style(style: Style) -> Option:
    """Override the paragraph style."""
    return _set("paragraph", style)


def with_blockquote_style(style: Style) -> Option:
    """Override the blockquote style."""
    return _set("blockquote", style)


def with_blockquote_bar_style(style: Style) -> Option:
    """Override the blockquote bar style."""
    return _set("blockquote_bar_style", style)


def with_code_inline_style(style: Style) -> Option:
    """Override the inline code style."""
    return _set("code_inline", style)


def with_code_block_style(style: Style) -> Option:
    """Override the code block style."""
    return _set("code_block", style)


def with_hr_style(style: Style) -> Option:
    """Override the horizontal rule style."""
    return _set("hr", style)


def with_hr_label_style(style: Style) -> Option:
    """Override the label style of labelled horizontal rules."""
    return _set("hr_label", style)


# Inline elements


def with_bold_style(style: Style) -> Option:
    """Override the bold style."""
    return _set("bold", style)


def with_italic_style(style: Style) -> Option:
    """Override the italic style."""
    return _set("italic", style)


def with_underline_style(style: Style) -> Option:
    """Override the underline style."""
    return _set("underline", style)


def with_strikethrough_style(style: Style) -> Option:
    """Override the strikethrough style."""
    return _set("strikethrough", style)


def with_small_style(style: Style) -> Option:
    """Override the small/faint style."""
    return _set("small", style)


def with_mark_style(style: Style) -> Option:
    """Override the highlight style."""
    return _set("mark", style)


def with_link_style(style: Style) -> Option:
    """Override the link style."""
    return _set("link", style)


def with_kbd_style(style: Style) -> Option:
    """Override the keyboard key style."""
    return _set("kbd", style)


def with_abbr_style(style: Style) -> Option:
    """Override the abbreviation style."""
    return _set("abbr", style)


def with_ins_style(style: Style) -> Option:
    """Override the inserted text style."""
    return _set("ins", style)


def with_del_style(style: Style) -> Option:
    """Override the deleted text style."""
    return _set("del_", style)


def with_q_style(style: Style) -> Option:
    """Override the inline quotation style."""
    return _set("q", style)


def with_cite_style(style: Style) -> Option:
    """Override the citation style."""
    return _set("cite", style)


def with_samp_style(style: Style) -> Option:
    """Override the sample output style."""
    return _set("samp", style)


def with_var_style(style: Style) -> Option:
    """Override the variable name style."""
    return _set("var", style)


# Lists


def with_list_bullet_style(style: Style) -> Option:
    """Override the bullet/number marker style."""
    return _set("list_bullet", style)


def with_list_item_style(style: Style) -> Option:
    """Override the list item text style."""
    return _set("list_item", style)


def with_dt_style(style: Style) -> Option:
    """Override the definition term style."""
    return _set("dt", style)


def with_dd_style(style: Style) -> Option:
    """Override the definition description style."""
    return _set("dd", style)


# Key-value pairs


def with_kv_key_style(style: Style) -> Option:
    """Override the key style of key-value pairs."""
    return _set("kv_key", style)


def with_kv_value_style(style: Style) -> Option:
    """Override the value style of key-value pairs."""
    return _set("kv_value", style)


def with_kv_separator(separator: str) -> Option:
    """Set the separator between key and value."""
    return _set("kv_separator", separator)


# Address


def with_address_style(style: Style) -> Option:
    """Override the address block style."""
    return _set("address", style)


def with_address_card_style(style: Style) -> Option:
    """Override the address card content style."""
    return _set("address_card", style)


def with_address_card_border_style(style: Style) -> Option:
    """Override the address card border style."""
    return _set("address_card_border", style)


# Badges and tags


def with_badge_style(style: Style) -> Option:
    """Override the badge style."""
    return _set("badge", style)


def with_tag_style(style: Style) -> Option:
    """Override the tag style."""
    return _set("tag", style)


def with_semantic_palette(palette: SemanticPalette) -> Option:
    """Rebuild the eight semantic badge and tag styles from ``palette``,
    keeping the current badge foreground and tag background."""

    def apply(theme: Theme) -> Theme:
        result = theme.copy()
        apply_semantic_palette(result, palette)
        return result

    return apply


def with_success_badge_style(style: Style) -> Option:
    """Override the success badge style."""
    return _set("success_badge", style)


def with_warning_badge_style(style: Style) -> Option:
    """Override the warning badge style."""
    return _set("warning_badge", style)


def with_error_badge_style(style: Style) -> Option:
    """Override the error badge style."""
    return _set("error_badge", style)


def with_info_badge_style(style: Style) -> Option:
    """Override the info badge style."""
    return _set("info_badge", style)


def with_success_tag_style(style: Style) -> Option:
    """Override the success tag style."""
    return _set("success_tag", style)


def with_warning_tag_style(style: Style) -> Option:
    """Override the warning tag style."""
    return _set("warning_tag", style)


def with_error_tag_style(style: Style) -> Option:
    """Override the error tag style."""
    return _set("error_tag", style)


def with_info_tag_style(style: Style) -> Option:
    """Override the info tag style."""
    return _set("info_tag", style)


# Footnotes


def with_footnote_ref_style(style: Style) -> Option:
    """Override the footnote reference marker style."""
    return _set("footnote_ref", style)


def with_footnote_item_style(style: Style) -> Option:
    """Override the footnote item style."""
    return _set("footnote_item", style)


def with_footnote_divider_style(style: Style) -> Option:
    """Override the footnote divider style."""
    return _set("footnote_divider", style)


def with_footnote_divider_char(char: str) -> Option:
    """Set the footnote divider character."""
    return _set("footnote_divider_char", char)


def with_footnote_divider_width(width: int) -> Option:
    """Set the footnote divider width; values outside 1..MAX_WIDTH_CHARS are ignored."""
    return _set_if(_in_width_range(width), "footnote_divider_width", width)


# Heading decoration


def with_h1_underline_char(char: str) -> Option:
    """Set the H1 underline character."""
    return _set("h1_underline_char", char)


def with_h2_underline_char(char: str) -> Option:
    """Set the H2 underline character."""
    return _set("h2_underline_char", char)


def with_h3_underline_char(char: str) -> Option:
    """Set the H3 underline character."""
    return _set("h3_underline_char", char)


def with_heading_bar_char(char: str) -> Option:
    """Set the bar prefix for H4-H6."""
    return _set("heading_bar_char", char)


# Tokens


def with_bullet_char(char: str) -> Option:
    """Set the unordered list bullet."""
    return _set("bullet_char", char)


def with_hr_char(char: str) -> Option:
    """Set the horizontal rule character."""
    return _set("hr_char", char)


def with_hr_width(width: int) -> Option:
    """Set the horizontal rule width; values outside 1..MAX_WIDTH_CHARS are ignored."""
    return _set_if(_in_width_range(width), "hr_width", width)


def with_blockquote_bar(char: str) -> Option:
    """Set the blockquote bar character."""
    return _set("blockquote_bar", char)


def with_ins_prefix(prefix: str) -> Option:
    """Set the prefix of inserted text."""
    return _set("ins_prefix", prefix)


def with_del_prefix(prefix: str) -> Option:
    """Set the prefix of deleted text."""
    return _set("del_prefix", prefix)


def with_quote_open(quote: str) -> Option:
    """Set the opening quotation mark."""
    return _set("quote_open", quote)


def with_quote_close(quote: str) -> Option:
    """Set the closing quotation mark."""
    return _set("quote_close", quote)


# Nested lists


def with_list_indent(indent: int) -> Option:
    """Set spaces per nesting level; non-positive values are ignored."""
    return _set_if(indent > 0, "list_indent", indent)


def with_nested_bullet_chars(chars: Iterable[str]) -> Option:
    """Set the bullets cycled through nesting levels; an empty list is ignored."""
    chosen = list(chars)
    return _set_if(bool(chosen), "nested_bullet_chars", chosen)


def with_hierarchical_numbers(enabled: bool) -> Option:
    """Enable hierarchical numbering (1., 1.1., ...) for nested ordered lists."""
    return _set("hierarchical_numbers", enabled)


# Figures and fieldsets


def with_figure_caption_style(style: Style) -> Option:
    """Override the figure caption style."""
    return _set("figure_caption", style)


def with_fieldset_style(style: Style) -> Option:
    """Override the fieldset content style."""
    return _set("fieldset", style)


def with_fieldset_border_style(style: Style) -> Option:
    """Override the fieldset border style."""
    return _set("fieldset_border", style)


def with_fieldset_legend_style(style: Style) -> Option:
    """Override the fieldset legend style."""
    return _set("fieldset_legend", style)


def with_fieldset_width(width: int) -> Option:
    """Set the default fieldset width (0 = auto-fit); values outside
    0..MAX_WIDTH_CHARS are ignored."""
    return _set_if(0 <= width <= MAX_WIDTH_CHARS, "fieldset_width", width)


# Tables


def with_table_header_style(style: Style) -> Option:
    """Override the table header cell style."""
    return _set("table_header", style)


def with_table_cell_style(style: Style) -> Option:
    """Override the table body cell style."""
    return _set("table_cell", style)


def with_table_striped_cell_style(style: Style) -> Option:
    """Override the style of striped body rows."""
    return _set("table_striped_cell", style)


def with_table_footer_style(style: Style) -> Option:
    """Override the table footer style."""
    return _set("table_footer", style)


def with_table_caption_style(style: Style) -> Option:
    """Override the table caption style."""
    return _set("table_caption", style)


def with_table_border_style(style: Style) -> Option:
    """Override the table border style."""
    return _set("table_border", style)


def with_table_border_set(border_set: TableBorderSet) -> Option:
    """Set the table box-drawing characters."""
    return _set("table_border_set", border_set)


def with_table_cell_pad(pad: int) -> Option:
    """Set table cell padding; negative values are ignored."""
    return _set_if(pad >= 0, "table_cell_pad", pad)


# Code blocks


def with_code_line_numbers(enabled: bool) -> Option:
    """Enable or disable line numbers in code blocks."""
    return _set("show_line_numbers", enabled)


def with_code_line_number_style(style: Style) -> Option:
    """Override the line number style."""
    return _set("code_line_number", style)


def with_code_line_number_sep(sep: str) -> Option:
    """Set the separator between line numbers and code."""
    return _set("code_line_number_sep", sep)


def with_code_line_number_offset(offset: int) -> Option:
    """Set the first line number; values below 1 are ignored."""
    return _set_if(offset >= 1, "code_line_number_offset", offset)


def with_code_formatter(formatter: Callable[[str, str], str]) -> Option:
    """Set a callback ``formatter(code, language)`` returning highlighted code."""
    return _set("code_formatter", formatter)