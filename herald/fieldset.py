"""Bordered boxes with an optional legend embedded in the top border."""

from __future__ import annotations

from typing import List

from .style import Style, visible_width
from .theme import Theme

__all__ = ["fieldset"]


def _inner_width(legend: str, content: str, width: int) -> int:
    if width > 0:
        return width - 2
    inner = max(visible_width(line) for line in content.split("\n")) + 2
    if legend:
        inner = max(inner, visible_width(legend) + 4)
    return inner


def _top_border(theme: Theme, legend: str, inner: int, border: Style) -> str:
    if not legend:
        return border.render("╭" + "─" * inner + "╮")
    right_dashes = max(inner - visible_width(legend) - 3, 1)
    return (
        border.render("╭─ ")
        + theme.fieldset_legend.render(legend)
        + border.render(" " + "─" * right_dashes + "╮")
    )


def _content_lines(theme: Theme, content: str, inner: int, border: Style) -> List[str]:
    edge = border.render("│")
    lines = []
    for line in content.split("\n"):
        styled = theme.fieldset.render(line)
        pad = max(inner - 2 - visible_width(styled), 0)
        lines.append(edge + " " + styled + " " * pad + " " + edge)
    return lines


def fieldset(theme: Theme, legend: str, content: str, width: int = 0) -> str:
    """Render ``content`` in a rounded box with ``legend`` in the top border.

    A positive ``width`` overrides the theme's fieldset width; a width of 0
    fits the box to its content.
    """
    w = width if width > 0 else theme.fieldset_width
    inner = _inner_width(legend, content, w)
    border = theme.fieldset_border
    rows = [_top_border(theme, legend, inner, border)]
    rows.extend(_content_lines(theme, content, inner, border))
    rows.append(border.render("╰" + "─" * inner + "╯"))
    return "\n".join(rows)