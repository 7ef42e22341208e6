"""Terminal text styling primitives: colours, styles and width helpers.

Styles render text into strings decorated with ANSI SGR escape sequences,
similar to HTML inline styles but for the terminal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, TypeVar

from wcwidth import wcwidth

__all__ = ["Color", "Style", "strip_ansi", "visible_width", "light_dark"]

_T = TypeVar("_T")

_ANSI_RE = re.compile(
    r"\x1b\[[0-9;:?<=>]*[ -/]*[@-~]"  # CSI sequences
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC sequences
    r"|\x1b[@-Z\\-_]"  # two-byte escapes
)
_HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_RESET = "\x1b[0m"
_TAB = "    "


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_RE.sub("", text)


def _line_width(line: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in strip_ansi(line))


def visible_width(text: str) -> int:
    """Return the display width of the widest line, ignoring escape codes."""
    return max(_line_width(line) for line in text.split("\n"))


def light_dark(is_dark: bool) -> Callable[[_T, _T], _T]:
    """Return a chooser picking the dark or light variant of a value."""

    def choose(light: _T, dark: _T) -> _T:
        return dark if is_dark else light

    return choose


@dataclass(frozen=True)
class Color:
    """A terminal colour: a hex string (``#RRGGBB``/``#RGB``) or ANSI index 0-255."""

    value: str

    def __post_init__(self) -> None:
        raw = self.value.strip()
        if _HEX_RE.fullmatch(raw):
            digits = raw[1:]
            if len(digits) == 3:
                digits = "".join(ch * 2 for ch in digits)
            object.__setattr__(self, "value", "#" + digits.lower())
            return
        if raw.isdigit() and 0 <= int(raw) <= 255:
            object.__setattr__(self, "value", str(int(raw)))
            return
        raise ValueError(f"invalid color: {self.value!r}")

    @property
    def rgb(self) -> Optional[Tuple[int, int, int]]:
        """The RGB triple of a hex colour, or None for an ANSI index."""
        if not self.value.startswith("#"):
            return None
        h = self.value[1:]
        return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)

    def _sgr(self, background: bool) -> str:
        rgb = self.rgb
        if rgb is not None:
            r, g, b = rgb
            return f"{48 if background else 38};2;{r};{g};{b}"
        index = int(self.value)
        if index < 8:
            return str((40 if background else 30) + index)
        if index < 16:
            return str((100 if background else 90) + index - 8)
        return f"{48 if background else 38};5;{index}"


@dataclass(frozen=True)
class Style:
    """An immutable set of text attributes, padding and bottom margin."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    faint: bool = False
    padding_top: int = 0
    padding_right: int = 0
    padding_bottom: int = 0
    padding_left: int = 0
    margin_bottom: int = 0

    def __post_init__(self) -> None:
        for name in (
            "padding_top",
            "padding_right",
            "padding_bottom",
            "padding_left",
            "margin_bottom",
        ):
            object.__setattr__(self, name, max(0, getattr(self, name)))

    @property
    def padding(self) -> Tuple[int, int, int, int]:
        """Padding as (top, right, bottom, left)."""
        return (
            self.padding_top,
            self.padding_right,
            self.padding_bottom,
            self.padding_left,
        )

    def _text_codes(self) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.faint:
            codes.append("2")
        if self.italic:
            codes.append("3")
        if self.underline:
            codes.append("4")
        if self.strikethrough:
            codes.append("9")
        if self.foreground is not None:
            codes.append(self.foreground._sgr(False))
        if self.background is not None:
            codes.append(self.background._sgr(True))
        return ";".join(codes)

    def render(self, text: str) -> str:
        """Render ``text`` with this style applied."""
        text = text.replace("\r\n", "\n").replace("\t", _TAB)
        lines = text.split("\n")
        width = max(_line_width(line) for line in lines)
        if len(lines) > 1:
            lines = [line + " " * (width - _line_width(line)) for line in lines]

        text_codes = self._text_codes()
        pad_codes = self.background._sgr(True) if self.background else ""

        def paint(segment: str, codes: str) -> str:
            if codes and segment:
                return f"\x1b[{codes}m{segment}{_RESET}"
            return segment

        left = paint(" " * self.padding_left, pad_codes)
        right = paint(" " * self.padding_right, pad_codes)
        body = [left + paint(line, text_codes) + right for line in lines]

        full_width = width + self.padding_left + self.padding_right
        blank = paint(" " * full_width, pad_codes)
        block = [blank] * self.padding_top + body + [blank] * self.padding_bottom
        block += [" " * full_width] * self.margin_bottom
        return "\n".join(block)