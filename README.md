# herald

Building blocks for styled terminal typography. herald provides ANSI text styles,
colour palettes, complete themes (with ready-made colour schemes), a fieldset box
renderer, nested list items and key-value group settings. Everything renders to
plain Python strings containing ANSI escape sequences.

## Installation

```
pip install herald
```

To run the test suite, install the test extra:

```
pip install "herald[test]"
pytest
```

## Styles and colours

`herald.style` holds the primitives:

- `Color("#FF0000")`, `Color("#f00")` or `Color("208")`: a hex colour or an ANSI
  index from 0 to 255. Anything else raises `ValueError`. Hex colours expose `.rgb`.
- `Style(...)`: an immutable set of attributes (`foreground`, `background`, `bold`,
  `italic`, `underline`, `strikethrough`, `faint`), padding on each side and a
  bottom margin. `Style.render(text)` returns the styled string; `.padding` gives
  `(top, right, bottom, left)`.
- `strip_ansi(text)` removes escape sequences.
- `visible_width(text)` returns the display width of the widest line, ignoring
  escape sequences and counting wide characters correctly.
- `light_dark(is_dark)` returns a function that picks the light or dark variant
  of a pair.

```python
from herald.style import Color, Style, strip_ansi

warning = Style(foreground=Color("#FFAA00"), bold=True, padding_left=1, padding_right=1)
text = warning.render("careful")
assert strip_ansi(text) == " careful "
```

## Palettes

`herald.palette` defines `ColorPalette` (primary, secondary, tertiary, accent,
highlight, muted, text, surface, base) and `SemanticPalette` (success, warning,
error, info). `default_semantic_palette(palette)` maps success to tertiary,
warning to accent, error to highlight and info to secondary.
`semantic_badge_styles(palette, base)` and `semantic_tag_styles(palette, surface)`
each return four styles in the order success, warning, error, info.

## Themes

A `Theme` (in `herald.theme`) holds every style and token used for typographic
elements: headings, paragraphs, code, rules, lists, inline styles, definition
lists, key-value pairs, addresses, badges and tags, footnotes, fieldsets, tables
and more. `Theme.copy()` returns an independent copy.

```python
from herald.theme import default_theme, theme_from_palette
from herald.themes import dracula_theme, catppuccin_theme, base16_theme, charm_theme

theme = dracula_theme()
print(theme.success_badge.render("passing"))
```

`default_theme()` uses Rose Pine colours. The themes pick light or dark variants
through `has_dark_bg()`: the environment variable `HERALD_FORCE_DARK` set to `1`
or `true` means dark, any other non-empty value means light; when it is unset the
`COLORFGBG` variable is consulted (once, then cached), and a dark background is
assumed if it says nothing.

Table border characters come from `TableBorderSet`; `box_border_set()` gives full
box-drawing characters and `minimal_border_set()` only column separators and a
header rule. `default_nested_bullet_chars()` returns `["•", "◦", "▪", "▹"]`.
Default tokens are available as constants such as `DEFAULT_HR_WIDTH` (40),
`DEFAULT_BULLET_CHAR` and `MAX_WIDTH_CHARS` (500).

### Building a theme from a palette

```python
from herald.style import Color
from herald.palette import ColorPalette
from herald.theme import theme_from_palette

palette = ColorPalette(
    primary=Color("#FF0000"),
    secondary=Color("#00FF00"),
    tertiary=Color("#0000FF"),
    accent=Color("#FFFF00"),
    highlight=Color("#FF00FF"),
    muted=Color("#888888"),
    text=Color("#FFFFFF"),
    surface=Color("#333333"),
    base=Color("#111111"),
)
theme = theme_from_palette(palette)
```

## Customising with options

`herald.options.configure(*options, theme=None)` applies options in order to a
copy of `theme` (or to `default_theme()`) and returns the new theme; the theme
passed in is never changed.

```python
from herald.options import configure, with_hr_width, with_bullet_char, with_palette

theme = configure(with_hr_width(60), with_bullet_char("-"))
```

There is a `with_...` option for every style and token, plus `with_theme`,
`with_palette` and `with_semantic_palette` (which rebuilds the eight semantic
badge and tag styles while keeping the current badge foreground and tag
background). Out-of-range values are ignored and the previous value kept:
widths outside 1..500 for `with_hr_width` and `with_footnote_divider_width`,
outside 0..500 for `with_fieldset_width`, a non-positive `with_list_indent`, an
empty `with_nested_bullet_chars`, a negative `with_table_cell_pad` and a
`with_code_line_number_offset` below 1.

## Fieldsets

```python
from herald.fieldset import fieldset
from herald.theme import default_theme

print(fieldset(default_theme(), "Legend", "line one\nline two", 0))
```

The box has rounded corners and the legend sits in the top border. A positive
width sets the outer width of the box; a width of `0` uses the theme's
`fieldset_width`, and if that is also `0` the box fits its content. An empty
legend gives a plain top border.

## Nested lists

`herald.lists` defines `ListKind` (`UNORDERED`, `ORDERED`) and the immutable
`ListItem(text, children, kind)`, where `kind` says how the children are listed.

```python
from herald.lists import item, items, item_with_children, item_with_ol_children

tree = [
    item("Introduction"),
    item_with_ol_children("Main topics", *items("Architecture", "Design")),
    item_with_children("Notes", item("loose ends")),
]
```

## Key-value options

`herald.kv_options` builds a `KVConfig` (separator override, raw keys, raw
values, indent) from options:

```python
from herald.kv_options import kv_config, with_kv_indent, with_kv_group_separator

config = kv_config(with_kv_indent(2), with_kv_group_separator(" ="))
```

## What herald does not do

Apart from `fieldset`, herald does not render elements itself. There are no
functions that turn headings, paragraphs, nested `ListItem` trees, key-value
groups, tables, alerts, footnotes or code blocks into text; the themes, list
items and `KVConfig` describe how such elements look, and individual styles can
be applied with `Style.render`. herald has no command-line program.