import pytest

from herald import options as o
from herald.fieldset import fieldset
from herald.palette import ColorPalette, SemanticPalette
from herald.style import Color, Style, strip_ansi, visible_width
from herald.theme import (
    DEFAULT_FOOTNOTE_DIVIDER_WIDTH,
    DEFAULT_HR_WIDTH,
    DEFAULT_LIST_INDENT,
    MAX_WIDTH_CHARS,
    default_nested_bullet_chars,
    default_theme,
    minimal_border_set,
)


@pytest.fixture(autouse=True)
def _force_dark(monkeypatch):
    monkeypatch.setenv("HERALD_FORCE_DARK", "1")


def _palette():
    return ColorPalette(
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


STYLE = Style(bold=True, foreground=Color("#FF0000"))

STYLE_OPTIONS = [
    (o.with_h1_style, "h1"),
    (o.with_h2_style, "h2"),
    (o.with_h3_style, "h3"),
    (o.with_h4_style, "h4"),
    (o.with_h5_style, "h5"),
    (o.with_h6_style, "h6"),
    (o.with_paragraph_style, "paragraph"),
    (o.with_blockquote_style, "blockquote"),
    (o.with_blockquote_bar_style, "blockquote_bar_style"),
    (o.with_code_inline_style, "code_inline"),
    (o.with_code_block_style, "code_block"),
    (o.with_hr_style, "hr"),
    (o.with_hr_label_style, "hr_label"),
    (o.with_bold_style, "bold"),
    (o.with_italic_style, "italic"),
    (o.with_underline_style, "underline"),
    (o.with_strikethrough_style, "strikethrough"),
    (o.with_small_style, "small"),
    (o.with_mark_style, "mark"),
    (o.with_link_style, "link"),
    (o.with_kbd_style, "kbd"),
    (o.with_abbr_style, "abbr"),
    (o.with_ins_style, "ins"),
    (o.with_del_style, "del_"),
    (o.with_q_style, "q"),
    (o.with_cite_style, "cite"),
    (o.with_samp_style, "samp"),
    (o.with_var_style, "var"),
    (o.with_list_bullet_style, "list_bullet"),
    (o.with_list_item_style, "list_item"),
    (o.with_dt_style, "dt"),
    (o.with_dd_style, "dd"),
    (o.with_kv_key_style, "kv_key"),
    (o.with_kv_value_style, "kv_value"),
    (o.with_address_style, "address"),
    (o.with_address_card_style, "address_card"),
    (o.with_address_card_border_style, "address_card_border"),
    (o.with_badge_style, "badge"),
    (o.with_tag_style, "tag"),
    (o.with_success_badge_style, "success_badge"),
    (o.with_warning_badge_style, "warning_badge"),
    (o.with_error_badge_style, "error_badge"),
    (o.with_info_badge_style, "info_badge"),
    (o.with_success_tag_style, "success_tag"),
    (o.with_warning_tag_style, "warning_tag"),
    (o.with_error_tag_style, "error_tag"),
    (o.with_info_tag_style, "info_tag"),
    (o.with_footnote_ref_style, "footnote_ref"),
    (o.with_footnote_item_style, "footnote_item"),
    (o.with_footnote_divider_style, "footnote_divider"),
    (o.with_figure_caption_style, "figure_caption"),
    (o.with_fieldset_style, "fieldset"),
    (o.with_fieldset_border_style, "fieldset_border"),
    (o.with_fieldset_legend_style, "fieldset_legend"),
    (o.with_table_header_style, "table_header"),
    (o.with_table_cell_style, "table_cell"),
    (o.with_table_striped_cell_style, "table_striped_cell"),
    (o.with_table_footer_style, "table_footer"),
    (o.with_table_caption_style, "table_caption"),
    (o.with_table_border_style, "table_border"),
    (o.with_code_line_number_style, "code_line_number"),
]


@pytest.mark.parametrize("option, name", STYLE_OPTIONS)
def test_style_options_set_field(option, name):
    theme = o.configure(option(STYLE))
    assert getattr(theme, name) == STYLE
    assert strip_ansi(getattr(theme, name).render("test")) == "test"


TOKEN_OPTIONS = [
    (o.with_bullet_char, "bullet_char", "*"),
    (o.with_hr_char, "hr_char", "="),
    (o.with_blockquote_bar, "blockquote_bar", "|"),
    (o.with_ins_prefix, "ins_prefix", "++ "),
    (o.with_del_prefix, "del_prefix", "-- "),
    (o.with_quote_open, "quote_open", "<<"),
    (o.with_quote_close, "quote_close", ">>"),
    (o.with_footnote_divider_char, "footnote_divider_char", "="),
    (o.with_h1_underline_char, "h1_underline_char", "="),
    (o.with_h2_underline_char, "h2_underline_char", "-"),
    (o.with_h3_underline_char, "h3_underline_char", "."),
    (o.with_heading_bar_char, "heading_bar_char", "|"),
    (o.with_kv_separator, "kv_separator", " =>"),
    (o.with_code_line_number_sep, "code_line_number_sep", ":"),
]


@pytest.mark.parametrize("option, name, value", TOKEN_OPTIONS)
def test_token_options(option, name, value):
    assert getattr(o.configure(option(value)), name) == value


def test_with_theme():
    custom = default_theme()
    custom.hr_width = 80
    custom.bullet_char = "-"
    theme = o.configure(o.with_theme(custom))
    assert theme.hr_width == 80
    assert theme.bullet_char == "-"


def test_configure_does_not_mutate_given_theme():
    base = default_theme()
    result = o.configure(o.with_hr_width(70), theme=base)
    assert result.hr_width == 70
    assert base.hr_width == DEFAULT_HR_WIDTH


@pytest.mark.parametrize(
    "width, expected", [(60, 60), (0, DEFAULT_HR_WIDTH), (-5, DEFAULT_HR_WIDTH)]
)
def test_hr_width(width, expected):
    assert o.configure(o.with_hr_width(width)).hr_width == expected


def test_hr_width_max_bound():
    assert o.configure(o.with_hr_width(MAX_WIDTH_CHARS)).hr_width == MAX_WIDTH_CHARS
    assert o.configure(o.with_hr_width(MAX_WIDTH_CHARS + 1)).hr_width == DEFAULT_HR_WIDTH


@pytest.mark.parametrize(
    "width, expected",
    [(30, 30), (0, DEFAULT_FOOTNOTE_DIVIDER_WIDTH), (-5, DEFAULT_FOOTNOTE_DIVIDER_WIDTH)],
)
def test_footnote_divider_width(width, expected):
    assert o.configure(o.with_footnote_divider_width(width)).footnote_divider_width == expected


@pytest.mark.parametrize(
    "indent, expected", [(4, 4), (0, DEFAULT_LIST_INDENT), (-1, DEFAULT_LIST_INDENT)]
)
def test_list_indent(indent, expected):
    assert o.configure(o.with_list_indent(indent)).list_indent == expected


def test_nested_bullet_chars_custom():
    theme = o.configure(o.with_nested_bullet_chars(["*", "o", "-"]))
    assert theme.nested_bullet_chars == ["*", "o", "-"]


def test_nested_bullet_chars_empty_ignored():
    theme = o.configure(o.with_nested_bullet_chars([]))
    assert theme.nested_bullet_chars == default_nested_bullet_chars()


def test_hierarchical_numbers():
    assert o.configure(o.with_hierarchical_numbers(True)).hierarchical_numbers is True
    assert o.configure().hierarchical_numbers is False


def test_code_formatter():
    def formatter(code, language):
        return "[" + language + "]" + code

    theme = o.configure(o.with_code_formatter(formatter))
    assert theme.code_formatter("hello", "go") == "[go]hello"
    assert o.configure().code_formatter is None


def test_code_line_numbers():
    assert o.configure(o.with_code_line_numbers(True)).show_line_numbers is True
    assert o.configure().show_line_numbers is False


@pytest.mark.parametrize("offset, expected", [(42, 42), (0, 1), (-5, 1)])
def test_code_line_number_offset(offset, expected):
    assert o.configure(o.with_code_line_number_offset(offset)).code_line_number_offset == expected


def test_code_line_number_offset_default():
    assert o.configure().code_line_number_offset == 1


def test_fieldset_width_positive():
    assert o.configure(o.with_fieldset_width(60)).fieldset_width == 60


def test_fieldset_width_zero_allowed():
    custom = default_theme()
    custom.fieldset_width = 50
    theme = o.configure(o.with_theme(custom), o.with_fieldset_width(0))
    assert theme.fieldset_width == 0


@pytest.mark.parametrize("width", [-5, MAX_WIDTH_CHARS + 1])
def test_fieldset_width_out_of_range_ignored(width):
    assert o.configure(o.with_fieldset_width(width)).fieldset_width == 0


def test_fieldset_width_used_by_fieldset():
    theme = o.configure(o.with_fieldset_width(30))
    top = fieldset(theme, "L", "hi").split("\n")[0]
    assert visible_width(top) == 30


def test_table_cell_pad():
    assert o.configure(o.with_table_cell_pad(3)).table_cell_pad == 3
    assert o.configure(o.with_table_cell_pad(0)).table_cell_pad == 0
    assert o.configure(o.with_table_cell_pad(-1)).table_cell_pad == 1


def test_table_border_set():
    theme = o.configure(o.with_table_border_set(minimal_border_set()))
    assert theme.table_border_set == minimal_border_set()
    assert theme.table_border_set.left == ""


def test_with_palette():
    p = _palette()
    theme = o.configure(o.with_palette(p))
    assert theme.hr_width == DEFAULT_HR_WIDTH
    assert theme.h1.foreground == p.primary


def test_with_palette_combined_with_other_options():
    p = _palette()
    theme = o.configure(o.with_palette(p), o.with_hr_width(80), o.with_bullet_char("-"))
    assert theme.hr_width == 80
    assert theme.bullet_char == "-"
    assert theme.h2.foreground == p.secondary


def test_with_semantic_palette():
    sp = SemanticPalette(
        success=Color("#00FF00"),
        warning=Color("#FFFF00"),
        error=Color("#FF0000"),
        info=Color("#0000FF"),
    )
    theme = o.configure(o.with_semantic_palette(sp))
    assert theme.success_badge.background == Color("#00FF00")
    assert theme.error_tag.foreground == Color("#FF0000")
    assert theme.info_badge.foreground == theme.badge.foreground
    assert theme.warning_tag.background == theme.tag.background
    assert theme.success_badge.bold is True
    assert theme.success_badge.padding == (0, 1, 0, 1)
    for name in ("success_badge", "warning_badge", "error_badge", "info_badge",
                 "success_tag", "warning_tag", "error_tag", "info_tag"):
        assert "test" in strip_ansi(getattr(theme, name).render("test"))


def test_with_semantic_palette_preserves_other_styles():
    before = o.configure()
    sp = SemanticPalette(success=Color("#00FF00"))
    after = o.configure(o.with_semantic_palette(sp))
    assert after.badge == before.badge
    assert after.tag == before.tag
    assert "BETA" in strip_ansi(after.badge.render("BETA"))


def test_multiple_options():
    theme = o.configure(
        o.with_hr_width(80),
        o.with_bullet_char("-"),
        o.with_hr_char("="),
        o.with_blockquote_bar("|"),
    )
    assert theme.hr_width == 80
    assert theme.bullet_char == "-"
    assert theme.hr_char == "="
    assert theme.blockquote_bar == "|"


def test_later_options_win():
    theme = o.configure(o.with_bullet_char("*"), o.with_bullet_char("+"))
    assert theme.bullet_char == "+"