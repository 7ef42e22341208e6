from herald.kv_options import (
    KVConfig,
    kv_config,
    with_kv_group_separator,
    with_kv_indent,
    with_kv_raw_keys,
    with_kv_raw_values,
)


def test_no_options_gives_defaults():
    cfg = kv_config()
    assert cfg == KVConfig()
    assert cfg.separator is None
    assert cfg.raw_keys is False
    assert cfg.raw_values is False
    assert cfg.indent == 0


def test_separator_override():
    assert kv_config(with_kv_group_separator(" =>")).separator == " =>"


def test_empty_separator_differs_from_theme_default():
    cfg = kv_config(with_kv_group_separator(""))
    assert cfg.separator == ""
    assert cfg != KVConfig()


def test_raw_keys_and_values():
    cfg = kv_config(with_kv_raw_keys(True), with_kv_raw_values(True))
    assert cfg.raw_keys is True
    assert cfg.raw_values is True


def test_indent():
    assert kv_config(with_kv_indent(4)).indent == 4


def test_later_option_wins():
    cfg = kv_config(
        with_kv_indent(2),
        with_kv_indent(6),
        with_kv_raw_keys(True),
        with_kv_raw_keys(False),
    )
    assert cfg.indent == 6
    assert cfg.raw_keys is False


def test_option_applies_to_existing_config():
    cfg = KVConfig(indent=3)
    with_kv_group_separator("=")(cfg)
    assert cfg == KVConfig(separator="=", indent=3)