"""Per-call options for rendering groups of key-value pairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

__all__ = [
    "KVConfig",
    "KVOption",
    "with_kv_group_separator",
    "with_kv_raw_keys",
    "with_kv_raw_values",
    "with_kv_indent",
    "kv_config",
]


@dataclass
class KVConfig:
    """Settings for one key-value group.

    ``separator`` of None means the theme's separator is used; an empty
    string suppresses the separator.
    """

    separator: Optional[str] = None
    raw_keys: bool = False
    raw_values: bool = False
    indent: int = 0


KVOption = Callable[[KVConfig], None]


def with_kv_group_separator(separator: str) -> KVOption:
    """Override the key/value separator for this call only."""

    def apply(cfg: KVConfig) -> None:
        cfg.separator = separator

    return apply


def with_kv_raw_keys(raw: bool) -> KVOption:
    """Skip the theme's key style (keys are already styled)."""

    def apply(cfg: KVConfig) -> None:
        cfg.raw_keys = raw

    return apply


def with_kv_raw_values(raw: bool) -> KVOption:
    """Skip the theme's value style (values are already styled)."""

    def apply(cfg: KVConfig) -> None:
        cfg.raw_values = raw

    return apply


def with_kv_indent(indent: int) -> KVOption:
    """Indent each line by ``indent`` spaces."""

    def apply(cfg: KVConfig) -> None:
        cfg.indent = indent

    return apply


def kv_config(*args: KVOption) -> KVConfig:
    """Build a KVConfig by applying the given options in order."""
    cfg = KVConfig()
    for option in args:
        option(cfg)
    return cfg