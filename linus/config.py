from __future__ import annotations
import codecs
import logging
import os


_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_SOURCE_ENCODING = 'utf-8'
_DEFAULT_PPRINT_WIDTH = 80


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = value_from_env('LINUS_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_source_encoding() -> str:
    encoding = value_from_env('LINUS_SOURCE_ENCODING', _DEFAULT_SOURCE_ENCODING)
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        return _DEFAULT_SOURCE_ENCODING


def get_pprint_width() -> int:
    raw = value_from_env('LINUS_PPRINT_WIDTH', str(_DEFAULT_PPRINT_WIDTH))
    try:
        width = int(raw)
    except ValueError:
        return _DEFAULT_PPRINT_WIDTH
    return width if width > 0 else _DEFAULT_PPRINT_WIDTH
