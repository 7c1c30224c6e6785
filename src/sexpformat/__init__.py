import sexpformat.version
from _sexpformat.config import (
    DEFAULT_COMPACT_COLUMN_LIMIT,
    DEFAULT_INDENT_CHAR,
    DEFAULT_INDENT_SIZE,
    DEFAULT_WRAP_THRESHOLD,
    KICAD,
    KICAD_COMPACT,
    PROFILES,
    Config,
    get_profile,
)
from _sexpformat.errors import InvalidConfig
from _sexpformat.formatting import prettify, prettify_str
from _sexpformat.layout import Style
from _sexpformat.prettifier import Prettifier

__version__ = sexpformat.version.version

__all__ = [
    "DEFAULT_COMPACT_COLUMN_LIMIT",
    "DEFAULT_INDENT_CHAR",
    "DEFAULT_INDENT_SIZE",
    "DEFAULT_WRAP_THRESHOLD",
    "KICAD",
    "KICAD_COMPACT",
    "PROFILES",
    "Config",
    "InvalidConfig",
    "Prettifier",
    "Style",
    "get_profile",
    "prettify",
    "prettify_str",
]
