"""
Formatting configuration. A Config is an immutable value; changing any
setting means building a new Config, which is validated on construction, so
a failed change never leaves a half updated configuration behind.
"""

from dataclasses import dataclass, field, replace

from _sexpformat.errors import InvalidConfig

DEFAULT_INDENT_CHAR = "\t"
DEFAULT_INDENT_SIZE = 1

# Number of leaf tokens packed onto one line in a normal list before
# wrapping.
DEFAULT_WRAP_THRESHOLD = 72

# Column which lines of a compact list should not go past.
DEFAULT_COMPACT_COLUMN_LIMIT = 99

INDENT_CHARS = (" ", "\t")


def check_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfig(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidConfig(f"{name} must be positive, got {value}")


def check_prefixes(name, prefixes):
    """
    Validates a collection of head token prefixes as given by a caller.

    :returns: The prefixes as a frozenset.
    """
    if isinstance(prefixes, str):
        raise InvalidConfig(f"{name} must be a collection of strings, not a string")
    prefixes = list(prefixes)
    if not prefixes:
        raise InvalidConfig(f"{name} cannot be empty")
    for prefix in prefixes:
        if not isinstance(prefix, str) or not prefix:
            raise InvalidConfig(f"{name} contains an empty or non-string entry")
    duplicates = sorted({p for p in prefixes if prefixes.count(p) > 1})
    if duplicates:
        raise InvalidConfig(f"{name} contains duplicates: {', '.join(duplicates)}")
    return frozenset(prefixes)


@dataclass(frozen=True)
class Config:
    indent_char: str = DEFAULT_INDENT_CHAR
    indent_size: int = DEFAULT_INDENT_SIZE
    wrap_threshold: int = DEFAULT_WRAP_THRESHOLD
    compact_prefixes: frozenset = field(default_factory=frozenset)
    compact_column_limit: int = DEFAULT_COMPACT_COLUMN_LIMIT
    shortform_prefixes: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        if self.indent_char not in INDENT_CHARS:
            raise InvalidConfig(
                f"indent_char must be a space or a tab, got {self.indent_char!r}"
            )
        check_positive("indent_size", self.indent_size)
        check_positive("wrap_threshold", self.wrap_threshold)
        check_positive("compact_column_limit", self.compact_column_limit)
        for name in ("compact_prefixes", "shortform_prefixes"):
            prefixes = getattr(self, name)
            if not all(isinstance(p, str) and p for p in prefixes):
                raise InvalidConfig(f"{name} contains an empty or non-string entry")
            object.__setattr__(self, name, frozenset(prefixes))

    def indentation(self, depth):
        return self.indent_char * (self.indent_size * depth)

    def configure(self, indent_char, indent_size, wrap_threshold):
        return replace(
            self,
            indent_char=indent_char,
            indent_size=indent_size,
            wrap_threshold=wrap_threshold,
        )

    def with_compact_list(self, prefixes, column_limit):
        check_positive("column_limit", column_limit)
        return replace(
            self,
            compact_prefixes=check_prefixes("compact list prefixes", prefixes),
            compact_column_limit=column_limit,
        )

    def with_shortform(self, prefixes):
        return replace(
            self,
            shortform_prefixes=check_prefixes("shortform prefixes", prefixes),
        )


KICAD_COMPACT_LIST_PREFIXES = ("pts",)
KICAD_SHORTFORM_PREFIXES = ("font", "stroke", "fill", "offset", "rotate", "scale")

KICAD = Config().with_compact_list(
    KICAD_COMPACT_LIST_PREFIXES, DEFAULT_COMPACT_COLUMN_LIMIT
)
KICAD_COMPACT = KICAD.with_shortform(KICAD_SHORTFORM_PREFIXES)

PROFILES = {
    "kicad": KICAD,
    "kicad-compact": KICAD_COMPACT,
}


def get_profile(name):
    """
    :returns: The preset Config registered under the given name.
    :raises InvalidConfig: If there is no such profile.
    """
    try:
        return PROFILES[name]
    except KeyError as err:
        raise InvalidConfig(
            f"Unknown profile {name!r}, must be one of {', '.join(PROFILES)}"
        ) from err
