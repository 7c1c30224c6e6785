from enum import Enum, auto, unique


@unique
class CharKind(Enum):
    OPEN = auto()
    CLOSE = auto()
    WHITESPACE = auto()
    QUOTE = auto()
    ESCAPE = auto()
    CONTENT = auto()


WHITESPACE_CHARS = frozenset(" \t\r\n")


def classify(char, in_string=False, escaped=False):
    """
    Classify a character by its role in the S-expression notation.

    >>> classify("(")
    <CharKind.OPEN: 1>
    >>> classify("(", in_string=True)
    <CharKind.CONTENT: 6>

    :param char: The character to classify.
    :param in_string: Whether the character is inside a quoted string.
    :param escaped: Whether the previous character was an escape inside a
        quoted string.
    """
    if escaped:
        return CharKind.CONTENT
    if char == '"':
        return CharKind.QUOTE
    if in_string:
        if char == "\\":
            return CharKind.ESCAPE
        return CharKind.CONTENT
    if char == "(":
        return CharKind.OPEN
    if char == ")":
        return CharKind.CLOSE
    if char in WHITESPACE_CHARS:
        return CharKind.WHITESPACE
    return CharKind.CONTENT
