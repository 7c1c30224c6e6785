from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    OPEN = auto()
    CLOSE = auto()
    ATOM = auto()
