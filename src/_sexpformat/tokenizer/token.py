from dataclasses import dataclass

from _sexpformat.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token of an S-expression, either a list delimiter or an atom. For
    delimiters, the value is the delimiter character, for atoms the value
    is the atom as it appeared in the input.
    """

    kind: TokenKind
    value: str

    @property
    def width(self):
        """
        :returns: The number of columns the first line of the token takes up,
            atoms only span several lines if they contain a multi-line string.
        """
        return len(self.value.split("\n", 1)[0])
