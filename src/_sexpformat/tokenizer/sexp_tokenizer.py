from _sexpformat.tokenizer.char_kind import CharKind, classify
from _sexpformat.tokenizer.token import Token
from _sexpformat.tokenizer.token_kind import TokenKind


class SexpTokenizer:
    """
    Push based tokenizer, see _sexpformat.tokenizer.

    >>> tokenizer = SexpTokenizer()
    >>> [t.value for c in "(a b)" for t in tokenizer.feed(c)]
    ['(', 'a', 'b', ')']
    """

    def __init__(self):
        self.buffer = []
        self.in_string = False
        self.escaped = False

    def feed(self, char):
        """
        Generate the tokens completed by the given character.
        """
        kind = classify(char, self.in_string, self.escaped)
        self.escaped = False

        if kind == CharKind.QUOTE:
            self.in_string = not self.in_string
            self.buffer.append(char)
        elif kind == CharKind.ESCAPE:
            self.escaped = True
            self.buffer.append(char)
        elif kind == CharKind.CONTENT:
            self.buffer.append(char)
        else:
            yield from self.flush()
            if kind == CharKind.OPEN:
                yield Token(TokenKind.OPEN, char)
            elif kind == CharKind.CLOSE:
                yield Token(TokenKind.CLOSE, char)

    def flush(self):
        """
        Generate the atom currently being read, if any. Used at whitespace
        and list boundaries, and at the end of input where the atom may
        contain an unterminated string.
        """
        if self.buffer:
            value = "".join(self.buffer)
            self.buffer.clear()
            yield Token(TokenKind.ATOM, value)


def tokenize(chars):
    """
    Tokenize all of the given characters.

    :param chars: Any iterable of characters, such as a string.
    """
    tokenizer = SexpTokenizer()
    for char in chars:
        yield from tokenizer.feed(char)
    yield from tokenizer.flush()
