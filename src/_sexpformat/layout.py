"""
The layout consumes tokens (see _sexpformat.tokenizer) and writes them out
again with line breaks, indentation and separators decided by the style of
the list each token belongs to. The style of a list is decided by its head
token, that is the first atom in the list:

 * NORMAL lists put every child list on its own line, and pack leaf tokens
   onto a line until the wrap threshold is reached.
 * COMPACT lists pack all children onto a line until the column limit is
   reached.
 * SHORTFORM lists are written on a single line, including everything
   nested in them.

Output is written as soon as it is decided. The only exception is a list
inside a COMPACT list: whether it fits on the current line is only known
once it is complete, or once it has grown too wide to fit, so its tokens are
held back until then. At most a line's worth of tokens is ever held back.
"""

from dataclasses import dataclass
from enum import Enum, auto, unique

from _sexpformat.config import Config
from _sexpformat.tokenizer.token import Token
from _sexpformat.tokenizer.token_kind import TokenKind


@unique
class Style(Enum):
    UNRESOLVED = auto()
    NORMAL = auto()
    COMPACT = auto()
    SHORTFORM = auto()


def resolve_style(head, config):
    """
    :param head: The head token of a list.
    :param config: The Config in effect when the list was opened.
    :returns: The Style for a list with the given head token.
    """
    if head in config.shortform_prefixes:
        return Style.SHORTFORM
    if head in config.compact_prefixes:
        return Style.COMPACT
    return Style.NORMAL


@dataclass
class Frame:
    """
    Layout state of a list that has been opened but not yet closed.
    """

    config: Config
    start_line: int
    flat: bool = False
    style: Style = Style.UNRESOLVED
    siblings: int = 0
    # Number of consecutive leaf tokens on the current line.
    run: int = 0

    def resolve(self, head):
        if head is None:
            self.style = Style.NORMAL
        else:
            self.style = resolve_style(head, self.config)
        if self.style == Style.SHORTFORM:
            self.flat = True


@unique
class Placement(Enum):
    PACK = auto()
    FRESH_LINE = auto()


class Layout:
    """
    >>> from _sexpformat.tokenizer import tokenize
    >>> out = []
    >>> layout = Layout(Config(indent_char=" ", indent_size=2), out.append)
    >>> for token in tokenize("(a (b))"):
    ...     layout.feed(token)
    >>> print("".join(out), end="")
    (a
      (b)
    )
    """

    def __init__(self, config, write):
        """
        :param config: The Config used for lists opened from now on, and
            for indentation.
        :param write: Function called with each piece of output text.
        """
        self.config = config
        self.write = write
        self.stack = []
        self.column = 0
        self.line = 0
        self.placement = None
        self.deferred = None
        self.deferred_depth = 0
        self.deferred_width = 0

    @property
    def depth(self):
        return len(self.stack)

    def closing_width(self):
        """
        :returns: The number of closing delimiters that may follow the last
            child on the current line of the innermost COMPACT lists.
        """
        width = 0
        for frame in reversed(self.stack):
            if frame.style != Style.COMPACT:
                break
            width += 1
        return width

    def fits(self, width):
        """
        :returns: Whether a child of the given width fits after a space on
            the current line of the innermost list, which is COMPACT.
        """
        limit = self.stack[-1].config.compact_column_limit
        return self.column + 1 + width + self.closing_width() <= limit

    def feed(self, token):
        if self.deferred is not None:
            self.defer(token)
        elif token.kind == TokenKind.OPEN:
            self.open_list()
        elif token.kind == TokenKind.CLOSE:
            self.close_list()
        else:
            self.atom(token)

    def finish(self, terminate=True):
        """
        Write out everything held back at the end of input.

        :param terminate: Whether to end the last line with a line break.
        """
        self.flush_deferred()
        if terminate and self.column > 0:
            self.newline(0)

    def emit(self, text):
        self.write(text)
        if "\n" in text:
            self.line += text.count("\n")
            self.column = len(text) - text.rindex("\n") - 1
        else:
            self.column += len(text)

    def newline(self, depth):
        self.emit("\n" + self.config.indentation(depth))

    def start_top_level(self):
        if self.column > 0:
            self.newline(0)

    def open_list(self):
        parent = self.stack[-1] if self.stack else None
        if parent is None:
            self.start_top_level()
        elif parent.siblings == 0:
            parent.resolve(None)
        elif not self.separate(parent, None):
            self.deferred = [Token(TokenKind.OPEN, "(")]
            self.deferred_depth = 1
            self.deferred_width = 1
            return
        self.emit("(")
        if parent is not None:
            parent.siblings += 1
        self.stack.append(
            Frame(self.config, self.line, flat=parent is not None and parent.flat)
        )

    def close_list(self):
        if not self.stack:
            # Stray closing delimiter, passed through at depth 0
            self.emit(")")
            return
        frame = self.stack.pop()
        if frame.style == Style.UNRESOLVED:
            frame.resolve(None)
        if (
            not frame.flat
            and frame.style == Style.NORMAL
            and self.line != frame.start_line
        ):
            self.newline(self.depth)
        self.emit(")")
        if not self.stack:
            self.newline(0)

    def atom(self, token):
        parent = self.stack[-1] if self.stack else None
        if parent is None:
            self.start_top_level()
        elif parent.siblings == 0:
            parent.resolve(token.value)
            parent.run = 1
        else:
            self.separate(parent, token.width)
        self.emit(token.value)
        if parent is not None:
            parent.siblings += 1

    def separate(self, parent, width):
        """
        Write what goes between the previous child of parent and the next.

        :param width: The width of the next child, None if the next child
            is a list.
        :returns: False if nothing was written because the next child is a
            list in a COMPACT list, and has to be complete before it can be
            placed.
        """
        placement, self.placement = self.placement, None
        if parent.flat or placement == Placement.PACK:
            self.emit(" ")
        elif placement == Placement.FRESH_LINE:
            pass
        elif parent.style == Style.COMPACT:
            if width is None:
                return False
            if self.fits(width):
                self.emit(" ")
            else:
                self.newline(self.depth)
        elif width is None:
            self.newline(self.depth)
            parent.run = 0
        elif parent.run < parent.config.wrap_threshold:
            self.emit(" ")
            parent.run += 1
        else:
            self.newline(self.depth)
            parent.run = 1
        return True

    def defer(self, token):
        """
        Hold back a token of a list in a COMPACT list. The list is placed
        once it closes, once it is too wide for the current line, or once a
        string in it breaks the line, whichever comes first.
        """
        previous = self.deferred[-1]
        if previous.kind != TokenKind.OPEN and token.kind != TokenKind.CLOSE:
            self.deferred_width += 1
        self.deferred_width += token.width
        self.deferred.append(token)
        if token.kind == TokenKind.OPEN:
            self.deferred_depth += 1
        elif token.kind == TokenKind.CLOSE:
            self.deferred_depth -= 1
        if (
            self.deferred_depth == 0
            or "\n" in token.value
            or not self.fits(self.deferred_width)
        ):
            tokens, self.deferred = self.deferred, None
            self.place(tokens)

    def flush_deferred(self):
        while self.deferred is not None:
            tokens, self.deferred = self.deferred, None
            self.place(tokens)

    def place(self, tokens):
        """
        Place a held back list in a COMPACT list. It goes on the current line
        if it would fit within the column limit when written on a single
        line, otherwise it starts a new line. The tokens not yet held back
        follow without being held back.
        """
        if self.fits(flat_width(tokens)):
            self.placement = Placement.PACK
        else:
            self.newline(self.depth)
            self.placement = Placement.FRESH_LINE
        for token in tokens:
            self.feed(token)


def flat_width(tokens):
    """
    :returns: The width of the given tokens written on a single line, up to
        the first line break inside a string.
    """
    width = 0
    previous = None
    for token in tokens:
        if (
            previous is not None
            and previous.kind != TokenKind.OPEN
            and token.kind != TokenKind.CLOSE
        ):
            width += 1
        width += token.width
        if "\n" in token.value:
            break
        previous = token
    return width
