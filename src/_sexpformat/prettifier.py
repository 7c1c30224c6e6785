from _sexpformat.config import Config
from _sexpformat.layout import Layout
from _sexpformat.tokenizer import SexpTokenizer


class Prettifier:
    """
    Reformats one stream of S-expressions, character by character. All
    formatting state belongs to the instance, so separate streams are
    formatted with separate instances, which can be used from separate
    threads.

    >>> prettifier = Prettifier(Config(indent_char=" ", indent_size=2))
    >>> out = []
    >>> for char in "(a\\n\\n   b)":
    ...     prettifier.process(char, out.append)
    >>> prettifier.finish(out.append)
    >>> "".join(out)
    '(a b)\\n'

    """

    def __init__(self, config=None):
        """
        :param config: The Config to start out with, defaults to Config().
        """
        self._config = Config() if config is None else config
        self._tokenizer = SexpTokenizer()
        self._pending = []
        self._layout = Layout(self._config, self._pending.append)

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config
        self._layout.config = config

    def configure(self, indent_char, indent_size, wrap_threshold):
        """
        Set indentation and wrap threshold.

        :raises InvalidConfig: If indent_char is not a space or tab, or if
            indent_size or wrap_threshold is not positive.
        """
        self.config = self.config.configure(indent_char, indent_size, wrap_threshold)

    def set_compact_list(self, prefixes, column_limit):
        """
        Replace the head tokens of lists packed up to column_limit.

        :raises InvalidConfig: If prefixes is empty, contains empty strings
            or duplicates, or if column_limit is not positive.
        """
        self.config = self.config.with_compact_list(prefixes, column_limit)

    def set_shortform(self, prefixes):
        """
        Replace the head tokens of lists written on a single line.

        :raises InvalidConfig: If prefixes is empty, contains empty strings
            or duplicates.
        """
        self.config = self.config.with_shortform(prefixes)

    def process(self, char, sink):
        """
        Consume one input character.

        :param char: The input character.
        :param sink: Function called with every output character that is
            decided by this input character, in order.
        """
        for token in self._tokenizer.feed(char):
            self._layout.feed(token)
        self._drain(sink)

    def finish(self, sink):
        """
        Write out whatever is still held back at the end of input. A partial
        atom, including an unterminated string, is written as it was read.
        """
        for token in self._tokenizer.flush():
            self._layout.feed(token)
        self._layout.finish(terminate=not self._tokenizer.in_string)
        self._drain(sink)

    def _drain(self, sink):
        for text in self._pending:
            for char in text:
                sink(char)
        self._pending.clear()
