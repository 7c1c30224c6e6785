"""
In this module, the tokenizer turns a stream of characters into the tokens
of the S-expression notation: list delimiters and atoms. It is push based,
characters are given one at a time and tokens are generated as soon as
they are complete, so an atom is only generated once the character
following it has been seen.

Quoted strings are not tokens of their own, they are part of the atom they
appear in and are kept exactly as given, including any whitespace, list
delimiters or escapes inside them.

The tokenizer never fails. Unbalanced delimiters are generated as they
appear and an unterminated string is generated as the remainder of the
atom when the tokenizer is flushed.
"""

from .sexp_tokenizer import SexpTokenizer, tokenize

__all__ = ["SexpTokenizer", "tokenize"]
