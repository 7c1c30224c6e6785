import hypothesis.strategies as st
from hypothesis import example, given

import sexpformat
from _sexpformat.config import Config
from _sexpformat.tokenizer import tokenize

from .generators.sexp_contents import (
    atoms,
    configs,
    documents,
    numbers,
    plain_atoms,
    sexp_lists,
    sexps,
)


@given(documents, configs)
@example("(module(pts(xy 0 0)(xy 1 0)(xy 1 1)))", Config())
def test_only_whitespace_changes(document, config):
    formatted = sexpformat.prettify_str(document, config)
    assert list(tokenize(formatted)) == list(tokenize(document))


@given(documents, configs)
def test_formatting_is_idempotent(document, config):
    formatted = sexpformat.prettify_str(document, config)
    assert sexpformat.prettify_str(formatted, config) == formatted


@given(documents, configs)
def test_formatting_is_deterministic(document, config):
    first = sexpformat.prettify_str(document, config)
    prettifier = sexpformat.Prettifier(config)
    out = []
    for char in document:
        prettifier.process(char, out.append)
    prettifier.finish(out.append)
    assert "".join(out) == first
    assert sexpformat.prettify_str(document, config) == first


@given(documents, configs)
def test_no_trailing_whitespace(document, config):
    formatted = sexpformat.prettify_str(document, config)
    # Strings may end lines with whitespace of their own
    if '"' not in document:
        assert all(line == line.rstrip() for line in formatted.split("\n"))


@given(
    sexp_lists(
        st.recursive(atoms, sexp_lists, max_leaves=20), head="font"
    ),
    st.integers(min_value=1, max_value=5),
)
def test_shortform_lists_are_single_line(document, wrap_threshold):
    config = Config(wrap_threshold=wrap_threshold).with_shortform(["font"])
    formatted = sexpformat.prettify_str(document, config)
    assert formatted.count("\n") == 1
    assert formatted.endswith("\n")


@given(
    sexp_lists(plain_atoms, head="h"),
    st.integers(min_value=1, max_value=6),
)
def test_wrap_threshold_bound(document, wrap_threshold):
    config = Config(indent_char=" ", indent_size=2, wrap_threshold=wrap_threshold)
    formatted = sexpformat.prettify_str(document, config)
    for line in formatted.splitlines():
        assert len(line.split()) <= wrap_threshold


xy_lists = st.tuples(numbers, numbers).map(lambda xy: f"(xy {xy[0]} {xy[1]})")


@given(
    sexp_lists(xy_lists, head="pts"),
    st.integers(min_value=20, max_value=60),
    st.integers(min_value=1, max_value=4),
)
def test_compact_lists_stay_within_column_limit(document, column_limit, indent_size):
    config = Config(indent_char=" ", indent_size=indent_size).with_compact_list(
        ["pts"], column_limit
    )
    formatted = sexpformat.prettify_str(document, config)
    assert all(len(line) <= column_limit for line in formatted.splitlines())


@given(
    sexp_lists(sexp_lists(numbers, head="xy"), head="pts"),
    st.integers(min_value=20, max_value=60),
)
def test_nested_compact_lists_stay_within_column_limit(document, column_limit):
    config = Config(indent_char=" ", indent_size=1).with_compact_list(
        ["pts", "xy"], column_limit
    )
    formatted = sexpformat.prettify_str(document, config)
    assert all(len(line) <= column_limit for line in formatted.splitlines())


@given(sexps)
def test_any_expression_is_accepted(expression):
    formatted = sexpformat.prettify_str(expression + ")" + expression)
    assert list(tokenize(formatted)) == list(tokenize(expression + ")" + expression))
