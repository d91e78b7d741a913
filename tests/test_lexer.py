from types import GeneratorType

from tura.simulator.lexer import TokenStream, tokenize


def test_tokenize_splits_on_space_and_newline():
    assert list(tokenize("Inc 0 1 R Inc\nInc 1 0 L Inc\n")) == [
        "Inc", "0", "1", "R", "Inc",
        "Inc", "1", "0", "L", "Inc",
    ]


def test_tokenize_drops_empty_tokens():
    assert list(tokenize("  a   b\n\n\nc  ")) == ["a", "b", "c"]
    assert list(tokenize("")) == []
    assert list(tokenize(" \n \n")) == []


def test_tabs_and_carriage_returns_are_token_content():
    assert list(tokenize("a\tb c\r\nd")) == ["a\tb", "c\r", "d"]


def test_tokenize_is_lazy():
    tokens = tokenize("a b")
    assert isinstance(tokens, GeneratorType)
    assert next(tokens) == "a"
    assert next(tokens) == "b"


def test_token_stream_lookahead():
    stream = TokenStream.from_source("x y")
    assert stream.peek() == "x"
    assert stream.peek() == "x"
    assert stream.position == 0
    assert stream.next_token() == "x"
    assert stream.has_more()
    assert stream.next_token() == "y"
    assert stream.position == 2
    assert not stream.has_more()
    assert stream.next_token() is None
    assert stream.position == 2

