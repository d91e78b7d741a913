import re

# Only space and newline separate tokens; tabs and carriage returns stay in the token.
TOKEN = re.compile(r"[^ \n]+")


def tokenize(source):
    """Lazily yield the non-empty tokens of `source`, left to right."""
    for match in TOKEN.finditer(source):
        yield match.group()


class TokenStream:
    """Single-pass token cursor with one token of lookahead."""

    def __init__(self, tokens):
        self._tokens = iter(tokens)
        self._peeked = None
        self._has_peeked = False
        self.position = 0

    @classmethod
    def from_source(cls, source):
        return cls(tokenize(source))

    def peek(self):
        if not self._has_peeked:
            self._peeked = next(self._tokens, None)
            self._has_peeked = True
        return self._peeked

    def has_more(self):
        return self.peek() is not None

    def next_token(self):
        token = self.peek()
        self._has_peeked = False
        self._peeked = None
        if token is not None:
            self.position += 1
        return token
