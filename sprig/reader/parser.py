"""
  Sprig Reader, Lexer and Parser

- Comments are stripped before tokenizing
- Streaming, lazy parsing of top-level forms
- Emits Sprig values:

    - numbers -> int
    - #true / #false -> True / False
    - #nil and () -> Nil
    - symbols -> Symbol
    - lists -> right-nested Pair chains ending in Nil
    - 'expr -> (quote expr)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from sprig import SExpression
from sprig.types.errors import SprigSyntaxError
from sprig.types.nil import Nil
from sprig.types.pair import Pair
from sprig.types.symbol import Symbol


COMMENT_RE = re.compile(r";[^\n]*")

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r"|(?P<symbol>[^\s()';]+)"  # numbers, literals and symbols
    r")"
)

INTEGER_RE = re.compile(r"[+-]?\d+")

LITERALS: dict[str, SExpression] = {
    "#true": True,
    "#false": False,
    "#nil": Nil,
}

QUOTE = Symbol("quote")
BEGIN = Symbol("begin")


def remove_comments(source: str) -> str:
    """Drop every `;` comment, keeping the newline that ends it."""
    return COMMENT_RE.sub("", source)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos:].strip() == "":
                break
            bad = source[pos:].lstrip()[0]
            raise SprigSyntaxError(f"Unexpected char at {pos}: {bad!r}")
        pos = m.end()
        for name in ("lparen", "rparen", "quote", "symbol"):
            if m.group(name):
                yield name, m.group(name)
                break


def atom(token: str) -> SExpression:
    if token in LITERALS:
        return LITERALS[token]
    if INTEGER_RE.fullmatch(token):
        return int(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse one expression; returns None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None
        self.advance()

        if tok_type == "symbol":
            return atom(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise SprigSyntaxError("Nothing to quote after \"'\"")
            if self.peek()[0] == "rparen":
                raise SprigSyntaxError("Unexpected ')' after \"'\"")
            return Pair.from_iterable([QUOTE, self.parse_expr()])

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise SprigSyntaxError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return Pair.from_iterable(items)
                items.append(self.parse_expr())

        raise SprigSyntaxError("Unexpected ')'")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_all(source: str) -> Iterator[SExpression]:
    """Yield each top-level form of `source`, comments removed."""
    return TokenStream(lex(remove_comments(source))).parse_all()


def parse(source: str) -> SExpression:
    """Parse a whole buffer into its root form, `(begin form ...)`.

    The buffer is read completely before anything is returned, so malformed
    input never yields a partial program.
    """
    return Pair(BEGIN, Pair.from_iterable(read_all(source)))
