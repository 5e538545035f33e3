"""Recursive-descent parser for lana. Turns a list of tokens into expressions, one top-level form at a time.

```
<form> ::= "(" <form>* ")"     ; List
         | NUMBER              ; Number
         | STRING              ; String
         | "true" | "false"    ; Bool
         | "nil"               ; Nil
         | ":" IDENTIFIER      ; Keyword (the colon is part of the name)
         | IDENTIFIER          ; Symbol
```
"""

from lana.lang.error import Reason, UnexpectedToken, UnterminatedExpression, UnterminatedString
from lana.pure.expression import FALSE, NIL, TRUE, Keyword, List, Number, String, Symbol
from lana.pure.tokenizer import TokenKind


LITERALS = {"true": TRUE, "false": FALSE, "nil": NIL}


def parse(tokens):
    """Parses the first form in tokens. Returns (expression, rest of tokens)."""
    expr, pos = read_form(tokens, 0)
    return expr, tokens[pos:]


def parse_all(tokens):
    """Parses every form in tokens, failing on the first error."""
    exprs = []
    pos = 0
    while pos < len(tokens):
        expr, pos = read_form(tokens, pos)
        exprs.append(expr)
    return exprs


def read_form(tokens, pos):
    """Parses the form starting at tokens[pos]. Returns (expression, position just past it)."""
    if pos >= len(tokens):
        raise Reason("Could not get token")

    token = tokens[pos]
    if token.kind is TokenKind.LEFT_PAREN:
        return read_list(tokens, pos + 1, token)
    elif token.kind is TokenKind.RIGHT_PAREN:
        raise UnexpectedToken(token)
    return parse_atom(token), pos + 1


def read_list(tokens, pos, opening_token):
    """Reads forms from tokens[pos] until the ")" matching opening_token."""
    items = []
    while True:
        if pos >= len(tokens):
            raise UnterminatedExpression(")", opening_token)

        if tokens[pos].kind is TokenKind.RIGHT_PAREN:
            return List(items), pos + 1

        expr, pos = read_form(tokens, pos)
        items.append(expr)


def parse_atom(token):
    if token.kind is TokenKind.NUMBER:
        return Number(token.value)
    elif token.kind is TokenKind.STRING:
        return String(token.value)
    elif token.kind is TokenKind.UNTERMINATED_STRING:
        raise UnterminatedString(token)
    elif token.kind is TokenKind.IDENTIFIER:
        if token.value in LITERALS:
            return LITERALS[token.value]
        elif token.value.startswith(":"):
            return Keyword(token.value)
        return Symbol(token.value)

    raise Reason("Cannot parse atom from token {}", str(token))
