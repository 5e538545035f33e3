r"""Tokenizer for lana source text.

Turns raw text into a flat list of located tokens:

```
<token>    ::= "(" | ")" | <string> | <atom>
<string>   ::= '"' (<char> | "\" <char>)* '"'   ; \n, \t and \" are escapes, any other \x is just x
<atom>     ::= <char>+                          ; ends at "(", ")", ";" or whitespace
                                                ; a number if it parses as a float, otherwise an identifier
<comment>  ::= ";" <char>* "\n"
```

Commas are whitespace. The tokenizer never fails: a string that is still open at the end of input becomes an
UNTERMINATED_STRING token, and the parser decides what to do with it.
"""

from dataclasses import dataclass, field
from enum import Enum


WHITESPACE = " \t\n\r\x0c,"  # skipped between tokens
SEPARATORS = "();"           # end an atom, along with any whitespace

ESCAPES = {"n": "\n", "t": "\t", "\"": "\""}


@dataclass(frozen=True)
class Location:
    """1-based line and column of the last character consumed for a token."""
    line: int = 1
    column: int = 0

    def __str__(self):
        return f"line {self.line}, column {self.column}"


class TokenKind(Enum):
    STRING = "string"
    NUMBER = "number"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    IDENTIFIER = "identifier"
    UNTERMINATED_STRING = "unterminated string"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: object = None
    location: Location = field(default_factory=Location)

    def text(self):
        """The token as it would be written by a user (escapes aside)."""
        if self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN):
            return self.kind.value
        elif self.kind is TokenKind.STRING:
            return f'"{self.value}"'
        elif self.kind is TokenKind.UNTERMINATED_STRING:
            return f'"{self.value}'
        elif self.kind is TokenKind.NUMBER:
            return repr(self.value)
        return self.value

    def __str__(self):
        return f"'{self.text()}' at {self.location}"


def parse_number(text):
    """Returns text as a float, or None if text isn't a number."""
    if "_" in text or not text.isascii():  # float() accepts digit-group underscores and non-ASCII digits
        return None
    try:
        return float(text)
    except ValueError:
        return None


class Tokenizer:
    """Single pass, character-by-character tokenizer. Iterating over a Tokenizer always starts over from the
    beginning of the source.
    """

    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.location = Location()

    def tokens(self):
        """Returns all tokens in self.source."""
        return list(self)

    def __iter__(self):
        self.pos = 0
        self.location = Location()

        token = self.next_token()
        while token is not None:
            yield token
            token = self.next_token()

    def next_token(self):
        """Returns the next token, or None when the source is exhausted."""
        while True:
            self.skip_whitespace()

            char = self.next_char()
            if char is None:
                return None
            elif char == "(":
                return Token(TokenKind.LEFT_PAREN, None, self.location)
            elif char == ")":
                return Token(TokenKind.RIGHT_PAREN, None, self.location)
            elif char == ";":
                self.skip_line()
            elif char == "\"":
                return self.read_string()
            else:
                return self.read_atom(char)

    def skip_whitespace(self):
        while self.peek() is not None and self.peek() in WHITESPACE:
            self.next_char()

    def skip_line(self):
        char = self.next_char()
        while char is not None and char != "\n":
            char = self.next_char()

    def read_string(self):
        chars = []
        while True:
            char = self.next_char()
            if char is None:
                return Token(TokenKind.UNTERMINATED_STRING, "".join(chars), self.location)
            elif char == "\"":
                return Token(TokenKind.STRING, "".join(chars), self.location)
            elif char == "\\":
                escaped = self.next_char()
                if escaped is not None:
                    chars.append(ESCAPES.get(escaped, escaped))
            else:
                chars.append(char)

    def read_atom(self, first):
        chars = [first]
        while self.peek() is not None and not Tokenizer.is_separator(self.peek()):
            chars.append(self.next_char())

        text = "".join(chars)
        number = parse_number(text)
        if number is not None:
            return Token(TokenKind.NUMBER, number, self.location)
        return Token(TokenKind.IDENTIFIER, text, self.location)

    def peek(self):
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def next_char(self):
        char = self.peek()
        if char is None:
            return None

        self.pos += 1
        if char == "\n":
            self.location = Location(self.location.line + 1, 0)
        else:
            self.location = Location(self.location.line, self.location.column + 1)
        return char

    @staticmethod
    def is_separator(char):
        return char in SEPARATORS or char.isspace()


def tokenize(source):
    """Returns a fresh list of tokens for source."""
    return Tokenizer(source).tokens()
