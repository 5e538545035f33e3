"""Error handling for the lana language. Only LanaErrors should be encountered while running: if another type of
error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Taxonomy (each class carries its `kind`):

```
LanaError
 ├── Reason                     ; "reason": any other contract violation
 ├── ParseError
 │    ├── UnexpectedToken       ; "unexpected-token"
 │    └── UnterminatedExpression            ; "unterminated-expression"
 │         └── UnterminatedString           ; "unterminated-string" (lex)
 └── EvalError
      ├── UndefinedSymbol       ; "undefined-symbol"
      ├── EmptyApplication      ; "empty-application"
      ├── NotCallable           ; "not-callable"
      ├── InvalidParameterList  ; "invalid-parameter-list"
      ├── ArityMismatch         ; "arity-mismatch"
      ├── TypeMismatch          ; "type-mismatch"
      └── NumberParseError      ; "parse-error"
```
"""

import sys

from termcolor import colored


class LanaError(Exception):
    """Templates an error message so that it can be used to throw a lana error. exprs are substituted into msg and
    bolded in the colored version of the message.
    """
    kind = "reason"

    def __init__(self, msg, exprs=None, location=None, internal=False):
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]

        self.plain_msg = msg.format(*exprs)
        self.msg = msg.format(*(colored(str(expr), attrs=["bold"]) for expr in exprs))  # color expr snippets

        self.location = location
        self.internal = internal
        super().__init__(self.plain_msg)

    def __eq__(self, other):
        return type(self) is type(other) and self.plain_msg == other.plain_msg and self.location == other.location

    def __hash__(self):
        return hash((type(self).__name__, self.plain_msg))


class Reason(LanaError):
    """Generic error carrying nothing but its reason."""


class ParseError(LanaError):
    """Raised while turning tokens into expressions."""


class UnexpectedToken(ParseError):
    kind = "unexpected-token"

    def __init__(self, token):
        self.token = token
        super().__init__("unexpected {}", str(token), location=token.location)


class UnterminatedExpression(ParseError):
    kind = "unterminated-expression"

    def __init__(self, expected, opening_token):
        self.expected = expected
        self.token = opening_token
        super().__init__("could not find closing '{}' for {}", (expected, str(opening_token)),
                         location=opening_token.location)


class UnterminatedString(UnterminatedExpression):
    """The tokenizer never fails; an unterminated string surfaces here, once the parser reaches its token.

    Its kind is "unterminated-string" on purpose, to tell it apart from an open list. Being a subclass, it is still
    caught as an UnterminatedExpression, which is how the shell knows to keep reading.
    """
    kind = "unterminated-string"

    def __init__(self, token):
        super().__init__('"', token)


class EvalError(LanaError):
    """Raised while evaluating an expression."""


class UndefinedSymbol(EvalError):
    kind = "undefined-symbol"

    def __init__(self, name):
        self.name = name
        super().__init__("Undefined symbol '{}'", name)


class EmptyApplication(EvalError):
    kind = "empty-application"

    def __init__(self):
        super().__init__("Expected a non-empty list")


class NotCallable(EvalError):
    kind = "not-callable"

    def __init__(self, value):
        self.value = value
        super().__init__("First form must be a function, got {}", value.describe())


class InvalidParameterList(EvalError):
    kind = "invalid-parameter-list"


class ArityMismatch(EvalError):
    kind = "arity-mismatch"

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__("Expected {} argument(s), got {}", (str(expected), str(got)))


class TypeMismatch(EvalError):
    kind = "type-mismatch"

    def __init__(self, expected, value):
        self.expected = expected
        self.value = value
        super().__init__("Expected {}, got {}", (expected, value.describe()))


class NumberParseError(EvalError):
    kind = "parse-error"


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report lana errors instead."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}
        self.sources = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_source(self, path, source):
        """Registers the full source text of path, used to point at the location of an error."""
        self.sources[path] = source

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(source, location):
        """Returns the source line that location points into, with the offending character highlighted and a caret
        underneath it. Returns None if location falls outside of source.
        """
        lines = source.split("\n")
        if not 1 <= location.line <= len(lines):
            return None

        line = lines[location.line - 1]
        col = max(location.column - 1, 0)  # columns point at the last consumed character
        if col >= len(line):
            col = max(len(line) - 1, 0)

        diagnosis = "  " + line[:col]
        diagnosis += colored(line[col:col + 1], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += line[col + 1:] + "\n"
        diagnosis += "  " + " " * col + colored("^", ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Reports error using self.traceback. error must be a LanaError, and self.traceback must be a dict of
        file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"
                lines += 1

        if lines > 1:
            error_msg = "Traceback:\n" + error_msg

        origin = self._origin()
        if origin is not None and error.location is not None:
            error_msg += colored(f"{origin}:{error.location.line}:{error.location.column}: ", attrs=["bold"])

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        source = self.sources.get(origin)
        if not error.internal and error.location is not None and source:
            diagnosis = ErrorHandler.diagnose(source, error.location)
            if diagnosis:
                print(diagnosis)

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # if error occurred, reset traceback

    def _origin(self):
        """The most recently registered file, which is where errors are assumed to originate."""
        if not self.traceback:
            return None
        return next(reversed(list(self.traceback)))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LanaError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(LanaError("maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, LanaError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(LanaError("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
