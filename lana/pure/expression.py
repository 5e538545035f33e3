"""Tagged values of the lana language. The same classes represent both parsed source (the syntax tree) and the
values it evaluates to:

```
<expression> ::= Nil | Bool | Keyword | Symbol | Number | String   ; leaves
               | List                                             ; ( <expression>* )
               | NativeFunction                                   ; only found in environments
               | Lambda                                           ; only produced by evaluating fn/defn
```

Two expressions are equal if they are the same variant and render to the same text, so that for example two lambdas
with identical parameters and bodies compare equal.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
import math


def format_number(number):
    """Renders number the shortest way that round-trips, without exponent notation or a trailing '.0'."""
    if math.isnan(number):
        return "NaN"
    elif math.isinf(number):
        return "inf" if number > 0 else "-inf"
    elif number.is_integer():
        sign = "-" if math.copysign(1.0, number) < 0 and number == 0 else ""
        return sign + str(int(number))
    return format(Decimal(repr(number)), "f")


class Expression(ABC):
    """Superclass of every lana value."""
    type_name = None

    @property
    def _cls(self):
        return type(self).__name__

    @abstractmethod
    def __str__(self):
        """Textual rendering of this expression, as print/println would show it."""

    def describe(self):
        """Short description used in error messages, e.g. "number '1'"."""
        return f"{self.type_name} '{self}'"

    @property
    def truthy(self):
        return True

    def __repr__(self):
        return f"{self._cls}({str(self)!r})"

    def __eq__(self, other):
        return isinstance(other, Expression) and self.type_name == other.type_name and str(self) == str(other)

    def __hash__(self):
        return hash((self.type_name, str(self)))


class Nil(Expression):
    type_name = "nil"

    def __str__(self):
        return "nil"

    def describe(self):
        return "nil"

    @property
    def truthy(self):
        return False

    def __repr__(self):
        return "Nil()"


class Bool(Expression):
    type_name = "boolean"

    def __init__(self, value):
        self.value = bool(value)

    def __str__(self):
        return "true" if self.value else "false"

    @property
    def truthy(self):
        return self.value


class Number(Expression):
    type_name = "number"

    def __init__(self, value):
        self.value = float(value)

    def __str__(self):
        return format_number(self.value)


class String(Expression):
    type_name = "string"

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return self.value


class Symbol(Expression):
    type_name = "symbol"

    def __init__(self, name):
        self.name = name

    def __str__(self):
        return self.name


class Keyword(Expression):
    """Identifiers beginning with ':'. Keywords keep the colon in their name."""
    type_name = "keyword"

    def __init__(self, name):
        self.name = name

    def __str__(self):
        return self.name


class List(Expression):
    type_name = "list"

    def __init__(self, items=()):
        self.items = tuple(items)

    def __str__(self):
        return f"({', '.join(str(item) for item in self.items)})"

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    def __repr__(self):
        return f"List([{', '.join(repr(item) for item in self.items)}])"


class NativeFunction(Expression):
    """A function implemented in Python. fn takes a list of evaluated expressions and returns an expression, raising a
    LanaError if its arguments break its contract. name is what identifies (and compares) native functions.
    """
    type_name = "function"

    def __init__(self, name, fn):
        self.name = name
        self.fn = fn

    def __call__(self, args):
        return self.fn(args)

    def __str__(self):
        return f"fn({self.name})"


class Lambda(Expression):
    """A user-defined function. params is kept verbatim and only checked to be a List of Symbols when called."""
    type_name = "lambda"

    def __init__(self, params, body):
        self.params = params
        self.body = body

    def __str__(self):
        return f"lambda({self.params} {self.body})"

    def __repr__(self):
        return f"Lambda({self.params!r}, {self.body!r})"


NIL = Nil()
TRUE = Bool(True)
FALSE = Bool(False)
