"""Native functions bound in every root environment. Each one takes the list of its (already evaluated) arguments and
checks its own arity and argument types.
"""

from functools import reduce
import math
import operator
import sys
import time

from lana.lang.error import NumberParseError, Reason, TypeMismatch
from lana.pure.expression import Bool, NativeFunction, Number
from lana.pure.tokenizer import parse_number


def floats(args):
    """Returns args as floats, raising TypeMismatch on the first non-number."""
    result = []
    for arg in args:
        if not isinstance(arg, Number):
            raise TypeMismatch("a number", arg)
        result.append(arg.value)
    return result


def split_first(args):
    numbers = floats(args)
    if not numbers:
        raise Reason("Expected at least one number")
    return numbers[0], numbers[1:]


def divide(dividend, divisor):
    """IEEE-754 division: dividing by zero gives an infinity or NaN rather than an error."""
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def approx_eq(a, b):
    return abs(a - b) < sys.float_info.epsilon


def add(args):
    return Number(sum(floats(args), 0.0))


def subtract(args):
    first, rest = split_first(args)
    return Number(first - sum(rest, 0.0))


def multiply(args):
    return Number(reduce(operator.mul, floats(args), 1.0))


def quotient(args):
    first, rest = split_first(args)
    return Number(divide(first, reduce(operator.mul, rest, 1.0)))


def tonicity(check):
    """Returns a native function that is true iff check holds for every consecutive pair of its arguments."""

    def ensure_tonicity(args):
        first, rest = split_first(args)

        prev = first
        for number in rest:
            if not check(prev, number):
                return Bool(False)
            prev = number
        return Bool(True)

    return ensure_tonicity


def require_args(args):
    if not args:
        raise Reason("Expected at least one argument")


def print_(args):
    require_args(args)
    for arg in args:
        sys.stdout.write(str(arg))
    sys.stdout.flush()
    return args[0]


def println(args):
    require_args(args)
    for arg in args:
        sys.stdout.write(f"{arg}\n")
    sys.stdout.flush()
    return args[0]


def gets(args):
    if args:
        raise Reason("Expected no arguments, got {}", str(len(args)))

    try:
        line = sys.stdin.readline()
    except OSError:
        raise Reason("Failed to read line")

    number = parse_number(line.strip())
    if number is None:
        raise NumberParseError("Could not parse number")
    return Number(number)


def sleep(args):
    if len(args) != 1:
        raise Reason("Expected 1 argument, got {}", str(len(args)))

    seconds, = floats(args)
    if math.isnan(seconds) or seconds < 0:
        seconds = 0
    elif math.isinf(seconds):
        raise Reason("Invalid argument: cannot sleep for {} seconds", "inf")
    seconds = int(seconds)

    try:
        time.sleep(seconds)
    except (OverflowError, ValueError):
        raise Reason("Invalid argument: cannot sleep for {} seconds", str(seconds))
    return Number(seconds)


NATIVES = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": quotient,
    "=": tonicity(approx_eq),
    ">": tonicity(operator.gt),
    ">=": tonicity(operator.ge),
    "<": tonicity(operator.lt),
    "<=": tonicity(operator.le),
    "print": print_,
    "println": println,
    "gets": gets,
    "sleep": sleep,
}


def prelude():
    """Returns a fresh dict of name: NativeFunction for a root environment."""
    return {name: NativeFunction(name, fn) for name, fn in NATIVES.items()}
