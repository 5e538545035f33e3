"""Tree-walking evaluator for lana.

A list is evaluated by first checking its head against SPECIAL_FORMS, without evaluating it; only if the head isn't a
special form is it evaluated and applied to the evaluated arguments. Evaluation is plainly recursive, so deep nesting
is bounded by Python's recursion limit.

Lambdas are dynamically scoped: the frame of a call encloses the *caller's* environment, not the one the lambda was
defined in.
"""

from lana.lang.environment import Environment
from lana.lang.error import (ArityMismatch, EmptyApplication, InvalidParameterList, NotCallable, Reason,
                             UndefinedSymbol)
from lana.pure.expression import NIL, Bool, Keyword, Lambda, List, NativeFunction, Nil, Number, String, Symbol


SELF_EVALUATING = (Nil, Bool, Keyword, Number, String)


def evaluate(expr, env):
    """Evaluates expr in env, raising a LanaError if it can't be."""
    if isinstance(expr, SELF_EVALUATING):
        return expr

    elif isinstance(expr, Symbol):
        value = env.get(expr.name)
        if value is None:
            raise UndefinedSymbol(expr.name)
        return value

    elif isinstance(expr, List):
        if not expr.items:
            raise EmptyApplication()

        head, *arg_forms = expr.items
        if isinstance(head, Symbol) and head.name in SPECIAL_FORMS:
            return SPECIAL_FORMS[head.name](arg_forms, env)

        return apply(evaluate(head, env), arg_forms, env)

    elif isinstance(expr, NativeFunction):
        raise Reason("Unexpected function")
    elif isinstance(expr, Lambda):
        raise Reason("Unexpected lambda")

    raise Reason("Cannot evaluate {}", repr(expr))


def evaluate_all(exprs, env):
    """Evaluates exprs left to right, returning the list of values."""
    return [evaluate(expr, env) for expr in exprs]


def apply(fn, arg_forms, env):
    """Applies the callable fn to the unevaluated arg_forms, which are evaluated in env (the caller's environment)."""
    if isinstance(fn, NativeFunction):
        return fn(evaluate_all(arg_forms, env))

    elif isinstance(fn, Lambda):
        frame = frame_for_lambda(fn, arg_forms, env)
        return evaluate(fn.body, frame)

    raise NotCallable(fn)


def parameter_names(params):
    """Names of a lambda's parameters. params must be a List of Symbols."""
    if not isinstance(params, List):
        raise InvalidParameterList("Expected lambda args to be a list")

    names = []
    for param in params:
        if not isinstance(param, Symbol):
            raise InvalidParameterList("Expected symbols in lambda argument list")
        names.append(param.name)
    return names


def frame_for_lambda(fn, arg_forms, outer):
    names = parameter_names(fn.params)
    if len(names) != len(arg_forms):
        raise ArityMismatch(len(names), len(arg_forms))

    args = evaluate_all(arg_forms, outer)
    return Environment(dict(zip(names, args)), outer)


def symbol_name(expr):
    if not isinstance(expr, Symbol):
        raise Reason("Expected variable name to be a symbol, got {}", expr.describe())
    return expr.name


def eval_if(args, env):
    if not args:
        raise Reason("Expected if condition")
    if len(args) > 3:
        raise Reason("Expected 2-3 arguments, got {}", str(len(args)))

    condition = evaluate(args[0], env)
    branch_name, branch_idx = ("then", 1) if condition.truthy else ("else", 2)

    if branch_idx >= len(args):
        raise Reason("Expected if's {} branch", branch_name)
    return evaluate(args[branch_idx], env)


def eval_def(args, env):
    if not args:
        raise Reason("Expected variable name")

    name = symbol_name(args[0])
    if len(args) > 2:
        raise Reason("Expected only two arguments in assignment, got {}", str(len(args)))
    if len(args) < 2:
        raise Reason("Expected assignment value")

    return env.define(name, evaluate(args[1], env))


def eval_fn(args, env):
    if not args:
        raise Reason("Expected lambda args and body")
    if len(args) < 2:
        raise Reason("Expected lambda body")
    if len(args) > 2:
        raise Reason("Lambda definitions take only 2 arguments (args and body)")

    params, body = args
    return Lambda(params, body)


def eval_defn(args, env):
    if not args:
        raise Reason("Expected lambda name")

    name = symbol_name(args[0])
    return env.define(name, eval_fn(args[1:], env))


def eval_do(args, env):
    result = NIL
    for expr in args:
        result = evaluate(expr, env)
    return result


SPECIAL_FORMS = {
    "if": eval_if,
    "def": eval_def,
    "fn": eval_fn,
    "defn": eval_defn,
    "do": eval_do,
}
