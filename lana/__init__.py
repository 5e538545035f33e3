"""lana: a small Lisp-family scripting language.

Basic program flow, one top-level form at a time:
    1. Tokenizer: turns source text into located tokens (see lana/pure/tokenizer.py)
    2. Parser: turns tokens into expressions, which double as the syntax tree (see lana/pure/parser.py)
    3. Evaluator: walks each expression in an environment whose root is filled by the prelude
       (see lana/lang/evaluator.py and lana/lang/prelude.py)

Errors in any stage are LanaErrors (see lana/lang/error.py), and abort the form being run.
"""

from lana.lang.environment import Environment
from lana.lang.error import LanaError
from lana.lang.evaluator import evaluate
from lana.pure.parser import parse, parse_all
from lana.pure.tokenizer import tokenize

__version__ = "0.1.0"

__all__ = ["Environment", "LanaError", "evaluate", "parse", "parse_all", "tokenize", "__version__"]
