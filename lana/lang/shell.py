"""Handles interactive/command-line mode for the lana interpreter. Uses cmd as backend."""

import cmd

from termcolor import colored

from lana import __version__
from lana.pure.expression import Bool, Keyword, Lambda, List, NativeFunction, Nil, Number, Symbol


COLORS = {
    Nil: ("magenta", ["bold"]),
    Bool: ("magenta", ["bold"]),
    Symbol: ("yellow", ["bold"]),
    Keyword: ("yellow", ["bold"]),
    Number: ("cyan", ["bold"]),
    NativeFunction: ("green", []),
    Lambda: ("green", []),
}


def colorize(expr):
    """Renders expr like str(expr) does, colored by type for the terminal."""
    if isinstance(expr, List):
        return f"({', '.join(colorize(item) for item in expr)})"

    color, attrs = COLORS.get(type(expr), (None, []))
    return colored(str(expr), color, attrs=attrs)


class Shell(cmd.Cmd):
    """lana interpreter shell."""
    intro = f"lana v{__version__} :: Python backend\nType 'help' for more information, 'exit' to leave."
    prompt = "lana> "
    secondary_prompt = "...   "  # used for line continuations
    _tmp_prompt = "lana> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0
        self._first_line_num = 0

    def default(self, line):
        """Executes arbitrary lana forms."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if not self._tmp_line:
                self._first_line_num = self.line_num  # first line of a possibly continued chunk
            line, add_to_prev = self.sess.preprocess_line(self._tmp_line + line)

            if add_to_prev:
                self._tmp_line = line + "\n"
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            if not line:
                return

            self.sess.add(line, self._first_line_num)
            try:
                self.sess.run()
            finally:  # forms before a failing one still ran
                while self.sess.results:
                    print("=> " + colorize(self.sess.pop()))

    def completedefault(self, text, line, begidx, endidx):
        """Completes names bound in the session's environment."""
        return sorted(name for name in self.sess.env.keys() if name.startswith(text))

    def completenames(self, text, *ignored):
        return super().completenames(text, *ignored) + self.completedefault(text, *ignored)

    def onecmd(self, line):
        """Lines are only treated as shell commands when they are a bare command name, as lana forms start with '('.
        """
        if self._tmp_line:
            self.default(line)
            return False
        return super().onecmd(line)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lana interpreter!\n\n"
              "lana is a small Lisp: everything is written in prefix notation, as in (+ 1 2).\n"
              "Special forms are if, def, fn, defn and do, and the prelude provides\n"
              "+ - * / = > >= < <= print println gets sleep.\n\n"
              "Try it out by typing '(defn add (a b) (+ a b))', and then '(add 2 3)'.\n"
              "The last result is always bound to '_'.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

    def do_quit(self, arg):
        """Exits interpreter."""
        return self.do_exit(arg)
