"""Session control for lana. Ties the tokenizer, parser and evaluator together to run a .lana file, or to back the
interactive shell one chunk of input at a time.
"""

from lana.lang.environment import Environment
from lana.lang.error import LanaError, UnterminatedExpression
from lana.lang.evaluator import evaluate
from lana.pure.parser import parse_all, read_form
from lana.pure.tokenizer import tokenize


class Session:
    """Governs a lana session: a single root environment shared by every form that is run."""
    SH_FILE = "<in>"  # command-line interpreter filename
    LAST_RESULT = "_"  # bound to the last result in command-line mode

    def __init__(self, error_handler, path, cmd_line):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.env = Environment.default()
        self.pending = []  # list of (form, line_num) to evaluate
        self.results = []  # values of evaluated forms, oldest first

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    source = file.read()
            except OSError:
                raise LanaError("'{}' could not be opened", path)

            self.add(source, 1)

        elif not cmd_line:
            raise LanaError("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line):
        """Preprocesses a line (or accumulated lines) from the command-line. Returns the line without trailing
        whitespace, and whether or not it continues on the next line: that is, whether it leaves a list or string open.
        """
        line = line.rstrip()
        try:
            parse_all(tokenize(line))
        except UnterminatedExpression:
            return line, True
        except LanaError:
            pass  # reported once the line is added
        return line, False

    def add(self, source, line_num):
        """Parses every form in source and queues them to be run. Evaluation is delayed until run is called."""
        self.error_handler.register_source(self.path, source)  # in case error is raised

        forms = []
        tokens = tokenize(source)
        pos = 0
        while pos < len(tokens):
            form_line_num = line_num + tokens[pos].location.line - 1
            form, pos = read_form(tokens, pos)
            forms.append((form, form_line_num))

        self.pending.extend(forms)  # nothing is queued if source fails to parse

    def run(self):
        """Evaluates this session's queued forms in order, one top-level form at a time. Will raise the first error
        that is encountered, dropping the rest of the queue.
        """
        pending, self.pending = self.pending, []

        for form, line_num in pending:
            self.error_handler.register_line(self.path, str(form), line_num)

            result = evaluate(form, self.env)
            self.results.append(result)
            if self.cmd_line:
                self.env.define(Session.LAST_RESULT, result)

            self.error_handler.remove_line(self.path)

    def pop(self):
        """Returns the oldest result that hasn't been popped yet."""
        return self.results.pop(0)
