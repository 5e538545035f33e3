"""Runs .lana files, or the interactive shell when no file is given. Uses the error handling context manager so that
lana errors are reported rather than dumped as Python tracebacks. Installed as the `lana` console script.
"""

import argparse
import sys

from lana import __version__
from lana.lang.error import ErrorHandler
from lana.lang.session import Session
from lana.lang.shell import Shell


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="lana", description="lana interpreter")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--recursion-limit", type=int, default=None, metavar="N",
                        help="raise Python's recursion limit, for deeply recursive programs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs lana interpreter. Called from the lana console script."""
    args = parse_args(argv)

    if args.recursion_limit is not None:
        sys.setrecursionlimit(args.recursion_limit)

    with ErrorHandler() as error_handler:
        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False)
            sess.run()

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
