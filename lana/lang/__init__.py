"""The lana language proper: environments, evaluation, native functions, error handling, and the session/shell that
drive them.
"""
