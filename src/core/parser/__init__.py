"""Turns command-box text into `Command` objects.

Command words pick a parser; prefixes (`n/`, `p/`, ...) split the rest of
the line into fields that `parser_util` validates one by one.
"""
