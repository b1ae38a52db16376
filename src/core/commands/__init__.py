"""User commands.

Each command is a small dataclass: parsers build it, `execute` applies it to
the model and returns a `CommandResult` for the UI.
"""
