"""Domain models and entities.

The domain holds pure, strict data structures (Pydantic v2): it knows nothing
about the CLI, JSON files or the clipboard, only persons and meetings.
"""
