"""Domain models and enums.

Why:
- Plain, strict data structures (Pydantic v2 + enums).
- The domain knows nothing about subprocesses, HTTP or the CLI.
"""
