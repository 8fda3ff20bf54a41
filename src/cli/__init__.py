"""CLI layer (Typer + Rich).

Parses arguments, prints results and maps them to exit codes. All real work
is delegated to `core.services` and `adapters`.
"""
