"""Core: configuration, domain and services.

Nothing in here prints or parses argv; that belongs to `cli`.
"""

__version__ = "0.3.0"
