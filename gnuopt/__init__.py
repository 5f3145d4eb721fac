"""GNU-style command-line option parsing, with ASCII character classes and message lookup helpers."""

__version__ = "2.8.0"
__all__ = ["charclass", "i18n", "longopts", "parser", "cli"]