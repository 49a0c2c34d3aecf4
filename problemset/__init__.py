"""Solutions to competitive programming problems, as functions, text runners and a command."""

__version__ = "0.1.0"