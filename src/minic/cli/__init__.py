"""
minic Command-Line Interface
============================

- **mclex**: dump the token stream of a source file

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["mclex"]
