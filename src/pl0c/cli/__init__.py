"""
pl0c Command-Line Interface
===========================

- **pl0c**: tokenize a '.pl0' file and print the token stream

The tool is a Click-based CLI application.
"""

from pl0c.cli import pl0c

__all__ = ["pl0c"]
