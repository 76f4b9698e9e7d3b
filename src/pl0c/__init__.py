"""
pl0c - PL/0 Lexical Analyzer
============================

This package tokenizes programs written in PL/0, the small teaching
language from Niklaus Wirth's "Algorithms + Data Structures = Programs".
Source text is turned into a stream of classified tokens, each tagged
with the line it started on, ready for a parser.

Main Components
---------------
- **lexer**: the Scanner, Token and TokenKind types
- **source**: reading '.pl0' files from disk
- **errors**: the exception hierarchy
- **cli**: the ``pl0c`` command, which prints a token dump

Quick Start
-----------
    >>> from pl0c import tokenize
    >>> [t.kind.name for t in tokenize("x := 5;")]
    ['IDENTIFIER', 'ASSIGN', 'NUMBER', 'SEMICOLON', 'DOT']

Or from the shell:
    $ pl0c square.pl0
"""

__version__ = "1.0.0"

from pl0c.errors import (
    Pl0Error,
    SourceLocation,
    LexicalError,
    InvalidCharacterError,
    MalformedAssignError,
    InvalidNumberError,
    UnterminatedCommentError,
    MissingTerminatorError,
    InputError,
    BadSuffixError,
    SourceReadError,
)
from pl0c.lexer import (
    KEYWORDS,
    Scanner,
    ScannerOptions,
    Token,
    TokenKind,
    tokenize,
)
from pl0c.source import SOURCE_SUFFIX, read_source

__all__ = [
    "__version__",
    # Lexer
    "KEYWORDS",
    "Scanner",
    "ScannerOptions",
    "Token",
    "TokenKind",
    "tokenize",
    # Source loading
    "SOURCE_SUFFIX",
    "read_source",
    # Exception hierarchy
    "Pl0Error",
    "SourceLocation",
    "LexicalError",
    "InvalidCharacterError",
    "MalformedAssignError",
    "InvalidNumberError",
    "UnterminatedCommentError",
    "MissingTerminatorError",
    "InputError",
    "BadSuffixError",
    "SourceReadError",
]
