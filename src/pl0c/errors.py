"""
PL/0 Lexer Error Hierarchy
==========================

This module defines the exception hierarchy for the pl0c tokenizer.
All exceptions inherit from Pl0Error, allowing callers to catch every
pl0c-related error with a single except clause if desired.

Exception Hierarchy
-------------------
Pl0Error (base)
├── LexicalError - errors detected while scanning source text
│   ├── InvalidCharacterError - character that starts no token
│   ├── MalformedAssignError - ':' not followed by '='
│   ├── InvalidNumberError - numeric literal out of range
│   ├── UnterminatedCommentError - '{' without matching '}'
│   └── MissingTerminatorError - no final '.' (strict mode only)
└── InputError - errors obtaining the source text
    ├── BadSuffixError - file name does not end in '.pl0'
    └── SourceReadError - file cannot be opened, read or decoded

Error Message Format
--------------------
Lexical errors render as a short report:

    square.pl0:3:7: error: unknown token '%' (0x25)
        x := x % 2;
              ^
    hint: PL/0 has no modulo operator

The one-line form used by the command-line tool is available through
the ``diagnostic`` property:

    3: unknown token '%' (0x25)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class Pl0Error(Exception):
    """
    Base exception for all pl0c errors.

        try:
            tokens = tokenize(source)
        except Pl0Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(Pl0Error):
    """
    Base exception for errors found while scanning PL/0 source.

    Every lexical error is fatal: the scanner does not resynchronise
    after raising one, so a single run reports at most one error.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> int:
        """Line number the error was detected on."""
        return self.location.line

    @property
    def diagnostic(self) -> str:
        """One-line '<line>: <message>' form for terse reporting."""
        return f"{self.location.line}: {self.message}"

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.pl0:1:2: error: unknown token: 'x' after ':'
                :x
                 ^
            hint: the assignment operator is ':='
        """
        parts = [f"{self.location}: error: {self.message}"]

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InvalidCharacterError(LexicalError):
    """
    Character that cannot start any PL/0 token.

    Example:
        x := y % 2;    # '%' is not a PL/0 operator
    """

    def __init__(
        self,
        char: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unknown token '{char}' (0x{ord(char):02X})",
            location,
            source_line=source_line,
        )


class MalformedAssignError(LexicalError):
    """
    A ':' that is not immediately followed by '='.

    PL/0 has no standalone colon; ':' only ever begins ':='.
    ``found`` is the character after the colon, or None at end of input.
    """

    def __init__(
        self,
        found: Optional[str],
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.found = found
        what = "end of input" if found is None else repr(found)
        super().__init__(
            f"unknown token: {what} after ':'",
            location,
            hint="the assignment operator is ':='",
            source_line=source_line,
        )


class InvalidNumberError(LexicalError):
    """
    Numeric literal that does not fit the target integer type.

    Example:
        const big = 99999999999999999999;
    """

    def __init__(
        self,
        text: str,
        max_value: int,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.text = text
        self.max_value = max_value
        super().__init__(
            f"invalid number '{text}'",
            location,
            hint=f"numbers must not exceed {max_value}",
            source_line=source_line,
        )


class UnterminatedCommentError(LexicalError):
    """
    A '{' comment still open when the input ends.

    The location is where the input ran out; ``opened_line`` is the line
    of the opening brace.
    """

    def __init__(
        self,
        location: SourceLocation,
        opened_line: int,
        source_line: Optional[str] = None,
    ):
        self.opened_line = opened_line
        super().__init__(
            "unterminated comment",
            location,
            hint=f"comment opened on line {opened_line}; add '}}' to close it",
            source_line=source_line,
        )


class MissingTerminatorError(LexicalError):
    """Input ended without the program's final '.' (strict mode)."""

    def __init__(self, location: SourceLocation):
        super().__init__(
            "expected '.' at end of program",
            location,
            hint="a PL/0 program ends with a '.' after its main block",
        )


# =============================================================================
# Input Errors
# =============================================================================

class InputError(Pl0Error):
    """
    Base exception for problems obtaining the source text.

    Attributes:
        message: The error description
        path: The offending path
    """

    def __init__(self, message: str, path: str):
        self.message = message
        self.path = path
        super().__init__(message)


class BadSuffixError(InputError):
    """Source file name does not end in '.pl0'."""

    def __init__(self, path: str):
        super().__init__("File must end in '.pl0'", path)


class SourceReadError(InputError):
    """Source file could not be opened, read or decoded."""
    pass
