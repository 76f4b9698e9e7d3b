"""
PL/0 Lexer (Scanner)
====================

This module implements the lexer for PL/0, Niklaus Wirth's small
teaching language. It converts source text into a stream of tokens for
a parser.

Token Categories
----------------
- Keywords: const, var, procedure, call, begin, end, if, then, while,
  do, odd (exact, case-sensitive match)
- Identifiers: a letter or underscore followed by letters, digits or
  underscores
- Numbers: unsigned decimal integers, range-checked against a signed
  integer width (64 bits by default)
- Operators: := = # < > + - * /
- Delimiters: ( ) . , ;

Comments
--------
- ``{ ... }``, not nested, may span lines. Comments produce no tokens
  but newlines inside them still advance the line counter.

End of Input
------------
When the input is exhausted the scanner returns a DOT token with the
text ".". This mirrors the '.' that ends every PL/0 program, so a driver
can stop on the first DOT whether or not the source supplied one. With
``ScannerOptions(require_terminator=True)`` running out of input before
a real '.' is an error instead.

Example Usage
-------------
>>> from pl0c.lexer import Scanner
>>> scanner = Scanner("x := 5;", "test.pl0")
>>> for token in scanner.tokenize():
...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(ASSIGN, ':=', 1:3)
Token(NUMBER, '5', 1:6)
Token(SEMICOLON, ';', 1:7)
Token(DOT, '.', 1:8)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional
import logging
import string

from pl0c.errors import (
    SourceLocation,
    InvalidCharacterError,
    InvalidNumberError,
    MalformedAssignError,
    MissingTerminatorError,
    UnterminatedCommentError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for PL/0.

    Keywords are distinguished from identifiers to simplify parsing.
    """

    # === Identifiers and Literals ===
    IDENTIFIER = auto()     # Variable/constant/procedure names
    NUMBER = auto()         # Unsigned decimal integers

    # === Keywords ===
    CONST = auto()          # const
    VAR = auto()            # var
    PROCEDURE = auto()      # procedure
    CALL = auto()           # call
    BEGIN = auto()          # begin
    END = auto()            # end
    IF = auto()             # if
    THEN = auto()           # then
    WHILE = auto()          # while
    DO = auto()             # do
    ODD = auto()            # odd

    # === Operators ===
    ASSIGN = auto()         # :=
    EQUAL = auto()          # =
    HASH = auto()           # # (not equal)
    LESS_THAN = auto()      # <
    GREATER_THAN = auto()   # >
    PLUS = auto()           # +
    MINUS = auto()          # -
    MULTIPLY = auto()       # *
    DIVIDE = auto()         # /

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    DOT = auto()            # . (also end of input)
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;

    @property
    def display_name(self) -> str:
        """Name used in token dumps, e.g. 'IDENT' or 'LEFT-PAREN'."""
        return _DISPLAY_NAMES.get(self, self.name)


# Dump names that differ from the member name
_DISPLAY_NAMES: dict[TokenKind, str] = {
    TokenKind.IDENTIFIER: "IDENT",
    TokenKind.LESS_THAN: "LESS-THAN",
    TokenKind.GREATER_THAN: "GREATER-THAN",
    TokenKind.LPAREN: "LEFT-PAREN",
    TokenKind.RPAREN: "RIGHT-PAREN",
}


# =============================================================================
# Keyword and Symbol Tables
# =============================================================================

KEYWORDS: dict[str, TokenKind] = {
    "const": TokenKind.CONST,
    "var": TokenKind.VAR,
    "procedure": TokenKind.PROCEDURE,
    "call": TokenKind.CALL,
    "begin": TokenKind.BEGIN,
    "end": TokenKind.END,
    "if": TokenKind.IF,
    "then": TokenKind.THEN,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "odd": TokenKind.ODD,
}

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "=": TokenKind.EQUAL,
    "#": TokenKind.HASH,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

# Text of the synthetic end-of-input token
END_OF_INPUT_TEXT = "."


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from PL/0 source code.

    Attributes:
        kind: The TokenKind classification
        text: The exact source text of the token
        line: Line number the token starts on (1-indexed)
        column: Column number the token starts on (1-indexed)
    """
    kind: TokenKind
    text: str
    line: int
    column: int = 1

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def value(self) -> str | int:
        """The integer value of a NUMBER token, otherwise the text."""
        if self.kind is TokenKind.NUMBER:
            return int(self.text.lstrip("0") or "0")
        return self.text


# =============================================================================
# Scanner Options
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        number_bits: Width of the signed integer type numbers must fit.
                     64 matches a C ``long`` on common platforms.
        require_terminator: If True, reaching the end of input before a
                     '.' raises MissingTerminatorError instead of
                     producing the implicit DOT token.
    """
    number_bits: int = 64
    require_terminator: bool = False

    def __post_init__(self):
        if self.number_bits < 2:
            raise ValueError(f"number_bits must be at least 2, got {self.number_bits}")

    @property
    def max_number(self) -> int:
        """Largest literal accepted by the scanner."""
        return 2 ** (self.number_bits - 1) - 1


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes PL/0 source code one token at a time.

    The scanner owns a cursor into the source text and a line counter.
    Each call to ``next_token()`` skips whitespace and comments and
    returns exactly one token, or raises a LexicalError. The source text
    is never modified, and a NUL character is treated as the end of
    input.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens = list(scanner.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        options: Scanner configuration
    """

    IDENT_START = string.ascii_letters + "_"
    IDENT_CHARS = string.ascii_letters + string.digits + "_"
    DIGITS = string.digits

    # C isspace() in the "C" locale
    WHITESPACE = " \t\n\r\v\f"

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[ScannerOptions] = None,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: The PL/0 source code to tokenize
            filename: Name of the source file (for error messages)
            options: Scanner configuration (uses defaults if None)
        """
        self.source = source
        self.filename = filename
        self.options = options or ScannerOptions()

        nul = source.find("\0")
        self._end = len(source) if nul == -1 else nul

        self._pos = 0
        self._line = 1
        self._column = 1
        self._line_start_pos = 0

        self._saw_dot = False

        logger.debug(f"Scanner created for {filename} ({self._end} characters)")

    @property
    def line(self) -> int:
        """Current line number."""
        return self._line

    @property
    def cursor(self) -> int:
        """Current offset into the source text."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """True once the cursor has reached the end of input."""
        return self._at_end()

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until the first DOT token, which is yielded last.

        Raises:
            LexicalError: If invalid input is encountered
        """
        count = 0
        while True:
            token = self.next_token()
            count += 1
            yield token
            if token.kind is TokenKind.DOT:
                break
        logger.debug(f"Tokenized {self.filename}: {count} tokens, {self._line} lines")

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        After the end of input every call returns another DOT token.

        Raises:
            LexicalError: If invalid input is encountered
        """
        self._skip_whitespace_and_comments()

        start_line = self._line
        start_column = self._column

        if self._at_end():
            if self.options.require_terminator and not self._saw_dot:
                raise MissingTerminatorError(self._location())
            logger.debug(f"End of input at {self._location()}")
            return Token(TokenKind.DOT, END_OF_INPUT_TEXT, start_line, start_column)

        char = self._peek()

        if char in self.IDENT_START:
            return self._scan_identifier(start_line, start_column)

        if char in self.DIGITS:
            return self._scan_number(start_line, start_column)

        return self._scan_operator(start_line, start_column)

    def peek_token(self) -> Token:
        """
        Return the next token without consuming it.

        Raises:
            LexicalError: If the next token is invalid
        """
        saved = (self._pos, self._line, self._column, self._line_start_pos, self._saw_dot)
        try:
            return self.next_token()
        finally:
            (self._pos, self._line, self._column,
             self._line_start_pos, self._saw_dot) = saved

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= self._end

    def _peek(self, offset: int = 0) -> str:
        """Character at cursor + offset, or '' past the end of input."""
        pos = self._pos + offset
        if pos >= self._end:
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, tracking lines."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def _location(self, line: Optional[int] = None, column: Optional[int] = None) -> SourceLocation:
        return SourceLocation(
            self.filename,
            line or self._line,
            column or self._column,
        )

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos, self._end)
        if line_end == -1:
            line_end = self._end
        return self.source[self._line_start_pos:line_end]

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        while not self._at_end():
            char = self._peek()

            if char in self.WHITESPACE:
                self._advance()
                continue

            if char == "{":
                self._skip_comment()
                continue

            break

    def _skip_comment(self) -> None:
        """
        Skip a { ... } comment.

        Raises:
            UnterminatedCommentError: If the input ends before '}'
        """
        start_line = self._line

        self._advance()  # consume {
        while not self._at_end():
            if self._advance() == "}":
                logger.debug(f"Skipped comment on lines {start_line}-{self._line}")
                return

        raise UnterminatedCommentError(
            self._location(),
            start_line,
            self._get_current_line(),
        )

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_identifier(self, start_line: int, start_column: int) -> Token:
        """Scan an identifier or keyword."""
        start = self._pos
        while self._peek() and self._peek() in self.IDENT_CHARS:
            self._advance()

        name = self.source[start:self._pos]
        kind = KEYWORDS.get(name, TokenKind.IDENTIFIER)
        return Token(kind, name, start_line, start_column)

    def _scan_number(self, start_line: int, start_column: int) -> Token:
        """
        Scan an unsigned decimal literal.

        Raises:
            InvalidNumberError: If the value does not fit in number_bits
        """
        start = self._pos
        while self._peek() and self._peek() in self.DIGITS:
            self._advance()

        text = self.source[start:self._pos]
        max_value = self.options.max_number

        # Compare lengths first; int() rejects very long digit strings
        digits = text.lstrip("0") or "0"
        if len(digits) > len(str(max_value)) or int(digits) > max_value:
            raise InvalidNumberError(
                text,
                max_value,
                self._location(start_line, start_column),
                self._get_current_line(),
            )

        return Token(TokenKind.NUMBER, text, start_line, start_column)

    def _scan_operator(self, start_line: int, start_column: int) -> Token:
        """
        Scan an operator or delimiter.

        Raises:
            MalformedAssignError: If ':' is not followed by '='
            InvalidCharacterError: If the character starts no token
        """
        char = self._peek()

        if char == ":":
            self._advance()
            if self._peek() != "=":
                raise MalformedAssignError(
                    self._peek() or None,
                    self._location(),
                    self._get_current_line(),
                )
            self._advance()
            return Token(TokenKind.ASSIGN, ":=", start_line, start_column)

        if char in SINGLE_CHAR_TOKENS:
            self._advance()
            kind = SINGLE_CHAR_TOKENS[char]
            if kind is TokenKind.DOT:
                self._saw_dot = True
            return Token(kind, char, start_line, start_column)

        raise InvalidCharacterError(
            char,
            self._location(start_line, start_column),
            self._get_current_line(),
        )


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(
    source: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """
    Tokenize PL/0 source completely.

    Either every token up to and including the final DOT is returned or
    a LexicalError is raised; no partial token list is ever returned.

    Args:
        source: The PL/0 source code
        filename: Source filename for error messages
        options: Scanner configuration (uses defaults if None)

    Raises:
        LexicalError: On the first invalid token
    """
    return list(Scanner(source, filename, options).tokenize())
