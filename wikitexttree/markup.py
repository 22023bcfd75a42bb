# Markup literals recognized by the tokenizer and the token kinds they map to
#
# Copyright (c) 2020-2022 Tatu Ylonen.  See file LICENSE and https://ylonen.org

import enum
from typing import NamedTuple, Optional


@enum.unique
class TokenKind(enum.Enum):
    """Kinds of tokens produced by the tokenizer."""

    # Run of non-whitespace characters.  Payload is in Token.text.
    TEXT = enum.auto()

    # Line terminator.  Payload is "\n".
    NEWLINE = enum.auto()

    # Bold and italic toggles (''' and '')
    BOLD = enum.auto()
    ITALICS = enum.auto()

    # Bold italic ('''''); parsed as literal text
    BOLD_ITALICS = enum.auto()

    # Template call {{...}} and template argument {{{...}}} delimiters
    TEMPLATE_OPEN = enum.auto()
    TEMPLATE_CLOSE = enum.auto()
    TEMPLATE_ARG_OPEN = enum.auto()
    TEMPLATE_ARG_CLOSE = enum.auto()

    # Argument separator |
    PIPE = enum.auto()

    # Internal link [[...]]
    LINK_OPEN = enum.auto()
    LINK_CLOSE = enum.auto()

    # External link [...]
    WEBLINK_OPEN = enum.auto()
    WEBLINK_CLOSE = enum.auto()

    # HTML-like tag delimiters < </ > and attribute syntax = "
    ANGLE_OPEN = enum.auto()
    ANGLE_OPEN_SLASH = enum.auto()
    ANGLE_CLOSE = enum.auto()
    EQUALS = enum.auto()
    DOUBLE_QUOTE = enum.auto()


# Maps each markup literal to its token kind
_markup_map: dict[str, TokenKind] = {
    "''": TokenKind.ITALICS,
    "'''": TokenKind.BOLD,
    "'''''": TokenKind.BOLD_ITALICS,
    "{{": TokenKind.TEMPLATE_OPEN,
    "}}": TokenKind.TEMPLATE_CLOSE,
    "{{{": TokenKind.TEMPLATE_ARG_OPEN,
    "}}}": TokenKind.TEMPLATE_ARG_CLOSE,
    "|": TokenKind.PIPE,
    "[[": TokenKind.LINK_OPEN,
    "]]": TokenKind.LINK_CLOSE,
    "[": TokenKind.WEBLINK_OPEN,
    "]": TokenKind.WEBLINK_CLOSE,
    "<": TokenKind.ANGLE_OPEN,
    "</": TokenKind.ANGLE_OPEN_SLASH,
    ">": TokenKind.ANGLE_CLOSE,
    "=": TokenKind.EQUALS,
    '"': TokenKind.DOUBLE_QUOTE,
}

# The markup table, longest literal first.  Matching walks this in order,
# so when one literal is a prefix of another the longer one wins.  sorted()
# is stable, so literals of equal length keep the order above (two literals
# of equal length can never both match at the same position anyway).
MARKUP_TABLE: tuple[tuple[str, TokenKind], ...] = tuple(
    sorted(_markup_map.items(), key=lambda x: len(x[0]), reverse=True)
)

# Number of characters of lookahead needed to match any literal
MAX_MARKUP_LENGTH: int = len(MARKUP_TABLE[0][0])

# Literal text for each markup token kind, plus the newline
KIND_TO_LITERAL: dict[TokenKind, str] = {v: k for k, v in _markup_map.items()}
KIND_TO_LITERAL[TokenKind.NEWLINE] = "\n"


class Token(NamedTuple):
    """A token from the tokenizer.  Only TEXT and NEWLINE tokens carry
    text; markup tokens are identified by their kind alone."""

    kind: TokenKind
    text: Optional[str] = None

    @property
    def literal(self) -> str:
        """Returns the source text of the token."""
        if self.text is not None:
            return self.text
        return KIND_TO_LITERAL[self.kind]

    def __repr__(self) -> str:
        if self.kind == TokenKind.TEXT:
            return "Token({!r})".format(self.text)
        return "Token(:{})".format(self.kind.name)


def match_markup(lookahead: str) -> Optional[tuple[str, TokenKind]]:
    """Returns the (literal, kind) table entry for the longest markup
    literal that ``lookahead`` starts with, or None if there is none.
    ``lookahead`` should hold the upcoming input, at least
    MAX_MARKUP_LENGTH characters unless the input ends sooner."""
    assert isinstance(lookahead, str)
    for literal, kind in MARKUP_TABLE:
        if lookahead.startswith(literal):
            return literal, kind
    return None
