# Tokenizer for WikiMedia markup (WikiText)
#
# Copyright (c) 2020-2022 Tatu Ylonen.  See file LICENSE and https://ylonen.org

from collections import deque
from collections.abc import Iterator
from typing import Optional, TextIO, Union

from .markup import MAX_MARKUP_LENGTH, Token, TokenKind, match_markup
from .source import CharSource

# Non-breaking spaces are part of words, not separators between them
NON_BREAKING_SPACES = "\u00a0\u2007\u202f"


def is_separator(ch: str) -> bool:
    """Returns True if ``ch`` is whitespace that ends a text run."""
    return ch.isspace() and ch not in NON_BREAKING_SPACES


class Tokenizer:
    """Splits a character stream into tokens.  Markup literals are matched
    greedily, longest first, against the markup table.  Everything else is
    collected into TEXT tokens, one per run of non-whitespace characters.
    Whitespace other than newlines is dropped; each newline becomes a
    NEWLINE token.

    All scanning state lives in the instance, so a new Tokenizer should be
    created for every stream that is parsed."""

    __slots__ = ("source", "eof", "queue", "_text")

    def __init__(self, source: Union[CharSource, TextIO, str]) -> None:
        if not isinstance(source, CharSource):
            source = CharSource(source)
        elif source.readahead < MAX_MARKUP_LENGTH:
            raise ValueError(
                "CharSource readahead {} is shorter than the longest markup "
                "literal ({})".format(source.readahead, MAX_MARKUP_LENGTH)
            )
        self.source = source
        self.eof = False
        # A single scan step may produce two tokens (flushed text followed
        # by markup), so tokens go through a queue.
        self.queue: deque[Token] = deque()
        self._text: list[str] = []

    def _flush_text(self) -> bool:
        """Queues accumulated text as a TEXT token.  Returns True if there
        was anything to queue."""
        if not self._text:
            return False
        self.queue.append(Token(TokenKind.TEXT, "".join(self._text)))
        self._text = []
        return True

    def produce_next_token(self) -> None:
        """Scans input until at least one token has been queued or the end
        of the input has been reached."""
        source = self.source
        while not self.eof:
            m = match_markup(source.peek(MAX_MARKUP_LENGTH))
            if m is not None:
                literal, kind = m
                self._flush_text()
                source.skip(len(literal))
                self.queue.append(Token(kind))
                return

            ch = source.read()
            if not ch:
                self._flush_text()
                self.eof = True
                return
            if ch == "\n":
                self._flush_text()
                self.queue.append(Token(TokenKind.NEWLINE, "\n"))
                return
            if is_separator(ch):
                if self._flush_text():
                    return
                continue
            self._text.append(ch)

    def next_token(self) -> Optional[Token]:
        """Returns the next token, or None when the input is exhausted."""
        while not self.queue:
            if self.eof:
                return None
            self.produce_next_token()
        return self.queue.popleft()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


def token_iter(stream: Union[CharSource, TextIO, str]) -> Iterator[Token]:
    """Tokenizes ``stream`` (a text stream, string or CharSource) and yields
    the tokens in order."""
    yield from Tokenizer(stream)
