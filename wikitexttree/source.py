# Character source with bounded lookahead, read by the tokenizer
#
# Copyright (c) 2020-2022 Tatu Ylonen.  See file LICENSE and https://ylonen.org

import io
from collections import deque
from typing import Optional, TextIO, Union

from .markup import MAX_MARKUP_LENGTH


class CharSource:
    """Sequential character reader over a text stream or a string.  This
    supports reading one character at a time plus a bounded mark/reset,
    which is what the tokenizer needs for non-destructive matching of
    markup literals.  Errors from the underlying stream are not caught."""

    __slots__ = ("stream", "readahead", "pos", "_pending", "_marked")

    def __init__(
        self, stream: Union[TextIO, str], readahead: int = MAX_MARKUP_LENGTH
    ) -> None:
        assert isinstance(readahead, int) and readahead > 0
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self.stream = stream
        self.readahead = readahead
        # Number of characters consumed so far
        self.pos = 0
        # Characters pushed back by reset(), to be read again
        self._pending: deque[str] = deque()
        # Characters read since mark(), or None if there is no valid mark
        self._marked: Optional[list[str]] = None

    def read(self) -> str:
        """Reads one character.  Returns "" at the end of the stream."""
        if self._pending:
            ch = self._pending.popleft()
        else:
            ch = self.stream.read(1)
            if not ch:
                return ""
        self.pos += 1
        if self._marked is not None:
            if len(self._marked) >= self.readahead:
                # Read past the bound; the mark can no longer be honored
                self._marked = None
            else:
                self._marked.append(ch)
        return ch

    def mark(self) -> None:
        """Remembers the current position so that reset() can return to it.
        At most ``readahead`` characters may be read before reset()."""
        self._marked = []

    def reset(self) -> None:
        """Moves back to the position of the last mark()."""
        if self._marked is None:
            raise ValueError("reset() without a valid mark")
        self._pending.extendleft(reversed(self._marked))
        self.pos -= len(self._marked)
        self._marked = None

    def peek(self, n: int) -> str:
        """Returns up to ``n`` upcoming characters without consuming them.
        Fewer are returned only at the end of the stream."""
        assert 0 < n <= self.readahead
        self.mark()
        try:
            parts = []
            for _ in range(n):
                ch = self.read()
                if not ch:
                    break
                parts.append(ch)
        finally:
            self.reset()
        return "".join(parts)

    def skip(self, n: int) -> None:
        """Consumes ``n`` characters."""
        for _ in range(n):
            if not self.read():
                break
