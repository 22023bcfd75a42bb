# Parsing context for WikiText parsing and the top-level parse functions
#
# Copyright (c) 2020-2022 Tatu Ylonen.  See file LICENSE and https://ylonen.org

from dataclasses import dataclass, field
from typing import Optional, TextIO, TypedDict, Union

from .logging_utils import logger
from .parser import Tree, WikiNode, process_tokens
from .source import CharSource
from .tokenizer import Tokenizer


class ErrorMessageData(TypedDict):
    msg: str
    trace: str
    title: str
    called_from: str
    loc: int


class CollatedErrorReturnData(TypedDict):
    errors: list[ErrorMessageData]
    warnings: list[ErrorMessageData]
    debugs: list[ErrorMessageData]


class ParseContext:
    """State for parsing one document: the tree being built, the current
    node (the cursor), the current line number and collected errors,
    warnings and debug messages.  A new context is created for every
    parse."""

    def __init__(self, title: Optional[str] = None) -> None:
        self.title = title
        self.tree = Tree()
        self.current = 0
        self.linenum = 1
        self.errors: list[ErrorMessageData] = []
        self.warnings: list[ErrorMessageData] = []
        self.debugs: list[ErrorMessageData] = []

    def _fmt_errmsg(self, kind: str, msg: str, trace: Optional[str]) -> str:
        loc = "{}:{}".format(self.title or "<input>", self.linenum)
        if trace:
            msg += "\n" + trace
        return "{}: {}: {}".format(loc, kind, msg)

    def _save_msg(
        self,
        messages: list[ErrorMessageData],
        msg: str,
        trace: Optional[str],
        sortid: str,
    ) -> None:
        assert isinstance(msg, str)
        assert isinstance(trace, (str, type(None)))
        assert isinstance(sortid, str)
        # sortid is a static string used to sort messages into buckets
        # based on where they have been called from.
        messages.append(
            {
                "msg": msg,
                "trace": trace or "",
                "title": self.title or "",
                "called_from": sortid,
                "loc": self.linenum,
            }
        )

    def error(
        self, msg: str, trace: Optional[str] = None, sortid="XYZunsorted"
    ) -> None:
        """Logs an error message.  The error is also saved in
        self.errors."""
        self._save_msg(self.errors, msg, trace, sortid)
        logger.error(self._fmt_errmsg("ERROR", msg, trace))

    def warning(
        self, msg: str, trace: Optional[str] = None, sortid="XYZunsorted"
    ) -> None:
        """Logs a warning message.  The warning is also saved in
        self.warnings."""
        self._save_msg(self.warnings, msg, trace, sortid)
        logger.warning(self._fmt_errmsg("WARNING", msg, trace))

    def debug(
        self, msg: str, trace: Optional[str] = None, sortid="XYZunsorted"
    ) -> None:
        """Logs a debug message.  The message is also saved in
        self.debugs."""
        self._save_msg(self.debugs, msg, trace, sortid)
        logger.debug(self._fmt_errmsg("DEBUG", msg, trace))

    def to_return(self) -> CollatedErrorReturnData:
        """Returns a dictionary with errors, warnings, and debug messages
        from the context.  The value returned by this function is
        JSON-compatible."""
        return {
            "errors": self.errors,
            "warnings": self.warnings,
            "debugs": self.debugs,
        }


@dataclass
class ParseResult:
    """Result of parsing a document.  ``cursor`` is the index of the node
    that was current when the input ended; it is the root unless some
    markup span was left open."""

    tree: Tree
    cursor: int
    errors: list[ErrorMessageData] = field(default_factory=list)
    warnings: list[ErrorMessageData] = field(default_factory=list)
    debugs: list[ErrorMessageData] = field(default_factory=list)

    @property
    def root(self) -> WikiNode:
        return self.tree.root

    def to_return(self) -> CollatedErrorReturnData:
        return {
            "errors": self.errors,
            "warnings": self.warnings,
            "debugs": self.debugs,
        }


def parse(
    stream: Union[CharSource, TextIO, str], title: Optional[str] = None
) -> ParseResult:
    """Parses WikiText read from ``stream`` (a text stream, a string, or a
    CharSource) into a parse tree.  ``title`` is only used to identify the
    document in diagnostics.  Errors raised while reading the stream are
    propagated to the caller."""
    ctx = ParseContext(title)
    tokenizer = Tokenizer(stream)
    logger.debug("parsing {}".format(title or "<input>"))
    process_tokens(ctx, tokenizer)
    logger.debug(
        "parsed {}: {} nodes, {} warnings".format(
            title or "<input>", len(ctx.tree), len(ctx.warnings)
        )
    )
    return ParseResult(
        tree=ctx.tree,
        cursor=ctx.current,
        errors=ctx.errors,
        warnings=ctx.warnings,
        debugs=ctx.debugs,
    )


def parse_text(text: str, title: Optional[str] = None) -> ParseResult:
    """Parses the given text into a parse tree."""
    assert isinstance(text, str)
    return parse(CharSource(text), title)
