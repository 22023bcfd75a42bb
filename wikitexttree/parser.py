# Tree builder for tokenized WikiMedia markup (WikiText)
#
# Copyright (c) 2020-2022 Tatu Ylonen.  See file LICENSE and https://ylonen.org

import enum
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Callable, Optional

from .markup import Token, TokenKind

if TYPE_CHECKING:
    from .core import ParseContext


@enum.unique
class NodeKind(enum.Flag):
    """Node types in the parse tree."""

    # Root node of the tree.  This represents the parsed document.  It has
    # no parent and is never closed.
    ROOT = enum.auto()

    # Plain text.  The text is in WikiNode.text; never has children.  Also
    # used for newlines and for delimiters that have no structure of
    # their own, such as "{{" or "|".
    TEXT = enum.auto()

    # Content to be rendered in bold.  Content is in children.
    BOLD = enum.auto()

    # Content to be rendered in italics.  Content is in children.
    ITALICS = enum.auto()

    # An internal link (marked with [[...]]).  Content is in children.
    LINK = enum.auto()

    # An external link (marked with [...]).  Content is in children.
    WEBLINK = enum.auto()


# Node kinds that are opened and closed by markup
STRUCTURAL_KIND_FLAGS = (
    NodeKind.BOLD | NodeKind.ITALICS | NodeKind.LINK | NodeKind.WEBLINK
)


class WikiNode:
    """Node in the parse tree.  Nodes live in a Tree and refer to their
    parent and children by index into the tree's node list."""

    __slots__ = ("kind", "index", "parent", "children", "text", "loc")

    def __init__(
        self,
        kind: NodeKind,
        index: int,
        parent: Optional[int],
        loc: int,
        text: Optional[str] = None,
    ) -> None:
        assert isinstance(kind, NodeKind)
        assert (text is not None) == (kind == NodeKind.TEXT)
        self.kind = kind
        self.index = index
        self.parent = parent
        self.children: list[int] = []
        self.text = text
        self.loc = loc  # line number, used for debugging

    def __str__(self) -> str:
        if self.kind == NodeKind.TEXT:
            return "<TEXT {!r}>".format(self.text)
        return "<{} #{} {}>".format(self.kind.name, self.index, self.children)

    def __repr__(self) -> str:
        return self.__str__()


class Tree:
    """Parse tree stored as a list of nodes.  The root node is at index 0.
    Nodes are only ever appended; they are never removed or moved."""

    __slots__ = ("nodes",)

    def __init__(self) -> None:
        self.nodes: list[WikiNode] = [WikiNode(NodeKind.ROOT, 0, None, 1)]

    @property
    def root(self) -> WikiNode:
        return self.nodes[0]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> WikiNode:
        return self.nodes[index]

    def __iter__(self) -> Iterator[WikiNode]:
        return iter(self.nodes)

    def add_node(
        self,
        parent: int,
        kind: NodeKind,
        loc: int,
        text: Optional[str] = None,
    ) -> WikiNode:
        """Creates a new node as the last child of ``parent``."""
        parent_node = self.nodes[parent]
        assert parent_node.kind != NodeKind.TEXT
        node = WikiNode(kind, len(self.nodes), parent, loc, text)
        self.nodes.append(node)
        parent_node.children.append(node.index)
        return node

    def children(self, node: WikiNode) -> list[WikiNode]:
        return [self.nodes[i] for i in node.children]

    def parent(self, node: WikiNode) -> Optional[WikiNode]:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def ancestors(self, node: WikiNode) -> Iterator[WikiNode]:
        """Yields ``node`` and then each of its ancestors up to the root."""
        cur: Optional[WikiNode] = node
        while cur is not None:
            yield cur
            cur = self.parent(cur)

    def find_child(
        self, node: WikiNode, target_kinds: NodeKind
    ) -> Iterator[WikiNode]:
        """Yields direct children of ``node`` whose kind is in
        ``target_kinds``, which may combine several kinds with "|"."""
        for child in self.children(node):
            if child.kind in target_kinds:
                yield child

    def find_child_recursively(
        self, node: WikiNode, target_kinds: NodeKind
    ) -> Iterator[WikiNode]:
        # Like find_child(), but also searches nested nodes (document order)
        stack = list(reversed(node.children))
        while stack:
            child = self.nodes[stack.pop()]
            if child.kind in target_kinds:
                yield child
            stack.extend(reversed(child.children))

    def texts(self, node: WikiNode) -> list[str]:
        """Returns the texts of the TEXT nodes under ``node``, in document
        order."""
        return [
            x.text or ""
            for x in self.find_child_recursively(node, NodeKind.TEXT)
        ]


def _parser_find_open(ctx: "ParseContext", kind: NodeKind) -> Optional[int]:
    """Returns the index of the nearest node of the given kind on the path
    from the current node up to (but not including) the root, or None if
    there is no such node."""
    tree = ctx.tree
    idx: Optional[int] = ctx.current
    while idx is not None:
        node = tree[idx]
        if node.kind == NodeKind.ROOT:
            break
        if node.kind == kind:
            return idx
        idx = node.parent
    return None


def _parser_push(ctx: "ParseContext", kind: NodeKind) -> WikiNode:
    """Opens a new node of the specified kind under the current node and
    makes it the current node."""
    assert kind in STRUCTURAL_KIND_FLAGS
    node = ctx.tree.add_node(ctx.current, kind, ctx.linenum)
    ctx.current = node.index
    return node


def _parser_close(ctx: "ParseContext", idx: int) -> None:
    """Closes the node at ``idx``: its parent becomes the current node.
    Anything opened inside it and not yet closed is left unclosed."""
    parent = ctx.tree[idx].parent
    assert parent is not None
    ctx.current = parent


def toggle_fn(ctx: "ParseContext", kind: NodeKind) -> None:
    """Closes the nearest open node of ``kind``, or opens a new one if
    none is open."""
    idx = _parser_find_open(ctx, kind)
    if idx is None:
        _parser_push(ctx, kind)
    else:
        _parser_close(ctx, idx)


def text_fn(ctx: "ParseContext", token: Token) -> None:
    """Inserts the token as text into the parse tree.  Markup tokens that
    have no structural meaning are inserted as their literal text."""
    ctx.tree.add_node(ctx.current, NodeKind.TEXT, ctx.linenum, token.literal)
    if token.kind == TokenKind.NEWLINE:
        ctx.linenum += 1


def bold_fn(ctx: "ParseContext", token: Token) -> None:
    """Processes a bold start/end token (''')."""
    toggle_fn(ctx, NodeKind.BOLD)


def italic_fn(ctx: "ParseContext", token: Token) -> None:
    """Processes an italic start/end token ('')."""
    toggle_fn(ctx, NodeKind.ITALICS)


def link_open_fn(ctx: "ParseContext", token: Token) -> None:
    """Processes an internal link start token ([[)."""
    _parser_push(ctx, NodeKind.LINK)


def weblink_open_fn(ctx: "ParseContext", token: Token) -> None:
    """Processes an external link start token ([)."""
    _parser_push(ctx, NodeKind.WEBLINK)


def _close_bracket(ctx: "ParseContext", kind: NodeKind, token: Token) -> None:
    idx = _parser_find_open(ctx, kind)
    if idx is None:
        ctx.warning(
            "mismatched {!r}: no open {} to close".format(
                token.literal, kind.name
            ),
            sortid="parser/{}".format(token.kind.name.lower()),
        )
        return
    _parser_close(ctx, idx)


def link_close_fn(ctx: "ParseContext", token: Token) -> None:
    """Processes an internal link end token (]])."""
    _close_bracket(ctx, NodeKind.LINK, token)


def weblink_close_fn(ctx: "ParseContext", token: Token) -> None:
    """Processes an external link end token (])."""
    _close_bracket(ctx, NodeKind.WEBLINK, token)


# Maps token kinds to their handler functions.  Token kinds not listed here
# are inserted as text with text_fn().
tokenops: dict[TokenKind, Callable[["ParseContext", Token], None]] = {
    TokenKind.BOLD: bold_fn,
    TokenKind.ITALICS: italic_fn,
    TokenKind.LINK_OPEN: link_open_fn,
    TokenKind.LINK_CLOSE: link_close_fn,
    TokenKind.WEBLINK_OPEN: weblink_open_fn,
    TokenKind.WEBLINK_CLOSE: weblink_close_fn,
}


def process_tokens(ctx: "ParseContext", tokens: Iterable[Token]) -> None:
    """Processes each token in sequence, building the parse tree in
    ``ctx.tree``.  Nodes still open at the end are left as they are."""
    for token in tokens:
        tokenops.get(token.kind, text_fn)(ctx, token)
