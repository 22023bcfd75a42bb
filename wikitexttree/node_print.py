# Printing parse trees as indented text and converting them back to Wikitext
#
# Copyright (c) 2020-2022 Tatu Ylonen.  See file LICENSE and https://ylonen.org

import sys
from typing import Optional, TextIO

from .parser import NodeKind, Tree, WikiNode

# Delimiters written around each structural node by to_wikitext()
kind_to_delims: dict[NodeKind, tuple[str, str]] = {
    NodeKind.BOLD: ("'''", "'''"),
    NodeKind.ITALICS: ("''", "''"),
    NodeKind.LINK: ("[[", "]]"),
    NodeKind.WEBLINK: ("[", "]"),
}


def format_tree(
    tree: Tree, node: Optional[WikiNode] = None, indent: int = 2
) -> str:
    """Formats the parse tree (or the subtree under ``node``) for
    debugging.  Each structural node is shown by its kind name and each
    text node by its text, indented ``indent`` spaces per level.  The tree
    is walked with an explicit stack, so deeply nested markup does not
    hit the recursion limit."""
    assert isinstance(indent, int)
    if node is None:
        node = tree.root
    parts: list[str] = []
    stack: list[tuple[int, int]] = [(node.index, 0)]
    while stack:
        idx, depth = stack.pop()
        x = tree[idx]
        prefix = " " * (indent * depth)
        if x.kind == NodeKind.TEXT:
            parts.append(prefix + (x.text or ""))
            continue
        parts.append(prefix + x.kind.name)
        for child in reversed(x.children):
            stack.append((child, depth + 1))
    return "\n".join(parts)


def print_tree(
    tree: Tree,
    node: Optional[WikiNode] = None,
    indent: int = 2,
    file: Optional[TextIO] = None,
) -> None:
    """Prints the parse tree for debugging purposes."""
    print(format_tree(tree, node, indent), file=file or sys.stdout)


def to_wikitext(tree: Tree, node: Optional[WikiNode] = None) -> str:
    """Converts a parse tree (or subtree) back to Wikitext.  Every bold,
    italics and link node is written with both its delimiters, even if it
    was not closed in the input.  Whitespace other than newlines was
    dropped by the tokenizer; siblings are separated by a single space
    except next to a newline."""
    if node is None:
        node = tree.root
    parts: list[str] = []
    # Stack items are node indexes, or closing delimiter strings to emit
    stack: list[object] = [node.index]
    prev_newline = True
    first_in_span = True
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            first_in_span = False
            prev_newline = False
            continue
        assert isinstance(item, int)
        x = tree[item]
        if x.kind == NodeKind.ROOT:
            stack.extend(reversed(x.children))
            continue
        is_newline = x.kind == NodeKind.TEXT and x.text == "\n"
        if not (first_in_span or prev_newline or is_newline):
            parts.append(" ")
        if x.kind == NodeKind.TEXT:
            parts.append(x.text or "")
            first_in_span = False
            prev_newline = is_newline
            continue
        start, end = kind_to_delims[x.kind]
        parts.append(start)
        stack.append(end)
        stack.extend(reversed(x.children))
        first_in_span = True
        prev_newline = False
    return "".join(parts)
