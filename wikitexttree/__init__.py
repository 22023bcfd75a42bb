from .core import ParseContext, ParseResult, parse, parse_text
from .markup import MARKUP_TABLE, Token, TokenKind, match_markup
from .node_print import format_tree, print_tree, to_wikitext
from .parser import NodeKind, Tree, WikiNode
from .source import CharSource
from .tokenizer import Tokenizer, token_iter

__all__ = (
    "parse",
    "parse_text",
    "ParseContext",
    "ParseResult",
    "CharSource",
    "Tokenizer",
    "token_iter",
    "Token",
    "TokenKind",
    "MARKUP_TABLE",
    "match_markup",
    "NodeKind",
    "Tree",
    "WikiNode",
    "format_tree",
    "print_tree",
    "to_wikitext",
)
