# Tests for the markup table
#
# Copyright (c) 2020-2022 Tatu Ylonen.  See file LICENSE and https://ylonen.org

import unittest

from wikitexttree.markup import (
    KIND_TO_LITERAL,
    MARKUP_TABLE,
    MAX_MARKUP_LENGTH,
    Token,
    TokenKind,
    match_markup,
)


class MarkupTests(unittest.TestCase):
    def test_table_order(self):
        lengths = [len(literal) for literal, _ in MARKUP_TABLE]
        self.assertEqual(lengths, sorted(lengths, reverse=True))
        self.assertEqual(MAX_MARKUP_LENGTH, 5)

    def test_table_complete(self):
        kinds = set(kind for _, kind in MARKUP_TABLE)
        self.assertEqual(len(MARKUP_TABLE), 17)
        self.assertEqual(len(kinds), 17)
        self.assertNotIn(TokenKind.TEXT, kinds)
        self.assertNotIn(TokenKind.NEWLINE, kinds)

    def test_table_immutable(self):
        self.assertIsInstance(MARKUP_TABLE, tuple)

    def test_match_longest_quotes(self):
        self.assertEqual(
            match_markup("'''''"), ("'''''", TokenKind.BOLD_ITALICS)
        )
        self.assertEqual(match_markup("''''x"), ("'''", TokenKind.BOLD))
        self.assertEqual(match_markup("''x"), ("''", TokenKind.ITALICS))

    def test_match_longest_braces(self):
        self.assertEqual(
            match_markup("{{{{"), ("{{{", TokenKind.TEMPLATE_ARG_OPEN)
        )
        self.assertEqual(match_markup("{{x"), ("{{", TokenKind.TEMPLATE_OPEN))
        self.assertEqual(
            match_markup("}}}"), ("}}}", TokenKind.TEMPLATE_ARG_CLOSE)
        )
        self.assertEqual(match_markup("}}"), ("}}", TokenKind.TEMPLATE_CLOSE))

    def test_match_longest_brackets(self):
        self.assertEqual(match_markup("[[a"), ("[[", TokenKind.LINK_OPEN))
        self.assertEqual(match_markup("[a"), ("[", TokenKind.WEBLINK_OPEN))
        self.assertEqual(match_markup("]]]"), ("]]", TokenKind.LINK_CLOSE))
        self.assertEqual(match_markup("]"), ("]", TokenKind.WEBLINK_CLOSE))

    def test_match_angles(self):
        self.assertEqual(
            match_markup("</b>"), ("</", TokenKind.ANGLE_OPEN_SLASH)
        )
        self.assertEqual(match_markup("<b>"), ("<", TokenKind.ANGLE_OPEN))
        self.assertEqual(match_markup(">"), (">", TokenKind.ANGLE_CLOSE))

    def test_match_single(self):
        self.assertEqual(match_markup("|"), ("|", TokenKind.PIPE))
        self.assertEqual(match_markup("="), ("=", TokenKind.EQUALS))
        self.assertEqual(match_markup('"'), ('"', TokenKind.DOUBLE_QUOTE))

    def test_no_match(self):
        self.assertIsNone(match_markup(""))
        self.assertIsNone(match_markup("x''"))
        self.assertIsNone(match_markup("'x"))
        self.assertIsNone(match_markup("{x"))

    def test_token_literal(self):
        self.assertEqual(Token(TokenKind.TEXT, "foo").literal, "foo")
        self.assertEqual(Token(TokenKind.NEWLINE, "\n").literal, "\n")
        self.assertEqual(Token(TokenKind.TEMPLATE_OPEN).literal, "{{")
        self.assertEqual(Token(TokenKind.PIPE).literal, "|")
        self.assertEqual(KIND_TO_LITERAL[TokenKind.BOLD_ITALICS], "'''''")

    def test_token_equality(self):
        self.assertEqual(Token(TokenKind.BOLD), Token(TokenKind.BOLD))
        self.assertIsNone(Token(TokenKind.BOLD).text)
        self.assertNotEqual(
            Token(TokenKind.TEXT, "a"), Token(TokenKind.TEXT, "b")
        )
