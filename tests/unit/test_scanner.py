# Copyright 2016 DataStax, Inc.

import unittest

from geosystems.scanner import scan, tokenize, WKTSyntaxError, MAX_DEPTH, WORD, NUMBER, LPAREN, RPAREN, COMMA
from geosystems.util import Point


class TokenizeTest(unittest.TestCase):

    def test_tokens(self):
        kinds = [kind for kind, _, _ in tokenize("POLYGON ((30 10, -4.5 1e3))")]
        self.assertEqual(kinds, [WORD, LPAREN, LPAREN, NUMBER, NUMBER, COMMA, NUMBER, NUMBER, RPAREN, RPAREN])

    def test_numbers(self):
        values = [value for kind, value, _ in tokenize("30 -4.5 1e3 .5 +2 7.") if kind == NUMBER]
        self.assertEqual(values, [30.0, -4.5, 1000.0, 0.5, 2.0, 7.0])

    def test_whitespace_and_line_breaks_skipped(self):
        tokens = list(tokenize("POLYGON\r\n(\t(1 2)\n)"))
        self.assertEqual(len(tokens), 7)

    def test_unexpected_character(self):
        with self.assertRaises(WKTSyntaxError) as cm:
            list(tokenize("POLYGON((1 2; 3 4))"))
        self.assertEqual(cm.exception.position, 12)
        self.assertIsInstance(cm.exception, ValueError)


class ScanTest(unittest.TestCase):

    def test_two_levels(self):
        keyword, body = scan("POLYGON((30 10, 40 40, 30 10), (1 2, 3 4, 1 2))")
        self.assertEqual(keyword, "POLYGON")
        self.assertEqual(body, [[Point(30, 10), Point(40, 40), Point(30, 10)],
                                [Point(1, 2), Point(3, 4), Point(1, 2)]])

    def test_three_levels(self):
        keyword, body = scan("MULTIPOLYGON (((1 2, 3 4, 1 2)), ((5 6, 7 8, 5 6)))")
        self.assertEqual(keyword, "MULTIPOLYGON")
        self.assertEqual(len(body), 2)
        self.assertEqual(body[1], [[Point(5, 6), Point(7, 8), Point(5, 6)]])

    def test_depth_agnostic(self):
        # the scanner does not judge whether the depth suits the keyword
        keyword, body = scan("POLYGON((((1 2))))")
        self.assertEqual(keyword, "POLYGON")
        self.assertEqual(body, [[[[Point(1, 2)]]]])

    def test_keyword_without_body(self):
        self.assertEqual(scan("MULTIPOLYGON EMPTY"), ("MULTIPOLYGON EMPTY", None))
        self.assertEqual(scan("  GEOMETRYCOLLECTION   EMPTY "), ("GEOMETRYCOLLECTION EMPTY", None))

    def test_empty_groups(self):
        self.assertEqual(scan("MULTIPOLYGON(())"), ("MULTIPOLYGON", [[]]))
        self.assertEqual(scan("POLYGON()"), ("POLYGON", []))

    def test_depth_limit(self):
        keyword, body = scan("POLYGON" + "(" * MAX_DEPTH + ")" * MAX_DEPTH)
        self.assertEqual(keyword, "POLYGON")
        with self.assertRaises(WKTSyntaxError):
            scan("POLYGON" + "(" * (MAX_DEPTH + 1) + ")" * (MAX_DEPTH + 1))
        with self.assertRaises(WKTSyntaxError):
            scan("POLYGON" + "(" * 5000 + ")" * 5000)

    def test_errors(self):
        for text in ("",
                     "((1 2))",
                     "POLYGON((1 2)",
                     "POLYGON((1 2)))",
                     "POLYGON((1 2)) extra",
                     "POLYGON((1 2 3))",
                     "POLYGON((1))",
                     "POLYGON((1 2, (3 4)))",
                     "POLYGON(((1 2)), 3 4)",
                     "POLYGON((1 2,))",
                     "POLYGON((a b))"):
            with self.assertRaises(WKTSyntaxError):
                scan(text)
