# Copyright 2016 DataStax, Inc.
#
# Licensed under the DataStax DSE Driver License;
# you may not use this file except in compliance with the License.
#
# You may obtain a copy of the License at
#
# http://www.datastax.com/terms/datastax-dse-driver-license-terms
"""
Turns WKT text into a leading keyword plus the nested structure found between its parentheses.

The scanner knows nothing about geometry types. ``MULTIPOLYGON (((1 2, 3 4)))`` and
``POLYGON ((1 2, 3 4))`` both scan fine; it is up to the caller to decide whether the
nesting depth it got back makes sense for the keyword.
"""

import re

from geosystems.util import Point

WORD = 'WORD'
NUMBER = 'NUMBER'
LPAREN = 'LPAREN'
RPAREN = 'RPAREN'
COMMA = 'COMMA'

# (token kind, pattern); order matters, NUMBER must be tried before WORD for exponents
_token_spec = (
    (NUMBER, r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'),
    (WORD, r'[A-Za-z_]+'),
    (LPAREN, r'\('),
    (RPAREN, r'\)'),
    (COMMA, r','),
    ('SKIP', r'\s+'),
    ('MISMATCH', r'.'),
)

_token_re = re.compile('|'.join('(?P<%s>%s)' % pair for pair in _token_spec), re.DOTALL)

MAX_DEPTH = 32
"""
Deepest parenthesis nesting accepted by :func:`scan`. Polygon text never needs more than three levels.
"""


class WKTSyntaxError(ValueError):
    """
    Raised by the scanner when the text cannot be tokenized or its parentheses do not nest.
    """

    def __init__(self, message, position=None):
        if position is not None:
            message = "%s (at position %d)" % (message, position)
        super(WKTSyntaxError, self).__init__(message)
        self.position = position


def tokenize(text):
    """
    Yields ``(kind, value, position)`` tuples. Whitespace, including line breaks, is dropped.
    """
    for match in _token_re.finditer(text):
        kind = match.lastgroup
        value = match.group()
        if kind == 'SKIP':
            continue
        if kind == 'MISMATCH':
            raise WKTSyntaxError("Unexpected character %r" % (value,), match.start())
        if kind == NUMBER:
            value = float(value)
        yield kind, value, match.start()


class _TokenStream(object):

    def __init__(self, tokens):
        self._tokens = list(tokens)
        self._index = 0

    def peek(self):
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None, None, None

    def next(self):
        token = self.peek()
        if token[0] is None:
            raise WKTSyntaxError("Unexpected end of text")
        self._index += 1
        return token

    def expect(self, kind):
        token_kind, value, position = self.next()
        if token_kind != kind:
            raise WKTSyntaxError("Expected %s, found %r" % (kind, value), position)
        return value

    @property
    def exhausted(self):
        return self._index >= len(self._tokens)


def scan(text):
    """
    Returns ``(keyword, body)``.

    ``keyword`` is the run of words before the first parenthesis joined by single spaces, as
    written (``"POLYGON"``, ``"MULTIPOLYGON EMPTY"``). ``body`` is ``None`` when no parenthesised
    group follows, else a nested list in which each innermost group is a list of :class:`.Point`.

    Raises :class:`.WKTSyntaxError` on anything that does not scan.
    """
    stream = _TokenStream(tokenize(text))

    words = []
    while stream.peek()[0] == WORD:
        words.append(stream.next()[1])
    if not words:
        raise WKTSyntaxError("Missing geometry keyword", stream.peek()[2])
    keyword = ' '.join(words)

    if stream.exhausted:
        return keyword, None

    body = _scan_group(stream)
    if not stream.exhausted:
        _, value, position = stream.peek()
        raise WKTSyntaxError("Unexpected trailing %r" % (value,), position)

    return keyword, body


def _scan_group(stream, depth=1):
    position = stream.peek()[2]
    stream.expect(LPAREN)
    if depth > MAX_DEPTH:
        raise WKTSyntaxError("Parentheses nested deeper than %d levels" % (MAX_DEPTH,), position)
    kind = stream.peek()[0]

    if kind == RPAREN:
        stream.next()
        return []

    if kind == LPAREN:
        def scan_item(s):
            return _scan_group(s, depth + 1)
    else:
        scan_item = _scan_coordinate

    items = [scan_item(stream)]
    while stream.peek()[0] == COMMA:
        stream.next()
        items.append(scan_item(stream))

    stream.expect(RPAREN)
    return items


def _scan_coordinate(stream):
    x = stream.expect(NUMBER)
    y = stream.expect(NUMBER)
    kind, value, position = stream.peek()
    if kind == NUMBER:
        raise WKTSyntaxError("Only 2D coordinates are supported, found extra ordinate %r" % (value,), position)
    return Point(x, y)
