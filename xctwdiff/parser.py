# -*- coding: utf-8 -*-
"""
XCTest prints failed equality assertions like this:

    XCTAssertEqual failed: ("foo") is not equal to ("bar") - message

Everything between the fixed literals is taken verbatim, no unescaping.
"""
from collections import namedtuple

from xctwdiff.wrapper import ParseError

PREFIX = 'XCTAssertEqual failed: ("'
MIDDLE = '") is not equal to ("'
SUFFIX = '") - '

ComparisonPair = namedtuple('ComparisonPair', ['left', 'right'])


def read_all_input(stream):
    """
        joins all physical lines of ``stream`` without separators
    """
    lines = []
    for line in stream:
        if line.endswith('\n'):
            line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
        lines.append(line)
    return ''.join(lines)


def split_failure(failure):
    if not failure.startswith(PREFIX):
        raise ParseError('expected prefix not found', reason=ParseError.MISSING_PREFIX)

    if MIDDLE not in failure:
        raise ParseError('expected middle not found', reason=ParseError.MISSING_MIDDLE)

    body = failure[len(PREFIX):]
    middle = body.find(MIDDLE)
    #first suffix after the middle ends the right value, assertion message is dropped
    end = body.find(SUFFIX, middle + len(MIDDLE) if middle != -1 else 0)
    if end == -1:
        raise ParseError('expected suffix not found', reason=ParseError.MISSING_SUFFIX)

    components = body[:end].split(MIDDLE)
    if len(components) != 2:
        raise ParseError('Found %d components when split, expected 2' % len(components),
            reason=ParseError.UNEXPECTED_SEGMENT_COUNT, count=len(components))

    return ComparisonPair(left=components[0], right=components[1])
