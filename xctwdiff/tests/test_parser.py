# -*- coding: utf-8 -*-
import io
from unittest import TestCase

from xctwdiff.parser import ComparisonPair, read_all_input, split_failure
from xctwdiff.wrapper import ParseError

GOOD = 'XCTAssertEqual failed: ("foo") is not equal to ("bar") - msg'


class ParserTests(TestCase):
    def assertParseFails(self, failure, reason):
        with self.assertRaises(ParseError) as ctx:
            split_failure(failure)
        self.assertEqual(reason, ctx.exception.reason)
        return ctx.exception

    def test_split(self):
        self.assertEqual(ComparisonPair(left='foo', right='bar'), split_failure(GOOD))

    def test_split_empty_message(self):
        pair = split_failure('XCTAssertEqual failed: ("A") is not equal to ("B") - ')
        self.assertEqual(('A', 'B'), (pair.left, pair.right))

    def test_split_verbatim(self):
        pair = split_failure('XCTAssertEqual failed: ("he said "hi"") is not equal to ("a\\nb  c") - x')
        self.assertEqual('he said "hi"', pair.left)
        self.assertEqual('a\\nb  c', pair.right)

    def test_split_empty_values(self):
        self.assertEqual(('', ''), tuple(split_failure('XCTAssertEqual failed: ("") is not equal to ("") - ')))

    def test_split_message_mentions_suffix(self):
        pair = split_failure('XCTAssertEqual failed: ("a") is not equal to ("b") - see ") - here')
        self.assertEqual('a', pair.left)
        self.assertEqual('b', pair.right)

    def test_split_message_mentions_middle(self):
        pair = split_failure('XCTAssertEqual failed: ("a") is not equal to ("b") - x ") is not equal to ("')
        self.assertEqual(('a', 'b'), tuple(pair))

    def test_split_right_value_with_suffix_is_cut(self):
        #known limitation, first suffix after the middle ends the right value
        pair = split_failure('XCTAssertEqual failed: ("a") is not equal to ("b") - c") - msg')
        self.assertEqual('b', pair.right)

    def test_missing_prefix(self):
        e = self.assertParseFails('not a failure message at all', ParseError.MISSING_PREFIX)
        self.assertEqual('expected prefix not found', e.message)
        self.assertParseFails(' ' + GOOD, ParseError.MISSING_PREFIX)

    def test_missing_middle(self):
        e = self.assertParseFails('XCTAssertEqual failed: ("foo") - msg', ParseError.MISSING_MIDDLE)
        self.assertEqual('expected middle not found', e.message)

    def test_missing_suffix(self):
        e = self.assertParseFails('XCTAssertEqual failed: ("foo") is not equal to ("bar")', ParseError.MISSING_SUFFIX)
        self.assertEqual('expected suffix not found', e.message)

    def test_check_order(self):
        #prefix is checked first even when everything else is missing too
        self.assertParseFails('garbage', ParseError.MISSING_PREFIX)
        self.assertParseFails('XCTAssertEqual failed: ("foo")', ParseError.MISSING_MIDDLE)

    def test_middle_twice(self):
        e = self.assertParseFails(
            'XCTAssertEqual failed: ("a") is not equal to ("b") is not equal to ("c") - msg',
            ParseError.UNEXPECTED_SEGMENT_COUNT)
        self.assertEqual(3, e.count)
        self.assertEqual('Found 3 components when split, expected 2', e.message)

    def test_suffix_only_before_middle(self):
        self.assertParseFails('XCTAssertEqual failed: ("a") - ") is not equal to ("', ParseError.MISSING_SUFFIX)

    def test_read_all_input(self):
        stream = io.StringIO('XCTAssertEqual failed: ("foo\n") is not equal to ("bar\r\n") - msg\n')
        self.assertEqual(GOOD, read_all_input(stream))

    def test_read_all_input_empty(self):
        self.assertEqual('', read_all_input(io.StringIO('')))
