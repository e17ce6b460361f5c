# -*- coding: utf-8 -*-
import io
import logging as _logging
import sys
from argparse import ArgumentParser

from xctwdiff import settings
from xctwdiff.runner import FailureDiff
from xctwdiff.wrapper import ParseError, XCTWDiffException

logging = settings.APP_LOGGER


def setup_logging(verbose=False):
    level = _logging.DEBUG if verbose else getattr(_logging, settings.LOG_LEVEL, _logging.INFO)
    logging.setLevel(level)
    if not any(getattr(h, 'xctwdiff', False) for h in logging.handlers):
        handler = _logging.StreamHandler(sys.stderr)
        handler.setFormatter(_logging.Formatter('%(message)s'))
        handler.xctwdiff = True
        logging.addHandler(handler)
    logging.propagate = False


def build_parser():
    parser = ArgumentParser(prog='xctwdiff',
        description='Read an XCTAssertEqual failure from stdin and word-diff the compared values.')
    parser.add_argument('--wdiff', dest='wdiff', default=None, metavar='PATH',
                        help='the word diff executable (default: %s)' % settings.WDIFF_BINARY)
    parser.add_argument('--colordiff', dest='colordiff', default=None, metavar='PATH',
                        help='the color diff executable (default: %s)' % settings.COLORDIFF_BINARY)
    parser.add_argument('--tmpdir', dest='tmp_root', default=None, metavar='DIR',
                        help='where to create the staging directory')
    parser.add_argument('--strict', dest='strict', action='store_true', default=None,
                        help='fail when the diff pipeline exits with a non-zero status')
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true',
                        help='log debug output to stderr')
    return parser


def _stdin():
    #undecodable bytes are kept as surrogates and rejected when staging
    return io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', errors='surrogateescape')


def main(argv=None, stream=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    runner = FailureDiff(wdiff=args.wdiff, colordiff=args.colordiff, tmp_root=args.tmp_root, strict=args.strict)
    try:
        runner.run(stream if stream is not None else _stdin())
    except ParseError as e:
        if e.reason == ParseError.UNEXPECTED_SEGMENT_COUNT:
            logging.error(e.message)
        else:
            logging.error('Wrong failure format: %s' % e.message)
        logging.error('Failed to read input')
        return 1
    except XCTWDiffException as e:
        logging.error(e.message)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
