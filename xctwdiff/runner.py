# -*- coding: utf-8 -*-
from xctwdiff import differ, parser, settings, stager

logging = settings.APP_LOGGER


class FailureDiff(object):
    """
        stdin -> parser -> stager -> differ, every error propagates
        (staging directory is cleaned up on the way out)
    """

    def __init__(self, wdiff=None, colordiff=None, tmp_root=None, strict=None):
        self.wdiff = wdiff
        self.colordiff = colordiff
        self.tmp_root = tmp_root
        self.strict = strict

    def parse(self, failure):
        return parser.split_failure(failure)

    def diff(self, pair):
        def _diff(input_file, expected_file):
            return differ.diff_files(input_file, expected_file, wdiff=self.wdiff, colordiff=self.colordiff,
                strict=self.strict)
        return stager.stage(pair, _diff, root=self.tmp_root)

    def run(self, stream):
        failure = parser.read_all_input(stream)
        logging.debug('Read %d characters of input' % len(failure))
        return self.diff(self.parse(failure))
