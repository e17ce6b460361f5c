# -*- coding: utf-8 -*-

class XCTWDiffException(Exception):
    def __init__(self, message, *args, **kwargs):
        super(XCTWDiffException, self).__init__(message)
        self.message = message
        for k, v in kwargs.items():
            setattr(self, k, v)


class ParseError(XCTWDiffException):
    """
        failure message does not have the XCTAssertEqual shape,
        ``reason`` is one of the constants below
    """
    MISSING_PREFIX = 'missing_prefix'
    MISSING_MIDDLE = 'missing_middle'
    MISSING_SUFFIX = 'missing_suffix'
    UNEXPECTED_SEGMENT_COUNT = 'unexpected_segment_count'


class StagingError(XCTWDiffException):
    DIRECTORY_CREATE_FAILED = 'directory_create_failed'
    ENCODING_FAILED = 'encoding_failed'
    WRITE_FAILED = 'write_failed'
    CLEANUP_FAILED = 'cleanup_failed'


class DifferError(XCTWDiffException):
    TOOL_LAUNCH_FAILED = 'tool_launch_failed'
    PIPELINE_FAILED = 'pipeline_failed'
