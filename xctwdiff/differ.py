# -*- coding: utf-8 -*-
"""
Runs `wdiff input expected | colordiff` so colordiff can highlight the
word diff. Exit status of the pipeline is the one of colordiff.
"""
import shlex
import shutil

from xctwdiff import settings, utils
from xctwdiff.wrapper import DifferError

logging = settings.APP_LOGGER

#shell could not execute / find a command
LAUNCH_FAILURE_CODES = (126, 127)


def _tools(wdiff=None, colordiff=None):
    return (wdiff or getattr(settings, 'WDIFF_BINARY', 'wdiff'),
            colordiff or getattr(settings, 'COLORDIFF_BINARY', 'colordiff'))


def build_command(input_file, expected_file, wdiff=None, colordiff=None):
    wdiff, colordiff = _tools(wdiff, colordiff)
    return '%(wdiff)s %(input)s %(expected)s | %(colordiff)s' % dict(
        wdiff=shlex.quote(wdiff),
        input=shlex.quote(input_file),
        expected=shlex.quote(expected_file),
        colordiff=shlex.quote(colordiff))


def check_tools(*tools):
    for tool in tools:
        if shutil.which(tool) is None:
            raise DifferError('%s not found on PATH' % tool,
                reason=DifferError.TOOL_LAUNCH_FAILED, tool=tool)


def diff_files(input_file, expected_file, wdiff=None, colordiff=None, strict=None, hide=None):
    """
        returns the pipeline exit status, non-zero one raises only in strict mode
    """
    wdiff, colordiff = _tools(wdiff, colordiff)
    if strict is None:
        strict = getattr(settings, 'STRICT_EXIT_STATUS', False)
    check_tools(wdiff, colordiff)

    cmd = build_command(input_file, expected_file, wdiff=wdiff, colordiff=colordiff)
    try:
        out = utils.shell(cmd, hide=hide)
    except OSError as e:
        raise DifferError('Launching %s failed: %s' % (cmd, e),
            reason=DifferError.TOOL_LAUNCH_FAILED, tool=getattr(settings, 'SHELL', '/bin/sh'))

    if out.return_code in LAUNCH_FAILURE_CODES:
        raise DifferError('Launching %s failed %d stderr: %s' % (cmd, out.return_code, out.stderr),
            reason=DifferError.TOOL_LAUNCH_FAILED, tool=cmd, code=out.return_code, stderr=out.stderr)

    if out.return_code:
        logging.debug('Diff pipeline exited with %d' % out.return_code)
        if strict:
            raise DifferError('Diff pipeline exited with %d' % out.return_code,
                reason=DifferError.PIPELINE_FAILED, code=out.return_code, stderr=out.stderr)
    return out.return_code
