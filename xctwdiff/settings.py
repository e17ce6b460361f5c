# -*- coding: utf-8 -*-
import os
import logging

APP_LOGGER = logging.getLogger('xctwdiff')


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


WDIFF_BINARY = os.environ.get('XCTWDIFF_WDIFF', 'wdiff')
COLORDIFF_BINARY = os.environ.get('XCTWDIFF_COLORDIFF', 'colordiff')
#pipeline runs in a single shell, `|` needs one
SHELL = os.environ.get('XCTWDIFF_SHELL', '/bin/sh')
TMP_ROOT = os.environ.get('XCTWDIFF_TMPDIR') or None
STRICT_EXIT_STATUS = _env_bool('XCTWDIFF_STRICT')
LOG_LEVEL = os.environ.get('XCTWDIFF_LOG_LEVEL', 'INFO').upper()
