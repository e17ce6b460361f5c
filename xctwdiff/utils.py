# -*- coding: utf-8 -*-
from invoke import run

from xctwdiff import settings

logging = settings.APP_LOGGER


def shell(cmd, hide=None):
    """
        runs ``cmd`` through settings.SHELL without failing on non-zero status,
        output goes to our stdout unless hidden, returns invoke's Result
    """
    logging.debug('Executing shell %s' % cmd)
    return run(cmd, warn=True, hide=hide, pty=False, in_stream=False, encoding='utf-8',
        shell=getattr(settings, 'SHELL', '/bin/sh'))


def write_file(path, data):
    with open(path, 'wb') as f:
        f.write(data)
