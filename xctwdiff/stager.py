# -*- coding: utf-8 -*-
"""
Stages both sides of a comparison as ``input`` and ``expected`` files in a
fresh temporary directory which never outlives the staging call.
"""
import os
import shutil
import tempfile
import uuid
from contextlib import contextmanager

from xctwdiff import settings, utils
from xctwdiff.wrapper import StagingError

logging = settings.APP_LOGGER

INPUT_FILE = 'input'
EXPECTED_FILE = 'expected'


@contextmanager
def staging_directory(root=None):
    root = root or getattr(settings, 'TMP_ROOT', None) or tempfile.gettempdir()
    path = os.path.abspath(os.path.join(root, uuid.uuid4().hex))
    try:
        os.mkdir(path)
    except OSError as e:
        raise StagingError('Creating directory %s failed: %s' % (path, e),
            reason=StagingError.DIRECTORY_CREATE_FAILED, path=path)
    logging.debug('Created staging directory %s' % path)

    try:
        yield path
    except BaseException:
        try:
            shutil.rmtree(path)
        except OSError as e:
            #the original error is the one worth reporting
            logging.error('Removing directory %s failed: %s' % (path, e))
        raise

    try:
        shutil.rmtree(path)
    except OSError as e:
        raise StagingError('Removing directory %s failed: %s' % (path, e),
            reason=StagingError.CLEANUP_FAILED, path=path)
    logging.debug('Removed staging directory %s' % path)


def _encode(value, which):
    try:
        return value.encode('utf-8')
    except UnicodeEncodeError:
        raise StagingError('Failed to encode %s as UTF-8' % which,
            reason=StagingError.ENCODING_FAILED, which=which)


def write_files(pair, directory):
    input_file = os.path.join(directory, INPUT_FILE)
    expected_file = os.path.join(directory, EXPECTED_FILE)

    input_data = _encode(pair.left, INPUT_FILE)
    expected_data = _encode(pair.right, EXPECTED_FILE)

    for path, data in ((input_file, input_data), (expected_file, expected_data)):
        try:
            utils.write_file(path, data)
        except (IOError, OSError) as e:
            raise StagingError('Writing %s failed: %s' % (path, e),
                reason=StagingError.WRITE_FAILED, path=path)

    return input_file, expected_file


def stage(pair, action, root=None):
    """
        calls ``action(input_path, expected_path)`` and returns its result,
        the directory is gone by the time this returns or raises
    """
    with staging_directory(root) as directory:
        input_file, expected_file = write_files(pair, directory)
        return action(input_file, expected_file)
