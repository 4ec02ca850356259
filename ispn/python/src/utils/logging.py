#!python
# Copyright (c) 2022 The OpenCitations Index Authors.
#
# Permission to use, copy, modify, and/or distribute this software for any purpose
# with or without fee is hereby granted, provided that the above copyright notice
# and this permission notice appear in all copies.
#
# THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES WITH
# REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF MERCHANTABILITY AND
# FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR ANY SPECIAL, DIRECT, INDIRECT,
# OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES WHATSOEVER RESULTING FROM LOSS OF USE,
# DATA OR PROFITS, WHETHER IN AN ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS
# ACTION, ARISING OUT OF OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS
# SOFTWARE.

import logging

from datetime import datetime
from os import makedirs
from os.path import expanduser, join
import threading

from oc.ispn.utils.config import get_config

_logger = None
_logger_lock = threading.Lock()


def _setup_logger():
    global _logger
    config = get_config()
    _logger = logging.getLogger("opencitations.ispn")
    _logger.setLevel(
        config.get("logging", "level", fallback="INFO").upper()
    )
    formatter = logging.Formatter(
        "[%(threadName)s] %(asctime)s | %(levelname)s | oc.ispn : %(message)s"
    )

    directory = config.get("logging", "directory", fallback="")
    if directory:
        directory = expanduser(directory)
        makedirs(directory, exist_ok=True)
        fileHandler = logging.FileHandler(
            join(directory, datetime.now().strftime("%m-%d-%Y_%H-%M-%S") + ".log")
        )
        fileHandler.setFormatter(formatter)
        _logger.addHandler(fileHandler)

    if config.getboolean("logging", "verbose", fallback=False):
        streamHandler = logging.StreamHandler()
        streamHandler.setFormatter(formatter)
        _logger.addHandler(streamHandler)


def get_logger():
    """It returns ispn logger instance."""
    global _logger
    global _logger_lock

    if not _logger:
        _logger_lock.acquire()
        _setup_logger()
        _logger_lock.release()

    return _logger
