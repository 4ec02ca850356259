import configparser

from os.path import expanduser, join
import threading

CONFIG_FILE = expanduser(join("~", ".opencitations", "ispn", "config.ini"))

_config = None
_config_lock = threading.Lock()


def _load_config():
    global _config
    _config = configparser.ConfigParser()
    _config.read(CONFIG_FILE)


def get_config():
    """It returns ispn configuration. Missing sections and options are
    allowed, callers always provide a fallback."""
    global _config

    if not _config:
        _config_lock.acquire()
        _load_config()
        _config_lock.release()

    return _config
