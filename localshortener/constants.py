import string
from enum import StrEnum


class Shortcode:
    """Shortcode generation parameters."""

    # 26 lowercase + 26 uppercase + 10 digits
    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
    BASE = len(ALPHABET)
    LENGTH = 6  # 62^6 ~ 56.8B combinations
    MAX_ATTEMPTS = 10  # collision retry budget


class Defaults:
    """Default store configuration values."""

    DOMAIN = 'http://short.rl/'
    DATA_FILE = 'url_data.json'


class SnapshotKeys(StrEnum):
    """Top-level keys of the persisted snapshot document."""

    URL_TO_SHORT = 'UrlToShort'
    SHORT_TO_URL = 'ShortToUrl'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'

    class Store(StrEnum):
        DOMAIN = 'SHORTENER_DOMAIN'
        DATA_FILE = 'SHORTENER_DATA_FILE'
        CONFIG_FILE = 'SHORTENER_CONFIG_FILE'

