"""Mapping store: the public API of the URL shortener

This module ties the DAO, the shortcode generator and the domain prefix
together behind the operations consumed by the presentation layer:

    - shorten(url)                  -> shortcode | None
    - retrieve(shortcode)           -> original url | None
    - get_full_short_url(shortcode) -> str
    - extract_shortcode(value)      -> str
    - statistics()                  -> StoreStatistics
    - load()                        -> bool
    - save()                        -> bool

Every failure path (invalid input, exhausted shortcode budget, snapshot I/O
errors) is logged and reported as a sentinel result; none of them raises.

Example:
    >>> from localshortener.store import MappingStore
    >>> store = MappingStore.from_config()
    >>> store.load()
    True
    >>> code = store.shorten('https://example.com/article/123')
    >>> store.get_full_short_url(code)
    'http://short.rl/q3ZbX0'
    >>> store.retrieve(store.extract_shortcode('http://short.rl/q3ZbX0'))
    'https://example.com/article/123'
"""

import logging
from pathlib import Path

from localshortener.constants import Defaults
from localshortener.dao import ShortURLBaseDAO, ShortURLFileDAO
from localshortener.dao.exceptions import DataStoreError, ShortURLNotFoundError
from localshortener.exceptions import ShortcodeGenerationError
from localshortener.models import ShortURLModel, StoreConfig, StoreStatistics
from localshortener.utils.config import load_config
from localshortener.utils.helpers import get_short_url, extract_shortcode, is_utf8_encodable
from localshortener.utils.shortener import generate_unique_shortcode


logger = logging.getLogger(__name__)


class MappingStore:
    """Bidirectional original URL <-> shortcode store with write-through persistence

    Attributes:
        dao (ShortURLBaseDAO):
            Data access object owning the indexes, the lock and the snapshot file.
        domain (str):
            Prefix used to build and parse full short URLs.
    """

    def __init__(self, dao: ShortURLBaseDAO, domain: str = Defaults.DOMAIN):
        self.dao = dao
        self.domain = domain

    @classmethod
    def from_config(cls, config: StoreConfig | None = None, config_file: str | Path | None = None) -> 'MappingStore':
        """Build a store backed by a JSON snapshot file

        Args:
            config (StoreConfig | None):
                Resolved configuration. When None, `load_config(config_file)` is used.
            config_file (str | Path | None):
                Optional YAML configuration file forwarded to `load_config()`.
        """
        config = config or load_config(config_file)
        return cls(dao=ShortURLFileDAO(data_file=config.data_file), domain=config.domain)

    @property
    def dirty(self) -> bool:
        """True if the store holds mappings that were not successfully saved."""
        return self.dao.dirty

    def shorten(self, original_url: str) -> str | None:
        """Return the shortcode for `original_url`, creating one if needed

        Shortening the same URL string again returns the same shortcode. A new
        mapping is inserted and persisted while holding the DAO lock, so
        concurrent callers never race on the same URL or the same shortcode.

        Returns:
            str | None:
                The shortcode, or None if the URL is blank, cannot be stored as
                UTF-8 (e.g. holds a lone surrogate) or no collision-free
                shortcode could be generated.

        NOTE:
            If persisting a new mapping fails, the mapping is kept in memory
            and its shortcode is still returned. The failure is logged and the
            store stays `dirty` until a later save() succeeds.
        """
        if not original_url or not original_url.strip():
            logger.debug('Refusing to shorten a blank URL.')
            return None
        if not is_utf8_encodable(original_url):
            logger.warning('Refusing to shorten a URL that cannot be encoded as UTF-8.', extra={'targetUrl': ascii(original_url)})
            return None

        with self.dao.transaction():
            try:
                return self.dao.find(original_url).shortcode
            except ShortURLNotFoundError:
                pass

            try:
                shortcode = generate_unique_shortcode(self.dao.exists)
            except ShortcodeGenerationError as e:
                logger.warning('Shortcode generation budget exhausted.', extra={'targetUrl': original_url, 'errorCode': e.error_code})
                return None

            self.dao.insert(ShortURLModel(target=original_url, shortcode=shortcode))
            logger.info('Shortened URL.', extra={'targetUrl': original_url, 'shortcode': shortcode})
            self.save()
            return shortcode

    def retrieve(self, shortcode: str) -> str | None:
        """Return the original URL for `shortcode`, or None if it is blank or unknown."""
        if not shortcode or not shortcode.strip():
            return None

        try:
            return self.dao.get(shortcode).target
        except ShortURLNotFoundError:
            logger.debug('Shortcode not found.', extra={'shortcode': shortcode})
            return None

    def get_full_short_url(self, shortcode: str) -> str:
        return get_short_url(shortcode, self.domain)

    def extract_shortcode(self, value: str) -> str:
        return extract_shortcode(value, self.domain)

    def statistics(self) -> StoreStatistics:
        return self.dao.count()

    def load(self) -> bool:
        """Replace the in-memory mappings with the persisted snapshot

        Returns:
            bool:
                False if the snapshot exists but could not be read or parsed; the
                in-memory mappings are left untouched in that case. True otherwise,
                including when there is no snapshot file yet.
        """
        try:
            self.dao.load()
        except DataStoreError:
            logger.exception('Failed to load snapshot, keeping current state.')
            return False
        return True

    def save(self) -> bool:
        """Persist all mappings, replacing the previous snapshot

        Returns:
            bool: True if the snapshot was written, False otherwise.
        """
        try:
            self.dao.save()
        except DataStoreError:
            logger.exception('Failed to save snapshot.', extra={'persisted': False})
            return False
        return True
