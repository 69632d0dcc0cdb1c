"""Data Access Object (DAO) implementation for managing shortened URLs in a JSON file

This module provides a file-backed implementation of ShortURLBaseDAO. The whole
mapping lives in memory as two inverse indexes and is persisted as a single
JSON snapshot.

Responsibilities:
    - Insert and retrieve short URLs by shortcode or by target URL;
    - Keep the forward (url -> shortcode) and reverse (shortcode -> url) indexes
      mutually consistent;
    - Serialize every access through one re-entrant lock;
    - Load and save the full snapshot, raising DAO exceptions on failure.

Classes:
    ShortURLFileDAO:
        DAO for storing and retrieving ShortURLModel in a JSON snapshot file.

Example:
    >>> from localshortener.models import ShortURLModel
    >>> from localshortener.dao.file import ShortURLFileDAO

    >>> dao = ShortURLFileDAO(data_file='url_data.json')
    >>> dao.load()
    False

    >>> dao.insert(ShortURLModel(target='https://example.com/page', shortcode='abc123'))
    <ShortURLFileDAO>
    >>> dao.get('abc123').target
    'https://example.com/page'
    >>> dao.find('https://example.com/page').shortcode
    'abc123'
    >>> dao.save()
    <ShortURLFileDAO>
"""

import logging
import threading
from contextlib import contextmanager
from collections.abc import Iterator

from beartype import beartype

from localshortener.models import ShortURLModel, StoreStatistics
from localshortener.dao.base import ShortURLBaseDAO
from localshortener.dao.file.mixins import SnapshotFileMixin
from localshortener.dao.file.helpers import handle_file_io_error
from localshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from localshortener.types import ForwardIndex, ReverseIndex


logger = logging.getLogger(__name__)


class ShortURLFileDAO(SnapshotFileMixin, ShortURLBaseDAO):
    """File-backed Data Access Object (DAO) for managing short URL mappings

    Attributes (see SnapshotFileMixin):
        data_file (Path):
            Path of the JSON snapshot file.
        schema (SnapshotSchema):
            Snapshot document (de)serializer.

    Attributes:
        dirty (bool):
            True while the in-memory indexes hold inserts that have not been saved.

    NOTE:
        Every public method acquires the same re-entrant lock, so a caller
        holding `transaction()` can freely call back into the DAO while other
        threads wait for the whole block to finish.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._forward: ForwardIndex = {}
        self._reverse: ReverseIndex = {}
        self._lock = threading.RLock()
        self.dirty = False

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @contextmanager
    def transaction(self) -> Iterator['ShortURLFileDAO']:
        """Hold the store's exclusive lock for the duration of a `with` block

        Example:
            >>> with dao.transaction():
            ...     if not dao.exists('abc123'):
            ...         dao.insert(ShortURLModel(target='https://example.com', shortcode='abc123'))
            ...         dao.save()
        """
        with self._lock:
            yield self

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLFileDAO':
        """Insert a short URL mapping into both indexes

        Both index entries are written while holding the lock, so concurrent
        readers never observe a forward-only or reverse-only entry. The
        snapshot file is not touched; call save() to persist.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLFileDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If the shortcode or the target URL is already mapped.
        """
        with self._lock:
            if short_url.shortcode in self._reverse:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
            if short_url.target in self._forward:
                raise ShortURLAlreadyExistsError(f"Target URL '{short_url.target}' is already shortened.")

            self._forward[short_url.target] = short_url.shortcode
            self._reverse[short_url.shortcode] = short_url.target
            self.dirty = True
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Raises:
            ShortURLNotFoundError:
                If the shortcode is not mapped.

        Example:
            >>> dao.get('abc123')
            ShortURLModel(target='https://example.com', shortcode='abc123')
        """
        with self._lock:
            target = self._reverse.get(shortcode)
        if target is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return ShortURLModel(target=target, shortcode=shortcode)

    @beartype
    def find(self, target: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by its original URL

        Raises:
            ShortURLNotFoundError:
                If the target URL was never shortened.
        """
        with self._lock:
            shortcode = self._forward.get(target)
        if shortcode is None:
            raise ShortURLNotFoundError(f"Target URL '{target}' not found.")
        return ShortURLModel(target=target, shortcode=shortcode)

    @beartype
    def exists(self, shortcode: str, **kwargs) -> bool:
        with self._lock:
            return shortcode in self._reverse

    def count(self, **kwargs) -> StoreStatistics:
        with self._lock:
            return StoreStatistics(total_urls=len(self._forward), unique_shortcodes=len(self._reverse))

    @handle_file_io_error
    def load(self, **kwargs) -> bool:
        """Replace both indexes with the content of the snapshot file

        A missing file is not an error: the indexes are left as they are.
        The snapshot is fully parsed and validated before anything is
        replaced, so a malformed file never yields a partial merge.

        Returns:
            bool:
                True if a snapshot was loaded, False if the file does not exist.

        Raises:
            MalformedSnapshotError:
                If the snapshot is not valid JSON or does not follow the schema.
            DataStoreError:
                If the snapshot file exists but cannot be read.
        """
        with self._lock:
            document = self._read_snapshot()
            if document is None:
                logger.debug('No snapshot file found, keeping current state.', extra={'dataFile': str(self.data_file)})
                return False

            forward, reverse = self.schema.parse(document)

            self._forward.clear()
            self._reverse.clear()
            self._forward.update(forward)
            self._reverse.update(reverse)
            self.dirty = False

        logger.info('Loaded snapshot.', extra={'dataFile': str(self.data_file), 'totalUrls': len(forward)})
        return True

    @handle_file_io_error
    def save(self, **kwargs) -> 'ShortURLFileDAO':
        """Write both indexes to the snapshot file, replacing its previous content

        Raises:
            DataStoreError:
                If the snapshot file cannot be written.
        """
        with self._lock:
            document = self.schema.dump(self._forward, self._reverse)
            self._write_snapshot(document)
            self.dirty = False

        logger.debug('Saved snapshot.', extra={'dataFile': str(self.data_file)})
        return self
