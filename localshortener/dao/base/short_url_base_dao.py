"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., a JSON file, SQLite, etc.).

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects
      by shortcode and by target URL.
    - Expose a transaction scope so callers can run multi-step operations
      (lookup, generate, insert, persist) atomically.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from localshortener.models import ShortURLModel
        >>> from localshortener.dao import ShortURLFileDAO

        >>> dao = ShortURLFileDAO(data_file='url_data.json')

        >>> short_url = ShortURLModel(
        ...     target="https://example.com/blog/article-123",
        ...     shortcode="a1b2c3",
        ... )
        >>> dao.insert(short_url)

        >>> retrieved = dao.get("a1b2c3")
        >>> print(retrieved.target)
        https://example.com/blog/article-123
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from localshortener.models import ShortURLModel, StoreStatistics


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Insert a new mapping into the data store.
            Raises ShortURLAlreadyExistsError if the shortcode or target is already mapped.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a mapping by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.

        find(target: str, **kwargs) -> ShortURLModel:
            Retrieve a mapping by its original URL.
            Raises ShortURLNotFoundError if the entry does not exist.

        exists(shortcode: str, **kwargs) -> bool:
            Check whether a shortcode is already taken.

        count(**kwargs) -> StoreStatistics:
            Return the sizes of the forward and reverse indexes.

        load(**kwargs) -> bool:
            Replace the in-memory state with the persisted one.
            Raises DataStoreError on read failure.

        save(**kwargs) -> ShortURLBaseDAO:
            Persist the in-memory state.
            Raises DataStoreError on write failure.

        transaction() -> AbstractContextManager:
            Hold the store's exclusive lock for the duration of a `with` block.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLFileDAO) must extend
        this class and implement all abstract methods.

    NOTE:
        - Mappings never expire and are never deleted. The DAO does not
          provide an interface to remove entries.
    """

    # True while the in-memory state holds changes which were not persisted
    dirty: bool = False

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If the shortcode or the target URL is already mapped.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Raises:
            ShortURLNotFoundError:
                If no mapping with the given shortcode exists.
        """
        pass

    @abstractmethod
    def find(self, target: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its original URL.

        Raises:
            ShortURLNotFoundError:
                If the target URL was never shortened.
        """
        pass

    @abstractmethod
    def exists(self, shortcode: str, **kwargs) -> bool:
        pass

    @abstractmethod
    def count(self, **kwargs) -> StoreStatistics:
        pass

    @abstractmethod
    def load(self, **kwargs) -> bool:
        """Replace the in-memory state with the persisted snapshot.

        Returns:
            bool: True if a snapshot was read, False if there was nothing to read.

        Raises:
            DataStoreError:
                If the snapshot cannot be read or is malformed.
        """
        pass

    @abstractmethod
    def save(self, **kwargs) -> 'ShortURLBaseDAO':
        """Persist the full in-memory state, replacing any previous snapshot.

        Raises:
            DataStoreError:
                If the snapshot cannot be written.
        """
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager['ShortURLBaseDAO']:
        pass
