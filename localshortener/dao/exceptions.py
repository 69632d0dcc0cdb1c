"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a ShortURLModel is not found in the data store.

    ShortURLAlreadyExistsError:
        Raised when attempting to insert a ShortURLModel whose shortcode or
        target is already mapped.

    DataStoreError:
        Raised when the data store cannot be read or written (e.g., permissions,
        missing directory, full disk, etc.).

    MalformedSnapshotError:
        Raised when the persisted snapshot exists but does not follow the
        expected schema.

Example:
    >>> from localshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    localshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a ShortURLModel is not found in the data store."""

    pass


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortURLModel that already exists in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. unreadable or unwritable snapshot file, missing parent directory, full disk, etc.
    """

    pass


class MalformedSnapshotError(DataStoreError):
    """Exception raised when the persisted snapshot does not match the expected schema."""

    pass
