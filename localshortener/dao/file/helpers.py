import functools
from typing import TypeVar, Any
from collections.abc import Callable

from localshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_file_io_error[F](method: F) -> F:
    """Wrap file-interacting DAO methods to handle I/O errors

    Args:
        method (Callable[..., Any]):
            DAO method reading or writing the snapshot file, which may raise OSError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on I/O failures.

    Example:
        >>> @handle_file_io_error
        ... def load(self):
        ...     return self.data_file.read_text()
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except OSError as e:
            raise DataStoreError(f"Can't access snapshot file at {self.data_file}: {e.strerror or e}.") from e

    return wrapper
