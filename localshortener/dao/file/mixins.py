"""Snapshot file mixin providing shared path handling and raw snapshot I/O.

Responsibilities:
    - Resolve the snapshot file path
    - Read and decode the JSON snapshot
    - Atomically replace the snapshot on write

Classes:
    - SnapshotFileMixin: Base mixin to inject snapshot schema, file path & raw I/O.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLFileDAO(SnapshotFileMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLFileDAO(data_file='url_data.json')
        >>> dao.data_file
        PosixPath('url_data.json')
"""

import os
import json
import tempfile
from pathlib import Path

from localshortener.constants import Defaults
from localshortener.dao.exceptions import DataStoreError, MalformedSnapshotError
from localshortener.dao.file.snapshot_schema import SnapshotSchema
from localshortener.types import SnapshotDocument


class SnapshotFileMixin:
    """Mixin snapshot file handling for file-backed DAOs.

    Attributes:
        data_file (Path):
            Path of the JSON snapshot file.

        schema (SnapshotSchema):
            Helper converting between in-memory indexes and the snapshot document.

    Methods:
        _read_snapshot() -> SnapshotDocument | None:
            Decode the snapshot file, or return None if it does not exist.

        _write_snapshot(document: SnapshotDocument) -> None:
            Replace the snapshot file with the given document.
    """

    def __init__(self, data_file: str | os.PathLike = Defaults.DATA_FILE):
        """Initialize a file-backed DAO

        Args:
            data_file (str | os.PathLike):
                Path of the JSON snapshot file. Defaults to 'url_data.json'
                in the current working directory. The file does not need to exist yet.
        """
        if not isinstance(data_file, (str, os.PathLike)):
            raise TypeError(f'Data file must be a path (given type: {type(data_file)}).')
        if not str(data_file).strip():
            raise ValueError('Data file must be a non-empty path.')

        self.data_file = Path(data_file)
        self.schema = SnapshotSchema()

    def _read_snapshot(self) -> SnapshotDocument | None:
        """Decode the snapshot file

        Returns:
            SnapshotDocument | None:
                Decoded JSON document, or None when the file does not exist.

        Raises:
            MalformedSnapshotError:
                If the file is not valid UTF-8 JSON or is nested too deeply to decode.
            OSError:
                If the file exists but cannot be read.
        """
        if not self.data_file.exists():
            return None

        try:
            with self.data_file.open('r', encoding='utf-8') as f:
                return json.load(f)
        except (ValueError, RecursionError) as e:
            raise MalformedSnapshotError(f'Snapshot file {self.data_file} is not valid JSON: {e}.') from e

    def _write_snapshot(self, document: SnapshotDocument) -> None:
        """Replace the snapshot file with `document`

        The document is written to a temporary file next to the target and
        moved over it with os.replace(), so readers only ever see either the
        previous snapshot or the new one in full.

        Raises:
            DataStoreError:
                If the document cannot be encoded as UTF-8 JSON.
            OSError:
                If the temporary file cannot be written or moved into place.
        """
        directory = self.data_file.parent
        fd, tmp_path = tempfile.mkstemp(prefix=f'.{self.data_file.name}.', suffix='.tmp', dir=directory)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                try:
                    json.dump(document, f, ensure_ascii=False, indent=2)
                except (TypeError, ValueError) as e:
                    raise DataStoreError(f"Can't encode snapshot for {self.data_file}: {e}.") from e
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.data_file)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
