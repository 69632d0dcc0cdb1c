from localshortener.dao.file.snapshot_schema import SnapshotSchema
from localshortener.dao.file.mixins import SnapshotFileMixin
from localshortener.dao.file.short_url_file_dao import ShortURLFileDAO


__all__ = [
    'SnapshotSchema',
    'SnapshotFileMixin',
    'ShortURLFileDAO',
]
