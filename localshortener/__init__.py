from localshortener.models import ShortURLModel, StoreConfig, StoreStatistics
from localshortener.store import MappingStore


__all__ = [
    'MappingStore',
    'ShortURLModel',
    'StoreConfig',
    'StoreStatistics',
]
