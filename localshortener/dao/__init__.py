from localshortener.dao.base import ShortURLBaseDAO
from localshortener.dao.file import ShortURLFileDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLFileDAO',
]
