from dataclasses import dataclass

from localshortener.constants import Defaults


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        target (str):
            The original long URL that the shortcode points to.
        shortcode (str):
            The unique short identifier representing the shortened URL.

    Example:
        >>> url = ShortURLModel(target='https://example.com/article/123', shortcode='abc123')
        >>> url.target
        'https://example.com/article/123'
        >>> url.shortcode
        'abc123'
    """

    target: str
    shortcode: str


# fmt: off
@dataclass(frozen=True)
class StoreStatistics:
    total_urls: int         # Entries in the forward index (original url -> shortcode)
    unique_shortcodes: int  # Entries in the reverse index (shortcode -> original url)
# fmt: on


@dataclass(frozen=True)
class StoreConfig:
    """Resolved configuration for a mapping store.

    Attributes:
        domain (str):
            Prefix prepended to shortcodes to build full short URLs.
        data_file (str):
            Path of the JSON snapshot file backing the store.
    """

    domain: str = Defaults.DOMAIN
    data_file: str = Defaults.DATA_FILE
