"""Helper utilities for short URL string handling.

Functions:
    get_short_url(shortcode: str, domain: str) -> str
        Get string representation of short URL for a given shortcode
    extract_shortcode(value: str, domain: str) -> str
        Recover a shortcode from a full short URL (or a bare shortcode)
    is_utf8_encodable(value: str) -> bool
        Check that a string holds no lone surrogates

Example:
    >>> from localshortener.utils.helpers import get_short_url, extract_shortcode
    >>> get_short_url('abc123', 'http://short.rl/')
    'http://short.rl/abc123'
    >>> extract_shortcode('  http://short.rl/abc123 ', 'http://short.rl/')
    'abc123'
    >>> extract_shortcode('abc123', 'http://short.rl/')
    'abc123'
"""


def get_short_url(shortcode: str, domain: str) -> str:
    """Get string representation of shortened URL

    Plain concatenation of the configured domain prefix and the shortcode;
    the domain is expected to carry its own trailing slash.

    Args:
        shortcode (str): shortcode
        domain (str): domain prefix, e.g. 'http://short.rl/'

    Returns:
        str: short url string representation
    """
    return f'{domain}{shortcode}'


def extract_shortcode(value: str, domain: str) -> str:
    """Recover a shortcode from user input

    Strips surrounding whitespace, removes `domain` when it is a prefix of
    the input and strips again. This is naive prefix removal, not URL parsing:
    an input that only contains the domain somewhere else is returned as is.

    Args:
        value (str): full short URL or bare shortcode
        domain (str): domain prefix, e.g. 'http://short.rl/'

    Returns:
        str: shortcode (may be empty)
    """
    value = value.strip()
    if domain:
        value = value.removeprefix(domain)
    return value.strip()


def is_utf8_encodable(value: str) -> bool:
    """Check whether `value` can be written to the UTF-8 snapshot file (no lone surrogates)."""
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True
