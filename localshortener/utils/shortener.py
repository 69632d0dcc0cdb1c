"""Shortcode generation utility

This module provides helper functions for generating short, random,
Base62-safe identifiers and for picking one that does not collide with
shortcodes already in use.

Functions:
    generate_shortcode(length=6):
        Generate a random shortcode suitable for use as a URL slug.

    generate_unique_shortcode(is_taken, length=6, max_attempts=10):
        Generate random shortcodes until one is not taken, within a bounded budget.

Example:
    >>> from localshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'q3ZbX0'
"""

import secrets

from localshortener.constants import Shortcode
from localshortener.exceptions import ShortcodeGenerationError
from localshortener.types import ShortcodePredicate


ALPHABET = Shortcode.ALPHABET
BASE = Shortcode.BASE


def generate_shortcode(length: int = Shortcode.LENGTH) -> str:
    """Generate a random, fixed-length Base62 shortcode.

    Draws `length` bytes from the operating system CSPRNG and maps each byte
    onto the alphabet [a-zA-Z0-9] with `ALPHABET[byte % 62]`.

    Args:
        length (int, optional):
            Exact length of the resulting shortcode.
            Defaults to 6.

    Returns:
        str: A random alphanumeric shortcode.

    Example:
        >>> len(generate_shortcode(length=8))
        8

    NOTE:
        - 256 is not a multiple of 62, so the first 8 symbols of the alphabet
          ('a'..'h') are drawn slightly more often than the rest. Shortcodes are
          identifiers, not secrets, so this bias is accepted.
        - 62^6 ~ 56.8 billion combinations keeps collisions rare enough for a
          small retry budget (see generate_unique_shortcode()).
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(ALPHABET[byte % BASE] for byte in secrets.token_bytes(length))


def generate_unique_shortcode(
    is_taken: ShortcodePredicate,
    length: int = Shortcode.LENGTH,
    max_attempts: int = Shortcode.MAX_ATTEMPTS,
) -> str:
    """Generate a random shortcode which `is_taken` reports as free.

    Every attempt draws a fresh random candidate. No counter or other shared
    state is involved, so concurrent callers only need to serialize on the
    final index insertion.

    Args:
        is_taken (Callable[[str], bool]):
            Predicate returning True if a candidate shortcode is already in use.

        length (int, optional):
            Exact length of the resulting shortcode.
            Defaults to 6.

        max_attempts (int, optional):
            Maximum number of candidates to try.
            Defaults to 10.

    Returns:
        str: A shortcode for which `is_taken` returned False.

    Raises:
        ShortcodeGenerationError:
            If every one of the `max_attempts` candidates was taken.

    Example:
        >>> taken = {'abc123'}
        >>> code = generate_unique_shortcode(taken.__contains__)
        >>> code in taken
        False
    """
    if not callable(is_taken):
        raise TypeError(f'is_taken must be callable (given type: {type(is_taken)}).')
    if not isinstance(max_attempts, int) or isinstance(max_attempts, bool):
        raise TypeError(f'Max attempts must be of type integer (given type: {type(max_attempts)}).')
    if max_attempts <= 0:
        raise ValueError(f'Max attempts must be a positive integer (given value: {max_attempts}).')

    for _ in range(max_attempts):
        candidate = generate_shortcode(length)
        if not is_taken(candidate):
            return candidate

    raise ShortcodeGenerationError(f'Failed to generate a unique shortcode after {max_attempts} attempts.')
