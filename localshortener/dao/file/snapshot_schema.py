"""Snapshot document schema for the file-backed ShortURL DAO

Persisted layout:
{
    "UrlToShort": {"<original url>": "<shortcode>", ...},
    "ShortToUrl": {"<shortcode>": "<original url>", ...}
}

Both maps are always written. When reading, a missing or null map is
treated as empty and the indexes are rebuilt from whichever map is present,
so the forward and reverse indexes always come out as exact inverses.
"""

from typing import Any

from localshortener.constants import SnapshotKeys
from localshortener.dao.exceptions import MalformedSnapshotError
from localshortener.types import ForwardIndex, ReverseIndex, SnapshotDocument


__all__ = ['SnapshotSchema']


class SnapshotSchema:
    """Convert between in-memory indexes and the persisted snapshot document."""

    def dump(self, forward: ForwardIndex, reverse: ReverseIndex) -> SnapshotDocument:
        return {
            SnapshotKeys.URL_TO_SHORT.value: dict(forward),
            SnapshotKeys.SHORT_TO_URL.value: dict(reverse),
        }

    def parse(self, document: Any) -> tuple[ForwardIndex, ReverseIndex]:
        """Validate a decoded snapshot document and rebuild both indexes

        Args:
            document (Any):
                Decoded JSON document.

        Returns:
            tuple[ForwardIndex, ReverseIndex]:
                Fresh forward (url -> shortcode) and reverse (shortcode -> url) indexes.

        Raises:
            MalformedSnapshotError:
                If the document is not an object, a map holds non-string entries,
                or the two maps contradict each other.

        Example:
            >>> SnapshotSchema().parse({'UrlToShort': {'https://a.io': 'abc123'}, 'ShortToUrl': None})
            ({'https://a.io': 'abc123'}, {'abc123': 'https://a.io'})
        """
        if not isinstance(document, dict):
            raise MalformedSnapshotError(f'Snapshot must be a JSON object (given type: {type(document).__name__}).')

        url_to_short = self._section(document, SnapshotKeys.URL_TO_SHORT)
        short_to_url = self._section(document, SnapshotKeys.SHORT_TO_URL)

        forward: ForwardIndex = {}
        reverse: ReverseIndex = {}
        pairs = list(url_to_short.items()) + [(url, code) for code, url in short_to_url.items()]
        for url, shortcode in pairs:
            if forward.setdefault(url, shortcode) != shortcode:
                raise MalformedSnapshotError(f"URL '{url}' is mapped to more than one shortcode.")
            if reverse.setdefault(shortcode, url) != url:
                raise MalformedSnapshotError(f"Shortcode '{shortcode}' is mapped to more than one URL.")

        return forward, reverse

    @staticmethod
    def _section(document: SnapshotDocument, key: SnapshotKeys) -> dict[str, str]:
        section = document.get(key.value)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise MalformedSnapshotError(f"'{key.value}' must be a JSON object (given type: {type(section).__name__}).")
        for k, v in section.items():
            if not isinstance(k, str) or not isinstance(v, str):
                raise MalformedSnapshotError(f"'{key.value}' must map strings to strings (offending entry: {k!r}: {v!r}).")
        return section
