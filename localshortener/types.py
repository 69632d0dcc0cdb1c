from typing import Any
from collections.abc import Callable


# Type aliases for the in-memory indexes
type ForwardIndex = dict[str, str]  # original url -> shortcode
type ReverseIndex = dict[str, str]  # shortcode -> original url

# Type aliases for the persisted document
type SnapshotDocument = dict[str, Any]

# Predicate telling whether a candidate shortcode is already taken
type ShortcodePredicate = Callable[[str], bool]
