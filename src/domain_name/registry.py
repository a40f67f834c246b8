"""TLD registry - the static list of top-level domains we accept.

The registry is loaded once from a flat text file (one TLD per line) and is
read-only afterwards. Detection only ever asks "is this dotted label a known
TLD?", so the registry is a frozenset of dotted keys:

    com        -> ".com"
    xn--fiqs8s -> ".xn--fiqs8s"
    中国        -> ".中国"

Membership is exact and case-sensitive. No length filtering happens here;
the TLD validator enforces length limits at lookup time.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Union

from .errors import DataSourceError

logger = logging.getLogger(__name__)

BUNDLED_TLDS_FILE = Path(__file__).parent / "tlds.txt"


class TLDRegistry:
    """Immutable set of known TLDs, each stored with a leading dot."""

    __slots__ = ("_tlds",)

    def __init__(self, tlds: Iterable[str] = ()):
        self._tlds = frozenset(tlds)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TLDRegistry":
        """Build a registry from raw lines of a TLD list.

        Trailing line terminators are trimmed, nothing else. Lines without a
        leading dot get one, so "com" and ".com" produce the same key.
        """
        keys = set()
        for line in lines:
            tld = line.rstrip("\r\n")
            if not tld:
                continue
            keys.add(tld if tld.startswith(".") else "." + tld)
        return cls(keys)

    def contains(self, dotted_label: str) -> bool:
        """Exact-match lookup, e.g. contains(".com")."""
        return dotted_label in self._tlds

    def __contains__(self, dotted_label: object) -> bool:
        return dotted_label in self._tlds

    def __len__(self) -> int:
        return len(self._tlds)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._tlds))

    def __repr__(self) -> str:
        return f"TLDRegistry({len(self._tlds)} TLDs)"


def load(source: Union[str, Path]) -> TLDRegistry:
    """Load a TLD registry from a line-oriented text file.

    Raises DataSourceError if the file is missing or cannot be read.
    Callers should treat that as fatal - there is nothing to validate against.
    """
    path = Path(source)

    if not path.is_file():
        raise DataSourceError(f"TLDs data file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            registry = TLDRegistry.from_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Cannot open TLDs data file: {path} ({e})") from e

    logger.debug(f"Loaded {len(registry)} TLDs from {path}")
    return registry


@lru_cache(maxsize=None)
def default_registry() -> TLDRegistry:
    """Registry built from the bundled tlds.txt, loaded on first use."""
    return load(BUNDLED_TLDS_FILE)
