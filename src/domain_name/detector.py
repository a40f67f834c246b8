"""Domain name detection - split a name into hosts, domain label and TLDs.

HOW IT WORKS:
The input is split on "." and each label is classified by position,
right to left:

    www.foobar.com.cn
    |   |      |   └─ last label: must be a known TLD
    |   |      └───── known TLD too? then this is a compound TLD (.com.cn)
    |   └──────────── domain label (the registrable part)
    └──────────────── everything before it: host labels

Two-label names ("foobar.com") are a special case: the first label must be a
valid domain label and the second a known TLD. There is no fallback
interpretation - if either check fails the whole name is rejected.

Checking whether the second-to-last label is itself a registered TLD is how
we recognize country-code second-level structures (".com.cn") without a
separate table of multi-part suffixes.

FAILURES:
Every rejection raises DomainNameError. Validation is all-or-nothing: a bad
host label anywhere aborts the parse and no partial result is returned.
The error carries an ErrorKind tag plus the offending label and its index,
so callers can tell "unknown TLD" from "bad host character".
"""

import logging
from typing import List, Optional

from .errors import DomainNameError
from .registry import TLDRegistry, default_registry
from .util.types import DomainName, ErrorKind
from .validators import (
    DOMAIN_NAME_MAX_SIZE,
    domain_label_error,
    host_error,
    octet_length,
    validate_tld,
)

logger = logging.getLogger(__name__)


class DomainNameDetector:
    """Detects and decomposes domain names against one TLD registry.

    The registry is injected once and never modified, so a single detector
    can be shared freely between threads.
    """

    def __init__(self, registry: Optional[TLDRegistry] = None):
        self.registry = registry if registry is not None else default_registry()

    def is_valid(self, name: str) -> bool:
        """True if detect() would succeed for this name."""
        try:
            self.detect(name)
        except DomainNameError:
            return False
        return True

    def detect(self, name: str) -> DomainName:
        """Validate a domain name and return its fields.

        Raises:
            DomainNameError: if the name is invalid in any way
        """
        if not name:
            self._reject(name, "Invalid domain name: empty.", ErrorKind.EMPTY)

        if octet_length(name) > DOMAIN_NAME_MAX_SIZE:
            self._reject(name, f"Invalid domain name: longer than {DOMAIN_NAME_MAX_SIZE} octets.",
                         ErrorKind.TOO_LONG)

        if name[0] == '.':
            self._reject(name, "Invalid domain name: starts with a dot.", ErrorKind.LEADING_DOT)

        labels = name.split('.')
        count = len(labels)

        # At least two labels
        if count < 2:
            self._reject(name, "Invalid domain name: needs at least two labels.",
                         ErrorKind.TOO_FEW_LABELS)

        # foobar.com
        if count == 2:
            return self._detect_two_labels(name, labels)

        # www.foobar.com, foobar.com.cn
        last = count - 1
        if not validate_tld(labels[last], self.registry):
            self._reject(name, f"Invalid domain name: unknown TLD '{labels[last]}'.",
                         ErrorKind.UNKNOWN_TLD, labels[last], last)

        if validate_tld(labels[last - 1], self.registry):
            # foobar.com.cn
            tlds = ('.' + labels[last - 1], '.' + labels[last])
            domain_index = count - 3
        else:
            # www.foobar.com
            tlds = ('.' + labels[last],)
            domain_index = count - 2

        domain_label = labels[domain_index]
        kind = domain_label_error(domain_label)
        if kind is not None:
            self._reject(name, f"Invalid domain name: bad domain label '{domain_label}'.",
                         kind, domain_label, domain_index)

        hosts: List[str] = []
        for index in range(domain_index):
            host = labels[index]
            kind = host_error(host)
            if kind is not None:
                self._reject(name, f"Invalid domain name: bad host label '{host}'.",
                             kind, host, index)
            hosts.append(host)

        return DomainName(
            name=name,
            hosts=tuple(hosts),
            domain_label=domain_label,
            top_level_domains=tlds,
        )

    def _detect_two_labels(self, name: str, labels: List[str]) -> DomainName:
        domain_label, tld = labels

        kind = domain_label_error(domain_label)
        if kind is not None:
            self._reject(name, f"Invalid domain name: bad domain label '{domain_label}'.",
                         kind, domain_label, 0)

        if not validate_tld(tld, self.registry):
            self._reject(name, f"Invalid domain name: unknown TLD '{tld}'.",
                         ErrorKind.UNKNOWN_TLD, tld, 1)

        return DomainName(
            name=name,
            domain_label=domain_label,
            top_level_domains=('.' + tld,),
        )

    @staticmethod
    def _reject(name: str, message: str, kind: ErrorKind,
                label: Optional[str] = None, position: Optional[int] = None) -> None:
        logger.debug(f"Rejected {name!r}: {kind.value}")
        raise DomainNameError(message, kind=kind, label=label, position=position)


def detect(name: str, registry: Optional[TLDRegistry] = None) -> DomainName:
    """Validate a domain name and return its fields.

    Uses the bundled TLD list unless a registry is given.

    Examples:
        detect("foobar.com")        → hosts=(), domain_label="foobar", tlds=(".com",)
        detect("www.foobar.com.cn") → hosts=("www",), domain_label="foobar", tlds=(".com", ".cn")
    """
    return DomainNameDetector(registry).detect(name)


def is_valid(name: str, registry: Optional[TLDRegistry] = None) -> bool:
    """True if name is a valid domain name."""
    return DomainNameDetector(registry).is_valid(name)
