"""Field validators - one rule set per kind of label.

A domain name like "www.foobar.com.cn" is made of three kinds of labels:

    www      host label    (subdomain, optional, any number)
    foobar   domain label  (exactly one, the registrable part)
    com, cn  TLD labels    (one or two, must be in the registry)

Each validator looks at a single label, never the full dotted string.
All of them are pure functions.

Lengths are counted in UTF-8 octets, since the RFC 1035 limits are octet
limits. Labels that are not pure ASCII (e.g. "时尚") skip the character-class
check once the length and hyphen rules pass. That is a concession for
internationalized labels, not IDNA validation.

REFERENCES:
- RFC 1035 section 2.3.4: size limits
"""

import re
from typing import Optional

from .registry import TLDRegistry
from .util.types import ErrorKind

# 2.3.4. Size limits https://tools.ietf.org/html/rfc1035
DOMAIN_NAME_MAX_SIZE = 253
LABEL_MAX_SIZE = 63
TLD_MIN_SIZE = 3  # dot + two letters

_LABEL_CHARS = re.compile(r'[a-z0-9-]+', re.IGNORECASE)


def octet_length(value: str) -> int:
    """Length of a string in UTF-8 octets."""
    return len(value.encode('utf-8', 'surrogatepass'))


def _has_valid_chars(label: str) -> bool:
    # Only plain ASCII labels get the regex; native-script labels pass
    if label.isascii():
        return _LABEL_CHARS.fullmatch(label) is not None
    return True


def host_error(label: str) -> Optional[ErrorKind]:
    """Return why a host label is invalid, or None if it is fine.

    Host labels are letters, digits and hyphens. They may be a single
    character, but not empty, not "-", and not starting or ending with "-".
    """
    size = octet_length(label)

    if size == 0 or size > LABEL_MAX_SIZE:
        return ErrorKind.HOST_LENGTH

    if label == '-':
        return ErrorKind.HOST_HYPHEN

    if size >= 2 and (label[0] == '-' or label[-1] == '-'):
        return ErrorKind.HOST_HYPHEN

    if not _has_valid_chars(label):
        return ErrorKind.HOST_CHARSET

    return None


def domain_label_error(label: str) -> Optional[ErrorKind]:
    """Return why a domain label is invalid, or None if it is fine.

    Same character rules as hosts, but stricter on length: a single
    character domain label ("f.com") is rejected.
    """
    size = octet_length(label)

    if size <= 1 or size > LABEL_MAX_SIZE:
        return ErrorKind.DOMAIN_LABEL_LENGTH

    if label[0] == '-' or label[-1] == '-':
        return ErrorKind.DOMAIN_LABEL_HYPHEN

    if not _has_valid_chars(label):
        return ErrorKind.DOMAIN_LABEL_CHARSET

    return None


def validate_host(label: str) -> bool:
    """True if label is a valid host (subdomain) label."""
    return host_error(label) is None


def validate_domain_label(label: str) -> bool:
    """True if label is a valid registrable domain label."""
    return domain_label_error(label) is None


def validate_tld(label: str, registry: TLDRegistry) -> bool:
    """True if "." + label is a known TLD within the allowed length range."""
    key = '.' + label
    size = octet_length(key)

    if size < TLD_MIN_SIZE or size > LABEL_MAX_SIZE:
        return False

    return registry.contains(key)
