"""Core data types and enums used across the detector.

These types make detection results explicit and consistent.
No magic strings floating around - every rejection reason has a defined meaning.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional, Tuple
from datetime import datetime


class ErrorKind(Enum):
    """Why a domain name (or the TLD data source) was rejected.

    Structural: the string as a whole is malformed.
    Unknown TLD: the trailing label is not in the registry.
    Domain label / host: a specific label broke a field rule.
    Data source: the TLD list could not be loaded at all.
    """
    # Structural
    EMPTY = "empty"
    TOO_LONG = "too_long"
    LEADING_DOT = "leading_dot"
    TOO_FEW_LABELS = "too_few_labels"

    # TLD
    UNKNOWN_TLD = "unknown_tld"

    # Domain label
    DOMAIN_LABEL_LENGTH = "domain_label_length"
    DOMAIN_LABEL_HYPHEN = "domain_label_hyphen"
    DOMAIN_LABEL_CHARSET = "domain_label_charset"

    # Host label
    HOST_LENGTH = "host_length"
    HOST_HYPHEN = "host_hyphen"
    HOST_CHARSET = "host_charset"

    # Startup
    DATA_SOURCE = "data_source"

    @property
    def category(self) -> str:
        """Coarse grouping: structural, tld, domain_label, host or data_source."""
        if self in _STRUCTURAL:
            return "structural"
        if self is ErrorKind.UNKNOWN_TLD:
            return "tld"
        if self.value.startswith("domain_label"):
            return "domain_label"
        if self.value.startswith("host"):
            return "host"
        return "data_source"


_STRUCTURAL = frozenset({
    ErrorKind.EMPTY,
    ErrorKind.TOO_LONG,
    ErrorKind.LEADING_DOT,
    ErrorKind.TOO_FEW_LABELS,
})


@dataclass(frozen=True)
class DomainName:
    """A successfully validated domain name, split into its fields.

    Only the detector builds these. Frozen so nothing can change
    a result after validation.
    """
    name: str  # Original input, unmodified
    hosts: Tuple[str, ...] = ()  # e.g. ("download", "file")
    domain_label: str = ""  # e.g. "foobar"
    top_level_domains: Tuple[str, ...] = ()  # e.g. (".com", ".cn")

    @property
    def suffix(self) -> str:
        """Joined TLD labels, e.g. ".com.cn"."""
        return "".join(self.top_level_domains)

    @property
    def registrable_domain(self) -> str:
        """Domain label plus its TLDs, e.g. "foobar.com.cn"."""
        return self.domain_label + self.suffix

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for CSV/JSON output."""
        return {
            'name': self.name,
            'hosts': list(self.hosts),
            'domain_label': self.domain_label,
            'top_level_domains': list(self.top_level_domains),
        }


@dataclass
class DetectionResult:
    """Outcome of detecting one name in a batch.

    Batch runs never raise for bad input - every name produces one of these.
    """
    name: str
    valid: bool
    domain: Optional[DomainName] = None
    reason_code: Optional[ErrorKind] = None
    message: str = ""
    duration_ms: float = 0.0
    timestamp: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten for CSV/JSON output."""
        domain = self.domain
        return {
            'name': self.name,
            'valid': self.valid,
            'hosts': '.'.join(domain.hosts) if domain else '',
            'domain_label': domain.domain_label if domain else '',
            'top_level_domains': domain.suffix if domain else '',
            'reason_code': self.reason_code.value if self.reason_code else '',
            'message': self.message,
            'duration_ms': round(self.duration_ms, 3),
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
        }


@dataclass
class DetectorConfig:
    """Runtime configuration for the CLI and batch runs.

    All values come from .env with sane defaults.
    CLI flags override them.
    """
    tlds_file: Optional[str] = None  # None means the bundled list
    out_dir: str = "out"
    enable_excel: bool = False
    workers: int = 1
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        # Detection is CPU-bound and holds the GIL, so extra threads do not
        # speed it up. Zero or negative means run inline.
        if self.workers <= 0:
            self.workers = 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dict for run metadata."""
        return {
            'tlds_file': self.tlds_file or 'bundled',
            'out_dir': self.out_dir,
            'enable_excel': self.enable_excel,
            'workers': self.workers,
            'log_level': self.log_level,
        }
