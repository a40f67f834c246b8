"""
Domain name detector - validate and decompose domain names
"""

__version__ = "1.0.0"

from .detector import DomainNameDetector, detect, is_valid
from .errors import DomainNameError, DataSourceError
from .registry import TLDRegistry, default_registry, load
from .util.types import DomainName, ErrorKind
from .validators import validate_host, validate_domain_label, validate_tld

__all__ = [
    'DomainNameDetector',
    'detect',
    'is_valid',
    'DomainNameError',
    'DataSourceError',
    'TLDRegistry',
    'default_registry',
    'load',
    'DomainName',
    'ErrorKind',
    'validate_host',
    'validate_domain_label',
    'validate_tld',
]
