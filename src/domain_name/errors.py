"""Exceptions raised by the detector and the TLD registry.

Two failure families:
- DomainNameError: one input string failed validation (per call)
- DataSourceError: the TLD list could not be loaded (startup-fatal)
"""

from typing import Optional

from .util.types import ErrorKind


class DomainNameError(ValueError):
    """Invalid domain name.

    Every validation failure raises this one type, so callers that only care
    about pass/fail catch a single exception. The tag fields say what broke:

        kind      ErrorKind for the failed rule
        label     offending label, when a single label is to blame
        position  index of that label in the dot-split input
    """

    def __init__(self, message: str = "Invalid domain name.",
                 kind: Optional[ErrorKind] = None,
                 label: Optional[str] = None,
                 position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.label = label
        self.position = position

    def __repr__(self) -> str:
        kind = self.kind.value if self.kind else None
        return (f"DomainNameError({self.message!r}, kind={kind!r}, "
                f"label={self.label!r}, position={self.position!r})")


class DataSourceError(OSError):
    """TLD data file is missing or unreadable."""

    kind = ErrorKind.DATA_SOURCE
