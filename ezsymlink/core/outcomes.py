from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ezsymlink.core.errors import LinkError, Severity
from ezsymlink.domain.links import LinkRequest


@dataclass(frozen=True)
class Success:
    message: str


@dataclass(frozen=True)
class Error:
    message: str
    code: str = "io_error"
    severity: Severity = "error"

    @classmethod
    def from_exception(cls, error: LinkError) -> "Error":
        return cls(message=str(error), code=error.code, severity=error.severity)


@dataclass(frozen=True)
class ConfirmationRequired:
    request: LinkRequest
    prompt: str


Outcome = Union[Success, Error, ConfirmationRequired]
