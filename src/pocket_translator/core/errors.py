"""Error taxonomy for translation attempts."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classified reason a translation attempt failed."""

    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    RATE_LIMITED = "rate_limited"
    INVALID_REQUEST = "invalid_request"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    GENERIC_FAILURE = "generic_failure"
    MALFORMED_RESPONSE = "malformed_response"
    NETWORK_ERROR = "network_error"


@dataclass(frozen=True)
class TranslationError:
    """
    A classified failure of one attempt.

    Attributes:
        kind: Category of the failure.
        message: User-facing text, always non-empty.
        connectivity: True when caused by the transport or the client-side
            deadline rather than a status reported by the server.
        status_code: HTTP status, when one was received.
        detail: Diagnostic text read from the error body, if any.
    """

    kind: ErrorKind
    message: str
    connectivity: bool = False
    status_code: Optional[int] = None
    detail: str = ""

    @property
    def is_retryable(self) -> bool:
        """True if a second attempt is allowed after this failure."""
        if self.kind is ErrorKind.NETWORK_ERROR:
            return True
        return self.kind is ErrorKind.TIMEOUT and self.connectivity
