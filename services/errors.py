from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    INVALID_PARAMETER = "InvalidParameter"
    ENDPOINT_RESOLUTION_FAILED = "EndpointResolutionFailed"
    TRANSPORT_FAILURE = "TransportFailure"
    REMOTE_ERROR = "RemoteError"
    MALFORMED_RESPONSE = "MalformedResponse"
    APPLICATION_ERROR = "ApplicationError"


class CandidateFetchError(Exception):
    """Base failure for a candidate fetch; `kind` tells the stage that failed.

    Subclasses carry the structured fields relevant to their kind. Callers can
    catch the base class and branch on `kind`, or catch a subclass directly.
    """

    kind: ErrorKind

    def __init__(self, message: Optional[str], **fields: Any) -> None:
        super().__init__(message if message is not None else "")
        self.message = message
        self.fields = fields

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        data.update(self.fields)
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class InvalidParameterError(CandidateFetchError):
    kind = ErrorKind.INVALID_PARAMETER

    def __init__(self, parameter: str, value: Any, allowed: list[str]) -> None:
        super().__init__(
            f"Invalid {parameter} {value!r}; expected one of: {', '.join(allowed)}",
            parameter=parameter,
            value=value,
            allowed=allowed,
        )
        self.parameter = parameter
        self.value = value
        self.allowed = allowed


class EndpointResolutionError(CandidateFetchError):
    kind = ErrorKind.ENDPOINT_RESOLUTION_FAILED

    def __init__(self, endpoint_name: str, detail: str) -> None:
        super().__init__(
            f"Could not resolve named endpoint {endpoint_name!r}: {detail}",
            endpoint_name=endpoint_name,
            detail=detail,
        )
        self.endpoint_name = endpoint_name
        self.detail = detail


class TransportError(CandidateFetchError):
    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, endpoint: str, detail: str) -> None:
        super().__init__(detail, endpoint=endpoint, detail=detail)
        self.endpoint = endpoint
        self.detail = detail


class RemoteError(CandidateFetchError):
    kind = ErrorKind.REMOTE_ERROR

    def __init__(self, status_code: int, reason: Optional[str], body: Optional[str]) -> None:
        super().__init__(
            f"{status_code} {reason or ''}: {body or ''}",
            status_code=status_code,
            reason=reason,
            body=body,
        )
        self.status_code = status_code
        self.reason = reason
        self.body = body


class MalformedResponseError(CandidateFetchError):
    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed datasource response: {detail}", detail=detail)
        self.detail = detail


class ApplicationError(CandidateFetchError):
    kind = ErrorKind.APPLICATION_ERROR

    def __init__(self, error: Optional[str]) -> None:
        # The remote error text is surfaced verbatim, including None or ""
        super().__init__(error, remote_error=error)
        self.remote_error = error
