"""Public exceptions for httpreq."""


class HttpReqError(Exception):
    """Base exception for all httpreq errors."""


class HttpReqValidationError(HttpReqError):
    """Request configuration rejected before any network I/O."""


class HttpReqConfigError(HttpReqError):
    """Configuration that cannot be turned into a request."""


class HttpReqAPIError(HttpReqError):
    """Error while talking to the remote server."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# =============================================================================
# Validation
# =============================================================================


class EmptyMethodError(HttpReqValidationError):
    """Request method is not set."""


class UnknownMethodError(HttpReqValidationError):
    """Request method is not a known HTTP method."""


class NoPathParamValueError(HttpReqValidationError):
    """URL has path placeholders but no values were passed."""


class PathParamCountMismatchError(HttpReqValidationError):
    """Number of path values differs from the number of placeholders."""


class PathParamConflictError(HttpReqValidationError):
    """Substitution consumed a different number of values than were passed."""


class NilResponseTargetError(HttpReqValidationError):
    """dispatch_scan was called without a decode target."""


class InvalidResponseTargetError(HttpReqValidationError):
    """dispatch_scan target is not a type the response can be decoded into."""


# =============================================================================
# Request construction
# =============================================================================


class SerializationFailedError(HttpReqConfigError):
    """Structured body could not be encoded as JSON."""


class RequestConstructionError(HttpReqConfigError):
    """Underlying request object could not be built."""


class ProxyParseError(HttpReqConfigError):
    """Proxy URL is malformed or unsupported."""


class QueryUnescapeError(HttpReqConfigError):
    """Encoded query string holds a malformed percent escape."""


# =============================================================================
# Dispatch
# =============================================================================


class DispatchFailedError(HttpReqAPIError):
    """Transport or network failure while sending the request."""


class ResponseReadError(HttpReqAPIError):
    """Response body could not be read."""


class DecodeFailedError(HttpReqAPIError):
    """Response body is not valid JSON for the requested target."""
