"""httpreq: fluent HTTP request builder.

Public API:
    new - Create a RequestBuilder for a method and URL
    RequestBuilder - Immutable request configuration with dispatch/dispatch_scan
    Settings - Construction-time defaults (timeout, proxy, verbose)
"""

from httpreq._internal.body import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON
from httpreq._version import __version__
from httpreq.config import DEFAULT_TIMEOUT, Settings
from httpreq.exceptions import (
    DecodeFailedError,
    DispatchFailedError,
    EmptyMethodError,
    HttpReqAPIError,
    HttpReqConfigError,
    HttpReqError,
    HttpReqValidationError,
    InvalidResponseTargetError,
    NilResponseTargetError,
    NoPathParamValueError,
    PathParamConflictError,
    PathParamCountMismatchError,
    ProxyParseError,
    QueryUnescapeError,
    RequestConstructionError,
    ResponseReadError,
    SerializationFailedError,
    UnknownMethodError,
)
from httpreq.request import RequestBuilder, new

__all__ = [
    "__version__",
    "new",
    "RequestBuilder",
    "Settings",
    "DEFAULT_TIMEOUT",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_FORM",
    "HttpReqError",
    "HttpReqValidationError",
    "HttpReqConfigError",
    "HttpReqAPIError",
    "EmptyMethodError",
    "UnknownMethodError",
    "NoPathParamValueError",
    "PathParamCountMismatchError",
    "PathParamConflictError",
    "NilResponseTargetError",
    "InvalidResponseTargetError",
    "SerializationFailedError",
    "RequestConstructionError",
    "ProxyParseError",
    "QueryUnescapeError",
    "DispatchFailedError",
    "ResponseReadError",
    "DecodeFailedError",
]
