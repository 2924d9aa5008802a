"""Pre-flight checks run before any body or network work."""

from collections.abc import Sequence

from httpreq.exceptions import (
    EmptyMethodError,
    NoPathParamValueError,
    PathParamConflictError,
    PathParamCountMismatchError,
    UnknownMethodError,
)

HTTP_METHODS: frozenset[str] = frozenset({
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "HEAD",
    "OPTIONS",
    "CONNECT",
    "TRACE",
    "PATCH",
})

PATH_PARAM_INDICATOR = ":"
URL_SEPARATOR = "/"
URL_PATH_PARAM_SEPARATOR = URL_SEPARATOR + PATH_PARAM_INDICATOR


def validate_method(method: str) -> None:
    """Reject empty or unknown HTTP methods.

    Matching is case-sensitive: "get" is not a known method.
    """
    if not method:
        raise EmptyMethodError("request method is not set")
    if method not in HTTP_METHODS:
        raise UnknownMethodError(f"unknown request method: {method!r}")


def substitute_path_params(url: str, values: Sequence[str]) -> str:
    """Replace ":name" segments of url with values, left to right.

    URLs without a "/:" segment are returned unchanged whatever values holds.

    Args:
        url: URL template, e.g. "http://host/teams/:team/users/:user".
        values: Replacement values in placeholder order.

    Returns:
        The URL with every placeholder substituted.

    Raises:
        NoPathParamValueError: Placeholders exist but no values were passed.
        PathParamCountMismatchError: Value count differs from placeholder count.
        PathParamConflictError: Placeholder segments and values disagree after
            splitting the URL.
    """
    if URL_PATH_PARAM_SEPARATOR not in url:
        return url

    if not values:
        raise NoPathParamValueError("no path param value passed")

    placeholders = url.count(URL_PATH_PARAM_SEPARATOR)
    if placeholders != len(values):
        raise PathParamCountMismatchError(
            f"url has {placeholders} path parameter(s) but {len(values)} value(s) were passed"
        )

    segments = url.split(URL_SEPARATOR)
    seen = 0
    for i, segment in enumerate(segments):
        if segment.startswith(PATH_PARAM_INDICATOR):
            if seen < len(values):
                segments[i] = values[seen]
            seen += 1

    # A leading ":segment" has no "/" before it and escapes the count above.
    if seen != len(values):
        raise PathParamConflictError(
            f"url has {seen} path parameter segment(s) but {len(values)} value(s) were passed"
        )

    return URL_SEPARATOR.join(segments)
