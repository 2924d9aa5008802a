"""Query-string encoding for dispatched requests."""

import re
from collections.abc import Mapping
from urllib.parse import parse_qsl, unquote_plus, urlencode, urlsplit, urlunsplit

from httpreq.exceptions import QueryUnescapeError

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_query(existing: str, params: Mapping[str, str]) -> str:
    """Merge params into an existing query and encode the result.

    Keys are sorted; values for a repeated key keep their order, with the
    URL's own values first.
    """
    merged: dict[str, list[str]] = {}
    for key, value in parse_qsl(existing, keep_blank_values=True):
        merged.setdefault(key, []).append(value)
    for key, value in params.items():
        merged.setdefault(key, []).append(value)
    return urlencode([(key, value) for key in sorted(merged) for value in merged[key]])


def unescape_query(query: str) -> str:
    """Percent-decode an encoded query string, "+" becoming a space.

    Raises:
        QueryUnescapeError: If the string holds a malformed "%" escape.
    """
    bad = _BAD_ESCAPE.search(query)
    if bad is not None:
        raise QueryUnescapeError(
            f"query unescape failed: invalid escape {query[bad.start():bad.start() + 3]!r}"
        )
    return unquote_plus(query)


def apply_query(url: str, params: Mapping[str, str], *, unescape: bool = False) -> str:
    """Return url with params merged into its query string.

    With unescape set, the encoded query is decoded again before use. Decoded
    values containing "&" or "=" are not re-escaped and change how the
    server splits the query. A decoded "#" starts the URL fragment, so it and
    everything after it are not sent as part of the query.
    """
    parts = urlsplit(url)
    query = encode_query(parts.query, params)
    if unescape:
        query = unescape_query(query)
    return urlunsplit(parts._replace(query=query))
