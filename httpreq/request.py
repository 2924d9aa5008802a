"""Fluent request builder.

Example:
    from httpreq import new

    user = (
        new("GET", "https://api.example.com/teams/:team/users/:user")
        .path_params("core", "42")
        .query_param("expand", "roles")
        .basic_auth("svc", "secret")
        .dispatch_scan(User)
    )

Builders are immutable: every setter returns a new builder and leaves the
receiver untouched, so a configured builder can be shared and dispatched
more than once.
"""

import base64
import copy
import sys
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

import httpx
from pydantic import PydanticUserError, TypeAdapter, ValidationError

from httpreq._internal.body import (
    FormBody,
    JsonBody,
    RawBody,
    ResolvedBody,
    resolve_body,
    select_body,
)
from httpreq._internal.http import build_transport, create_http_client
from httpreq._internal.query import apply_query
from httpreq._internal.validation import substitute_path_params, validate_method
from httpreq.config import Settings
from httpreq.exceptions import (
    DecodeFailedError,
    DispatchFailedError,
    InvalidResponseTargetError,
    NilResponseTargetError,
    RequestConstructionError,
    ResponseReadError,
)


def basic_auth(username: str, password: str) -> str:
    """Return the base64 token for "username:password"."""
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")


class RequestBuilder:
    """Immutable HTTP request configuration with fluent setters.

    Setters never validate; all checks run in `dispatch()` before any
    network I/O.
    """

    def __init__(self, method: str, url: str, *, settings: Settings | None = None) -> None:
        """Initialize the builder.

        Args:
            method: HTTP method, e.g. "GET". Validated at dispatch time.
            url: URL template; "/:name" segments are path placeholders.
            settings: Construction-time defaults. `Settings()` when omitted.
        """
        settings = settings or Settings()
        self._method = method
        self._url = url
        self._settings = settings

        self._path_params: tuple[str, ...] = ()
        self._headers: dict[str, str] = {}
        self._query_params: dict[str, str] = {}
        self._unescape_query_params = False

        self._raw_body: RawBody | None = None
        self._json_body: JsonBody | None = None
        self._form_body: FormBody | None = None
        self._content_type = ""

        self._username = ""
        self._password = ""

        self._client: httpx.Client | None = None
        self._transport: httpx.BaseTransport | None = None
        self._proxy_url = settings.proxy_url
        self._timeout = 0.0
        self._verbose = settings.verbose

    @property
    def method(self) -> str:
        return self._method

    @property
    def url(self) -> str:
        """The URL template as configured, placeholders included."""
        return self._url

    @property
    def settings(self) -> Settings:
        return self._settings

    def _evolve(self, **changes: Any) -> "RequestBuilder":
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, f"_{name}", value)
        return clone

    # =========================================================================
    # Setters
    # =========================================================================

    def http_client(self, client: httpx.Client) -> "RequestBuilder":
        """Use client as-is; proxy, transport and timeout are then ignored.

        The builder never closes a caller-supplied client.
        """
        return self._evolve(client=client)

    def transport(self, transport: httpx.BaseTransport) -> "RequestBuilder":
        """Use transport when the builder creates its own client.

        Takes precedence over `proxy_url()`.
        """
        return self._evolve(transport=transport)

    def proxy_url(self, url: str) -> "RequestBuilder":
        """Route the request through the proxy at url."""
        return self._evolve(proxy_url=url)

    def path_params(self, *values: str) -> "RequestBuilder":
        """Set the values for ":name" placeholders, in URL order.

        Replaces any previously set values.
        """
        return self._evolve(path_params=tuple(values))

    def query_param(self, key: str, value: str) -> "RequestBuilder":
        return self._evolve(query_params={**self._query_params, key: value})

    def header(self, key: str, value: str) -> "RequestBuilder":
        """Set a header sent after the Authorization and Content-Type headers.

        Names colliding with those headers are sent in addition to them.
        """
        return self._evolve(headers={**self._headers, key: value})

    def body_struct(self, value: Any) -> "RequestBuilder":
        """Send value encoded as JSON with an application/json content type.

        None clears the structured body.
        """
        return self._evolve(json_body=None if value is None else JsonBody(value=value))

    def body_values(self, values: Mapping[str, str | list[str]] | None) -> "RequestBuilder":
        """Send values as an application/x-www-form-urlencoded form.

        None clears the form body.
        """
        return self._evolve(form_body=None if values is None else FormBody(values=values))

    def body(self, content: Any) -> "RequestBuilder":
        """Send content as given, overriding `body_struct()` and `body_values()`.

        content may be bytes, str, an iterable of bytes, or a file-like object.
        The content type is whatever `content_type()` set, if anything. None clears
        the raw body.
        """
        return self._evolve(raw_body=None if content is None else RawBody(content=content))

    def content_type(self, value: str) -> "RequestBuilder":
        return self._evolve(content_type=value)

    def timeout(self, timeout: float | timedelta) -> "RequestBuilder":
        """Set the client timeout in seconds; zero or less uses the settings default."""
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        return self._evolve(timeout=float(timeout))

    def unescape_query_params(self, unescape: bool) -> "RequestBuilder":
        """Percent-decode the encoded query string before sending."""
        return self._evolve(unescape_query_params=unescape)

    def verbose(self, verbose: bool) -> "RequestBuilder":
        """Log the request URL and the response body to stderr."""
        return self._evolve(verbose=verbose)

    def basic_auth(self, username: str, password: str) -> "RequestBuilder":
        return self._evolve(username=username, password=password)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _log_verbose(self, message: str) -> None:
        """Log a message to stderr if verbose mode is enabled."""
        if self._verbose:
            print(f"[httpreq] {message}", file=sys.stderr)

    def dispatch(self) -> httpx.Response:
        """Validate, build and send the request.

        Returns:
            The response with its body already read. The caller owns it and
            should close it.

        Raises:
            HttpReqValidationError: Method or path parameters are invalid.
            HttpReqConfigError: Body, URL, query or proxy cannot be used.
            DispatchFailedError: The request could not be sent.
            ResponseReadError: The response body could not be read.
        """
        validate_method(self._method)
        url = substitute_path_params(self._url, self._path_params)

        source = select_body(self._raw_body, self._json_body, self._form_body)
        body = resolve_body(source, self._content_type)

        request = self._build_request(url, body)

        if self._client is not None:
            return self._send(self._client, request)

        transport = self._transport
        if transport is None and self._proxy_url:
            transport = build_transport(self._proxy_url)
        timeout = self._timeout if self._timeout > 0 else self._settings.default_timeout

        client = create_http_client(timeout=timeout, transport=transport)
        if self._transport is not None:
            # Closing the client would close the caller's transport.
            return self._send(client, request)
        with client:
            return self._send(client, request)

    def dispatch_scan(self, target: Any) -> Any:
        """Dispatch and decode the JSON response body into target.

        Args:
            target: A type pydantic can validate into, such as a BaseModel
                subclass, a dataclass, a TypedDict or `dict`.

        Returns:
            The decoded value. The response is closed.

        Raises:
            NilResponseTargetError: target is None. Nothing is sent.
            InvalidResponseTargetError: target is not a type pydantic can
                validate into. Nothing is sent.
            DecodeFailedError: The body does not decode into target.
        """
        if target is None:
            raise NilResponseTargetError("response target is None")
        try:
            adapter = TypeAdapter(target)
        except (PydanticUserError, TypeError) as e:
            raise InvalidResponseTargetError(f"cannot decode into {target!r}: {e}") from e

        response = self.dispatch()
        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            raise DecodeFailedError(
                f"failed to decode {response.status_code} response: {e}",
                status_code=response.status_code,
            ) from e
        finally:
            response.close()

    def _build_request(self, url: str, body: ResolvedBody) -> httpx.Request:
        if self._query_params:
            try:
                url = apply_query(url, self._query_params, unescape=self._unescape_query_params)
            except ValueError as e:
                raise RequestConstructionError(f"failed to create request: {e}") from e

        headers: list[tuple[str, str]] = []
        if self._username or self._password:
            headers.append(("Authorization", "Basic " + basic_auth(self._username, self._password)))
        if body.content_type:
            headers.append(("Content-Type", body.content_type))
        headers.extend(self._headers.items())

        try:
            return httpx.Request(self._method, url, headers=headers, content=body.content)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestConstructionError(f"failed to create request: {e}") from e

    def _send(self, client: httpx.Client, request: httpx.Request) -> httpx.Response:
        self._log_verbose(f"dispatching request to {request.url}")
        try:
            response = client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise DispatchFailedError(f"dispatching request failed: {e}") from e

        # Buffer the body so it outlives a builder-owned client.
        try:
            response.read()
        except (httpx.HTTPError, httpx.StreamError) as e:
            response.close()
            raise ResponseReadError(
                f"error reading body: {e}", status_code=response.status_code
            ) from e

        self._log_verbose(
            f"dispatch response: [{response.status_code}]"
            f"[{response.status_code} {response.reason_phrase}][{response.text}]"
        )
        return response


def new(method: str, url: str, *, settings: Settings | None = None) -> RequestBuilder:
    """Create a request builder for method and url."""
    return RequestBuilder(method, url, settings=settings)
