"""Transport and client construction for dispatched requests."""

import httpx

from httpreq.config import DEFAULT_TIMEOUT
from httpreq.exceptions import ProxyParseError


def build_transport(proxy_url: str | None = None) -> httpx.BaseTransport:
    """Create a transport, routed through proxy_url when one is given.

    Args:
        proxy_url: Optional proxy URL (http, https or socks5 scheme).

    Returns:
        An httpx.HTTPTransport instance.

    Raises:
        ProxyParseError: If proxy_url is malformed or has an unsupported scheme.
    """
    if not proxy_url:
        return httpx.HTTPTransport()

    try:
        proxy = httpx.Proxy(url=proxy_url)
    except (httpx.InvalidURL, ValueError) as e:
        raise ProxyParseError(f"failed to parse proxy url {proxy_url!r}: {e}") from e
    return httpx.HTTPTransport(proxy=proxy)


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        transport: Optional transport; httpx's default when omitted.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(timeout=timeout, transport=transport)
