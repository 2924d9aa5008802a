"""Construction-time defaults for request builders."""

import os

from pydantic import BaseModel, Field

DEFAULT_TIMEOUT = 30.0
DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


class Settings(BaseModel):
    """Defaults applied to every builder created with these settings.

    Fields:
        default_timeout: Client timeout in seconds, used when a builder has no
            positive timeout of its own.
        proxy_url: Initial proxy URL for new builders.
        verbose: Initial verbose flag for new builders.
    """

    default_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    proxy_url: str | None = None
    verbose: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Optional environment variables:
            HTTPREQ_TIMEOUT_MS: Default request timeout in milliseconds.
            HTTPREQ_PROXY_URL: Proxy URL applied to new builders.
            HTTPREQ_VERBOSE: Set to "1" to enable verbose logging.

        Returns:
            Settings populated from the environment, defaults otherwise.

        Raises:
            ValueError: If HTTPREQ_TIMEOUT_MS is not a valid integer.
        """
        timeout_ms = int(os.environ.get("HTTPREQ_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        proxy_url = os.environ.get("HTTPREQ_PROXY_URL") or None
        verbose = os.environ.get("HTTPREQ_VERBOSE", "") == "1"

        return cls(
            default_timeout=timeout_ms / 1000,
            proxy_url=proxy_url,
            verbose=verbose,
        )
