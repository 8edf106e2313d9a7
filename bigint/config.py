"""Service configuration for the calculator API."""

import os
from dataclasses import dataclass

# Maximum request body size (1 MB); a maximal operand is only ~30 KB
DEFAULT_MAX_REQUEST_SIZE = 1024 * 1024


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class ApiConfig:
    """Settings for the calculator HTTP service.

    Attributes:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to bind to (default: 8000)
        debug: Enable uvicorn reload mode (default: False)
        max_request_size: Reject request bodies larger than this many bytes
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    max_request_size: int = DEFAULT_MAX_REQUEST_SIZE

    @classmethod
    def from_env(cls, base: "ApiConfig | None" = None) -> "ApiConfig":
        """Build a config from BIGINT_* environment variables.

        Variables that are not set keep the value from ``base``, which
        defaults to DEFAULT_API_CONFIG.

        - BIGINT_HOST
        - BIGINT_PORT
        - BIGINT_DEBUG
        - BIGINT_MAX_REQUEST_SIZE
        """
        if base is None:
            base = DEFAULT_API_CONFIG
        return cls(
            host=os.environ.get("BIGINT_HOST", base.host),
            port=int(os.environ.get("BIGINT_PORT", str(base.port))),
            debug=_env_flag("BIGINT_DEBUG", base.debug),
            max_request_size=int(
                os.environ.get("BIGINT_MAX_REQUEST_SIZE", str(base.max_request_size))
            ),
        )


# Default configuration instance
DEFAULT_API_CONFIG = ApiConfig()
