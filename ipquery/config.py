import os
from dataclasses import dataclass

from ipquery.client import DEFAULT_BASE_URL


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Configuration for the demo lookup service, read from the environment.

    The client never reads the environment itself; the service builds one
    from these values.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = 5.0
    pooled: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        timeout = os.getenv("IPQUERY_TIMEOUT_SECONDS", "5.0").strip()
        return cls(
            base_url=os.getenv("IPQUERY_BASE_URL", DEFAULT_BASE_URL),
            # An empty value disables the timeout.
            timeout_seconds=float(timeout) if timeout else None,
            pooled=_env_bool("IPQUERY_POOLED", False),
        )
