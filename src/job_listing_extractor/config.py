import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_FETCH_TIMEOUT = "15"
DEFAULT_CORS_ALLOW_ORIGINS = "*"


def get_config() -> dict[str, str]:
    """
    Read configuration from environment variables.
    Called lazily so that importing the package never fails; required values
    are validated when they are accessed.
    """
    return {
        "SUPABASE_URL": os.getenv("SUPABASE_URL", "").strip(),
        "SUPABASE_ANON_KEY": os.getenv("SUPABASE_ANON_KEY", "").strip(),
        "FETCH_TIMEOUT": os.getenv("FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT),
        "CORS_ALLOW_ORIGINS": os.getenv("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ALLOW_ORIGINS),
    }


class _Config:
    """Lazy configuration that only validates when values are actually accessed."""

    def __init__(self) -> None:
        self._config: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._config is None:
            self._config = get_config()
        return self._config

    def _required(self, name: str) -> str:
        value = self._load()[name]
        if not value:
            raise ValueError(f"{name} is not set in the environment variables.")
        return value

    @property
    def SUPABASE_URL(self) -> str:
        """Base URL of the auth backend, without a trailing slash."""
        return self._required("SUPABASE_URL").rstrip("/")

    @property
    def SUPABASE_ANON_KEY(self) -> str:
        return self._required("SUPABASE_ANON_KEY")

    @property
    def FETCH_TIMEOUT(self) -> float:
        """Overall timeout in seconds for outbound page fetches. Must be positive."""
        raw = self._load()["FETCH_TIMEOUT"]
        try:
            timeout = float(raw)
        except ValueError:
            raise ValueError(f"FETCH_TIMEOUT must be a positive number, got '{raw}'") from None
        if timeout <= 0:
            raise ValueError(f"FETCH_TIMEOUT must be a positive number, got {timeout}")
        return timeout

    @property
    def CORS_ALLOW_ORIGINS(self) -> list[str]:
        """Comma-separated list of origins allowed to call the HTTP API."""
        raw = self._load()["CORS_ALLOW_ORIGINS"]
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


_cfg = _Config()

# Module-level type declarations for mypy.
# The values are resolved by __getattr__ below on first access.
SUPABASE_URL: str
SUPABASE_ANON_KEY: str
FETCH_TIMEOUT: float
CORS_ALLOW_ORIGINS: list[str]

_LAZY_NAMES = ("SUPABASE_URL", "SUPABASE_ANON_KEY", "FETCH_TIMEOUT", "CORS_ALLOW_ORIGINS")


# Module-level lazy access using __getattr__ (PEP 562).
# `from job_listing_extractor.config import FETCH_TIMEOUT` resolves the value
# at the point of import, so callers that must not fail early read it inside
# functions instead.
def __getattr__(name: str) -> str | float | list[str]:
    if name in _LAZY_NAMES:
        return getattr(_cfg, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
