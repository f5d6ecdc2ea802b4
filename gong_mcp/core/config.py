# =============================================================================
# gong_mcp/core/config.py  —  Credentials & Environment Loading
# =============================================================================
#
# The server needs exactly two secrets, both issued by a Gong admin under
# "Company Settings → Ecosystem → API":
#
#     GONG_ACCESS_KEY      the access key identifier
#     GONG_ACCESS_SECRET   the matching secret
#
# They are read ONCE at startup and held in an immutable GongCredentials
# object that is passed explicitly to the API client.  Nothing else in the
# package reads the environment.
#
# A ``.env`` file in the working directory is honored (python-dotenv), but the
# entry point loads it; this module only looks at the mapping it is given.
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

ACCESS_KEY_VAR = "GONG_ACCESS_KEY"
ACCESS_SECRET_VAR = "GONG_ACCESS_SECRET"


class ConfigurationError(Exception):
    """Raised when the process cannot start because configuration is missing."""


@dataclass(frozen=True)
class GongCredentials:
    """An access key / secret pair for the Gong API."""

    access_key: str
    # repr=False keeps the secret out of log lines and tracebacks.
    access_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.access_key or not self.access_secret:
            raise ConfigurationError("Gong access key and secret must both be non-empty")


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> GongCredentials:
    """Read the Gong credentials from the environment.

    Args:
        environ: Mapping to read from.  Defaults to ``os.environ``; tests pass
                 a plain dict instead of patching the real environment.

    Returns:
        The loaded GongCredentials.

    Raises:
        ConfigurationError: if either variable is missing or empty.
    """
    env = os.environ if environ is None else environ
    access_key = env.get(ACCESS_KEY_VAR, "")
    access_secret = env.get(ACCESS_SECRET_VAR, "")

    if not access_key or not access_secret:
        raise ConfigurationError(
            f"{ACCESS_KEY_VAR} and {ACCESS_SECRET_VAR} environment variables are required"
        )
    return GongCredentials(access_key=access_key, access_secret=access_secret)
