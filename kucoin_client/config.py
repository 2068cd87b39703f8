"""
Client configuration.

ApiConfig is an immutable value validated when it is built. Unset fields
fall back to DEFAULT_CONFIG; an empty base URI means the production
endpoint.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .constants import (
    DEFAULT_CONFIG,
    ENV_API_BASE_URI,
    ENV_API_KEY,
    ENV_API_SECRET,
    ENV_API_PASSPHRASE,
    ENV_API_PASSPHRASE_MODE,
    PASSPHRASE_MODES,
)
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ApiConfig:
    """Connection settings and credentials for an ApiService."""

    base_uri: str = DEFAULT_CONFIG['base_uri']
    key: str = ""
    secret: str = field(default="", repr=False)
    passphrase: str = field(default="", repr=False)
    passphrase_mode: str = DEFAULT_CONFIG['passphrase_mode']
    timeout: float = DEFAULT_CONFIG['timeout']
    insecure_skip_verify: bool = DEFAULT_CONFIG['insecure_skip_verify']

    def __post_init__(self):
        if not self.base_uri:
            object.__setattr__(self, 'base_uri', DEFAULT_CONFIG['base_uri'])
        object.__setattr__(self, 'base_uri', self.base_uri.rstrip('/'))
        self._validate_config()

    def _validate_config(self):
        """Validate client configuration."""
        if self.key and not self.secret:
            raise ConfigurationError("secret cannot be empty when key is set")

        if self.passphrase_mode not in PASSPHRASE_MODES:
            raise ConfigurationError(
                f"passphrase_mode must be one of {PASSPHRASE_MODES}, got {self.passphrase_mode!r}"
            )

        if self.timeout is None or self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def authenticated(self) -> bool:
        """True when requests will be signed."""
        return bool(self.key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ApiConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            **overrides: Explicit values that win over the environment
        """
        if environ is None:
            environ = os.environ
        values = {
            'base_uri': environ.get(ENV_API_BASE_URI, ""),
            'key': environ.get(ENV_API_KEY, ""),
            'secret': environ.get(ENV_API_SECRET, ""),
            'passphrase': environ.get(ENV_API_PASSPHRASE, ""),
            'passphrase_mode': environ.get(ENV_API_PASSPHRASE_MODE) or DEFAULT_CONFIG['passphrase_mode'],
        }
        values.update(overrides)
        return cls(**values)
