"""
Constants for the KuCoin client library.
"""

# Production REST endpoint, used when no base URI is configured
API_BASE_URI = "https://openapi-v2.kucoin.com"

# HTTP Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_API_KEY = "KC-API-KEY"
HEADER_API_PASSPHRASE = "KC-API-PASSPHRASE"
HEADER_API_TIMESTAMP = "KC-API-TIMESTAMP"
HEADER_API_SIGN = "KC-API-SIGN"
HEADER_API_KEY_VERSION = "KC-API-KEY-VERSION"

CONTENT_TYPE_JSON = "application/json"

# Passphrase modes: sent verbatim, or HMAC-signed (key version 2)
PASSPHRASE_PLAIN = "plain"
PASSPHRASE_SIGNED = "signed"
PASSPHRASE_MODES = (PASSPHRASE_PLAIN, PASSPHRASE_SIGNED)
SIGNED_PASSPHRASE_KEY_VERSION = "2"

# Envelope code returned by every successful API call
API_SUCCESS_CODE = "200000"

# Environment variables read by ApiConfig.from_env()
ENV_API_BASE_URI = "API_BASE_URI"
ENV_API_KEY = "API_KEY"
ENV_API_SECRET = "API_SECRET"
ENV_API_PASSPHRASE = "API_PASSPHRASE"
ENV_API_PASSPHRASE_MODE = "API_PASSPHRASE_MODE"

# Default configuration values
DEFAULT_CONFIG = {
    'base_uri': API_BASE_URI,
    'passphrase_mode': PASSPHRASE_PLAIN,
    'timeout': 30,                  # HTTP timeout in seconds
    'insecure_skip_verify': False,
}
