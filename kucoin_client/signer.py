"""
Request signing for the KuCoin API.

Signatures are HMAC-SHA256 digests keyed by the API secret and encoded as
base64, ready to be sent as header values.
"""

import base64
import hashlib
import hmac
from typing import Optional

from .exceptions import ConfigurationError


class Signer:
    """
    Stateless signer closing over the API secret and passphrase.

    Safe to share between threads; signing never mutates the instance.
    """

    def __init__(self, secret: str, passphrase: str = ""):
        if not secret:
            raise ConfigurationError("secret cannot be empty")
        self._secret = secret.encode('utf-8')
        self._passphrase = passphrase.encode('utf-8')

    def _hmac(self, data: bytes) -> bytes:
        mac = hmac.new(self._secret, data, hashlib.sha256)
        return base64.b64encode(mac.digest())

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message.

        Args:
            message: Signing payload (timestamp + method + URI + body)

        Returns:
            Base64-encoded HMAC-SHA256 signature
        """
        return self._hmac(message)

    def sign_passphrase(self, passphrase: Optional[bytes] = None) -> bytes:
        """
        Sign the passphrase for API keys that require it (key version 2).

        Defaults to the passphrase given at construction.
        """
        if passphrase is None:
            passphrase = self._passphrase
        return self._hmac(passphrase)
