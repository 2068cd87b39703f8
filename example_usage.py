#!/usr/bin/env python3
"""
Basic usage examples for the KuCoin client library.

Public endpoints work without credentials. Set API_KEY, API_SECRET and
API_PASSPHRASE (and optionally API_BASE_URI, API_PASSPHRASE_MODE) to try
the private ones.
"""

import logging
import sys

from kucoin_client import ApiConfig, ApiService, Request, Signer, KucoinClientError


def main():
    """Run basic usage examples."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )

    print("=== KuCoin Client Basic Usage Examples ===\n")

    config = ApiConfig.from_env()
    print("1. Configuration loaded from environment...")
    print(f"   Base URI: {config.base_uri}")
    print(f"   Authenticated: {config.authenticated}\n")

    # Signing on its own, no network involved
    print("2. Signing a payload...")
    signer = Signer("secret")
    payload = b"1700000000000GET/api/v1/accounts"
    print(f"   Payload: {payload}")
    print(f"   Signature: {signer.sign(payload).decode()}\n")

    with ApiService(config) as service:
        try:
            print("3. Server time (public)...")
            envelope = service.get("/api/v1/timestamp")
            print(f"   Code: {envelope.code}")
            print(f"   Server time: {envelope.read_data()}\n")

            print("4. Best bid/ask for BTC-USDT (public, query string)...")
            ticker = service.get("/api/v1/market/orderbook/level1", params={"symbol": "BTC-USDT"}).read_data()
            print(f"   Price: {ticker['price']}  bid: {ticker['bestBid']}  ask: {ticker['bestAsk']}\n")

            if config.authenticated:
                print("5. Accounts (private, signed)...")
                request = Request("GET", "/api/v1/accounts", params={"type": "trade"})
                envelope = service.call(request)
                print(f"   Signed URI: {request.request_uri()}")
                accounts = envelope.read_data()
                for account in accounts:
                    print(f"   {account['currency']}: {account['balance']}")
            else:
                print("5. Skipping private endpoints (no API_KEY set)")
        except KucoinClientError as e:
            print(f"   ✗ {type(e).__name__}: {e}")
            return 1

    print("\n=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
