#!/usr/bin/env python3
"""
OAuth Refresh Token Generator for the Content API

Generates a refresh token with the Content API scope:
- https://www.googleapis.com/auth/content

Usage:
    python -m shopping.common.authorize

1. Open the printed URL in your browser
2. Authorize the app
3. Paste the authorization code back here
4. Copy the refresh token to your .env as GOOGLE_REFRESH_TOKEN
"""

import os
import sys
from urllib.parse import urlencode

import requests

from shopping.common.config import CONTENT_SCOPE, TOKEN_URL, common_arg_parser, load_env

AUTH_URL = "https://accounts.google.com/o/oauth2/auth"
REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"


def build_auth_url(client_id: str) -> str:
    """Consent URL; prompt=consent forces a fresh refresh token."""
    auth_params = {
        "client_id": client_id,
        "redirect_uri": REDIRECT_URI,
        "scope": CONTENT_SCOPE,
        "response_type": "code",
        "access_type": "offline",
        "prompt": "consent",
    }
    return f"{AUTH_URL}?{urlencode(auth_params)}"


def exchange_code(client_id: str, client_secret: str, auth_code: str) -> dict:
    """Exchange an authorization code for tokens. Returns the token payload."""
    response = requests.post(
        TOKEN_URL,
        data={
            "client_id": client_id,
            "client_secret": client_secret,
            "code": auth_code,
            "grant_type": "authorization_code",
            "redirect_uri": REDIRECT_URI,
        },
        timeout=30,
    )
    if response.status_code != 200:
        raise RuntimeError(f"Token exchange failed: {response.text}")
    return response.json()


def main():
    parser = common_arg_parser("Generate an OAuth refresh token for the Content API")
    args = parser.parse_args()

    print("=" * 70)
    print("OAuth Token Generator - Content API")
    print("=" * 70)
    print()

    env_path = load_env(args.env_file)
    client_id = os.getenv("GOOGLE_CLIENT_ID")
    client_secret = os.getenv("GOOGLE_CLIENT_SECRET")

    if not client_id or not client_secret:
        print("ERROR: Missing GOOGLE_CLIENT_ID or GOOGLE_CLIENT_SECRET")
        sys.exit(1)

    print("STEP 1: Open this URL in your browser and authorize:")
    print()
    print(build_auth_url(client_id))
    print()

    auth_code = input("STEP 2: Paste the authorization code here: ").strip()
    if not auth_code:
        print("ERROR: No authorization code provided")
        sys.exit(1)

    print()
    print("Exchanging authorization code for tokens...")
    try:
        tokens = exchange_code(client_id, client_secret, auth_code)
    except (RuntimeError, requests.RequestException) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    refresh_token = tokens.get("refresh_token")
    if not refresh_token:
        print("ERROR: No refresh token received. Make sure you used prompt=consent")
        print(f"Response: {tokens}")
        sys.exit(1)

    print()
    print("=" * 70)
    print("SUCCESS! Copy this REFRESH TOKEN to your .env as GOOGLE_REFRESH_TOKEN:")
    print("=" * 70)
    print()
    print(refresh_token)
    print()
    if env_path:
        print(f"Update your .env file: {env_path}")


if __name__ == "__main__":
    main()
