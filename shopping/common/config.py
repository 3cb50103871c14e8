"""
Configuration + Credentials

Samples read their settings from a .env file (python-dotenv) and the process
environment:

    MERCHANT_ID             Merchant Center account ID (required)
    MERCHANT_IS_MCA         true/false; detected via accounts/authinfo when unset
    MERCHANT_SAMPLE_USER    email address used by the add-user sample
    GOOGLE_CLIENT_ID        OAuth client
    GOOGLE_CLIENT_SECRET    OAuth client
    GOOGLE_REFRESH_TOKEN    refresh token (see shopping.common.authorize)
    CONTENT_API_SANDBOX     true routes calls to the sandbox endpoint
"""

import argparse
import os
from pathlib import Path

import requests
from dotenv import load_dotenv

from shopping.common.client import ContentClient
from shopping.common.errors import ConfigError, TransportError

# =============================================================================
# CONFIGURATION
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
TOKEN_URL = "https://oauth2.googleapis.com/token"
CONTENT_SCOPE = "https://www.googleapis.com/auth/content"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


# =============================================================================
# CREDENTIAL LOADING
# =============================================================================


def load_env(env_file: str = None):
    """Load environment variables from a .env file.

    Returns the path that was loaded, or None if no candidate exists.
    """
    if env_file:
        env_paths = [Path(env_file)]
    else:
        env_paths = [
            PROJECT_ROOT / ".env",
            Path.home() / "shopping-samples" / ".env",
        ]
    for env_path in env_paths:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


def get_access_token() -> str:
    """Get OAuth access token via refresh token."""
    try:
        response = requests.post(
            TOKEN_URL,
            data={
                "client_id": os.getenv("GOOGLE_CLIENT_ID"),
                "client_secret": os.getenv("GOOGLE_CLIENT_SECRET"),
                "refresh_token": os.getenv("GOOGLE_REFRESH_TOKEN"),
                "grant_type": "refresh_token",
            },
            timeout=30,
        )
    except requests.RequestException as e:
        raise TransportError(f"Token refresh failed: {e}") from e

    if response.status_code != 200:
        raise TransportError(f"Token refresh failed: {response.text}")
    return response.json()["access_token"]


def parse_bool(value, default=None):
    """Parse a true/false env value; unset or unrecognized returns default."""
    if value is None:
        return default
    value = str(value).strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


def load_config() -> dict:
    """Read merchant configuration from the environment."""
    merchant_id = (os.getenv("MERCHANT_ID") or "").strip()
    if not merchant_id:
        raise ConfigError("MERCHANT_ID not set")

    return {
        "merchant_id": merchant_id,
        "is_mca": parse_bool(os.getenv("MERCHANT_IS_MCA")),
        "account_sample_user": (os.getenv("MERCHANT_SAMPLE_USER") or "").strip() or None,
        "sandbox": parse_bool(os.getenv("CONTENT_API_SANDBOX"), False),
    }


def detect_mca(client: ContentClient) -> bool:
    """Ask accounts/authinfo whether the configured merchant is an aggregator."""
    info = client.get_auth_info()
    for ident in info.get("accountIdentifiers", []):
        if str(ident.get("aggregatorId", "")) == client.merchant_id and not ident.get("merchantId"):
            return True
    return False


# =============================================================================
# SERVICE SETUP
# =============================================================================


def common_arg_parser(description: str) -> argparse.ArgumentParser:
    """Argument parser with the options every sample accepts."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--env-file", help="Path to .env file (default: project root, then ~/shopping-samples)")
    return parser


def service_setup(args, sandbox: bool = None, resolve_mca: bool = True):
    """Load config, authenticate and build a client.

    Returns (config, client). The sandbox argument overrides
    CONTENT_API_SANDBOX when given. With resolve_mca, an unset
    MERCHANT_IS_MCA is filled in from accounts/authinfo.
    """
    load_env(getattr(args, "env_file", None))
    config = load_config()
    if sandbox is not None:
        config["sandbox"] = sandbox

    access_token = get_access_token()
    client = ContentClient(config["merchant_id"], access_token, sandbox=config["sandbox"])

    if resolve_mca and config["is_mca"] is None:
        config["is_mca"] = detect_mca(client)

    return config, client


# =============================================================================
# ACCOUNT CHECKS
# =============================================================================


def require_mca(config: dict):
    """Sub-account listings and batch account calls need an aggregator."""
    if not config.get("is_mca"):
        raise ConfigError("Configured Merchant Center account must be a multi-client account.")


def resolve_account_id(config: dict, account_id=None) -> str:
    """Default to the configured merchant; only MCAs may read other accounts."""
    if account_id is None or str(account_id) == config["merchant_id"]:
        return config["merchant_id"]
    if not config.get("is_mca"):
        raise ConfigError("Non-MCA accounts can only get their own information.")
    return str(account_id)
