"""
Endpoint configuration for the Nodara SDK and CLI.

The API URL is resolved from, in order:
- the NODARA_API_URL environment variable
- NODARA_API_URL in ~/.nodara/.env
- the public testnet default
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Default config directory
NODARA_DIR = Path.home() / ".nodara"
NODARA_ENV = NODARA_DIR / ".env"

API_URL_ENV_VAR = "NODARA_API_URL"
DEFAULT_API_URL = "https://testnet.nodara.io/api"


def get_api_url(env_path: Optional[Path] = None) -> str:
    """
    Get the governance API URL.

    Args:
        env_path: Path to .env file (default: ~/.nodara/.env)

    Returns:
        Endpoint URL
    """
    env_path = env_path or NODARA_ENV

    # Process environment wins over the file
    if env_path.exists():
        load_dotenv(env_path, override=False)

    return os.environ.get(API_URL_ENV_VAR) or DEFAULT_API_URL


def configure_logging(verbose: bool = False) -> None:
    """Route SDK logs to stderr; DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("nodara").setLevel(level)
