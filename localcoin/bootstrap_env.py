"""
Bootstrap environment for Streamlit Cloud & local dev:
- Copy the Localcoin settings found in st.secrets into os.environ
  (nested tables become PREFIX_CHILD, e.g. [coingecko] api_key -> COINGECKO_API_KEY)
- Then load .env, neither step overriding variables that are already set
"""

from __future__ import annotations

import os
import re
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

import streamlit as st
from dotenv import load_dotenv

# Only secrets read by localcoin.config are exported
ENV_PREFIXES = (
    "COINGECKO_",
    "NEXT_PUBLIC_COINGECKO_",
    "REFRESH_",
    "REQUEST_",
    "MAP_",
    "LOG_",
)


def _env_name(key: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(value, Mapping):
        for child_key, child_value in value.items():
            yield from _flatten(f"{prefix}_{child_key}", child_value)
    else:
        yield _env_name(prefix), str(value)


def _read_secrets() -> Dict[str, Any]:
    try:
        return st.secrets.to_dict()
    except FileNotFoundError:
        # No secrets.toml: local runs rely on .env
        return {}


def _bridge_secrets_to_env(secrets: Optional[Mapping[str, Any]] = None) -> None:
    if secrets is None:
        secrets = _read_secrets()
    for key, value in secrets.items():
        for name, text in _flatten(key, value):
            if name.startswith(ENV_PREFIXES):
                os.environ.setdefault(name, text)


def ensure_env() -> None:
    """Idempotent: make sure env vars are available, inside or outside the Streamlit runtime."""
    _bridge_secrets_to_env()
    load_dotenv(override=False)


ensure_env()
