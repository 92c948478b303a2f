"""Client settings resolution.

Order of precedence for each setting: explicit argument, environment
variable, user data file, built-in default.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from composio_sdk._base import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

ENV_API_KEY = "COMPOSIO_API_KEY"
ENV_BASE_URL = "COMPOSIO_BASE_URL"
ENV_USER_DATA_PATH = "COMPOSIO_USER_DATA_PATH"

DEFAULT_USER_DATA_PATH = Path.home() / ".composio" / "user_data.json"


@dataclass(frozen=True)
class ComposioSettings:
    api_key: Optional[str]
    base_url: str


def user_data_path() -> Path:
    override = os.environ.get(ENV_USER_DATA_PATH)
    return Path(override) if override else DEFAULT_USER_DATA_PATH


def load_user_data(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read the user data file written by the Composio CLI.

    A missing file yields ``{}``. An unreadable or malformed one is logged and
    treated as empty.
    """
    path = path or user_data_path()
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable user data file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring user data file %s: expected a JSON object", path)
        return {}
    return data


def resolve_settings(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    dotenv_path: Optional[Union[str, Path]] = None,
) -> ComposioSettings:
    """Resolve the API key and base URL for a client.

    If *dotenv_path* is given the file is loaded first; variables already in
    the environment win over the file.
    """
    if dotenv_path is not None:
        load_dotenv(dotenv_path=dotenv_path, override=False)

    user_data: Optional[Dict[str, Any]] = None
    if not api_key or not base_url:
        user_data = load_user_data()

    resolved_key = api_key or os.environ.get(ENV_API_KEY) or (user_data or {}).get("api_key")
    resolved_url = (
        base_url
        or os.environ.get(ENV_BASE_URL)
        or (user_data or {}).get("base_url")
        or DEFAULT_BASE_URL
    )
    return ComposioSettings(api_key=resolved_key or None, base_url=str(resolved_url).rstrip("/"))
