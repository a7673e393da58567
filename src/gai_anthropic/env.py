"""
Environment loading for API credentials during local development.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

API_KEY_ENV_VAR = "ANTHROPIC_API_KEY"


def load_env_if_present(candidate_paths: Iterable[Path]) -> None:
    """Load key=value pairs from the first .env-style file that exists."""
    for env_path in candidate_paths:
        if not env_path.exists() or not env_path.is_file():
            continue
        try:
            lines = env_path.read_text().splitlines()
        except OSError:
            # Unreadable file; explicit environment variables take precedence anyway.
            continue
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or "=" not in stripped:
                continue
            key, value = stripped.split("=", 1)
            if key and key not in os.environ:
                os.environ[key] = value
        break


def load_default_env() -> None:
    """Load from cwd/.env.test.local, then cwd/.env."""
    cwd = Path.cwd()
    load_env_if_present([cwd / ".env.test.local", cwd / ".env"])


def api_key_from_env(var: str = API_KEY_ENV_VAR) -> Optional[str]:
    """Return the API key from the environment, treating blank values as unset."""
    value = os.getenv(var, "").strip()
    return value or None


__all__ = ["API_KEY_ENV_VAR", "load_default_env", "load_env_if_present", "api_key_from_env"]
