from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from constants import API_KEY_ENV_VARS


@dataclass(frozen=True)
class ClientConfig:
    """Credentials handed to ``DiagramClient`` at composition time."""
    api_key: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> "ClientConfig":
        """Read the API key from the environment (and a .env file if present).

        A missing key is not an error here; the client raises on first use.
        """
        if environ is None:
            if dotenv:
                load_dotenv()  # Load environment variables from .env file if present
            environ = os.environ
        for name in API_KEY_ENV_VARS:
            value = (environ.get(name) or "").strip()
            if value:
                return cls(api_key=value)
        return cls(api_key=None)


__all__ = ["ClientConfig"]
