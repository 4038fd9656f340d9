"""
Client configuration for a Bifrost node.

Holds the node base URL and the headers sent with every request.
A single ClientConfig is shared by reference between a Requests
instance and the dispatcher; the setters mutate it in place.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_URL = "http://localhost:9085/"
DEFAULT_API_KEY = "topl_the_world!"

URL_ENV = "BIFROST_URL"
API_KEY_ENV = "BIFROST_API_KEY"


class ClientConfig:
    def __init__(self, url: str = DEFAULT_URL, api_key: str = DEFAULT_API_KEY) -> None:
        self.base_url = url
        self.headers = {
            "Content-Type": "application/json",
            "x-api-key": api_key,
        }

    @property
    def api_key(self) -> str:
        return self.headers["x-api-key"]

    def set_url(self, url: str) -> None:
        """Point subsequent requests at a different node."""
        self.base_url = url

    def set_api_key(self, api_key: str) -> None:
        self.headers["x-api-key"] = api_key

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "ClientConfig":
        """
        Build a config from BIFROST_URL / BIFROST_API_KEY.

        Args:
            env_path: Optional .env file to load first (default: search from cwd)

        Returns:
            ClientConfig with defaults for any unset variable
        """
        if env_path is not None:
            load_dotenv(env_path)
        else:
            load_dotenv()
        return cls(
            url=os.environ.get(URL_ENV, DEFAULT_URL),
            api_key=os.environ.get(API_KEY_ENV, DEFAULT_API_KEY),
        )

    def __repr__(self) -> str:
        return f"ClientConfig(url={self.base_url!r})"
