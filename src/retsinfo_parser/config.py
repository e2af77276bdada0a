"""Portal connection settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from retsinfo_parser.constants import MAX_DOCUMENTS_PER_PAGE

DEFAULT_BASE_URL = "https://www.retsinformation.dk"
DEFAULT_USER_AGENT = "retsinfo-parser/0.1"


@dataclass
class PortalConfig:
    """Settings for HTTP access to the portal forms."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT
    page_size: int = MAX_DOCUMENTS_PER_PAGE

    @classmethod
    def from_env(cls) -> "PortalConfig":
        """Build settings from RETSINFO_BASE_URL, RETSINFO_TIMEOUT and RETSINFO_USER_AGENT."""
        config = cls()
        if os.environ.get("RETSINFO_BASE_URL"):
            config.base_url = os.environ["RETSINFO_BASE_URL"].rstrip("/")
        if os.environ.get("RETSINFO_TIMEOUT"):
            try:
                config.timeout = float(os.environ["RETSINFO_TIMEOUT"])
            except ValueError:
                raise ValueError(
                    f"RETSINFO_TIMEOUT must be a number, got {os.environ['RETSINFO_TIMEOUT']!r}"
                ) from None
        if os.environ.get("RETSINFO_USER_AGENT"):
            config.user_agent = os.environ["RETSINFO_USER_AGENT"]
        return config

    def form_url(self, form: str) -> str:
        return f"{self.base_url.rstrip('/')}/Forms/{form}"
