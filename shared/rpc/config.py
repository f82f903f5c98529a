"""Connection settings shared by every procedure call."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClientSettings:
    """Base URLs, credential and timeout for outbound calls."""

    trpc_base_url: str
    rest_base_url: str
    api_key: Optional[str] = None
    api_key_env: str = "KILO_API_KEY"
    timeout: float = 30.0

    def auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
