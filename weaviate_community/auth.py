# weaviate_community/auth.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthApiKey:
    """API key sent as a bearer token on every request of a client."""
    api_key: str

    def header_value(self) -> str:
        return f"Bearer {self.api_key}"

    def headers(self) -> dict[str, str]:
        return {"Authorization": self.header_value()}

    def __repr__(self) -> str:
        # keep the key out of logs and tracebacks
        return "AuthApiKey(api_key='***')"
