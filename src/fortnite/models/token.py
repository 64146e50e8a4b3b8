"""
OAuth token payloads returned by the account service's token endpoint.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class TokenResponse(BaseModel):
    """Body of a successful password, otp or refresh_token grant."""
    model_config = ConfigDict(extra="ignore")

    access_token: str
    refresh_token: str
    expires_in: float
    account_id: str
    in_app_id: str = ""
    token_type: Optional[str] = None
    client_id: Optional[str] = None
    device_id: Optional[str] = None


class TokenSet(BaseModel):
    """Tokens currently in use by an authenticated pipeline. Replaced, never mutated."""
    model_config = ConfigDict(frozen=True)

    access_token: str
    refresh_token: str
    expires_at: float

    @classmethod
    def issue(cls, token: TokenResponse, issued_at: float) -> "TokenSet":
        return cls(
            access_token=token.access_token,
            refresh_token=token.refresh_token,
            expires_at=issued_at + token.expires_in,
        )

    def is_expired(self, now: float, margin: float = 0.0) -> bool:
        return now >= self.expires_at - margin
