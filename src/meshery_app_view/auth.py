"""Auth token file handling."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import AuthError


class AuthToken(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    token: str = Field(min_length=1)
    provider: str = Field(default="", alias="meshery-provider")

    def headers(self) -> dict[str, str]:
        """Request headers carrying the session cookies the server expects."""
        return {"Cookie": f"token={self.token}; meshery-provider={self.provider}"}


def load_auth_token(path: str | Path) -> AuthToken:
    token_path = Path(path).expanduser()
    try:
        raw = token_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AuthError(f"could not read auth token file {token_path}: {exc}") from exc
    try:
        return AuthToken.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise AuthError(f"invalid auth token file {token_path}") from exc
