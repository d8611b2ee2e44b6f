from __future__ import annotations

from fastapi import Depends, Header, HTTPException

from .config import Settings, get_settings


def require_authorized(
    x_authenticated_email: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Authorization gate. Sign-in is handled by the identity proxy in front of
    the API, which forwards the signed-in address in X-Authenticated-Email.
    """
    if not settings.allowed_email:
        return
    if x_authenticated_email != settings.allowed_email:
        raise HTTPException(status_code=403, detail="アクセス権限がありません")
