"""Request authentication helpers shared by routes."""

from fastapi import HTTPException, Request, Response, status

from wingman.config import AuthSettings
from wingman.domain.service import JWTService
from wingman.util.jwt import JWTError


def extract_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Read the JWT from a Bearer header, falling back to the auth cookie."""
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()

    return request.cookies.get(auth_settings.cookie_name) or None


def require_user_id(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> str:
    """Return the authenticated user's id.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = extract_token(request, auth_settings)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        payload = jwt_service.verify_token(token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return payload.user_id


def set_auth_cookie(
    response: Response, token: str, auth_settings: AuthSettings, secure: bool
) -> None:
    """Attach the JWT as an HTTP-only cookie.

    Production (cross-subdomain) needs samesite="none", which in turn
    requires secure cookies. Development uses lax over plain HTTP.
    """
    response.set_cookie(
        key=auth_settings.cookie_name,
        value=token,
        httponly=True,
        secure=secure,
        samesite="none" if secure else "lax",
        domain=auth_settings.cookie_domain,
        path="/",
        max_age=auth_settings.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response, auth_settings: AuthSettings) -> None:
    """Delete the auth cookie with the same domain and path it was set with."""
    response.delete_cookie(
        key=auth_settings.cookie_name,
        domain=auth_settings.cookie_domain,
        path="/",
    )
