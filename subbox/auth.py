from typing import Optional

from fastapi import Query
from google.oauth2.credentials import Credentials

from .config import settings
from .errors import AuthMissingError

def create_credentials(access_token: str, refresh_token: str) -> Credentials:
    # Tokens are obtained by the UI's login flow; whether they are valid is
    # only known once YouTube accepts or rejects a call made with them.
    return Credentials(
        token=access_token,
        refresh_token=refresh_token,
        token_uri=settings.TOKEN_URI,
        client_id=settings.GOOGLE_CLIENT_ID,
        client_secret=settings.GOOGLE_CLIENT_SECRET,
        scopes=settings.SCOPES
    )

def youtube_credentials(
    access_token: Optional[str] = Query(None, alias="accessToken"),
    refresh_token: Optional[str] = Query(None, alias="refreshToken"),
) -> Credentials:
    """
    Dependency for routes that act on behalf of a YouTube user.

    Only checks that both tokens are present, without contacting Google.
    """
    if not access_token or not refresh_token:
        raise AuthMissingError("accessToken and refreshToken query parameters are required")
    return create_credentials(access_token, refresh_token)
