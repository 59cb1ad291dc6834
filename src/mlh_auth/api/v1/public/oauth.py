import logging
import secrets

from fastapi import APIRouter, HTTPException, Query, Request, Response, status
from fastapi.responses import RedirectResponse

from mlh_auth.auth_strategies.oauth.factory import get_oauth_strategy
from mlh_auth.core.config import settings
from mlh_auth.core.exceptions import (
    AuthenticationError,
    InvalidStateError,
    convert_to_http_exception,
)
from mlh_auth.schemas.oauth import OAuthLoginResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{provider}/login")
async def oauth_login(provider: str) -> RedirectResponse:
    """
    Redirect the user to the provider's OAuth consent/login page.

    The generated state is kept in a short-lived HttpOnly cookie and checked
    again in the callback.
    """
    try:
        strategy = get_oauth_strategy(provider)
        authorization_url, state = await strategy.get_authorization_url()
    except AuthenticationError as e:
        raise convert_to_http_exception(e) from e

    logger.info(f"[oauth:{provider}] Initiating login, state={state[:8]}...")

    response = RedirectResponse(url=authorization_url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        settings.OAUTH_STATE_COOKIE,
        state,
        max_age=settings.OAUTH_STATE_TTL_SECONDS,
        httponly=True,
        samesite="lax",
    )
    return response


@router.get("/{provider}/callback", response_model=OAuthLoginResponse)
async def oauth_callback(
    request: Request,
    response: Response,
    provider: str,
    code: str | None = Query(default=None, description="Authorization code from provider"),
    state: str | None = Query(default=None, description="CSRF state token"),
    error: str | None = Query(default=None, description="Error from provider (user denied etc.)"),
) -> OAuthLoginResponse:
    """
    Handle the OAuth callback from the provider.

    Validates the state cookie, exchanges the code for tokens and returns
    the normalized profile.
    """
    if error:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"OAuth login denied: {error}",
        )

    try:
        expected_state = request.cookies.get(settings.OAUTH_STATE_COOKIE)
        if not state or not expected_state:
            raise InvalidStateError()
        if not secrets.compare_digest(state.encode(), expected_state.encode()):
            raise InvalidStateError()

        strategy = get_oauth_strategy(provider)
        result = await strategy.authenticate({"code": code})
    except AuthenticationError as e:
        logger.warning(f"[oauth:{provider}] Authentication failed: {e}")
        raise convert_to_http_exception(e) from e

    # One-time use
    response.delete_cookie(settings.OAUTH_STATE_COOKIE)

    logger.info(f"[oauth:{provider}] User {result['provider_user_id']} authenticated")

    return OAuthLoginResponse(
        provider=result["provider"],
        provider_user_id=result["provider_user_id"],
        profile=result["profile"],
    )
