from fastapi import APIRouter

from mlh_auth.api.v1.public import oauth
from mlh_auth.auth_strategies.oauth.factory import registered_providers

api_router = APIRouter()

api_router.include_router(oauth.router, prefix="/auth/oauth", tags=["oauth"])


@api_router.get("/health")
async def health_check() -> dict[str, str | list[str]]:
    return {"status": "healthy", "providers": registered_providers()}
