"""Environment configuration — loaded from BOOSTER_* environment variables."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

from booster.logger import Level
from booster.types import TokenVerifier

JWT_ENV_VARS = {
    "BOOSTER_JWT_ISSUER": "BOOSTER_JWT_ISSUER",
    "BOOSTER_JWKS_URI": "BOOSTER_JWKS_URI",
    "BOOSTER_ROLES_CLAIM": "BOOSTER_ROLES_CLAIM",
}


class BoosterSettings(BaseSettings):
    # JWT verification (BOOSTER_JWT_ISSUER, BOOSTER_JWKS_URI, BOOSTER_ROLES_CLAIM)
    jwt_issuer: str = ""
    jwks_uri: str = ""
    roles_claim: str = ""

    # Unset means the loaded BoosterConfig decides
    log_level: Level | None = None

    model_config = {"env_prefix": "BOOSTER_"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _lowercase_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() or None
        return value


def token_verifier_from_environment(
    settings: BoosterSettings | None = None,
) -> TokenVerifier | None:
    """Build a TokenVerifier when all three JWT variables are set."""
    settings = settings or BoosterSettings()
    if settings.jwt_issuer and settings.jwks_uri and settings.roles_claim:
        return TokenVerifier(
            issuer=settings.jwt_issuer,
            jwks_uri=settings.jwks_uri,
            roles_claim=settings.roles_claim,
        )
    return None
