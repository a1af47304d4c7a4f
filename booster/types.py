"""Value types shared across booster."""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict

# ── Name Types ────────────────────────────────────────────────────────────────

ConceptName: TypeAlias = str
Version: TypeAlias = int
EntityName: TypeAlias = str
EventName: TypeAlias = str
CommandName: TypeAlias = str
ReadModelName: TypeAlias = str
RoleName: TypeAlias = str
ScheduledCommandName: TypeAlias = str


# ── Resource Names ────────────────────────────────────────────────────────────


class ResourceNames(BaseModel):
    """Names of the cloud resources derived from the application name."""

    model_config = ConfigDict(frozen=True)

    application_stack: str
    events_store: str
    subscriptions_store: str
    connections_store: str

    def for_read_model(self, read_model_name: ReadModelName) -> str:
        return f"{self.application_stack}-{read_model_name}"


# ── Authentication ────────────────────────────────────────────────────────────


class TokenVerifier(BaseModel):
    """Where and how to verify the JWT tokens sent by clients."""

    issuer: str
    jwks_uri: str | None = None
    public_key: str | None = None
    roles_claim: str | None = None


# ── Subscriptions ─────────────────────────────────────────────────────────────


class SubscriptionsConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_connection_duration_in_seconds: int = 7 * 24 * 60 * 60  # 7 days
    max_duration_in_seconds: int = 2 * 24 * 60 * 60  # 2 days
