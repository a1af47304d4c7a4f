"""Tests for BoosterConfig."""

import pytest

from booster.concepts import MigrationMetadata, RoleMetadata
from booster.config import BoosterConfig
from booster.exceptions import (
    ConfigurationError,
    DuplicateMigrationError,
    MigrationChainGapError,
    MissingEnvironmentVariableError,
)
from booster.logger import Level
from booster.settings import BoosterSettings
from booster.types import TokenVerifier
from tests.conftest import make_migration


def test_defaults(config):
    assert config.environment_name == "test"
    assert config.app_name == "new-booster-app"
    assert config.log_level == Level.DEBUG
    assert config.migrations == {}
    assert config.env == {}
    assert config.token_verifier is None


def test_handler_paths(config):
    assert config.code_relative_path == "dist"
    assert config.event_dispatcher_handler == "dist/index.boosterEventDispatcher"
    assert config.serve_graphql_handler == "dist/index.boosterServeGraphQL"
    assert config.scheduled_task_handler == "dist/index.boosterTriggerScheduledCommand"
    assert config.notify_subscribers_handler == "dist/index.boosterNotifySubscribers"


def test_subscription_limits(config):
    assert config.subscriptions.max_connection_duration_in_seconds == 604800
    assert config.subscriptions.max_duration_in_seconds == 172800


def test_registries_are_per_instance():
    a = BoosterConfig("a")
    b = BoosterConfig("b")
    a.add_migration(make_migration("Cart", 2))
    assert b.migrations == {}


# ── Resource names ──────────────────────────────────────────────

def test_resource_names(config):
    config.app_name = "shop"
    names = config.resource_names
    assert names.application_stack == "shop-app"
    assert names.events_store == "shop-app-events-store"
    assert names.subscriptions_store == "shop-app-subscriptions-store"
    assert names.connections_store == "shop-app-connections-store"
    assert names.for_read_model("CartReadModel") == "shop-app-CartReadModel"


def test_resource_names_require_app_name(config):
    config.app_name = ""
    with pytest.raises(ConfigurationError, match="Application name cannot be empty"):
        config.resource_names


def test_read_model_name_from_resource_name(config):
    config.app_name = "shop"
    assert config.read_model_name_from_resource_name("shop-app-CartReadModel") == "CartReadModel"


def test_read_model_name_without_prefix_is_unchanged(config):
    config.app_name = "shop"
    assert config.read_model_name_from_resource_name("other-app-Cart") == "other-app-Cart"


def test_read_model_name_escapes_app_name(config):
    config.app_name = "my.shop"
    assert config.read_model_name_from_resource_name("myXshop-app-Cart") == "myXshop-app-Cart"
    assert config.read_model_name_from_resource_name("my.shop-app-Cart") == "Cart"


def test_there_are_roles(config):
    assert not config.there_are_roles
    config.roles["Admin"] = RoleMetadata()
    assert config.there_are_roles


# ── Migrations ──────────────────────────────────────────────────

def test_current_version_for(config):
    for version in (2, 3, 5):
        config.add_migration(make_migration("Cart", version))
    assert config.current_version_for("Cart") == 5
    assert config.current_version_for("Unknown") == 1


def test_add_duplicate_migration_raises(config):
    config.add_migration(make_migration("Cart", 2))
    with pytest.raises(DuplicateMigrationError):
        config.add_migration(make_migration("Cart", 2))


def test_migration_version_must_be_at_least_two():
    with pytest.raises(ValueError):
        MigrationMetadata(concept_name="Cart", to_version=1, migration=lambda v: v)


def test_validate_empty_config(config):
    config.validate()


def test_validate_consecutive_migrations(config):
    for version in (2, 3, 4):
        config.add_migration(make_migration("Cart", version))
    config.validate()


def test_validate_reports_gap(config):
    config.add_migration(make_migration("A", 2))
    config.add_migration(make_migration("B", 2))
    config.add_migration(make_migration("B", 4))
    with pytest.raises(MigrationChainGapError) as exc_info:
        config.validate()
    assert exc_info.value.concept_name == "B"
    assert exc_info.value.missing_version == 3


def test_migrations_to_current(config):
    for version in (2, 3):
        config.add_migration(make_migration("Cart", version))
    assert [m.to_version for m in config.migrations_to_current("Cart", 1)] == [2, 3]
    assert config.migrations_to_current("Other", 1) == []


# ── Initialization-time fields ──────────────────────────────────

def test_provider_must_be_set(config):
    with pytest.raises(ConfigurationError, match="valid provider runtime"):
        config.provider


def test_provider_after_set(config):
    provider = object()
    config.provider = provider
    assert config.provider is provider


def test_user_project_root_path(config):
    with pytest.raises(ConfigurationError, match="Booster.start"):
        config.user_project_root_path
    config.user_project_root_path = "/srv/app"
    assert config.user_project_root_path == "/srv/app"


def test_must_get_environment_var(config, monkeypatch):
    monkeypatch.setenv("SHOP_TABLE", "carts")
    assert config.must_get_environment_var("SHOP_TABLE") == "carts"


def test_must_get_missing_environment_var(config, monkeypatch):
    monkeypatch.delenv("SHOP_TABLE", raising=False)
    with pytest.raises(MissingEnvironmentVariableError) as exc_info:
        config.must_get_environment_var("SHOP_TABLE")
    assert str(exc_info.value) == "Missing environment variable 'SHOP_TABLE'"


def test_empty_environment_var_is_returned(config, monkeypatch):
    monkeypatch.setenv("SHOP_TABLE", "")
    assert config.must_get_environment_var("SHOP_TABLE") == ""


def test_token_verifier_from_environment(monkeypatch):
    monkeypatch.setenv("BOOSTER_JWT_ISSUER", "https://issuer")
    monkeypatch.setenv("BOOSTER_JWKS_URI", "https://issuer/.well-known/jwks.json")
    monkeypatch.setenv("BOOSTER_ROLES_CLAIM", "custom:roles")
    config = BoosterConfig("test")
    assert config.token_verifier == TokenVerifier(
        issuer="https://issuer",
        jwks_uri="https://issuer/.well-known/jwks.json",
        roles_claim="custom:roles",
    )


def test_token_verifier_from_explicit_settings():
    settings = BoosterSettings(jwt_issuer="i", jwks_uri="u", roles_claim="r")
    config = BoosterConfig("test", settings=settings)
    assert config.token_verifier.issuer == "i"


def test_token_verifier_can_be_overridden(config):
    config.token_verifier = TokenVerifier(issuer="me", public_key="KEY")
    assert config.token_verifier.public_key == "KEY"
