"""BoosterConfig — the application's declared metadata and derived settings.

Deployment packages and the runtime read one BoosterConfig per environment.
It is filled in while the application is defined, validated once before
deploying or starting, and treated as read-only afterwards.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import PurePosixPath
from typing import Any

from booster.concepts import (
    CommandHandlerReturnTypeMetadata,
    CommandMetadata,
    EntityMetadata,
    EventMetadata,
    MigrationMetadata,
    ProjectionMetadata,
    ReadModelMetadata,
    ReducerMetadata,
    RocketDescriptor,
    RoleMetadata,
    ScheduledCommandMetadata,
)
from booster.exceptions import (
    ConfigurationError,
    DuplicateMigrationError,
    MissingEnvironmentVariableError,
)
from booster.logger import Level
from booster.migrations.chain import current_version_for, migration_path, validate_migrations
from booster.settings import BoosterSettings, token_verifier_from_environment
from booster.types import (
    CommandName,
    ConceptName,
    EntityName,
    EventName,
    ReadModelName,
    ResourceNames,
    RoleName,
    ScheduledCommandName,
    SubscriptionsConfig,
    TokenVerifier,
    Version,
)

_logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "new-booster-app"
CODE_RELATIVE_PATH = "dist"


def _handler_path(handler: str) -> str:
    return str(PurePosixPath(CODE_RELATIVE_PATH) / handler)


class BoosterConfig:
    """Configuration of a Booster application for one environment.

    Used mainly by vendor-specific deployment packages. The provider, the
    project root path and the token verifier are plain fields set during
    initialization; reading the first two before they are set raises.
    """

    code_relative_path = CODE_RELATIVE_PATH
    event_dispatcher_handler = _handler_path("index.boosterEventDispatcher")
    serve_graphql_handler = _handler_path("index.boosterServeGraphQL")
    scheduled_task_handler = _handler_path("index.boosterTriggerScheduledCommand")
    notify_subscribers_handler = _handler_path("index.boosterNotifySubscribers")

    def __init__(
        self,
        environment_name: str,
        settings: BoosterSettings | None = None,
    ) -> None:
        self.environment_name = environment_name
        self.log_level: Level = Level.DEBUG
        self.app_name = DEFAULT_APP_NAME
        self.provider_package: str | None = None
        self.rockets: list[RocketDescriptor] = []
        self.assets: list[str] = []
        self.subscriptions = SubscriptionsConfig()

        self.events: dict[EventName, EventMetadata] = {}
        self.entities: dict[EntityName, EntityMetadata] = {}
        self.reducers: dict[EventName, ReducerMetadata] = {}
        self.command_handlers: dict[CommandName, CommandMetadata] = {}
        self.command_handler_return_types: dict[CommandName, CommandHandlerReturnTypeMetadata] = {}
        self.event_handlers: dict[EventName, list[Any]] = {}
        self.read_models: dict[ReadModelName, ReadModelMetadata] = {}
        self.projections: dict[EntityName, list[ProjectionMetadata]] = {}
        self.read_model_sequence_keys: dict[EntityName, str] = {}
        self.roles: dict[RoleName, RoleMetadata] = {}
        self.migrations: dict[ConceptName, dict[Version, MigrationMetadata]] = {}
        self.scheduled_command_handlers: dict[ScheduledCommandName, ScheduledCommandMetadata] = {}

        # Environment variables set at deployment time on the target functions
        self.env: dict[str, str] = {}

        self.token_verifier: TokenVerifier | None = token_verifier_from_environment(settings)
        self._provider: Any = None
        self._user_project_root_path: str | None = None

    # ── Derived names ─────────────────────────────────────────────

    @property
    def resource_names(self) -> ResourceNames:
        if not self.app_name:
            raise ConfigurationError("Application name cannot be empty")
        application_stack = f"{self.app_name}-app"
        return ResourceNames(
            application_stack=application_stack,
            events_store=f"{application_stack}-events-store",
            subscriptions_store=f"{application_stack}-subscriptions-store",
            connections_store=f"{application_stack}-connections-store",
        )

    def read_model_name_from_resource_name(self, resource_name: str) -> str:
        """Name of the read model stored in a resource (normally, a table)."""
        prefix = re.escape(self.resource_names.application_stack)
        return re.sub(f"^{prefix}-", "", resource_name)

    @property
    def there_are_roles(self) -> bool:
        """True when roles are declared.

        Only then are a user pool and an authorization API created. With no
        roles, every endpoint is public and all users are anonymous.
        """
        return len(self.roles) > 0

    # ── Migrations ────────────────────────────────────────────────

    def add_migration(self, migration: MigrationMetadata) -> None:
        concept_migrations = self.migrations.setdefault(migration.concept_name, {})
        if migration.to_version in concept_migrations:
            raise DuplicateMigrationError(migration.concept_name, migration.to_version)
        concept_migrations[migration.to_version] = migration

    def current_version_for(self, concept_name: ConceptName) -> int:
        return current_version_for(self.migrations.get(concept_name))

    def migrations_to_current(
        self, concept_name: ConceptName, from_version: Version
    ) -> list[MigrationMetadata]:
        """Migrations that bring an instance stored at `from_version` up to date."""
        return migration_path(concept_name, self.migrations.get(concept_name), from_version)

    def validate(self) -> None:
        """Check the whole configuration before deploying or starting.

        Raises MigrationChainGapError when a concept skips a version.
        """
        validate_migrations(self.migrations)
        _logger.debug("Configuration for environment '%s' is valid", self.environment_name)

    # ── Initialization-time fields ────────────────────────────────

    @property
    def provider(self) -> Any:
        if self._provider is None:
            raise ConfigurationError(
                "It is required to set a valid provider runtime in your configuration files"
            )
        return self._provider

    @provider.setter
    def provider(self, provider: Any) -> None:
        self._provider = provider

    @property
    def user_project_root_path(self) -> str:
        if not self._user_project_root_path:
            raise ConfigurationError(
                'Property "user_project_root_path" is not set. Ensure you have called "Booster.start"'
            )
        return self._user_project_root_path

    @user_project_root_path.setter
    def user_project_root_path(self, path: str) -> None:
        self._user_project_root_path = path

    def must_get_environment_var(self, var_name: str) -> str:
        value = os.environ.get(var_name)
        if value is None:
            raise MissingEnvironmentVariableError(var_name)
        return value
