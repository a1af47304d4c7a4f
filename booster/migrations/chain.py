"""Migration chain checks — versions must form a gapless chain from 2 upward."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from booster.concepts import MigrationMetadata
from booster.exceptions import MigrationChainGapError, MigrationError
from booster.types import ConceptName, Version

_logger = logging.getLogger(__name__)

BASE_VERSION = 1

ConceptMigrations = Mapping[Version, MigrationMetadata]
MigrationRegistry = Mapping[ConceptName, ConceptMigrations]


def current_version_for(migrations: ConceptMigrations | None) -> int:
    """Highest declared version, or the base version when nothing is declared."""
    if not migrations:
        return BASE_VERSION
    return max(migrations)


def validate_concept_migrations(
    concept_name: ConceptName, migrations: ConceptMigrations
) -> None:
    """Raise on the first version in [2, current] that has no migration."""
    current_version = current_version_for(migrations)
    for to_version in range(BASE_VERSION + 1, current_version + 1):
        if to_version not in migrations:
            raise MigrationChainGapError(concept_name, to_version, current_version)


def validate_migrations(registry: MigrationRegistry) -> None:
    """Validate every concept in the registry, stopping at the first gap."""
    for concept_name, migrations in registry.items():
        validate_concept_migrations(concept_name, migrations)
    _logger.debug("Migrations are consecutive for %d concepts", len(registry))


def migration_path(
    concept_name: ConceptName,
    migrations: ConceptMigrations | None,
    from_version: Version,
    to_version: Version | None = None,
) -> list[MigrationMetadata]:
    """Migrations to run, in order, to move an instance between two versions."""
    migrations = migrations or {}
    current_version = current_version_for(migrations)
    if to_version is None:
        to_version = current_version

    if from_version < BASE_VERSION:
        raise MigrationError(
            f"Cannot migrate '{concept_name}' from version {from_version}: "
            f"versions start at {BASE_VERSION}"
        )
    if to_version > current_version:
        raise MigrationError(
            f"Cannot migrate '{concept_name}' to version {to_version}: "
            f"the current version is {current_version}"
        )
    if from_version > to_version:
        raise MigrationError(
            f"Cannot migrate '{concept_name}' backwards from version {from_version} "
            f"to version {to_version}"
        )

    path: list[MigrationMetadata] = []
    for version in range(from_version + 1, to_version + 1):
        migration = migrations.get(version)
        if migration is None:
            raise MigrationChainGapError(concept_name, version, current_version)
        path.append(migration)
    return path


def apply_migrations(
    concept_name: ConceptName,
    migrations: ConceptMigrations | None,
    value: Any,
    from_version: Version,
) -> Any:
    """Upgrade `value` from `from_version` to the concept's current version."""
    for migration in migration_path(concept_name, migrations, from_version):
        _logger.debug(
            "Migrating '%s' to version %d", concept_name, migration.to_version
        )
        value = migration.migrate(value)
    return value
