"""Custom exception hierarchy for booster."""

from __future__ import annotations


class BoosterError(Exception):
    """Base for all booster errors."""


class ConfigurationError(BoosterError):
    """The application configuration is incomplete or invalid."""


class MissingEnvironmentVariableError(ConfigurationError):
    """A required environment variable is not set."""

    def __init__(self, var_name: str) -> None:
        self.var_name = var_name
        super().__init__(f"Missing environment variable '{var_name}'")


class MigrationError(BoosterError):
    """A migration declaration or upgrade request is invalid."""


class DuplicateMigrationError(MigrationError):
    """Two migrations were declared for the same concept and version."""

    def __init__(self, concept_name: str, to_version: int) -> None:
        self.concept_name = concept_name
        self.to_version = to_version
        super().__init__(
            f"Found a duplicated migration for '{concept_name}' with toVersion={to_version}"
        )


class MigrationChainGapError(MigrationError):
    """A concept's migrations skip a version between 2 and its current version."""

    def __init__(self, concept_name: str, missing_version: int, current_version: int) -> None:
        self.concept_name = concept_name
        self.missing_version = missing_version
        self.current_version = current_version
        super().__init__(
            f"Migrations for '{concept_name}' are invalid: they are missing a migration "
            f"with toVersion={missing_version}. "
            f"There must be a migration for '{concept_name}' for every version "
            f"in the range [2..{current_version}]"
        )


class TargetError(ConfigurationError):
    """A CLI target does not point to a BoosterConfig."""
