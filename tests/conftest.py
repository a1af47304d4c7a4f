"""Shared test fixtures — configs and migrations without any provider."""

from __future__ import annotations

import logging

import pytest

from booster.concepts import MigrationMetadata
from booster.config import BoosterConfig
from booster.settings import JWT_ENV_VARS


def make_migration(concept_name: str, to_version: int) -> MigrationMetadata:
    """A migration that records its version in the migrated dict."""

    def _upgrade(value: dict) -> dict:
        return {**value, "version": to_version}

    return MigrationMetadata(
        concept_name=concept_name,
        to_version=to_version,
        migration=_upgrade,
    )


def make_registry(versions: dict[str, list[int]]) -> dict[str, dict[int, MigrationMetadata]]:
    return {
        name: {v: make_migration(name, v) for v in vs}
        for name, vs in versions.items()
    }


@pytest.fixture(autouse=True)
def _clean_booster_env(monkeypatch):
    for var in JWT_ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)
    monkeypatch.delenv("BOOSTER_LOG_LEVEL", raising=False)


@pytest.fixture
def config():
    return BoosterConfig("test")


@pytest.fixture(autouse=True)
def _reset_booster_logger():
    yield
    logger = logging.getLogger("booster")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
