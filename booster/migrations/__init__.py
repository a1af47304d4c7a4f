"""Schema migrations for booster concepts.

Each concept starts at version 1 (its original schema). A migration with
`to_version=N` upgrades an instance from N-1 to N, so a concept at version V
needs one migration for every version in [2, V].
"""

from booster.migrations.chain import (
    apply_migrations,
    current_version_for,
    migration_path,
    validate_concept_migrations,
    validate_migrations,
)

__all__ = [
    "apply_migrations",
    "current_version_for",
    "migration_path",
    "validate_concept_migrations",
    "validate_migrations",
]
