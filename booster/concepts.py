"""Metadata collected from the application's declarations.

Each model describes one declared concept (an event class, a command, a
read model, a migration...). They are built once while the application is
being defined and read by deployment and runtime tooling afterwards.
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Union

from pydantic import BaseModel, Field

from booster.types import ConceptName, RoleName, Version

AuthorizedRoles = Union[list[RoleName], Literal["all"]]


class ClassMetadata(BaseModel):
    """A user class plus the names of its properties."""

    class_type: Any
    properties: list[str] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return getattr(self.class_type, "__name__", str(self.class_type))


class EventMetadata(ClassMetadata):
    pass


class EntityMetadata(ClassMetadata):
    pass


class CommandMetadata(ClassMetadata):
    authorized_roles: AuthorizedRoles = Field(default_factory=list)


class ReadModelMetadata(ClassMetadata):
    authorized_roles: AuthorizedRoles = Field(default_factory=list)


class CommandHandlerReturnTypeMetadata(BaseModel):
    return_type: Any = None


class ReducerMetadata(BaseModel):
    """The entity method that folds an event into the entity state."""

    class_type: Any
    method_name: str


class ProjectionMetadata(BaseModel):
    """A read model method that projects an entity, joined by `join_key`."""

    class_type: Any
    method_name: str
    join_key: str


class RoleMetadata(BaseModel):
    sign_up_methods: list[str] = Field(default_factory=list)
    skip_confirmation: bool = False


class ScheduleInterval(BaseModel):
    """Cron-like fields. Unset fields mean 'every'."""

    minute: str | None = None
    hour: str | None = None
    day: str | None = None
    month: str | None = None
    weekday: str | None = None
    year: str | None = None


class ScheduledCommandMetadata(BaseModel):
    class_type: Any
    schedule_interval: ScheduleInterval = Field(default_factory=ScheduleInterval)


class MigrationMetadata(BaseModel):
    """Upgrades a stored instance of a concept from `to_version - 1` to `to_version`."""

    concept_name: ConceptName
    to_version: Version = Field(ge=2)
    migration: Callable[[Any], Any]
    from_schema: Any = None
    to_schema: Any = None

    def migrate(self, value: Any) -> Any:
        return self.migration(value)


class RocketDescriptor(BaseModel):
    """A plugin package extending the deployed infrastructure."""

    package_name: str
    parameters: dict[str, Any] = Field(default_factory=dict)
