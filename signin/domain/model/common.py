"""Base models for domain entities and aggregates."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class DomainEvent(BaseModel):
    """Record of a significant state change of an aggregate."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    event_type: str
    aggregate_id: str
    occurred_at: datetime = Field(default_factory=utc_now)


class AggregateRoot(BaseModel):
    """Base class for aggregate roots.

    Unlike value objects, aggregates are mutable: state changes go through
    their methods, which also record domain events. Pending events live in
    an owned list until a caller drains them.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _events: list[DomainEvent] = PrivateAttr(default_factory=list)

    @property
    def domain_events(self) -> list[DomainEvent]:
        """Pending domain events, oldest first."""
        return list(self._events)

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return pending events and clear them."""
        events = self._events
        self._events = []
        return events

    def clear_domain_events(self) -> None:
        self._events = []

    def _record(self, event: DomainEvent) -> None:
        self._events.append(event)
