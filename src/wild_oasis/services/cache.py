"""Cache for rendered views."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from wild_oasis.domain.views import ViewId


class ViewCache(Protocol):
    """Cache interface for rendered view payloads."""

    def get(self, view: ViewId, scope: str) -> object | None:
        """Return a cached payload if present and not expired."""

    def set(self, view: ViewId, scope: str, value: object, ttl_seconds: int) -> None:
        """Store a rendered payload with a TTL in seconds."""

    def invalidate(self, view: ViewId) -> None:
        """Mark every cached rendering of the view as stale."""

    def discard(self, view: ViewId, scope: str) -> None:
        """Drop one scope's rendering of the view."""


@dataclass
class _CacheEntry:
    value: object
    expires_at: datetime


@dataclass
class InMemoryViewCache(ViewCache):
    """In-memory view cache keyed by view id, then by scope."""

    _entries: dict[ViewId, dict[str, _CacheEntry]]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, view: ViewId, scope: str) -> object | None:
        """Return a cached payload if it hasn't expired."""
        scoped = self._entries.get(view)
        if not scoped:
            return None
        entry = scoped.get(scope)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            scoped.pop(scope, None)
            return None
        return entry.value

    def set(self, view: ViewId, scope: str, value: object, ttl_seconds: int) -> None:
        """Store a rendered payload with a TTL."""
        expires_at = datetime.now(tz=UTC) + timedelta(seconds=ttl_seconds)
        self._entries.setdefault(view, {})[scope] = _CacheEntry(
            value=value, expires_at=expires_at
        )

    def invalidate(self, view: ViewId) -> None:
        """Drop the view for all scopes; the next render reloads from the store."""
        self._entries.pop(view, None)

    def discard(self, view: ViewId, scope: str) -> None:
        """Drop the rendering cached for one scope only."""
        scoped = self._entries.get(view)
        if scoped is not None:
            scoped.pop(scope, None)
