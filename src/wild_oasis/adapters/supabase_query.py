"""Shared execution helper for Supabase queries."""

from typing import Protocol

from postgrest.exceptions import APIError

from wild_oasis.domain.errors import StoreError


class _Response(Protocol):
    data: list[dict[str, object]] | None


class _Query(Protocol):
    def execute(self) -> _Response: ...


def run_query(query: _Query, action: str) -> list[dict[str, object]]:
    """Execute a query and return its rows, raising StoreError on failure."""
    try:
        response = query.execute()
    except APIError as exc:
        raise StoreError(f"{action} failed: {exc.message}") from exc
    return response.data or []


def first_row(rows: list[dict[str, object]], action: str) -> dict[str, object]:
    """Return the first row of a write that must return one."""
    if not rows:
        raise StoreError(f"{action} returned no rows")
    return rows[0]
