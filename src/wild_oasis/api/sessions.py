"""Cookie-backed guest sessions."""

from fastapi import Depends, Request

from wild_oasis.domain.errors import Unauthenticated
from wild_oasis.domain.models import GuestSession

SESSION_KEY = "guest"
OAUTH_STATE_KEY = "oauth_state"


def current_session(request: Request) -> GuestSession | None:
    """Return the session stored in the signed cookie, if any."""
    data = request.session.get(SESSION_KEY)
    if not isinstance(data, dict):
        return None
    try:
        return GuestSession(
            guest_id=int(data["guest_id"]),
            email=str(data["email"]),
            name=str(data.get("name") or ""),
        )
    except (KeyError, TypeError, ValueError):
        return None


def require_session(
    session: GuestSession | None = Depends(current_session),
) -> GuestSession:
    """Reject requests without a signed-in guest."""
    if session is None:
        raise Unauthenticated()
    return session


def store_session(request: Request, session: GuestSession) -> None:
    """Persist the session in the cookie."""
    request.session[SESSION_KEY] = {
        "guest_id": session.guest_id,
        "email": session.email,
        "name": session.name,
    }


def clear_session(request: Request) -> None:
    """Forget the signed-in guest."""
    request.session.clear()
