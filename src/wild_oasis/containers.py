"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from wild_oasis.adapters.google_oauth_client import HttpxGoogleOAuthClient, OAuthClient
from wild_oasis.adapters.supabase_booking_repository import SupabaseBookingRepository
from wild_oasis.adapters.supabase_cabin_repository import SupabaseCabinRepository
from wild_oasis.adapters.supabase_guest_repository import SupabaseGuestRepository
from wild_oasis.config import Settings
from wild_oasis.services.authorization import AuthorizationGuard
from wild_oasis.services.bookings import BookingService
from wild_oasis.services.cabins import CabinService
from wild_oasis.services.cache import InMemoryViewCache, ViewCache
from wild_oasis.services.identity import IdentityService
from wild_oasis.services.invalidation import InvalidationService
from wild_oasis.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    oauth_client: OAuthClient
    view_cache: ViewCache
    identity_service: IdentityService
    profile_service: ProfileService
    booking_service: BookingService
    cabin_service: CabinService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    guest_repository = SupabaseGuestRepository(supabase_client)
    booking_repository = SupabaseBookingRepository(supabase_client)
    cabin_repository = SupabaseCabinRepository(supabase_client)
    view_cache = InMemoryViewCache()
    invalidation = InvalidationService(view_cache)
    oauth_client = HttpxGoogleOAuthClient.create(
        client_id=resolved_settings.google_client_id,
        client_secret=resolved_settings.google_client_secret,
        authorize_url=resolved_settings.google_authorize_url,
        token_url=resolved_settings.google_token_url,
        userinfo_url=resolved_settings.google_userinfo_url,
    )

    async def close_resources() -> None:
        await oauth_client.close()

    return AppContainer(
        settings=resolved_settings,
        oauth_client=oauth_client,
        view_cache=view_cache,
        identity_service=IdentityService(guest_repository),
        profile_service=ProfileService(guest_repository, invalidation),
        booking_service=BookingService(
            repository=booking_repository,
            guard=AuthorizationGuard(booking_repository),
            invalidation=invalidation,
        ),
        cabin_service=CabinService(cabin_repository, booking_repository),
        close_resources=close_resources,
    )
