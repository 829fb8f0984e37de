"""Error taxonomy for booking and profile operations."""


class WildOasisError(Exception):
    """Base class for errors surfaced to the caller."""

    kind = "error"
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(WildOasisError):
    """No valid session is present."""

    kind = "unauthenticated"
    default_message = "You must be signed in to perform this action"


class SignInDenied(Unauthenticated):
    """The sign-in callback could not resolve a guest."""

    kind = "sign_in_denied"
    default_message = "Sign-in could not be completed"


class Forbidden(WildOasisError):
    """Authenticated, but not the owner of the resource."""

    kind = "forbidden"
    default_message = "You can only change your own bookings"


class NotFound(WildOasisError):
    """Requested cabin or booking does not exist."""

    kind = "not_found"
    default_message = "Not found"


class ValidationFailed(WildOasisError):
    """Malformed input rejected before any write."""

    kind = "validation_failed"
    default_message = "Invalid input"


class StoreOperationFailed(WildOasisError):
    """An underlying create, update or delete call failed."""

    kind = "store_operation_failed"
    default_message = "The operation could not be completed"


class BookingCreateFailed(StoreOperationFailed):
    default_message = "Booking could not be created"


class BookingUpdateFailed(StoreOperationFailed):
    default_message = "Booking could not be updated"


class BookingDeleteFailed(StoreOperationFailed):
    default_message = "Booking could not be deleted"


class GuestUpdateFailed(StoreOperationFailed):
    default_message = "Guest could not be updated"


class StoreError(Exception):
    """Raised by repositories when the data store rejects a call."""
