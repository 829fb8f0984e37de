"""Pydantic models for form payloads."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdateForm(BaseModel):
    """Profile form payload."""

    model_config = ConfigDict(populate_by_name=True)

    national_id: str = Field(alias="nationalID")
    nationality: str


class BookingCreateForm(BaseModel):
    """Reservation form payload for a cabin."""

    model_config = ConfigDict(populate_by_name=True)

    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    cabin_price: float = Field(alias="cabinPrice", ge=0)
    num_guests: int | str = Field(alias="numGuests")
    observations: str | None = None


class BookingUpdateForm(BaseModel):
    """Edit-reservation form payload."""

    model_config = ConfigDict(populate_by_name=True)

    num_guests: int | str = Field(alias="numGuests")
    observations: str | None = None
