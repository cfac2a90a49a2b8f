"""Pydantic models for reservations and their printable view."""

from datetime import date

from pydantic import BaseModel, Field

from deskapps.models.reservation_status import ReservationStatus


def count_nights(check_in: date, check_out: date) -> int:
    """Whole nights between check-in and the exclusive check-out date."""
    return (check_out - check_in).days


class Reservation(BaseModel):
    """A booking of one room over the half-open range [check_in, check_out).

    The guest name is the only credential used to cancel or view a
    reservation.
    """

    reservation_id: int = Field(ge=1)
    guest_name: str
    room_id: int
    check_in: date
    check_out: date = Field(description="Exclusive; the room is free again on this date")
    total_price: float = Field(ge=0)
    status: ReservationStatus = ReservationStatus.CONFIRMED

    @property
    def nights(self) -> int:
        return count_nights(self.check_in, self.check_out)

    @property
    def is_confirmed(self) -> bool:
        return self.status == ReservationStatus.CONFIRMED

    def overlaps(self, check_in: date, check_out: date) -> bool:
        """Check whether this stay shares at least one night with a range.

        Touching ranges do not overlap: a stay ending on a date leaves the
        room free for a stay starting that same date.

        Args:
            check_in: First night of the other range
            check_out: Exclusive end of the other range

        Returns:
            True if the two half-open ranges intersect
        """
        return not (self.check_out <= check_in or self.check_in >= check_out)

    def blocks(self, room_id: int, check_in: date, check_out: date) -> bool:
        """True if this reservation keeps room_id from being booked for the range."""
        return (
            self.room_id == room_id
            and self.is_confirmed
            and self.overlaps(check_in, check_out)
        )


class ReservationView(BaseModel):
    """A reservation joined with its room's category, ready for display."""

    reservation_id: int
    guest_name: str
    room_id: int
    room_category: str
    check_in: date
    check_out: date
    total_price: float
    status: ReservationStatus

    @classmethod
    def from_reservation(cls, reservation: Reservation, room_category: str) -> "ReservationView":
        return cls(
            reservation_id=reservation.reservation_id,
            guest_name=reservation.guest_name,
            room_id=reservation.room_id,
            room_category=room_category,
            check_in=reservation.check_in,
            check_out=reservation.check_out,
            total_price=reservation.total_price,
            status=reservation.status,
        )

    def render(self, currency_symbol: str = "$") -> str:
        return (
            f"Reservation ID: {self.reservation_id}\n"
            f"User: {self.guest_name}\n"
            f"Room: {self.room_category} (ID: {self.room_id})\n"
            f"Check-in: {self.check_in.isoformat()}\n"
            f"Check-out: {self.check_out.isoformat()}\n"
            f"Total Price: {currency_symbol}{self.total_price:.2f}\n"
            f"Status: {self.status.value}"
        )
