"""Reservation lifecycle status."""

from enum import Enum


class ReservationStatus(str, Enum):
    """Reservation status as written to the reservations file.

    Transitions are one way:
    - confirmed -> cancelled

    Only confirmed reservations block their room for their date range.
    """
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value
